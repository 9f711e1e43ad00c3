"""
Exceptions raised by the option-matching framework.
"""


class ArgumentsError(Exception):
    """Base exception for command-line framework errors."""

    pass


class PrematureMatchTermination(ArgumentsError):
    """
    Raised by a matcher to stop the pipeline early.

    This is not an error: unless errors were already recorded, the command
    line is considered valid and the program ends successfully after showing
    the message and the usage text (e.g. for --help).
    """

    def __init__(self, message: str | None = None):
        super().__init__(message or "")
        self.message = message or ""
