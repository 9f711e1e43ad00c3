"""
Arguments orchestrator.

Subclasses declare their options as matcher methods, list them in
self.matchers and describe the usage in get_help(). parse() runs the pipeline
and reduces the outcome to a Disposition.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable

from . import extraction
from .disposition import (
    EXIT_CODE_BAD_COMMAND_LINE,
    EXIT_CODE_SUCCESS,
    Disposition,
    DispositionKind,
)
from .exceptions import PrematureMatchTermination
from .parser import CommandLineParser, Matcher
from .tokenizer import join

logger = logging.getLogger(__name__)

UNSPECIFIED_PROGRAM_NAME = "UNSPECIFIED-PROGRAM-NAME"


class ArgumentsBase(ABC):
    """
    Base class for a program's command line options.

    Matchers record problems in self.errors instead of failing fast, so a
    single parse reports every mistake at once. A matcher may raise
    PrematureMatchTermination to stop early (e.g. for --help); recorded
    errors still take priority over it.
    """

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.matchers: list[Matcher] = []
        self.bad_command_line_exit_code = EXIT_CODE_BAD_COMMAND_LINE

    @property
    def has_errors(self) -> bool:
        """Check if any error was recorded."""
        return len(self.errors) > 0

    def reset(self) -> None:
        """
        Clear the state captured by a previous parse.

        Called at the start of every parse(). Subclasses restore their option
        defaults here and call super().reset().
        """
        self.errors = []

    @abstractmethod
    def get_help(self) -> str:
        """Usage text, printed after the program name."""
        pass

    def parse(
        self, command_line: str | None = None, program_name: str | None = None
    ) -> Disposition:
        """
        Parse a command line with the configured matchers.

        Args:
            command_line: Raw command line including the program name. When
                omitted it is rebuilt from sys.argv.
            program_name: Name used in usage messages

        Returns:
            Disposition describing whether to continue, exit early or fail
        """
        if command_line is None:
            command_line = join(sys.argv)
        program_name = program_name or UNSPECIFIED_PROGRAM_NAME

        self.reset()
        parser = CommandLineParser(command_line)

        try:
            remainder = parser.parse(self.matchers)
        except PrematureMatchTermination as e:
            if self.has_errors:
                logger.debug("Termination requested, but %d error(s) recorded", len(self.errors))
                return self._failure(program_name)

            return Disposition(
                kind=DispositionKind.EARLY_EXIT,
                program_name=program_name,
                usage=self.get_help(),
                message=e.message,
                exit_code=EXIT_CODE_SUCCESS,
            )

        if self.has_errors:
            return self._failure(program_name)

        return Disposition(
            kind=DispositionKind.CONTINUE,
            program_name=program_name,
            usage=self.get_help(),
            remainder=tuple(remainder),
        )

    def _failure(self, program_name: str) -> Disposition:
        return Disposition(
            kind=DispositionKind.FAILURE,
            program_name=program_name,
            usage=self.get_help(),
            errors=tuple(self.errors),
            exit_code=self.bad_command_line_exit_code,
        )

    def bad_argument_matcher(self, tokens: list[str]) -> None:
        """
        Report leftover flags as unrecognized.

        Everything up to and including the last flag-looking token is
        reported and removed; tokens after it are left as positional
        arguments.
        """
        found_at = -1
        for index, token in enumerate(tokens):
            if extraction.is_flag(token):
                found_at = index

        for token in tokens[: found_at + 1]:
            self.errors.append(f"Unrecognized argument: '{token}'")

        del tokens[: found_at + 1]

    def finish(self, tokens: list[str]) -> None:
        """Validate the remainder. Override to check positional arguments."""
        pass

    def find_flag(
        self, flag: str, tokens: list[str], action: Callable[[], None] | None = None
    ) -> bool:
        """Remove every occurrence of flag; see extraction.find_flag()."""
        return extraction.find_flag(flag, tokens, action)

    def find_parameter(self, flag: str, tokens: list[str]) -> tuple[bool, str | None]:
        """Extract the value after flag; see extraction.find_parameter()."""
        return extraction.find_parameter(flag, tokens)

    def find_parameter_each(
        self, flag: str, tokens: list[str], action: Callable[[str], None]
    ) -> bool:
        """Extract every value after flag; see extraction.find_parameter_each()."""
        return extraction.find_parameter_each(flag, tokens, action)

    def find_parameters(
        self, flag: str, required_count: int, tokens: list[str]
    ) -> list[str] | None:
        """Extract required_count values after flag; see extraction.find_parameters()."""
        return extraction.find_parameters(flag, required_count, tokens)
