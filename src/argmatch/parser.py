"""
Matcher pipeline.

Tokenizes a command line, strips the program name and threads the remaining
tokens through an ordered list of matchers.
"""

import logging
from typing import Callable, Iterable

from .tokenizer import tokenize

logger = logging.getLogger(__name__)

# A matcher consumes the tokens it recognizes from the list, in place
Matcher = Callable[[list[str]], None]


class CommandLineParser:
    """
    Applies matchers to a command line.

    Each matcher sees the same token list and removes what it understands;
    whatever is left after the last matcher is returned as the remainder.
    """

    def __init__(self, command_line: str):
        """
        Initialize the parser.

        Args:
            command_line: Raw command line, including the program name
        """
        self.command_line = command_line
        self.program_name: str | None = None

    @property
    def tokens(self) -> list[str]:
        """All tokens of the command line, program name included."""
        return tokenize(self.command_line)

    def parse(self, matchers: Iterable[Matcher]) -> list[str]:
        """
        Run the matchers over the command line.

        PrematureMatchTermination raised by a matcher is not caught here; the
        remaining matchers are skipped and the signal reaches the caller.

        Args:
            matchers: Matchers to apply, in order

        Returns:
            Remainder tokens that no matcher consumed
        """
        tokens = tokenize(self.command_line)

        self.program_name = tokens.pop(0) if tokens else None

        for matcher in matchers:
            logger.debug(
                "Applying %s to %d token(s)",
                getattr(matcher, "__name__", repr(matcher)),
                len(tokens),
            )
            matcher(tokens)

        return tokens
