"""
Outcome of a command line parse and the process boundary that acts on it.

Parsing never prints or exits by itself. It produces a Disposition which the
program hands to exit_with() once, at its outermost level.
"""

import sys
from dataclasses import dataclass
from enum import Enum

EXIT_CODE_SUCCESS = 0
EXIT_CODE_BAD_COMMAND_LINE = -1


class DispositionKind(Enum):
    """Terminal states of a parse."""

    CONTINUE = "continue"
    EARLY_EXIT = "early_exit"
    FAILURE = "failure"


@dataclass(frozen=True)
class Disposition:
    """
    What the program should do after parsing its command line.

    CONTINUE carries the remainder tokens, EARLY_EXIT an optional message and
    FAILURE the accumulated errors.
    """

    kind: DispositionKind
    program_name: str
    usage: str
    remainder: tuple[str, ...] = ()
    message: str = ""
    errors: tuple[str, ...] = ()
    exit_code: int = EXIT_CODE_SUCCESS

    @property
    def should_exit(self) -> bool:
        """Check if the program has to stop instead of doing its work."""
        return self.kind is not DispositionKind.CONTINUE


def render(disposition: Disposition) -> str:
    """
    Format the user-facing text for a disposition.

    Args:
        disposition: Parse outcome

    Returns:
        Text to print (empty for CONTINUE)
    """
    usage_line = f"{disposition.program_name} {disposition.usage}"

    if disposition.kind is DispositionKind.FAILURE:
        lines = ["Command syntax-error:"]
        lines.extend(f"    {error}" for error in disposition.errors)
        lines.append("Usage:")
        lines.append(usage_line)
        return "\n".join(lines)

    if disposition.kind is DispositionKind.EARLY_EXIT:
        if disposition.message:
            return f"{disposition.message}\n{usage_line}"
        return usage_line

    return ""


def exit_with(disposition: Disposition) -> None:
    """
    Print the disposition text and end the program unless parsing succeeded.

    Args:
        disposition: Parse outcome

    Raises:
        SystemExit: For EARLY_EXIT and FAILURE, with the disposition's exit code
    """
    if not disposition.should_exit:
        return

    print(render(disposition), file=sys.stdout)
    sys.exit(disposition.exit_code)
