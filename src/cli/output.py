"""
Terminal output formatter for CLI.

Handles all display logic - no business logic, just presentation.
"""

from rich.console import Console
from rich.text import Text

from csvcompare.models import ComparisonResult


def print_comparison(result: ComparisonResult, console: Console | None = None) -> None:
    """
    Print a comparison result to the terminal.

    The verdict is red when the files differ and green when they match.

    Args:
        result: ComparisonResult to display
        console: Console to print to (defaults to stdout)
    """
    console = console or Console(highlight=False)

    console.print()
    if result.skip_description:
        console.print(f"Skipped {result.skip_description}")

    console.print(Text(result.message, style="green" if result.matched else "red"))

    if result.left_line is not None:
        console.print(Text(f"Left Line:\n{result.left_line}"))
    if result.right_line is not None:
        console.print(Text(f"Right Line:\n{result.right_line}"))


def print_error(message: str, console: Console | None = None) -> None:
    """
    Print an error message in red to stderr.

    Args:
        message: Error text
        console: Console to print to (defaults to stderr)
    """
    console = console or Console(stderr=True, highlight=False)
    console.print(Text(f"Error: {message}", style="red"))
