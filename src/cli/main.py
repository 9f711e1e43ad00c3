"""
CLI main entry point for CsvCompare.

Thin wrapper around the comparison engine - no business logic here.
"""

import logging
import os
import sys

from argmatch import exit_with, join
from csvcompare import ComparisonError, CsvCompareArguments, CsvComparer

from .output import print_comparison, print_error

PROGRAM_NAME = "CsvCompare"

LOG_LEVEL_ENV = "CSVCOMPARE_LOG_LEVEL"

EXIT_CODE_DIFFERENT = 1
EXIT_CODE_UNREADABLE = 2


def configure_logging() -> None:
    """Configure logging from the environment (defaults to WARNING)."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Orchestrates the CLI workflow:
    1. Parse the command line (may print usage and exit)
    2. Compare the two files
    3. Display the result
    4. Exit non-zero if the files differ

    Args:
        argv: Full argument vector including the program name (defaults to sys.argv)
    """
    configure_logging()

    arguments = CsvCompareArguments()
    command_line = None if argv is None else join(argv)
    disposition = arguments.parse(command_line, PROGRAM_NAME)

    # Prints usage and raises SystemExit for --help and bad command lines
    exit_with(disposition)

    comparer = CsvComparer(
        skip_lines=arguments.skip_line_count,
        trim_whitespace=arguments.trim_whitespace,
    )

    try:
        result = comparer.compare(arguments.file_name_left, arguments.file_name_right)
    except ComparisonError as e:
        print_error(str(e))
        sys.exit(EXIT_CODE_UNREADABLE)

    print_comparison(result)

    if not result.matched:
        sys.exit(EXIT_CODE_DIFFERENT)


if __name__ == "__main__":
    main()
