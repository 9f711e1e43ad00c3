"""
Command line options for the CSV comparison tool.
"""

from pathlib import Path

from argmatch import ArgumentsBase, PrematureMatchTermination

EXPECTED_ARGUMENT_COUNT = 2

SKIP_LINE_FLAG = "-s"
TRIM_WHITESPACE_FLAG = "-t"
HELP_FLAGS = ("-?", "-h", "--help")


class CsvCompareArguments(ArgumentsBase):
    """
    Options: -s <count>, -t, -?/-h/--help and two file names.

    Help is only shown after every other matcher ran, so unrecognized
    arguments and missing files are still reported instead of the help text.
    """

    def __init__(self) -> None:
        super().__init__()
        self.reset()

        self.matchers = [
            self.skip_line_matcher,
            self.trim_line_matcher,
            self.help_matcher,
            self.bad_argument_matcher,
            self.finish,
            self.show_help_matcher,
        ]

    def reset(self) -> None:
        super().reset()
        self.skip_line_count = 1
        self.trim_whitespace = False
        self.file_name_left: str | None = None
        self.file_name_right: str | None = None
        self.show_help = False

    def get_help(self) -> str:
        return (
            f"[{SKIP_LINE_FLAG} <skip-line-count>] [{TRIM_WHITESPACE_FLAG}] [-?|-h|--help] "
            "<left-file-name> <right-file-name>\n"
            f"    {SKIP_LINE_FLAG} <line-count>   :  Skip the specified number of initial lines "
            "before comparison (defaults to 1)\n"
            f"    {TRIM_WHITESPACE_FLAG}                :  trim whitespace\n"
            "    -? | -h | --help  :  show this help\n"
        )

    def skip_line_matcher(self, tokens: list[str]) -> None:
        self.find_parameter_each(SKIP_LINE_FLAG, tokens, self._set_skip_line_count)

    def _set_skip_line_count(self, text: str) -> None:
        # Unsigned integers only; int() alone would accept "-3" and " 3"
        if text.isascii() and text.isdigit():
            self.skip_line_count = int(text)
        else:
            self.errors.append(f"SkipLineCount of {text} is not a valid unsigned integer.")

    def trim_line_matcher(self, tokens: list[str]) -> None:
        self.find_flag(TRIM_WHITESPACE_FLAG, tokens, self._enable_trim_whitespace)

    def _enable_trim_whitespace(self) -> None:
        self.trim_whitespace = True

    def help_matcher(self, tokens: list[str]) -> None:
        for flag in HELP_FLAGS:
            self.find_flag(flag, tokens, self._request_help)

    def _request_help(self) -> None:
        self.show_help = True

    def finish(self, tokens: list[str]) -> None:
        """Require exactly two existing files. Without files, --help alone is fine."""
        if len(tokens) != EXPECTED_ARGUMENT_COUNT:
            if not (self.show_help and not tokens):
                self.errors.append(
                    "Incorrect number of filenames specified for comparison; "
                    "there should be exactly two."
                )
            return

        self.file_name_left, self.file_name_right = tokens

        if not Path(self.file_name_left).is_file():
            self.errors.append(
                f"Left file '{self.file_name_left}' does not exist at the specified location."
            )

        if not Path(self.file_name_right).is_file():
            self.errors.append(
                f"Right file '{self.file_name_right}' does not exist at the specified location."
            )

    def show_help_matcher(self, tokens: list[str]) -> None:
        if self.show_help:
            raise PrematureMatchTermination("  -?  -h  --help : show this help.")
