"""
Data models for CSV comparison results.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing two CSV files line by line.

    Comparison stops at the first difference, so at most one pair of
    mismatching lines is reported.
    """

    matched: bool
    message: str
    line_number: int  # Last line read from the left file
    skipped_lines: int
    left_line: str | None = None  # Only set for a field mismatch
    right_line: str | None = None

    @property
    def skip_description(self) -> str | None:
        """Human-readable description of the skipped header lines."""
        if self.skipped_lines == 0:
            return None
        if self.skipped_lines == 1:
            return "first line"
        return f"{self.skipped_lines} lines"
