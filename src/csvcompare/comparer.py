"""
Line-by-line CSV comparison.

Records are compared field by field after an optional number of leading
lines has been skipped. Empty fields and the text NULL are treated as
equivalent.
"""

import csv
import logging
from pathlib import Path
from typing import Iterator

from .models import ComparisonResult

logger = logging.getLogger(__name__)


class ComparisonError(Exception):
    """Raised when an input file cannot be opened or decoded."""

    pass


class MalformedRecordError(Exception):
    """Raised by a record reader when a line cannot be parsed as CSV."""

    pass


class CsvComparer:
    """
    Compares two CSV files and reports the first difference.
    """

    def __init__(
        self,
        skip_lines: int = 1,
        trim_whitespace: bool = False,
        delimiter: str = ",",
        null_text: str = "NULL",
    ) -> None:
        """
        Initialize the comparer.

        Args:
            skip_lines: Number of initial lines read but not compared (headers)
            trim_whitespace: Strip leading and trailing whitespace of each field
            delimiter: Field delimiter
            null_text: Text considered equivalent to an empty field (case-insensitive)
        """
        self.skip_lines = skip_lines
        self.trim_whitespace = trim_whitespace
        self.delimiter = delimiter
        self.null_text = null_text.upper()

    def compare(self, left_path: str | Path, right_path: str | Path) -> ComparisonResult:
        """
        Compare two CSV files.

        Args:
            left_path: Path to the left file
            right_path: Path to the right file

        Returns:
            ComparisonResult describing the first difference, or a match

        Raises:
            ComparisonError: If a file cannot be read
        """
        try:
            with open(left_path, newline="", encoding="utf-8") as left_file, open(
                right_path, newline="", encoding="utf-8"
            ) as right_file:
                return self._compare_records(
                    self._read_records(left_file), self._read_records(right_file)
                )
        except (OSError, UnicodeDecodeError) as e:
            raise ComparisonError(f"Failed to read input: {str(e)}")

    def fields_equivalent(self, left: str, right: str) -> bool:
        """
        Check if two field values count as equal.

        Args:
            left: Field from the left file
            right: Field from the right file

        Returns:
            True if equal, both empty, or one empty and the other NULL
        """
        if left == right:
            return True
        if not left and right.upper() == self.null_text:
            return True
        if not right and left.upper() == self.null_text:
            return True
        return False

    def _read_records(self, text_file) -> Iterator[list[str]]:
        """
        Yield parsed records, skipping blank lines.

        Raises:
            MalformedRecordError: On a line that is not valid CSV
        """
        reader = csv.reader(text_file, delimiter=self.delimiter, strict=True)
        while True:
            try:
                fields = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                raise MalformedRecordError(str(e))

            if not fields:
                continue

            if self.trim_whitespace:
                fields = [value.strip() for value in fields]
            yield fields

    def _next_record(
        self, records: Iterator[list[str]]
    ) -> tuple[list[str] | None, bool]:
        """
        Read the next record.

        Returns:
            Tuple of (fields, False), (None, True) for a malformed line, or
            (None, False) at end of data
        """
        try:
            return next(records, None), False
        except MalformedRecordError:
            return None, True

    def _compare_records(
        self, left_records: Iterator[list[str]], right_records: Iterator[list[str]]
    ) -> ComparisonResult:
        line_number = 0

        while True:
            left_fields, left_malformed = self._next_record(left_records)
            if left_fields is None and not left_malformed:
                break

            line_number += 1

            # The right file running out is reported before a malformed left line
            right_fields, right_malformed = self._next_record(right_records)
            if right_fields is None and not right_malformed:
                return self._mismatch(
                    f"Right file is shorter - out of data at line {line_number}", line_number
                )

            if left_malformed:
                return self._mismatch(f"Left file malformed at line {line_number}", line_number)
            if right_malformed:
                return self._mismatch(f"Right file malformed at line {line_number}", line_number)

            if line_number <= self.skip_lines:
                continue

            if len(left_fields) != len(right_fields):
                return self._mismatch(f"Field counts differ at line {line_number}", line_number)

            for index, (left, right) in enumerate(zip(left_fields, right_fields)):
                if not self.fields_equivalent(left, right):
                    logger.debug("Field %d differs: %r != %r", index + 1, left, right)
                    return self._mismatch(
                        f"Files differ at line {line_number}, field {index + 1}",
                        line_number,
                        left_line=", ".join(left_fields),
                        right_line=", ".join(right_fields),
                    )

        right_fields, right_malformed = self._next_record(right_records)
        if right_fields is not None or right_malformed:
            return self._mismatch(
                f"Left file is shorter - out of data at line {line_number}", line_number
            )

        logger.debug("Compared %d line(s), no differences", line_number)
        return ComparisonResult(
            matched=True,
            message=f"Read {line_number} matching lines; files are the same",
            line_number=line_number,
            skipped_lines=self.skip_lines,
        )

    def _mismatch(
        self,
        message: str,
        line_number: int,
        left_line: str | None = None,
        right_line: str | None = None,
    ) -> ComparisonResult:
        return ComparisonResult(
            matched=False,
            message=message,
            line_number=line_number,
            skipped_lines=self.skip_lines,
            left_line=left_line,
            right_line=right_line,
        )
