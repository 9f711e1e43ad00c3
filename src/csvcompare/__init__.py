"""
CSV comparison engine.

Compares two CSV files line by line, treating empty fields and NULL as
equivalent. Command line handling is built on the argmatch framework.
"""

from .arguments import CsvCompareArguments
from .comparer import ComparisonError, CsvComparer
from .models import ComparisonResult

__all__ = [
    # Models
    "ComparisonResult",
    # Engine
    "CsvComparer",
    "ComparisonError",
    # Command line
    "CsvCompareArguments",
]
