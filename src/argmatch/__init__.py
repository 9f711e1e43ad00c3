"""
Command line tokenizing and option-matching framework.

Raw command line -> tokens -> matchers -> remainder + errors -> Disposition.
Nothing in this package prints or exits except disposition.exit_with().
"""

from .arguments import ArgumentsBase
from .disposition import Disposition, DispositionKind, exit_with, render
from .exceptions import ArgumentsError, PrematureMatchTermination
from .extraction import (
    find_flag,
    find_parameter,
    find_parameter_each,
    find_parameters,
    is_flag,
    is_number,
)
from .parser import CommandLineParser, Matcher
from .tokenizer import join, quote, tokenize

__all__ = [
    # Tokenizer
    "tokenize",
    "quote",
    "join",
    # Extraction primitives
    "is_number",
    "is_flag",
    "find_flag",
    "find_parameter",
    "find_parameter_each",
    "find_parameters",
    # Pipeline and orchestrator
    "Matcher",
    "CommandLineParser",
    "ArgumentsBase",
    "Disposition",
    "DispositionKind",
    "render",
    "exit_with",
    # Exceptions
    "ArgumentsError",
    "PrematureMatchTermination",
]
