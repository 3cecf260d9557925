"""
cttt-parser exception classes.

This package provides all exception types raised by cttt-parser so callers
can catch them from a single place.
"""

from cttt_parser.exceptions.core import (
    CtttParserError,
    ErrorContext,
    GrammarError,
    UnknownCommandError,
)

__all__ = [
    "CtttParserError",
    "ErrorContext",
    "GrammarError",
    "UnknownCommandError",
]
