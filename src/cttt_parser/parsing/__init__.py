"""
cttt-parser parsing components.

This package provides the grammar engine, argument splitter and extractor
that turn source text into directive comment records.
"""

from cttt_parser.parsing.arguments import split_arguments
from cttt_parser.parsing.extractor import build_comment, extract
from cttt_parser.parsing.grammar import DirectiveGrammar, RawMatch, recognize
from cttt_parser.parsing.parser import parse

__all__ = [
    "DirectiveGrammar",
    "RawMatch",
    "build_comment",
    "extract",
    "parse",
    "recognize",
    "split_arguments",
]
