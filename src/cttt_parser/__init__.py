"""
cttt-parser - Extract directive comments from source text in any language

A directive comment is any line containing the ``@cttt`` marker, optionally
followed by a dotted command and a parenthesized argument list:

    // @cttt.change(./README.md, ./docs/usage.md)
"""

from importlib.metadata import version

from cttt_parser.core.types import NAMESPACE
from cttt_parser.exceptions import CtttParserError, GrammarError, UnknownCommandError
from cttt_parser.models import CommentDebug, DirectiveComment, UnknownCommandRecord
from cttt_parser.parsing.parser import parse
from cttt_parser.validation.strict import parse_strict

__version__ = version("cttt-parser")

__all__ = [
    "__version__",
    "NAMESPACE",
    "CommentDebug",
    "DirectiveComment",
    "UnknownCommandRecord",
    "CtttParserError",
    "GrammarError",
    "UnknownCommandError",
    "parse",
    "parse_strict",
]
