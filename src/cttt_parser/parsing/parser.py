"""
Parser entry point for directive comments.

Combines the grammar engine and the extractor into a single pure transform
from source text to ordered DirectiveComment records.
"""

from cttt_parser.models import DirectiveComment
from cttt_parser.parsing.extractor import extract
from cttt_parser.parsing.grammar import DirectiveGrammar


def parse(source: str) -> list[DirectiveComment]:
    """
    Parse all directive comments in the source.

    Params:
        source: Arbitrary source text in any language

    Returns:
        One record per line containing the marker, in source order

    Raises:
        GrammarError: If any directive is malformed; nothing is returned then
    """
    grammar = DirectiveGrammar()
    return extract(grammar.recognize(source))
