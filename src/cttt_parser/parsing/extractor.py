"""
Extraction of structured records from grammar output.

This module turns raw grammar matches into DirectiveComment records carrying
the trimmed line text and its position in the source.
"""

import logging
from collections.abc import Iterable

from cttt_parser.models import CommentDebug, DirectiveComment
from cttt_parser.parsing.arguments import split_arguments
from cttt_parser.parsing.grammar import RawMatch

logger = logging.getLogger(__name__)


def build_comment(match: RawMatch) -> DirectiveComment:
    """
    Build the record for a single raw match.

    Params:
        match: Raw grammar match

    Returns:
        DirectiveComment whose column is the offset of the case-insensitive
        marker match within the trimmed line
    """
    raw_text = match.text.rstrip()

    return DirectiveComment(
        command=match.command,
        args=tuple(split_arguments(match.raw_args)),
        debug=CommentDebug(comment=raw_text, line=match.line, col=match.marker_col),
    )


def extract(matches: Iterable[RawMatch]) -> list[DirectiveComment]:
    """
    Convert raw matches into records, one per match, preserving order.

    Params:
        matches: Grammar output in source order

    Returns:
        List of DirectiveComment records
    """
    comments = [build_comment(match) for match in matches]
    logger.debug("Extracted %d directive comment record(s)", len(comments))
    return comments
