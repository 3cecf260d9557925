"""
Strict-mode validation of directive comment commands.

This module checks extracted directive comments against a caller-supplied
allow-list of command names and reports every comment whose command is not
permitted.
"""

import logging

from cttt_parser.core.types import NAMESPACE, CommandSet
from cttt_parser.exceptions.core import UnknownCommandError
from cttt_parser.models import DirectiveComment, UnknownCommandRecord
from cttt_parser.parsing.parser import parse

logger = logging.getLogger(__name__)


def find_unknown_commands(
    comments: list[DirectiveComment], allowed: CommandSet
) -> list[UnknownCommandRecord]:
    """
    Collect every comment whose command is outside the allow-list.

    Comments without a command are never reported. Membership is exact and
    case-sensitive.

    Params:
        comments: Extracted comments in source order
        allowed: Permitted command names

    Returns:
        Violations in source order, empty when all commands are permitted
    """
    permitted = set(allowed)
    unknown = []

    for comment in comments:
        if comment.command is None or comment.command in permitted:
            continue

        unknown.append(
            UnknownCommandRecord(
                comment=comment.raw_text,
                command=comment.command,
                line=comment.line,
                col=comment.col + len(NAMESPACE) + len("."),
            )
        )

    return unknown


def validate_commands(
    comments: list[DirectiveComment], allowed: CommandSet
) -> list[DirectiveComment]:
    """
    Validate comments against the allow-list.

    Params:
        comments: Extracted comments in source order
        allowed: Permitted command names

    Returns:
        The very same ``comments`` list when every command is permitted

    Raises:
        UnknownCommandError: Carrying all violations, after inspecting every comment
    """
    allowed = sorted(set(allowed))
    unknown = find_unknown_commands(comments, allowed)

    if unknown:
        logger.debug("Rejected %d unknown command(s)", len(unknown))
        raise UnknownCommandError(unknown, allowed)

    return comments


def parse_strict(source: str, allowed_commands: CommandSet) -> list[DirectiveComment]:
    """
    Parse directive comments and reject commands outside the allow-list.

    Params:
        source: Arbitrary source text in any language
        allowed_commands: Permitted command names

    Returns:
        The records ``parse`` would return for the same source

    Raises:
        GrammarError: If any directive is malformed
        UnknownCommandError: If any command is not in ``allowed_commands``
    """
    return validate_commands(parse(source), allowed_commands)
