"""
Grammar engine for directive comments.

This module scans raw text line by line and recognizes directive comments:
lines containing the ``@cttt`` marker (case-insensitively), optionally followed
by a dotted command and a parenthesized argument list. Comment delimiters of
the host language are never interpreted; each line is an opaque carrier for
the marker.

Grammar of the part following the marker:

    directive := MARKER [ "." command [ ws* "(" args ")" ] ] trailing
    trailing  := any text; after a command it must start with whitespace or "("
    command   := (letter | digit | "_" | "-")+
    args      := any text with balanced parentheses
"""

import logging
import re
from dataclasses import dataclass

from cttt_parser.core.types import COMMAND_CHARS, NAMESPACE
from cttt_parser.exceptions.core import GrammarError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawMatch:
    """
    Raw components of one recognized directive comment.

    Params:
        line: 1-based line number in the source
        text: The full physical line without its line terminator
        marker_col: 0-based offset of the marker's first character
        command: Command identifier, None when the marker has no dotted command
        raw_args: Verbatim text between the outer parentheses, None when absent
    """

    line: int
    text: str
    marker_col: int
    command: str | None = None
    raw_args: str | None = None


class DirectiveGrammar:
    """Recognizer for directive comments in arbitrary source text."""

    MARKER = NAMESPACE

    MARKER_PATTERN = re.compile(re.escape(NAMESPACE), re.IGNORECASE)

    COMMAND_PATTERN = re.compile(rf"[{COMMAND_CHARS}]+")

    # Whitespace allowed between the command and its argument list
    GAP_CHARS = " \t"

    def recognize(self, source: str) -> list[RawMatch]:
        """
        Recognize every directive comment in the source.

        Params:
            source: Arbitrary text, split into lines on "\\n"

        Returns:
            One RawMatch per line containing the marker, in source order

        Raises:
            GrammarError: If any directive is malformed; no partial result
        """
        matches = []

        for line_number, text in enumerate(source.split("\n"), start=1):
            marker = self.MARKER_PATTERN.search(text)
            if marker is None:
                continue
            matches.append(self._recognize_line(line_number, text, marker))

        logger.debug("Recognized %d directive comment(s)", len(matches))
        return matches

    def _recognize_line(self, line_number: int, text: str, marker: re.Match) -> RawMatch:
        """Recognize the directive starting at the marker occurrence on one line."""
        pos = marker.end()

        if not text.startswith(".", pos):
            return RawMatch(line=line_number, text=text, marker_col=marker.start())

        command_match = self.COMMAND_PATTERN.match(text, pos + 1)
        if command_match is None:
            raise GrammarError(
                line_number,
                pos + 1,
                f"Expected command name after '{self.MARKER}.'",
                source_line=text,
            )

        command = command_match.group()
        pos = command_match.end()

        # A command ends at whitespace, "(" or the end of the line
        if pos < len(text) and not text[pos].isspace() and text[pos] != "(":
            raise GrammarError(
                line_number,
                pos,
                f"Unexpected character '{text[pos]}' after command name '{command}'",
                source_line=text,
            )

        while pos < len(text) and text[pos] in self.GAP_CHARS:
            pos += 1

        raw_args = None
        if text.startswith("(", pos):
            raw_args = self._consume_arguments(line_number, text, pos)

        return RawMatch(
            line=line_number,
            text=text,
            marker_col=marker.start(),
            command=command,
            raw_args=raw_args,
        )

    def _consume_arguments(self, line_number: int, text: str, open_pos: int) -> str:
        """
        Capture the content of the parenthesized group opening at ``open_pos``.

        Nested parentheses are kept verbatim; the group ends at the ``)``
        matching the opening one. Text after that ``)`` is trailing context
        of the line, like the ``*)`` closing an ML-style comment, so a
        further ``)`` there is not an error.

        Raises:
            GrammarError: If the line ends before the group is closed
        """
        depth = 0
        for index in range(open_pos, len(text)):
            char = text[index]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    return text[open_pos + 1 : index]

        raise GrammarError(
            line_number,
            open_pos,
            "Unbalanced parentheses: argument list is never closed",
            source_line=text,
        )


def recognize(source: str) -> list[RawMatch]:
    """
    Convenience function to recognize directive comments.

    Params:
        source: Arbitrary text to scan

    Returns:
        Raw matches in source order

    Raises:
        GrammarError: If any directive is malformed
    """
    grammar = DirectiveGrammar()
    return grammar.recognize(source)
