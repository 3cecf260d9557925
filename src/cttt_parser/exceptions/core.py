"""
Exception classes for cttt-parser.

This module defines the error taxonomy for directive comment extraction:
fatal grammar failures and strict-mode command violations.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cttt_parser.models import UnknownCommandRecord


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in the scanned source so the message can
    point at the offending character.

    Params:
        line: 1-based line number in the source
        col: 0-based character offset within the line
        source_line: The text of the offending line
    """

    line: int
    col: int
    source_line: str | None = None

    def format_location(self) -> str:
        """
        Format location information as an indented block.

        Returns:
            Location line, followed by the source text and a caret under the
            offending column when the source text is known
        """
        lines = [f"  at line {self.line}, column {self.col}"]

        if self.source_line is not None:
            text = self.source_line.rstrip()
            lines.append(f"  | {text}")
            lines.append(f"  | {' ' * self.col}^")

        return "\n".join(lines)


class CtttParserError(Exception):
    """Base exception for all cttt-parser errors."""

    pass


class GrammarError(CtttParserError):
    """Raised when a directive comment is syntactically malformed."""

    def __init__(self, line: int, col: int, reason: str, source_line: str | None = None):
        """
        Initialize the exception.

        Params:
            line: 1-based line number of the malformed directive
            col: 0-based column of the offending character
            reason: Why the directive could not be recognized
            source_line: Text of the offending line, used for the caret display
        """
        self.line = line
        self.col = col
        self.reason = reason
        self.context = ErrorContext(line=line, col=col, source_line=source_line)
        super().__init__(f"{reason}\n{self.context.format_location()}")


class UnknownCommandError(CtttParserError):
    """Raised by strict parsing when commands fall outside the allow-list."""

    def __init__(self, errors: list["UnknownCommandRecord"], allowed: list[str]):
        """
        Initialize the exception.

        Params:
            errors: Every offending command, in source order
            allowed: The commands that were permitted
        """
        self.errors = errors
        self.allowed = allowed

        permitted = ", ".join(allowed) if allowed else "(none)"
        details = "\n".join(f"  {error}: {error.comment}" for error in errors)
        super().__init__(
            f"Found {len(errors)} unknown command(s). Allowed commands are: {permitted}\n{details}"
        )
