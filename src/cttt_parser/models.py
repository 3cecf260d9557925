"""
Record types produced by cttt-parser.

Every record is an immutable pydantic model created fresh per call. The
serialized shape (``model_dump(mode="json")``) is the one consumed by tooling:

    {"command": str | None, "args": [str], "debug": {"comment": str, "line": int, "col": int}}
"""

from pydantic import BaseModel, ConfigDict, Field


class CommentDebug(BaseModel):
    """
    Source location of a directive comment.

    Params:
        comment: The full matched line with trailing whitespace trimmed
        line: 1-based physical line number in the source
        col: 0-based character offset of the marker within ``comment``
    """

    model_config = ConfigDict(frozen=True)

    comment: str
    line: int = Field(ge=1)
    col: int = Field(ge=0)


class DirectiveComment(BaseModel):
    """
    One recognized directive comment.

    Params:
        command: Command identifier following "@cttt.", None when absent
        args: Trimmed, non-empty arguments from the parenthesized list
        debug: Raw text and position of the comment
    """

    model_config = ConfigDict(frozen=True)

    command: str | None = None
    args: tuple[str, ...] = ()
    debug: CommentDebug

    @property
    def raw_text(self) -> str:
        return self.debug.comment

    @property
    def line(self) -> int:
        return self.debug.line

    @property
    def col(self) -> int:
        return self.debug.col


class UnknownCommandRecord(BaseModel):
    """
    A directive comment whose command is outside the strict allow-list.

    ``col`` points at the command token rather than at the marker.
    """

    model_config = ConfigDict(frozen=True)

    comment: str
    command: str
    line: int = Field(ge=1)
    col: int = Field(ge=0)

    @property
    def raw_text(self) -> str:
        return self.comment

    def __str__(self) -> str:
        return f"unknown command '{self.command}' at line {self.line}, column {self.col}"
