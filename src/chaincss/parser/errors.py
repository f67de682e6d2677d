"""Errors raised while parsing script blocks."""

from __future__ import annotations


class ParseError(Exception):
    """A script block is not valid builder-expression source.

    ``line`` and ``column`` are 1-based and relative to the script text, not
    the enclosing document. Unknown positions (including lark's ``-1`` for
    unexpected end of input) are stored as ``None``.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line if line is not None and line > 0 else None
        self.column = column if column is not None and column > 0 else None
        super().__init__(message)

    @property
    def position(self) -> str | None:
        if self.line is None:
            return None
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"
