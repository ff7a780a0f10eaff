"""Error hierarchy for objkit."""
from __future__ import annotations


class ObjkitError(Exception):
    """Base error for all objkit errors."""


class ParseError(ObjkitError):
    """Raised when JSON or selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class DuplicateSelectorPartError(ObjkitError):
    """Raised when a unique part is added twice to one simple selector."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(self.MESSAGE)
