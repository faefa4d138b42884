"""Precondition failures raised before any text is modified."""

from __future__ import annotations

from typing import Optional


class WordCursorError(RuntimeError):
    """Raised when a caller hands the engine a malformed cursor."""

    def __init__(self, message: str, *, cursor: Optional[object] = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class InvalidWordCursor(WordCursorError):
    """The word cursor spans more than one line."""


class InvalidLineCursor(WordCursorError):
    """The line cursor spans more than one line or has no owning block."""


class InvalidOffsetOrder(WordCursorError):
    """The word cursor starts after it ends."""


class CursorMismatch(WordCursorError):
    """The word cursor is not anchored to the supplied line."""


class OutOfBounds(WordCursorError):
    """The word cursor ends past the end of the block text."""


__all__ = [
    "WordCursorError",
    "InvalidWordCursor",
    "InvalidLineCursor",
    "InvalidOffsetOrder",
    "CursorMismatch",
    "OutOfBounds",
]
