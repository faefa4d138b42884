"""Cursor value types, translation, and validation."""

from .errors import (
    CursorMismatch,
    InvalidLineCursor,
    InvalidOffsetOrder,
    InvalidWordCursor,
    OutOfBounds,
    WordCursorError,
)
from .state import (
    CODE_CONTENT,
    PREFORMATTED,
    Affiliation,
    BlockRef,
    LineCursor,
    Position,
    WordCursor,
)
from .translate import offset_to_word_cursor
from .validation import ensure_word_cursor, validate_line_cursor

__all__ = [
    "Affiliation",
    "BlockRef",
    "CODE_CONTENT",
    "CursorMismatch",
    "InvalidLineCursor",
    "InvalidOffsetOrder",
    "InvalidWordCursor",
    "LineCursor",
    "OutOfBounds",
    "PREFORMATTED",
    "Position",
    "WordCursor",
    "WordCursorError",
    "ensure_word_cursor",
    "offset_to_word_cursor",
    "validate_line_cursor",
]
