"""Eligibility and precondition checks for word correction."""

from __future__ import annotations

from typing import Optional

from .errors import (
    CursorMismatch,
    InvalidLineCursor,
    InvalidOffsetOrder,
    InvalidWordCursor,
    OutOfBounds,
)
from .state import CODE_CONTENT, PREFORMATTED, BlockRef, LineCursor, WordCursor


def validate_line_cursor(selection: Optional[LineCursor]) -> bool:
    """Whether ``selection`` may be used for spelling correction.

    ``False`` means "skip quietly"; it is never an error.
    """

    if selection is None or selection.start is None or selection.end is None:
        return False
    start, end = selection.start, selection.end
    if not isinstance(start.offset, int) or not isinstance(end.offset, int):
        return False

    if start.key != end.key or start.block is None:
        return False

    # Code blocks and HTML/math/diagram editors
    block = start.block
    if block.function_type == CODE_CONTENT and block.lang is not None:
        return False

    # Language identifiers and other pre element text
    affiliation = selection.affiliation
    if len(affiliation) == 1 and affiliation[0].type == PREFORMATTED:
        return False
    return True


def ensure_word_cursor(
    line: LineCursor, word_cursor: WordCursor, block: Optional[BlockRef]
) -> None:
    """Raise unless ``word_cursor`` can be spliced into ``block`` on ``line``."""

    word_start, word_end = word_cursor.start, word_cursor.end
    if word_start.key != word_end.key:
        raise InvalidWordCursor(
            f"Expected a single line word cursor but got {word_start.key!r} and {word_end.key!r}.",
            cursor=word_cursor,
        )
    if line.start.key != line.end.key:
        raise InvalidLineCursor(
            f"Expected a single line cursor but got {line.start.key!r} and {line.end.key!r}.",
            cursor=line,
        )
    if word_start.offset > word_end.offset:
        raise InvalidOffsetOrder(
            f"Invalid word cursor offset: {word_start.offset} is after {word_end.offset}.",
            cursor=word_cursor,
        )
    if line.start.key != word_end.key:
        raise CursorMismatch(
            f"Expected the same line but got {line.start.key!r} and {word_end.key!r}.",
            cursor=word_cursor,
        )
    if block is None:
        raise InvalidLineCursor(
            f"Line {line.start.key!r} has no owning block.", cursor=line
        )
    if len(block.text) < word_end.offset:
        raise OutOfBounds(
            f"Word cursor ends at {word_end.offset} but the line has {len(block.text)} characters.",
            cursor=word_cursor,
        )
    if word_start.offset < 0:
        raise OutOfBounds(
            f"Word cursor starts at negative offset {word_start.offset}.",
            cursor=word_cursor,
        )


__all__ = ["ensure_word_cursor", "validate_line_cursor"]
