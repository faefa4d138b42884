"""Offset pair to word cursor translation."""

from __future__ import annotations

from .state import LineCursor, WordCursor


def offset_to_word_cursor(line_cursor: LineCursor, left: int, right: int) -> WordCursor:
    """Return ``line_cursor`` narrowed to ``[left, right)`` on the same line.

    Both positions are copied, so the result never aliases ``line_cursor``.
    Nothing is validated here.
    """

    return WordCursor(
        start=line_cursor.start.copy(offset=left),
        end=line_cursor.end.copy(offset=right),
    )


__all__ = ["offset_to_word_cursor"]
