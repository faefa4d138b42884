"""Locate the word enclosing a caret offset.

The left boundary comes from a token scan so that decimal numbers such as
``3.14`` stay intact; the right boundary is simply the next separator after
the offset. The two passes are independent and must stay that way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .classify import find_separator, is_digit, is_separator, is_word_char


@dataclass(frozen=True, slots=True)
class WordSpan:
    left: int
    right: int
    word: str


def _match_number(text: str, index: int) -> Optional[int]:
    # -?\d*\.\d\w*
    length = len(text)
    cursor = index
    if cursor < length and text[cursor] == "-":
        cursor += 1
    while cursor < length and is_digit(text[cursor]):
        cursor += 1
    if cursor + 1 >= length or text[cursor] != "." or not is_digit(text[cursor + 1]):
        return None
    cursor += 2
    while cursor < length and is_word_char(text[cursor]):
        cursor += 1
    return cursor


def _match_run(text: str, index: int) -> Optional[int]:
    cursor = index
    while cursor < len(text) and not is_separator(text[cursor]):
        cursor += 1
    return cursor if cursor > index else None


def iter_tokens(text: str, start: int = 0) -> Iterator[Tuple[int, int]]:
    """Yield ``(left, right)`` for each word-constituent token from ``start``.

    At every index the numeric form is tried before a plain non-separator run,
    and tokens are produced left to right without overlap.
    """

    index = max(start, 0)
    while index < len(text):
        end = _match_number(text, index)
        if end is None:
            end = _match_run(text, index)
        if end is None:
            index += 1
            continue
        yield index, end
        index = end


def extract_word(text: str, offset: int) -> Optional[WordSpan]:
    """Return the word around ``offset`` in ``text`` or ``None``.

    ``offset`` is a caret position and may equal ``len(text)``; it is clamped
    onto the last character. ``None`` means the caret sits on or between
    separators, which is a normal outcome rather than an error.
    """

    if not text:
        return None
    offset = min(max(offset, 0), len(text) - 1)

    # Restart from the last literal space, not the last separator.
    scan_start = text.rfind(" ", 0, offset) + 1
    left = -1
    for token_left, token_right in iter_tokens(text, scan_start):
        if token_left > offset:
            break
        if token_right > offset:
            left = token_left
    if left < 0:
        return None

    right = find_separator(text, offset)
    if right < 0:
        right = len(text)
    if right <= left:
        return None
    return WordSpan(left=left, right=right, word=text[left:right])


__all__ = ["WordSpan", "extract_word", "iter_tokens"]
