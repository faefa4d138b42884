"""Separator and word-character predicates used by the scanner."""

from __future__ import annotations

from typing import FrozenSet

SEPARATOR_CHARS: FrozenSet[str] = frozenset("`~!@#$%^&*()-=+[{]}\\|;:'\",.<>/?")


def is_separator(char: str) -> bool:
    """Whitespace or one of the fixed punctuation characters."""

    return char in SEPARATOR_CHARS or char.isspace()


def is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def is_digit(char: str) -> bool:
    return char.isdecimal()


def find_separator(text: str, start: int = 0) -> int:
    """Index of the first separator at or after ``start``, ``-1`` if none."""

    for index in range(max(start, 0), len(text)):
        if is_separator(text[index]):
            return index
    return -1


__all__ = [
    "SEPARATOR_CHARS",
    "find_separator",
    "is_digit",
    "is_separator",
    "is_word_char",
]
