"""Character classification and word extraction."""

from .classify import SEPARATOR_CHARS, find_separator, is_separator, is_word_char
from .scanner import WordSpan, extract_word, iter_tokens

__all__ = [
    "SEPARATOR_CHARS",
    "WordSpan",
    "extract_word",
    "find_separator",
    "is_separator",
    "is_word_char",
    "iter_tokens",
]
