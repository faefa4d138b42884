"""Word-boundary detection and in-place word replacement for rich-text editors."""

__all__ = [
    "content",
    "cursor",
    "runtime",
    "spellcheck",
    "text",
]

__version__ = "0.1.0"
