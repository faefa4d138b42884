"""Contract for the platform spell checker the host plugs in."""

from __future__ import annotations

from typing import List, Optional, Protocol


class SpellProvider(Protocol):
    """Native spell checking service; dictionaries live entirely on its side."""

    # True when the OS checker picks the language itself (e.g. macOS).
    auto_detects_language: bool

    def set_enabled(self, enabled: bool) -> None:
        ...

    async def switch_language(self, lang: str) -> Optional[str]:
        """Switch dictionaries; return an error message on failure."""
        ...

    async def add_word(self, word: str) -> bool:
        ...

    async def remove_word(self, word: str) -> bool:
        ...

    def is_misspelled(self, word: str) -> bool:
        ...

    async def suggestions(self, word: str) -> List[str]:
        ...

    async def available_dictionaries(self) -> List[str]:
        ...


__all__ = ["SpellProvider"]
