"""High level spell checker API on top of a platform provider."""

from __future__ import annotations

from typing import List, Optional

from spell_engine.runtime import telemetry
from spell_engine.runtime.settings import SpellcheckSettings
from spell_engine.text import WordSpan, extract_word

from .provider import SpellProvider


class SpellCheckerError(RuntimeError):
    """Raised when the provider refuses a language switch."""

    def __init__(self, message: str, *, lang: Optional[str] = None) -> None:
        super().__init__(message)
        self.lang = lang


class SpellChecker:
    """Tracks enablement and language; every lookup goes to the provider.

    ``is_provider_available`` lets the host forbid spell checking (e.g. the
    native checker failed to load) even when the user enabled it.
    """

    def __init__(
        self, provider: SpellProvider, enabled: bool = True, lang: Optional[str] = None
    ) -> None:
        self.provider = provider
        self.enabled = enabled
        self.current_language = lang
        self.is_provider_available = True

    @classmethod
    def from_settings(
        cls, provider: SpellProvider, settings: Optional[SpellcheckSettings] = None
    ) -> "SpellChecker":
        settings = settings or SpellcheckSettings.from_env()
        return cls(provider, enabled=settings.enabled, lang=settings.language)

    @property
    def is_enabled(self) -> bool:
        return self.is_provider_available and self.enabled

    @property
    def lang(self) -> str:
        if self.is_enabled:
            return self.current_language or ""
        return ""

    @lang.setter
    def lang(self, lang: str) -> None:
        self.current_language = lang

    async def activate(self, lang: Optional[str] = None) -> bool:
        """Enable checking and switch to ``lang`` (or the current language)."""

        try:
            self.enabled = True
            self.is_provider_available = True
            return await self.switch_language(lang or self.current_language or "")
        except Exception:
            self.deactivate()
            raise

    def deactivate(self) -> None:
        self.enabled = False
        self.is_provider_available = False
        self.provider.set_enabled(False)

    async def add_to_dictionary(self, word: str) -> bool:
        if not self.is_enabled:
            return False
        return await self.provider.add_word(word)

    async def remove_from_dictionary(self, word: str) -> bool:
        if not self.is_enabled:
            return False
        return await self.provider.remove_word(word)

    async def switch_language(self, lang: str) -> bool:
        if self.provider.auto_detects_language:
            return True
        if not lang:
            raise SpellCheckerError("Invalid empty language.", lang=lang)
        if not self.is_enabled:
            return False

        error = await self.provider.switch_language(lang)
        if error:
            raise SpellCheckerError(error, lang=lang)
        self.lang = lang
        telemetry.record_event("spellcheck.language", data={"lang": lang})
        return True

    def is_misspelled(self, word: str) -> bool:
        if self.is_enabled:
            return self.provider.is_misspelled(word)
        return False

    async def get_word_suggestion(self, word: str) -> List[str]:
        if self.is_enabled:
            return list(await self.provider.suggestions(word))
        return []

    async def get_available_dictionaries(self) -> List[str]:
        if self.provider.auto_detects_language:
            return []
        return list(await self.provider.available_dictionaries())

    @staticmethod
    def extract_word(text: str, offset: int) -> Optional[WordSpan]:
        return extract_word(text, offset)


__all__ = ["SpellChecker", "SpellCheckerError"]
