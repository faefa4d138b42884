"""Environment-driven configuration for the engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "SPELL_ENGINE_"
DEFAULT_LANGUAGE = "en-US"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class SpellcheckSettings:
    """User-facing spell checking preferences."""

    enabled: bool = True
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_env(cls) -> "SpellcheckSettings":
        return cls(
            enabled=env_flag("SPELLCHECK", True),
            language=env("SPELLCHECK_LANG") or DEFAULT_LANGUAGE,
        )


__all__ = ["ENV_PREFIX", "DEFAULT_LANGUAGE", "SpellcheckSettings", "env", "env_flag"]
