from __future__ import annotations

import pytest

from spell_engine.runtime import telemetry
from spell_engine.runtime.settings import DEFAULT_LANGUAGE, SpellcheckSettings, env_flag


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPELL_ENGINE_SPELLCHECK", raising=False)
    monkeypatch.delenv("SPELL_ENGINE_SPELLCHECK_LANG", raising=False)

    settings = SpellcheckSettings.from_env()

    assert settings.enabled is True
    assert settings.language == DEFAULT_LANGUAGE


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPELL_ENGINE_SPELLCHECK", "off")
    monkeypatch.setenv("SPELL_ENGINE_SPELLCHECK_LANG", "de-DE")

    settings = SpellcheckSettings.from_env()

    assert settings.enabled is False
    assert settings.language == "de-DE"


def test_env_flag_truthy_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPELL_ENGINE_LOG_JSON", "Yes")

    assert env_flag("LOG_JSON", False) is True
    assert env_flag("MISSING_FLAG", True) is True


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_span_reraises_failures() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", metadata={"key": "ag-0"}):
            raise RuntimeError("boom")


class RecordingConfig:
    def __init__(self) -> None:
        self.profiling: bool | None = None

    def __bool__(self) -> bool:
        return True

    def with_profiling(self, enabled: bool) -> None:
        self.profiling = enabled


def test_configure_keeps_profiling_enabled() -> None:
    config = RecordingConfig()
    try:
        telemetry.configure(config=config)
        assert config.profiling is True
    finally:
        telemetry.configure(preset="quiet")
