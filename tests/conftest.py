from __future__ import annotations

from spell_engine.runtime import telemetry

telemetry.configure(preset="quiet")
