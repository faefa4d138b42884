"""Settings and telemetry shared by every engine layer."""
