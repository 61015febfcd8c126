"""Runtime services: telemetry and settings."""

from . import config, telemetry

__all__ = ["config", "telemetry"]
