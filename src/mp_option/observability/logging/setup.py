"""Observability – configure_logging entry point."""
from __future__ import annotations

from mp_option.config.settings import EnvSettingsLoader, LoggingSettings
from mp_option.observability.logging.factory import JsonLoggerFactory


def configure_logging(settings: LoggingSettings | None = None) -> LoggingSettings:
    """Apply *settings* (or ``MP_OPTION_LOG_*`` from the environment).

    The library never calls this itself; applications opt in. Returns the
    settings that were applied.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(LoggingSettings)
    JsonLoggerFactory.configure(level=settings.level_number, json=settings.json)
    return settings


__all__ = ["configure_logging"]
