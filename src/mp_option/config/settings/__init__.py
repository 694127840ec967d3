"""Config settings – environment-driven logging configuration."""
from mp_option.config.settings.base import Settings
from mp_option.config.settings.loaders import EnvSettingsLoader
from mp_option.config.settings.logging_settings import LoggingSettings

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings"]
