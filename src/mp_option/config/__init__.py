"""Config – opt-in logging settings read from the environment."""

from mp_option.config.settings import EnvSettingsLoader, LoggingSettings, Settings
from mp_option.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "Settings",
]
