"""Config validation errors."""
from __future__ import annotations

from mp_option.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be built from their source."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """One setting holds a value its field cannot accept.

    ``setting_name`` is the environment key when the value came from the
    environment, otherwise the field name.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
