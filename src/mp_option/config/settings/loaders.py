"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_option.config.settings.base import Settings
from mp_option.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class EnvSettingsLoader:
    """Build a :class:`Settings` subclass from environment variables.

    Only variables that are set override the field defaults. ``bool`` fields
    accept ``1/0``, ``true/false``, ``yes/no`` and ``on/off``; every other
    field receives the raw string.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        overrides: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = self._environ.get(key)
            if raw is not None:
                overrides[field.name] = self._parse(key, raw, field.type)
        try:
            return settings_class(**overrides)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _parse(key: str, raw: str, annotation: Any) -> Any:
        if annotation not in (bool, "bool"):
            return raw
        flag = raw.strip().lower()
        if flag in _TRUE:
            return True
        if flag in _FALSE:
            return False
        raise InvalidSettingValueError(key, raw, "expected a boolean flag")


__all__ = ["EnvSettingsLoader"]
