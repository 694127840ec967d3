"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_option.config.settings.base import Settings
from mp_option.config.validation import InvalidSettingValueError

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging configuration read from ``MP_OPTION_LOG_*`` variables.

    ``level`` is a stdlib level name (case-insensitive). ``json`` selects
    the JSON renderer; ``False`` switches to structlog's console renderer.
    """

    _prefix: ClassVar[str] = "MP_OPTION_LOG"

    level: str = "WARNING"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "level", self.level, f"expected one of {', '.join(_LEVEL_NAMES)}"
            )

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["LoggingSettings"]
