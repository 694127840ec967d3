"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields map onto ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction and may normalise fields in place.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()


__all__ = ["Settings"]
