"""Option errors — access to an absent value and misuse of ``transpose``."""

from __future__ import annotations

from typing import Any

from mp_option.kernel.errors.base import BaseError

DEFAULT_UNWRAP_MESSAGE = "Called unwrap() on an empty Option"


class OptionError(BaseError):
    """Base class for failures raised by :class:`~mp_option.kernel.types.Option`."""

    default_code = "option_error"


class EmptyValueError(OptionError):
    """A value was extracted from an empty Option.

    Raised by ``unwrap()`` with :data:`DEFAULT_UNWRAP_MESSAGE` and by
    ``expect(message)`` with the caller's message.
    """

    default_code = "empty_value"

    def __init__(
        self,
        message: str = DEFAULT_UNWRAP_MESSAGE,
        *,
        operation: str = "unwrap",
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        detail.setdefault("operation", operation)
        super().__init__(message, detail=detail, **kwargs)
        self.operation = operation


class NotAResultError(OptionError, TypeError):
    """``transpose()`` was called on an Option whose value is not a Result."""

    default_code = "not_a_result"

    def __init__(self, value: object, **kwargs: Any) -> None:
        value_type = type(value).__name__
        super().__init__(
            f"Cannot transpose an Option holding {value_type}; expected a Result",
            detail={"value_type": value_type},
            **kwargs,
        )
        self.value = value


__all__ = [
    "DEFAULT_UNWRAP_MESSAGE",
    "EmptyValueError",
    "NotAResultError",
    "OptionError",
]
