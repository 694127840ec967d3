"""Result[T, E] — Ok and Err variants.

The default success / failure factories used by ``Option.ok_or``,
``Option.ok_or_else`` and ``Option.transpose``. Both classes satisfy
:class:`~mp_option.kernel.types.protocols.ResultLike`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar

from mp_option.kernel.errors import UnwrapError
from mp_option.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from mp_option.kernel.types.option import Option

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_log = get_logger(__name__)


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("result.unwrap_failed", operation="unwrap_err")
        raise UnwrapError("Called unwrap_err() on an Ok value", error=self._value, operation="unwrap_err")

    def unwrap_or(self, default: Any) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self._value))

    def map_err(self, func: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def and_then(self, func: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return func(self._value)

    def ok(self) -> Option[T]:
        """Return ``Some(value)``."""
        from mp_option.kernel.types.option import some

        return some(self._value)

    def err(self) -> Option[Any]:
        """Return ``Nothing``."""
        from mp_option.kernel.types.option import none

        return none()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant. ``error`` may be any object, not only exceptions."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("result.unwrap_failed", operation="unwrap")
        raise UnwrapError("Called unwrap() on an Err value", error=self._error, operation="unwrap")

    def unwrap_err(self) -> E:
        return self._error

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, func: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err(self, func: Callable[[E], F]) -> Err[F]:
        return Err(func(self._error))

    def and_then(self, func: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def ok(self) -> Option[Any]:
        """Return ``Nothing``."""
        from mp_option.kernel.types.option import none

        return none()

    def err(self) -> Option[E]:
        """Return ``Some(error)``."""
        from mp_option.kernel.types.option import some

        return some(self._error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((Err, self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
