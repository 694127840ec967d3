"""Option[T] — an optional value, either ``Some(value)`` or ``Nothing``.

``Option`` is a single closed class: a :class:`Variant` tag plus one payload
slot. Instances are immutable; every combinator returns a new Option (or
``self``) and callbacks run inline at most once.

Build values with :func:`some`, :func:`none` or :func:`from_nullable`::

    some(2).map(lambda x: x * 10).unwrap_or(0)      # 20
    none().map(lambda x: x * 10).unwrap_or(0)       # 0

Structural pattern matching works on the tag::

    match opt:
        case Option(Variant.SOME, value):
            ...
        case Option(Variant.NOTHING):
            ...
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any, Callable, Generic, Iterator, TypeVar, cast, final

from mp_option.kernel.errors import (
    DEFAULT_UNWRAP_MESSAGE,
    EmptyValueError,
    NotAResultError,
)
from mp_option.kernel.types.protocols import ResultLike
from mp_option.kernel.types.result import Err, Ok
from mp_option.observability.logging.processors import get_logger

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")

_log = get_logger(__name__)


class Variant(str, Enum):
    """Discriminant of an :class:`Option`."""

    SOME = "some"
    NOTHING = "nothing"


@final
@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Option(Generic[T]):
    """A value of type ``T`` or its absence.

    Do not call the constructor directly; use :func:`some` / :func:`none`.
    Equality and hashing follow the tag and the held value.
    """

    variant: Variant
    _value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.variant, Variant):
            raise TypeError(f"variant must be a Variant, got {self.variant!r}")
        if self.variant is Variant.NOTHING and self._value is not None:
            raise ValueError("Nothing cannot hold a value")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("Option is a closed two-variant type and cannot be subclassed")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_some(self) -> bool:
        return self.variant is Variant.SOME

    def is_none(self) -> bool:
        return self.variant is Variant.NOTHING

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """``True`` iff this is Some and *predicate* holds for the value."""
        return self.is_some() and bool(predicate(self._value))

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def unwrap(self) -> T:
        """Return the held value.

        Raises:
            EmptyValueError: when called on Nothing.
        """
        if self.is_some():
            return cast(T, self._value)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("option.unwrap_failed", operation="unwrap", message=DEFAULT_UNWRAP_MESSAGE)
        raise EmptyValueError()

    def expect(self, message: str) -> T:
        """Like :meth:`unwrap`, but the error carries *message*."""
        if self.is_some():
            return cast(T, self._value)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("option.unwrap_failed", operation="expect", message=message)
        raise EmptyValueError(message, operation="expect")

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self.is_some() else default

    def unwrap_or_else(self, thunk: Callable[[], T]) -> T:
        return cast(T, self._value) if self.is_some() else thunk()

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        if self.is_some():
            return some(fn(self._value))
        return none()

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        """``fn(value)`` for Some, the already-evaluated *default* otherwise."""
        return fn(self._value) if self.is_some() else default

    def map_or_else(self, default: Callable[[], U], fn: Callable[[T], U]) -> U:
        return fn(self._value) if self.is_some() else default()

    def inspect(self, fn: Callable[[T], Any]) -> Option[T]:
        """Call *fn* with the value for its side effect and return ``self``."""
        if self.is_some():
            fn(self._value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if self.is_some() and predicate(self._value):
            return self
        return none()

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting: ``Some(Some(x))`` becomes ``Some(x)``.

        A Some holding anything other than an Option is returned unchanged.
        """
        if self.is_some() and isinstance(self._value, Option):
            return self._value
        return self

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------

    def and_(self, opt: Option[U]) -> Option[U]:
        """*opt* when this is Some, otherwise Nothing."""
        return opt if self.is_some() else none()

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        if self.is_some():
            return fn(self._value)
        return none()

    def or_(self, opt: Option[T]) -> Option[T]:
        return self if self.is_some() else opt

    def or_else(self, thunk: Callable[[], Option[T]]) -> Option[T]:
        return self if self.is_some() else thunk()

    def xor(self, opt: Option[T]) -> Option[T]:
        """Some iff exactly one of ``self`` / *opt* is Some."""
        if self.is_some() and opt.is_none():
            return self
        if self.is_none() and opt.is_some():
            return opt
        return none()

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        if self.is_some() and other.is_some():
            return some((self._value, other._value))
        return none()

    def zip_with(self, other: Option[U], fn: Callable[[T, U], R]) -> Option[R]:
        if self.is_some() and other.is_some():
            return some(fn(self._value, other._value))
        return none()

    def unzip(self: Option[tuple[A, B]]) -> tuple[Option[A], Option[B]]:
        """Split ``Some((a, b))`` into ``(Some(a), Some(b))``.

        Nothing, or a Some that does not hold a two-element sequence,
        yields ``(Nothing, Nothing)``.
        """
        if self.is_some():
            pair = self._value
            if (
                isinstance(pair, Sequence)
                and not isinstance(pair, (str, bytes, bytearray))
                and len(pair) == 2
            ):
                return some(pair[0]), some(pair[1])
        return none(), none()

    # ------------------------------------------------------------------
    # Result interop
    # ------------------------------------------------------------------

    def ok_or(
        self,
        error: E,
        *,
        ok: Callable[[Any], Any] = Ok,
        err: Callable[[Any], Any] = Err,
    ) -> Any:
        """``ok(value)`` for Some, ``err(error)`` for Nothing.

        *ok* / *err* build the success and failure variants; they default to
        the bundled :class:`Ok` / :class:`Err` and may be any other Result
        implementation's constructors. The return value is whatever the
        chosen factory builds.
        """
        if self.is_some():
            return ok(self._value)
        return err(error)

    def ok_or_else(
        self,
        error: Callable[[], E],
        *,
        ok: Callable[[Any], Any] = Ok,
        err: Callable[[Any], Any] = Err,
    ) -> Any:
        """Like :meth:`ok_or`, but *error* is only called for Nothing."""
        if self.is_some():
            return ok(self._value)
        return err(error())

    def transpose(
        self,
        *,
        ok: Callable[[Any], Any] = Ok,
        err: Callable[[Any], Any] = Err,
    ) -> Any:
        """Turn an Option of a Result into a Result of an Option.

        ``Some(Ok(v))`` -> ``ok(Some(v))``, ``Some(Err(e))`` -> ``err(e)``,
        ``Nothing`` -> ``ok(Nothing)``. The held value may be any
        :class:`ResultLike`.

        Raises:
            NotAResultError: when Some holds something that is not a Result.
        """
        if self.is_none():
            return ok(none())
        inner = self._value
        if not isinstance(inner, ResultLike):
            if _log.isEnabledFor(logging.DEBUG):
                _log.debug("option.transpose_rejected", value_type=type(inner).__name__)
            raise NotAResultError(inner)
        if inner.is_ok():
            return ok(some(inner.unwrap()))
        return err(inner.unwrap_err())

    # ------------------------------------------------------------------
    # Iteration / matching
    # ------------------------------------------------------------------

    def iter(self) -> Iterator[T]:
        """A fresh iterator over zero or one values."""
        if self.is_some():
            yield self._value

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        """Call exactly one branch and return its result."""
        if self.is_some():
            return on_some(self._value)
        return on_none()

    def __repr__(self) -> str:
        if self.is_some():
            return f"Some({self._value!r})"
        return "Nothing"


_NOTHING: Option[Any] = Option(Variant.NOTHING)


def some(value: T) -> Option[T]:
    """Wrap *value*. ``some(None)`` is a present value, not Nothing."""
    return Option(Variant.SOME, value)


def none() -> Option[Any]:
    """Return the empty Option."""
    return _NOTHING


def from_nullable(value: T | None) -> Option[T]:
    """``none()`` when *value* is ``None``, otherwise ``some(value)``."""
    return none() if value is None else some(value)


__all__ = ["Option", "Variant", "from_nullable", "none", "some"]
