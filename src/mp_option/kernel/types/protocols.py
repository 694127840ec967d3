"""Capability contract a Result type must satisfy for Option interop."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)
E_co = TypeVar("E_co", covariant=True)


@runtime_checkable
class ResultLike(Protocol[T_co, E_co]):
    """Anything that is either a success or a failure.

    ``unwrap`` must fail on the failure variant and ``unwrap_err`` on the
    success variant.
    """

    def is_ok(self) -> bool: ...

    def unwrap(self) -> T_co: ...

    def unwrap_err(self) -> E_co: ...


__all__ = ["ResultLike"]
