"""Result errors — wrong-variant access on ``Ok`` / ``Err``."""

from __future__ import annotations

from typing import Any

from mp_option.kernel.errors.base import BaseError


class ResultError(BaseError):
    """Base class for failures raised by the bundled Result type."""

    default_code = "result_error"


class UnwrapError(ResultError):
    """``unwrap()`` on an ``Err`` or ``unwrap_err()`` on an ``Ok``.

    ``error`` holds the payload of the variant that was actually present.
    When it is an exception it is chained as ``__cause__``.
    """

    default_code = "result_unwrap"

    def __init__(self, message: str, *, error: object = None, operation: str = "unwrap", **kwargs: Any) -> None:
        if isinstance(error, BaseException):
            kwargs.setdefault("cause", error)
        detail = dict(kwargs.pop("detail", None) or {})
        detail.setdefault("operation", operation)
        super().__init__(message, detail=detail, **kwargs)
        self.error = error
        self.operation = operation


__all__ = ["ResultError", "UnwrapError"]
