"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_option.kernel.errors import BaseError


class ErrorDictProcessor:
    """structlog processor that expands :class:`BaseError` values.

    Any event field holding a :class:`~mp_option.kernel.errors.BaseError`
    is replaced by its :meth:`to_dict` payload so JSON renderers emit the
    ``code`` / ``message`` / ``detail`` triple instead of an opaque string.

    Usage::

        structlog.configure(processors=[ErrorDictProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in list(event_dict.items()):
            if isinstance(value, BaseError):
                event_dict[key] = value.to_dict()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by a stdlib :mod:`logging` logger.

    Library events therefore obey the host application's log levels and
    handlers, so debug events stay silent unless the application enables them.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorDictProcessor", "get_logger"]
