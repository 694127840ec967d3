"""Observability – structured logging helpers."""
from mp_option.observability.logging.factory import JsonLoggerFactory
from mp_option.observability.logging.processors import ErrorDictProcessor, get_logger
from mp_option.observability.logging.setup import configure_logging

__all__ = [
    "ErrorDictProcessor",
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
