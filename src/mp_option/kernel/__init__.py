"""Kernel – the Option type, its Result companion and their errors."""

from mp_option.kernel.errors import (
    BaseError,
    EmptyValueError,
    NotAResultError,
    OptionError,
    ResultError,
    UnwrapError,
)

__all__ = [
    "BaseError",
    "EmptyValueError",
    "NotAResultError",
    "OptionError",
    "ResultError",
    "UnwrapError",
]
