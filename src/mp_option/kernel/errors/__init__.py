"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── OptionError          (option.py)
    │   ├── EmptyValueError
    │   └── NotAResultError
    └── ResultError          (result.py)
        └── UnwrapError
"""

from mp_option.kernel.errors.base import BaseError
from mp_option.kernel.errors.option import (
    DEFAULT_UNWRAP_MESSAGE,
    EmptyValueError,
    NotAResultError,
    OptionError,
)
from mp_option.kernel.errors.result import ResultError, UnwrapError

__all__ = [
    "DEFAULT_UNWRAP_MESSAGE",
    "BaseError",
    "EmptyValueError",
    "NotAResultError",
    "OptionError",
    "ResultError",
    "UnwrapError",
]
