"""
mp_option – Option/Result value types.

Import path convention::

    from mp_option import Option, some, none
    from mp_option.kernel.errors import EmptyValueError
    from mp_option.observability.logging import configure_logging
"""

from mp_option.kernel.errors import EmptyValueError, NotAResultError, UnwrapError
from mp_option.kernel.types import (
    Err,
    Ok,
    Option,
    Result,
    ResultLike,
    Variant,
    from_nullable,
    none,
    some,
)

__version__ = "0.1.0"
__all__ = [
    "EmptyValueError",
    "Err",
    "NotAResultError",
    "Ok",
    "Option",
    "Result",
    "ResultLike",
    "UnwrapError",
    "Variant",
    "__version__",
    "from_nullable",
    "none",
    "some",
]
