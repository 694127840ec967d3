"""Kernel value types — public re-export surface.

Modules:
  option.py    — Option, Variant, some, none, from_nullable
  result.py    — Ok, Err, Result
  protocols.py — ResultLike
"""

from mp_option.kernel.types.option import Option, Variant, from_nullable, none, some
from mp_option.kernel.types.protocols import ResultLike
from mp_option.kernel.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Ok",
    "Option",
    "Result",
    "ResultLike",
    "Variant",
    "from_nullable",
    "none",
    "some",
]
