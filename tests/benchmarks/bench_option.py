"""Benchmark: Option combinator chains.

Sub-benchmarks:
- ``some(x)``                       — construction
- ``map/filter/unwrap_or`` chain    — typical happy-path pipeline
- ``none()`` through the same chain — short-circuit path
- ``unwrap()`` on Nothing           — cost of the raised EmptyValueError
- ``transpose()``                   — Result interop
"""

from __future__ import annotations

from mp_option.kernel.errors import EmptyValueError
from mp_option.kernel.types import Ok, none, some


def test_some_construct(benchmark):
    """``some(1)`` — frozen dataclass construction."""
    result = benchmark(some, 1)
    assert result.is_some()


def test_chain_some(benchmark):
    """Three combinators on a present value."""

    def run():
        return some(21).map(lambda x: x * 2).filter(lambda x: x > 0).unwrap_or(0)

    assert benchmark(run) == 42


def test_chain_none(benchmark):
    """The same chain short-circuiting on Nothing."""

    def run():
        return none().map(lambda x: x * 2).filter(lambda x: x > 0).unwrap_or(0)

    assert benchmark(run) == 0


def test_unwrap_nothing(benchmark):
    """``none().unwrap()`` — error construction and the debug log call."""

    def run():
        try:
            none().unwrap()
        except EmptyValueError as exc:
            return exc
        return None

    assert isinstance(benchmark(run), EmptyValueError)


def test_transpose(benchmark):
    """``some(Ok(1)).transpose()`` — protocol check plus two constructions."""
    opt = some(Ok(1))
    assert benchmark(opt.transpose) == Ok(some(1))
