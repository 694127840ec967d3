"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "mp-option[testing]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from mp_option.kernel.types import Option, Result


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def option_strategy(
    elements: "SearchStrategy[Any] | None" = None,
) -> "SearchStrategy[Option[Any]]":
    """Hypothesis strategy that draws ``some(x)`` or ``none()``.

    Args:
        elements: Strategy for the held value. Defaults to integers.

    Example::

        @given(option_strategy(st.text()))
        def test_map_identity(opt):
            assert opt.map(lambda x: x) == opt
    """
    from mp_option.kernel.types.option import none, some

    st = _require_hypothesis()
    values = elements if elements is not None else st.integers()
    return st.one_of(st.just(none()), values.map(some))


def result_strategy(
    oks: "SearchStrategy[Any] | None" = None,
    errs: "SearchStrategy[Any] | None" = None,
) -> "SearchStrategy[Result[Any, Any]]":
    """Hypothesis strategy that draws ``Ok(x)`` or ``Err(e)``.

    Args:
        oks: Strategy for success values. Defaults to integers.
        errs: Strategy for error values. Defaults to short text.
    """
    from mp_option.kernel.types.result import Err, Ok

    st = _require_hypothesis()
    ok_values = oks if oks is not None else st.integers()
    err_values = errs if errs is not None else st.text(max_size=10)
    return st.one_of(ok_values.map(Ok), err_values.map(Err))


__all__ = ["option_strategy", "result_strategy"]
