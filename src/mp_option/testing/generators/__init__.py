"""Testing generators – Hypothesis strategies for Option and Result."""
from mp_option.testing.generators.strategies import option_strategy, result_strategy

__all__ = ["option_strategy", "result_strategy"]
