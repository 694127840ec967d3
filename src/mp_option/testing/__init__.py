"""Testing support – property-based generators.

Usage::

    from mp_option.testing import option_strategy
"""

from mp_option.testing.generators import option_strategy, result_strategy

__all__ = ["option_strategy", "result_strategy"]
