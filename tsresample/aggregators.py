"""
Reduction functions applied to the values of each resampled period.

Every aggregator must give the same result for any ordering of its input. The
resampler keeps values in arrival order within a period, so an order-sensitive
aggregator (i.e. "first" or "last") would work but must say so.
"""

import math
from typing import Callable, Sequence

from tsresample.model.function import Function

Aggregator = Callable[[Sequence[float]], float]


def _min(values: Sequence[float]) -> float:
    return min(values)


def _max(values: Sequence[float]) -> float:
    return max(values)


def _sum(values: Sequence[float]) -> float:
    # fsum is exactly rounded, so the result doesn't depend on the input order.
    try:
        return math.fsum(values)
    except OverflowError:
        # The exact sum is beyond the float range. Plain addition saturates to inf.
        return sum(values)


def aggregator(function: Function) -> Aggregator:
    """
    Look up the reduction for a function.

    Args:
        function: The reduction function.

    Returns: A callable reducing a non-empty sequence of values to one value.
    """
    if function == Function.MIN:
        return _min
    elif function == Function.MAX:
        return _max
    elif function == Function.SUM:
        return _sum
    else:
        raise ValueError(f"Unhandled function: {function}")


def aggregate(function: Function, values: Sequence[float]) -> float:
    """
    Reduce a sequence of values to one value.

    Args:
        function: The reduction function.
        values: The values to reduce.
    """
    return aggregator(function)(values)
