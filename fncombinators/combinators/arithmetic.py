"""
Arithmetic aliases in pipeline order.

The amount comes first and the subject last: ``subtracting(4)(10) == 6`` and
``divided_by_int(4)(12) == 3``.
"""

import math
from typing import Any

from toolz import curry


@curry
def adding(amount: Any, value: Any) -> Any:
    return value + amount


@curry
def subtracting(subtrahend: Any, minuend: Any) -> Any:
    return minuend - subtrahend


@curry
def multiplying(factor: Any, value: Any) -> Any:
    return value * factor


@curry
def divided_by_int(divisor: int, dividend: int) -> int:
    """
    Integer division using Python's floor division.

    The quotient rounds toward negative infinity, so
    ``divided_by_int(4)(-7) == -2``. A zero divisor raises
    ``ZeroDivisionError``.
    """
    return dividend // divisor


@curry
def divided_by_float(divisor: float, dividend: float) -> float:
    """
    Floating-point division with IEEE-754 semantics.

    Unlike the ``/`` operator, division by zero does not raise: a non-zero
    dividend yields an infinity whose sign is the product of the operand
    signs, and ``0 / 0`` (or a NaN dividend) yields NaN.
    """
    dividend = float(dividend)
    divisor = float(divisor)

    if divisor != 0.0:
        return dividend / divisor

    if dividend == 0.0 or math.isnan(dividend):
        return math.nan
    return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def negated(value: Any) -> Any:
    return -value
