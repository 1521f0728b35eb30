"""
Relational combinators in pipeline order.

The operand comes first and the subject last, so ``less_than(10)`` reads as
"is less than 10" and can be passed straight to ``filter``:

    >>> list(filter(less_than(10), [5, 10, 15]))
    [5]
"""

from typing import Any

from toolz import curry


@curry
def less_than(bound: Any, value: Any) -> bool:
    """``value < bound``"""
    return value < bound


@curry
def less_than_equal_to(bound: Any, value: Any) -> bool:
    """``value <= bound``"""
    return value <= bound


@curry
def greater_than(bound: Any, value: Any) -> bool:
    """``value > bound``"""
    return value > bound


@curry
def greater_than_equal_to(bound: Any, value: Any) -> bool:
    """``value >= bound``"""
    return value >= bound


@curry
def equals(expected: Any, value: Any) -> bool:
    """``value == expected``, using the element type's own equality."""
    return value == expected
