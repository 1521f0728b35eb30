"""
Predicate combinators.

Build new predicates out of existing ones. Composite predicates evaluate their
parts left to right and stop as soon as the result is known, so later
predicates are never called once the outcome is decided.
"""

from collections.abc import Callable, Iterable
from typing import Any

from toolz import curry

from .types import A, Predicate


@curry
def both(first: Predicate[A], second: Predicate[A], value: A) -> bool:
    """True when both predicates hold. ``second`` is skipped if ``first`` fails."""
    return bool(first(value)) and bool(second(value))


@curry
def either(first: Predicate[A], second: Predicate[A], value: A) -> bool:
    """True when either predicate holds. ``second`` is skipped if ``first`` holds."""
    return bool(first(value)) or bool(second(value))


def all_pass(predicates: Iterable[Predicate[A]]) -> Predicate[A]:
    """
    Combine predicates with logical AND.

    Args:
        predicates: Ordered predicates; evaluation stops at the first False

    Returns:
        A predicate that holds when every predicate holds. With no predicates
        it always holds.
    """
    checks = tuple(predicates)

    def check(value: A) -> bool:
        return all(predicate(value) for predicate in checks)

    return check


def any_pass(predicates: Iterable[Predicate[A]]) -> Predicate[A]:
    """
    Combine predicates with logical OR.

    Args:
        predicates: Ordered predicates; evaluation stops at the first True

    Returns:
        A predicate that holds when at least one predicate holds. With no
        predicates it never holds.
    """
    checks = tuple(predicates)

    def check(value: A) -> bool:
        return any(predicate(value) for predicate in checks)

    return check


def complement(predicate: Callable[..., Any]) -> Callable[..., bool]:
    """Negate a predicate."""

    def negation(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negation


def always_true(_: Any) -> bool:
    return True


def always_false(_: Any) -> bool:
    return False
