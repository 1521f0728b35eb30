"""
Function-shape adapters.

Reshape a function's arguments without changing what it computes: swap
arguments, move between tuple and curried calling conventions, fan one input
out to several functions, or project arguments before they reach a function.

Curried results are ``toolz.curry`` objects, so they accept their arguments
one at a time (``curry(f)(a)(b)``) or all at once (``curry(f)(a, b)``).
"""

from collections.abc import Callable, Sequence
from typing import Any

import toolz
from toolz import compose, juxt

from .types import A, B, C, D


# === Argument Order ===


def flip(func: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Swap the first two arguments: ``flip(f)(a, b) == f(b, a)``."""
    return toolz.flip(func)


# === Tuple <-> Curried ===


def curry(func: Callable[[tuple[A, B]], C]) -> Callable[..., C]:
    """Turn a function of a pair into one taking the two values in turn.

    ``curry(f)(a)(b) == f((a, b))``
    """
    return toolz.curry(lambda first, second: func((first, second)))


def curry3(func: Callable[[tuple[A, B, C]], D]) -> Callable[..., D]:
    """``curry3(f)(a)(b)(c) == f((a, b, c))``"""
    return toolz.curry(lambda first, second, third: func((first, second, third)))


def uncurry(func: Callable[[A, B], C]) -> Callable[[tuple[A, B]], C]:
    """Turn a two-argument function into one taking a pair.

    ``uncurry(f)((a, b)) == f(a, b)``. Inverse of ``curry``.
    """

    def call_with_pair(pair: tuple[A, B]) -> C:
        first, second = pair
        return func(first, second)

    return call_with_pair


def uncurry3(func: Callable[[A, B, C], D]) -> Callable[[tuple[A, B, C]], D]:
    """``uncurry3(f)((a, b, c)) == f(a, b, c)``"""

    def call_with_triple(triple: tuple[A, B, C]) -> D:
        first, second, third = triple
        return func(first, second, third)

    return call_with_triple


# === Converge ===


def _expect_branches(branches: Sequence[Callable[..., Any]], count: int) -> tuple:
    branches = tuple(branches)
    if len(branches) != count:
        raise ValueError(
            f"Expected {count} branch functions, got {len(branches)}"
        )
    return branches


@toolz.curry
def converge(
    combine: Callable[[B, C], D],
    branches: tuple[Callable[[A], B], Callable[[A], C]],
    value: A,
) -> D:
    """
    Feed one value to two functions and combine their results.

    Args:
        combine: Binary function receiving both branch results
        branches: Pair ``(f, g)`` of single-argument functions
        value: Input passed to both branches

    Returns:
        ``combine(f(value), g(value))``
    """
    first, second = _expect_branches(branches, 2)
    return combine(first(value), second(value))


@toolz.curry
def converge3(
    combine: Callable[..., D],
    branches: tuple[Callable[[A], Any], Callable[[A], Any], Callable[[A], Any]],
    value: A,
) -> D:
    """``combine(f(value), g(value), h(value))`` for ``branches == (f, g, h)``."""
    first, second, third = _expect_branches(branches, 3)
    return combine(first(value), second(value), third(value))


def converge_list(
    reduce: Callable[[list[B]], C],
    branches: Sequence[Callable[[A], B]],
) -> Callable[[A], C]:
    """
    Feed one value to any number of functions and reduce their results.

    Args:
        reduce: Function receiving the list of branch results, in branch order
        branches: Ordered single-argument functions

    Returns:
        A function computing ``reduce([f1(value), ..., fn(value)])``
    """
    fan_out = juxt(*branches)

    def converged(value: A) -> C:
        return reduce(list(fan_out(value)))

    return converged


# === Contravariant Projection ===


def fn_contra_map(project: Callable[[A], B], func: Callable[[B], C]) -> Callable[[A], C]:
    """Project the argument before calling ``func``: ``func(project(a))``."""
    return compose(func, project)


def fn_contra_map2(
    project: Callable[[A], B], func: Callable[[B, B], C]
) -> Callable[[A, A], C]:
    """Project both arguments: ``func(project(a), project(b))``."""

    def projected(first: A, second: A) -> C:
        return func(project(first), project(second))

    return projected


def fn_contra_map3(
    project: Callable[[A], B], func: Callable[[B, B, B], C]
) -> Callable[[A, A, A], C]:
    """Project all three arguments: ``func(project(a), project(b), project(c))``."""

    def projected(first: A, second: A, third: A) -> C:
        return func(project(first), project(second), project(third))

    return projected
