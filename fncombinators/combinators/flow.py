"""
Flow-control combinators.

Branching and looping expressed as functions of a single subject, so they can
be dropped into a pipeline alongside the other transforms:

    >>> from toolz import compose_left
    >>> clamp_then_double = compose_left(when(greater_than(10), always(10)), multiplying(2))

No-match results are signalled with ``None`` rather than an exception.
"""

from collections.abc import Callable, Iterable
from typing import Any

from toolz import curry

from fncombinators.config import get_logger, settings

from .predicates import complement
from .types import A, B, Case, Predicate, Thunk

logger = get_logger(__name__)

# Marks "no case matched" so a transform returning None stays distinguishable
_NO_MATCH = object()

CaseLike = Case[A, B] | tuple[Predicate[A], Callable[[A], B]]


@curry
def if_else(
    predicate: Predicate[A],
    when_true: Callable[[A], B],
    when_false: Callable[[A], B],
    value: A,
) -> B:
    """Apply ``when_true`` or ``when_false`` depending on ``predicate``; only one runs."""
    if predicate(value):
        return when_true(value)
    return when_false(value)


def _first_match(cases: tuple[CaseLike, ...], value: Any) -> Any:
    for predicate, transform in cases:
        if predicate(value):
            return transform(value)
    return _NO_MATCH


def cond(cases: Iterable[CaseLike]) -> Callable[[A], B | None]:
    """
    Pick the transform of the first case whose predicate holds.

    Args:
        cases: Ordered ``(predicate, transform)`` pairs or ``Case`` instances

    Returns:
        A function returning the matching transform's result, or None when no
        predicate holds. Scanning stops at the first match.
    """
    checks = tuple(cases)

    def choose(value: A) -> B | None:
        result = _first_match(checks, value)
        return None if result is _NO_MATCH else result

    return choose


def cond_default(
    cases: Iterable[CaseLike],
    default: Thunk[B],
) -> Callable[[A], B]:
    """
    Like ``cond``, falling back to ``default()`` when no predicate holds.

    Args:
        cases: Ordered ``(predicate, transform)`` pairs or ``Case`` instances
        default: Zero-argument function, called only on the no-match path

    Returns:
        A function returning the matching transform's result or the default
    """
    checks = tuple(cases)

    def choose(value: A) -> B:
        result = _first_match(checks, value)
        if result is _NO_MATCH:
            logger.debug(f"No case matched {value!r}, using default")
            return default()
        return result

    return choose


@curry
def when(predicate: Predicate[A], transform: Callable[[A], A], value: A) -> A:
    """Apply ``transform`` when ``predicate`` holds, otherwise pass ``value`` through."""
    return transform(value) if predicate(value) else value


@curry
def maybe_when(
    predicate: Predicate[A], transform: Callable[[A], B], value: A
) -> B | None:
    """Apply ``transform`` when ``predicate`` holds, otherwise return None.

    Pairs with ``filter_map`` to transform and filter a sequence in one pass.
    """
    return transform(value) if predicate(value) else None


@curry
def unless(predicate: Predicate[A], transform: Callable[[A], A], value: A) -> A:
    """Apply ``transform`` when ``predicate`` does NOT hold."""
    return when(complement(predicate), transform, value)


@curry
def until(
    predicate: Predicate[A],
    transform: Callable[[A], A],
    value: A,
    max_iterations: int | None = None,
) -> A:
    """
    Apply ``transform`` repeatedly until ``predicate`` holds.

    The predicate is checked before each application, so a value that already
    satisfies it is returned unchanged.

    Args:
        predicate: Stop condition
        transform: Step function
        value: Starting value
        max_iterations: Optional cap on applications. Falls back to
            ``settings.flow.until_max_iterations``; when both are None the
            loop is unbounded and termination is the caller's responsibility.

    Returns:
        The first value for which ``predicate`` holds

    Raises:
        RuntimeError: If a cap is set and reached before ``predicate`` holds
    """
    limit = (
        max_iterations
        if max_iterations is not None
        else settings.flow.until_max_iterations
    )

    current = value
    iterations = 0
    while not predicate(current):
        if limit is not None and iterations >= limit:
            logger.warning(
                f"until gave up after {iterations} iterations without meeting its predicate"
            )
            raise RuntimeError(
                f"until exceeded {limit} iterations without meeting its predicate"
            )
        current = transform(current)
        iterations += 1

    logger.debug(f"until finished after {iterations} iterations")
    return current


def always(value: B) -> Callable[..., B]:
    """Return a function that ignores its arguments and returns ``value``."""

    def constant(*_args: Any, **_kwargs: Any) -> B:
        return value

    return constant
