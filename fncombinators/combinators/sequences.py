"""
Single-pass list scans.

All functions return new lists and leave their input untouched. Any iterable
is accepted; it is consumed once.
"""

from collections.abc import Callable, Iterable

from toolz import curry, identity

from .adapters import fn_contra_map2
from .relations import equals
from .types import A, B, Predicate

# Placeholder for "no previous item" so None can appear in the input
_START = object()


@curry
def deduplicate_consecutive_items_by(
    project: Callable[[A], B],
    sequence: Iterable[A],
) -> list[A]:
    """
    Collapse runs of adjacent items that share a key.

    Args:
        project: Key function; items with equal keys are duplicates
        sequence: Items to scan

    Returns:
        The first item of every run of adjacent duplicates, in order. Equal
        keys that are not adjacent are kept.
    """
    same_key = fn_contra_map2(project, equals)

    kept: list[A] = []
    previous: object = _START
    for item in sequence:
        if previous is _START or not same_key(previous, item):
            kept.append(item)
        previous = item
    return kept


def deduplicate_consecutive_items(sequence: Iterable[A]) -> list[A]:
    """Collapse runs of adjacent equal items."""
    return deduplicate_consecutive_items_by(identity, sequence)


@curry
def partition_while(
    predicate: Predicate[A],
    sequence: Iterable[A],
) -> tuple[list[A], list[A]]:
    """
    Split a sequence at the first item failing ``predicate``.

    Args:
        predicate: Condition the leading run must satisfy
        sequence: Items to split

    Returns:
        ``(prefix, suffix)`` where ``prefix`` is the longest leading run
        satisfying ``predicate`` and ``suffix`` starts at the first failing
        item. The predicate is not called on items after the first failure.
    """
    items = list(sequence)
    for index, item in enumerate(items):
        if not predicate(item):
            return items[:index], items[index:]
    return items, []


@curry
def filter_map(
    func: Callable[[A], B | None],
    sequence: Iterable[A],
) -> list[B]:
    """
    Map ``func`` over ``sequence`` and drop None results.

    Intended for ``maybe_when``:

        >>> filter_map(maybe_when(greater_than(2), multiplying(10)), [1, 2, 3, 4])
        [30, 40]
    """
    return [result for result in map(func, sequence) if result is not None]
