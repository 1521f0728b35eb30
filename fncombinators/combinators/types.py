"""Shared type aliases and value types for the combinators."""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from attrs import define, field, validators

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")

Predicate = Callable[[A], bool]
Thunk = Callable[[], B]


@define(frozen=True, slots=True)
class Case(Generic[A, B]):
    """A (predicate, transform) pair used by ``cond`` and ``cond_default``.

    Unpacks like a 2-tuple, so ``predicate, transform = case`` works and plain
    tuples can be mixed freely with ``Case`` instances.
    """

    predicate: Callable[[A], bool] = field(validator=validators.is_callable())
    transform: Callable[[A], B] = field(validator=validators.is_callable())

    def __iter__(self) -> Iterator[Any]:
        return iter((self.predicate, self.transform))
