"""Shared test fixtures - call-counting stubs and sample records.

Combinators are pure, so fixtures are plain values and function-scoped.
"""

from collections.abc import Callable
from typing import Any

from attrs import define
import pytest

from fncombinators.config import settings


class CallCounter:
    """Wrap a function and count how many times it is called."""

    def __init__(self, func: Callable[..., Any]):
        self.func = func
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.func(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@define(frozen=True, slots=True)
class Person:
    """Sample record for projection and converge tests."""

    first_name: str
    last_name: str
    age: int


@pytest.fixture
def counting():
    """Factory for call-counting stubs: ``counting(lambda x: x > 0)``."""
    return CallCounter


@pytest.fixture
def person():
    """A single sample person."""
    return Person(first_name="Ada", last_name="Lovelace", age=36)


@pytest.fixture
def people():
    """People in an order with adjacent and non-adjacent surname repeats."""
    return [
        Person(first_name="Ada", last_name="Lovelace", age=36),
        Person(first_name="Byron", last_name="Lovelace", age=52),
        Person(first_name="Alan", last_name="Turing", age=41),
        Person(first_name="Annabella", last_name="Lovelace", age=64),
    ]


@pytest.fixture
def until_cap(monkeypatch):
    """Set the configured ``until`` iteration cap for one test."""

    def apply(cap: int | None) -> None:
        monkeypatch.setattr(settings.flow, "until_max_iterations", cap)

    return apply
