"""Membership helpers with the mapping fixed first."""

from collections.abc import Hashable, Mapping
from typing import Any

from toolz import curry


@curry
def is_member_of(mapping: Mapping[Any, Any], key: Hashable) -> bool:
    """True when ``key`` is one of ``mapping``'s keys.

    Reverses the usual ``key in mapping`` order so one mapping can be tested
    against many keys, e.g. ``filter(is_member_of(index), keys)``.
    """
    return key in mapping
