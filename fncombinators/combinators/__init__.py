"""Pure function combinators for pipeline-style composition."""

from .adapters import (
    converge,
    converge3,
    converge_list,
    curry,
    curry3,
    flip,
    fn_contra_map,
    fn_contra_map2,
    fn_contra_map3,
    uncurry,
    uncurry3,
)
from .arithmetic import (
    adding,
    divided_by_float,
    divided_by_int,
    multiplying,
    negated,
    subtracting,
)
from .flow import (
    always,
    cond,
    cond_default,
    if_else,
    maybe_when,
    unless,
    until,
    when,
)
from .mappings import is_member_of
from .predicates import (
    all_pass,
    always_false,
    always_true,
    any_pass,
    both,
    complement,
    either,
)
from .relations import (
    equals,
    greater_than,
    greater_than_equal_to,
    less_than,
    less_than_equal_to,
)
from .sequences import (
    deduplicate_consecutive_items,
    deduplicate_consecutive_items_by,
    filter_map,
    partition_while,
)
from .types import Case, Predicate, Thunk

__all__ = [
    # Types
    "Case",
    "Predicate",
    "Thunk",
    # Predicates
    "all_pass",
    "always_false",
    "always_true",
    "any_pass",
    "both",
    "complement",
    "either",
    # Relations
    "equals",
    "greater_than",
    "greater_than_equal_to",
    "less_than",
    "less_than_equal_to",
    # Arithmetic
    "adding",
    "divided_by_float",
    "divided_by_int",
    "multiplying",
    "negated",
    "subtracting",
    # Flow control
    "always",
    "cond",
    "cond_default",
    "if_else",
    "maybe_when",
    "unless",
    "until",
    "when",
    # Function-shape adapters
    "converge",
    "converge3",
    "converge_list",
    "curry",
    "curry3",
    "flip",
    "fn_contra_map",
    "fn_contra_map2",
    "fn_contra_map3",
    "uncurry",
    "uncurry3",
    # Mapping membership
    "is_member_of",
    # List scans
    "deduplicate_consecutive_items",
    "deduplicate_consecutive_items_by",
    "filter_map",
    "partition_while",
]
