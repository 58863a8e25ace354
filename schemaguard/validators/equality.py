"""Structural equality for enum, contains and uniqueItems."""

from typing import Any

from schemaguard.validators.kinds import ValueKind, kind_of


def values_equal(a: Any, b: Any) -> bool:
    """Deep equality between two values.

    Mappings match on key set and per-key values, sequences element-wise.
    Primitives must share a kind, so True never equals 1 while 1 equals 1.0.
    """
    kind = kind_of(a)
    if kind != kind_of(b):
        return False

    if kind == ValueKind.OBJECT:
        if len(a) != len(b):
            return False
        for key, a_val in a.items():
            if key not in b or not values_equal(a_val, b[key]):
                return False
        return True

    if kind == ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))

    if kind == ValueKind.UNKNOWN:
        return a is b

    return a == b


def contains_equal(candidates: list, value: Any) -> bool:
    """True if any candidate is structurally equal to value."""
    return any(values_equal(candidate, value) for candidate in candidates)
