"""Runtime kinds — the closed set of value categories the engine dispatches on."""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Dynamic category of a value, distinct from a schema's declared type."""

    NULL = "null"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"


def kind_of(value: Any) -> ValueKind:
    """Classify a value. bool is checked before int since bool subclasses int."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.ARRAY
    return ValueKind.UNKNOWN


def is_truthy(value: Any) -> bool:
    """Presence test used by ``required``.

    None, False, 0, NaN and "" count as missing; containers count as present
    even when empty.
    """
    kind = kind_of(value)
    if kind == ValueKind.NULL:
        return False
    if kind == ValueKind.BOOLEAN:
        return value
    if kind == ValueKind.NUMBER:
        return value == value and value != 0
    if kind == ValueKind.STRING:
        return value != ""
    return True
