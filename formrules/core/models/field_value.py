"""
Tagged classification of raw field values.

Predicates branch on a ValueKind instead of chaining isinstance checks,
so every value type has exactly one defined behaviour.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Type tag for a field value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LIST = "list"
    RECORD = "record"
    NULL = "null"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value.

    bool is checked before int since bool is a subclass of int.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, int | float):
        return ValueKind.NUMBER
    if isinstance(value, list | tuple):
        return ValueKind.LIST
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    return ValueKind.OTHER
