"""
Built-in rule predicates.

Every predicate takes the field value followed by the rule's string
arguments and returns True when the value passes. Cross-field predicates
additionally receive the full record as the keyword-only ``record``.
"""

import re
import warnings
from collections.abc import Mapping
from typing import Any

from ..models.field_value import ValueKind, kind_of
from .errors import RuleArgumentError, UnsupportedValueWarning

EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$'
)

# Latin plus the 33-letter Cyrillic alphabet (Ё/ё sit outside the А-я range)
ALPHA_PATTERN = re.compile(r"^[A-Za-zА-Яа-яЁё]*$")

# parseInt() semantics: a leading ASCII integer is enough
LEADING_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]")


def required(value: Any) -> bool:
    kind = kind_of(value)
    if kind in (ValueKind.STRING, ValueKind.LIST, ValueKind.RECORD):
        return len(value) > 0
    if kind is ValueKind.NULL:
        return False
    # numbers and booleans always count as present
    return True


def string(value: Any) -> bool:
    return kind_of(value) is ValueKind.STRING


def number(value: Any) -> bool:
    return kind_of(value) is ValueKind.NUMBER


def numeric(value: Any) -> bool:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return True
    if kind is ValueKind.STRING:
        return LEADING_INTEGER_PATTERN.match(value) is not None
    return False


def alpha(value: Any) -> bool:
    if kind_of(value) is not ValueKind.STRING:
        return False
    return ALPHA_PATTERN.fullmatch(value) is not None


def email(value: Any) -> bool:
    return EMAIL_PATTERN.fullmatch(str(value).lower()) is not None


def parse_bound(rule_name: str, raw: str | None) -> float:
    """
    Convert a textual bound argument ("6") into a number.

    Raises:
        RuleArgumentError: If the argument is missing or not numeric
    """
    if raw is None or raw == "":
        raise RuleArgumentError(rule_name, f'The "{rule_name}" rule requires a numeric argument')
    try:
        return float(raw)
    except ValueError:
        raise RuleArgumentError(rule_name, f'Argument "{raw}" of the "{rule_name}" rule is not a number')


def _measure(rule_name: str, value: Any) -> float | None:
    """Return the comparable size of a value, or None when unsupported."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return len(value)
    if kind is ValueKind.NUMBER:
        return value

    warnings.warn(
        UnsupportedValueWarning(
            rule_name,
            f'The "{rule_name}" rule works only with types: string, number (got {kind.value})',
        ),
        stacklevel=3,
    )
    return None


def min_(value: Any, bound: str | None = None) -> bool:
    limit = parse_bound("min", bound)
    size = _measure("min", value)
    return size is None or size >= limit


def max_(value: Any, bound: str | None = None) -> bool:
    limit = parse_bound("max", bound)
    size = _measure("max", value)
    return size is None or size <= limit


def equals(value: Any, other_field: str, *, record: Mapping[str, Any]) -> bool:
    """Strict equality against another field of the same record."""
    other = record.get(other_field)
    return kind_of(value) is kind_of(other) and value == other
