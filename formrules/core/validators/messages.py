"""
Built-in message templates.

Templates mirror rule names and take the same ``(value, *args)`` signature
as the predicates. The table is fixed; callers override entries through the
registry's message overlay.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from ..models.field_value import ValueKind, kind_of

MessageTemplate = Callable[..., str] | str

DEFAULT_MESSAGE = "The field is invalid"

# Human-readable labels used when a message names another field
DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    "name": "Name",
    "email": "Email",
    "password": "Password",
})


def _min_message(value: Any, bound: str = "") -> str:
    if kind_of(value) is ValueKind.NUMBER:
        return f"The number must be at least {bound}"
    return f"The value must be at least {bound} characters long"


def _max_message(value: Any, bound: str = "") -> str:
    if kind_of(value) is ValueKind.NUMBER:
        return f"The number must be at most {bound}"
    return f"The value must be at most {bound} characters long"


def build_messages(display_names: Mapping[str, str]) -> Mapping[str, MessageTemplate]:
    """
    Build the immutable built-in message table.

    Args:
        display_names: Field labels used by the "equals" message

    Returns:
        Read-only mapping of rule name -> template
    """

    def equals_message(value: Any, other_field: str = "") -> str:
        label = display_names.get(other_field, other_field)
        return f"This field must match {label}"

    return MappingProxyType({
        "required": "This field is required",
        "string": "This field must be a string",
        "email": "This field must be a valid email address",
        "number": "This field must be a number",
        "numeric": "This field must be a number",
        "alpha": "This field may only contain letters",
        "min": _min_message,
        "max": _max_message,
        "equals": equals_message,
    })


BUILTIN_MESSAGES = build_messages(DISPLAY_NAMES)
