"""
Core data models for the form validation engine.

Result models use Pydantic for runtime validation and serialization.
"""

from .field_value import ValueKind, kind_of
from .rule_spec import RuleSpec
from .validation_result import FieldError, RuleWarning, ValidationResult

__all__ = [
    "ValueKind",
    "kind_of",
    "RuleSpec",
    "FieldError",
    "RuleWarning",
    "ValidationResult",
]
