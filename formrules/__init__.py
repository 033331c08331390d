"""
formrules - a small rule-expression form validation engine.

Rule expressions such as ``"required|string|min:6"`` are parsed into
ordered rule specs and evaluated per field, stopping at the first failure.
"""

from .core.models import FieldError, RuleSpec, RuleWarning, ValidationResult
from .core.rules import RuleConfigBuilder, RuleConfigLoader, Validator, parse, validate
from .core.validators import (
    DuplicateRuleError,
    FormRulesConfigError,
    InvalidMessageError,
    RuleArgumentError,
    RuleRegistry,
    RuleSyntaxError,
    UnknownRuleError,
)

__version__ = "0.1.0"

__all__ = [
    "FieldError",
    "RuleSpec",
    "RuleWarning",
    "ValidationResult",
    "RuleConfigBuilder",
    "RuleConfigLoader",
    "Validator",
    "parse",
    "validate",
    "RuleRegistry",
    "FormRulesConfigError",
    "UnknownRuleError",
    "DuplicateRuleError",
    "InvalidMessageError",
    "RuleArgumentError",
    "RuleSyntaxError",
]
