"""
Rule predicates, message templates and the rule registry.
"""

from .errors import (
    DuplicateRuleError,
    FormRulesConfigError,
    InvalidMessageError,
    RuleArgumentError,
    RuleSyntaxError,
    UnknownRuleError,
    UnsupportedValueWarning,
)
from .messages import BUILTIN_MESSAGES, DEFAULT_MESSAGE, DISPLAY_NAMES
from .registry import BUILTIN_RULES, RuleDefinition, RuleRegistry

__all__ = [
    "FormRulesConfigError",
    "UnknownRuleError",
    "DuplicateRuleError",
    "InvalidMessageError",
    "RuleArgumentError",
    "RuleSyntaxError",
    "UnsupportedValueWarning",
    "BUILTIN_MESSAGES",
    "DEFAULT_MESSAGE",
    "DISPLAY_NAMES",
    "BUILTIN_RULES",
    "RuleDefinition",
    "RuleRegistry",
]
