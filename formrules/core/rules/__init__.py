"""
Rule expression parsing, evaluation and configuration management.
"""

from .parser import FieldRules, format_rules, parse
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import Validator, get_default_validator, validate

__all__ = [
    "FieldRules",
    "format_rules",
    "parse",
    "RuleConfigBuilder",
    "RuleConfigLoader",
    "Validator",
    "get_default_validator",
    "validate",
]
