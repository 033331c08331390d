"""
Validation engine for evaluating rule expressions against field values.

For each field with a rule expression the engine parses the expression,
runs the rules in order, and records the first failure. Configuration
errors (unknown rules, bad arguments) propagate to the caller untouched.
"""

import warnings
from collections.abc import Mapping
from typing import Any

from ...observability.logger import get_logger, log_operation
from ..models import FieldError, RuleSpec, RuleWarning, ValidationResult
from ..validators import RuleRegistry, UnsupportedValueWarning
from ..validators.messages import MessageTemplate
from .parser import parse

logger = get_logger(__name__)


class Validator:
    """
    Evaluates per-field rule expressions against a data record.

    The validator holds no per-call state, so one instance can be reused
    across passes and forms.
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        messages: Mapping[str, MessageTemplate] | None = None,
    ):
        """
        Initialize the validator.

        Args:
            registry: Rule registry to use (a fresh one if omitted)
            messages: Message overrides; applied to a copy when a registry is given
        """
        if registry is None:
            registry = RuleRegistry(messages=messages)
        elif messages:
            registry = registry.copy()
            for name, template in messages.items():
                registry.set_message(name, template)

        self.registry = registry

    def validate(
        self,
        data: Mapping[str, Any],
        rules_by_field: Mapping[str, str],
    ) -> ValidationResult:
        """
        Validate a record against per-field rule expressions.

        Args:
            data: Field name -> current value
            rules_by_field: Field name -> rule expression

        Returns:
            ValidationResult holding the first failure of every invalid field

        Raises:
            FormRulesConfigError: On unknown rules or malformed rule arguments
        """
        record = dict(data)
        errors: dict[str, FieldError] = {}
        rule_warnings: list[RuleWarning] = []

        with log_operation("validate", logger=logger, field_count=len(rules_by_field)):
            for field_name, expression in rules_by_field.items():
                if field_name not in record:
                    logger.debug(f"Skipping field without a value: {field_name}", extra={"field": field_name})
                    continue

                error = self._validate_value(field_name, record[field_name], parse(expression), record, rule_warnings)
                if error is not None:
                    errors[field_name] = error

        return ValidationResult(errors=errors, warnings=rule_warnings)

    def validate_field(
        self,
        field_name: str,
        value: Any,
        expression: str,
        record: Mapping[str, Any] | None = None,
    ) -> ValidationResult:
        """
        Validate a single field.

        Args:
            field_name: Field being validated
            value: Its current value
            expression: Its rule expression
            record: Sibling values for cross-field rules (the value itself wins)

        Returns:
            ValidationResult with at most one error
        """
        data = dict(record or {})
        data[field_name] = value
        return self.validate(data, {field_name: expression})

    def _validate_value(
        self,
        field_name: str,
        value: Any,
        rules: tuple[RuleSpec, ...],
        record: Mapping[str, Any],
        rule_warnings: list[RuleWarning],
    ) -> FieldError | None:
        for spec in rules:
            definition = self.registry.lookup(spec.name)

            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                passed = definition.check(value, spec.args, record)

            for warning in caught:
                if isinstance(warning.message, UnsupportedValueWarning):
                    logger.warning(
                        warning.message.message,
                        extra={"field": field_name, "rule": spec.name},
                    )
                    rule_warnings.append(
                        RuleWarning(field=field_name, rule=spec.name, message=warning.message.message)
                    )
                else:
                    warnings.warn_explicit(
                        warning.message, warning.category, warning.filename, warning.lineno
                    )

            if not passed:
                return FieldError(
                    rule=spec.name,
                    message=self.registry.render_message(spec.name, value, spec.args),
                )

        return None


_default_validator: Validator | None = None


def get_default_validator() -> Validator:
    """Return the shared validator backed by a registry of built-in rules."""
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def validate(data: Mapping[str, Any], rules_by_field: Mapping[str, str]) -> ValidationResult:
    """Validate with the shared default validator."""
    return get_default_validator().validate(data, rules_by_field)
