"""
Rule configuration management.

Loads per-form rule expressions, message overrides and field display names
from YAML files, and provides a builder for assembling rule mappings in code.
"""

from pathlib import Path
from typing import Any

import yaml

from ..validators import RuleRegistry
from .parser import parse


class RuleConfigLoader:
    """
    Loads form rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    forms:
      registration:
        name: required|alpha
        email: required|email
        password: required|string|min:6

    messages:
      required: "Please fill in this field"
      min: "At least {0} characters"

    display_names:
      confirm: Password confirmation
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")
        self._config: dict[str, Any] | None = None

    @property
    def config(self) -> dict[str, Any]:
        if self._config is None:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)

            if not isinstance(config, dict) or "forms" not in config:
                raise ValueError("Configuration file must contain 'forms' section")

            self._config = config
        return self._config

    def load_forms(self, registry: RuleRegistry | None = None) -> dict[str, dict[str, str]]:
        """
        Load and check rule expressions for every form.

        Args:
            registry: Registry used to reject unknown rule names early
                      (built-ins only if omitted)

        Returns:
            Form name -> {field name: rule expression}

        Raises:
            ValueError: If the forms section is malformed
            UnknownRuleError: If an expression references an unknown rule
        """
        registry = registry or RuleRegistry()
        forms = self.config["forms"]
        if not isinstance(forms, dict):
            raise ValueError("'forms' section must be a mapping of form names to field rules")

        result = {}
        for form_name, field_rules in forms.items():
            if not isinstance(field_rules, dict):
                raise ValueError(f"Rules for form '{form_name}' must be a mapping")

            result[str(form_name)] = {
                str(field_name): self._parse_expression(form_name, field_name, expression, registry)
                for field_name, expression in field_rules.items()
            }

        return result

    def load_form(self, form_name: str, registry: RuleRegistry | None = None) -> dict[str, str]:
        forms = self.load_forms(registry)
        if form_name not in forms:
            raise ValueError(f"Form '{form_name}' is not defined in {self.config_path}")
        return forms[form_name]

    def load_messages(self) -> dict[str, str]:
        return self._string_section("messages")

    def load_display_names(self) -> dict[str, str]:
        return self._string_section("display_names")

    def apply_to(self, registry: RuleRegistry) -> RuleRegistry:
        """Apply message overrides and display names to a registry."""
        for name, template in self.load_messages().items():
            registry.set_message(name, template)
        for field_name, label in self.load_display_names().items():
            registry.set_display_name(field_name, label)
        return registry

    def _string_section(self, section: str) -> dict[str, str]:
        values = self.config.get(section) or {}
        if not isinstance(values, dict):
            raise ValueError(f"'{section}' section must be a mapping")

        for key, value in values.items():
            if not isinstance(value, str):
                raise ValueError(f"Value of '{section}.{key}' must be a string")

        return {str(key): value for key, value in values.items()}

    def _parse_expression(
        self,
        form_name: str,
        field_name: str,
        expression: Any,
        registry: RuleRegistry,
    ) -> str:
        if expression is None:
            expression = ""
        if not isinstance(expression, str):
            raise ValueError(f"Rule expression for '{form_name}.{field_name}' must be a string")

        for spec in parse(expression):
            registry.lookup(spec.name)

        return expression


class RuleConfigBuilder:
    """
    Programmatically build a field -> rule expression mapping.
    """

    def __init__(self):
        self.rules: dict[str, list[str]] = {}

    def add(self, field_name: str, expression: str) -> "RuleConfigBuilder":
        """Append every clause of an expression to a field."""
        for spec in parse(expression):
            self.rules.setdefault(field_name, []).append(str(spec))
        self.rules.setdefault(field_name, [])
        return self

    def rule(self, field_name: str, name: str, *args: Any) -> "RuleConfigBuilder":
        """Append a single rule with arguments."""
        clause = f"{name}:{','.join(str(arg) for arg in args)}" if args else name
        self.rules.setdefault(field_name, []).append(clause)
        return self

    def required(self, field_name: str) -> "RuleConfigBuilder":
        return self.rule(field_name, "required")

    def build(self) -> dict[str, str]:
        """Build and return the field -> expression mapping."""
        return {field_name: "|".join(clauses) for field_name, clauses in self.rules.items()}
