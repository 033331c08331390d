"""
Configuration errors and warnings raised by the rule machinery.

User input failures are never raised; they are reported as FieldError
entries. Everything in this module signals a developer mistake in how
rules were wired and is expected to propagate to the caller.
"""


class FormRulesConfigError(ValueError):
    """Base class for rule configuration mistakes."""

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        self.message = message
        super().__init__(f"[{rule_name}] {message}")


class UnknownRuleError(FormRulesConfigError):
    """Raised when a rule expression references a rule that is not registered."""

    def __init__(self, rule_name: str):
        super().__init__(rule_name, f'Rule with name "{rule_name}" is not registered')


class DuplicateRuleError(FormRulesConfigError):
    """Raised when registering a custom rule under a built-in rule name."""

    def __init__(self, rule_name: str):
        super().__init__(rule_name, f'Rule with name "{rule_name}" already exists')


class InvalidMessageError(FormRulesConfigError):
    """Raised when a message is neither a string nor a callable template."""


class RuleArgumentError(FormRulesConfigError):
    """Raised when a rule receives missing, extra or malformed arguments."""


class RuleSyntaxError(FormRulesConfigError):
    """Raised when a rule expression clause cannot be parsed (e.g. an empty rule name)."""


class UnsupportedValueWarning(UserWarning):
    """
    Emitted when a rule is applied to a value type it does not handle.

    The rule passes; the engine collects the warning into the result.
    """

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        self.message = message
        super().__init__(message)
