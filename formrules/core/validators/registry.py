"""
Rule registry - central lookup of validation rules and their messages by name.

Built-in rules live in a read-only table; custom rules and message overrides
live in a mutable overlay consulted first at lookup time. Registering a
custom rule under a built-in name is rejected.
"""

import inspect
from collections import ChainMap
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ...observability.logger import get_logger
from . import builtin_rules
from .errors import DuplicateRuleError, InvalidMessageError, RuleArgumentError, UnknownRuleError
from .messages import DEFAULT_MESSAGE, DISPLAY_NAMES, MessageTemplate, build_messages

logger = get_logger(__name__)

Predicate = Callable[..., bool]


@dataclass(frozen=True)
class RuleDefinition:
    """
    A named predicate with its default message.

    Attributes:
        name: Rule name used in expressions
        predicate: Callable(value, *args) -> bool
        message: Default message template (None falls back to the generic text)
        cross_field: When True the predicate also receives ``record=`` (the full data)
    """

    name: str
    predicate: Predicate
    message: MessageTemplate | None = None
    cross_field: bool = False
    signature: inspect.Signature | None = field(default=None, compare=False, repr=False)

    def check(self, value: Any, args: tuple[str, ...], record: Mapping[str, Any]) -> bool:
        """
        Evaluate the predicate.

        Raises:
            RuleArgumentError: If the arguments do not fit the predicate's signature
        """
        kwargs = {"record": record} if self.cross_field else {}
        if self.signature is not None:
            try:
                self.signature.bind(value, *args, **kwargs)
            except TypeError as e:
                raise RuleArgumentError(self.name, f"Invalid arguments {list(args)}: {e}")
        return bool(self.predicate(value, *args, **kwargs))


def _signature_of(predicate: Predicate) -> inspect.Signature | None:
    try:
        return inspect.signature(predicate)
    except (TypeError, ValueError):
        # builtins without introspectable signatures are called unchecked
        return None


def _make_rule(
    name: str,
    predicate: Predicate,
    message: MessageTemplate | None = None,
    cross_field: bool = False,
) -> RuleDefinition:
    return RuleDefinition(
        name=name,
        predicate=predicate,
        message=message,
        cross_field=cross_field,
        signature=_signature_of(predicate),
    )


def _check_message(name: str, message: Any) -> None:
    if message is not None and not isinstance(message, str) and not callable(message):
        raise InvalidMessageError(
            name, f"Message must be a string or a callable, got {type(message).__name__}"
        )


BUILTIN_RULES: Mapping[str, RuleDefinition] = MappingProxyType({
    "required": _make_rule("required", builtin_rules.required),
    "string": _make_rule("string", builtin_rules.string),
    "number": _make_rule("number", builtin_rules.number),
    "numeric": _make_rule("numeric", builtin_rules.numeric),
    "alpha": _make_rule("alpha", builtin_rules.alpha),
    "email": _make_rule("email", builtin_rules.email),
    "min": _make_rule("min", builtin_rules.min_),
    "max": _make_rule("max", builtin_rules.max_),
    "equals": _make_rule("equals", builtin_rules.equals, cross_field=True),
})


class RuleRegistry:
    """
    Lookup table of rules and message templates.

    Custom rules may not shadow built-ins, but re-registering a custom name
    replaces the earlier definition. Messages can be overridden freely,
    built-in or not.
    """

    def __init__(
        self,
        messages: Mapping[str, MessageTemplate] | None = None,
        display_names: Mapping[str, str] | None = None,
    ):
        """
        Initialize registry.

        Args:
            messages: Message overrides keyed by rule name
            display_names: Extra field labels for cross-field messages
        """
        self._custom_rules: dict[str, RuleDefinition] = {}
        self._custom_messages: dict[str, MessageTemplate] = {}
        self._display_names: dict[str, str] = dict(display_names or {})
        self._builtin_messages = build_messages(ChainMap(self._display_names, DISPLAY_NAMES))
        self._rules = ChainMap(self._custom_rules, BUILTIN_RULES)

        for name, template in (messages or {}).items():
            self.set_message(name, template)

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def is_builtin(self, name: str) -> bool:
        return name in BUILTIN_RULES

    def names(self) -> list[str]:
        """Return all rule names, built-ins first, in registration order."""
        return list(BUILTIN_RULES) + [n for n in self._custom_rules if n not in BUILTIN_RULES]

    def lookup(self, name: str) -> RuleDefinition:
        """
        Find a rule by name.

        Raises:
            UnknownRuleError: If no built-in or custom rule has this name
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def register(
        self,
        name: str,
        predicate: Predicate,
        message: MessageTemplate | None = None,
        *,
        cross_field: bool = False,
    ) -> RuleDefinition:
        """
        Register a custom rule.

        Args:
            name: Rule name to use in expressions
            predicate: Callable(value, *args) -> bool
            message: Optional message template (string or callable)
            cross_field: Pass the full record to the predicate as ``record=``

        Returns:
            The stored RuleDefinition

        Raises:
            DuplicateRuleError: If name is a built-in rule
            InvalidMessageError: If message is not a string or callable
        """
        if name in BUILTIN_RULES:
            raise DuplicateRuleError(name)
        if not callable(predicate):
            raise TypeError(f'Predicate for rule "{name}" must be callable')
        _check_message(name, message)

        if name in self._custom_rules:
            logger.warning(f'Replacing custom rule "{name}"', extra={"rule": name})

        definition = _make_rule(name, predicate, message, cross_field)
        self._custom_rules[name] = definition
        logger.debug(f'Registered custom rule "{name}"', extra={"rule": name, "cross_field": cross_field})
        return definition

    def set_message(self, name: str, template: MessageTemplate) -> None:
        """Override the message for a rule (built-in or custom)."""
        if template is None:
            raise InvalidMessageError(name, "Message must be a string or a callable, got NoneType")
        _check_message(name, template)
        self._custom_messages[name] = template

    def set_display_name(self, field_name: str, label: str) -> None:
        self._display_names[field_name] = label

    def display_name(self, field_name: str) -> str:
        return self._display_names.get(field_name, DISPLAY_NAMES.get(field_name, field_name))

    def message_for(self, name: str) -> MessageTemplate:
        """Resolve a template: custom override, then rule default, then built-in table."""
        if name in self._custom_messages:
            return self._custom_messages[name]

        rule = self._custom_rules.get(name)
        if rule is not None and rule.message is not None:
            return rule.message

        return self._builtin_messages.get(name, DEFAULT_MESSAGE)

    def render_message(self, name: str, value: Any, args: Iterable[str] = ()) -> str:
        """
        Render the message for a failed rule.

        String templates are formatted with the rule arguments as positional
        fields and the value as ``{value}``.

        Raises:
            InvalidMessageError: If the template does not render to a string
        """
        args = tuple(args)
        template = self.message_for(name)

        if isinstance(template, str):
            try:
                return template.format(*args, value=value)
            except (IndexError, KeyError) as e:
                raise InvalidMessageError(name, f"Message template {template!r} cannot be rendered: {e}")

        message = template(value, *args)
        if not isinstance(message, str):
            raise InvalidMessageError(
                name, f"Message template returned {type(message).__name__}, expected str"
            )
        return message

    def copy(self) -> "RuleRegistry":
        """Return an independent registry with the same custom rules, messages and labels."""
        clone = RuleRegistry(display_names=self._display_names)
        clone._custom_rules.update(self._custom_rules)
        clone._custom_messages.update(self._custom_messages)
        return clone
