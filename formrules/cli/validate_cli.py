"""
Command-line interface for validating form data against rule expressions.

Usage:
    formrules validate --form <form_name> --data <values.json> [--rules <rules.yaml>]
    formrules parse "required|string|min:6"
    formrules rules [--rules <rules.yaml>]
"""

import argparse
import json
import sys
from pathlib import Path

from ..core.rules import RuleConfigLoader, Validator, parse
from ..core.validators import FormRulesConfigError, RuleRegistry
from ..forms.definitions import FORM_DEFINITIONS
from ..observability.logger import get_logger

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def build_registry(rules_path: str | None) -> RuleRegistry:
    registry = RuleRegistry()
    if rules_path:
        RuleConfigLoader(rules_path).apply_to(registry)
    return registry


def load_form_rules(form_name: str, rules_path: str | None, registry: RuleRegistry) -> dict[str, str]:
    """
    Resolve a form's rules from a config file, or from the built-in forms.

    Raises:
        ValueError: If the form is unknown
    """
    if rules_path:
        return RuleConfigLoader(rules_path).load_form(form_name, registry)

    definition = FORM_DEFINITIONS.get(form_name)
    if definition is None:
        raise ValueError(
            f"Unknown form '{form_name}'. Built-in forms: {', '.join(sorted(FORM_DEFINITIONS))}"
        )
    return definition().rules_by_field()


def validate_command(args) -> int:
    """
    Execute validate command.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    data_path = Path(args.data)
    if not data_path.exists():
        logger.error(f"Data file not found: {args.data}")
        return EXIT_CONFIG_ERROR

    try:
        with open(data_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Data file is not valid JSON: {args.data}: {e}")
        return EXIT_CONFIG_ERROR

    if not isinstance(data, dict):
        logger.error(f"Data file must contain a JSON object: {args.data}")
        return EXIT_CONFIG_ERROR

    try:
        registry = build_registry(args.rules)
        rules_by_field = load_form_rules(args.form, args.rules, registry)
        result = Validator(registry).validate(data, rules_by_field)
    except (FormRulesConfigError, ValueError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return EXIT_VALID if result.is_valid else EXIT_INVALID


def parse_command(args) -> int:
    try:
        rules = parse(args.expression)
    except FormRulesConfigError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    print(json.dumps([spec.model_dump(mode="json") for spec in rules], indent=2))
    return EXIT_VALID


def rules_command(args) -> int:
    try:
        registry = build_registry(args.rules)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    for name in registry.names():
        print(name)
    return EXIT_VALID


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="formrules",
        description="Validate form values against rule expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate values against the built-in registration form
  formrules validate --form registration --data signup.json

  # Validate against forms defined in a YAML file
  formrules validate --rules config/forms.yaml --form checkout --data order.json

  # Show how an expression is parsed
  formrules parse "required|string|min:6"
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    validate_parser = subparsers.add_parser("validate", help="Validate a JSON object of field values")
    validate_parser.add_argument(
        "--form",
        required=True,
        help="Form name (built-in: registration, login, forget_password)"
    )
    validate_parser.add_argument(
        "--data",
        required=True,
        help="Path to a JSON file with field values"
    )
    validate_parser.add_argument(
        "--rules",
        default=None,
        help="Path to a rules YAML file (default: built-in forms)"
    )

    parse_parser = subparsers.add_parser("parse", help="Parse a rule expression")
    parse_parser.add_argument("expression", help="Rule expression, e.g. required|min:6")

    rules_parser = subparsers.add_parser("rules", help="List available rules")
    rules_parser.add_argument(
        "--rules",
        default=None,
        help="Path to a rules YAML file"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_INVALID

    commands = {
        "validate": validate_command,
        "parse": parse_command,
        "rules": rules_command,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
