"""
Rule expression parser.

Grammar (no escaping of '|', ':' or ','):

    expr   := clause ('|' clause)*
    clause := name (':' arg (',' arg)*)?
"""

from collections.abc import Iterable
from functools import lru_cache

from ..models.rule_spec import RuleSpec
from ..validators.errors import RuleSyntaxError

CLAUSE_SEPARATOR = "|"
ARGS_SEPARATOR = ":"
ARG_SEPARATOR = ","

FieldRules = tuple[RuleSpec, ...]


def parse_clause(clause: str) -> RuleSpec:
    """
    Parse a single clause ("min:6") into a RuleSpec.

    Only the first ':' separates the name; the rest belongs to the arguments.

    Raises:
        RuleSyntaxError: If the clause has no rule name
    """
    name, sep, arg_string = clause.partition(ARGS_SEPARATOR)
    name = name.strip()
    if not name:
        raise RuleSyntaxError(clause, f"Clause {clause!r} has no rule name")
    args = tuple(arg.strip() for arg in arg_string.split(ARG_SEPARATOR)) if sep else ()
    return RuleSpec(name=name, args=args)


@lru_cache(maxsize=512)
def parse(expression: str | None) -> FieldRules:
    """
    Parse a rule expression into ordered rule specs.

    Rule names are not checked here; unknown names surface at evaluation.

    Args:
        expression: Pipe-delimited rule expression ("required|string|min:6")

    Returns:
        Tuple of RuleSpec in textual order (empty for an empty expression)
    """
    if not expression:
        return ()

    return tuple(
        parse_clause(clause)
        for clause in expression.split(CLAUSE_SEPARATOR)
        if clause.strip()
    )


def format_rules(rules: Iterable[RuleSpec]) -> str:
    """Render rule specs back into expression text."""
    return CLAUSE_SEPARATOR.join(str(rule) for rule in rules)
