"""
ValidationResult model representing the outcome of one validation pass (ephemeral).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """
    The first failing rule for a field.

    Attributes:
        rule: Name of the rule that failed
        message: Rendered human-readable message
    """

    model_config = ConfigDict(frozen=True)

    rule: str
    message: str


class RuleWarning(BaseModel):
    """
    Non-fatal notice raised while evaluating a rule.

    Used when a rule is applied to a value type it does not support
    (e.g. "min" on a list); the rule passes and the warning is reported here.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    rule: str
    message: str


class ValidationResult(BaseModel):
    """
    Outcome of validating a set of field values (ephemeral, never persisted).

    Attributes:
        errors: Field name -> first failure, only for invalid fields
        warnings: Non-blocking notices collected during the pass
    """

    errors: dict[str, FieldError] = Field(default_factory=dict)
    warnings: list[RuleWarning] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "errors": {
                    "password": {
                        "rule": "min",
                        "message": "The value must be at least 6 characters long",
                    }
                },
                "warnings": [],
            }
        }
    )

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_for(self, field: str) -> FieldError | None:
        return self.errors.get(field)

    def message_for(self, field: str) -> str | None:
        error = self.errors.get(field)
        return error.message if error else None

    def summary(self) -> str:
        """Join all error messages into one aggregate sentence list."""
        return ". ".join(error.message for error in self.errors.values())

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        data["is_valid"] = self.is_valid
        return data
