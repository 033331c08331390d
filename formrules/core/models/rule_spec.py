"""
RuleSpec model representing one parsed clause of a rule expression.
"""

from pydantic import BaseModel, ConfigDict, Field


class RuleSpec(BaseModel):
    """
    A single rule reference with its ordered string arguments.

    Attributes:
        name: Rule name as written in the expression ("min")
        args: Ordered arguments, always strings ("6",)
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"name": "min", "args": ["6"]}
        },
    )

    name: str = Field(..., min_length=1)
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}:{','.join(self.args)}"
