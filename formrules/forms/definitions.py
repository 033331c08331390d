"""
Form definitions: the rule mapping and submit action of each concrete screen.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from ..observability.logger import get_logger

logger = get_logger(__name__)


class SubmissionReceipt(BaseModel):
    """
    Acknowledgment returned by a form's submit action.

    Attributes:
        form: Name of the submitted form
        accepted: Whether the submission was accepted
        fields: Names of the submitted fields
    """

    form: str
    accepted: bool = True
    fields: list[str] = Field(default_factory=list)


@runtime_checkable
class FormDefinition(Protocol):
    """What a concrete form must provide to the binding layer."""

    name: str

    def rules_by_field(self) -> dict[str, str]: ...

    def on_submit(self, data: Mapping[str, Any]) -> SubmissionReceipt: ...


class StaticFormDefinition:
    """
    Form definition backed by a fixed rule mapping.

    Submission is acknowledged locally; nothing is sent anywhere.
    """

    name = "form"
    rules: Mapping[str, str] = MappingProxyType({})

    def __init__(self, name: str | None = None, rules: Mapping[str, str] | None = None):
        if name is not None:
            self.name = name
        if rules is not None:
            self.rules = rules

    def rules_by_field(self) -> dict[str, str]:
        return dict(self.rules)

    def on_submit(self, data: Mapping[str, Any]) -> SubmissionReceipt:
        logger.info(f"Form submitted: {self.name}", extra={"form": self.name, "fields": list(data)})
        return SubmissionReceipt(form=self.name, fields=list(data))


class RegistrationForm(StaticFormDefinition):
    name = "registration"
    rules = {
        "name": "required|alpha",
        "email": "required|email",
        "password": "required|string|min:6",
    }


class AuthenticationForm(StaticFormDefinition):
    name = "login"
    rules = {
        "email": "required|email",
        "password": "required",
    }


class ForgetPasswordForm(StaticFormDefinition):
    name = "forget_password"
    rules = {
        "email": "required|email",
    }


FORM_DEFINITIONS: dict[str, type[StaticFormDefinition]] = {
    RegistrationForm.name: RegistrationForm,
    AuthenticationForm.name: AuthenticationForm,
    ForgetPasswordForm.name: ForgetPasswordForm,
}
