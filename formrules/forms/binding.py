"""
Field/form binding layer.

Associates validation results with input controls, tracks per-control
error state and aggregates it into form-level validity. Rendering goes
through a ControlRenderer so no UI toolkit is assumed.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..core.models import FieldError, ValidationResult
from ..core.rules import Validator, get_default_validator
from ..core.validators import InvalidMessageError
from ..observability.logger import get_logger

if TYPE_CHECKING:
    from .definitions import FormDefinition, SubmissionReceipt

logger = get_logger(__name__)


class ControlRenderer(Protocol):
    """Visual side of the binding layer, implemented by the UI glue."""

    def set_error(self, control: "FormControl", error: bool) -> None: ...

    def show_hint(self, control: "FormControl", message: str) -> None: ...

    def clear_hint(self, control: "FormControl") -> None: ...

    def set_visible(self, form: "Form", visible: bool) -> None: ...


class NullRenderer:
    """Renderer that draws nothing."""

    def set_error(self, control, error):
        pass

    def show_hint(self, control, message):
        pass

    def clear_hint(self, control):
        pass

    def set_visible(self, form, visible):
        pass


class RecordingRenderer:
    """Renderer that keeps an ordered log of rendering calls (headless use)."""

    def __init__(self):
        self.events: list[tuple[str, str, Any]] = []

    def set_error(self, control, error):
        self.events.append(("set_error", control.name, error))

    def show_hint(self, control, message):
        self.events.append(("show_hint", control.name, message))

    def clear_hint(self, control):
        self.events.append(("clear_hint", control.name, None))

    def set_visible(self, form, visible):
        self.events.append(("set_visible", form.name, visible))


class FormControl:
    """
    One input control bound to a field and its rule expression.

    State machine: Valid <-> Invalid on every validation, starting Valid.
    """

    def __init__(
        self,
        name: str,
        rules: str = "",
        value: Any = None,
        renderer: ControlRenderer | None = None,
        validator: Validator | None = None,
    ):
        self.name = name
        self.rules = rules
        self.value = value
        self.renderer = renderer or NullRenderer()
        self.validator = validator
        self.form: "Form | None" = None
        self.error = False
        self.hint: str | None = None

    def __repr__(self) -> str:
        return f"FormControl(name={self.name!r}, rules={self.rules!r}, error={self.error})"

    def _validator(self) -> Validator:
        if self.validator is not None:
            return self.validator
        if self.form is not None:
            return self.form.validator
        return get_default_validator()

    def on_blur(self) -> FieldError | None:
        """
        Validate this control alone and update its state.

        Sibling values of the owning form are visible to cross-field rules;
        only this control's rules run and only this control changes.
        """
        siblings = self.form.values() if self.form is not None else None
        result = self._validator().validate_field(self.name, self.value, self.rules, siblings)
        error = result.error_for(self.name)
        self.apply(error)
        return error

    def apply(self, error: FieldError | None) -> None:
        """Move the control to Invalid (with hint) or back to Valid."""
        if error is None:
            if self.error:
                logger.debug(f"Control became valid: {self.name}", extra={"field": self.name})
            self.error = False
            self.renderer.set_error(self, False)
            self.remove_hint()
        else:
            self.error = True
            self.renderer.set_error(self, True)
            self.make_hint(error.message)

    def make_hint(self, message: str) -> None:
        if not isinstance(message, str):
            raise InvalidMessageError(
                self.name, f'The "message" argument must be a string, got {type(message).__name__}'
            )
        self.hint = message
        self.renderer.show_hint(self, message)

    def remove_hint(self) -> None:
        if self.hint is not None:
            self.hint = None
            self.renderer.clear_hint(self)


class Form:
    """
    A set of bound controls driven by a FormDefinition.

    Controls are created for every field of ``definition.rules_by_field()``
    in declaration order; more can be attached with ``bind``.
    """

    def __init__(
        self,
        definition: "FormDefinition",
        validator: Validator | None = None,
        renderer: ControlRenderer | None = None,
    ):
        self.definition = definition
        self.name = definition.name
        self.validator = validator or get_default_validator()
        self.renderer = renderer or NullRenderer()
        self.controls: list[FormControl] = []
        self.visible = True
        self.last_result: ValidationResult | None = None

        for field_name, expression in definition.rules_by_field().items():
            self.bind(FormControl(field_name, expression, renderer=self.renderer))

    def __repr__(self) -> str:
        return f"Form(name={self.name!r}, controls={[c.name for c in self.controls]})"

    def bind(self, control: FormControl) -> FormControl:
        if any(existing.name == control.name for existing in self.controls):
            raise ValueError(f"Control '{control.name}' is already bound to form '{self.name}'")
        control.form = self
        self.controls.append(control)
        return control

    def control(self, name: str) -> FormControl:
        for control in self.controls:
            if control.name == name:
                return control
        raise KeyError(name)

    def set_values(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.control(name).value = value

    def values(self) -> dict[str, Any]:
        return {control.name: control.value for control in self.controls}

    def rules_by_field(self) -> dict[str, str]:
        return {control.name: control.rules for control in self.controls}

    def validate_all(self) -> ValidationResult:
        """Validate every control and update every control's state."""
        result = self.validator.validate(self.values(), self.rules_by_field())
        for control in self.controls:
            control.apply(result.error_for(control.name))

        self.last_result = result
        logger.debug(
            f"Validated form {self.name}",
            extra={"form": self.name, "invalid_fields": list(result.errors)},
        )
        return result

    @property
    def is_valid(self) -> bool:
        for control in self.controls:
            if control.error:
                return False
        return True

    def submit(self) -> "SubmissionReceipt | None":
        """
        Validate everything and hand the values to the definition when valid.

        Returns:
            The definition's submission result, or None when the form is invalid
        """
        self.validate_all()
        if not self.is_valid:
            logger.info(f"Submission blocked: {self.name}", extra={"form": self.name})
            return None
        return self.definition.on_submit(self.values())

    def show(self) -> None:
        self.visible = True
        self.renderer.set_visible(self, True)

    def hide(self) -> None:
        self.visible = False
        self.renderer.set_visible(self, False)
