"""
Unit tests for the binding layer, form definitions and screens.
"""

import pytest

from formrules.core.validators import InvalidMessageError, UnknownRuleError
from formrules.forms import (
    AuthenticationForm,
    AuthScreens,
    ForgetPasswordForm,
    Form,
    FormControl,
    FormDefinition,
    RegistrationForm,
    StaticFormDefinition,
    SubmissionReceipt,
)


class TestFormControl:
    """Tests for a single bound control"""

    def test_initial_state_is_valid(self):
        control = FormControl("email", "required|email")
        assert control.error is False
        assert control.hint is None

    def test_blur_marks_invalid_and_shows_hint(self, renderer):
        control = FormControl("email", "required|email", value="nope", renderer=renderer)

        error = control.on_blur()

        assert error.rule == "email"
        assert control.error is True
        assert control.hint == "This field must be a valid email address"
        assert ("show_hint", "email", control.hint) in renderer.events

    def test_blur_clears_hint_when_fixed(self, renderer):
        control = FormControl("email", "required|email", value="nope", renderer=renderer)
        control.on_blur()

        control.value = "john@example.com"
        assert control.on_blur() is None

        assert control.error is False
        assert control.hint is None
        assert renderer.events[-1] == ("clear_hint", "email", None)

    def test_state_machine_is_reenterable(self):
        control = FormControl("name", "required")
        for value, expected in [("", True), ("x", False), ("", True), ("y", False)]:
            control.value = value
            control.on_blur()
            assert control.error is expected

    def test_unbound_blur_uses_single_field_data(self):
        """Test a standalone control sees no sibling values"""
        control = FormControl("confirm", "equals:password", value="secret")
        assert control.on_blur().rule == "equals"

    def test_make_hint_requires_string(self):
        control = FormControl("name")
        with pytest.raises(InvalidMessageError):
            control.make_hint(42)

    def test_unknown_rule_is_not_converted_to_field_error(self):
        control = FormControl("name", "required|bogus", value="x")
        with pytest.raises(UnknownRuleError):
            control.on_blur()
        assert control.error is False


class TestForm:
    """Tests for form-level validation and submission"""

    def test_controls_bound_in_declaration_order(self):
        form = Form(RegistrationForm())
        assert [c.name for c in form.controls] == ["name", "email", "password"]
        assert form.control("password").rules == "required|string|min:6"

    def test_untouched_form_is_valid(self):
        assert Form(RegistrationForm()).is_valid is True

    def test_validate_all_invalid(self):
        form = Form(RegistrationForm())
        form.set_values({"name": "John1", "email": "not-an-email", "password": "abc"})

        result = form.validate_all()

        assert {f: e.rule for f, e in result.errors.items()} == {
            "name": "alpha",
            "email": "email",
            "password": "min",
        }
        assert form.is_valid is False
        assert all(control.error for control in form.controls)

    def test_validate_all_valid(self):
        form = Form(RegistrationForm())
        form.set_values({"name": "John", "email": "john@example.com", "password": "secret1"})

        assert form.validate_all().errors == {}
        assert form.is_valid is True

    def test_validate_all_is_idempotent(self):
        form = Form(RegistrationForm())
        form.set_values({"name": "", "email": "x", "password": "abc"})

        first = form.validate_all()
        second = form.validate_all()

        assert first.errors == second.errors

    def test_submit_blocked_when_invalid(self):
        submitted = []

        class Recording(StaticFormDefinition):
            name = "recording"
            rules = {"email": "required|email"}

            def on_submit(self, data):
                submitted.append(data)
                return super().on_submit(data)

        form = Form(Recording())
        form.set_values({"email": "bad"})

        assert form.submit() is None
        assert submitted == []

        form.set_values({"email": "john@example.com"})
        receipt = form.submit()

        assert isinstance(receipt, SubmissionReceipt)
        assert receipt.accepted is True
        assert submitted == [{"email": "john@example.com"}]

    def test_blur_inside_form_sees_siblings(self):
        form = Form(StaticFormDefinition("change_password", {
            "password": "required|min:6",
            "confirm": "required|equals:password",
        }))
        form.set_values({"password": "secret1", "confirm": "secret1"})

        assert form.control("confirm").on_blur() is None
        assert form.control("password").error is False

    def test_blur_only_updates_its_own_control(self):
        form = Form(RegistrationForm())
        form.set_values({"name": "", "email": "", "password": ""})

        form.control("email").on_blur()

        assert form.control("email").error is True
        assert form.control("name").error is False

    def test_bind_rejects_duplicate_controls(self):
        form = Form(RegistrationForm())
        with pytest.raises(ValueError):
            form.bind(FormControl("email"))

    def test_show_and_hide(self, renderer):
        form = Form(ForgetPasswordForm(), renderer=renderer)
        form.hide()
        assert form.visible is False
        form.show()
        assert form.visible is True
        assert renderer.events[-2:] == [
            ("set_visible", "forget_password", False),
            ("set_visible", "forget_password", True),
        ]


class TestDefinitions:
    """Tests for the concrete form definitions"""

    def test_definitions_satisfy_protocol(self):
        for definition in (RegistrationForm(), AuthenticationForm(), ForgetPasswordForm()):
            assert isinstance(definition, FormDefinition)

    def test_default_rules_are_read_only(self):
        definition = StaticFormDefinition("empty")

        assert definition.rules_by_field() == {}
        with pytest.raises(TypeError):
            StaticFormDefinition.rules["field"] = "required"

    def test_login_rules(self):
        assert AuthenticationForm().rules_by_field() == {
            "email": "required|email",
            "password": "required",
        }


class TestAuthScreens:
    """Tests for switching between forms"""

    def test_login_shown_initially(self):
        screens = AuthScreens()
        assert screens.current is screens.authentication_form
        assert sum(form.visible for form in screens.forms) == 1

    def test_navigation(self):
        screens = AuthScreens()

        assert screens.go_to_register() is screens.registration_form
        assert screens.current is screens.registration_form

        screens.go_to_login()
        screens.go_to_forgot_password()
        assert screens.current is screens.forget_password_form

        screens.cancel_forgot_password()
        assert screens.current is screens.authentication_form
        assert sum(form.visible for form in screens.forms) == 1
