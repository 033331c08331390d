"""
Screen coordinator for the login, registration and password recovery forms.

Exactly one form is visible at a time; navigation links switch between them.
"""

from ..core.rules import Validator
from ..observability.logger import get_logger
from .binding import ControlRenderer, Form
from .definitions import AuthenticationForm, ForgetPasswordForm, RegistrationForm

logger = get_logger(__name__)


class AuthScreens:
    """Owns the three authentication forms and their visibility."""

    def __init__(self, validator: Validator | None = None, renderer: ControlRenderer | None = None):
        self.registration_form = Form(RegistrationForm(), validator, renderer)
        self.authentication_form = Form(AuthenticationForm(), validator, renderer)
        self.forget_password_form = Form(ForgetPasswordForm(), validator, renderer)
        self.init()

    @property
    def forms(self) -> list[Form]:
        return [self.registration_form, self.authentication_form, self.forget_password_form]

    @property
    def current(self) -> Form:
        return next(form for form in self.forms if form.visible)

    def init(self) -> None:
        self._switch_to(self.authentication_form)

    def go_to_register(self) -> Form:
        return self._switch_to(self.registration_form)

    def go_to_login(self) -> Form:
        return self._switch_to(self.authentication_form)

    def go_to_forgot_password(self) -> Form:
        return self._switch_to(self.forget_password_form)

    def cancel_forgot_password(self) -> Form:
        return self._switch_to(self.authentication_form)

    def _switch_to(self, target: Form) -> Form:
        for form in self.forms:
            if form is not target:
                form.hide()
        target.show()
        logger.debug(f"Showing form {target.name}", extra={"form": target.name})
        return target
