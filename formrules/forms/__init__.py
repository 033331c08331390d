"""
Binding layer and concrete form definitions.
"""

from .binding import ControlRenderer, Form, FormControl, NullRenderer, RecordingRenderer
from .definitions import (
    FORM_DEFINITIONS,
    AuthenticationForm,
    ForgetPasswordForm,
    FormDefinition,
    RegistrationForm,
    StaticFormDefinition,
    SubmissionReceipt,
)
from .screens import AuthScreens

__all__ = [
    "ControlRenderer",
    "Form",
    "FormControl",
    "NullRenderer",
    "RecordingRenderer",
    "FORM_DEFINITIONS",
    "AuthenticationForm",
    "ForgetPasswordForm",
    "FormDefinition",
    "RegistrationForm",
    "StaticFormDefinition",
    "SubmissionReceipt",
    "AuthScreens",
]
