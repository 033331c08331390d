"""
Pytest configuration and fixtures for formrules tests
"""
import pytest

from formrules.core.rules import Validator
from formrules.core.validators import RuleRegistry
from formrules.forms import RecordingRenderer

REGISTRATION_RULES = {
    "name": "required|alpha",
    "email": "required|email",
    "password": "required|string|min:6",
}


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh registry with only built-in rules"""
    return RuleRegistry()


@pytest.fixture
def validator(registry) -> Validator:
    """Validator backed by the fresh registry"""
    return Validator(registry)


@pytest.fixture
def registration_rules() -> dict[str, str]:
    return dict(REGISTRATION_RULES)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def rules_file(tmp_path):
    """
    Write a rules YAML file and return its path

    Returns:
        Callable taking the YAML text
    """
    def _write(text: str):
        path = tmp_path / "forms.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
