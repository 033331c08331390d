"""
Unit tests for built-in rule predicates and messages.

Includes property-based testing with hypothesis for predicates.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from formrules.core.models import ValueKind, kind_of
from formrules.core.validators import BUILTIN_MESSAGES, RuleArgumentError, UnsupportedValueWarning
from formrules.core.validators import builtin_rules as rules


class TestKindOf:
    """Tests for value classification"""

    @pytest.mark.parametrize("value, kind", [
        ("abc", ValueKind.STRING),
        (5, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        (True, ValueKind.BOOLEAN),
        ([1], ValueKind.LIST),
        ((1,), ValueKind.LIST),
        ({"a": 1}, ValueKind.RECORD),
        (None, ValueKind.NULL),
        (object(), ValueKind.OTHER),
    ])
    def test_classification(self, value, kind):
        assert kind_of(value) is kind


class TestRequired:
    """Tests for the required rule"""

    def test_non_empty_string_passes(self):
        assert rules.required("John") is True

    def test_empty_values_fail(self):
        assert rules.required("") is False
        assert rules.required([]) is False
        assert rules.required({}) is False

    def test_non_empty_collections_pass(self):
        assert rules.required(["a"]) is True
        assert rules.required({"key": "value"}) is True

    def test_null_fails(self):
        assert rules.required(None) is False

    def test_numbers_and_booleans_are_present(self):
        assert rules.required(0) is True
        assert rules.required(False) is True

    @given(st.text(min_size=1))
    def test_property_any_nonempty_string_passes(self, value):
        assert rules.required(value) is True


class TestTypeRules:
    """Tests for string, number and numeric"""

    def test_string(self):
        assert rules.string("abc") is True
        assert rules.string(5) is False

    def test_number_excludes_booleans(self):
        assert rules.number(5) is True
        assert rules.number(1.5) is True
        assert rules.number(True) is False
        assert rules.number("5") is False

    def test_numeric_accepts_leading_integer(self):
        assert rules.numeric(7) is True
        assert rules.numeric("42") is True
        assert rules.numeric(" -3") is True
        assert rules.numeric("12abc") is True

    def test_numeric_rejects_non_numbers(self):
        assert rules.numeric("abc") is False
        assert rules.numeric("") is False
        assert rules.numeric(True) is False
        assert rules.numeric(None) is False

    def test_numeric_requires_ascii_digits(self):
        """Test non-ASCII digits (Arabic-Indic, fullwidth) are not integers"""
        assert rules.numeric("٣") is False
        assert rules.numeric("７") is False

    @given(st.integers())
    def test_property_integer_strings_are_numeric(self, value):
        assert rules.numeric(str(value)) is True


class TestAlpha:
    """Tests for the alpha rule"""

    def test_latin_letters(self):
        assert rules.alpha("John") is True

    def test_cyrillic_letters_including_yo(self):
        assert rules.alpha("Иван") is True
        assert rules.alpha("Ёжик") is True
        assert rules.alpha("ёлка") is True

    def test_empty_string_passes(self):
        assert rules.alpha("") is True

    def test_digits_and_spaces_fail(self):
        assert rules.alpha("John1") is False
        assert rules.alpha("John Smith") is False

    def test_non_strings_fail(self):
        assert rules.alpha(5) is False

    def test_trailing_newline_fails(self):
        assert rules.alpha("John\n") is False
        assert rules.alpha("\n") is False


class TestEmail:
    """Tests for the email rule"""

    @pytest.mark.parametrize("value", [
        "john@example.com",
        "John.Smith@Example.COM",
        "a.b-c@sub.domain.org",
        "user@[192.168.0.1]",
    ])
    def test_valid_addresses(self, value):
        assert rules.email(value) is True

    @pytest.mark.parametrize("value", [
        "not-an-email",
        "john@",
        "@example.com",
        "john@example",
        "john doe@example.com",
        "",
    ])
    def test_invalid_addresses(self, value):
        assert rules.email(value) is False

    def test_non_string_uses_string_form(self):
        assert rules.email(12345) is False

    def test_trailing_newline_fails(self):
        assert rules.email("john@example.com\n") is False


class TestMinMax:
    """Tests for min and max"""

    def test_min_string_length(self):
        assert rules.min_("abcde", "6") is False
        assert rules.min_("abcdef", "6") is True

    def test_min_number_value(self):
        assert rules.min_(5, "6") is False
        assert rules.min_(6, "6") is True
        assert rules.min_(6.5, "6") is True

    def test_max_string_length_and_number(self):
        assert rules.max_("abc", "3") is True
        assert rules.max_("abcd", "3") is False
        assert rules.max_(10, "9.5") is False

    def test_min_unsupported_type_passes_with_warning(self):
        with pytest.warns(UnsupportedValueWarning, match="string, number"):
            assert rules.min_(["a"], "6") is True

    def test_min_requires_numeric_argument(self):
        with pytest.raises(RuleArgumentError):
            rules.min_("abc", "six")

    def test_min_requires_an_argument(self):
        with pytest.raises(RuleArgumentError) as exc_info:
            rules.min_("abc")

        assert exc_info.value.rule_name == "min"

    @given(st.text(), st.integers(min_value=0, max_value=20))
    def test_property_min_matches_length(self, value, bound):
        assert rules.min_(value, str(bound)) is (len(value) >= bound)


class TestEquals:
    """Tests for the cross-field equals rule"""

    def test_equal_values_pass(self):
        assert rules.equals("a", "password", record={"password": "a"}) is True

    def test_different_values_fail(self):
        assert rules.equals("b", "password", record={"password": "a"}) is False

    def test_missing_other_field_fails(self):
        assert rules.equals("a", "password", record={}) is False

    def test_equality_is_strict(self):
        assert rules.equals(1, "other", record={"other": "1"}) is False
        assert rules.equals(1, "other", record={"other": True}) is False


class TestMessages:
    """Tests for the built-in message table"""

    def test_min_message_depends_on_value_type(self):
        assert BUILTIN_MESSAGES["min"](5, "6") == "The number must be at least 6"
        assert BUILTIN_MESSAGES["min"]("abc", "6") == "The value must be at least 6 characters long"

    def test_equals_message_uses_display_name(self):
        assert BUILTIN_MESSAGES["equals"]("x", "password") == "This field must match Password"

    def test_equals_message_falls_back_to_field_name(self):
        assert BUILTIN_MESSAGES["equals"]("x", "pin") == "This field must match pin"

    def test_builtin_table_is_read_only(self):
        with pytest.raises(TypeError):
            BUILTIN_MESSAGES["required"] = "changed"
