"""Tests for single-value field validation."""

from __future__ import annotations

import pytest

from tabula.core.constants import FieldType
from tabula.validation.fields import RULES, FieldDefinition, validate_field

EMPTY_VALUES = ["", None]


def make_field(field_type: FieldType, *, required: bool = False, options=()) -> FieldDefinition:
    return FieldDefinition(name="Field", type=field_type, required=required, options=tuple(options))


def test_every_field_type_has_a_rule():
    assert set(RULES) == set(FieldType)


@pytest.mark.parametrize("field_type", list(FieldType))
@pytest.mark.parametrize("value", EMPTY_VALUES)
def test_required_empty_value_rejected_with_same_message(field_type, value):
    field = make_field(field_type, required=True, options=["a", "b"])
    assert validate_field(field, value) == "Field is required and cannot be empty"


@pytest.mark.parametrize("field_type", list(FieldType))
@pytest.mark.parametrize("value", EMPTY_VALUES)
def test_optional_empty_value_accepted(field_type, value):
    field = make_field(field_type, options=["a", "b"])
    assert validate_field(field, value) is None


def test_required_dropdown_empty_string_reports_required_not_option():
    field = make_field(FieldType.DROPDOWN, required=True, options=["a", "b"])
    message = validate_field(field, "")
    assert "required" in message
    assert "options" not in message


@pytest.mark.parametrize("field_type", [FieldType.TEXT, FieldType.TEXTAREA])
def test_free_text_accepts_anything_present(field_type):
    assert validate_field(make_field(field_type), "anything at all") is None


@pytest.mark.parametrize("value", ["ada@example.com", "a.b+c@mail.co.uk"])
def test_email_accepts_plausible_addresses(value):
    assert validate_field(make_field(FieldType.EMAIL), value) is None


@pytest.mark.parametrize("value", ["ada", "ada@example", "ada @example.com", "@example.com", True])
def test_email_rejects_malformed(value):
    assert validate_field(make_field(FieldType.EMAIL), value) == (
        "Field needs to be a valid email address"
    )


@pytest.mark.parametrize("value", ["https://example.com", "http://localhost:8000/path?q=1"])
def test_url_accepts_absolute_urls(value):
    assert validate_field(make_field(FieldType.URL), value) is None


@pytest.mark.parametrize("value", ["example.com", "not a url", 42])
def test_url_rejects_relative_or_garbage(value):
    assert validate_field(make_field(FieldType.URL), value) == (
        "Field needs to be a valid URL (like https://example.com)"
    )


@pytest.mark.parametrize("value", ["+1 (555) 123-4567", "5551234567", 5551234567])
def test_phone_accepts_ten_or_more_phone_characters(value):
    assert validate_field(make_field(FieldType.PHONE), value) is None


@pytest.mark.parametrize("value", ["555-1234", "555123456x", "++15551234567"])
def test_phone_rejects_short_or_foreign_characters(value):
    assert validate_field(make_field(FieldType.PHONE), value) == (
        "Field needs to be a valid phone number"
    )


@pytest.mark.parametrize("field_type", [FieldType.NUMBER, FieldType.CURRENCY])
@pytest.mark.parametrize("value", [0, 12, -3.5, "42", " 19.99 ", "1e3", ".5", "-Infinity"])
def test_numeric_types_accept_numbers_and_numeric_strings(field_type, value):
    assert validate_field(make_field(field_type), value) is None


@pytest.mark.parametrize("field_type", [FieldType.NUMBER, FieldType.CURRENCY])
@pytest.mark.parametrize(
    "value", ["abc", "$10", "nan", float("nan"), True, [1], "1_000", "١٢", "infinity", "0x10"]
)
def test_numeric_types_reject_non_numbers(field_type, value):
    assert validate_field(make_field(field_type), value) == "Field must be a valid number"


@pytest.mark.parametrize("field_type", [FieldType.DATE, FieldType.DATETIME])
@pytest.mark.parametrize("value", ["2024-02-29", "2024-01-15T10:30:00", "2024-01-15T10:30:00Z"])
def test_date_types_accept_iso_values(field_type, value):
    assert validate_field(make_field(field_type), value) is None


@pytest.mark.parametrize("field_type", [FieldType.DATE, FieldType.DATETIME])
@pytest.mark.parametrize(
    "value", ["2023-02-29", "yesterday", "15/01/2024", "2024/01/15", "Jan 15, 2024", 20240115]
)
def test_date_types_reject_invalid_dates(field_type, value):
    assert validate_field(make_field(field_type), value) == "Field must be a valid date"


def test_dropdown_accepts_listed_option():
    assert validate_field(make_field(FieldType.DROPDOWN, options=["a", "b"]), "b") is None


def test_dropdown_rejection_lists_every_option():
    message = validate_field(make_field(FieldType.DROPDOWN, options=["a", "b"]), "c")
    assert message == "Field must be one of these options: a, b"


def test_multiselect_accepts_subset_of_options():
    field = make_field(FieldType.MULTISELECT, options=["a", "b", "c"])
    assert validate_field(field, ["a", "c"]) is None


def test_multiselect_rejects_partial_overlap():
    field = make_field(FieldType.MULTISELECT, options=["a", "b"])
    assert validate_field(field, ["a", "c"]) == "Field can only contain these options: a, b"


def test_multiselect_rejects_non_sequence():
    field = make_field(FieldType.MULTISELECT, options=["a", "b"])
    assert validate_field(field, "a") is not None


@pytest.mark.parametrize("value", [True, False])
def test_checkbox_accepts_booleans(value):
    assert validate_field(make_field(FieldType.CHECKBOX), value) is None


@pytest.mark.parametrize("value", ["true", "false", 1, 0])
def test_checkbox_rejects_truthy_lookalikes(value):
    assert validate_field(make_field(FieldType.CHECKBOX), value) == (
        "Field must be either true or false"
    )


def test_definition_from_stored_dict():
    field = FieldDefinition.from_dict({"name": "Stage", "type": "dropdown", "options": ["x"]})
    assert field == FieldDefinition(name="Stage", type=FieldType.DROPDOWN, required=False, options=("x",))


def test_required_multiselect_with_no_selection_reports_required():
    field = make_field(FieldType.MULTISELECT, required=True, options=["a", "b"])
    assert validate_field(field, []) == "Field is required and cannot be empty"
    assert validate_field(make_field(FieldType.MULTISELECT, options=["a"]), []) is None


@pytest.mark.parametrize("required", [True, False])
def test_empty_list_is_not_a_checkbox_value(required):
    field = make_field(FieldType.CHECKBOX, required=required)
    assert validate_field(field, []) == "Field must be either true or false"


def test_empty_list_counts_as_present_for_free_text():
    assert validate_field(make_field(FieldType.TEXT, required=True), []) is None
