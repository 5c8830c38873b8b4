"""
Field-level validation: decides whether one value is acceptable for one
field definition.

Each FieldType maps to exactly one rule function. A rule receives a
non-empty value and returns None when it accepts it, or the rejection
message otherwise. Emptiness and the `required` flag are handled once in
`validate_field` before any rule runs, so a required dropdown given ""
reports "is required" rather than an invalid option.

Dates are accepted in ISO-8601 form only ("2024-01-15",
"2024-01-15T10:30:00Z"). Locale forms such as "Jan 15, 2024" or
"2024/01/15" are rejected.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tabula.core.constants import FieldType

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[\d\s\-()]{10,}", re.ASCII)
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?Infinity", re.ASCII)

_url_adapter = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class FieldDefinition:
    """One named, typed slot of a table schema."""

    name: str
    type: FieldType
    required: bool = False
    options: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> FieldDefinition:
        """Build from the JSON shape stored on a Table row."""
        return cls(
            name=raw["name"],
            type=FieldType(raw["type"]),
            required=bool(raw.get("required", False)),
            options=tuple(raw.get("options") or ()),
        )


Rule = Callable[[FieldDefinition, Any], str | None]


def is_empty(field: FieldDefinition, value: Any) -> bool:
    """None and "" count as no value; an empty list only for multiselect."""
    if value is None or (isinstance(value, str) and value == ""):
        return True
    if field.type is FieldType.MULTISELECT:
        return isinstance(value, (list, tuple)) and len(value) == 0
    return False


def _as_text(value: Any) -> str | None:
    # Numbers are accepted as their string form; bools and containers are not.
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


# ─── Rules ────────────────────────────────────


def _accept(field: FieldDefinition, value: Any) -> str | None:
    return None


def _check_email(field: FieldDefinition, value: Any) -> str | None:
    text = _as_text(value)
    if text is None or not EMAIL_PATTERN.fullmatch(text):
        return f"{field.name} needs to be a valid email address"
    return None


def _check_url(field: FieldDefinition, value: Any) -> str | None:
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        return f"{field.name} needs to be a valid URL (like https://example.com)"
    return None


def _check_phone(field: FieldDefinition, value: Any) -> str | None:
    text = _as_text(value)
    if text is None or not PHONE_PATTERN.fullmatch(text):
        return f"{field.name} needs to be a valid phone number"
    return None


def _check_number(field: FieldDefinition, value: Any) -> str | None:
    message = f"{field.name} must be a valid number"
    if isinstance(value, bool):
        return message
    if isinstance(value, (int, float)):
        return message if isinstance(value, float) and math.isnan(value) else None
    if not isinstance(value, str) or not NUMBER_PATTERN.fullmatch(value.strip()):
        return message
    return None


def _check_date(field: FieldDefinition, value: Any) -> str | None:
    if not isinstance(value, str):
        return f"{field.name} must be a valid date"
    try:
        datetime.fromisoformat(value.strip())
    except ValueError:
        return f"{field.name} must be a valid date"
    return None


def _check_dropdown(field: FieldDefinition, value: Any) -> str | None:
    if value not in field.options:
        return f"{field.name} must be one of these options: {', '.join(field.options)}"
    return None


def _check_multiselect(field: FieldDefinition, value: Any) -> str | None:
    if not isinstance(value, (list, tuple)) or not all(item in field.options for item in value):
        return f"{field.name} can only contain these options: {', '.join(field.options)}"
    return None


def _check_checkbox(field: FieldDefinition, value: Any) -> str | None:
    if not isinstance(value, bool):
        return f"{field.name} must be either true or false"
    return None


RULES: dict[FieldType, Rule] = {
    FieldType.TEXT: _accept,
    FieldType.TEXTAREA: _accept,
    FieldType.EMAIL: _check_email,
    FieldType.URL: _check_url,
    FieldType.PHONE: _check_phone,
    FieldType.NUMBER: _check_number,
    FieldType.CURRENCY: _check_number,
    FieldType.DATE: _check_date,
    FieldType.DATETIME: _check_date,
    FieldType.DROPDOWN: _check_dropdown,
    FieldType.MULTISELECT: _check_multiselect,
    FieldType.CHECKBOX: _check_checkbox,
}

_unhandled = set(FieldType) - RULES.keys()
if _unhandled:
    raise RuntimeError(f"No validation rule for field types: {sorted(_unhandled)}")


def validate_field(field: FieldDefinition, value: Any) -> str | None:
    """Validate one value. Returns None when accepted, else the rejection message."""
    if is_empty(field, value):
        if field.required:
            return f"{field.name} is required and cannot be empty"
        return None

    return RULES[field.type](field, value)
