"""Table definition checks applied before a table is created."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from tabula.core.constants import FieldType

VALID_FIELD_TYPES = frozenset(field_type.value for field_type in FieldType)


def validate_table_definition(fields: Sequence[Mapping[str, Any]]) -> str | None:
    """
    Return a message for the first field whose type is unknown, else None.

    Only the type whitelist is enforced: options on dropdown/multiselect
    fields and uniqueness of field names are not checked here.
    """
    for field in fields:
        field_type = field.get("type")
        if not isinstance(field_type, str) or field_type not in VALID_FIELD_TYPES:
            return f'"{field_type}" is not a valid field type'
    return None
