"""Record validation: runs every field rule of a table over one payload."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from tabula.validation.fields import FieldDefinition, validate_field


class HasFields(Protocol):
    fields: Sequence[Mapping[str, Any] | FieldDefinition]


def _definitions(table: HasFields) -> list[FieldDefinition]:
    return [
        field if isinstance(field, FieldDefinition) else FieldDefinition.from_dict(field)
        for field in table.fields
    ]


def validate_record(table: HasFields, data: Mapping[str, Any]) -> list[str]:
    """
    Validate `data` against every field of `table`, in field order.

    Returns every rejection message (empty list = accepted); it never stops
    at the first failure. A missing key is treated like an empty value, and
    keys the schema does not declare are ignored.
    """
    outcomes = (validate_field(field, data.get(field.name)) for field in _definitions(table))
    return [message for message in outcomes if message is not None]
