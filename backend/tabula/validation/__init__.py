"""
Validation package — the schema-driven checks applied to tables and records.

- fields:  one value against one field definition
- records: a whole record payload against a table's fields
- tables:  a proposed table definition (field-type whitelist)
"""

from tabula.validation.fields import FieldDefinition, validate_field
from tabula.validation.records import validate_record
from tabula.validation.tables import validate_table_definition

__all__ = [
    "FieldDefinition",
    "validate_field",
    "validate_record",
    "validate_table_definition",
]
