"""Shared constants and enums used across the application."""

from enum import StrEnum


class FieldType(StrEnum):
    """Column types a user may declare on a table."""

    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    DATE = "date"
    DATETIME = "datetime"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"
    MULTISELECT = "multiselect"
    TEXTAREA = "textarea"
    CURRENCY = "currency"


TABLE_NOT_FOUND = "Table not found or you do not have access to it"
RECORD_NOT_FOUND = "Record not found or you do not have access to it"
