"""
Domain exception hierarchy for the service layer.

All service exceptions inherit from ServiceError so the API layer can
register one handler per kind. Each carries a human-readable message
plus structured `details` for logging.
"""

from __future__ import annotations

from tabula.core.constants import RECORD_NOT_FOUND, TABLE_NOT_FOUND


class ServiceError(Exception):
    """Base exception for all service-layer errors."""

    def __init__(
        self,
        message: str,
        *,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RecordValidationError(ServiceError):
    """Record data broke one or more field rules. Carries every message."""

    def __init__(self, errors: list[str], **kwargs) -> None:
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} field(s) failed validation", **kwargs)


class NotFoundOrUnauthorizedError(ServiceError):
    """Entity is missing or owned by someone else; the two are indistinguishable."""

    @classmethod
    def table(cls) -> NotFoundOrUnauthorizedError:
        return cls(TABLE_NOT_FOUND)

    @classmethod
    def record(cls) -> NotFoundOrUnauthorizedError:
        return cls(RECORD_NOT_FOUND)


class SchemaDefinitionError(ServiceError):
    """A proposed table definition used an unknown field type."""
    pass
