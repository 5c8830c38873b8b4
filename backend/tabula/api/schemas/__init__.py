"""API schema package."""

from tabula.api.schemas.auth import (
    CredentialsRequest,
    CurrentUserResponse,
    RegisterRequest,
    TokenResponse,
)
from tabula.api.schemas.records import RecordPayload, RecordResponse
from tabula.api.schemas.tables import FieldSpec, TableCreateRequest, TableResponse

__all__ = [
    "CredentialsRequest",
    "RegisterRequest",
    "TokenResponse",
    "CurrentUserResponse",
    "FieldSpec",
    "TableCreateRequest",
    "TableResponse",
    "RecordPayload",
    "RecordResponse",
]
