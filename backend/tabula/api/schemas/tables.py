"""Table request/response schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class FieldSpec(BaseModel):
    """One proposed field. `type` is checked by the service, not here."""

    name: str = Field(..., min_length=1, max_length=255)
    type: str
    required: bool = False
    options: list[str] | None = None


class TableCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    fields: list[FieldSpec] = Field(default_factory=list)


class TableResponse(BaseModel):
    id: UUID
    owner_id: int
    name: str
    fields: list[FieldSpec]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
