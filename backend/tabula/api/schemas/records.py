"""Record request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel


class RecordPayload(BaseModel):
    """Body of record create/update. Update replaces `data` entirely."""

    data: dict[str, Any]


class RecordResponse(BaseModel):
    id: UUID
    table_id: UUID
    owner_id: int
    data: dict[str, Any]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
