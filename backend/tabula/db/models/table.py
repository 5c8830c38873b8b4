"""
Table — a user-defined schema: a name plus an ordered list of field definitions.

`fields` is stored as a JSON list of dicts shaped like
`{"name": ..., "type": ..., "required": bool, "options": [...]}`.
Records reference a table by `table_id` but the relationship is not
modelled here: deleting a table removes its records explicitly in the
service layer.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tabula.db.models.base import Base, JSONType, generate_uuid, utcnow


class Table(Base):
    """One row per user-defined table."""

    __tablename__ = "tables"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=generate_uuid)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    fields: Mapped[list[dict[str, Any]]] = mapped_column(JSONType, nullable=False, default=list)

    # ── Timestamps ────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Table {self.id} {self.name!r} owner={self.owner_id} fields={len(self.fields or [])}>"
