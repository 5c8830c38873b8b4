"""
Record — one document of field-name -> value data stored against a Table.

`table_id` is indexed but deliberately NOT a database foreign key;
ownership and existence are enforced by the service layer.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tabula.db.models.base import Base, JSONType, generate_uuid, utcnow


class Record(Base):
    """One row per record."""

    __tablename__ = "records"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=generate_uuid)
    table_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    data: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)

    # ── Timestamps ────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Record {self.id} table={self.table_id} owner={self.owner_id}>"
