"""
Record repository — data access for records stored against tables.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.db.models.base import utcnow
from tabula.db.models.record import Record


async def create_record(
    db: AsyncSession,
    *,
    table_id: UUID,
    owner_id: int,
    data: dict[str, Any],
) -> Record:
    """Insert a new record."""
    record = Record(table_id=table_id, owner_id=owner_id, data=data)
    db.add(record)
    await db.flush()
    return record


async def list_records(db: AsyncSession, table_id: UUID, owner_id: int) -> list[Record]:
    """Records of one table owned by `owner_id`, oldest first."""
    stmt = (
        select(Record)
        .where(Record.table_id == table_id, Record.owner_id == owner_id)
        .order_by(Record.created_at)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_record(
    db: AsyncSession,
    record_id: UUID,
    table_id: UUID,
    owner_id: int,
) -> Record | None:
    """Fetch a record by id, scoped to its table and owner."""
    stmt = select(Record).where(
        Record.id == record_id,
        Record.table_id == table_id,
        Record.owner_id == owner_id,
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def replace_record_data(db: AsyncSession, record: Record, data: dict[str, Any]) -> Record:
    """Replace the whole `data` mapping and refresh `updated_at`."""
    record.data = data
    record.updated_at = utcnow()
    await db.flush()
    return record


async def delete_record(db: AsyncSession, record: Record) -> None:
    """Delete one record row."""
    await db.delete(record)
    await db.flush()


async def delete_records_for_table(db: AsyncSession, table_id: UUID) -> int:
    """Bulk-delete every record of a table. Returns the number of rows removed."""
    stmt = delete(Record).where(Record.table_id == table_id)
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount or 0
