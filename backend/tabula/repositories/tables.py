"""
Table repository — data access for user-defined table schemas.

Every read is scoped to an owner: a table that exists but belongs to
someone else is returned as None, exactly like a missing one.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.db.models.table import Table


async def create_table(
    db: AsyncSession,
    *,
    owner_id: int,
    name: str,
    fields: list[dict[str, Any]],
) -> Table:
    """Insert a new table owned by `owner_id`."""
    table = Table(owner_id=owner_id, name=name, fields=fields)
    db.add(table)
    await db.flush()
    return table


async def list_tables(db: AsyncSession, owner_id: int) -> list[Table]:
    """All tables owned by a user, oldest first."""
    stmt = select(Table).where(Table.owner_id == owner_id).order_by(Table.created_at)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_table(db: AsyncSession, table_id: UUID, owner_id: int) -> Table | None:
    """Fetch a table by id, only if owned by `owner_id`."""
    stmt = select(Table).where(Table.id == table_id, Table.owner_id == owner_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def delete_table(db: AsyncSession, table: Table) -> None:
    """Delete a table row. Its records are removed separately."""
    await db.delete(table)
    await db.flush()
