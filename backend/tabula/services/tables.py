"""
Table service — create, read and delete user-defined tables.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tabula.core.logging import get_logger
from tabula.db.models.table import Table
from tabula.repositories import records as record_repository
from tabula.repositories import tables as table_repository
from tabula.services.errors import NotFoundOrUnauthorizedError, SchemaDefinitionError
from tabula.validation import validate_table_definition

logger = get_logger(__name__)


async def create_table(
    db: AsyncSession,
    *,
    owner_id: int,
    name: str,
    fields: list[dict[str, Any]],
) -> Table:
    """Check the field types, then persist a table owned by the caller."""
    problem = validate_table_definition(fields)
    if problem is not None:
        logger.warning("Table definition rejected", owner_id=owner_id, reason=problem)
        raise SchemaDefinitionError(problem, details={"name": name})

    table = await table_repository.create_table(db, owner_id=owner_id, name=name, fields=fields)
    logger.info(
        "Table created",
        table_id=str(table.id),
        owner_id=owner_id,
        field_count=len(fields),
    )
    return table


async def list_tables(db: AsyncSession, *, owner_id: int) -> list[Table]:
    return await table_repository.list_tables(db, owner_id)


async def get_table(db: AsyncSession, *, owner_id: int, table_id: UUID) -> Table:
    """Return the caller's table or raise NotFoundOrUnauthorizedError."""
    table = await table_repository.get_table(db, table_id, owner_id)
    if table is None:
        logger.info("Table lookup missed", table_id=str(table_id), owner_id=owner_id)
        raise NotFoundOrUnauthorizedError.table()
    return table


async def delete_table(db: AsyncSession, *, owner_id: int, table_id: UUID) -> int:
    """
    Delete a table and every record stored against it.

    Both deletes run in the caller's session, so they commit or roll back
    together. Records are matched by table id alone. Returns the number
    of records removed.
    """
    table = await get_table(db, owner_id=owner_id, table_id=table_id)

    await table_repository.delete_table(db, table)
    removed = await record_repository.delete_records_for_table(db, table_id)

    logger.info(
        "Table deleted",
        table_id=str(table_id),
        owner_id=owner_id,
        records_deleted=removed,
    )
    return removed
