"""
Record service — validated writes of records against their table schema.

Every write re-validates the full payload against the table's current
fields. Updates replace `data` wholesale; there is no partial patch.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tabula.core.logging import get_logger
from tabula.db.models.record import Record
from tabula.db.models.table import Table
from tabula.repositories import records as record_repository
from tabula.services.errors import NotFoundOrUnauthorizedError, RecordValidationError
from tabula.services.tables import get_table
from tabula.validation import validate_record

logger = get_logger(__name__)


def _ensure_valid(table: Table, data: dict[str, Any]) -> None:
    errors = validate_record(table, data)
    if errors:
        logger.warning(
            "Record rejected",
            table_id=str(table.id),
            error_count=len(errors),
            errors=errors,
        )
        raise RecordValidationError(errors, details={"table_id": str(table.id)})


async def list_records(db: AsyncSession, *, owner_id: int, table_id: UUID) -> list[Record]:
    """Records of one of the caller's tables."""
    await get_table(db, owner_id=owner_id, table_id=table_id)
    return await record_repository.list_records(db, table_id, owner_id)


async def create_record(
    db: AsyncSession,
    *,
    owner_id: int,
    table_id: UUID,
    data: dict[str, Any],
) -> Record:
    """Validate `data` against the table and insert it."""
    table = await get_table(db, owner_id=owner_id, table_id=table_id)
    _ensure_valid(table, data)

    record = await record_repository.create_record(
        db, table_id=table.id, owner_id=owner_id, data=data
    )
    logger.info("Record created", record_id=str(record.id), table_id=str(table_id))
    return record


async def update_record(
    db: AsyncSession,
    *,
    owner_id: int,
    table_id: UUID,
    record_id: UUID,
    data: dict[str, Any],
) -> Record:
    """Validate the replacement `data`, then swap it into the existing record."""
    table = await get_table(db, owner_id=owner_id, table_id=table_id)
    _ensure_valid(table, data)

    record = await record_repository.get_record(db, record_id, table_id, owner_id)
    if record is None:
        logger.info("Record lookup missed", record_id=str(record_id), owner_id=owner_id)
        raise NotFoundOrUnauthorizedError.record()

    record = await record_repository.replace_record_data(db, record, data)
    logger.info("Record updated", record_id=str(record.id), table_id=str(table_id))
    return record


async def delete_record(
    db: AsyncSession,
    *,
    owner_id: int,
    table_id: UUID,
    record_id: UUID,
) -> None:
    record = await record_repository.get_record(db, record_id, table_id, owner_id)
    if record is None:
        logger.info("Record lookup missed", record_id=str(record_id), owner_id=owner_id)
        raise NotFoundOrUnauthorizedError.record()

    await record_repository.delete_record(db, record)
    logger.info("Record deleted", record_id=str(record_id), table_id=str(table_id))
