"""Record endpoints, nested under a table."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.api.deps import get_db, get_owner_id
from tabula.api.schemas.records import RecordPayload, RecordResponse
from tabula.services import records as record_service

router = APIRouter(prefix="/tables/{table_id}/records", tags=["Records"])


@router.get("", response_model=list[RecordResponse])
async def list_records(
    table_id: UUID,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> list[RecordResponse]:
    records = await record_service.list_records(db, owner_id=owner_id, table_id=table_id)
    return [RecordResponse.model_validate(record) for record in records]


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    table_id: UUID,
    payload: RecordPayload,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> RecordResponse:
    """Create a record; a 400 lists every field that failed validation."""
    record = await record_service.create_record(
        db,
        owner_id=owner_id,
        table_id=table_id,
        data=payload.data,
    )
    return RecordResponse.model_validate(record)


@router.put("/{record_id}", response_model=RecordResponse)
async def update_record(
    table_id: UUID,
    record_id: UUID,
    payload: RecordPayload,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> RecordResponse:
    """Replace a record's data after validating it against the table."""
    record = await record_service.update_record(
        db,
        owner_id=owner_id,
        table_id=table_id,
        record_id=record_id,
        data=payload.data,
    )
    return RecordResponse.model_validate(record)


@router.delete("/{record_id}")
async def delete_record(
    table_id: UUID,
    record_id: UUID,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> dict[str, str]:
    await record_service.delete_record(
        db,
        owner_id=owner_id,
        table_id=table_id,
        record_id=record_id,
    )
    return {"message": "Record deleted successfully"}
