"""Table endpoints. Every route is scoped to the authenticated owner."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.api.deps import get_db, get_owner_id
from tabula.api.schemas.tables import TableCreateRequest, TableResponse
from tabula.services import tables as table_service

router = APIRouter(prefix="/tables", tags=["Tables"])


@router.get("", response_model=list[TableResponse])
async def list_tables(
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> list[TableResponse]:
    """List the caller's tables."""
    tables = await table_service.list_tables(db, owner_id=owner_id)
    return [TableResponse.model_validate(table) for table in tables]


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(
    payload: TableCreateRequest,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> TableResponse:
    """Create a table after checking every field type."""
    table = await table_service.create_table(
        db,
        owner_id=owner_id,
        name=payload.name,
        fields=[field.model_dump(exclude_none=True) for field in payload.fields],
    )
    return TableResponse.model_validate(table)


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(
    table_id: UUID,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> TableResponse:
    table = await table_service.get_table(db, owner_id=owner_id, table_id=table_id)
    return TableResponse.model_validate(table)


@router.delete("/{table_id}")
async def delete_table(
    table_id: UUID,
    db: AsyncSession = Depends(get_db),
    owner_id: int = Depends(get_owner_id),
) -> dict[str, object]:
    """Delete a table together with all of its records."""
    removed = await table_service.delete_table(db, owner_id=owner_id, table_id=table_id)
    return {
        "message": "Table and all its records deleted successfully",
        "records_deleted": removed,
    }
