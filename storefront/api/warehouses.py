"""창고 라우터 — 창고 CRUD 엔드포인트.

Warehouse Router — CRUD endpoints for warehouses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_pagination
from storefront.database import get_db
from storefront.schemas.inventory import WarehouseCreate, WarehouseResponse, WarehouseUpdate
from storefront.services.warehouse_service import warehouse_service
from storefront.utils.pagination import PaginationParams

router: APIRouter = APIRouter()


@router.get("/", response_model=list[WarehouseResponse])
async def list_warehouses(
    db: Annotated[AsyncSession, Depends(get_db)],
    params: Annotated[PaginationParams, Depends(get_pagination)],
) -> list[WarehouseResponse]:
    """창고 목록을 조회합니다."""
    return await warehouse_service.retrieve_all(db, params)


@router.get("/{warehouse_id}", response_model=WarehouseResponse)
async def get_warehouse(
    warehouse_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WarehouseResponse:
    """창고 정보를 조회합니다."""
    return await warehouse_service.retrieve_by_id(db, warehouse_id)


@router.post("/", response_model=WarehouseResponse, status_code=201)
async def create_warehouse(
    data: WarehouseCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WarehouseResponse:
    """새 창고를 생성합니다."""
    return await warehouse_service.add(db, data)


@router.put("/", response_model=WarehouseResponse)
async def update_warehouse(
    data: WarehouseUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WarehouseResponse:
    """창고 정보를 수정합니다."""
    return await warehouse_service.modify(db, data)


@router.delete("/{warehouse_id}", status_code=204)
async def delete_warehouse(
    warehouse_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """창고를 삭제합니다."""
    await warehouse_service.remove(db, warehouse_id)
