"""재고 라우터 — 재고 CRUD 엔드포인트.

Inventory Router — CRUD endpoints for inventory rows.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_pagination
from storefront.database import get_db
from storefront.schemas.inventory import InventoryCreate, InventoryResponse, InventoryUpdate
from storefront.services.inventory_service import inventory_service
from storefront.utils.pagination import PaginationParams

router: APIRouter = APIRouter()


@router.get("/", response_model=list[InventoryResponse])
async def list_inventories(
    db: Annotated[AsyncSession, Depends(get_db)],
    params: Annotated[PaginationParams, Depends(get_pagination)],
    product_id: Annotated[int | None, Query()] = None,
) -> list[InventoryResponse]:
    return await inventory_service.retrieve_all(db, params, product_id)


@router.get("/{inventory_id}", response_model=InventoryResponse)
async def get_inventory(
    inventory_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InventoryResponse:
    return await inventory_service.retrieve_by_id(db, inventory_id)


@router.post("/", response_model=InventoryResponse, status_code=201)
async def create_inventory(
    data: InventoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InventoryResponse:
    return await inventory_service.add(db, data)


@router.put("/", response_model=InventoryResponse)
async def update_inventory(
    data: InventoryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InventoryResponse:
    return await inventory_service.modify(db, data)


@router.delete("/{inventory_id}", status_code=204)
async def delete_inventory(
    inventory_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    await inventory_service.remove(db, inventory_id)
