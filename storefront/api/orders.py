"""주문 라우터 — 주문 생성/조회/삭제 엔드포인트.

Order Router — endpoints for placing, reading and removing orders.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_pagination
from storefront.database import get_db
from storefront.schemas.order import OrderCreate, OrderResponse
from storefront.services.order_service import order_service
from storefront.utils.pagination import PaginationParams

router: APIRouter = APIRouter()


@router.get("/", response_model=list[OrderResponse])
async def list_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    params: Annotated[PaginationParams, Depends(get_pagination)],
) -> list[OrderResponse]:
    return await order_service.retrieve_all(db, params)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderResponse:
    return await order_service.retrieve_by_id(db, order_id)


@router.post("/", response_model=OrderResponse, status_code=201)
async def create_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderResponse:
    """새 주문을 생성합니다."""
    return await order_service.add(db, data)


@router.delete("/{order_id}", status_code=204)
async def delete_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    await order_service.remove(db, order_id)
