"""상품 분류 라우터 — 분류 CRUD 엔드포인트.

Product Category Router — CRUD endpoints for product categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_pagination
from storefront.database import get_db
from storefront.schemas.product import (
    ProductCategoryCreate,
    ProductCategoryResponse,
    ProductCategoryUpdate,
)
from storefront.services.category_service import product_category_service
from storefront.utils.pagination import PaginationParams

router: APIRouter = APIRouter()


@router.get("/", response_model=list[ProductCategoryResponse])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
    params: Annotated[PaginationParams, Depends(get_pagination)],
) -> list[ProductCategoryResponse]:
    return await product_category_service.retrieve_all(db, params)


@router.get("/{category_id}", response_model=ProductCategoryResponse)
async def get_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductCategoryResponse:
    return await product_category_service.retrieve_by_id(db, category_id)


@router.post("/", response_model=ProductCategoryResponse, status_code=201)
async def create_category(
    data: ProductCategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductCategoryResponse:
    return await product_category_service.add(db, data)


@router.put("/", response_model=ProductCategoryResponse)
async def update_category(
    data: ProductCategoryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductCategoryResponse:
    return await product_category_service.modify(db, data)


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    await product_category_service.remove(db, category_id)
