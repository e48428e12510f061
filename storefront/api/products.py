"""상품 라우터 — 상품 CRUD 및 이미지 엔드포인트.

Product Router — CRUD, listing and image endpoints for products.
Routers only translate HTTP into service calls; services commit.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_filter, get_pagination
from storefront.database import get_db
from storefront.schemas.attachment import AttachmentCreate
from storefront.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from storefront.services.product_service import product_service
from storefront.utils.pagination import Filter, PaginationParams

router: APIRouter = APIRouter()


async def _to_attachment(file: UploadFile) -> AttachmentCreate:
    """업로드 파일을 첨부 생성 스키마로 변환합니다."""
    return AttachmentCreate(
        file_name=file.filename or "upload",
        content=await file.read(),
        content_type=file.content_type or "application/octet-stream",
    )


@router.get("/", response_model=list[ProductResponse])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    params: Annotated[PaginationParams, Depends(get_pagination)],
    filter: Annotated[Filter, Depends(get_filter)],
    category_id: Annotated[int | None, Query()] = None,
) -> list[ProductResponse]:
    """상품 목록을 조회합니다 (정렬/페이지네이션/분류 필터).

    List products with sorting, pagination and an optional category filter.
    """
    return await product_service.retrieve_all(db, params, filter, category_id)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """상품 상세 정보를 재고와 함께 조회합니다."""
    return await product_service.retrieve_by_id(db, product_id)


@router.post("/", response_model=ProductResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """새 상품을 생성합니다."""
    return await product_service.add(db, data)


@router.put("/", response_model=ProductResponse)
async def update_product(
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """상품 정보를 수정합니다 (본문에 대상 ID 포함)."""
    return await product_service.modify(db, data)


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """상품을 삭제합니다."""
    await product_service.remove(db, product_id)


@router.post("/{product_id}/image", response_model=ProductResponse)
async def upload_product_image(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    file: UploadFile = File(...),
) -> ProductResponse:
    """상품 이미지를 업로드합니다."""
    return await product_service.image_upload(db, product_id, await _to_attachment(file))


@router.put("/{product_id}/image", response_model=ProductResponse)
async def replace_product_image(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    file: UploadFile = File(...),
) -> ProductResponse:
    """상품 이미지를 교체합니다 (기존 이미지 삭제 후 업로드)."""
    return await product_service.modify_image(db, product_id, await _to_attachment(file))
