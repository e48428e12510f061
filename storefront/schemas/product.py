"""상품 카탈로그 관련 Pydantic 요청/응답 스키마 정의.

Product catalog Pydantic request/response schemas.
Includes schemas for product categories and products.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.schemas.attachment import AttachmentResponse


# === 상품 분류 (Product Category) 스키마 ===

class ProductCategoryCreate(BaseModel):
    """상품 분류 생성 요청 스키마.

    Product category creation request schema.
    """

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ProductCategoryUpdate(BaseModel):
    """상품 분류 수정 요청 스키마 (전체 필드 덮어쓰기).

    Product category update request schema. Every field is overwritten.
    """

    id: int
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ProductCategoryResponse(BaseModel):
    """상품 분류 응답 스키마."""

    id: int
    name: str
    description: str | None = None


# === 상품 (Product) 스키마 ===

class ProductCreate(BaseModel):
    """상품 생성 요청 스키마.

    Product creation request schema.

    Attributes:
        name: 상품 이름, 카탈로그 내 고유 (Product name, unique in the catalog)
        description: 상품 설명 (Optional description)
        price: 단가 (Unit price, non-negative)
        category_id: 상품 분류 ID (Existing category identifier)
    """

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    category_id: int


class ProductUpdate(BaseModel):
    """상품 수정 요청 스키마.

    Product update request schema. Carries the target id and the same
    required fields as creation; all of them overwrite the stored product.
    """

    id: int
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    category_id: int


class ProductResponse(BaseModel):
    """상품 응답 스키마.

    Product response schema.
    quantity/is_available are derived from inventory at read time;
    without an inventory row they keep their defaults (None / False).

    Attributes:
        category: 소속 분류 (Resolved category)
        attachment: 대표 이미지 (Image attachment, optional)
        quantity: 재고 수량 (Latest inventory quantity, None if no inventory)
        is_available: 구매 가능 여부 (True when quantity > 0)
    """

    id: int
    name: str
    description: str | None = None
    price: Decimal
    category_id: int
    category: ProductCategoryResponse | None = None
    attachment: AttachmentResponse | None = None
    quantity: int | None = None  # 재고 수량 — 서비스에서 계산 (Computed by service)
    is_available: bool = False  # 구매 가능 여부 — 서비스에서 계산 (Computed by service)
    created_at: datetime | None = None
    updated_at: datetime | None = None
