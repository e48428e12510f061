"""재고 및 창고 Pydantic 요청/응답 스키마 정의.

Inventory and warehouse Pydantic request/response schemas.
"""

from pydantic import BaseModel, Field


# === 창고 (Warehouse) 스키마 ===

class WarehouseCreate(BaseModel):
    """창고 생성 요청 스키마."""

    name: str = Field(min_length=1, max_length=255)
    address: str | None = None


class WarehouseUpdate(BaseModel):
    """창고 수정 요청 스키마 (전체 필드 덮어쓰기).

    Warehouse update request schema. Every field is overwritten.
    """

    id: int
    name: str = Field(min_length=1, max_length=255)
    address: str | None = None


class WarehouseResponse(BaseModel):
    """창고 응답 스키마."""

    id: int
    name: str
    address: str | None = None


# === 재고 (Inventory) 스키마 ===

class InventoryCreate(BaseModel):
    """재고 생성 요청 스키마.

    Inventory creation request schema.

    Attributes:
        product_id: 상품 ID (Existing product identifier)
        warehouse_id: 창고 ID (Existing warehouse identifier, optional)
        quantity: 수량 (Non-negative quantity)
    """

    product_id: int
    warehouse_id: int | None = None
    quantity: int = Field(default=0, ge=0)


class InventoryUpdate(BaseModel):
    """재고 수정 요청 스키마 (전체 필드 덮어쓰기)."""

    id: int
    product_id: int
    warehouse_id: int | None = None
    quantity: int = Field(default=0, ge=0)


class InventoryResponse(BaseModel):
    """재고 응답 스키마."""

    id: int
    product_id: int
    warehouse_id: int | None = None
    quantity: int
