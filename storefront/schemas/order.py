"""주문 Pydantic 요청/응답 스키마 정의.

Order Pydantic request/response schemas.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItemCreate(BaseModel):
    """주문 항목 생성 요청 스키마."""

    product_id: int
    quantity: int = Field(gt=0)


class OrderCreate(BaseModel):
    """주문 생성 요청 스키마.

    Order creation request schema. Every item must reference an existing product.
    """

    customer_name: str = Field(min_length=1, max_length=255)
    items: list[OrderItemCreate] = []


class OrderItemResponse(BaseModel):
    """주문 항목 응답 스키마."""

    id: int
    product_id: int | None = None
    quantity: int
    unit_price: Decimal


class OrderResponse(BaseModel):
    """주문 응답 스키마.

    Attributes:
        total: 주문 합계 (Sum of quantity * unit_price over items)
    """

    id: int
    customer_name: str
    status: str
    items: list[OrderItemResponse] = []
    total: Decimal = Decimal("0")
    created_at: datetime | None = None
