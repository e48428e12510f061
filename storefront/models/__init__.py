"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    product: 상품 분류 및 상품 (ProductCategory, Product)
    inventory: 창고 및 재고 (Warehouse, Inventory)
    order: 주문 및 주문 항목 (Order, OrderItem)
    attachment: 첨부 파일 (Attachment)
"""

from storefront.models.attachment import Attachment
from storefront.models.product import ProductCategory, Product
from storefront.models.inventory import Warehouse, Inventory
from storefront.models.order import Order, OrderItem

__all__ = [
    "Attachment",
    "ProductCategory", "Product",
    "Warehouse", "Inventory",
    "Order", "OrderItem",
]
