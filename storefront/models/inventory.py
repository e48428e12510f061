"""재고 및 창고 관련 SQLAlchemy ORM 모델 정의.

Inventory and warehouse SQLAlchemy ORM model definitions.

Tables:
    - warehouses: 창고 (Storage locations)
    - inventories: 상품별 재고 수량 (Per-product stock rows)
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.database import Base


class Warehouse(Base):
    """창고 모델.

    Warehouse model — a named storage location.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 창고 이름, 고유 (Warehouse name, unique)
        address: 주소 (Optional address)
    """

    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class Inventory(Base):
    """재고 모델 — 상품별 수량 기록.

    Inventory model — stock quantity for a product.
    A product may have several rows; readers use the latest one (highest id).

    Attributes:
        id: 고유 식별자 (Unique identifier)
        product_id: 상품 FK (Product foreign key, CASCADE)
        warehouse_id: 창고 FK (Optional warehouse foreign key)
        quantity: 수량, 0 이상 (Non-negative quantity)
    """

    __tablename__ = "inventories"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 상품 FK — 상품 삭제 시 재고도 삭제 (CASCADE on product delete)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    warehouse_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("warehouses.id", ondelete="SET NULL"), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    product = relationship("Product")
    warehouse = relationship("Warehouse")
