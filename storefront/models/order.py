"""주문 관련 SQLAlchemy ORM 모델 정의.

Order SQLAlchemy ORM model definitions.

Tables:
    - orders: 주문 (Customer orders)
    - order_items: 주문 항목 (Order line items referencing products)
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.database import Base


class Order(Base):
    """주문 모델.

    Order model with its line items (cascade delete).

    Attributes:
        id: 고유 식별자 (Unique identifier)
        customer_name: 주문자 이름 (Customer display name)
        status: 주문 상태 (Order status, "pending" by default)

    Relationships:
        items: 주문 항목 목록 (Line items, cascade delete)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    """주문 항목 모델 — 상품을 참조.

    Order line item. The unit price is copied from the product when the
    order is placed so later price changes do not rewrite history.

    Attributes:
        order_id: 주문 FK (Parent order, CASCADE)
        product_id: 상품 FK (Referenced product, SET NULL on product delete)
        quantity: 주문 수량 (Ordered quantity)
        unit_price: 주문 시점 단가 (Unit price at order time)
    """

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")
