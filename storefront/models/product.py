"""상품 카탈로그 관련 SQLAlchemy ORM 모델 정의.

Product catalog SQLAlchemy ORM model definitions.
Includes ProductCategory and Product. Stock quantity and availability are
not stored on Product; they are derived from the latest Inventory row.

Tables:
    - product_categories: 상품 분류 (Product categories)
    - products: 상품 (Catalog products)
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.database import Base


class ProductCategory(Base):
    """상품 분류 모델 — 여러 상품이 하나의 분류를 참조.

    Product category model. Referenced by many products.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 분류 이름, 전역 고유 (Category name, unique)
        description: 분류 설명 (Optional description)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 분류 이름 — Category display name (unique)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class Product(Base):
    """상품 모델 — 카탈로그의 집합 루트(aggregate root).

    Product model — aggregate root of the catalog.
    The name is unique across the catalog; uniqueness is checked by the
    service before insert, not by a database constraint.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 상품 이름 (Product name)
        description: 상품 설명 (Optional description)
        price: 판매 가격 (Unit price)
        category_id: 상품 분류 FK (Owning category foreign key)
        attachment_id: 대표 이미지 첨부 FK (Optional image attachment)

    Relationships:
        category: 소속 분류 (Owning category)
        attachment: 대표 이미지 (Current image attachment, at most one)
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    # 소속 분류 FK — Category is required at all times
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_categories.id"), nullable=False)
    # 이미지 첨부 FK — 첨부 삭제 시 NULL (SET NULL when the attachment row is removed)
    attachment_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("attachments.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    category = relationship("ProductCategory")
    attachment = relationship("Attachment")
