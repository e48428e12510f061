"""상품 레포지토리 — 상품 및 상품 분류 쿼리.

Product Repository — Queries for products and product categories.
Extends BaseRepository with case-insensitive name lookups used by the
uniqueness checks.
"""

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.product import Product, ProductCategory
from storefront.repositories.base import BaseRepository

# 상품 조회 시 함께 로딩할 관계 — Relationships loaded with every product read
PRODUCT_INCLUDES: tuple[str, ...] = ("category", "attachment")


class ProductCategoryRepository(BaseRepository[ProductCategory]):
    """상품 분류 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(ProductCategory)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> ProductCategory | None:
        """이름으로 분류를 조회합니다 (대소문자 무시).

        Retrieve a category by name, ignoring case.
        """
        return await self.select(db, func.lower(ProductCategory.name) == name.lower())


class ProductRepository(BaseRepository[Product]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the products table.
    """

    def __init__(self) -> None:
        """ProductRepository를 초기화합니다.

        Initialize the ProductRepository with the Product model.
        """
        super().__init__(Product)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Product | None:
        """이름으로 상품을 조회합니다 (대소문자 무시).

        Retrieve a product by name, ignoring case.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 상품 이름 (Product name)

        Returns:
            Product | None: 같은 이름의 상품 또는 None (Product with that name, or None)
        """
        return await self.select(
            db, func.lower(Product.name) == name.lower(), includes=("attachment",)
        )


# 싱글턴 인스턴스 — Singleton instances
product_category_repository: ProductCategoryRepository = ProductCategoryRepository()
product_repository: ProductRepository = ProductRepository()
