"""상품 분류 서비스 — 분류 CRUD 비즈니스 로직.

Product Category Service — Business logic for category CRUD operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.product import ProductCategory
from storefront.repositories.product_repository import (
    ProductCategoryRepository,
    ProductRepository,
    product_category_repository,
    product_repository,
)
from storefront.schemas.product import (
    ProductCategoryCreate,
    ProductCategoryResponse,
    ProductCategoryUpdate,
)
from storefront.utils.exceptions import AlreadyExistsError, BadRequestError, NotFoundError
from storefront.utils.pagination import PaginationParams, apply_order, to_paginate


class ProductCategoryService:
    """상품 분류 관련 비즈니스 로직을 처리하는 서비스."""

    def __init__(
        self,
        categories: ProductCategoryRepository = product_category_repository,
        products: ProductRepository = product_repository,
    ) -> None:
        self.categories = categories
        self.products = products

    def _to_response(self, category: ProductCategory) -> ProductCategoryResponse:
        return ProductCategoryResponse(
            id=category.id,
            name=category.name,
            description=category.description,
        )

    async def _get(self, db: AsyncSession, category_id: int) -> ProductCategory:
        category: ProductCategory | None = await self.categories.select_by_id(db, category_id)
        if category is None:
            raise NotFoundError("This category is not found")
        return category

    async def add(self, db: AsyncSession, data: ProductCategoryCreate) -> ProductCategoryResponse:
        """새 분류를 생성합니다.

        Raises:
            AlreadyExistsError: 같은 이름의 분류가 이미 존재할 때
        """
        if await self.categories.get_by_name(db, data.name) is not None:
            raise AlreadyExistsError("This category already exists")

        category = ProductCategory(name=data.name, description=data.description)
        await self.categories.create(db, category)
        await self.categories.save(db)
        return self._to_response(category)

    async def modify(self, db: AsyncSession, data: ProductCategoryUpdate) -> ProductCategoryResponse:
        """분류 정보를 수정합니다.

        Raises:
            NotFoundError: 분류를 찾을 수 없을 때
            AlreadyExistsError: 다른 분류가 같은 이름을 사용 중일 때
        """
        category: ProductCategory = await self._get(db, data.id)

        holder: ProductCategory | None = await self.categories.get_by_name(db, data.name)
        if holder is not None and holder.id != category.id:
            raise AlreadyExistsError("This category already exists")

        category.name = data.name
        category.description = data.description
        await self.categories.update(db, category)
        await self.categories.save(db)
        return self._to_response(category)

    async def remove(self, db: AsyncSession, category_id: int) -> bool:
        """분류를 삭제합니다.

        Raises:
            NotFoundError: 분류를 찾을 수 없을 때
            BadRequestError: 분류를 참조하는 상품이 남아 있을 때 (Category still has products)
        """
        category: ProductCategory = await self._get(db, category_id)
        if await self.products.exists(db, {"category_id": category.id}):
            raise BadRequestError("This category still has products")

        await self.categories.delete(db, category)
        await self.categories.save(db)
        return True

    async def retrieve_by_id(self, db: AsyncSession, category_id: int) -> ProductCategoryResponse:
        return self._to_response(await self._get(db, category_id))

    async def retrieve_all(
        self,
        db: AsyncSession,
        params: PaginationParams | None = None,
    ) -> list[ProductCategoryResponse]:
        query = to_paginate(apply_order(self.categories.select_all(), ProductCategory, None), params)
        categories: list[ProductCategory] = await self.categories.fetch_all(db, query)
        return [self._to_response(c) for c in categories]


# 싱글턴 인스턴스 — Singleton instance
product_category_service: ProductCategoryService = ProductCategoryService()
