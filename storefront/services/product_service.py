"""상품 서비스 — 상품 생명주기 비즈니스 로직.

Product Service — Business logic for the product lifecycle.
Composes the product, category and inventory repositories plus the
attachment service. Every public method is one unit of work: validations
run first with early-exit errors, then in-memory changes are applied and
committed once through ``save``.
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.attachment import Attachment
from storefront.models.inventory import Inventory
from storefront.models.product import Product, ProductCategory
from storefront.repositories.inventory_repository import (
    InventoryRepository,
    inventory_repository,
)
from storefront.repositories.product_repository import (
    PRODUCT_INCLUDES,
    ProductCategoryRepository,
    ProductRepository,
    product_category_repository,
    product_repository,
)
from storefront.schemas.attachment import AttachmentCreate
from storefront.schemas.product import (
    ProductCategoryResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from storefront.services.attachment_service import AttachmentService, attachment_service
from storefront.utils.exceptions import AlreadyExistsError, NotFoundError
from storefront.utils.pagination import Filter, PaginationParams, apply_order, to_paginate


class ProductService:
    """상품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling product business logic: CRUD, listing with
    filter/sort/pagination, inventory enrichment and image attachments.
    """

    def __init__(
        self,
        products: ProductRepository = product_repository,
        categories: ProductCategoryRepository = product_category_repository,
        inventories: InventoryRepository = inventory_repository,
        attachments: AttachmentService = attachment_service,
    ) -> None:
        self.products = products
        self.categories = categories
        self.inventories = inventories
        self.attachments = attachments

    def _to_response(
        self,
        product: Product,
        inventory: Inventory | None = None,
    ) -> ProductResponse:
        """상품 모델을 응답 스키마로 변환합니다.

        Convert a Product model instance to a ProductResponse schema.
        quantity/is_available are filled only when an inventory row is given.

        Args:
            product: 상품 모델 (Product model instance, relations loaded)
            inventory: 최신 재고 행 (Latest inventory row, optional)

        Returns:
            ProductResponse: 상품 응답 (Product response)
        """
        category: ProductCategory | None = product.category
        attachment: Attachment | None = product.attachment
        response = ProductResponse(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category_id=product.category_id,
            category=ProductCategoryResponse(
                id=category.id, name=category.name, description=category.description
            ) if category is not None else None,
            attachment=self.attachments.to_response(attachment) if attachment is not None else None,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
        if inventory is not None:
            response.quantity = inventory.quantity
            response.is_available = inventory.quantity > 0
        return response

    async def _get_category(self, db: AsyncSession, category_id: int) -> ProductCategory:
        category: ProductCategory | None = await self.categories.select_by_id(db, category_id)
        if category is None:
            raise NotFoundError("This category is not found")
        return category

    async def _get_product(
        self,
        db: AsyncSession,
        product_id: int,
        includes: Sequence[str] = PRODUCT_INCLUDES,
    ) -> Product:
        product: Product | None = await self.products.select_by_id(db, product_id, includes=includes)
        if product is None:
            raise NotFoundError("This product is not found")
        return product

    async def _enrich(
        self,
        db: AsyncSession,
        products: Sequence[Product],
    ) -> list[ProductResponse]:
        """재고 정보를 붙여 응답 목록을 만듭니다.

        Map products to responses and attach derived stock fields.
        All inventory rows are fetched with one query and joined in memory.
        """
        latest: dict[int, Inventory] = await self.inventories.get_latest_by_product_ids(
            db, (p.id for p in products)
        )
        return [self._to_response(p, latest.get(p.id)) for p in products]

    async def add(self, db: AsyncSession, data: ProductCreate) -> ProductResponse:
        """새 상품을 생성합니다.

        Create a new product.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 상품 생성 데이터 (Product creation data)

        Returns:
            ProductResponse: 분류가 채워진 생성 상품 응답
                             (Created product with its resolved category)

        Raises:
            AlreadyExistsError: 같은 이름의 상품이 이미 존재할 때
                                (A product with the same name already exists)
            NotFoundError: 분류를 찾을 수 없을 때 (Category not found)
        """
        existing: Product | None = await self.products.get_by_name(db, data.name)
        if existing is not None:
            raise AlreadyExistsError(f"This {existing.name.lower()} already exists")

        category: ProductCategory = await self._get_category(db, data.category_id)

        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            category_id=category.id,
            category=category,
            attachment=None,
        )
        await self.products.create(db, product)
        await self.products.save(db)

        # 재조회 없이 분류가 채워진 응답 반환 — No read-back; category already resolved
        return self._to_response(product)

    async def modify(self, db: AsyncSession, data: ProductUpdate) -> ProductResponse:
        """상품 정보를 수정합니다 (전체 필드 덮어쓰기).

        Update an existing product. Every field of the DTO overwrites the
        stored value and the category relation is reassigned even if unchanged.

        Raises:
            NotFoundError: 상품 또는 분류를 찾을 수 없을 때 (Product or category not found)
            AlreadyExistsError: 다른 상품이 같은 이름을 사용 중일 때
                                (Another product already uses the name)
        """
        product: Product = await self._get_product(db, data.id)
        category: ProductCategory = await self._get_category(db, data.category_id)

        # 이름 변경 시 중복 확인 — Check name uniqueness if renaming
        if product.name.lower() != data.name.lower():
            holder: Product | None = await self.products.get_by_name(db, data.name)
            if holder is not None and holder.id != product.id:
                raise AlreadyExistsError(f"This {holder.name.lower()} already exists")

        product.category_id = category.id
        product.category = category
        product.name = data.name
        product.description = data.description
        product.price = data.price

        await self.products.update(db, product)
        await self.products.save(db)

        inventory = (await self.inventories.get_latest_by_product_ids(db, [product.id])).get(product.id)
        return self._to_response(product, inventory)

    async def remove(self, db: AsyncSession, product_id: int) -> bool:
        """상품을 삭제합니다.

        Delete a product together with its image attachment, if any.
        Always returns True; failure is an exception.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
        """
        product: Product = await self._get_product(db, product_id, includes=("attachment",))
        attachment: Attachment | None = product.attachment

        await self.products.delete(db, product)
        if attachment is not None:
            # 이미지 파일과 행도 함께 삭제 — Commits the product delete with it
            await self.attachments.remove(db, attachment)
        await self.products.save(db)
        return True

    async def retrieve_by_id(self, db: AsyncSession, product_id: int) -> ProductResponse:
        """상품 상세 정보를 재고와 함께 조회합니다.

        Retrieve a product with category, attachment and stock fields.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
        """
        product: Product = await self._get_product(db, product_id)
        return (await self._enrich(db, [product]))[0]

    async def retrieve_all(
        self,
        db: AsyncSession,
        params: PaginationParams | None = None,
        filter: Filter | None = None,
        category_id: int | None = None,
    ) -> list[ProductResponse]:
        """상품 목록을 조회합니다.

        List products with category/attachment included, optionally narrowed
        to one category, ordered by the filter (id ascending otherwise) and
        then paginated. Each result carries its stock fields.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            params: 페이지네이션, None이면 전체 (Pagination; None returns everything)
            filter: 정렬 조건 (Sort specification)
            category_id: 분류 필터 (Category equality filter)

        Returns:
            list[ProductResponse]: 상품 목록 (List of product responses)

        Raises:
            BadRequestError: 알 수 없는 정렬 컬럼 (Unknown sort column)
        """
        query = self.products.select_all(
            includes=PRODUCT_INCLUDES, filters={"category_id": category_id}
        )
        query = to_paginate(apply_order(query, Product, filter), params)

        products: list[Product] = await self.products.fetch_all(db, query)
        return await self._enrich(db, products)

    async def image_upload(
        self,
        db: AsyncSession,
        product_id: int,
        data: AttachmentCreate,
    ) -> ProductResponse:
        """상품 이미지를 업로드합니다.

        Upload an image and assign it to the product. An image the product
        already has is only unlinked, not removed; use ``modify_image`` to
        replace it.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
        """
        product: Product = await self._get_product(db, product_id)

        attachment: Attachment = await self.attachments.upload(db, data)
        product.attachment_id = attachment.id
        product.attachment = attachment

        await self.products.update(db, product)
        await self.products.save(db)
        return self._to_response(product)

    async def modify_image(
        self,
        db: AsyncSession,
        product_id: int,
        data: AttachmentCreate,
    ) -> ProductResponse:
        """상품 이미지를 교체합니다.

        Replace the product image. The old attachment is removed before the
        new one is uploaded; the two steps are not atomic, and a removal
        failure propagates without rollback.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
        """
        product: Product = await self._get_product(db, product_id)

        # 기존 이미지를 먼저 분리한 뒤 삭제 — Unlink the old image before removing it
        old: Attachment | None = product.attachment
        if old is not None:
            product.attachment = None
            product.attachment_id = None
            await self.attachments.remove(db, old)

        attachment: Attachment = await self.attachments.upload(db, data)
        product.attachment_id = attachment.id
        product.attachment = attachment

        await self.products.update(db, product)
        await self.products.save(db)
        return self._to_response(product)


# 싱글턴 인스턴스 — Singleton instance
product_service: ProductService = ProductService()
