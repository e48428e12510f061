"""재고 서비스 — 재고 CRUD 비즈니스 로직.

Inventory Service — Business logic for inventory rows.
A row references an existing product and, optionally, an existing warehouse.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.inventory import Inventory
from storefront.repositories.inventory_repository import (
    InventoryRepository,
    WarehouseRepository,
    inventory_repository,
    warehouse_repository,
)
from storefront.repositories.product_repository import ProductRepository, product_repository
from storefront.schemas.inventory import InventoryCreate, InventoryResponse, InventoryUpdate
from storefront.utils.exceptions import NotFoundError
from storefront.utils.pagination import PaginationParams, apply_order, to_paginate


class InventoryService:
    """재고 관련 비즈니스 로직을 처리하는 서비스."""

    def __init__(
        self,
        inventories: InventoryRepository = inventory_repository,
        products: ProductRepository = product_repository,
        warehouses: WarehouseRepository = warehouse_repository,
    ) -> None:
        self.inventories = inventories
        self.products = products
        self.warehouses = warehouses

    def _to_response(self, inventory: Inventory) -> InventoryResponse:
        return InventoryResponse(
            id=inventory.id,
            product_id=inventory.product_id,
            warehouse_id=inventory.warehouse_id,
            quantity=inventory.quantity,
        )

    async def _get(self, db: AsyncSession, inventory_id: int) -> Inventory:
        inventory: Inventory | None = await self.inventories.select_by_id(db, inventory_id)
        if inventory is None:
            raise NotFoundError("This inventory is not found")
        return inventory

    async def _check_references(
        self,
        db: AsyncSession,
        product_id: int,
        warehouse_id: int | None,
    ) -> None:
        """참조 상품/창고의 존재를 확인합니다.

        Verify the referenced product and (optional) warehouse exist.

        Raises:
            NotFoundError: 상품 또는 창고를 찾을 수 없을 때 (Product or warehouse not found)
        """
        if not await self.products.exists(db, {"id": product_id}):
            raise NotFoundError("This product is not found")
        if warehouse_id is not None and not await self.warehouses.exists(db, {"id": warehouse_id}):
            raise NotFoundError("This warehouse is not found")

    async def add(self, db: AsyncSession, data: InventoryCreate) -> InventoryResponse:
        """새 재고 행을 생성합니다.

        Create an inventory row for an existing product.

        Raises:
            NotFoundError: 상품 또는 창고를 찾을 수 없을 때 (Product or warehouse not found)
        """
        await self._check_references(db, data.product_id, data.warehouse_id)

        inventory = Inventory(
            product_id=data.product_id,
            warehouse_id=data.warehouse_id,
            quantity=data.quantity,
        )
        await self.inventories.create(db, inventory)
        await self.inventories.save(db)
        return self._to_response(inventory)

    async def modify(self, db: AsyncSession, data: InventoryUpdate) -> InventoryResponse:
        """재고 행을 수정합니다 (전체 필드 덮어쓰기).

        Raises:
            NotFoundError: 재고, 상품 또는 창고를 찾을 수 없을 때
                           (Inventory, product or warehouse not found)
        """
        inventory: Inventory = await self._get(db, data.id)
        await self._check_references(db, data.product_id, data.warehouse_id)

        inventory.product_id = data.product_id
        inventory.warehouse_id = data.warehouse_id
        inventory.quantity = data.quantity
        await self.inventories.update(db, inventory)
        await self.inventories.save(db)
        return self._to_response(inventory)

    async def remove(self, db: AsyncSession, inventory_id: int) -> bool:
        inventory: Inventory = await self._get(db, inventory_id)
        await self.inventories.delete(db, inventory)
        await self.inventories.save(db)
        return True

    async def retrieve_by_id(self, db: AsyncSession, inventory_id: int) -> InventoryResponse:
        return self._to_response(await self._get(db, inventory_id))

    async def retrieve_all(
        self,
        db: AsyncSession,
        params: PaginationParams | None = None,
        product_id: int | None = None,
    ) -> list[InventoryResponse]:
        """재고 목록을 조회합니다. product_id로 좁힐 수 있습니다.

        List inventory rows ordered by id, optionally for one product.
        """
        query = self.inventories.select_all(filters={"product_id": product_id})
        query = to_paginate(apply_order(query, Inventory, None), params)
        inventories: list[Inventory] = await self.inventories.fetch_all(db, query)
        return [self._to_response(i) for i in inventories]


# 싱글턴 인스턴스 — Singleton instance
inventory_service: InventoryService = InventoryService()
