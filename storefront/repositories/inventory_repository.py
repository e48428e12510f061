"""재고 및 창고 레포지토리.

Inventory and Warehouse Repositories.
The inventory repository also serves the product enrichment lookup:
the latest stock row for a batch of products in one query.
"""

from collections.abc import Iterable

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.inventory import Inventory, Warehouse
from storefront.repositories.base import BaseRepository


class WarehouseRepository(BaseRepository[Warehouse]):
    """창고 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Warehouse)

    async def get_by_name(self, db: AsyncSession, name: str) -> Warehouse | None:
        """이름으로 창고를 조회합니다 (대소문자 무시)."""
        return await self.select(db, func.lower(Warehouse.name) == name.lower())


class InventoryRepository(BaseRepository[Inventory]):
    """재고 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the inventories table.
    """

    def __init__(self) -> None:
        super().__init__(Inventory)

    async def get_latest_by_product_ids(
        self,
        db: AsyncSession,
        product_ids: Iterable[int],
    ) -> dict[int, Inventory]:
        """상품별 최신 재고 행을 한 번에 조회합니다.

        Retrieve the latest inventory row (highest id) per product with a
        single query, keyed by product id. Products without stock are absent.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            product_ids: 조회할 상품 ID 목록 (Product ids to look up)

        Returns:
            dict[int, Inventory]: {상품 ID: 최신 재고} (Latest inventory per product id)
        """
        ids: list[int] = list(dict.fromkeys(product_ids))
        if not ids:
            return {}

        query: Select = (
            select(Inventory)
            .where(Inventory.product_id.in_(ids))
            .order_by(Inventory.product_id, Inventory.id)
        )
        result = await db.execute(query)

        # id 오름차순이므로 마지막 행이 최신 — Ascending id, so the last row wins
        latest: dict[int, Inventory] = {}
        for inventory in result.scalars().all():
            latest[inventory.product_id] = inventory
        return latest


# 싱글턴 인스턴스 — Singleton instances
warehouse_repository: WarehouseRepository = WarehouseRepository()
inventory_repository: InventoryRepository = InventoryRepository()
