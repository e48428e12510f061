"""창고 서비스 — 창고 CRUD 비즈니스 로직.

Warehouse Service — Business logic for warehouse CRUD operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.inventory import Warehouse
from storefront.repositories.inventory_repository import (
    WarehouseRepository,
    warehouse_repository,
)
from storefront.schemas.inventory import WarehouseCreate, WarehouseResponse, WarehouseUpdate
from storefront.utils.exceptions import AlreadyExistsError, NotFoundError
from storefront.utils.pagination import PaginationParams, apply_order, to_paginate


class WarehouseService:
    """창고 관련 비즈니스 로직을 처리하는 서비스.

    Service handling warehouse business logic.
    Provides add/modify/remove/retrieve operations, one commit per call.
    """

    def __init__(self, warehouses: WarehouseRepository = warehouse_repository) -> None:
        self.warehouses = warehouses

    def _to_response(self, warehouse: Warehouse) -> WarehouseResponse:
        """창고 모델을 응답 스키마로 변환합니다.

        Convert a Warehouse model instance to a WarehouseResponse schema.
        """
        return WarehouseResponse(
            id=warehouse.id,
            name=warehouse.name,
            address=warehouse.address,
        )

    async def _get(self, db: AsyncSession, warehouse_id: int) -> Warehouse:
        warehouse: Warehouse | None = await self.warehouses.select_by_id(db, warehouse_id)
        if warehouse is None:
            raise NotFoundError("This warehouse is not found")
        return warehouse

    async def add(self, db: AsyncSession, data: WarehouseCreate) -> WarehouseResponse:
        """새 창고를 생성합니다.

        Create a new warehouse.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 창고 생성 데이터 (Warehouse creation data)

        Returns:
            WarehouseResponse: 생성된 창고 응답 (Created warehouse response)

        Raises:
            AlreadyExistsError: 같은 이름의 창고가 이미 존재할 때
                                (A warehouse with the same name already exists)
        """
        if await self.warehouses.get_by_name(db, data.name) is not None:
            raise AlreadyExistsError("This warehouse already exists")

        warehouse = Warehouse(name=data.name, address=data.address)
        await self.warehouses.create(db, warehouse)
        await self.warehouses.save(db)
        return self._to_response(warehouse)

    async def modify(self, db: AsyncSession, data: WarehouseUpdate) -> WarehouseResponse:
        """창고 정보를 수정합니다.

        Update an existing warehouse (full-field overwrite).

        Raises:
            NotFoundError: 창고를 찾을 수 없을 때 (Warehouse not found)
            AlreadyExistsError: 다른 창고가 같은 이름을 사용 중일 때
                                (Another warehouse already uses the name)
        """
        warehouse: Warehouse = await self._get(db, data.id)

        holder: Warehouse | None = await self.warehouses.get_by_name(db, data.name)
        if holder is not None and holder.id != warehouse.id:
            raise AlreadyExistsError("This warehouse already exists")

        warehouse.name = data.name
        warehouse.address = data.address
        await self.warehouses.update(db, warehouse)
        await self.warehouses.save(db)
        return self._to_response(warehouse)

    async def remove(self, db: AsyncSession, warehouse_id: int) -> bool:
        """창고를 삭제합니다.

        Raises:
            NotFoundError: 창고를 찾을 수 없을 때 (Warehouse not found)
        """
        warehouse: Warehouse = await self._get(db, warehouse_id)
        await self.warehouses.delete(db, warehouse)
        await self.warehouses.save(db)
        return True

    async def retrieve_by_id(self, db: AsyncSession, warehouse_id: int) -> WarehouseResponse:
        """창고 정보를 조회합니다.

        Raises:
            NotFoundError: 창고를 찾을 수 없을 때 (Warehouse not found)
        """
        return self._to_response(await self._get(db, warehouse_id))

    async def retrieve_all(
        self,
        db: AsyncSession,
        params: PaginationParams | None = None,
    ) -> list[WarehouseResponse]:
        """창고 목록을 ID 순으로 조회합니다 (List warehouses ordered by id)."""
        query = to_paginate(apply_order(self.warehouses.select_all(), Warehouse, None), params)
        warehouses: list[Warehouse] = await self.warehouses.fetch_all(db, query)
        return [self._to_response(w) for w in warehouses]


# 싱글턴 인스턴스 — Singleton instance
warehouse_service: WarehouseService = WarehouseService()
