"""주문 레포지토리.

Order Repository — CRUD for orders; line items travel with their order
through the ``items`` relationship cascade.
"""

from storefront.models.order import Order
from storefront.repositories.base import BaseRepository

# 주문 조회 시 함께 로딩할 관계 — Relationships loaded with every order read
ORDER_INCLUDES: tuple[str, ...] = ("items",)


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Order)


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
