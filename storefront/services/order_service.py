"""주문 서비스 — 주문 생성/조회/삭제 비즈니스 로직.

Order Service — Business logic for placing, reading and removing orders.
Order items only read products: the unit price is copied at order time.
"""

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.order import Order, OrderItem
from storefront.models.product import Product
from storefront.repositories.order_repository import ORDER_INCLUDES, OrderRepository, order_repository
from storefront.repositories.product_repository import ProductRepository, product_repository
from storefront.schemas.order import OrderCreate, OrderItemResponse, OrderResponse
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.pagination import PaginationParams, apply_order, to_paginate


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스."""

    def __init__(
        self,
        orders: OrderRepository = order_repository,
        products: ProductRepository = product_repository,
    ) -> None:
        self.orders = orders
        self.products = products

    def _to_response(self, order: Order) -> OrderResponse:
        """주문 모델을 응답 스키마로 변환합니다 (합계 포함).

        Convert an Order (items loaded) to an OrderResponse with its total.
        """
        items: list[OrderItemResponse] = [
            OrderItemResponse(
                id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in order.items
        ]
        total: Decimal = sum((i.unit_price * i.quantity for i in items), Decimal("0"))
        return OrderResponse(
            id=order.id,
            customer_name=order.customer_name,
            status=order.status,
            items=items,
            total=total,
            created_at=order.created_at,
        )

    async def _get(self, db: AsyncSession, order_id: int) -> Order:
        order: Order | None = await self.orders.select_by_id(db, order_id, includes=ORDER_INCLUDES)
        if order is None:
            raise NotFoundError("This order is not found")
        return order

    async def add(self, db: AsyncSession, data: OrderCreate) -> OrderResponse:
        """새 주문을 생성합니다.

        Place an order. Every item must reference an existing product;
        nothing is written if any of them is missing.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 주문 생성 데이터 (Order creation data)

        Returns:
            OrderResponse: 생성된 주문 응답 (Created order response)

        Raises:
            BadRequestError: 주문 항목이 비어 있을 때 (Order without items)
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
        """
        if not data.items:
            raise BadRequestError("An order must contain at least one item")

        items: list[OrderItem] = []
        for item in data.items:
            product: Product | None = await self.products.select_by_id(db, item.product_id)
            if product is None:
                raise NotFoundError(f"Product {item.product_id} is not found")
            items.append(
                OrderItem(product_id=product.id, quantity=item.quantity, unit_price=product.price)
            )

        order = Order(customer_name=data.customer_name, status="pending", items=items)
        await self.orders.create(db, order)
        await self.orders.save(db)
        return self._to_response(order)

    async def remove(self, db: AsyncSession, order_id: int) -> bool:
        """주문을 삭제합니다 (항목 포함).

        Raises:
            NotFoundError: 주문을 찾을 수 없을 때 (Order not found)
        """
        order: Order = await self._get(db, order_id)
        await self.orders.delete(db, order)
        await self.orders.save(db)
        return True

    async def retrieve_by_id(self, db: AsyncSession, order_id: int) -> OrderResponse:
        return self._to_response(await self._get(db, order_id))

    async def retrieve_all(
        self,
        db: AsyncSession,
        params: PaginationParams | None = None,
    ) -> list[OrderResponse]:
        query = self.orders.select_all(includes=ORDER_INCLUDES)
        query = to_paginate(apply_order(query, Order, None), params)
        orders: list[Order] = await self.orders.fetch_all(db, query)
        return [self._to_response(o) for o in orders]


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
