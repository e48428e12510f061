"""주문 테스트 — 서비스 및 API.

Order tests — placing orders, price snapshots, totals and product deletion.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import Order, OrderItem
from storefront.schemas.order import OrderCreate, OrderItemCreate
from storefront.schemas.product import ProductCreate, ProductUpdate
from storefront.services.order_service import order_service
from storefront.services.product_service import product_service
from storefront.utils.exceptions import BadRequestError, NotFoundError
from tests.conftest import count_rows

BASE = "/api/v1/orders/"


async def _product(db: AsyncSession, category_id: int, name: str, price: str):
    return await product_service.add(
        db, ProductCreate(name=name, price=Decimal(price), category_id=category_id)
    )


class TestOrderService:
    """주문 서비스 테스트."""

    async def test_add_computes_total(self, db: AsyncSession, category):
        """단가 복사 및 합계 계산."""
        pen = await _product(db, category.id, "Pen", "1.50")
        pad = await _product(db, category.id, "Pad", "4.00")

        result = await order_service.add(db, OrderCreate(
            customer_name="Dana",
            items=[
                OrderItemCreate(product_id=pen.id, quantity=4),
                OrderItemCreate(product_id=pad.id, quantity=1),
            ],
        ))
        assert result.status == "pending"
        assert [i.unit_price for i in result.items] == [Decimal("1.50"), Decimal("4.00")]
        assert result.total == Decimal("10.00")

    async def test_price_change_keeps_snapshot(self, db: AsyncSession, category):
        """주문 후 가격 변경은 주문 단가에 영향 없음."""
        pen = await _product(db, category.id, "Pen", "1.50")
        order = await order_service.add(db, OrderCreate(
            customer_name="Dana", items=[OrderItemCreate(product_id=pen.id, quantity=2)],
        ))

        await product_service.modify(db, ProductUpdate(
            id=pen.id, name="Pen", price=Decimal("9.99"), category_id=category.id,
        ))

        unit_price = (await db.execute(
            select(OrderItem.unit_price).where(OrderItem.order_id == order.id)
        )).scalar_one()
        assert unit_price == Decimal("1.50")

    async def test_add_without_items(self, db: AsyncSession):
        with pytest.raises(BadRequestError):
            await order_service.add(db, OrderCreate(customer_name="Dana", items=[]))

    async def test_add_missing_product(self, db: AsyncSession, category):
        """존재하지 않는 상품이 있으면 주문 전체 미저장."""
        pen = await _product(db, category.id, "Pen", "1.50")
        with pytest.raises(NotFoundError):
            await order_service.add(db, OrderCreate(
                customer_name="Dana",
                items=[
                    OrderItemCreate(product_id=pen.id, quantity=1),
                    OrderItemCreate(product_id=9999, quantity=1),
                ],
            ))
        assert await count_rows(db, Order) == 0

    async def test_product_delete_keeps_order(self, db: AsyncSession, category):
        """상품 삭제 시 주문 항목은 남고 상품 참조만 해제."""
        pen = await _product(db, category.id, "Pen", "1.50")
        order = await order_service.add(db, OrderCreate(
            customer_name="Dana", items=[OrderItemCreate(product_id=pen.id, quantity=1)],
        ))

        await product_service.remove(db, pen.id)

        product_id = (await db.execute(
            select(OrderItem.product_id).where(OrderItem.order_id == order.id)
        )).scalar_one()
        assert product_id is None

    async def test_remove_cascades_items(self, db: AsyncSession, category):
        pen = await _product(db, category.id, "Pen", "1.50")
        order = await order_service.add(db, OrderCreate(
            customer_name="Dana", items=[OrderItemCreate(product_id=pen.id, quantity=1)],
        ))

        assert await order_service.remove(db, order.id) is True
        assert await count_rows(db, OrderItem) == 0
        with pytest.raises(NotFoundError):
            await order_service.retrieve_by_id(db, order.id)


class TestOrderApi:
    """주문 API 테스트."""

    async def test_create_and_get(self, client: AsyncClient, db: AsyncSession, category):
        lamp = await _product(db, category.id, "Lamp", "20.00")

        resp = await client.post(BASE, json={
            "customer_name": "Robin",
            "items": [{"product_id": lamp.id, "quantity": 2}],
        })
        assert resp.status_code == 201
        order_id = resp.json()["id"]
        assert Decimal(resp.json()["total"]) == Decimal("40.00")

        resp = await client.get(f"{BASE}{order_id}")
        assert resp.status_code == 200
        assert resp.json()["customer_name"] == "Robin"

        resp = await client.get(BASE)
        assert len(resp.json()) == 1

    async def test_empty_items_returns_400(self, client: AsyncClient):
        resp = await client.post(BASE, json={"customer_name": "Robin", "items": []})
        assert resp.status_code == 400

    async def test_zero_quantity_returns_422(self, client: AsyncClient, db: AsyncSession, category):
        lamp = await _product(db, category.id, "Lamp", "20.00")
        resp = await client.post(BASE, json={
            "customer_name": "Robin",
            "items": [{"product_id": lamp.id, "quantity": 0}],
        })
        assert resp.status_code == 422
