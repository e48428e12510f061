"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - products: 상품 CRUD 및 이미지 (Products and product images)
    - categories: 상품 분류 (Product categories)
    - warehouses: 창고 (Warehouses)
    - inventories: 재고 (Inventory rows)
    - orders: 주문 (Orders)
"""

from fastapi import APIRouter

from storefront.api.products import router as products_router
from storefront.api.categories import router as categories_router
from storefront.api.warehouses import router as warehouses_router
from storefront.api.inventories import router as inventories_router
from storefront.api.orders import router as orders_router

api_router: APIRouter = APIRouter()

api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(warehouses_router, prefix="/warehouses", tags=["Warehouses"])
api_router.include_router(inventories_router, prefix="/inventories", tags=["Inventories"])
api_router.include_router(orders_router, prefix="/orders", tags=["Orders"])
