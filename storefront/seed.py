"""초기 데이터 시드 스크립트 — 기본 상품 분류 및 창고 생성.

Seed script — Creates the default product categories and a main warehouse.
Run this script once to bootstrap the database with required initial data.

Usage:
    python -m storefront.seed

Creates:
    - 기본 상품 분류 3개 (3 default product categories)
    - 기본 창고 1개: "Main Warehouse" (1 default warehouse)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import async_session, engine, Base
from storefront.models import ProductCategory, Warehouse

DEFAULT_CATEGORIES: list[tuple[str, str]] = [
    ("General", "Uncategorized products"),
    ("Electronics", "Devices and accessories"),
    ("Household", "Home and kitchen goods"),
]

DEFAULT_WAREHOUSE: str = "Main Warehouse"


async def seed_catalog(db: AsyncSession) -> bool:
    """기본 분류와 창고를 추가합니다.

    Insert the default categories and warehouse.

    Idempotent: 분류가 하나라도 있으면 건너뜁니다 (Skips when any category exists).

    Returns:
        bool: 시드를 수행했는지 여부 (Whether anything was inserted)
    """
    result = await db.execute(select(ProductCategory).limit(1))
    if result.scalar_one_or_none():
        return False

    for name, description in DEFAULT_CATEGORIES:
        db.add(ProductCategory(name=name, description=description))
    db.add(Warehouse(name=DEFAULT_WAREHOUSE))

    await db.commit()
    return True


async def seed() -> None:
    """테이블을 만들고 초기 데이터를 시드합니다.

    Create tables if they don't exist, then seed the initial data.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await seed_catalog(db):
            print(f"Seeded: {len(DEFAULT_CATEGORIES)} categories, warehouse={DEFAULT_WAREHOUSE}")
        else:
            print("Already seeded. Skipping.")


if __name__ == "__main__":
    asyncio.run(seed())
