"""테스트 인프라 — 임시 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary database, session, and httpx client fixtures.
Defaults to an in-memory SQLite database (aiosqlite) with foreign keys on;
set TEST_DATABASE_URL to run against PostgreSQL instead.
Schema is created before and dropped after each test.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from storefront.config import settings
from storefront.database import Base, get_db
from storefront.main import app
from storefront.models import *  # noqa: F401,F403 — register all models with metadata
from storefront.models import Product, ProductCategory, Warehouse

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


def _configure_sqlite(dbapi_connection, connection_record) -> None:
    """SQLite 연결 설정 — 외래키 제약 (ON DELETE CASCADE/SET NULL) 및 유니코드 lower().

    SQLite's built-in lower() folds ASCII only; PostgreSQL folds every letter.
    """
    dbapi_connection.create_function(
        "lower", 1, lambda value: value.lower() if isinstance(value, str) else value
    )
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 종료 시 삭제합니다."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        eng = create_async_engine(
            TEST_DATABASE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        event.listen(eng.sync_engine, "connect", _configure_sqlite)
    else:
        eng = create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def uploads_dir(tmp_path, monkeypatch):
    """첨부 파일을 임시 디렉토리에 로컬 모드로 저장합니다."""
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "LOCAL_UPLOADS_DIR", str(path))
    monkeypatch.setattr(settings, "AWS_ACCESS_KEY_ID", "")
    monkeypatch.setattr(settings, "AWS_S3_BUCKET", "")
    return path


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def category(db: AsyncSession) -> ProductCategory:
    """테스트 상품 분류를 생성합니다."""
    c = ProductCategory(name="Electronics", description="Devices")
    db.add(c)
    await db.commit()
    return c


@pytest_asyncio.fixture
async def other_category(db: AsyncSession) -> ProductCategory:
    """두 번째 상품 분류를 생성합니다."""
    c = ProductCategory(name="Household")
    db.add(c)
    await db.commit()
    return c


@pytest_asyncio.fixture
async def warehouse(db: AsyncSession) -> Warehouse:
    """테스트 창고를 생성합니다."""
    w = Warehouse(name="Main Warehouse", address="1 Dock St")
    db.add(w)
    await db.commit()
    return w


async def count_rows(db: AsyncSession, model: type) -> int:
    """테이블 행 수를 반환합니다."""
    return (await db.execute(select(func.count()).select_from(model))).scalar() or 0


async def count_products(db: AsyncSession) -> int:
    return await count_rows(db, Product)
