"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides the generic persistence gateway every service talks to:
select one, build a lazy select-all query, create/update/delete entities
in the session, and commit the unit of work with ``save``.

Usage:
    class WarehouseRepository(BaseRepository[Warehouse]):
        def __init__(self) -> None:
            super().__init__(Warehouse)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Mutating methods only stage changes in the session; nothing is
    committed until ``save`` is called, once per service operation.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def _include(self, query: Select, includes: Sequence[str] | None) -> Select:
        """관계 속성을 즉시 로딩합니다 (Eager-load the named relationships)."""
        for name in includes or ():
            query = query.options(selectinload(getattr(self.model, name)))
        return query

    async def select(
        self,
        db: AsyncSession,
        *criteria: ColumnElement[bool],
        includes: Sequence[str] | None = None,
    ) -> ModelType | None:
        """조건에 맞는 단일 레코드를 조회합니다.

        Retrieve the first record matching the given criteria.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            criteria: SQLAlchemy 조건식 (SQLAlchemy boolean expressions)
            includes: 즉시 로딩할 관계 이름 목록 (Relationship names to eager-load)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model)
        if criteria:
            query = query.where(*criteria)
        query = self._include(query, includes)

        result = await db.execute(query)
        return result.scalars().first()

    async def select_by_id(
        self,
        db: AsyncSession,
        record_id: int,
        includes: Sequence[str] | None = None,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.
        """
        return await self.select(db, self.model.id == record_id, includes=includes)

    def select_all(
        self,
        *criteria: ColumnElement[bool],
        includes: Sequence[str] | None = None,
        filters: dict[str, Any] | None = None,
    ) -> Select:
        """조건에 맞는 모든 레코드에 대한 지연 쿼리를 만듭니다.

        Build a lazy SELECT over all records. Nothing is executed here;
        callers may order/paginate the query before materializing it
        with ``fetch_all``.

        Args:
            criteria: SQLAlchemy 조건식 (SQLAlchemy boolean expressions)
            includes: 즉시 로딩할 관계 이름 목록 (Relationship names to eager-load)
            filters: 동등 비교 필터 {'컬럼명': 값}, None 값은 무시
                     (Equality filters {'column_name': value}; None values are skipped)

        Returns:
            Select: 실행되지 않은 SELECT 쿼리 (Unexecuted SELECT query)
        """
        query: Select = select(self.model)
        if criteria:
            query = query.where(*criteria)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        return self._include(query, includes)

    async def fetch_all(self, db: AsyncSession, query: Select) -> list[ModelType]:
        """지연 쿼리를 실행하여 목록으로 반환합니다 (Materialize a lazy query)."""
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """새 엔티티를 세션에 추가합니다.

        Stage a new entity for insertion. The row gets its id on flush/commit.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 새 엔티티 (New entity instance)

        Returns:
            ModelType: 세션에 추가된 엔티티 (The staged entity)
        """
        db.add(entity)
        return entity

    async def update(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """변경된 엔티티를 세션에 반영합니다.

        Stage an in-place modified entity for update.
        """
        db.add(entity)
        return entity

    async def delete(self, db: AsyncSession, entity: ModelType) -> None:
        """엔티티를 삭제 대상으로 표시합니다 (Stage an entity for deletion)."""
        await db.delete(entity)

    async def save(self, db: AsyncSession) -> None:
        """작업 단위를 커밋합니다.

        Commit the unit of work. Persistence errors propagate to the caller.
        """
        await db.commit()

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given equality filters exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
