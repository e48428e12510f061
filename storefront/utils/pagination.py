"""페이지네이션 및 정렬 유틸리티 모듈.

Pagination and ordering utilities for SQLAlchemy select queries.
Both helpers only build the query; execution stays with the repository.
"""

from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy import Select
from sqlalchemy.inspection import inspect

from storefront.config import settings
from storefront.utils.exceptions import BadRequestError


class PaginationParams(BaseModel):
    """페이지네이션 요청 파라미터.

    Pagination request parameters.

    Attributes:
        page_index: 페이지 번호, 1부터 시작 (Page number, 1-based)
        page_size: 페이지당 항목 수 (Items per page)
    """

    page_index: int = Field(default=1, ge=1)
    page_size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page_index - 1) * self.page_size


class Filter(BaseModel):
    """정렬 조건.

    Sort specification keyed by column name.

    Attributes:
        order_by: 정렬 컬럼명 (Column name to order by, None keeps default order)
        is_desc: 내림차순 여부 (Descending order flag)
    """

    order_by: str | None = None
    is_desc: bool = False


def apply_order(query: Select[Any], model: type, filter: Filter | None) -> Select[Any]:
    """정렬 조건을 쿼리에 적용합니다.

    Order the query by the filter's column. Without a column the query is
    ordered by primary key so paging stays stable.

    Raises:
        BadRequestError: 모델에 없는 컬럼명일 때 (Unknown column name)
    """
    columns = inspect(model).columns
    if filter is None or not filter.order_by:
        return query.order_by(*inspect(model).primary_key)

    column = columns.get(filter.order_by)
    if column is None:
        raise BadRequestError(f"Cannot order by unknown field '{filter.order_by}'")

    # 동률 정렬 안정화 — Primary key as tie-breaker
    return query.order_by(column.desc() if filter.is_desc else column.asc(), *inspect(model).primary_key)


def to_paginate(query: Select[Any], params: PaginationParams | None) -> Select[Any]:
    """OFFSET/LIMIT을 적용합니다.

    Translate 1-based page parameters into offset/limit. None leaves the query unpaged.
    """
    if params is None:
        return query
    return query.offset(params.offset).limit(params.page_size)
