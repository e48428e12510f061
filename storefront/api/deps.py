"""FastAPI 의존성 주입 모듈 — 목록 조회 파라미터.

FastAPI dependency injection module — list query parameters.
Query strings are validated here (422 on bad input) and turned into the
PaginationParams / Filter objects the services accept.
"""

from typing import Annotated

from fastapi import Query

from storefront.config import settings
from storefront.utils.pagination import Filter, PaginationParams


def get_pagination(
    page_index: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> PaginationParams:
    """페이지 번호/크기 쿼리를 PaginationParams로 변환합니다."""
    return PaginationParams(page_index=page_index, page_size=page_size)


def get_filter(
    order_by: Annotated[str | None, Query()] = None,
    is_desc: Annotated[bool, Query()] = False,
) -> Filter:
    """정렬 쿼리를 Filter로 변환합니다."""
    return Filter(order_by=order_by, is_desc=is_desc)
