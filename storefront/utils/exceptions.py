"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses raised by services.
They are terminal, client-correctable conditions: services never catch them,
and FastAPI turns them into JSON ``{"detail": ...}`` responses at the boundary.

Usage:
    from storefront.utils.exceptions import NotFoundError, AlreadyExistsError
    raise NotFoundError("This product is not found")
    raise AlreadyExistsError("This product already exists")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 대상 또는 참조 리소스가 없을 때 사용.

    404 Not Found exception.
    Raised when a targeted entity (product, warehouse, ...) or a referenced
    entity (category, product of an order item, ...) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AlreadyExistsError(HTTPException):
    """409 Conflict 예외 — 고유 키 중복 생성 시도 시 사용.

    409 Conflict exception.
    Raised when creating or renaming an entity would duplicate a unique name.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is invalid beyond what Pydantic validation catches
    (e.g. sorting by an unknown column, an order without items).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
