"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends structured logs to Axiom.
Logs: API endpoint, method, data (body/params), status code, error reason.
Sensitive fields (password, token, secret, credentials) are masked and
multipart uploads (product images) are logged without their file bytes.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from storefront.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request/response bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|access_key|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 본문을 읽는 메서드 — Methods whose body is logged
_BODY_METHODS = ("POST", "PUT", "PATCH")


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한 — Truncate large string values to prevent oversized logs."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def parse_body(body_bytes: bytes, content_type: str) -> Any:
    """요청 본문을 로깅용 값으로 변환합니다.

    Turn a raw request body into a loggable value: masked JSON, a marker for
    multipart uploads, or a marker for anything else that is not JSON.
    """
    if not body_bytes:
        return None
    if content_type.startswith("multipart/"):
        return f"(multipart body, {len(body_bytes)} bytes)"
    try:
        return truncate(mask_sensitive(json.loads(body_bytes)))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def extract_error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유를 추출합니다 — FastAPI ``{"detail": ...}`` aware."""
    try:
        error_data = json.loads(body)
        detail = error_data.get("detail", str(error_data)) if isinstance(error_data, dict) else str(error_data)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]

    if not isinstance(detail, str):
        detail = json.dumps(detail, default=str)
    if len(detail) > 500:
        detail = detail[:500] + "..."
    return detail


def build_event(
    method: str,
    path: str,
    status_code: int,
    started: float,
    query_params: dict[str, str] | None = None,
    request_body: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트를 구성합니다.

    Build one structured log event. Optional fields are omitted when empty.
    """
    event: dict[str, Any] = {
        "service": settings.APP_NAME,
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": round((time.time() - started) * 1000, 2),
    }
    if query_params:
        event["query_params"] = mask_sensitive(query_params)
    if request_body is not None:
        event["request_body"] = request_body
    if error:
        event["error"] = error
    return event


async def _drain(response: Response) -> bytes:
    """스트리밍 응답 본문을 모두 읽습니다 (Consume a streaming response body)."""
    body = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
    return body


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.
    Passes requests straight through when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _send(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._client or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        started = time.time()
        query_params = dict(request.query_params) or None
        request_body: Any = None
        if request.method in _BODY_METHODS:
            request_body = parse_body(
                await request.body(), request.headers.get("content-type", "")
            )

        try:
            response = await call_next(request)
        except Exception as exc:
            self._send(build_event(
                request.method, request.url.path, 500, started,
                query_params, request_body, f"{type(exc).__name__}: {str(exc)[:300]}",
            ))
            raise

        error: str | None = None
        if response.status_code >= 400:
            # 본문을 읽은 뒤 같은 내용으로 응답 재구성 — Rebuild the consumed response
            body = await _drain(response)
            error = extract_error_detail(body)
            response = Response(
                content=body,
                status_code=response.status_code,
                headers=dict(response.headers),
                media_type=response.media_type,
            )

        self._send(build_event(
            request.method, request.url.path, response.status_code, started,
            query_params, request_body, error,
        ))
        return response
