"""Pure ASGI middleware that binds per-request context into structlog contextvars.

Every HTTP request gets a request_id (taken from X-Request-ID when the
caller sends one), the path and the method. Completion is logged with the
response status and duration.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

REQUEST_ID_HEADER = b"x-request-id"


class RequestContextMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        clear_contextvars()
        request_id = _find_header(scope, REQUEST_ID_HEADER) or str(uuid4())
        bind_contextvars(
            request_id=request_id,
            context_path=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )

        http_status = 500
        start = time.perf_counter()

        async def send_with_request_id(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            logger.info(
                "Request processed",
                http_status=http_status,
                http_duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )


def _find_header(scope: dict[str, Any], name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None
