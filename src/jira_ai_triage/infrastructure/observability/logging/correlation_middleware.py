"""Pure ASGI middleware for correlation ID propagation via structlog contextvars.

Binds correlation_id, endpoint and method for every HTTP request and logs request
completion with its duration and status code.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

CORRELATION_HEADER = b"x-correlation-id"


class CorrelationMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        bind_contextvars(
            correlation_id=_extract_header(scope, CORRELATION_HEADER) or str(uuid4()),
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )
        http_status = 500
        start = time.perf_counter()

        async def _capture_status(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
            await send(message)

        try:
            await self.app(scope, receive, _capture_status)
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "Request processed",
                processing_status="SUCCESS" if http_status < 400 else "ERROR",
                processing_duration_ms=duration_ms,
                processing_http_status=http_status,
            )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None
