"""Request Logging Middleware — one structured log line per HTTP exchange.

Invariants:
    - Every request is logged exactly once, with status and duration; a raising route logs as 500
    - Logging never alters the response
    - Version and pod come from startup settings, bound once at construction

Design Decisions:
    - BaseHTTPMiddleware over a raw ASGI callable: request/response objects are enough here
    - Request/correlation IDs logged only when the caller sent them; routes own generation
"""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from demo_microservice.core.domain_types import (
    CORRELATION_ID_HEADER, REQUEST_ID_HEADER,
)

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency for each request."""

    def __init__(self, app: ASGIApp, version: str, pod: str):
        super().__init__(app)
        self.version = version
        self.pod = pod

    async def dispatch(
        self, request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self._log(request, status_code, start)

    def _log(self, request: Request, status_code: int, start: float) -> None:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} -> {status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
                "version": self.version,
                "pod": self.pod,
                "request_id": request.headers.get(REQUEST_ID_HEADER),
                "correlation_id": request.headers.get(CORRELATION_ID_HEADER),
            },
        )
