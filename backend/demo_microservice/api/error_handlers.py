"""Error Handlers — global exception handlers for the demo service API.

Invariants:
    - DemoServiceError → its own status and {"error": {...}} envelope
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details
    - Caller-sent X-Request-ID / X-Correlation-ID are copied into every error envelope

Design Decisions:
    - Handlers registered by one function so main.py only wires components
    - IDs read from request headers, not generated: error paths must not invent correlation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from demo_microservice.core.domain_types import (
    CORRELATION_ID_HEADER, REQUEST_ID_HEADER,
)
from demo_microservice.core.errors import (
    DemoServiceError, ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(DemoServiceError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _request_ids(request: Request) -> dict:
    return {
        "request_id": request.headers.get(REQUEST_ID_HEADER),
        "correlation_id": request.headers.get(CORRELATION_ID_HEADER),
    }


async def handle_domain_error(request: Request, exc: DemoServiceError):
    ids = _request_ids(request)
    exc.context.request_id = exc.context.request_id or ids["request_id"]
    exc.context.correlation_id = exc.context.correlation_id or ids["correlation_id"]
    logger.warning(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path, **ids},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            context=_request_ids(request), details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            context=_request_ids(request),
        ),
    )


def _envelope(
    code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }
