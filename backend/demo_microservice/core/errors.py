"""Error Hierarchy — typed, categorized exceptions for demo service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400-level; anything unexpected is mapped to 500 by the catch-all handler
    - to_response() produces the REST envelope {"error": {...}}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DemoServiceError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: request/correlation IDs travel with the error without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    correlation_id: str | None = None
    debug_info: dict[str, Any] | None = None


class DemoServiceError(Exception):
    """Base exception for all demo service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "request_id": self.context.request_id,
                    "correlation_id": self.context.correlation_id,
                },
            }
        }


class LoadDurationExceededError(DemoServiceError):
    """Requested load duration is above the configured ceiling."""
    def __init__(
        self, duration_ms: int, max_duration_ms: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Load duration {duration_ms}ms exceeds the maximum of {max_duration_ms}ms",
            "LOAD_DURATION_EXCEEDED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.duration_ms = duration_ms
        self.max_duration_ms = max_duration_ms
