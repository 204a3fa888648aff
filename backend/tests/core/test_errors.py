"""Error Hierarchy — envelope shape and context propagation."""

from demo_microservice.core.errors import (
    DemoServiceError, ErrorCategory, ErrorContext, ErrorSeverity,
    LoadDurationExceededError,
)


def test_to_response_envelope():
    err = DemoServiceError(
        "boom", "SOME_CODE", ErrorCategory.INTERNAL,
        ErrorSeverity.CRITICAL, ErrorContext(request_id="r-1"), 503,
    )
    envelope = err.to_response()["error"]
    assert envelope["code"] == "SOME_CODE"
    assert envelope["message"] == "boom"
    assert envelope["category"] == "internal"
    assert envelope["severity"] == "critical"
    assert envelope["context"] == {"request_id": "r-1", "correlation_id": None}
    assert err.http_status == 503


def test_load_duration_exceeded_is_client_error():
    err = LoadDurationExceededError(9000, 500)
    assert isinstance(err, DemoServiceError)
    assert err.http_status == 400
    assert err.code == "LOAD_DURATION_EXCEEDED"
    assert "9000ms" in err.message
