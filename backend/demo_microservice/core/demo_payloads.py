"""Demo Payloads — pure builders for the /demo route group.

Invariants:
    - No IO: settings, identifiers, timestamps and runtime stats are all passed in
    - Body shape is fixed per route; only timestamp values vary between calls
    - Response headers for /demo/monetary echo the same IDs placed in the body

Design Decisions:
    - Builders take the Settings object explicitly (ADR: no hidden global config)
    - Headers built alongside the body so the route only copies them onto the response
"""

from demo_microservice.config import Settings
from demo_microservice.core.domain_types import (
    APP_VERSION_HEADER, BUILD_INFO, BUILD_INFO_HEADER, CORRELATION_ID_HEADER,
    REQUEST_ID_HEADER, RESPONSE_TIME_HEADER, SERVICE_NAME_HEADER,
    HealthStatus, RuntimeStats,
)

MONETARY_ENDPOINT = "/demo/monetary"


def build_monetary_payload(
    settings: Settings, request_id: str, correlation_id: str, timestamp: str,
) -> dict:
    """Simulated monetary snapshot. Exchange rate is fixed at 1.0 USD."""
    return {
        "version": settings.app_version,
        "service": settings.application_name,
        "endpoint": MONETARY_ENDPOINT,
        "timestamp": timestamp,
        "target_uri": settings.target_uri,
        "status": "active",
        "request_id": request_id,
        "correlation_id": correlation_id,
        "monetary_info": {
            "currency": "USD",
            "exchange_rate": 1.0,
            "last_updated": timestamp,
            "provider": "demo-service",
        },
    }


def build_monetary_headers(
    settings: Settings, request_id: str, correlation_id: str, response_time_ms: int,
) -> dict[str, str]:
    return {
        APP_VERSION_HEADER: settings.app_version,
        SERVICE_NAME_HEADER: settings.application_name,
        BUILD_INFO_HEADER: BUILD_INFO,
        REQUEST_ID_HEADER: request_id,
        CORRELATION_ID_HEADER: correlation_id,
        RESPONSE_TIME_HEADER: str(response_time_ms),
    }


def build_demo_health(settings: Settings, timestamp: str) -> dict:
    return {
        "status": HealthStatus.UP.value,
        "version": settings.app_version,
        "service": settings.application_name,
        "timestamp": timestamp,
    }


def build_demo_info(
    settings: Settings, runtime: RuntimeStats, timestamp: str,
) -> dict:
    """Service identity plus a runtime snapshot.

    ``java_version`` and ``spring_profiles`` keep the key names existing
    clients parse; the values describe this runtime.
    """
    return {
        "app": settings.application_name,
        "version": settings.app_version,
        "target_uri": settings.target_uri,
        "java_version": runtime.runtime_version,
        "spring_profiles": settings.spring_profiles_active,
        "build_timestamp": timestamp,
        "system": {
            "available_processors": runtime.available_processors,
            "max_memory": runtime.max_memory,
            "total_memory": runtime.total_memory,
            "free_memory": runtime.free_memory,
        },
    }


def version_headers(settings: Settings) -> dict[str, str]:
    return {APP_VERSION_HEADER: settings.app_version}
