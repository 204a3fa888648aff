"""Service Payloads — pure builders for the /api route group.

Invariants:
    - /api/health and /api/info report fixed service name and version,
      independent of Settings
    - environment falls back to "local" when ENVIRONMENT is unset
"""

from collections.abc import Mapping

from demo_microservice.core.domain_types import (
    API_DESCRIPTION, API_DISPLAY_NAME, API_SERVICE_NAME, API_VERSION,
    DEFAULT_ENVIRONMENT, GREETING, HealthStatus,
)


def resolve_environment(environ: Mapping[str, str]) -> str:
    return environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT)


def build_api_health(timestamp: str) -> dict:
    return {
        "status": HealthStatus.UP.value,
        "timestamp": timestamp,
        "service": API_SERVICE_NAME,
        "version": API_VERSION,
    }


def build_api_info(environment: str) -> dict:
    return {
        "name": API_DISPLAY_NAME,
        "description": API_DESCRIPTION,
        "version": API_VERSION,
        "environment": environment,
    }


def build_hello(timestamp: str) -> dict:
    return {"message": GREETING, "timestamp": timestamp}
