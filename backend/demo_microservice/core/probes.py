"""Probes — payloads for the container orchestration endpoints.

Invariants:
    - Liveness and readiness carry only status and version
    - /health additionally reports pod and experiment flag
"""

from demo_microservice.config import Settings
from demo_microservice.core.domain_types import HealthStatus


def build_health_probe(settings: Settings, timestamp: str) -> dict:
    return {
        "status": HealthStatus.HEALTHY.value,
        "version": settings.app_version,
        "pod": settings.pod_name,
        "timestamp": timestamp,
        "experimentEnabled": settings.experiment_enabled,
    }


def build_status_probe(settings: Settings, status: HealthStatus) -> dict:
    return {"status": status.value, "version": settings.app_version}
