"""Probe Routes — liveness/readiness endpoints for container orchestration.

Invariants:
    - All three probes return 200 while the process is up
    - No probe touches anything outside the process

Design Decisions:
    - Readiness equals liveness: the service has no downstream dependency to gate on
"""

from fastapi import APIRouter, Depends

from demo_microservice.config import Settings, get_settings
from demo_microservice.core.clock import utc_timestamp
from demo_microservice.core.domain_types import HealthStatus
from demo_microservice.core.probes import build_health_probe, build_status_probe
from demo_microservice.schemas.experiment import (
    HealthProbeResponse, StatusProbeResponse,
)

router = APIRouter(tags=["probes"])


@router.get("/health", response_model=HealthProbeResponse)
async def health(settings: Settings = Depends(get_settings)):
    return build_health_probe(settings, utc_timestamp())


@router.get("/liveness", response_model=StatusProbeResponse)
async def liveness(settings: Settings = Depends(get_settings)):
    return build_status_probe(settings, HealthStatus.ALIVE)


@router.get("/readiness", response_model=StatusProbeResponse)
async def readiness(settings: Settings = Depends(get_settings)):
    return build_status_probe(settings, HealthStatus.READY)
