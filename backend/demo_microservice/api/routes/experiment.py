"""Experiment Routes — canary traffic-split simulation and load generator under /api/v1.

Invariants:
    - The experiment header is optional on every route; absence means stable traffic
    - POST /experiment/process ignores any request body
    - /load/{duration} blocks for the resolved duration, then answers 200
    - Durations above settings.load_max_duration_ms raise LoadDurationExceededError (400)

Design Decisions:
    - /load is a plain `def` route: FastAPI runs it in the threadpool so the
      busy loop never stalls the event loop
    - Duration taken as a raw string: non-numeric input falls back to the default
      instead of failing validation
"""

import logging

from fastapi import APIRouter, Depends, Header

from demo_microservice.config import Settings, get_settings
from demo_microservice.core.clock import utc_timestamp
from demo_microservice.core.domain_types import EXPERIMENT_HEADER
from demo_microservice.core.experiment import (
    build_load_payload, build_metrics_payload, build_process_payload,
    build_version_payload, burn_cpu, resolve_load_duration,
)
from demo_microservice.schemas.experiment import (
    ExperimentMetricsResponse, ExperimentVersionResponse,
    LoadResponse, ProcessResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["experiment"])


@router.get("/experiment/version", response_model=ExperimentVersionResponse)
async def experiment_version(
    experiment_header: str | None = Header(default=None, alias=EXPERIMENT_HEADER),
    settings: Settings = Depends(get_settings),
):
    return build_version_payload(settings, experiment_header, utc_timestamp())


@router.post("/experiment/process", response_model=ProcessResponse)
async def experiment_process(
    experiment_header: str | None = Header(default=None, alias=EXPERIMENT_HEADER),
    settings: Settings = Depends(get_settings),
):
    """Simulated processing; enhanced only for opted-in traffic on experimental pods."""
    return build_process_payload(settings, experiment_header, utc_timestamp())


@router.get("/experiment/metrics", response_model=ExperimentMetricsResponse)
async def experiment_metrics(settings: Settings = Depends(get_settings)):
    return build_metrics_payload(settings, utc_timestamp())


@router.get("/load/{duration}", response_model=LoadResponse)
def generate_load(duration: str, settings: Settings = Depends(get_settings)):
    """Burn CPU for `duration` milliseconds."""
    duration_ms = resolve_load_duration(duration, settings.load_max_duration_ms)
    logger.info(
        f"Generating load for {duration_ms}ms",
        extra={"duration_ms": duration_ms, "pod": settings.pod_name},
    )
    burn_cpu(duration_ms)
    return build_load_payload(settings, duration_ms)
