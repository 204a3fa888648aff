"""Service Info Routes — health, info and greeting under /api.

Invariants:
    - /api/health and /api/info report fixed name/version, not Settings
    - ENVIRONMENT is read from the process environment on every /api/info call
    - Timestamps are local date-times without offset
"""

import os

from fastapi import APIRouter

from demo_microservice.core.clock import local_timestamp
from demo_microservice.core.service_payloads import (
    build_api_health, build_api_info, build_hello, resolve_environment,
)
from demo_microservice.schemas.service import (
    ApiHealthResponse, ApiInfoResponse, HelloResponse,
)

router = APIRouter(prefix="/api", tags=["service"])


@router.get("/health", response_model=ApiHealthResponse)
async def api_health():
    return build_api_health(local_timestamp())


@router.get("/info", response_model=ApiInfoResponse)
async def api_info():
    return build_api_info(resolve_environment(os.environ))


@router.get("/hello", response_model=HelloResponse)
async def hello():
    return build_hello(local_timestamp())
