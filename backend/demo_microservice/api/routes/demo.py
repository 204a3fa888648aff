"""Demo Routes — monetary snapshot, health and runtime info under /demo.

Invariants:
    - Every route answers 200 and sets X-App-Version
    - /demo/monetary echoes X-Request-ID / X-Correlation-ID verbatim, generating UUID4s when absent
    - The IDs in the body and in the response headers are the same values

Design Decisions:
    - Settings and runtime stats arrive through Depends: tests override them,
      handlers never read globals (ADR: explicit configuration)
    - Routes are thin shells around core.demo_payloads builders
"""

from fastapi import APIRouter, Depends, Header, Response

from demo_microservice.config import Settings, get_settings
from demo_microservice.core.clock import epoch_millis, utc_timestamp
from demo_microservice.core.demo_payloads import (
    build_demo_health, build_demo_info, build_monetary_headers,
    build_monetary_payload, version_headers,
)
from demo_microservice.core.domain_types import (
    CORRELATION_ID_HEADER, REQUEST_ID_HEADER, RuntimeStats,
)
from demo_microservice.core.identifiers import resolve_identifier
from demo_microservice.infrastructure.runtime import read_runtime_stats
from demo_microservice.schemas.demo import (
    DemoHealthResponse, DemoInfoResponse, MonetaryResponse,
)

router = APIRouter(prefix="/demo", tags=["demo"])


@router.get("/monetary", response_model=MonetaryResponse)
async def get_monetary_info(
    response: Response,
    x_request_id: str | None = Header(default=None, alias=REQUEST_ID_HEADER),
    x_correlation_id: str | None = Header(default=None, alias=CORRELATION_ID_HEADER),
    settings: Settings = Depends(get_settings),
):
    """Simulated monetary data tagged with request and correlation IDs."""
    request_id = resolve_identifier(x_request_id)
    correlation_id = resolve_identifier(x_correlation_id)
    body = build_monetary_payload(
        settings, request_id, correlation_id, utc_timestamp(),
    )
    response.headers.update(build_monetary_headers(
        settings, request_id, correlation_id, epoch_millis(),
    ))
    return body


@router.get("/health", response_model=DemoHealthResponse)
async def demo_health(
    response: Response, settings: Settings = Depends(get_settings),
):
    response.headers.update(version_headers(settings))
    return build_demo_health(settings, utc_timestamp())


@router.get("/info", response_model=DemoInfoResponse)
async def demo_info(
    response: Response,
    settings: Settings = Depends(get_settings),
    runtime: RuntimeStats = Depends(read_runtime_stats),
):
    """Service identity plus processor and memory figures of this process."""
    response.headers.update(version_headers(settings))
    return build_demo_info(settings, runtime, utc_timestamp())
