"""Domain Types — enums, constants and value objects shared by the payload builders.

Invariants:
    - Every fixed string that appears in a response body or header lives here
    - All valid states encoded as Enums — no raw string matching
    - RuntimeStats is a frozen snapshot; byte counts are non-negative ints

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - RuntimeStats lives in core (not infrastructure) so builders stay pure and
      tests construct it by hand
"""

from dataclasses import dataclass
from enum import Enum


# ─── Headers ─────────────────────────────────────────────────────

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_ID_HEADER = "X-Correlation-ID"
APP_VERSION_HEADER = "X-App-Version"
SERVICE_NAME_HEADER = "X-Service-Name"
BUILD_INFO_HEADER = "X-Build-Info"
RESPONSE_TIME_HEADER = "X-Response-Time"

BUILD_INFO = "ArgoCD-Managed"

EXPERIMENT_HEADER = "aws-cf-cd-super-svp-9f8b7a6d"
EXPERIMENT_HEADER_VALUE = "123e4567-e89b-12d3-a456-42661417400"


# ─── Fixed identity of the /api route group ──────────────────────

API_SERVICE_NAME = "demo-microservice"
API_DISPLAY_NAME = "Demo Microservice"
API_DESCRIPTION = "Microservicio de ejemplo para pruebas con Istio"
API_VERSION = "1.0.0"
GREETING = "¡Hola desde el microservicio demo!"
DEFAULT_ENVIRONMENT = "local"


# ─── Enums ───────────────────────────────────────────────────────

class HealthStatus(str, Enum):
    """Status strings reported by the health and probe endpoints."""
    UP = "UP"
    HEALTHY = "healthy"
    ALIVE = "alive"
    READY = "ready"


class ProcessingMethod(str, Enum):
    """Simulated processing path for /api/v1/experiment/process."""
    ENHANCED = "ENHANCED_ALGORITHM"
    STANDARD = "STANDARD_ALGORITHM"


class PodType(str, Enum):
    """Pod flavour advertised by /api/v1/experiment/version."""
    EXPERIMENTAL = "experimental"
    STABLE = "stable"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class RuntimeStats:
    """Point-in-time view of the hosting runtime."""
    runtime_version: str
    available_processors: int
    max_memory: int
    total_memory: int
    free_memory: int
