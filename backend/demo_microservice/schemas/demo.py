"""Demo Schemas — response shapes for the /demo route group.

Invariants:
    - Field names are the wire contract; java_version / spring_profiles keep legacy names
    - Timestamps are pre-formatted strings (UTC, trailing Z), never datetime objects
"""

from pydantic import BaseModel


class MonetaryInfo(BaseModel):
    """Simulated currency snapshot."""
    currency: str
    exchange_rate: float
    last_updated: str
    provider: str


class MonetaryResponse(BaseModel):
    version: str
    service: str
    endpoint: str
    timestamp: str
    target_uri: str
    status: str
    request_id: str
    correlation_id: str
    monetary_info: MonetaryInfo


class DemoHealthResponse(BaseModel):
    status: str
    version: str
    service: str
    timestamp: str


class SystemInfo(BaseModel):
    """Processor count and memory figures in bytes."""
    available_processors: int
    max_memory: int
    total_memory: int
    free_memory: int


class DemoInfoResponse(BaseModel):
    app: str
    version: str
    target_uri: str
    java_version: str
    spring_profiles: str
    build_timestamp: str
    system: SystemInfo
