"""Experiment Schemas — response shapes for probes and the /api/v1 experiment routes.

Invariants:
    - camelCase field names are the wire contract of the canary tooling that polls them

Design Decisions:
    - No alias generator: field names written exactly as served, grep-able against clients
"""

from pydantic import BaseModel, Field


class HealthProbeResponse(BaseModel):
    status: str
    version: str
    pod: str
    timestamp: str
    experimentEnabled: bool


class StatusProbeResponse(BaseModel):
    status: str
    version: str


class ExperimentHeaders(BaseModel):
    """Routing hints for the mesh, mirrored in the body."""
    x_experiment_version: str = Field(alias="x-experiment-version")
    x_pod_type: str = Field(alias="x-pod-type")


class ExperimentVersionResponse(BaseModel):
    service: str
    version: str
    pod: str
    timestamp: str
    experimentEnabled: bool
    experimentHeaderPresent: bool
    isExperimentalTraffic: bool
    headers: ExperimentHeaders


class ProcessingFeatures(BaseModel):
    advancedValidation: bool
    realTimeProcessing: bool
    enhancedSecurity: bool


class ProcessResponse(BaseModel):
    result: str
    version: str
    pod: str
    processingMethod: str
    features: ProcessingFeatures
    responseTime: str
    timestamp: str


class ExperimentMetrics(BaseModel):
    responseTime: str
    memoryUsage: str
    cpuUsage: str
    requestsPerSecond: int
    errorRate: str


class ExperimentMetricsResponse(BaseModel):
    service: str
    version: str
    pod: str
    timestamp: str
    experimentEnabled: bool
    metrics: ExperimentMetrics


class LoadResponse(BaseModel):
    message: str
    duration: str
    version: str
    pod: str
