"""Experiment — canary/traffic-split simulation for the /api/v1 routes.

Invariants:
    - Traffic is experimental only when the experiment header carries the exact token
    - The enhanced processing path requires BOTH the experiment flag and experimental traffic
    - Metrics profile depends on the experiment flag alone
    - Load durations are read from their leading integer; none or non-positive falls back to 1000ms
    - burn_cpu() never returns before `duration_ms` has elapsed

Design Decisions:
    - Profiles are static dicts: the numbers are illustrative, not measured
    - Ceiling check lives in resolve_load_duration so the route stays a thin shell
"""

import random
import re
import time

from demo_microservice.config import Settings
from demo_microservice.core.domain_types import (
    API_SERVICE_NAME, EXPERIMENT_HEADER_VALUE, PodType, ProcessingMethod,
)
from demo_microservice.core.errors import LoadDurationExceededError

DEFAULT_LOAD_DURATION_MS = 1000
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_ENHANCED_METRICS = {
    "responseTime": "85ms",
    "memoryUsage": "78MB",
    "cpuUsage": "12%",
    "requestsPerSecond": 145,
    "errorRate": "0.2%",
}
_STANDARD_METRICS = {
    "responseTime": "120ms",
    "memoryUsage": "65MB",
    "cpuUsage": "8%",
    "requestsPerSecond": 120,
    "errorRate": "0.5%",
}


def is_experimental_traffic(header_value: str | None) -> bool:
    return header_value == EXPERIMENT_HEADER_VALUE


def build_version_payload(
    settings: Settings, header_value: str | None, timestamp: str,
) -> dict:
    enabled = settings.experiment_enabled
    pod_type = PodType.EXPERIMENTAL if enabled else PodType.STABLE
    return {
        "service": API_SERVICE_NAME,
        "version": settings.app_version,
        "pod": settings.pod_name,
        "timestamp": timestamp,
        "experimentEnabled": enabled,
        "experimentHeaderPresent": bool(header_value),
        "isExperimentalTraffic": is_experimental_traffic(header_value),
        "headers": {
            "x-experiment-version": "true" if enabled else "false",
            "x-pod-type": pod_type.value,
        },
    }


def build_process_payload(
    settings: Settings, header_value: str | None, timestamp: str,
) -> dict:
    """Simulated processing result — enhanced path only for opted-in traffic."""
    enhanced = settings.experiment_enabled and is_experimental_traffic(header_value)
    method = ProcessingMethod.ENHANCED if enhanced else ProcessingMethod.STANDARD
    return {
        "result": "processed",
        "version": settings.app_version,
        "pod": settings.pod_name,
        "processingMethod": method.value,
        "features": {
            "advancedValidation": enhanced,
            "realTimeProcessing": enhanced,
            "enhancedSecurity": enhanced,
        },
        "responseTime": "85ms" if enhanced else "120ms",
        "timestamp": timestamp,
    }


def build_metrics_payload(settings: Settings, timestamp: str) -> dict:
    enabled = settings.experiment_enabled
    return {
        "service": API_SERVICE_NAME,
        "version": settings.app_version,
        "pod": settings.pod_name,
        "timestamp": timestamp,
        "experimentEnabled": enabled,
        "metrics": dict(_ENHANCED_METRICS if enabled else _STANDARD_METRICS),
    }


def resolve_load_duration(raw: str, max_duration_ms: int) -> int:
    """Parse the requested duration in ms, applying the default and the ceiling.

    Only the leading integer counts: "12abc" and "1.5" give 12 and 1.
    """
    match = _LEADING_INT.match(raw)
    duration = int(match.group(1)) if match else 0
    if duration <= 0:
        duration = DEFAULT_LOAD_DURATION_MS
    if duration > max_duration_ms:
        raise LoadDurationExceededError(duration, max_duration_ms)
    return duration


def burn_cpu(duration_ms: int) -> None:
    """Spin on arithmetic until duration_ms has elapsed."""
    deadline = time.monotonic() + duration_ms / 1000
    while time.monotonic() < deadline:
        random.random() * random.random()


def build_load_payload(settings: Settings, duration_ms: int) -> dict:
    return {
        "message": "Load test completed",
        "duration": f"{duration_ms}ms",
        "version": settings.app_version,
        "pod": settings.pod_name,
    }
