"""Experiment Routes — canary version/process/metrics and the load generator.

Invariants:
    - Enhanced processing only when the pod is experimental AND the header token matches
    - Over-ceiling load durations answer 400 with LOAD_DURATION_EXCEEDED
"""

from demo_microservice.core.domain_types import (
    EXPERIMENT_HEADER, EXPERIMENT_HEADER_VALUE,
)

OPT_IN = {EXPERIMENT_HEADER: EXPERIMENT_HEADER_VALUE}


async def test_version_on_stable_pod_without_header(client):
    body = (await client.get("/api/v1/experiment/version")).json()
    assert body["service"] == "demo-microservice"
    assert body["pod"] == "demo-pod-1"
    assert body["experimentEnabled"] is False
    assert body["experimentHeaderPresent"] is False
    assert body["isExperimentalTraffic"] is False
    assert body["headers"] == {
        "x-experiment-version": "false", "x-pod-type": "stable",
    }


async def test_version_on_experimental_pod_with_token(client, override_settings):
    override_settings(experiment_enabled=True)
    body = (await client.get("/api/v1/experiment/version", headers=OPT_IN)).json()
    assert body["experimentHeaderPresent"] is True
    assert body["isExperimentalTraffic"] is True
    assert body["headers"] == {
        "x-experiment-version": "true", "x-pod-type": "experimental",
    }


async def test_version_with_wrong_token_is_not_experimental(client):
    body = (await client.get(
        "/api/v1/experiment/version", headers={EXPERIMENT_HEADER: "nope"},
    )).json()
    assert body["experimentHeaderPresent"] is True
    assert body["isExperimentalTraffic"] is False


async def test_process_enhanced_for_opted_in_traffic(client, override_settings):
    override_settings(experiment_enabled=True)
    res = await client.post("/api/v1/experiment/process", headers=OPT_IN, json={"x": 1})
    assert res.status_code == 200
    body = res.json()
    assert body["result"] == "processed"
    assert body["processingMethod"] == "ENHANCED_ALGORITHM"
    assert all(body["features"].values())
    assert body["responseTime"] == "85ms"


async def test_process_standard_when_experiment_disabled(client):
    body = (await client.post("/api/v1/experiment/process", headers=OPT_IN)).json()
    assert body["processingMethod"] == "STANDARD_ALGORITHM"
    assert not any(body["features"].values())
    assert body["responseTime"] == "120ms"


async def test_metrics_profile_follows_flag(client, override_settings):
    stable = (await client.get("/api/v1/experiment/metrics")).json()
    assert stable["metrics"]["requestsPerSecond"] == 120

    override_settings(experiment_enabled=True)
    enhanced = (await client.get("/api/v1/experiment/metrics")).json()
    assert enhanced["metrics"]["requestsPerSecond"] == 145
    assert enhanced["metrics"]["errorRate"] == "0.2%"


async def test_load_completes(client):
    res = await client.get("/api/v1/load/20")
    assert res.status_code == 200
    assert res.json() == {
        "message": "Load test completed",
        "duration": "20ms",
        "version": "v-2-3-4",
        "pod": "demo-pod-1",
    }


async def test_load_over_ceiling_is_rejected(client):
    res = await client.get(
        "/api/v1/load/600000", headers={"X-Request-ID": "req-42"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "LOAD_DURATION_EXCEEDED"
    assert error["category"] == "validation"
    assert error["context"]["request_id"] == "req-42"
