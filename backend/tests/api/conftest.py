"""API test fixtures — FastAPI test client with injectable settings.

Invariants:
    - Every test starts from the same frozen Settings, independent of the host env
    - get_settings dependency overridden per test; overrides cleared afterwards
    - override_settings(**changes) swaps in a modified copy mid-test

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises middleware and error handlers
      exactly as uvicorn would, minus the socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from demo_microservice.config import Settings, get_settings
from demo_microservice.main import app


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        app_version="v-2-3-4",
        application_name="demo-test",
        target_uri="http://monetary.internal:8080",
        spring_profiles_active="test",
        pod_name="demo-pod-1",
        experiment_enabled=False,
        load_max_duration_ms=500,
    )


@pytest.fixture
def override_settings(test_settings):
    def _override(**changes) -> Settings:
        settings = test_settings.model_copy(update=changes)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _override


@pytest.fixture
async def client(override_settings):
    override_settings()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
