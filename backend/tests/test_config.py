"""Settings — env parsing, defaults and immutability."""

import pytest
from pydantic import ValidationError

from demo_microservice.config import Settings, get_settings

_ENV_KEYS = (
    "APP_VERSION", "TARGET_URI", "APPLICATION_NAME", "SPRING_PROFILES_ACTIVE",
    "HOSTNAME", "POD_NAME", "EXPERIMENT_ENABLED",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.app_version == "v-1-0-0"
    assert settings.target_uri == ""
    assert settings.application_name == "demo-microservice"
    assert settings.spring_profiles_active == "default"
    assert settings.pod_name == "unknown"
    assert settings.experiment_enabled is False


def test_reads_environment(clean_env):
    clean_env.setenv("APP_VERSION", "v-7")
    clean_env.setenv("TARGET_URI", "http://rates")
    clean_env.setenv("HOSTNAME", "demo-abc-123")
    settings = Settings(_env_file=None)
    assert settings.app_version == "v-7"
    assert settings.target_uri == "http://rates"
    assert settings.pod_name == "demo-abc-123"


@pytest.mark.parametrize("raw,expected", [
    ("true", True), ("TRUE", False), (" true", False), ("yes", False), ("1", False), ("false", False),
])
def test_experiment_flag_only_accepts_true(clean_env, raw, expected):
    clean_env.setenv("EXPERIMENT_ENABLED", raw)
    assert Settings(_env_file=None).experiment_enabled is expected


def test_settings_are_frozen(clean_env):
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.app_version = "changed"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
