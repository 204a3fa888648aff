"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings are read once per process and never mutated (frozen model)
    - get_settings() is cached (lru_cache) — single instance per process
    - ENVIRONMENT is NOT a setting: /api/info reads it per request

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Settings injected into routes via Depends(get_settings): no hidden module globals
      in handlers, tests swap them with dependency_overrides
    - Defaults provided for every field: works out-of-the-box in a bare container
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
        populate_by_name=True, extra="ignore",
    )

    # Service identity
    app_version: str = "v-1-0-0"
    application_name: str = "demo-microservice"
    target_uri: str = ""
    spring_profiles_active: str = "default"

    # Deployment — Kubernetes sets HOSTNAME to the pod name
    pod_name: str = Field(
        default="unknown",
        validation_alias=AliasChoices("pod_name", "hostname"),
    )
    experiment_enabled: bool = False

    @field_validator("experiment_enabled", mode="before")
    @classmethod
    def parse_experiment_flag(cls, v: object) -> bool:
        """Only the literal string 'true' enables the experiment."""
        if isinstance(v, bool):
            return v
        return str(v) == "true"

    # Load generator ceiling
    load_max_duration_ms: int = 10_000

    # API
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
