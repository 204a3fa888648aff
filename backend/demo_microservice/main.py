"""Demo Microservice — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DemoServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Request logging middleware bound to startup settings (version, pod)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from demo_microservice.api.error_handlers import register_error_handlers
from demo_microservice.api.middleware import RequestLoggingMiddleware
from demo_microservice.api.routes import demo, experiment, probes, service_info
from demo_microservice.config import get_settings
from demo_microservice.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Demo microservice started (version {settings.app_version})",
        extra={
            "version": settings.app_version,
            "pod": settings.pod_name,
            "experiment_enabled": settings.experiment_enabled,
        },
    )
    yield
    logger.info("Demo microservice shutting down")


settings = get_settings()

app = FastAPI(
    title="Demo Microservice", version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    RequestLoggingMiddleware,
    version=settings.app_version, pod=settings.pod_name,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(demo.router)
app.include_router(service_info.router)
app.include_router(probes.router)
app.include_router(experiment.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "demo_microservice.main:app",
        host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
