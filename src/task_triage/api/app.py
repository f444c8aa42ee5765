"""
FastAPI application for the task triage service.

This is the main application that wires routes and middleware around the
classifier.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from ..version import API_VERSION, CLASSIFIER_VERSION
from ..config import settings
from ..logging_config import setup_logging
from .routes import health, version, classification
from .middleware import (
    setup_logging_middleware,
    setup_error_handling_middleware,
    setup_security_headers_middleware,
)

# Setup logging on module import
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    logger.info(
        "Starting Task Triage API",
        version=API_VERSION,
        classifier_version=CLASSIFIER_VERSION,
        log_level=settings.log_level,
    )
    yield
    logger.info("Shutting down Task Triage API")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title="Task Triage API",
        description="Rule-based task categorization, prioritization, entity extraction and next-step suggestions",
        version=API_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Decorator middleware wraps whatever was registered before it
    setup_error_handling_middleware(app)
    setup_logging_middleware(app)
    if settings.enable_security_headers:
        setup_security_headers_middleware(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(version.router, prefix="/api/v1", tags=["Version"])
    app.include_router(classification.router, tags=["Classification"])

    return app


# Create app instance
app = create_app()


def main() -> None:
    """
    Entry point for running the API server directly.

    For development use. In production, use uvicorn directly.
    """
    import uvicorn

    uvicorn.run(
        "task_triage.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
