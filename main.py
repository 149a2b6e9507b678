"""Mind Haven Backend - Main Application Entry Point

FastAPI application factory for the journaling backend.

Entry Points:
    - /health - Health check endpoint
    - /api/analyze-sentiment - Sentiment analysis and companion chat (browser contract)
    - /api/v1/journal/* - Journal entries and chat history
    - /api/v1/analytics/* - Dashboard views derived from the entries
    - /api/v1/profile/* - Profile, settings and data removal
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from core.utils.env import is_production

# Track startup time in non-production environments
start_time = time.time() if not is_production() else None

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.clients.ai import close_ai_clients
from core.config import get_settings
from core.exceptions import ConfigurationError, ServiceError, StorageError, ValidationError
from core.logging import setup_logging
from core.observability import register_http_request_logging
from core.pydantic_schemas import error as api_error
from features.analytics.dependencies import get_analytics_service, reset_analytics_service
from features.analytics.routes import router as analytics_router
from features.journal.dependencies import get_journal_store
from features.journal.routes import router as journal_router
from features.profile.routes import router as profile_router
from features.sentiment.routes import router as sentiment_router
from infrastructure.storage import close_storage

setup_logging()

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events."""
    # Startup: attach the dashboard to the store so it follows every save
    get_analytics_service(get_journal_store())
    yield
    # Shutdown
    logger.info("Application shutting down...")
    reset_analytics_service()
    await close_ai_clients()
    close_storage()
    logger.info("Shutdown complete")


def _configure_cors(app: FastAPI, origins: list[str]) -> None:
    if is_production():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins or ["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        return

    # Any localhost port in development (Next.js dev server etc.)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Map typed service errors to the API envelope."""

    def _envelope(exc: ServiceError, message: str) -> JSONResponse:
        payload = api_error(code=exc.status_code, message=message, data=exc.context())
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _envelope(exc, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage failure during %s: %s", exc.operation or "unknown operation", exc.message)
        return _envelope(exc, "Storage is unavailable")

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error("Configuration error: %s", exc.message)
        return _envelope(exc, exc.message)


def create_app() -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    settings = get_settings()
    app = FastAPI(
        title="Mind Haven Backend",
        description="Journaling backend with sentiment analysis, companion chat and mood analytics",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    _configure_cors(app, settings.cors_origins)
    _register_exception_handlers(app)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": APP_VERSION}

    register_http_request_logging(app)

    app.include_router(sentiment_router)
    app.include_router(journal_router)
    app.include_router(analytics_router)
    app.include_router(profile_router)

    timing_info = ""
    if start_time is not None:
        elapsed = time.time() - start_time
        timing_info = f" (loaded in {elapsed:.2f}s)"

    logger.info(
        "Application created with sentiment, journal, analytics and profile routers%s (env=%s, ai_enabled=%s)",
        timing_info,
        settings.environment,
        settings.ai_enabled,
    )
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
