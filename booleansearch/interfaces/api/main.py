"""
FastAPI Main Application - Unified API entry point.

Run with: uvicorn booleansearch.interfaces.api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from booleansearch import __version__
from booleansearch.config import Settings, get_settings

from .deps import cleanup_services, init_services
from .middleware import (
    ErrorHandlerMiddleware,
    LatencyMiddleware,
    RequestIDMiddleware,
    request_validation_handler,
)
from .routes import health, search

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting Boolean Search API on port %d", settings.port)
    logger.info(
        "  ScraperAPI key: %s", "configured" if settings.has_api_key else "MISSING"
    )

    yield

    logger.info("Shutting down Boolean Search API...")
    await cleanup_services(app)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        settings: Application settings. Uses cached settings if None.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Boolean Search API",
        description="Best-match page lookup for a phrase on a single site",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    init_services(app, settings)

    # Add middleware (order matters - first added = innermost)
    # 1. Error handling (catch exceptions from route handlers)
    app.add_middleware(ErrorHandlerMiddleware)

    # 2. Latency tracking
    app.add_middleware(LatencyMiddleware)

    # 3. Request ID (outermost custom - sets the id the others log)
    app.add_middleware(RequestIDMiddleware)

    # 4. CORS (framework middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Body validation failures answer with the missing-fields envelope
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(search.router, prefix="/api/search", tags=["Search"])

    return app


# Create app instance
app = create_app()
