"""
Health Routes - System health and status endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends

from booleansearch import __version__
from booleansearch.config import Settings
from booleansearch.interfaces.api.deps import get_app_settings

router = APIRouter()


@router.get("/")
async def root(settings: Settings = Depends(get_app_settings)) -> dict[str, Any]:
    """Liveness probe reporting whether the proxy key is configured."""
    return {
        "status": "ok",
        "message": "Boolean Search API with ScraperAPI",
        "hasApiKey": settings.has_api_key,
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "booleansearch"}


@router.get("/api")
async def api_info() -> dict[str, Any]:
    """API info endpoint."""
    return {
        "name": "Boolean Search API",
        "version": __version__,
        "description": "Best-match page lookup for a phrase on a single site",
        "docs": "/docs",
    }
