"""
API Dependencies - Dependency injection for FastAPI routes.

Settings and the proxy client live on ``app.state``; they are created once
by ``create_app`` and shared by every request.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request

from booleansearch.adapters import ScraperAPIClient
from booleansearch.config import Settings
from booleansearch.domains.search import BooleanSearchService, DocumentFetcher


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_fetcher(request: Request) -> DocumentFetcher:
    """Shared scraping proxy client."""
    return request.app.state.fetcher


def get_search_service(
    settings: Settings = Depends(get_app_settings),
    fetcher: DocumentFetcher = Depends(get_fetcher),
) -> BooleanSearchService:
    """Search service bound to the shared fetcher."""
    return BooleanSearchService(fetcher, settings=settings)


def init_services(app: FastAPI, settings: Settings) -> None:
    """Attach settings and the proxy client to the application."""
    app.state.settings = settings
    app.state.fetcher = ScraperAPIClient.from_settings(settings)


async def cleanup_services(app: FastAPI) -> None:
    """Cleanup services on shutdown."""
    fetcher = getattr(app.state, "fetcher", None)
    if isinstance(fetcher, ScraperAPIClient):
        await fetcher.close()
