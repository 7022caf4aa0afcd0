"""
API Interface - FastAPI REST API.

``POST /api/search`` answers with the ``{url, title, description, error}``
envelope that existing clients consume.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
