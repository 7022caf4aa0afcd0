"""
CLI Interface - Command-line tools for Boolean Search.

Provides commands for:
- Live scoped searches
- Offline parsing of saved results pages
- Running the API server
"""

from .main import app, main

__all__ = ["app", "main"]
