"""
Adapters - External service integrations.

All external API calls are wrapped here to isolate domains from third-party changes.
"""

from .scraperapi import ScraperAPIClient

__all__ = ["ScraperAPIClient"]
