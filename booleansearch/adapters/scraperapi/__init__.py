"""
ScraperAPI Adapter - Scraping proxy for search-results pages.

This is the ONLY place that performs outbound HTTP.
"""

from .client import ScraperAPIClient

__all__ = ["ScraperAPIClient"]
