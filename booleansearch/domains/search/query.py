"""
Query Builder - Scoped query and search URL composition.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from booleansearch.config.errors import ValidationError

from .models import ScopedQuery

if TYPE_CHECKING:
    from booleansearch.config import Settings

__all__ = ["clean_domain", "build_scoped_query", "build_search_url"]

_TRAILING_DOT_STAR_RE = re.compile(r"\.\*\Z")
_TRAILING_STAR_RE = re.compile(r"\*\Z")
_TRAILING_DOT_RE = re.compile(r"\.\Z")


def clean_domain(domain: str) -> str:
    """
    Strip wildcard and dot suffixes from a user-typed domain.

    ``example.*`` -> ``example``, ``example.com.`` -> ``example.com``
    """
    cleaned = _TRAILING_DOT_STAR_RE.sub("", domain)
    cleaned = _TRAILING_STAR_RE.sub("", cleaned)
    cleaned = _TRAILING_DOT_RE.sub("", cleaned)
    return cleaned.strip()


def build_scoped_query(domain: str | None, query: str | None) -> ScopedQuery:
    """
    Build a site-restricted phrase query.

    Raises:
        ValidationError: If domain or query is missing or blank
    """
    if not domain or not domain.strip() or not query or not query.strip():
        raise ValidationError(details={"domain": domain, "query": query})

    cleaned = clean_domain(domain)
    if not cleaned:
        raise ValidationError(details={"domain": domain, "query": query})

    return ScopedQuery(domain=cleaned, query=query.strip())


def build_search_url(scoped: ScopedQuery, settings: Settings) -> str:
    """Search-engine results URL for the scoped query."""
    params = {
        "q": scoped.text,
        "hl": settings.search_language,
        "gl": settings.search_country,
        "num": settings.search_num_results,
    }
    return f"{settings.search_engine_url}?{urlencode(params, quote_via=quote)}"
