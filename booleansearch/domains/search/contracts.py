"""
Search Contracts - Interfaces for search domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from booleansearch.domains.extraction.models import CandidateSet


@runtime_checkable
class Ranker(Protocol):
    """Contract for result ranking implementations."""

    def rank(self, candidates: CandidateSet, query: str) -> CandidateSet:
        """Score candidates against the query and order them best first."""
        ...


@runtime_checkable
class DocumentFetcher(Protocol):
    """Contract for fetching a raw search-results page."""

    async def fetch(self, url: str) -> str:
        """Fetch the page at ``url`` and return its markup."""
        ...
