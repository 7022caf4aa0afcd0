"""
Boolean Search Service - Scoped search orchestration.

Flow:
1. Validate and compose ``site:<domain> "<query>"``
2. Fetch the results page through the document fetcher
3. Extract and rank candidates
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from booleansearch.config import Settings, get_settings

from .models import SearchOutcome
from .pipeline import extract_and_rank
from .query import build_scoped_query, build_search_url

if TYPE_CHECKING:
    from booleansearch.domains.extraction import Extractor

    from .contracts import DocumentFetcher, Ranker

logger = logging.getLogger(__name__)

__all__ = ["BooleanSearchService"]


class BooleanSearchService:
    """
    Find the best page on a domain for a phrase.

    Example:
        >>> service = BooleanSearchService(ScraperAPIClient(api_key="..."))
        >>> outcome = await service.search("example.com", "Example Page Result")
        >>> outcome.best.url
        'https://example.com/page'
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        settings: Settings | None = None,
        extractor: Extractor | None = None,
        ranker: Ranker | None = None,
    ) -> None:
        """
        Initialize search service.

        Args:
            fetcher: Retrieves the raw results page
            settings: Search settings. Uses cached settings if None.
            extractor: Extractor override
            ranker: Ranker override
        """
        self._fetcher = fetcher
        self._settings = settings or get_settings()
        self._extractor = extractor
        self._ranker = ranker

    async def search(self, domain: str | None, query: str | None) -> SearchOutcome:
        """
        Run a scoped search.

        Args:
            domain: Site to restrict the search to (wildcard suffixes allowed)
            query: Exact phrase to look for

        Returns:
            Ranked outcome; ``outcome.best`` is None when nothing matched

        Raises:
            ValidationError: Missing domain or query
            CredentialsMissingError / UpstreamHTTPError / UpstreamUnavailableError:
                propagated from the fetcher
        """
        scoped = build_scoped_query(domain, query)
        logger.info("Searching: %s", scoped.text)

        document = await self._fetcher.fetch(build_search_url(scoped, self._settings))
        logger.info("HTML received: %d chars", len(document))

        candidates = extract_and_rank(
            document,
            scoped.query,
            cap=self._settings.result_cap,
            extractor=self._extractor,
            ranker=self._ranker,
        )

        outcome = SearchOutcome(
            scoped_query=scoped,
            candidates=candidates,
            document_length=len(document),
        )
        if outcome.best is not None:
            logger.info("Found: %s (score=%.2f)", outcome.best.url, outcome.best.score)
        else:
            logger.info("No results found for %s", scoped.text)

        return outcome
