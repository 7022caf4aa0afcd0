"""
Search Domain - Scoped search with best-match selection.

This domain handles:
- Site-restricted phrase query composition
- Title/query similarity ranking
- The extract-and-rank pipeline
- Search orchestration over a document fetcher
"""

from .contracts import DocumentFetcher, Ranker
from .models import ScopedQuery, SearchOutcome
from .pipeline import extract_and_rank
from .query import build_scoped_query, build_search_url, clean_domain
from .ranker import SimilarityRanker, similarity
from .service import BooleanSearchService

__all__ = [
    "DocumentFetcher",
    "Ranker",
    "ScopedQuery",
    "SearchOutcome",
    "SimilarityRanker",
    "similarity",
    "extract_and_rank",
    "clean_domain",
    "build_scoped_query",
    "build_search_url",
    "BooleanSearchService",
]
