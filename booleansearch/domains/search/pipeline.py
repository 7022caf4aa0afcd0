"""
Extract-and-Rank Pipeline - The core operation.

Pure and synchronous: one document in, one ranked candidate set out.
"""

from __future__ import annotations

from booleansearch.domains.extraction import CandidateSet, Extractor, ResultExtractor
from booleansearch.domains.extraction.extractor import DEFAULT_CAP

from .contracts import Ranker
from .ranker import SimilarityRanker

__all__ = ["extract_and_rank"]


def extract_and_rank(
    document: str,
    query: str,
    cap: int = DEFAULT_CAP,
    *,
    extractor: Extractor | None = None,
    ranker: Ranker | None = None,
) -> CandidateSet:
    """
    Extract candidates from a results page and rank them against the query.

    Args:
        document: Raw search-results markup
        query: Original search phrase
        cap: Maximum number of candidates
        extractor: Extractor override (default: ResultExtractor)
        ranker: Ranker override (default: SimilarityRanker)

    Returns:
        Ranked candidates; empty when the page holds no results
    """
    extractor = extractor or ResultExtractor()
    ranker = ranker or SimilarityRanker()

    candidates = extractor.extract(document, cap=cap)
    return ranker.rank(candidates, query)
