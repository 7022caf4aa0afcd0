"""
Similarity Ranker - Title/query similarity scoring.

Scoring ladder (case-insensitive, trimmed):
- identical strings -> 1.0
- one contains the other -> 0.8
- otherwise the token-overlap ratio: equal token pairs longer than
  3 characters, divided by the longer token list
"""

from __future__ import annotations

import logging

from booleansearch.domains.extraction.models import CandidateSet

logger = logging.getLogger(__name__)

__all__ = ["SimilarityRanker", "similarity", "token_overlap"]

EXACT_SCORE = 1.0
CONTAINS_SCORE = 0.8
MIN_TOKEN_LENGTH = 3  # tokens must be strictly longer than this


def token_overlap(text: str, query: str) -> float:
    """
    Ratio of matching long-token pairs to the longer token list.

    Every (text token, query token) pair is compared, so a repeated token
    counts once per occurrence on each side.
    """
    words1 = text.split()
    words2 = query.split()

    denominator = max(len(words1), len(words2))
    if denominator == 0:
        return 0.0

    matches = sum(
        1
        for w1 in words1
        for w2 in words2
        if len(w1) > MIN_TOKEN_LENGTH and len(w2) > MIN_TOKEN_LENGTH and w1 == w2
    )
    return min(matches / denominator, 1.0)


def similarity(text: str, query: str) -> float:
    """
    Score how well a result title matches the query.

    Args:
        text: Candidate title
        query: Original search phrase

    Returns:
        Score in [0, 1]
    """
    s1 = text.lower().strip()
    s2 = query.lower().strip()

    if s1 == s2:
        return EXACT_SCORE
    if s1 in s2 or s2 in s1:
        return CONTAINS_SCORE
    return token_overlap(s1, s2)


class SimilarityRanker:
    """
    Rank candidates by title similarity to the query.

    Example:
        >>> ranked = SimilarityRanker().rank(candidates, "Example Page Result")
        >>> ranked.best.score
        1.0
    """

    def rank(self, candidates: CandidateSet, query: str) -> CandidateSet:
        """
        Score and sort candidates.

        Args:
            candidates: Unscored candidates in extraction order
            query: Original search phrase

        Returns:
            Scored candidates, highest score first; ties keep extraction order
        """
        scored = [
            # A candidate without a heading is scored on its URL, which stands in as title
            candidate.model_copy(update={"score": similarity(candidate.title, query)})
            for candidate in candidates
        ]
        scored.sort(key=lambda c: c.score, reverse=True)

        if scored:
            logger.debug(
                "Ranked %d candidates: top score=%.2f url=%s",
                len(scored),
                scored[0].score,
                scored[0].url,
            )

        return CandidateSet(candidates=scored)
