"""
Search Models - Data types for search domain.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from booleansearch.domains.extraction.models import Candidate, CandidateSet


class ScopedQuery(BaseModel):
    """Phrase search restricted to a single site."""

    domain: str = Field(..., min_length=1)
    query: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        """Search-engine query string, e.g. ``site:example.com "foo bar"``."""
        return f'site:{self.domain} "{self.query}"'


class SearchOutcome(BaseModel):
    """Ranked candidates for one scoped search."""

    scoped_query: ScopedQuery
    candidates: CandidateSet = Field(default_factory=CandidateSet)
    document_length: int = 0

    @property
    def best(self) -> Candidate | None:
        return self.candidates.best

    @property
    def found(self) -> bool:
        return self.best is not None
