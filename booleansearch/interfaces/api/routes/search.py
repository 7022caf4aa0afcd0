"""
Search Routes - Scoped best-match search endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from booleansearch.config.errors import MSG_NO_RESULTS
from booleansearch.domains.extraction import Candidate
from booleansearch.domains.search import BooleanSearchService
from booleansearch.interfaces.api.deps import get_search_service

router = APIRouter()


class SearchRequest(BaseModel):
    """Search request body. Blank fields are rejected with a 400."""

    domain: str | None = Field(default=None, description="Site to search, e.g. example.com")
    query: str | None = Field(default=None, description="Exact phrase to find")


class SearchResponse(BaseModel):
    """Best match envelope."""

    url: str = ""
    title: str = ""
    description: str = ""
    error: str | None = None


class CandidateItem(BaseModel):
    """Single ranked candidate."""

    url: str
    title: str
    description: str
    score: float

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> CandidateItem:
        return cls(
            url=candidate.url,
            title=candidate.title,
            description=candidate.snippet,
            score=candidate.score,
        )


class CandidatesResponse(BaseModel):
    """All ranked candidates."""

    query: str
    scoped_query: str
    candidates: list[CandidateItem]
    total: int


@router.post("", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    service: BooleanSearchService = Depends(get_search_service),
) -> SearchResponse:
    """
    Find the best page on a domain for an exact phrase.

    - **domain**: Site to restrict the search to (``example.*`` allowed)
    - **query**: Phrase searched in quotes
    """
    outcome = await service.search(request.domain, request.query)

    best = outcome.best
    if best is None:
        return SearchResponse(error=MSG_NO_RESULTS)

    return SearchResponse(url=best.url, title=best.title, description=best.snippet)


@router.post("/candidates", response_model=CandidatesResponse)
async def search_candidates(
    request: SearchRequest,
    service: BooleanSearchService = Depends(get_search_service),
) -> CandidatesResponse:
    """Same search, returning every ranked candidate instead of the best one."""
    outcome = await service.search(request.domain, request.query)

    items = [CandidateItem.from_candidate(c) for c in outcome.candidates]
    return CandidatesResponse(
        query=outcome.scoped_query.query,
        scoped_query=outcome.scoped_query.text,
        candidates=items,
        total=len(items),
    )
