"""
Extraction Models - Data types for extraction domain.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field


class Candidate(BaseModel):
    """Single search result candidate."""

    url: str
    title: str
    snippet: str = ""
    score: float = Field(default=0.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}


class CandidateSet(BaseModel):
    """
    Ordered candidates with unique normalized URLs.

    Extraction order until ranked, descending score afterwards.
    """

    candidates: list[Candidate] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:  # type: ignore[override]
        return iter(self.candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self.candidates[index]

    @property
    def best(self) -> Candidate | None:
        """Top candidate, or None when nothing matched."""
        return self.candidates[0] if self.candidates else None

    @property
    def urls(self) -> list[str]:
        return [c.url for c in self.candidates]
