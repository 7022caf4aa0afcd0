"""
Extraction Contracts - Interfaces for extraction domain.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from .models import CandidateSet


@runtime_checkable
class Matcher(Protocol):
    """
    Contract for a single pattern family.

    A matcher scans whitespace-normalized markup and yields raw matches
    (an undecoded URL, or a heading/snippet fragment that may still carry
    inline tags).

    Example:
        >>> class MyMatcher:
        ...     name = "mine"
        ...     def find(self, text: str) -> Iterator[str]:
        ...         yield from ()
        >>> assert isinstance(MyMatcher(), Matcher)
    """

    name: str

    def find(self, text: str) -> Iterator[str]:
        """Yield raw matches in document order."""
        ...


@runtime_checkable
class Extractor(Protocol):
    """Contract for search-results document extractors."""

    def extract(self, document: str, cap: int = 10) -> CandidateSet:
        """
        Turn a raw results document into an unscored candidate set.

        Args:
            document: Raw markup of a search-results page
            cap: Maximum number of candidates to keep

        Returns:
            Candidates in extraction order (possibly empty, never raises)
        """
        ...
