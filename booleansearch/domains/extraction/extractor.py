"""
Result Extractor - Candidate extraction from search-results markup.

Turns a raw Google results page (fetched through the scraping proxy)
into an ordered, deduplicated candidate set. The page is third-party,
changes without notice and is sometimes a block/challenge page, so
nothing here raises: unmatched input yields fewer or zero candidates.

URLs, titles and snippets are located by three independent scans and
paired by position. A title or snippet can therefore end up next to the
wrong URL; the ranker is what compensates for that.
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Sequence
from urllib.parse import unquote, urlsplit, urlunsplit

from .contracts import Matcher
from .models import Candidate, CandidateSet
from .matchers import EXCLUDED_HOSTS, SNIPPET_MATCHERS, TITLE_MATCHERS, URL_MATCHERS

logger = logging.getLogger(__name__)

__all__ = [
    "ResultExtractor",
    "normalize_whitespace",
    "decode_url",
    "is_excluded",
    "url_key",
]

DEFAULT_CAP = 10
URL_SCAN_LIMIT = 20
TITLE_NOISE_LENGTH = 5
SNIPPET_NOISE_LENGTH = 10

_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^<>]*>")
_ABSOLUTE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space."""
    return _WHITESPACE_RE.sub(" ", text)


def decode_url(raw: str) -> str | None:
    """
    Unescape HTML entities and percent-decode a matched href.

    Returns None for malformed escapes or invalid UTF-8 sequences.
    """
    value = html.unescape(raw)
    if _BAD_ESCAPE_RE.search(value):
        return None
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return None


def is_excluded(url: str, exclusions: Sequence[str] = EXCLUDED_HOSTS) -> bool:
    """Check whether the URL host contains any excluded substring."""
    try:
        host = (urlsplit(url).hostname or "").lower()
    except ValueError:
        return True
    if not host:
        return True
    return any(entry in host for entry in exclusions)


def url_key(url: str) -> str:
    """Normalized form used for deduplication."""
    parts = urlsplit(url)
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc.lower(),
            parts.path.rstrip("/"),
            parts.query,
            "",
        )
    )


def _clean_fragment(fragment: str) -> str:
    text = html.unescape(_TAG_RE.sub("", fragment))
    return normalize_whitespace(text).strip()


class ResultExtractor:
    """
    Pattern-based extractor for search-results pages.

    Example:
        >>> extractor = ResultExtractor()
        >>> candidates = extractor.extract(page_html)
        >>> candidates.urls
        ['https://example.com/page']
    """

    def __init__(
        self,
        url_matchers: Sequence[Matcher] = URL_MATCHERS,
        title_matchers: Sequence[Matcher] = TITLE_MATCHERS,
        snippet_matchers: Sequence[Matcher] = SNIPPET_MATCHERS,
        exclusions: Sequence[str] = EXCLUDED_HOSTS,
        scan_limit: int = URL_SCAN_LIMIT,
    ) -> None:
        """
        Initialize extractor.

        Args:
            url_matchers: URL pattern families, highest priority first
            title_matchers: Heading pattern families, highest priority first
            snippet_matchers: Snippet pattern families, highest priority first
            exclusions: Hostname substrings of non-result domains
            scan_limit: Stop scanning a URL rule once this many URLs are held
        """
        self._url_matchers = tuple(url_matchers)
        self._title_matchers = tuple(title_matchers)
        self._snippet_matchers = tuple(snippet_matchers)
        self._exclusions = tuple(exclusions)
        self._scan_limit = scan_limit

    def extract(self, document: str, cap: int = DEFAULT_CAP) -> CandidateSet:
        """
        Extract unscored candidates from a results document.

        Args:
            document: Raw markup
            cap: Maximum number of candidates to keep

        Returns:
            Candidates in extraction order (empty when nothing matched)
        """
        text = normalize_whitespace(document or "")

        urls = self.find_urls(text)
        titles = self._find_texts(text, self._title_matchers, TITLE_NOISE_LENGTH)
        snippets = self._find_texts(text, self._snippet_matchers, SNIPPET_NOISE_LENGTH)

        candidates = [
            Candidate(
                url=url,
                title=titles[i] if i < len(titles) else url,
                snippet=snippets[i] if i < len(snippets) else "",
            )
            for i, url in enumerate(urls)
        ]

        logger.debug(
            "Extracted %d urls, %d titles, %d snippets from %d chars",
            len(urls),
            len(titles),
            len(snippets),
            len(text),
        )

        return CandidateSet(candidates=candidates[: max(cap, 0)])

    def find_urls(self, text: str) -> list[str]:
        """
        Run every URL rule in priority order and accumulate accepted URLs.

        Args:
            text: Whitespace-normalized markup

        Returns:
            Decoded, filtered, deduplicated URLs in first-seen order
        """
        seen: set[str] = set()
        urls: list[str] = []

        for matcher in self._url_matchers:
            for raw in matcher.find(text):
                if len(urls) >= self._scan_limit:
                    break

                url = decode_url(raw)
                if url is None:
                    logger.debug("Skipping undecodable url from %s: %r", matcher.name, raw)
                    continue
                if not _ABSOLUTE_URL_RE.match(url) or is_excluded(url, self._exclusions):
                    continue

                key = url_key(url)
                if key in seen:
                    continue
                seen.add(key)
                urls.append(url)

        return urls

    def _find_texts(
        self,
        text: str,
        matchers: Sequence[Matcher],
        noise_length: int,
    ) -> list[str]:
        """First rule yielding any non-noise fragment supplies the whole list."""
        for matcher in matchers:
            found = [
                cleaned
                for cleaned in (_clean_fragment(raw) for raw in matcher.find(text))
                if len(cleaned) > noise_length
            ]
            if found:
                return found
        return []
