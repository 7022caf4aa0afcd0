"""
Pattern Matchers - Ordered pattern families for Google results markup.

Each family is a list of matchers tried in priority order. The markup
drifts often, so new layouts are handled by appending a matcher here
rather than touching the extractor.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = [
    "RegexMatcher",
    "URL_MATCHERS",
    "TITLE_MATCHERS",
    "SNIPPET_MATCHERS",
    "EXCLUDED_HOSTS",
]


@dataclass(frozen=True)
class RegexMatcher:
    """
    Matcher backed by a compiled regular expression.

    The first non-empty capture group of each match is yielded, so a
    pattern may use alternation with one group per branch.
    """

    name: str
    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, pattern: str) -> RegexMatcher:
        return cls(name=name, pattern=re.compile(pattern, re.IGNORECASE))

    def find(self, text: str) -> Iterator[str]:
        for match in self.pattern.finditer(text):
            value = next((g for g in match.groups() if g), None)
            if value is not None:
                yield value


# Attribute runs use [^<>] and bodies stop at the next opener of the same
# element, so unclosed or truncated tags cost one bounded scan each.
URL_MATCHERS: tuple[RegexMatcher, ...] = (
    # <a href="/url?q=https://target&sa=U...">
    RegexMatcher.compile("redirect", r'<a[^<>]+href="/url\?q=([^"&<>]+)[^"<>]*"'),
    # Organic result anchors carry jsname="UWckNb", on either side of href
    RegexMatcher.compile(
        "result-marker",
        r'<a[^<>]*\bjsname="UWckNb"[^<>]*\bhref="([^"<>]+)"'
        r'|<a[^<>]*\bhref="([^"<>]+)"[^<>]*\bjsname="UWckNb"',
    ),
    RegexMatcher.compile("absolute", r'<a[^<>]+href="(https?://[^"<>]+)"'),
)

TITLE_MATCHERS: tuple[RegexMatcher, ...] = (
    RegexMatcher.compile("h3", r"<h3\b[^<>]*>((?:(?!<h3\b).)*?)</h3>"),
    RegexMatcher.compile(
        "aria-heading",
        r'<div[^<>]*\brole="heading"[^<>]*\baria-level="3"[^<>]*>'
        r'((?:(?!<div[^<>]*\brole="heading").)*?)</div>',
    ),
)

SNIPPET_MATCHERS: tuple[RegexMatcher, ...] = (
    RegexMatcher.compile(
        "vwic3b",
        r'<div[^<>]*\bclass="[^"<>]*\bVwiC3b\b[^"<>]*"[^<>]*>'
        r'((?:(?!<div[^<>]*\bclass="[^"<>]*\bVwiC3b\b).)*?)</div>',
    ),
    RegexMatcher.compile(
        "acopre",
        r'<span[^<>]*\bclass="[^"<>]*\baCOpRe\b[^"<>]*"[^<>]*>'
        r'((?:(?!<span[^<>]*\bclass="[^"<>]*\baCOpRe\b).)*?)</span>',
    ),
    RegexMatcher.compile(
        "data-sncf",
        r'<div[^<>]*\bdata-sncf="[^"<>]*"[^<>]*>'
        r'((?:(?!<div[^<>]*\bdata-sncf=).)*?)</div>',
    ),
)

# Hostname substrings that never identify an organic result.
# Substring matching is intentionally coarse: "google." also drops
# google.it, policies.google.com and any other engine property.
EXCLUDED_HOSTS: tuple[str, ...] = (
    "google.",
    "googleusercontent.com",
    "gstatic.com",
    "youtube.com",
    "youtu.be",
    "webcache.",
    "accounts.google",
    "policies.google",
    "support.google",
    "maps.google",
)
