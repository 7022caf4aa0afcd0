"""
Extraction Domain - Candidate extraction from search-results pages.

This domain handles:
- Whitespace normalization of raw markup
- Ordered URL/title/snippet pattern families
- URL decoding, exclusion filtering and deduplication
- Positional assembly into candidates
"""

from .contracts import Extractor, Matcher
from .extractor import ResultExtractor
from .matchers import EXCLUDED_HOSTS, SNIPPET_MATCHERS, TITLE_MATCHERS, URL_MATCHERS, RegexMatcher
from .models import Candidate, CandidateSet

__all__ = [
    "Extractor",
    "Matcher",
    "Candidate",
    "CandidateSet",
    "ResultExtractor",
    "RegexMatcher",
    "URL_MATCHERS",
    "TITLE_MATCHERS",
    "SNIPPET_MATCHERS",
    "EXCLUDED_HOSTS",
]
