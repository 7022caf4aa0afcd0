"""
Boolean Search - Best-match page lookup for a phrase on a single site.

Example:
    >>> from booleansearch.domains.search import extract_and_rank
    >>> ranked = extract_and_rank(results_html, "Example Page Result")
    >>> ranked.best.url
    'https://example.com/page'
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
