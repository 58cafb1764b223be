"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- readability.py: Readability (readability-lxml + markdownify) and raw extractors
- search.py: In-memory regex searcher with context and pagination
- fetcher.py: httpx page fetcher
"""
from .readability import ReadabilityExtractor, RawExtractor
from .search import RegexContextSearcher
from .fetcher import HttpxFetcher

__all__ = [
    "ReadabilityExtractor",
    "RawExtractor",
    "RegexContextSearcher",
    "HttpxFetcher",
]
