"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import ExtractionMode, RawDocument, SearchQuery, SearchLine, SearchResult, FetchedPage
from .ports import ContentExtractor, ContentSearcher, PageFetcher
from .services import (
    ExtractContentService,
    SearchContentService,
    FetchPageService
)

__all__ = [
    # Domain models
    "ExtractionMode",
    "RawDocument",
    "SearchQuery",
    "SearchLine",
    "SearchResult",
    "FetchedPage",
    # Ports
    "ContentExtractor",
    "ContentSearcher",
    "PageFetcher",
    # Services
    "ExtractContentService",
    "SearchContentService",
    "FetchPageService",
]
