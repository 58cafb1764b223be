"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
import httpx

from .adapters import HttpxFetcher, RawExtractor, ReadabilityExtractor, RegexContextSearcher
from .adapters.fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .core import (
    ExtractionMode,
    ExtractContentService,
    SearchContentService,
    FetchPageService
)


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None
    ):
        # Adapters (infrastructure)
        self.extractors = {
            ExtractionMode.READABILITY: ReadabilityExtractor(),
            ExtractionMode.RAW: RawExtractor(),
        }
        self.searcher = RegexContextSearcher()
        self.fetcher = HttpxFetcher(user_agent=user_agent, timeout=timeout, transport=transport)

        # Services (use cases)
        self.extract_content = ExtractContentService(
            extractors=self.extractors
        )

        self.search_content = SearchContentService(
            searcher=self.searcher
        )

        self.fetch_page = FetchPageService(
            fetcher=self.fetcher,
            extract_service=self.extract_content
        )
