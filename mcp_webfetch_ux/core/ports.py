"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod

from .domain import RawDocument, SearchQuery, SearchResult


class ContentExtractor(ABC):
    """Port for turning a raw document into readable text"""

    @abstractmethod
    def extract(self, document: RawDocument) -> str:
        """Return text for the document. Must not raise on malformed content."""
        pass


class ContentSearcher(ABC):
    """Port for searching within text"""

    @abstractmethod
    def search(self, text: str, query: SearchQuery) -> SearchResult:
        """Search text line by line, return the paginated page with context"""
        pass


class PageFetcher(ABC):
    """Port for retrieving documents over the network"""

    @abstractmethod
    def fetch(self, url: str) -> tuple[RawDocument, int]:
        """Fetch url, return (document, status_code)"""
        pass
