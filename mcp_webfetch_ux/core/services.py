"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
from typing import Optional, Union

from .domain import ExtractionMode, FetchedPage, RawDocument, SearchQuery, SearchResult
from .ports import ContentExtractor, ContentSearcher, PageFetcher

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def is_html(content_type: Optional[str]) -> bool:
    """True for HTML content types, and when the type is unknown"""
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in HTML_CONTENT_TYPES


class ExtractContentService:
    """Use case: Turn a raw document into text with the selected strategy"""

    def __init__(self, extractors: dict[ExtractionMode, ContentExtractor]):
        self.extractors = extractors

    def execute(
        self,
        document: RawDocument,
        mode: Union[str, ExtractionMode] = ExtractionMode.READABILITY
    ) -> str:
        """Extract text from document. Readability degrades to whole-page conversion, never raises."""
        mode = ExtractionMode.parse(mode)
        return self.extractors[mode].extract(document)


class SearchContentService:
    """Use case: Search for pattern within text"""

    def __init__(self, searcher: ContentSearcher):
        self.searcher = searcher

    def execute(self, text: str, query: SearchQuery) -> SearchResult:
        """Search text. Invalid patterns and empty results come back as statuses."""
        return self.searcher.search(text, query)


class FetchPageService:
    """Use case: Fetch a page and extract its text"""

    def __init__(self, fetcher: PageFetcher, extract_service: ExtractContentService):
        self.fetcher = fetcher
        self.extract_service = extract_service

    def execute(
        self,
        url: str,
        mode: Union[str, ExtractionMode] = ExtractionMode.READABILITY
    ) -> FetchedPage:
        """
        Fetch url and extract it.

        Non-HTML responses (plain text, JSON, ...) skip readability and are
        returned as-is.
        """
        mode = ExtractionMode.parse(mode)
        document, status_code = self.fetcher.fetch(url)

        if mode is ExtractionMode.READABILITY and not is_html(document.content_type):
            mode = ExtractionMode.RAW

        text = self.extract_service.execute(document, mode)

        return FetchedPage(
            url=url,
            final_url=document.source_url or url,
            status_code=status_code,
            content_type=document.content_type,
            size_bytes=len(document.text().encode("utf-8")),
            mode=mode,
            text=text
        )
