"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any, Optional

from ...container import Container
from ...core.domain import ExtractionMode, RawDocument, SearchQuery, SearchResult


def _search_result_to_dict(result: SearchResult) -> dict[str, Any]:
    """Flatten a SearchResult for formatters and JSON output"""
    return {
        "success": True,
        "status": result.status,
        "pattern": result.pattern,
        "match_count": result.match_count,
        "context_count": result.context_count,
        "offset": result.offset,
        "limit": result.limit,
        "before": result.before,
        "after": result.after,
        "lines": [
            {
                "line_number": line.line_number,
                "line": line.content,
                "is_match": line.is_match
            }
            for line in result.lines
        ]
    }


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def extract_content(
        self,
        content: str,
        source_url: Optional[str] = None,
        mode: str = "readability"
    ) -> dict[str, Any]:
        """Extract readable text from an already retrieved document"""
        try:
            extraction_mode = ExtractionMode.parse(mode)
            document = RawDocument(content=content, source_url=source_url)
            text = await asyncio.to_thread(
                self.container.extract_content.execute,
                document,
                extraction_mode
            )

            return {
                "success": True,
                "mode": extraction_mode.value,
                "source_url": source_url,
                "text": text,
                "total_lines": text.count("\n") + 1 if text else 0
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to extract content: {str(e)}"
            }

    async def search_content(
        self,
        content: str,
        pattern: str,
        limit: int = 100,
        offset: int = 0,
        before: int = 0,
        after: int = 0
    ) -> dict[str, Any]:
        """Search for pattern in text"""
        try:
            query = SearchQuery(
                pattern=pattern,
                limit=limit,
                offset=offset,
                before=before,
                after=after
            )
            result = await asyncio.to_thread(
                self.container.search_content.execute,
                content,
                query
            )
            return _search_result_to_dict(result)

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to search content: {str(e)}"
            }

    async def webfetch(
        self,
        url: str,
        mode: str = "readability",
        pattern: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
        before: int = 0,
        after: int = 0
    ) -> dict[str, Any]:
        """Fetch url, extract it, and optionally search the extracted text"""
        try:
            # Validate the query before touching the network
            query = None
            if pattern:
                query = SearchQuery(
                    pattern=pattern,
                    limit=limit,
                    offset=offset,
                    before=before,
                    after=after
                )

            page = await asyncio.to_thread(
                self.container.fetch_page.execute,
                url,
                mode
            )

            result = {
                "success": True,
                "url": page.url,
                "final_url": page.final_url,
                "status_code": page.status_code,
                "content_type": page.content_type,
                "size_bytes": page.size_bytes,
                "mode": page.mode.value,
                "total_lines": page.text.count("\n") + 1 if page.text else 0
            }

            if query is None:
                result["text"] = page.text
            else:
                search_result = await asyncio.to_thread(
                    self.container.search_content.execute,
                    page.text,
                    query
                )
                result["search"] = _search_result_to_dict(search_result)

            return result

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to fetch {url}: {str(e)}"
            }
