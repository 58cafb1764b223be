"""
Unit tests for MCP handlers

Handlers return dicts and never raise; formatters turn them into text.
"""
import asyncio

import httpx

from mcp_webfetch_ux.adapters.mcp.handlers import MCPHandlers
from mcp_webfetch_ux.container import Container
from mcp_webfetch_ux.formatters import format_search_report, format_webfetch

DOC = "\n".join([
    "# Configuration",
    "",
    "Set the timeout in seconds.",
    "Retries use exponential backoff.",
    "",
    "# Limits",
    "The default timeout is 30 seconds.",
])


def make_handlers(routes: dict | None = None) -> MCPHandlers:
    """Handlers over a mock transport; routes map URL to a response factory"""
    routes = routes or {}

    def handler(request: httpx.Request) -> httpx.Response:
        factory = routes.get(str(request.url))
        if factory is None:
            return httpx.Response(404, text="not found")
        return factory()

    return MCPHandlers(Container(transport=httpx.MockTransport(handler)))


class TestSearchContent:
    """Test search_content handler."""

    def test_success(self):
        result = asyncio.run(make_handlers().search_content(DOC, "timeout", before=1))

        assert result["success"] is True
        assert result["status"] == "ok"
        assert result["match_count"] == 2
        assert [line["line_number"] for line in result["lines"]] == [2, 3, 6, 7]
        assert [line["is_match"] for line in result["lines"]] == [False, True, False, True]

    def test_invalid_pattern_is_not_an_error(self):
        result = asyncio.run(make_handlers().search_content(DOC, "[unclosed"))
        assert result["success"] is True
        assert format_search_report(result) == "Invalid regex pattern: [unclosed"

    def test_negative_limit(self):
        result = asyncio.run(make_handlers().search_content(DOC, "timeout", limit=-1))
        assert result["success"] is False
        assert "limit must be >= 0" in result["error"]


class TestExtractContent:
    """Test extract_content handler."""

    def test_raw(self):
        result = asyncio.run(make_handlers().extract_content("<i>x</i>", mode="raw"))
        assert result == {
            "success": True,
            "mode": "raw",
            "source_url": None,
            "text": "<i>x</i>",
            "total_lines": 1
        }

    def test_readability(self):
        result = asyncio.run(make_handlers().extract_content("<h1>Title</h1><p>Body text</p>"))
        assert result["success"] is True
        assert result["mode"] == "readability"
        assert "Body text" in result["text"]
        assert "<p>" not in result["text"]

    def test_unknown_mode(self):
        result = asyncio.run(make_handlers().extract_content("x", mode="pdf"))
        assert result["success"] is False
        assert "Unknown extraction mode" in result["error"]


class TestWebfetch:
    """Test webfetch handler."""

    ROUTES = {
        "https://docs.example.com/config.md": lambda: httpx.Response(
            200, text=DOC, headers={"content-type": "text/markdown"}
        ),
    }

    def test_text(self):
        result = asyncio.run(make_handlers(self.ROUTES).webfetch("https://docs.example.com/config.md"))

        assert result["success"] is True
        assert result["mode"] == "raw"
        assert result["text"] == DOC
        assert result["total_lines"] == 7
        assert "search" not in result

    def test_with_pattern(self):
        result = asyncio.run(make_handlers(self.ROUTES).webfetch(
            "https://docs.example.com/config.md", pattern="backoff"
        ))

        assert result["success"] is True
        assert "text" not in result
        assert result["search"]["match_count"] == 1

        text = format_webfetch(result)
        assert text.startswith("SOURCE: https://docs.example.com/config.md (200, text/markdown")
        assert "     4:Retries use exponential backoff." in text

    def test_fetch_failure(self):
        result = asyncio.run(make_handlers().webfetch("https://docs.example.com/missing"))
        assert result["success"] is False
        assert "HTTP 404" in result["error"]
        assert format_webfetch(result).startswith("ERROR: Failed to fetch https://docs.example.com/missing")

    def test_bad_query_checked_before_fetch(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, text="x")

        handlers = MCPHandlers(Container(transport=httpx.MockTransport(handler)))
        result = asyncio.run(handlers.webfetch("https://example.com/", pattern="x", offset=-5))

        assert result["success"] is False
        assert calls == []
