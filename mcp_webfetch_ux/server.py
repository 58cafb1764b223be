"""
webfetch-ux MCP Server

MCP delivery layer - wraps the MCP handlers as FastMCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
from typing import Optional
from mcp.server.fastmcp import FastMCP

from .config import get_fetch_timeout, get_host, get_port, get_user_agent
from .container import Container
from .adapters.mcp import MCPHandlers
from .formatters import format_extract_content, format_search_report, format_webfetch

# Suppress INFO logs
logging.getLogger("readability").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

# Initialize MCP server with HTTP config
mcp = FastMCP("webfetch-ux", host=get_host(), port=get_port())

handlers = MCPHandlers(Container(user_agent=get_user_agent(), timeout=get_fetch_timeout()))


@mcp.tool()
async def webfetch(
    url: str,
    mode: str = "readability",
    pattern: Optional[str] = None,
    limit: int = 100,
    offset: int = 0,
    before: int = 0,
    after: int = 0
) -> str:
    """
    Fetch a web page and return its readable content, or grep it.

    Don't dump a whole page into context. Read the article, or search
    for the lines you need.

    Args:
        url: http(s) URL to fetch
        mode: "readability" (default, main content as Markdown) or "raw" (unchanged)
        pattern: Optional regex. When set, returns matching lines instead of the page.
        limit: Maximum lines to show, context included (default: 100)
        offset: Lines of the match+context set to skip (default: 0)
        before: Context lines before each match (default: 0)
        after: Context lines after each match (default: 0)

    Examples:
        webfetch("https://example.com/post")
        → SOURCE: ... then the article as Markdown

        webfetch("https://example.com/docs", pattern="timeout|retry", before=1, after=1)
        →      41-Connections are pooled.
               42:The default timeout is 30 seconds.
               43-
    """
    result = await handlers.webfetch(
        url=url,
        mode=mode,
        pattern=pattern,
        limit=limit,
        offset=offset,
        before=before,
        after=after
    )
    return format_webfetch(result)


@mcp.tool()
async def extract_content(
    content: str,
    source_url: Optional[str] = None,
    mode: str = "readability"
) -> str:
    """
    Extract readable text from HTML you already have.

    Args:
        content: HTML (or text) of the document
        source_url: Optional page URL, used to make relative links absolute
        mode: "readability" (default) or "raw"

    Returns:
        Main content as Markdown; the whole page converted if no article is found.
    """
    result = await handlers.extract_content(
        content=content,
        source_url=source_url,
        mode=mode
    )
    return format_extract_content(result)


@mcp.tool()
async def search_content(
    content: str,
    pattern: str,
    limit: int = 100,
    offset: int = 0,
    before: int = 0,
    after: int = 0
) -> str:
    """
    Search text for a regex, grep style (case-insensitive, line numbers, context).

    Args:
        content: Text to search
        pattern: Regex pattern (Python syntax)
        limit: Maximum lines to show, context included (default: 100)
        offset: Lines of the match+context set to skip (default: 0)
        before: Context lines before each match (default: 0)
        after: Context lines after each match (default: 0)

    Pattern Tips:
        - OR patterns work: "error|warning"
        - Matches are "N:line", context lines are "N-line", "--" marks a gap
        - Lines over 450 chars are shortened (match lines to 200 chars around the
          first match, context lines to 450 chars); shorter lines are shown whole
    """
    result = await handlers.search_content(
        content=content,
        pattern=pattern,
        limit=limit,
        offset=offset,
        before=before,
        after=after
    )
    return format_search_report(result)


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="webfetch-ux: read the article, grep the rest. Web content MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to for HTTP transport (default: $HOST or 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to for HTTP transport (default: $PORT or 5002)"
    )
    args = parser.parse_args()

    if args.host:
        mcp.settings.host = args.host
    if args.port:
        mcp.settings.port = args.port

    # Run the server
    if args.transport == "streamable-http":
        print(f"Starting webfetch-ux on http://{mcp.settings.host}:{mcp.settings.port}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
