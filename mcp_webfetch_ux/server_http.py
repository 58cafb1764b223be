#!/usr/bin/env python3
"""
MCP HTTP/SSE Server - Hexagonal Architecture

Clean HTTP/SSE server using dependency injection and hexagonal architecture.

Run with: uvicorn mcp_webfetch_ux.server_http:app --host 127.0.0.1 --port 5002
(or: mcp-webfetch-ux-http)

Configuration:
- PORT / HOST: Server address (default: 127.0.0.1:5002)
- USER_AGENT: User-Agent header for fetches
- FETCH_TIMEOUT: Fetch timeout in seconds (default: 30)
- LOG_LEVEL: Log level (default: INFO)
"""

import json
import logging
import signal
import sys
from datetime import datetime, timezone
from typing import Any

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .config import get_fetch_timeout, get_host, get_log_level, get_port, get_user_agent
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import (
    format_extract_content,
    format_search_report,
    format_webfetch
)

# Configure logging with millisecond precision
logging.basicConfig(
    level=get_log_level(),
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y/%m/%d %H:%M:%S"
)


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime("%Y/%m/%d %H:%M:%S")
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


# Apply custom formatter to root logger
for handler in logging.root.handlers:
    handler.setFormatter(MillisecondFormatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S"
    ))

logging.getLogger("readability").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# Initialize dependency injection container
container = Container(
    user_agent=get_user_agent(),
    timeout=get_fetch_timeout()
)

# Initialize MCP handlers
handlers = MCPHandlers(container)

# MCP Server instance
mcp_server = Server("webfetch-ux-mcp")

# SSE transport for multi-client support
sse_transport = SseServerTransport("/messages/")

FORMATTERS = {
    "webfetch": format_webfetch,
    "extract_content": format_extract_content,
    "search_content": format_search_report
}


@mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
async def list_tools() -> list[Tool]:
    """List available MCP tools"""
    return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]


@mcp_server.call_tool()  # type: ignore[misc,no-untyped-call]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls"""
    # Content can be megabytes; log only its size
    logged = {k: (f"<{len(v)} chars>" if k == "content" and isinstance(v, str) else v)
              for k, v in arguments.items()}
    logger.info(f"call_tool: {name} args={logged}")

    try:
        result = await _dispatch_tool(name, arguments)
    except Exception as e:
        logger.error(f"call_tool: {name} FAILED: {e}")
        raise

    formatter = FORMATTERS.get(name)
    if formatter:
        formatted_text = formatter(result)
    else:
        formatted_text = json.dumps(result, indent=2)

    logger.info(f"call_tool: {name} returning {len(formatted_text)} chars")
    return [TextContent(type="text", text=formatted_text)]


async def _dispatch_tool(name: str, arguments: dict[str, Any]) -> Any:
    """Dispatch tool call to appropriate handler"""
    if name == "webfetch":
        return await handlers.webfetch(
            url=arguments["url"],
            mode=arguments.get("mode", "readability"),
            pattern=arguments.get("pattern"),
            limit=arguments.get("limit", 100),
            offset=arguments.get("offset", 0),
            before=arguments.get("before", 0),
            after=arguments.get("after", 0)
        )

    elif name == "extract_content":
        return await handlers.extract_content(
            content=arguments["content"],
            source_url=arguments.get("source_url"),
            mode=arguments.get("mode", "readability")
        )

    elif name == "search_content":
        return await handlers.search_content(
            content=arguments["content"],
            pattern=arguments["pattern"],
            limit=arguments.get("limit", 100),
            offset=arguments.get("offset", 0),
            before=arguments.get("before", 0),
            after=arguments.get("after", 0)
        )

    else:
        raise ValueError(f"Unknown tool: {name}")


# HTTP routes
async def handle_ping(request: Request) -> Response:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_sse(request: Request) -> Response:
    """SSE endpoint for MCP communication"""
    client_addr = request.client.host if request.client else "unknown"
    logger.info(f"SSE connect from {client_addr}")
    async with sse_transport.connect_sse(
        request.scope, request.receive, request._send
    ) as streams:
        logger.info(f"SSE session started for {client_addr}")
        await mcp_server.run(
            streams[0], streams[1], mcp_server.create_initialization_options()
        )
        logger.info(f"SSE disconnect from {client_addr}")
    return Response()


routes = [
    Route("/ping", handle_ping),
    Route("/sse", handle_sse),
    Mount("/messages/", app=sse_transport.handle_post_message),
]

app = Starlette(debug=False, routes=routes)


# Graceful shutdown on SIGTERM
def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main():
    """Run the SSE server with uvicorn"""
    import uvicorn

    signal.signal(signal.SIGTERM, handle_sigterm)
    host = get_host()
    port = get_port()
    logger.info(f"Starting MCP HTTP server on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
