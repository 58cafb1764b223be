#!/usr/bin/env python3
"""
CLI for webfetch-ux MCP - test tools without MCP restart

Usage:
  webfetch-ux list-tools                           # Show MCP tool definitions
  webfetch-ux extract page.html                    # Readable Markdown from a saved page
  webfetch-ux extract page.html --url https://x/a  # Resolve relative links against a URL
  webfetch-ux extract page.html --mode raw         # Pass content through unchanged
  webfetch-ux search notes.txt "error|warning" -B 1 -A 1
  cat page.md | webfetch-ux search - "TODO" --offset 100
  webfetch-ux fetch https://example.com            # Fetch + extract
  webfetch-ux fetch https://example.com --pattern "domain" -A 2

Fast iteration: Uses hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import json
import sys
import traceback
from pathlib import Path

from .config import get_fetch_timeout, get_user_agent
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import (
    format_extract_content,
    format_search_report,
    format_webfetch,
)


def read_input(path: str) -> str:
    """Read a file, or stdin when path is '-'"""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def make_handlers() -> MCPHandlers:
    container = Container(user_agent=get_user_agent(), timeout=get_fetch_timeout())
    return MCPHandlers(container)


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_name, tool_schema in TOOL_SCHEMAS.items():
        print(f"Tool: {tool_schema['name']}")
        print(f"Agents see: mcp__webfetch-ux__{tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def extract_command(path: str, url: str | None, mode: str) -> int:
    """Extract readable text from a local document"""
    try:
        handlers = make_handlers()
        result = await handlers.extract_content(
            content=read_input(path),
            source_url=url,
            mode=mode
        )

        print(format_extract_content(result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1


async def search_command(
    path: str,
    pattern: str,
    limit: int,
    offset: int,
    before: int,
    after: int,
) -> int:
    """Search within a local text file"""
    try:
        handlers = make_handlers()
        result = await handlers.search_content(
            content=read_input(path),
            pattern=pattern,
            limit=limit,
            offset=offset,
            before=before,
            after=after
        )

        print(format_search_report(result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1


async def fetch_command(
    url: str,
    mode: str,
    pattern: str | None,
    limit: int,
    offset: int,
    before: int,
    after: int,
) -> int:
    """Fetch a page, extract it, optionally search it"""
    try:
        handlers = make_handlers()
        result = await handlers.webfetch(
            url=url,
            mode=mode,
            pattern=pattern,
            limit=limit,
            offset=offset,
            before=before,
            after=after
        )

        print(format_webfetch(result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1


def _add_search_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, default=100, help="Max lines shown, context included (default: 100)")
    parser.add_argument("--offset", type=int, default=0, help="Lines to skip (default: 0)")
    parser.add_argument("-B", "--before", type=int, default=0, help="Context lines before each match")
    parser.add_argument("-A", "--after", type=int, default=0, help="Context lines after each match")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="webfetch-ux CLI - Test MCP tools without server restart"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    # extract command
    extract_parser = subparsers.add_parser("extract", help="Extract readable text from a file")
    extract_parser.add_argument("path", help="HTML file ('-' for stdin)")
    extract_parser.add_argument("--url", help="Source URL for resolving relative links")
    extract_parser.add_argument(
        "--mode",
        choices=["readability", "raw"],
        default="readability",
        help="Extraction mode (default: readability)"
    )

    # search command
    search_parser = subparsers.add_parser("search", help="Search within a text file")
    search_parser.add_argument("path", help="Text file ('-' for stdin)")
    search_parser.add_argument("pattern", help="Search pattern (regex, case-insensitive)")
    _add_search_arguments(search_parser)

    # fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and extract a URL")
    fetch_parser.add_argument("url", help="http(s) URL")
    fetch_parser.add_argument(
        "--mode",
        choices=["readability", "raw"],
        default="readability",
        help="Extraction mode (default: readability)"
    )
    fetch_parser.add_argument("--pattern", help="Search the extracted text instead of printing it")
    _add_search_arguments(fetch_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Run command
    if args.command == "list-tools":
        return asyncio.run(list_tools_command())
    elif args.command == "extract":
        return asyncio.run(extract_command(
            path=args.path,
            url=args.url,
            mode=args.mode
        ))
    elif args.command == "search":
        return asyncio.run(search_command(
            path=args.path,
            pattern=args.pattern,
            limit=args.limit,
            offset=args.offset,
            before=args.before,
            after=args.after
        ))
    elif args.command == "fetch":
        return asyncio.run(fetch_command(
            url=args.url,
            mode=args.mode,
            pattern=args.pattern,
            limit=args.limit,
            offset=args.offset,
            before=args.before,
            after=args.after
        ))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
