"""
Text formatters for MCP tool results

Format handler results as plain text for agents.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any

# Right-justified width of line numbers in search output
LINE_NUMBER_WIDTH = 6
DIVIDER = "--"


def format_error(result: dict[str, Any]) -> str:
    return f"ERROR: {result.get('error', 'Unknown error')}"


def format_search_header(result: dict[str, Any]) -> list[str]:
    """Header lines for a search with at least one match.

    Context and range lines only appear when they say something.
    """
    match_count = result['match_count']
    context_count = result['context_count']
    before = result.get('before', 0)
    after = result.get('after', 0)
    offset = result.get('offset', 0)
    shown = len(result['lines'])

    lines = [f"Pattern: {result['pattern']}"]
    lines.append(f"Matches: {match_count} line{'s' if match_count != 1 else ''}")

    if before or after:
        lines.append(f"Context: {context_count} lines ({before} before, {after} after)")

    if shown < context_count:
        if offset >= context_count:
            lines.append(f"Showing 0 of {context_count} lines (offset {offset} is past the end)")
        elif shown == 0:
            lines.append(f"Showing 0 of {context_count} lines (limit {result.get('limit', 0)})")
        else:
            lines.append(f"Showing lines {offset + 1}-{offset + shown} of {context_count}")

    return lines


def format_search_body(result_lines: list[dict[str, Any]]) -> list[str]:
    """Render grep-style lines: N:match, N-context, -- between gaps"""
    body = []
    previous = None
    for entry in result_lines:
        line_number = entry['line_number']
        if previous is not None and line_number != previous + 1:
            body.append(DIVIDER)
        separator = ":" if entry['is_match'] else "-"
        body.append(f"{line_number:>{LINE_NUMBER_WIDTH}}{separator}{entry['line']}")
        previous = line_number
    return body


def format_search_report(result: dict[str, Any]) -> str:
    """Format search_content result as a grep-like report.

    Example output:
        Pattern: MATCH
        Matches: 1 line
        Context: 3 lines (1 before, 1 after)

             2-b
             3:MATCH
             4-c
    """
    if not result.get("success"):
        return format_error(result)

    if result['status'] == "invalid_pattern":
        return f"Invalid regex pattern: {result['pattern']}"

    if result['status'] == "no_matches":
        return f"No matches found for pattern: {result['pattern']}"

    lines = format_search_header(result)
    if result['lines']:
        lines.append("")
        lines.extend(format_search_body(result['lines']))
    return "\n".join(lines)


def format_extract_content(result: dict[str, Any]) -> str:
    """Format extract_content result: the extracted text itself"""
    if not result.get("success"):
        return format_error(result)

    return result['text']


def format_webfetch(result: dict[str, Any]) -> str:
    """Format webfetch result.

    Example output (with pattern):
        SOURCE: https://example.com/docs (200, text/html, 48 KB, readability)

        Pattern: timeout
        Matches: 3 lines
        ...
    """
    if not result.get("success"):
        return format_error(result)

    size_kb = result['size_bytes'] / 1024
    content_type = (result.get('content_type') or "unknown").split(";", 1)[0]
    header = (
        f"SOURCE: {result['final_url']} "
        f"({result['status_code']}, {content_type}, {size_kb:.0f} KB, {result['mode']})"
    )

    if "search" in result:
        body = format_search_report(result['search'])
    else:
        body = result['text']

    return f"{header}\n\n{body}"
