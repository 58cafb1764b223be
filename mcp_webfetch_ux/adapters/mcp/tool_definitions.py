"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both stdio and HTTP/SSE servers.
"""

_SEARCH_PROPERTIES = {
    "pattern": {
        "type": "string",
        "description": "Regex pattern (Python syntax, case-insensitive). Lines over 450 chars are shortened around the first match."
    },
    "limit": {
        "type": "integer",
        "description": "Maximum lines to show, context lines included",
        "default": 100,
        "minimum": 0
    },
    "offset": {
        "type": "integer",
        "description": "Skip first N lines of the match+context set (pagination)",
        "default": 0,
        "minimum": 0
    },
    "before": {
        "type": "integer",
        "description": "Lines of context before each match (like grep -B)",
        "default": 0,
        "minimum": 0
    },
    "after": {
        "type": "integer",
        "description": "Lines of context after each match (like grep -A)",
        "default": 0,
        "minimum": 0
    }
}

_MODE_PROPERTY = {
    "type": "string",
    "enum": ["readability", "raw"],
    "description": "readability=main content as Markdown (falls back to whole page), raw=unchanged",
    "default": "readability"
}

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "webfetch": {
        "name": "webfetch",
        "description": """Fetch a web page and return its readable content. Add a pattern to grep the page instead of reading all of it.

webfetch("https://example.com/post") → article as Markdown
webfetch("https://example.com/docs", pattern="timeout|retry", after=2) → matching lines with line numbers
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "http(s) URL to fetch"
                },
                "mode": _MODE_PROPERTY,
                **_SEARCH_PROPERTIES
            },
            "required": ["url"]
        }
    },
    "extract_content": {
        "name": "extract_content",
        "description": """Extract readable text from HTML you already have. Removes navigation, ads and sidebars.

extract_content("<html>...</html>", source_url="https://example.com/a") → Markdown
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": "HTML or text of the document"
                },
                "source_url": {
                    "type": "string",
                    "description": "Page URL, used to resolve relative links"
                },
                "mode": _MODE_PROPERTY
            },
            "required": ["content"]
        }
    },
    "search_content": {
        "name": "search_content",
        "description": """Grep text in memory. Matches are shown as N:line and context as N-line. Gaps are marked with --.
Lines over 450 chars are shortened: match lines to 200 chars either side of the first match, context lines to their first 450 chars. Shorter lines are shown whole.

search_content(text, "error|warning", before=1, after=1) → matching lines with context
search_content(text, "TODO", offset=100) → next page
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": "Text to search"
                },
                **_SEARCH_PROPERTIES
            },
            "required": ["content", "pattern"]
        }
    }
}
