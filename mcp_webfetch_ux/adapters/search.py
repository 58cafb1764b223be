"""
Text Search Adapter

Implements ContentSearcher port with an in-memory, grep-like regex search.
Case-insensitive, line numbers, before/after context, offset/limit pagination.
"""
import re
from typing import Optional

from ..core.domain import SearchLine, SearchQuery, SearchResult
from ..core.ports import ContentSearcher

# Lines longer than this are clipped for display
MAX_LINE_LENGTH = 450
# Characters kept on each side of a match when a long match line is clipped
MATCH_CONTEXT_CHARS = 200
ELLIPSIS = "..."


def compile_pattern(pattern: str) -> Optional[re.Pattern]:
    """Compile a case-insensitive pattern, None if the syntax is invalid"""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error:
        return None


def find_match_lines(lines: list[str], regex: re.Pattern) -> list[int]:
    """Return 0-based indices of lines with at least one match"""
    # Pattern.search keeps no position between calls, so every line starts fresh
    return [i for i, line in enumerate(lines) if regex.search(line)]


def expand_context(match_lines: list[int], before: int, after: int, line_count: int) -> list[int]:
    """Union of [idx - before, idx + after] over all matches, clamped and sorted"""
    if line_count <= 0:
        return []
    last = line_count - 1
    covered: set[int] = set()
    for idx in match_lines:
        start = max(0, idx - before)
        end = min(last, idx + after)
        covered.update(range(start, end + 1))
    return sorted(covered)


def truncate_line(line: str, max_length: int = MAX_LINE_LENGTH) -> str:
    """Clip a line to max_length characters, marking the cut with an ellipsis"""
    if len(line) <= max_length:
        return line
    return line[:max_length] + ELLIPSIS


def truncate_around_match(
    line: str,
    regex: re.Pattern,
    max_length: int = MAX_LINE_LENGTH,
    radius: int = MATCH_CONTEXT_CHARS
) -> str:
    """Clip a long matching line to a window centered on its first match"""
    if len(line) <= max_length:
        return line

    match = regex.search(line)
    if match is None:
        return truncate_line(line, max_length)

    start = max(0, match.start() - radius)
    end = min(len(line), match.end() + radius)

    clipped = line[start:end]
    if start > 0:
        clipped = ELLIPSIS + clipped
    if end < len(line):
        clipped = clipped + ELLIPSIS
    return clipped


class RegexContextSearcher(ContentSearcher):
    """In-memory searcher using Python regular expressions"""

    def search(self, text: str, query: SearchQuery) -> SearchResult:
        """Search text for query.pattern, return the requested page of lines"""
        regex = compile_pattern(query.pattern)
        if regex is None:
            return SearchResult(status=SearchResult.INVALID_PATTERN, pattern=query.pattern)

        lines = text.split("\n")
        match_lines = find_match_lines(lines, regex)
        if not match_lines:
            return SearchResult(status=SearchResult.NO_MATCHES, pattern=query.pattern)

        context = expand_context(match_lines, query.before, query.after, len(lines))
        page = context[query.offset:query.offset + query.limit]
        matched = set(match_lines)

        rendered = []
        for idx in page:
            if idx in matched:
                content = truncate_around_match(lines[idx], regex)
            else:
                content = truncate_line(lines[idx])
            rendered.append(SearchLine(
                line_number=idx + 1,
                content=content,
                is_match=idx in matched
            ))

        return SearchResult(
            status=SearchResult.OK,
            pattern=query.pattern,
            match_count=len(match_lines),
            context_count=len(context),
            offset=query.offset,
            limit=query.limit,
            before=query.before,
            after=query.after,
            lines=rendered
        )
