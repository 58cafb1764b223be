"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ExtractionMode(str, Enum):
    """How a fetched document is turned into text"""
    READABILITY = "readability"
    RAW = "raw"

    @classmethod
    def parse(cls, value: Union[str, "ExtractionMode"]) -> "ExtractionMode":
        """Parse a mode name (case-insensitive)"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown extraction mode: {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class RawDocument:
    """A retrieved document, before extraction"""
    content: Union[str, bytes]
    source_url: Optional[str] = None
    content_type: Optional[str] = None  # e.g. "text/html; charset=utf-8"

    def text(self) -> str:
        if isinstance(self.content, bytes):
            return self.content.decode("utf-8", errors="replace")
        return self.content


@dataclass(frozen=True)
class SearchQuery:
    """A line-oriented regex search over some text"""
    pattern: str
    limit: int = 100
    offset: int = 0
    before: int = 0
    after: int = 0

    def __post_init__(self):
        for name in ("limit", "offset", "before", "after"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass
class SearchLine:
    """A single rendered line of a search page"""
    line_number: int  # 1-based
    content: str  # already truncated for display
    is_match: bool


@dataclass
class SearchResult:
    """Results from searching within a text"""
    status: str  # "ok", "invalid_pattern" or "no_matches"
    pattern: str
    match_count: int = 0
    context_count: int = 0
    offset: int = 0
    limit: int = 0
    before: int = 0
    after: int = 0
    lines: list[SearchLine] = field(default_factory=list)

    OK = "ok"
    INVALID_PATTERN = "invalid_pattern"
    NO_MATCHES = "no_matches"


@dataclass
class FetchedPage:
    """A fetched page after extraction"""
    url: str
    final_url: str
    status_code: int
    content_type: Optional[str]
    size_bytes: int
    mode: ExtractionMode
    text: str
