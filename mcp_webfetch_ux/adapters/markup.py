"""
Markup Normalizer

Parses raw HTML (or text) into a BeautifulSoup tree and resolves relative
references against the page URL.
"""
from typing import Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup

# Attributes holding references that should be made absolute
LINK_ATTRIBUTES = ("href", "src")

# References that must be left exactly as written
UNRESOLVED_PREFIXES = ("#", "javascript:", "mailto:", "data:", "tel:")


def parse_markup(content: Union[str, bytes], source_url: Optional[str] = None) -> BeautifulSoup:
    """Parse content with lxml, resolving relative links when source_url is set"""
    soup = BeautifulSoup(content, "lxml")
    if source_url:
        resolve_links(soup, source_url)
    return soup


def resolve_links(soup: BeautifulSoup, base_url: str) -> None:
    """Rewrite href/src attributes in place as absolute URLs"""
    # <base href> overrides the document URL for relative resolution
    base = soup.find("base", href=True)
    if base is not None:
        base_url = urljoin(base_url, base["href"])

    for attr in LINK_ATTRIBUTES:
        for tag in soup.find_all(attrs={attr: True}):
            value = tag[attr]
            if not isinstance(value, str):
                continue
            value = value.strip()
            if not value or value.lower().startswith(UNRESOLVED_PREFIXES):
                continue
            tag[attr] = urljoin(base_url, value)
