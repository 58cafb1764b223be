"""
Readability Extraction Adapters

Implements ContentExtractor port twice:
- ReadabilityExtractor: boilerplate removal (readability-lxml) + Markdown conversion,
  falling back to converting the whole page when no main content is found
- RawExtractor: passes content through unchanged
"""
import copy
import logging
from typing import Optional

from bs4 import BeautifulSoup
from readability import Document

from ..core.domain import RawDocument
from ..core.ports import ContentExtractor
from .markdown import clean_output, html_to_text
from .markup import parse_markup

logger = logging.getLogger(__name__)

# Page chrome that readability occasionally keeps inside the article
BOILERPLATE_TAGS = ("nav", "header", "footer", "aside", "form", "script", "style")


def remove_boilerplate(tree: BeautifulSoup, source_url: Optional[str] = None) -> Optional[str]:
    """Return the main-content HTML fragment of tree, or None if none is found.

    The tree may be modified; callers pass a copy when they still need the original.
    """
    markup = str(tree)
    if not markup.strip():
        return None

    try:
        summary = Document(markup, url=source_url).summary(html_partial=True)
    except Exception as e:  # Unparseable, lxml parser errors
        logger.debug(f"readability failed for {source_url or '<no url>'}: {e}")
        return None

    if not summary:
        return None

    fragment = BeautifulSoup(summary, "lxml")
    for tag in fragment.find_all(BOILERPLATE_TAGS):
        tag.decompose()

    if not fragment.get_text(strip=True):
        return None

    body = fragment.body
    if body is None:
        return str(fragment)
    return body.decode_contents()


class ReadabilityExtractor(ContentExtractor):
    """Main-content extractor with whole-page fallback"""

    def extract(self, document: RawDocument) -> str:
        """Article as Markdown, else the whole page as Markdown, else plain text.

        Each stage runs only when the previous one produced nothing or raised.
        """
        raw = document.text()
        label = document.source_url or '<no url>'
        tree = parse_markup(raw, document.source_url)

        fragment = remove_boilerplate(copy.copy(tree), document.source_url)
        if fragment is None:
            logger.debug(f"no main content for {label}, converting raw page")
        else:
            try:
                return html_to_text(fragment)
            except Exception as e:  # RecursionError on deeply nested markup
                logger.debug(f"article conversion failed for {label}: {e.__class__.__name__}, converting raw page")

        try:
            return html_to_text(raw)
        except Exception as e:  # RecursionError on deeply nested markup
            logger.debug(f"page conversion failed for {label}: {e.__class__.__name__}, returning plain text")

        return plain_text(tree, raw)


def plain_text(tree: BeautifulSoup, raw: str) -> str:
    """Text nodes of tree one per line, or raw itself if the tree can't be walked"""
    try:
        return clean_output(tree.get_text("\n"))
    except RecursionError:
        return raw


class RawExtractor(ContentExtractor):
    """Pass-through extractor for callers that already hold text"""

    def extract(self, document: RawDocument) -> str:
        return document.text()
