"""
HTML to text conversion

Converts HTML (a cleaned fragment or a whole page) to Markdown-flavoured plain
text: ATX headings, fenced code blocks, dash bullets.
"""
import re

from bs4 import BeautifulSoup
from markdownify import markdownify as md

# Elements whose content is never readable text
NON_CONTENT_TAGS = ("script", "style", "noscript", "template")


def html_to_text(html: str) -> str:
    """Convert HTML to readable Markdown text"""
    if not html or not html.strip():
        return ""

    # markdownify keeps script/style bodies as text, so drop them first
    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(NON_CONTENT_TAGS):
        tag.decompose()

    markdown = md(
        str(soup),
        heading_style="ATX",
        bullets="-",
        code_language="",
    )
    return clean_output(markdown)


def clean_output(markdown: str) -> str:
    """Clean up markdownify output artifacts"""
    lines = [line.rstrip() for line in markdown.split("\n")]
    markdown = "\n".join(lines)

    # Collapse runs of 3+ blank lines to 2
    markdown = re.sub(r"\n{4,}", "\n\n\n", markdown)

    return markdown.strip()
