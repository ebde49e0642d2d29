"""
HTML to Markdown conversion.
"""

import re

import html2text
from bs4 import BeautifulSoup


def html_to_markdown(html_content: str) -> str:
    """Convert an HTML fragment to Markdown.

    Args:
        html_content (str): HTML to convert

    Returns:
        str: Markdown text, empty if there was no input
    """
    if not html_content:
        return ""

    soup = BeautifulSoup(html_content, 'html.parser')

    # Drop elements that never carry article text
    for element in soup(["script", "style", "noscript"]):
        element.decompose()

    h = html2text.HTML2Text()
    h.ignore_links = False
    h.ignore_images = False
    h.body_width = 0  # No wrapping
    markdown = h.handle(str(soup))

    # Collapse runs of blank lines left by stripped markup
    markdown = re.sub(r'\n{3,}', '\n\n', markdown)
    return markdown.strip()
