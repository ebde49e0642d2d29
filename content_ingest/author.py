"""
Author detection for parsed HTML documents.

Sources are tried in strict priority order and the first non-empty value wins:
JSON-LD metadata, then author-marking elements, then free-text patterns.
"""

import json
import logging
import re
from typing import Any, List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Elements that mark the author, most authoritative first
AUTHOR_SELECTORS = [
    'meta[name="author"]',
    'meta[property="article:author"]',
    '[itemprop="author"]',
    '[rel="author"]',
    '.author',
    '.byline',
    '.post-author',
    '[class*="author" i]',
    '[class*="byline" i]',
]

# Capitalized personal name, words on a single line
NAME = r'([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+)'

AUTHOR_PATTERNS = [
    re.compile(r'\b(?i:by)\s+' + NAME),
    re.compile(NAME + r'\s+(?i:writes|wrote|posted)\b'),
    re.compile(r'\b(?i:author):\s*' + NAME),
    re.compile(r'\b(?i:written\s+by)\s+' + NAME),
]

TEXT_WINDOW = 3000


def _collapse(value: Optional[str]) -> str:
    return ' '.join(value.split()) if value else ''


def _name_from_author_field(author: Any) -> str:
    """Pull a name out of a JSON-LD ``author`` value (object, list or string)."""
    if isinstance(author, list):
        return _name_from_author_field(author[0]) if author else ''
    if isinstance(author, dict):
        name = author.get('name')
        return _collapse(name) if isinstance(name, str) else ''
    if isinstance(author, str):
        return _collapse(author)
    return ''


def _find_author_field(data: Any) -> str:
    if isinstance(data, list):
        for entry in data:
            name = _find_author_field(entry)
            if name:
                return name
        return ''
    if isinstance(data, dict):
        if 'author' in data:
            name = _name_from_author_field(data['author'])
            if name:
                return name
        if '@graph' in data:
            return _find_author_field(data['@graph'])
    return ''


def author_from_json_ld(soup: BeautifulSoup) -> str:
    """Return the first author name declared in JSON-LD script blocks."""
    for script in soup.find_all('script', attrs={'type': 'application/ld+json'}):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue
        name = _find_author_field(data)
        if name:
            return name
    return ''


def author_from_selectors(soup: BeautifulSoup) -> str:
    """Return the author from the first matching author-marking element."""
    for selector in AUTHOR_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        value = _collapse(element.get('content')) or _collapse(element.get_text(' '))
        if value:
            return value
    return ''


def _text_window(soup: BeautifulSoup) -> str:
    parts = []
    for element in (soup.find('h1'), soup.find('article'), soup.body or soup):
        parts.append(element.get_text('\n', strip=True) if element is not None else '')
    return '\n'.join(parts)[:TEXT_WINDOW]


def author_from_text(soup: BeautifulSoup) -> str:
    """Return a name found next to a byline cue word in the page text."""
    text = _text_window(soup)
    for pattern in AUTHOR_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()

    logger.debug(f"Author not found via metadata or page text. Examined: {text[:500]!r}")
    return ''


STRATEGIES = [author_from_json_ld, author_from_selectors, author_from_text]


def resolve_author(soup: BeautifulSoup) -> str:
    """Infer the author of a parsed HTML document.

    Args:
        soup (BeautifulSoup): Parsed document

    Returns:
        str: Author name, or an empty string if none was found
    """
    for strategy in STRATEGIES:
        try:
            author = strategy(soup)
        except Exception as e:
            # A broken heuristic must not stop the extraction
            logger.warning(f"Author heuristic {strategy.__name__} failed: {e}")
            continue
        if author:
            return author
    return ''
