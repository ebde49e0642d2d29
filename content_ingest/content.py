"""
Fast-path web extraction: plain HTTP fetch plus structural HTML parsing.

Nothing here runs page scripts. When the fetched markup does not contain a
substantial article block, the fast path gives up and returns None so the
caller can fall back to a rendered extraction.
"""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from content_ingest import config
from content_ingest.author import resolve_author
from content_ingest.markdown import html_to_markdown
from content_ingest.models import ContentItem, ContentType

logger = logging.getLogger(__name__)

# Containers that usually hold the article body, most specific last
STRUCTURAL_SELECTORS = [
    'article',
    'main',
    '.blog-post-content',
    '.post-content',
    '.entry-content',
    '.blog-post',
    '.prose',
]

DEFAULT_TITLE = "Untitled"


class ContentFetchError(Exception):
    """Exception raised for content fetching errors."""
    def __init__(self, url, error_type, message, status_code=None):
        self.url = url
        self.error_type = error_type
        self.status_code = status_code
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"{self.error_type} for {self.url}: {self.message} (status: {self.status_code})"


def fetch_url_content(url: str, timeout: int = None) -> str:
    """Fetch the raw HTML of a page.

    Args:
        url (str): The URL to fetch
        timeout (int): Request timeout in seconds

    Returns:
        str: HTML content

    Raises:
        ContentFetchError: When content cannot be fetched or is not HTML
    """
    timeout = timeout or config.FETCH_TIMEOUT
    headers = {
        'User-Agent': config.USER_AGENT,
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9',
        'Accept-Language': 'en-US,en;q=0.9',
    }

    try:
        logger.info(f"Fetching content from {url}")
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        raise ContentFetchError(url, "Timeout", f"Request timed out after {timeout}s")
    except requests.exceptions.TooManyRedirects:
        raise ContentFetchError(url, "TooManyRedirects", "Too many redirects")
    except requests.exceptions.ConnectionError as e:
        raise ContentFetchError(url, "ConnectionError", str(e))
    except requests.exceptions.HTTPError as e:
        raise ContentFetchError(url, "HTTPError", str(e), status_code=e.response.status_code)
    except requests.exceptions.RequestException as e:
        raise ContentFetchError(url, "RequestError", str(e))

    content_type = response.headers.get('Content-Type', '')
    if content_type and 'html' not in content_type.lower():
        raise ContentFetchError(url, "NotHTML", f"Unexpected content type {content_type}",
                                status_code=response.status_code)

    return response.text


def resolve_title(soup: BeautifulSoup) -> str:
    """Pick a page title: first h1, then og:title, then <title>."""
    h1 = soup.find('h1')
    if h1 is not None:
        title = h1.get_text(' ', strip=True)
        if title:
            return title

    og_title = soup.find('meta', attrs={'property': 'og:title'})
    if og_title is not None and og_title.get('content', '').strip():
        return og_title['content'].strip()

    if soup.title is not None and soup.title.get_text(strip=True):
        return soup.title.get_text(strip=True)

    return DEFAULT_TITLE


def find_main_content(soup: BeautifulSoup, min_length: int = None) -> Optional[str]:
    """Return the inner HTML of the first substantial structural container.

    Args:
        soup (BeautifulSoup): Parsed page
        min_length (int): Text length a container must exceed

    Returns:
        Optional[str]: Inner HTML, or None if no selector matched enough text
    """
    if min_length is None:
        min_length = config.MIN_CONTENT_LENGTH

    for selector in STRUCTURAL_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        if len(element.get_text(strip=True)) > min_length:
            logger.debug(f"Main content matched selector {selector!r}")
            return element.decode_contents()
    return None


def parse_structured_page(html: str, url: str) -> Optional[ContentItem]:
    """Build a blog record from server-rendered markup.

    Args:
        html (str): Page HTML
        url (str): Source URL for the record

    Returns:
        Optional[ContentItem]: The record, or None if no substantial content was found
    """
    soup = BeautifulSoup(html, 'html.parser')

    content_html = find_main_content(soup)
    if content_html is None:
        logger.warning(f"No substantial structural content found for {url}")
        return None

    markdown = html_to_markdown(content_html)
    if len(markdown) < config.MIN_CONTENT_LENGTH:
        logger.warning(f"Extracted content too short for {url} ({len(markdown)} chars)")
        return None

    return ContentItem(
        title=resolve_title(soup),
        content=markdown,
        content_type=ContentType.BLOG,
        source_url=url,
        author=resolve_author(soup),
    )


def try_fast_path(url: str) -> Optional[ContentItem]:
    """Extract a page without rendering it.

    Failures here are expected for script-heavy pages, so they are logged
    and reported as None rather than raised.

    Args:
        url (str): Page URL, without fragment

    Returns:
        Optional[ContentItem]: The record, or None to trigger the rendered fallback
    """
    try:
        html = fetch_url_content(url)
    except ContentFetchError as e:
        logger.warning(f"Fast fetch failed: {e}")
        return None

    return parse_structured_page(html, url)
