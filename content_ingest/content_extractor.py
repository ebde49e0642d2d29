import logging
from typing import Optional, Tuple

# Third-party imports
from bs4 import BeautifulSoup
from playwright.async_api import async_playwright, TimeoutError as PlaywrightTimeoutError
from readability import Document

from content_ingest import config
from content_ingest.author import resolve_author
from content_ingest.content import find_main_content, resolve_title
from content_ingest.markdown import html_to_markdown
from content_ingest.models import ContentItem, ContentType

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Exception raised when a rendered page yields no usable content."""
    pass


def readability_article(html: str) -> Optional[Tuple[str, str]]:
    """Run readability over a page snapshot.

    Args:
        html (str): Serialized page HTML

    Returns:
        Optional[Tuple[str, str]]: (title, article HTML), or None if readability
        found no substantial article
    """
    try:
        doc = Document(html)
        article_html = doc.summary(html_partial=True)
        title = doc.short_title()
    except Exception as e:
        logger.warning(f"Readability could not parse page: {e}")
        return None

    text = BeautifulSoup(article_html, 'html.parser').get_text(strip=True)
    if len(text) <= config.MIN_CONTENT_LENGTH:
        logger.warning(f"Readability article too short ({len(text)} chars)")
        return None

    return title.strip(), article_html


def parse_rendered_page(html: str, url: str) -> ContentItem:
    """Build a blog record from a rendered page snapshot.

    Readability runs first; the structural selectors are the fallback.

    Args:
        html (str): Serialized HTML of the rendered page
        url (str): Source URL for the record

    Returns:
        ContentItem: The extracted record

    Raises:
        ExtractionError: If neither strategy produced substantial content
    """
    soup = BeautifulSoup(html, 'html.parser')
    author = resolve_author(soup)

    article = readability_article(html)
    if article is not None:
        title, content_html = article
        title = title or resolve_title(soup)
    else:
        logger.warning(f"Falling back to structural selectors for {url}")
        title = resolve_title(soup)
        content_html = find_main_content(soup) or ''

    markdown = html_to_markdown(content_html)
    if len(markdown) < config.MIN_CONTENT_LENGTH:
        raise ExtractionError(f"Failed to extract substantial content from {url}")

    return ContentItem(
        title=title,
        content=markdown,
        content_type=ContentType.BLOG,
        source_url=url,
        author=author,
    )


class ContentExtractor:
    """Extracts article content from pages that need a real browser.

    The page is loaded in headless Chromium through Playwright, serialized
    once the network goes idle, and the snapshot is parsed locally.
    Use it as an async context manager so the browser is always closed.
    """

    def __init__(self, timeout: int = None, headless: bool = True):
        """Initialize the ContentExtractor.

        Args:
            timeout (int): Navigation timeout in seconds
            headless (bool): Whether to run the browser in headless mode
        """
        self.timeout = (timeout or config.NAV_TIMEOUT) * 1000  # Convert to milliseconds
        self.headless = headless
        self._playwright = None
        self._browser = None
        self._context = None

    async def _initialize_browser(self) -> None:
        """Initialize the browser if it doesn't exist."""
        if self._browser is None:
            self._playwright = await async_playwright().start()
            try:
                self._browser = await self._playwright.chromium.launch(headless=self.headless)
                self._context = await self._browser.new_context(
                    viewport={"width": 1280, "height": 800},
                    user_agent=config.USER_AGENT
                )
            except BaseException:
                # __aexit__ does not run when __aenter__ raises
                await self._close_browser()
                raise

    async def _close_browser(self) -> None:
        """Close the browser and playwright instance if they exist."""
        try:
            if self._context:
                await self._context.close()
            if self._browser:
                await self._browser.close()
        finally:
            if self._playwright:
                await self._playwright.stop()
            self._playwright = None
            self._browser = None
            self._context = None

    async def render(self, url: str) -> str:
        """Load a page and return its rendered HTML.

        Raises:
            ExtractionError: If navigation does not settle within the timeout
        """
        await self._initialize_browser()
        page = await self._context.new_page()
        try:
            logger.info(f"Navigating to {url}")
            await page.goto(url, timeout=self.timeout, wait_until="networkidle")
            return await page.content()
        except PlaywrightTimeoutError:
            raise ExtractionError(f"Timeout after {self.timeout // 1000}s while loading {url}")
        finally:
            await page.close()

    async def extract(self, url: str) -> ContentItem:
        """Render a page and extract its main content.

        Args:
            url (str): The URL to extract content from

        Returns:
            ContentItem: The extracted blog record

        Raises:
            ExtractionError: On navigation timeout or when no substantial content is found
        """
        html = await self.render(url)
        return parse_rendered_page(html, url)

    async def __aenter__(self):
        """Initialize browser when used as a context manager."""
        await self._initialize_browser()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close browser when exiting context manager."""
        await self._close_browser()
