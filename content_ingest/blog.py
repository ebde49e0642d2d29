"""
Web article extraction with a rendered-browser fallback.
"""

import asyncio
import logging
from urllib.parse import urldefrag

from content_ingest.content import try_fast_path
from content_ingest.content_extractor import ContentExtractor
from content_ingest.models import ContentItem

logger = logging.getLogger(__name__)


async def extract_blog(url: str, timeout: int = None, headless: bool = True) -> ContentItem:
    """Extract a web article as a blog record.

    The cheap structural fetch is always tried first. A headless browser is
    only launched when that fails.

    Args:
        url (str): Article URL; any fragment is ignored
        timeout (int): Navigation timeout for the browser fallback, in seconds
        headless (bool): Whether to run the fallback browser headless

    Returns:
        ContentItem: The extracted record

    Raises:
        ExtractionError: If the browser fallback times out or finds no content
    """
    url, _ = urldefrag(url)

    # requests is blocking; keep it off the event loop
    item = await asyncio.to_thread(try_fast_path, url)
    if item is not None:
        logger.info(f"Extracted {url} with a plain fetch")
        return item

    logger.warning(f"Plain fetch failed for {url}, falling back to browser rendering")
    async with ContentExtractor(timeout=timeout, headless=headless) as extractor:
        return await extractor.extract(url)
