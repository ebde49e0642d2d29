"""
Global test fixtures for the content-ingest project.
"""

import os
import sys
import pytest
from typing import List

# Add the parent directory to the path so we can import our modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from content_ingest.models import ContentItem, ContentType


@pytest.fixture
def sample_blog_item() -> ContentItem:
    """
    Returns a sample blog record.
    """
    return ContentItem(
        title="Hello, World! 2024",
        content="Some extracted markdown content.",
        content_type=ContentType.BLOG,
        source_url="https://example.com/blog/hello-world",
        author="Jane Doe",
    )


@pytest.fixture
def sample_book_items() -> List[ContentItem]:
    """
    Returns two sample book chapters read from a local file.
    """
    return [
        ContentItem(
            title=f"CHAPTER {n}",
            content=f"Body of chapter {n}.",
            content_type=ContentType.BOOK,
            source_url="from local",
        )
        for n in (1, 2)
    ]


@pytest.fixture
def mock_playwright_chain():
    """
    Returns a factory that wires AsyncMocks for playwright, browser, context and page
    onto a patched ``async_playwright``.
    """
    from unittest.mock import AsyncMock

    def wire(mock_async_playwright, html=""):
        mock_playwright_instance = AsyncMock()
        mock_browser = AsyncMock()
        mock_context = AsyncMock()
        mock_page = AsyncMock()

        mock_async_playwright.return_value.start = AsyncMock(return_value=mock_playwright_instance)
        mock_playwright_instance.chromium.launch = AsyncMock(return_value=mock_browser)
        mock_browser.new_context = AsyncMock(return_value=mock_context)
        mock_context.new_page = AsyncMock(return_value=mock_page)
        mock_page.content = AsyncMock(return_value=html)

        return mock_playwright_instance, mock_browser, mock_context, mock_page

    return wire
