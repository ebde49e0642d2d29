"""
content-ingest: pull titled, authored text out of web articles and PDF books.
"""

from content_ingest.models import ContentItem, ContentType

__all__ = ["ContentItem", "ContentType"]
