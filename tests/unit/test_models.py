"""
Unit tests for content_ingest.models module.
"""

import dataclasses
import pytest

from content_ingest.models import ContentItem, ContentType, LOCAL_SOURCE


@pytest.mark.unit
def test_content_type_accepts_plain_string():
    """A string content type is normalized to the enum."""
    item = ContentItem(title="T", content="Body", content_type="book")
    assert item.content_type is ContentType.BOOK


@pytest.mark.unit
def test_content_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        ContentItem(title="T", content="Body", content_type="video")


@pytest.mark.unit
@pytest.mark.parametrize("title,content", [("", "Body"), ("   ", "Body"), ("Title", ""), ("Title", "\n")])
def test_empty_title_or_content_rejected(title, content):
    """Records must always carry a title and some content."""
    with pytest.raises(ValueError):
        ContentItem(title=title, content=content, content_type=ContentType.BLOG)


@pytest.mark.unit
def test_record_is_immutable(sample_blog_item):
    """Records cannot be changed after creation."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_blog_item.content_type = ContentType.BOOK


@pytest.mark.unit
def test_to_dict_drops_unset_fields():
    item = ContentItem(title="T", content="Body", content_type=ContentType.BOOK,
                       source_url=LOCAL_SOURCE)
    assert item.to_dict() == {
        "title": "T",
        "content": "Body",
        "content_type": "book",
        "source_url": "from local",
    }


@pytest.mark.unit
def test_to_dict_keeps_empty_author():
    """An empty author means 'not found' and is still written out."""
    item = ContentItem(title="T", content="Body", content_type=ContentType.BLOG, author="")
    assert item.to_dict()["author"] == ""
