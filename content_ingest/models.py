"""
Record types shared by the web and PDF pipelines.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

# Sentinel source for files read from disk with no network origin
LOCAL_SOURCE = "from local"


class ContentType(str, Enum):
    """Kind of content a record was produced from."""
    BLOG = "blog"
    BOOK = "book"
    OTHER = "other"


@dataclass(frozen=True)
class ContentItem:
    """A single extracted piece of content, ready for output.

    Records are built once by a pipeline and never mutated afterwards.
    An empty ``author`` means the author could not be found.
    """
    title: str
    content: str
    content_type: ContentType
    source_url: Optional[str] = None
    author: Optional[str] = None
    user_id: Optional[str] = None

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("ContentItem title must not be empty")
        if not self.content or not self.content.strip():
            raise ValueError("ContentItem content must not be empty")
        # Accept plain strings like "blog" from callers
        object.__setattr__(self, "content_type", ContentType(self.content_type))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a JSON-ready dict, dropping unset fields."""
        data = asdict(self)
        data["content_type"] = self.content_type.value
        return {key: value for key, value in data.items() if value is not None}
