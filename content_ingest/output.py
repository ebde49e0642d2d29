"""
JSON output for extracted records.
"""

import json
import logging
import re
from pathlib import Path
from typing import List

from content_ingest.models import ContentItem, LOCAL_SOURCE

logger = logging.getLogger(__name__)

DEFAULT_BASE_NAME = "output"


def slugify(text: str) -> str:
    """Lowercase text and join its alphanumeric runs with dashes."""
    return re.sub(r'[^a-z0-9]+', '-', (text or '').lower()).strip('-')


def output_base_name(items: List[ContentItem]) -> str:
    """Choose the output file name (without extension) for a batch of records.

    The first record's title is preferred, then the last segment of its
    source URL, then a fixed default.
    """
    if not items:
        return DEFAULT_BASE_NAME

    first = items[0]
    slug = slugify(first.title)
    if slug:
        return slug

    if first.source_url and first.source_url != LOCAL_SOURCE:
        last_part = first.source_url.rstrip('/').split('/')[-1]
        name = slugify(last_part.split('.')[0])
        if name:
            return name

    return DEFAULT_BASE_NAME


def write_output(team_id: str, items: List[ContentItem], output_dir: str = "output") -> Path:
    """Write records as a JSON batch document.

    Args:
        team_id (str): Team or batch identifier stored with the records
        items (List[ContentItem]): Records to write
        output_dir (str): Directory for the file; created if missing

    Returns:
        Path: Path of the written file
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    output_path = directory / f"{output_base_name(items)}.json"
    result = {
        "team_id": team_id,
        "items": [item.to_dict() for item in items],
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)

    logger.info(f"Output written to {output_path}")
    return output_path
