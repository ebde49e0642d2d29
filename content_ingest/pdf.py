"""
Chapter segmentation for PDF books.

The PDF is reduced to a flat stream of text lines; chapters are recovered from
"CHAPTER <n>" header lines. Layout information is not used.
"""

import io
import logging
import re
from pathlib import Path
from typing import List, Optional, Set, Tuple

import pdfplumber
import requests

from content_ingest import config
from content_ingest.models import ContentItem, ContentType, LOCAL_SOURCE
from content_ingest.text_utils import fix_ligatures, log_suspicious_glyphs

logger = logging.getLogger(__name__)

# "Chapter 3. Title ........ 42" style table-of-contents entries
TOC_ENTRY = re.compile(r'^Ch(?:apter)?\s+\d+\.?\s+.+\.+\s+\d{1,3}$')
# Lines skipped after the first ToC entry
TOC_SKIP_LINES = 15

CHAPTER_HEADER = re.compile(r'^CHAPTER\s+(\d+)', re.IGNORECASE)
# Page running headers such as "CHAPTER 3 ▸ Title"; the second form is the
# same arrow decoded as Latin-1
RUNNING_HEADER = re.compile(r'^CHAPTER\s+\d+\s+(?:▸|â–¸)', re.IGNORECASE)

# Chapters with this many buffered lines or fewer are merged into the next one
MIN_CHAPTER_LINES = 10


class PdfExtractionError(Exception):
    """Exception raised when a PDF cannot be read or parsed."""
    pass


def find_scan_start(lines: List[str]) -> int:
    """Return the index scanning should start from, past any table of contents."""
    for index, line in enumerate(lines):
        if TOC_ENTRY.match(line):
            logger.debug(f"Table of contents found at line {index}")
            return index + TOC_SKIP_LINES
    return 0


def _build_chapter(title: str, buffer: List[str], source_url: str,
                   seen_glyphs: Set[str]) -> Optional[ContentItem]:
    body = fix_ligatures('\n'.join(buffer).strip())
    if not body:
        return None
    log_suspicious_glyphs(body, seen_glyphs)
    return ContentItem(
        title=fix_ligatures(title),
        content=body,
        content_type=ContentType.BOOK,
        source_url=source_url,
    )


def segment_chapters(lines: List[str], source_url: str, chunk_size: int = 0,
                     seen_glyphs: Optional[Set[str]] = None) -> List[ContentItem]:
    """Split trimmed PDF text lines into one record per chapter.

    A chapter number is only accepted the first time it appears; later
    headers with the same number are dropped and their text stays in the
    current chapter.

    Args:
        lines (List[str]): Text lines, already trimmed
        source_url (str): Source recorded on every chapter
        chunk_size (int): Keep only the first N chapters; 0 keeps all
        seen_glyphs (Set[str]): Collector for unrecognized glyphs already reported

    Returns:
        List[ContentItem]: Chapters in document order
    """
    if seen_glyphs is None:
        seen_glyphs = set()

    chapters = []
    seen_chapters = set()
    title = ''
    buffer = []

    for line in lines[find_scan_start(lines):]:
        if RUNNING_HEADER.match(line):
            continue

        match = CHAPTER_HEADER.match(line)
        if match is None:
            buffer.append(line)
            continue

        number = int(match.group(1))
        if number in seen_chapters:
            logger.debug(f"Skipping repeated chapter header: {line!r}")
            continue
        seen_chapters.add(number)

        if not title:
            # Front matter before the first chapter
            buffer = []
        elif len(buffer) > MIN_CHAPTER_LINES:
            chapter = _build_chapter(title, buffer, source_url, seen_glyphs)
            if chapter is not None:
                chapters.append(chapter)
            buffer = []
        else:
            logger.debug(f"Merging short chapter {title!r} into {line!r}")

        title = line

    if title and buffer:
        chapter = _build_chapter(title, buffer, source_url, seen_glyphs)
        if chapter is not None:
            chapters.append(chapter)

    logger.info(f"Found {len(chapters)} chapters")
    return chapters[:chunk_size] if chunk_size > 0 else chapters


def load_pdf_bytes(path_or_url: str, timeout: int = None) -> Tuple[bytes, str]:
    """Read PDF bytes from a local path or an http(s) URL.

    Returns:
        Tuple[bytes, str]: The file contents and the source to record

    Raises:
        PdfExtractionError: If the file is missing or the download fails
    """
    if path_or_url.lower().startswith(('http://', 'https://')):
        try:
            response = requests.get(path_or_url, timeout=timeout or config.DOWNLOAD_TIMEOUT,
                                    headers={'User-Agent': config.USER_AGENT})
        except requests.exceptions.RequestException as e:
            raise PdfExtractionError(f"Failed to fetch remote PDF {path_or_url}: {e}")
        if not response.ok:
            raise PdfExtractionError(
                f"Failed to fetch remote PDF {path_or_url}: HTTP {response.status_code}")
        return response.content, path_or_url

    try:
        return Path(path_or_url).read_bytes(), LOCAL_SOURCE
    except OSError as e:
        raise PdfExtractionError(f"Cannot read PDF {path_or_url}: {e}")


def pdf_text(data: bytes) -> str:
    """Extract the linear text stream of a PDF."""
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            return '\n'.join(page.extract_text() or '' for page in pdf.pages)
    except Exception as e:
        raise PdfExtractionError(f"Could not parse PDF: {e}") from e


def extract_pdf(path_or_url: str, chunk_size: int = 0,
                source_url: str = None) -> List[ContentItem]:
    """Extract the chapters of a PDF book.

    Args:
        path_or_url (str): Local path or http(s) URL of the PDF
        chunk_size (int): Keep only the first N chapters; 0 keeps all
        source_url (str): Source to record instead of the one derived from the input

    Returns:
        List[ContentItem]: Book chapters in document order

    Raises:
        PdfExtractionError: If the PDF cannot be loaded or parsed
    """
    data, origin = load_pdf_bytes(path_or_url)
    text = pdf_text(data)
    lines = [line.strip() for line in text.split('\n')]
    return segment_chapters(lines, source_url or origin, chunk_size=chunk_size)
