#!/usr/bin/env python3

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from content_ingest import config
from content_ingest.blog import extract_blog
from content_ingest.content_extractor import ExtractionError
from content_ingest.download import download_file, DownloadError
from content_ingest.models import ContentItem
from content_ingest.output import write_output
from content_ingest.pdf import extract_pdf, PdfExtractionError

logger = logging.getLogger(__name__)


class UnsupportedInputError(Exception):
    """Exception raised for inputs no extractor can handle."""
    pass


def is_url(value: str) -> bool:
    """Check whether a string is an absolute URL with a host."""
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def is_document(path: str) -> bool:
    """Check whether a path or URL path ends in a supported document extension."""
    return path.lower().endswith(config.DOCUMENT_EXTENSIONS)


async def extract_items(source: str, chunk_size: int = 0, download_dir: str = None,
                        timeout: int = None, headless: bool = True) -> List[ContentItem]:
    """Route a URL or file path to the matching extractor.

    Args:
        source (str): Web page URL, document URL or local document path
        chunk_size (int): For documents, keep only the first N chapters
        download_dir (str): Where remote documents are saved
        timeout (int): Browser navigation timeout in seconds
        headless (bool): Whether the fallback browser runs headless

    Returns:
        List[ContentItem]: Extracted records

    Raises:
        UnsupportedInputError: If a local file is not a supported document
    """
    if is_url(source):
        if is_document(urlparse(source).path):
            print(f"Downloading remote document: {source}")
            path = download_file(source, dest_dir=download_dir)
            return extract_pdf(str(path), chunk_size=chunk_size, source_url=source)
        return [await extract_blog(source, timeout=timeout, headless=headless)]

    if is_document(source):
        return extract_pdf(source, chunk_size=chunk_size)

    raise UnsupportedInputError(f"Unsupported file type: {Path(source).suffix or source}")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extract structured content from a blog URL or a PDF (local or remote)',
        epilog='Records are written as JSON to the output directory'
    )
    parser.add_argument('source',
                        help='Blog URL, PDF URL or local PDF path')
    parser.add_argument('--chunk-size', type=non_negative_int, default=0,
                        help='Only keep the first N chapters of a PDF (default: 0, all)')
    parser.add_argument('--output-dir', type=str, default=config.OUTPUT_DIR,
                        help=f'Directory for the JSON output (default: {config.OUTPUT_DIR})')
    parser.add_argument('--team-id', type=str, default=config.TEAM_ID,
                        help='Team identifier stored in the output')
    parser.add_argument('--download-dir', type=str, default=config.DOWNLOAD_DIR,
                        help=f'Directory for downloaded documents (default: {config.DOWNLOAD_DIR})')
    parser.add_argument('--timeout', type=int, default=config.NAV_TIMEOUT,
                        help=f'Browser navigation timeout in seconds (default: {config.NAV_TIMEOUT})')
    parser.add_argument('--headful', action='store_true',
                        help='Show the browser window when rendering is needed')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the program.

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        items = asyncio.run(extract_items(
            args.source,
            chunk_size=args.chunk_size,
            download_dir=args.download_dir,
            timeout=args.timeout,
            headless=not args.headful,
        ))
        if not items:
            logger.error(f"No content extracted from {args.source}")
            return 1

        path = write_output(args.team_id, items, output_dir=args.output_dir)
        print(f"Extraction complete! {len(items)} item(s) saved to {path}")
        return 0

    except (UnsupportedInputError, ExtractionError, PdfExtractionError, DownloadError) as e:
        logger.error(f"Error during extraction: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
