"""
Download remote documents to a local working directory.
"""

import logging
import os
from pathlib import Path
from urllib.parse import urlparse, unquote

import backoff
import requests

from content_ingest import config

logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Exception raised when a remote file cannot be downloaded."""
    pass


@backoff.on_exception(
    backoff.expo,
    (requests.exceptions.ConnectionError, requests.exceptions.Timeout),
    max_tries=3,
    factor=2,
    jitter=backoff.full_jitter
)
def _get(url: str, timeout: int) -> requests.Response:
    response = requests.get(url, timeout=timeout, stream=True,
                            headers={'User-Agent': config.USER_AGENT})
    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError:
        response.close()
        raise
    return response


def download_file(file_url: str, dest_dir: str = None, timeout: int = None) -> Path:
    """Download a remote file, keeping the last segment of its URL path as name.

    Args:
        file_url (str): URL of the file
        dest_dir (str): Directory to save into; created if missing
        timeout (int): Request timeout in seconds

    Returns:
        Path: Local path of the downloaded file

    Raises:
        DownloadError: If the request fails or returns a non-success status
    """
    dest = Path(dest_dir or config.DOWNLOAD_DIR)
    timeout = timeout or config.DOWNLOAD_TIMEOUT
    file_name = os.path.basename(unquote(urlparse(file_url).path)) or "download.pdf"

    dest.mkdir(parents=True, exist_ok=True)
    logger.info(f"Downloading {file_url}")
    try:
        response = _get(file_url, timeout)
    except requests.exceptions.HTTPError as e:
        raise DownloadError(f"Failed to download {file_url}: HTTP {e.response.status_code}")
    except requests.exceptions.RequestException as e:
        raise DownloadError(f"Failed to download {file_url}: {e}")

    path = dest / file_name
    with response, open(path, "wb") as f:
        for chunk in response.iter_content(chunk_size=8192):
            f.write(chunk)

    logger.info(f"Saved {file_url} to {path}")
    return path
