"""
Unit tests for content_ingest.download module.
"""

import pytest
import requests
import responses
from unittest.mock import patch, MagicMock

from content_ingest.download import download_file, DownloadError

URL = "https://example.com/files/My%20Book.pdf"


@pytest.mark.unit
@responses.activate
def test_download_file_saves_under_url_name(tmp_path):
    responses.add(responses.GET, URL, body=b"%PDF-1.4 content", status=200)
    dest = tmp_path / "nested" / "tmp"

    path = download_file(URL, dest_dir=str(dest))

    assert path == dest / "My Book.pdf"
    assert path.read_bytes() == b"%PDF-1.4 content"


@pytest.mark.unit
@responses.activate
def test_download_file_http_error_is_not_retried(tmp_path):
    responses.add(responses.GET, URL, status=404)

    with pytest.raises(DownloadError, match="404"):
        download_file(URL, dest_dir=str(tmp_path))

    assert len(responses.calls) == 1
    assert not any(tmp_path.iterdir())


@pytest.mark.unit
@responses.activate
def test_download_file_without_path_uses_default_name(tmp_path):
    responses.add(responses.GET, "https://example.com/", body=b"data", status=200)

    path = download_file("https://example.com/", dest_dir=str(tmp_path))

    assert path.name == "download.pdf"


@pytest.mark.unit
def test_download_file_closes_response(tmp_path):
    response = MagicMock()
    response.iter_content.return_value = [b"chunk"]

    with patch("content_ingest.download.requests.get", return_value=response):
        path = download_file(URL, dest_dir=str(tmp_path))

    assert path.read_bytes() == b"chunk"
    response.__exit__.assert_called_once()


@pytest.mark.unit
def test_download_file_closes_response_on_http_error(tmp_path):
    response = MagicMock()
    response.status_code = 500
    response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)

    with patch("content_ingest.download.requests.get", return_value=response):
        with pytest.raises(DownloadError, match="500"):
            download_file(URL, dest_dir=str(tmp_path))

    response.close.assert_called_once()
