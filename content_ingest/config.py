"""
Runtime configuration, read from environment variables.
"""

import os

OUTPUT_DIR = os.environ.get("CONTENT_INGEST_OUTPUT_DIR", "output")
DOWNLOAD_DIR = os.environ.get("CONTENT_INGEST_DOWNLOAD_DIR", "tmp")
TEAM_ID = os.environ.get("CONTENT_INGEST_TEAM_ID", "team id here")

# Timeouts in seconds
NAV_TIMEOUT = int(os.environ.get("CONTENT_INGEST_NAV_TIMEOUT", "45"))
FETCH_TIMEOUT = int(os.environ.get("CONTENT_INGEST_FETCH_TIMEOUT", "15"))
DOWNLOAD_TIMEOUT = 60

USER_AGENT = os.environ.get(
    "CONTENT_INGEST_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.114 Safari/537.36",
)

# Minimum length of web content, in characters, for an extraction to count
MIN_CONTENT_LENGTH = 200

# Document extensions routed to the PDF segmenter
DOCUMENT_EXTENSIONS = (".pdf",)
