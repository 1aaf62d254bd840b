"""
HTTP fetching.

This package contains the async client helpers used by the pipeline.
"""

from .fetcher import FetchError, FetchResult, build_client, download_to_file, fetch_text, fetch_url

__all__ = [
    "FetchError",
    "FetchResult",
    "build_client",
    "download_to_file",
    "fetch_text",
    "fetch_url",
]
