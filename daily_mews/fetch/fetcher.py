"""
HTTP fetching for the feed document and the featured image.

Both requests go through a shared ``httpx.AsyncClient`` carrying a
descriptive User-Agent; Reddit rejects generic ones. There is no retry: a
failed request aborts the run and the next scheduled invocation is the retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx

from ..config import FeedConfig


class FetchError(RuntimeError):
    """A request failed at the transport level or returned a non-2xx status."""

    def __init__(self, url: str, status_code: int | None, reason: str):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"fetch failed {status_code if status_code is not None else reason} for {url}")


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either a body will be populated (success) or error will be populated
    (failure). status_code is None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if no response was received
        content: Raw response body, or None on error
        error: Error message if the fetch failed, None on success
    """
    url: str
    status_code: int | None
    content: bytes | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status_code is not None and 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return (self.content or b"").decode("utf-8", errors="replace")

    def raise_for_error(self) -> "FetchResult":
        if not self.ok:
            raise FetchError(self.url, self.status_code, self.error or "non-success status")
        return self


def build_client(cfg: FeedConfig) -> httpx.AsyncClient:
    """Create the async client used for every request of one run."""
    return httpx.AsyncClient(
        timeout=cfg.timeout_seconds,
        headers={"User-Agent": cfg.user_agent},
        follow_redirects=True,
        trust_env=cfg.trust_env,
    )


async def fetch_url(client: httpx.AsyncClient, url: str) -> FetchResult:
    """GET a URL and capture the outcome without raising."""
    try:
        resp = await client.get(url)
    except httpx.HTTPError as exc:
        return FetchResult(url=url, status_code=None, content=None, error=f"{type(exc).__name__}: {exc}")
    if not 200 <= resp.status_code < 300:
        return FetchResult(
            url=url,
            status_code=resp.status_code,
            content=None,
            error=f"HTTP {resp.status_code}",
        )
    return FetchResult(url=url, status_code=resp.status_code, content=resp.content, error=None)


async def fetch_text(client: httpx.AsyncClient, url: str) -> str:
    """Fetch a text document, raising FetchError on any failure."""
    result = (await fetch_url(client, url)).raise_for_error()
    return result.text


async def download_to_file(client: httpx.AsyncClient, url: str, out_path: Path) -> int:
    """Download ``url`` and write the bytes verbatim to ``out_path``.

    Parent directories are created as needed. Returns the number of bytes
    written.
    """
    result = (await fetch_url(client, url)).raise_for_error()
    payload = result.content or b""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(payload)
    return len(payload)
