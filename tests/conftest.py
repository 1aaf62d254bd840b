from __future__ import annotations

import httpx
import pytest

from feed_fixtures import FEED_URL


@pytest.fixture
def feed_transport():
    """Build a MockTransport serving a feed document and image bytes.

    Every request is recorded on the transport's ``requests`` list.
    """

    def _factory(
        feed_text: str,
        image_bytes: bytes = b"\xff\xd8\xffcat",
        image_status: int = 200,
        feed_status: int = 200,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if str(request.url) == FEED_URL:
                return httpx.Response(feed_status, text=feed_text)
            return httpx.Response(image_status, content=image_bytes)

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return _factory
