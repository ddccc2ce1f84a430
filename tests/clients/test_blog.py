"""Tests for the blog listing client."""

import asyncio

import httpx
import pytest

from pagepress.clients import BlogClient, PayloadError
from pagepress.models import PostListing

LISTING_URL = "https://ylukem.com/page/1"

LISTING = {
    "entries": [
        {"date": "March 8, 2024", "title": "Hello", "url": "/hello", "tags": []},
        {"date": "March 1, 2024", "title": "Older", "url": "/older", "tags": []},
    ],
    "pagination": {"current": 1},
}


def _fetch(client: httpx.AsyncClient, debug: bool = True) -> PostListing:
    async def go() -> PostListing:
        async with BlogClient(LISTING_URL, debug, client=client) as blog:
            return await blog.fetch_posts()

    return asyncio.run(go())


class TestBlogClient:
    """Test BlogClient.fetch_posts."""

    def test_requests_debug_listing(self, client_factory) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=LISTING)

        listing = _fetch(client_factory(handler))

        assert str(seen[0].url) == "https://ylukem.com/page/1?debug=true"
        assert [entry.title for entry in listing.entries] == ["Hello", "Older"]
        assert listing.entries[0].date == "March 8, 2024"

    def test_debug_flag_off(self, client_factory) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=LISTING)

        _fetch(client_factory(handler), debug=False)
        assert str(seen[0].url) == LISTING_URL

    def test_missing_entries_is_empty(self, client_factory) -> None:
        listing = _fetch(client_factory(lambda request: httpx.Response(200, json={})))
        assert listing.entries == []

    def test_html_body_raises_payload_error(self, client_factory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html></html>")

        with pytest.raises(PayloadError):
            _fetch(client_factory(handler))

    def test_http_error_propagates(self, client_factory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        with pytest.raises(httpx.HTTPStatusError):
            _fetch(client_factory(handler))

    def test_defaults_from_settings(self) -> None:
        client = BlogClient()
        assert client.listing_url.endswith("/page/1")
        assert client.debug is True
