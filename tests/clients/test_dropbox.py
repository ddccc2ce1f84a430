"""Tests for the Dropbox upload client."""

import asyncio
import json

import httpx
import pytest

from pagepress.clients import DropboxClient
from pagepress.models import UploadResult

UPLOAD_URL = "https://content.dropboxapi.com/2/files/upload"


def _upload(client: httpx.AsyncClient, markdown: str, page: str) -> UploadResult:
    async def go() -> UploadResult:
        async with DropboxClient("dbx-token", "ylukem", UPLOAD_URL, client=client) as dropbox:
            return await dropbox.upload(markdown, page)

    return asyncio.run(go())


class TestDropboxClient:
    """Test DropboxClient.upload."""

    @pytest.mark.parametrize(
        ("root", "expected"),
        [
            ("ylukem", "/ylukem/pages/about.md"),
            ("/ylukem/", "/ylukem/pages/about.md"),
            ("sites/blog", "/sites/blog/pages/about.md"),
        ],
    )
    def test_page_path(self, root: str, expected: str) -> None:
        assert DropboxClient("token", root).page_path("about") == expected

    def test_upload_request(self, client_factory) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "name": "bookmarks.md",
                    "path_display": "/ylukem/pages/bookmarks.md",
                    "rev": "015f",
                    "size": 12,
                },
            )

        result = _upload(client_factory(handler), "# Bookmarks →", "bookmarks")

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == UPLOAD_URL
        assert request.headers["Authorization"] == "Bearer dbx-token"
        assert request.headers["Content-Type"] == "application/octet-stream"
        assert json.loads(request.headers["Dropbox-API-Arg"]) == {
            "path": "/ylukem/pages/bookmarks.md",
            "mode": "overwrite",
            "mute": True,
        }
        assert request.content == "# Bookmarks →".encode("utf-8")
        assert result == UploadResult(path="/ylukem/pages/bookmarks.md", rev="015f", size=12)

    def test_empty_response_body(self, client_factory) -> None:
        result = _upload(client_factory(lambda request: httpx.Response(200)), "abc", "about")
        assert result.path == "/ylukem/pages/about.md"
        assert result.size == 3

    @pytest.mark.parametrize("status", [400, 401, 409, 507])
    def test_rejection_propagates(self, client_factory, status: int) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json={"error_summary": "path/conflict/"})

        with pytest.raises(httpx.HTTPStatusError):
            _upload(client_factory(handler), "abc", "about")
