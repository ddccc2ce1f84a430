"""Shared test fixtures for pagepress."""

from collections.abc import Callable
from datetime import UTC, datetime

import httpx
import pytest

from pagepress.config import Settings
from pagepress.models import Bookmark, PostEntry, PostListing

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=UTC)

Handler = Callable[[httpx.Request], httpx.Response]


def mock_client(handler: Handler) -> httpx.AsyncClient:
    """Build an AsyncClient that answers every request with ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def make_settings(**overrides) -> Settings:
    """Create a Settings instance with test defaults."""
    defaults = {
        "pinboard_token": "user:TOKEN",
        "dropbox_token": "dbx-token",
    }
    return Settings(**(defaults | overrides))  # type: ignore[arg-type]


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def sample_bookmarks() -> list[Bookmark]:
    """Bookmarks newest first, spanning two months."""
    return [
        Bookmark(
            href="https://www.example.com/recent",
            description="Recent read",
            time=datetime(2024, 3, 10, 9, 0, tzinfo=UTC),
        ),
        Bookmark(
            href="https://blog.example.org/post",
            description="Older March read",
            time=datetime(2024, 3, 3, 8, 0, tzinfo=UTC),
        ),
        Bookmark(
            href="https://news.ycombinator.com/item?id=1",
            description="February thread",
            time=datetime(2024, 2, 21, 18, 30, tzinfo=UTC),
        ),
        Bookmark(
            href="https://www.python.org/",
            description="Python",
            time=datetime(2024, 2, 1, 0, 0, tzinfo=UTC),
        ),
    ]


@pytest.fixture
def sample_posts() -> PostListing:
    return PostListing(
        entries=[
            PostEntry(date="March 8, 2024", title=f"Post {i}", url=f"/post-{i}")
            for i in range(1, 6)
        ]
    )


@pytest.fixture
def pinboard_json() -> str:
    """Raw /posts/all body as Pinboard serves it."""
    return (
        '[{"href":"https://www.example.com/a","description":"A",'
        '"extended":"","meta":"abc","hash":"def","time":"2024-01-05T00:00:00Z",'
        '"shared":"yes","toread":"no","tags":"publish"},'
        '{"href":"https://example.com/b","description":"B",'
        '"extended":"","meta":"ghi","hash":"jkl","time":"2024-01-02T00:00:00Z",'
        '"shared":"yes","toread":"no","tags":"publish"}]'
    )


@pytest.fixture
def client_factory() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for AsyncClients backed by a request handler."""
    return mock_client


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Factory for Settings with test credentials."""
    return make_settings
