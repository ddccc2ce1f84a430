"""Client for the personal site's post listing."""

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..models import PostListing
from .base import HTTPClient, PayloadError


class BlogClient(HTTPClient):
    """Fetches the first page of the blog listing as JSON.

    The site only returns JSON for the listing when ``debug=true`` is set.
    """

    DEFAULT_HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        listing_url: str | None = None,
        debug: bool | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.listing_url = listing_url or settings.blog_listing_url
        self.debug = settings.blog_listing_debug if debug is None else debug

    async def fetch_posts(self) -> PostListing:
        """Fetch the listing page.

        Raises:
            httpx.HTTPError: On network/HTTP errors
            PayloadError: If the body is not a listing object
        """
        client = self._ensure_client()
        params = {"debug": "true"} if self.debug else {}

        response = await client.get(self.listing_url, params=params)
        response.raise_for_status()

        try:
            return PostListing.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise PayloadError(f"Unexpected blog listing payload: {e}") from e
