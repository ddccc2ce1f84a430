"""Pinboard client for published bookmarks.

Pinboard serves ``/posts/all`` as ``text/plain`` and the body sometimes carries
zero-width characters that break JSON parsing. Text bodies are cleaned before
decoding; bodies declared as JSON are cleaned only when they fail to parse.
"""

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..models import Bookmark
from ..utils.logging import get_logger
from .base import HTTPClient, PayloadError

logger = get_logger(__name__)

# U+200B..U+200D (zero-width space, non-joiner, joiner) and U+FEFF (BOM)
ZERO_WIDTH_PATTERN = re.compile("[\u200b-\u200d\ufeff]")

_BOOKMARKS_ADAPTER = TypeAdapter(list[Bookmark])


def strip_zero_width(text: str) -> str:
    """Remove zero-width characters from a raw response body."""
    return ZERO_WIDTH_PATTERN.sub("", text)


class PayloadKind(Enum):
    """How a response body should be decoded."""

    RAW_TEXT = "raw_text"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class Payload:
    """A response body tagged with its decoding path."""

    kind: PayloadKind
    body: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> "Payload":
        """Tag a response by its declared content type."""
        content_type = response.headers.get("content-type", "")
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type == "application/json" or media_type.endswith("+json"):
            return cls(PayloadKind.STRUCTURED, response.text)
        return cls(PayloadKind.RAW_TEXT, response.text)

    def decode(self) -> Any:
        """Parse the body as JSON.

        Raw text is cleaned before parsing. A structured body is parsed as is
        and cleaned only if that first parse fails.

        Raises:
            PayloadError: If the body is not valid JSON
        """
        if self.kind is PayloadKind.STRUCTURED:
            try:
                return json.loads(self.body)
            except json.JSONDecodeError:
                logger.debug("Structured Pinboard payload failed to parse, cleaning it")
        try:
            return json.loads(strip_zero_width(self.body))
        except json.JSONDecodeError as e:
            raise PayloadError(f"Invalid JSON from Pinboard: {e}") from e


class PinboardClient(HTTPClient):
    """Read-only Pinboard API client."""

    DEFAULT_HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        auth_token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.auth_token = settings.pinboard_token if auth_token is None else auth_token
        self.base_url = (base_url or settings.pinboard_api_url).rstrip("/")

    async def fetch_bookmarks(self, tag: str | None = None) -> list[Bookmark]:
        """Fetch every bookmark carrying ``tag``, in the order Pinboard returns them.

        Args:
            tag: Tag filter (defaults to the configured publish tag)

        Returns:
            Bookmarks, newest first as served by Pinboard

        Raises:
            httpx.HTTPError: On network/HTTP errors
            PayloadError: If the body is not a JSON list of bookmarks
        """
        client = self._ensure_client()
        params = {
            "auth_token": self.auth_token,
            "tag": tag or settings.pinboard_tag,
            "format": "json",
        }

        response = await client.get(f"{self.base_url}/posts/all", params=params)
        response.raise_for_status()

        payload = Payload.from_response(response)
        logger.debug("Decoding Pinboard payload as %s", payload.kind.value)
        data = payload.decode()

        try:
            return _BOOKMARKS_ADAPTER.validate_python(data)
        except PydanticValidationError as e:
            raise PayloadError(f"Unexpected Pinboard payload: {e}") from e
