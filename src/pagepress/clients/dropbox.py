"""Dropbox upload client.

Pages live at ``/<root>/pages/<page>.md``. Every upload overwrites the
existing file and is muted so Dropbox does not notify linked devices.
"""

import json

import httpx

from ..config import settings
from ..models import UploadResult
from ..utils.logging import get_logger
from .base import HTTPClient

logger = get_logger(__name__)


class DropboxClient(HTTPClient):
    """Uploads rendered pages through the Dropbox content API."""

    def __init__(
        self,
        access_token: str | None = None,
        root: str | None = None,
        upload_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.access_token = settings.dropbox_token if access_token is None else access_token
        self.root = (root or settings.dropbox_root).strip("/")
        self.upload_url = upload_url or settings.dropbox_upload_url

    def page_path(self, page: str) -> str:
        """Get the Dropbox path for a page name."""
        return f"/{self.root}/pages/{page}.md"

    def _upload_headers(self, path: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/octet-stream",
            "Dropbox-API-Arg": json.dumps({"path": path, "mode": "overwrite", "mute": True}),
        }

    async def upload(self, markdown: str, page: str) -> UploadResult:
        """Upload a markdown document, replacing any existing file.

        Args:
            markdown: Document content
            page: Page name, without extension

        Returns:
            UploadResult with the stored path and revision

        Raises:
            httpx.HTTPError: On network errors or a non-2xx response
        """
        client = self._ensure_client()
        path = self.page_path(page)

        response = await client.post(
            self.upload_url,
            headers=self._upload_headers(path),
            content=markdown.encode("utf-8"),
        )
        response.raise_for_status()

        metadata = response.json() if response.content else {}
        logger.debug("Uploaded %s (rev %s)", path, metadata.get("rev", "?"))
        return UploadResult(
            path=metadata.get("path_display", path),
            rev=metadata.get("rev", ""),
            size=metadata.get("size", len(markdown.encode("utf-8"))),
        )
