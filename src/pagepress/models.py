"""Data models for fetched content and published pages.

Upstream payloads carry more fields than we use (Pinboard sends ``extended``,
``tags``, ``hash`` and friends); models ignore them.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Bookmark(BaseModel):
    """A single Pinboard bookmark."""

    model_config = ConfigDict(extra="ignore")

    href: str
    description: str = ""
    time: datetime

    @field_validator("time")
    @classmethod
    def ensure_aware(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class PostEntry(BaseModel):
    """A blog post as listed on the site's index page."""

    model_config = ConfigDict(extra="ignore")

    date: str
    title: str
    url: str


class PostListing(BaseModel):
    """One page of the blog listing."""

    model_config = ConfigDict(extra="ignore")

    entries: list[PostEntry] = Field(default_factory=list)


class RenderedPage(BaseModel):
    """A markdown document ready to upload."""

    model_config = ConfigDict(frozen=True)

    name: str
    markdown: str


class UploadResult(BaseModel):
    """File metadata returned by Dropbox after an upload."""

    model_config = ConfigDict(extra="ignore")

    path: str
    rev: str = ""
    size: int = 0
