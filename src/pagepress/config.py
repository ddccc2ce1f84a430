"""Configuration management using pydantic-settings."""

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _mask(secret: str) -> str:
    """Mask a secret for display, keeping the last four characters."""
    if not secret:
        return "(not set)"
    if len(secret) <= 4:
        return "****"
    return "*" * 8 + secret[-4:]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials. Empty values are sent as is and rejected by the service.
    pinboard_token: str = Field(
        default="",
        validation_alias=AliasChoices("pinboard_token", "PINBOARD"),
    )
    dropbox_token: str = Field(
        default="",
        validation_alias=AliasChoices("dropbox_token", "DROPBOX"),
    )

    # Pinboard
    pinboard_api_url: str = "https://api.pinboard.in/v1"
    pinboard_tag: str = "publish"

    # Blog listing
    blog_url: str = "https://ylukem.com"
    blog_listing_path: str = "/page/1"
    blog_listing_debug: bool = True  # sends debug=true for the JSON view

    # Dropbox
    dropbox_upload_url: str = "https://content.dropboxapi.com/2/files/upload"
    dropbox_root: str = "ylukem"

    # Rendering
    recent_hours: int = Field(default=12, gt=0)
    preview_count: int = Field(default=3, ge=0)
    timezone: str = "UTC"

    # Runtime
    http_timeout: float = Field(default=30.0, gt=0)
    schedule_cron: str = "0 * * * *"  # hourly
    schedule_timezone: str = "UTC"
    log_level: LogLevel = "INFO"

    @field_validator("timezone", "schedule_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject unknown IANA zone names early."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: '{v}'") from e
        return v

    @field_validator("dropbox_root")
    @classmethod
    def validate_dropbox_root(cls, v: str) -> str:
        """Normalize the Dropbox folder to a bare name without slashes."""
        root = v.strip("/")
        if not root:
            raise ValueError("dropbox_root must not be empty")
        return root

    @property
    def tzinfo(self) -> ZoneInfo:
        """Get the zone used for month and day labels."""
        return ZoneInfo(self.timezone)

    @property
    def schedule_tzinfo(self) -> ZoneInfo:
        """Get the zone the cron schedule is evaluated in."""
        return ZoneInfo(self.schedule_timezone)

    @property
    def blog_listing_url(self) -> str:
        """Get the full URL of the blog listing endpoint."""
        return self.blog_url.rstrip("/") + "/" + self.blog_listing_path.lstrip("/")

    @property
    def masked_pinboard_token(self) -> str:
        return _mask(self.pinboard_token)

    @property
    def masked_dropbox_token(self) -> str:
        return _mask(self.dropbox_token)


# Global settings instance
settings = Settings()
