"""Publish service - fetch, render and upload the site pages.

The whole run is one sequence with no concurrency:

    fetch bookmarks -> render bookmarks -> upload bookmarks
    -> fetch posts -> render about -> upload about

Any exception stops the sequence and propagates to the caller unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo

from ..clients import BlogClient, DropboxClient, PinboardClient
from ..config import Settings
from ..config import settings as default_settings
from ..models import Bookmark, PostListing, RenderedPage, UploadResult
from ..rendering import render_bookmarks_page, render_index_page
from ..utils.logging import get_logger

logger = get_logger(__name__)

BOOKMARKS_PAGE = "bookmarks"
ABOUT_PAGE = "about"


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class PublishReport:
    """Summary of a completed run."""

    bookmark_count: int = 0
    post_count: int = 0
    uploads: list[UploadResult] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [upload.path for upload in self.uploads]


class PublishService:
    """Runs the publish sequence against injected clients.

    Clients must already be connected; ``run_once`` handles that for the
    normal case.
    """

    def __init__(
        self,
        pinboard: PinboardClient,
        blog: BlogClient,
        dropbox: DropboxClient | None = None,
        clock: Callable[[], datetime] = utc_now,
        tz: tzinfo | None = None,
        recent_hours: int = 12,
        preview_count: int = 3,
    ) -> None:
        self.pinboard = pinboard
        self.blog = blog
        self.dropbox = dropbox
        self.clock = clock
        self.tz = tz
        self.recent_hours = recent_hours
        self.preview_count = preview_count

    def render_bookmarks(self, bookmarks: list[Bookmark]) -> RenderedPage:
        markdown = render_bookmarks_page(bookmarks, self.clock(), self.tz, self.recent_hours)
        return RenderedPage(name=BOOKMARKS_PAGE, markdown=markdown)

    def render_about(self, posts: PostListing, bookmarks: list[Bookmark]) -> RenderedPage:
        markdown = render_index_page(posts, bookmarks, self.preview_count)
        return RenderedPage(name=ABOUT_PAGE, markdown=markdown)

    async def _upload(self, page: RenderedPage) -> UploadResult:
        if self.dropbox is None:
            raise RuntimeError("PublishService was created without a Dropbox client")
        return await self.dropbox.upload(page.markdown, page.name)

    async def run(self) -> PublishReport:
        """Fetch, render and upload both pages in order.

        Returns:
            PublishReport with counts and uploaded paths
        """
        report = PublishReport()

        bookmarks = await self.pinboard.fetch_bookmarks()
        report.bookmark_count = len(bookmarks)
        logger.info("Fetched bookmarks from pinboard")

        report.uploads.append(await self._upload(self.render_bookmarks(bookmarks)))
        logger.info("Bookmarks updated")

        posts = await self.blog.fetch_posts()
        report.post_count = len(posts.entries)
        logger.info("Fetched posts from blog")

        report.uploads.append(await self._upload(self.render_about(posts, bookmarks)))
        logger.info("About updated")

        return report

    async def render(self) -> list[RenderedPage]:
        """Fetch and render both pages without uploading them."""
        bookmarks = await self.pinboard.fetch_bookmarks()
        logger.info("Fetched bookmarks from pinboard")
        posts = await self.blog.fetch_posts()
        logger.info("Fetched posts from blog")
        return [self.render_bookmarks(bookmarks), self.render_about(posts, bookmarks)]


def _service_options(config: Settings) -> dict:
    return {
        "tz": config.tzinfo,
        "recent_hours": config.recent_hours,
        "preview_count": config.preview_count,
    }


async def run_once(config: Settings | None = None) -> PublishReport:
    """Run the full publish sequence once with clients built from settings."""
    config = config or default_settings
    timeout = config.http_timeout

    async with (
        PinboardClient(config.pinboard_token, config.pinboard_api_url, timeout) as pinboard,
        BlogClient(config.blog_listing_url, config.blog_listing_debug, timeout) as blog,
        DropboxClient(
            config.dropbox_token, config.dropbox_root, config.dropbox_upload_url, timeout
        ) as dropbox,
    ):
        service = PublishService(pinboard, blog, dropbox, **_service_options(config))
        return await service.run()


async def render_pages(config: Settings | None = None) -> list[RenderedPage]:
    """Fetch and render both pages with clients built from settings, no upload."""
    config = config or default_settings
    timeout = config.http_timeout

    async with (
        PinboardClient(config.pinboard_token, config.pinboard_api_url, timeout) as pinboard,
        BlogClient(config.blog_listing_url, config.blog_listing_debug, timeout) as blog,
    ):
        service = PublishService(pinboard, blog, **_service_options(config))
        return await service.render()
