"""Service layer for pagepress."""

from .publish_service import (
    ABOUT_PAGE,
    BOOKMARKS_PAGE,
    PublishReport,
    PublishService,
    render_pages,
    run_once,
)

__all__ = [
    "ABOUT_PAGE",
    "BOOKMARKS_PAGE",
    "PublishReport",
    "PublishService",
    "render_pages",
    "run_once",
]
