"""Markdown rendering for published pages."""

from .dates import day_label, is_recent, month_label, ordinal, time_ago
from .loader import fill_template, load_template
from .markdown import (
    hostname,
    render_bookmark,
    render_bookmark_preview,
    render_bookmarks_page,
    render_index_page,
    render_post_preview,
)

__all__ = [
    # Dates
    "day_label",
    "is_recent",
    "month_label",
    "ordinal",
    "time_ago",
    # Pages
    "fill_template",
    "hostname",
    "load_template",
    "render_bookmark",
    "render_bookmark_preview",
    "render_bookmarks_page",
    "render_index_page",
    "render_post_preview",
]
