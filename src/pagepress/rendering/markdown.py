"""Markdown generation for the bookmarks and about pages.

All functions are pure: the current time and timezone are passed in, and the
bookmark order given by the caller is kept as is. Month headers rely on the
list already being sorted newest first, as Pinboard serves it.
"""

from collections.abc import Sequence
from datetime import datetime, tzinfo
from urllib.parse import urlsplit

from ..models import Bookmark, PostEntry, PostListing
from .dates import day_label, is_recent, month_label, time_ago
from .loader import fill_template

RECENT_HOURS = 12
PREVIEW_COUNT = 3

_POST_PREVIEW = """
  <p class="index-entry">
  <div><span class="index-date">{date}</span>
  <div class="tags-date">
  </div>
  </div>
  <div class="details">
  <a href="{url}">{title}</a>
  </div>
  </p>
  """

_BOOKMARK_PREVIEW = """
<p><a href="{href}">{description}</a> <span class="hostname">{host}</span></p>
"""


def hostname(url: str) -> str:
    """Get the hostname of ``url`` without a leading "www.".

    Returns an empty string when the URL has no host.
    """
    host = urlsplit(url).hostname or ""
    return host.removeprefix("www.")


def render_bookmark(
    bookmark: Bookmark,
    previous: Bookmark | None,
    now: datetime,
    tz: tzinfo | None = None,
    recent_hours: int = RECENT_HOURS,
) -> str:
    """Render one bookmark line, preceded by a month header when the month changes.

    Args:
        bookmark: Bookmark to render
        previous: The bookmark rendered just before this one, or None for the first
        now: Render time, used for the "recent" label
        tz: Zone for month/day labels (UTC when omitted)
        recent_hours: Window in which a relative label is shown

    Returns:
        Markdown for the entry
    """
    parts: list[str] = []

    label = month_label(bookmark.time, tz)
    if previous is None or month_label(previous.time, tz) != label:
        parts.append(f'<span class="bookmark-month">{label}</span>\n\n')

    day = day_label(bookmark.time, tz)
    day_class = "bookmark-day"
    if is_recent(bookmark.time, now, recent_hours):
        day_class += " bookmark-day-recent"
        day = time_ago(bookmark.time, now)

    parts.append(
        f'<span class="bookmark">[{bookmark.description}]({bookmark.href}) '
        f'<span class="hostname">{hostname(bookmark.href)}</span> '
        f'<span class="{day_class}">{day}</span></span>'
    )
    return "".join(parts)


def render_bookmarks_page(
    bookmarks: Sequence[Bookmark],
    now: datetime,
    tz: tzinfo | None = None,
    recent_hours: int = RECENT_HOURS,
) -> str:
    """Render the full bookmarks page."""
    entries = [
        render_bookmark(
            bookmark,
            bookmarks[index - 1] if index > 0 else None,
            now,
            tz,
            recent_hours,
        )
        for index, bookmark in enumerate(bookmarks)
    ]
    return fill_template("bookmarks", bookmarks="\n\n".join(entries)).strip()


def render_post_preview(post: PostEntry) -> str:
    """Render one post as an about page entry, using the listing date as given."""
    return _POST_PREVIEW.format(date=post.date, url=post.url, title=post.title)


def render_bookmark_preview(bookmark: Bookmark) -> str:
    """Render one bookmark as a link followed by its host name."""
    return _BOOKMARK_PREVIEW.format(
        href=bookmark.href,
        description=bookmark.description,
        host=hostname(bookmark.href),
    )


def render_index_page(
    posts: PostListing,
    bookmarks: Sequence[Bookmark],
    count: int = PREVIEW_COUNT,
) -> str:
    """Render the about page with previews of the newest posts and bookmarks.

    Only the first ``count`` entries of each list are shown; shorter lists
    show what they have.
    """
    post_html = [render_post_preview(post) for post in posts.entries[:count]]
    bookmark_html = [render_bookmark_preview(bookmark) for bookmark in bookmarks[:count]]
    return fill_template(
        "about",
        posts="\n".join(post_html),
        bookmarks="\n".join(bookmark_html),
    )
