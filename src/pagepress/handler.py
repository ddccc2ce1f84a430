"""Serverless entry point.

Point the function runtime at ``pagepress.handler.handler``. The event and
context are ignored; every invocation publishes both pages once.
"""

import logging
from typing import Any

from .config import settings
from .services import run_once
from .utils.async_bridge import run_async_in_sync
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def handler(event: Any = None, context: Any = None) -> dict[str, Any]:
    """Publish the pages and return a summary for the invocation log."""
    setup_logging(level=settings.log_level)
    try:
        report = run_async_in_sync(run_once(settings))
    except Exception:
        logger.exception("Publish failed")
        raise
    return {
        "bookmarks": report.bookmark_count,
        "posts": report.post_count,
        "uploaded": report.paths,
    }
