"""Utility functions."""

from .async_bridge import run_async_in_sync
from .console import console
from .logging import get_logger, setup_logging

__all__ = [
    "console",
    "get_logger",
    "run_async_in_sync",
    "setup_logging",
]
