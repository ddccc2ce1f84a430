"""Async-to-sync bridge for the CLI and serverless handler."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import nest_asyncio

# Allow nested event loops so a handler invoked inside a running loop still works
nest_asyncio.apply()

T = TypeVar("T")


def run_async_in_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine in a sync context safely."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    return loop.run_until_complete(coro)
