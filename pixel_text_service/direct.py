"""Helpers for running blocking work from async handlers."""

import asyncio
from typing import Any, Callable


async def run_blocking(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Run a blocking function in a thread pool to avoid blocking the event loop.
    """

    return await asyncio.to_thread(func, *args, **kwargs)


__all__ = ["run_blocking"]
