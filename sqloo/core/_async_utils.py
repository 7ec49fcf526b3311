"""Internal async helpers shared by the driver adapters."""

from __future__ import annotations

import inspect
from typing import Any


async def _maybe_await(value: Any) -> Any:
    """Await awaitables and return plain driver results unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def _maybe_close(resource: Any) -> None:
    """Call `close()` on a cursor/connection when it has one, sync or async."""

    close = getattr(resource, "close", None)
    if callable(close):
        await _maybe_await(close())
