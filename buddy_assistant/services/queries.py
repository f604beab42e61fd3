"""Shared timeframe handling for the "get X for child" tools."""

from typing import Any, Literal

from buddy_assistant.services.store import ActivityStore

Timeframe = Literal["today", "recent", "last"]


async def fetch_by_timeframe(
    store: ActivityStore,
    kind: str,
    child_id: int,
    timeframe: Timeframe,
    limit: int = 10,
) -> Any:
    """
    ``last`` → one entry or None, ``recent`` → up to ``limit`` entries,
    anything else → today's entries.
    """
    if timeframe == "last":
        return await store.query_last(kind, child_id)
    if timeframe == "recent":
        return await store.query_recent(kind, child_id, limit=limit)
    return await store.query_today(kind, child_id)
