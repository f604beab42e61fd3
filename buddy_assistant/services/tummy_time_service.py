"""Tummy time tools."""

from datetime import timedelta
from typing import Optional, Union

from buddy_assistant.models.result import TummyTimeSummary
from buddy_assistant.models.tummy_time import TummyTime
from buddy_assistant.normalize import duration_to_minutes, format_minutes, local_now, normalize_time
from buddy_assistant.services.child_service import find_child
from buddy_assistant.services.queries import Timeframe, fetch_by_timeframe
from buddy_assistant.services.store import TUMMY_TIMES, ActivityStore
from buddy_assistant.services.timer_service import finalize_as_tummy_time, placeholder_timer

DEFAULT_SESSION_LENGTH = timedelta(minutes=15)


async def create_tummy_time(
    store: ActivityStore,
    child_name: str,
    milestone: Optional[str] = None,
    notes: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> TummyTime:
    """
    Record a tummy time session. Without times it covers the last 15 minutes;
    with only an end time, the 15 minutes before it.
    """
    child = await find_child(store, child_name)
    end = normalize_time(end_time)
    anchor = end or local_now()
    timer = placeholder_timer(
        child.id, "Tummy Time", start=anchor - DEFAULT_SESSION_LENGTH, end=anchor
    )
    result = await finalize_as_tummy_time(
        store,
        timer,
        milestone=milestone,
        notes=notes,
        start=normalize_time(start_time),
        end=end,
    )
    return result.record


def summarize_tummy_time(entries: list[TummyTime]) -> TummyTimeSummary:
    total = sum(duration_to_minutes(t.duration) for t in entries)
    return TummyTimeSummary(
        entries=entries,
        count=len(entries),
        total_minutes=total,
        total_duration=format_minutes(total),
    )


async def get_tummy_time(
    store: ActivityStore,
    child_name: str,
    timeframe: Timeframe = "today",
    limit: int = 10,
) -> Union[TummyTimeSummary, list[TummyTime], TummyTime, None]:
    child = await find_child(store, child_name)
    data = await fetch_by_timeframe(store, TUMMY_TIMES, child.id, timeframe, limit)
    if timeframe == "last":
        return TummyTime.model_validate(data) if data else None
    entries = [TummyTime.model_validate(t) for t in data]
    if timeframe == "recent":
        return entries
    return summarize_tummy_time(entries)
