"""Sleep tools: create, edit and query sleep entries."""

import logging
from datetime import datetime, timedelta
from typing import Optional, Union

from buddy_assistant.models.result import SleepSummary
from buddy_assistant.models.sleep import Sleep, SleepUpdate
from buddy_assistant.normalize import (
    calculate_duration,
    duration_to_minutes,
    format_minutes,
    local_now,
    normalize_time,
)
from buddy_assistant.services.child_service import find_child, find_child_id
from buddy_assistant.services.payloads import build, dump_update
from buddy_assistant.services.queries import Timeframe, fetch_by_timeframe
from buddy_assistant.services.store import SLEEP, ActivityStore
from buddy_assistant.services.timer_service import (
    finalize_as_sleep,
    placeholder_timer,
    require_order,
)

logger = logging.getLogger(__name__)

DEFAULT_SLEEP_LENGTH = timedelta(hours=1)


async def create_sleep(
    store: ActivityStore,
    child_name: str,
    nap: Optional[bool] = None,
    notes: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> Sleep:
    """
    Record a sleep. Without times it covers the last hour; with only an end
    time, the hour before it.
    """
    child = await find_child(store, child_name)
    end = normalize_time(end_time)
    anchor = end or local_now()
    timer = placeholder_timer(child.id, "Sleep", start=anchor - DEFAULT_SLEEP_LENGTH, end=anchor)
    result = await finalize_as_sleep(
        store,
        timer,
        nap=nap,
        notes=notes,
        start=normalize_time(start_time),
        end=end,
    )
    return result.record


async def edit_sleep(
    store: ActivityStore,
    sleep_id: int,
    child_name: Optional[str] = None,
    nap: Optional[bool] = None,
    notes: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> Sleep:
    fields: dict = {}
    child_id = await find_child_id(store, child_name)
    if child_id is not None:
        fields["child"] = child_id

    start = normalize_time(start_time)
    end = normalize_time(end_time)
    if start is not None:
        fields["start"] = start
    if end is not None:
        fields["end"] = end
    if start is not None and end is not None:
        require_order(start, end)
        fields["duration"] = calculate_duration(start, end)
    if nap is not None:
        fields["nap"] = nap
    if notes is not None:
        fields["notes"] = notes

    update = build(SleepUpdate, **fields)
    sleep = Sleep.model_validate(await store.update_sleep(sleep_id, dump_update(update)))
    logger.info("Updated sleep #%s", sleep_id)
    return sleep


def summarize_sleep(entries: list[Sleep], now: Optional[datetime] = None) -> SleepSummary:
    now = now or local_now()
    total = sum(duration_to_minutes(s.duration) for s in entries)
    return SleepSummary(
        entries=entries,
        count=len(entries),
        total_minutes=total,
        total_duration=format_minutes(total),
        # An entry ending in the future means the child is still asleep
        is_currently_asleep=any(s.end > now for s in entries),
    )


async def get_sleep(
    store: ActivityStore,
    child_name: str,
    timeframe: Timeframe = "today",
    limit: int = 10,
) -> Union[SleepSummary, list[Sleep], Sleep, None]:
    child = await find_child(store, child_name)
    data = await fetch_by_timeframe(store, SLEEP, child.id, timeframe, limit)
    if timeframe == "last":
        return Sleep.model_validate(data) if data else None
    entries = [Sleep.model_validate(s) for s in data]
    if timeframe == "recent":
        return entries
    return summarize_sleep(entries)
