"""Feeding tools: create, edit, delete and query feedings through the store."""

import logging
from datetime import timedelta
from typing import Optional, Union

from buddy_assistant.models.feeding import Feeding, FeedingUpdate
from buddy_assistant.models.result import FeedingSummary
from buddy_assistant.normalize import (
    calculate_duration,
    local_now,
    normalize_feeding_method,
    normalize_feeding_type,
    normalize_time,
    parse_amount,
)
from buddy_assistant.services.child_service import find_child, find_child_id
from buddy_assistant.services.payloads import build, dump_update
from buddy_assistant.services.queries import Timeframe, fetch_by_timeframe
from buddy_assistant.services.store import FEEDINGS, ActivityStore
from buddy_assistant.services.timer_service import (
    finalize_as_feeding,
    placeholder_timer,
    require_order,
)

logger = logging.getLogger(__name__)


async def create_feeding(
    store: ActivityStore,
    child_name: str,
    feeding_type: Optional[str] = None,
    method: Optional[str] = "bottle",
    amount: Union[str, float, None] = None,
    notes: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> Feeding:
    """Record a feeding. Without times it spans the second before now (or ``end_time``)."""
    child = await find_child(store, child_name)
    end = normalize_time(end_time)
    anchor = end or local_now()
    timer = placeholder_timer(child.id, "Feeding", start=anchor - timedelta(seconds=1), end=anchor)
    result = await finalize_as_feeding(
        store,
        timer,
        feeding_type=feeding_type,
        method=method,
        amount=amount,
        notes=notes,
        start=normalize_time(start_time),
        end=end,
    )
    return result.record


async def edit_feeding(
    store: ActivityStore,
    feeding_id: int,
    child_name: Optional[str] = None,
    feeding_type: Optional[str] = None,
    method: Optional[str] = None,
    amount: Union[str, float, None] = None,
    notes: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> Feeding:
    """Update only the provided fields. An empty ``amount`` clears it."""
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

    if feeding_type:
        fields["type"] = normalize_feeding_type(feeding_type)
    if method:
        fields["method"] = normalize_feeding_method(method)
    if amount is not None:
        fields["amount"] = parse_amount(amount)
    if notes is not None:
        fields["notes"] = notes

    update = build(FeedingUpdate, **fields)
    feeding = Feeding.model_validate(await store.update_feeding(feeding_id, dump_update(update)))
    logger.info("Updated feeding #%s", feeding_id)
    return feeding


async def delete_feeding(store: ActivityStore, feeding_id: int) -> None:
    """Delete a feeding record."""
    await store.delete_feeding(feeding_id)
    logger.info("Deleted feeding #%s", feeding_id)


def summarize_feedings(entries: list[Feeding]) -> FeedingSummary:
    return FeedingSummary(
        entries=entries,
        count=len(entries),
        total_amount=sum(f.amount or 0 for f in entries),
    )


async def get_feedings(
    store: ActivityStore,
    child_name: str,
    timeframe: Timeframe = "today",
    limit: int = 10,
) -> Union[FeedingSummary, list[Feeding], Feeding, None]:
    """Today's feedings with totals, the ``limit`` most recent, or the last one."""
    child = await find_child(store, child_name)
    data = await fetch_by_timeframe(store, FEEDINGS, child.id, timeframe, limit)
    if timeframe == "last":
        return Feeding.model_validate(data) if data else None
    feedings = [Feeding.model_validate(f) for f in data]
    if timeframe == "recent":
        return feedings
    return summarize_feedings(feedings)
