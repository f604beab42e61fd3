"""Diaper change tools (wet / solid tracking)."""

import logging
from typing import Optional, Union

from buddy_assistant.models.diaper import Diaper, DiaperUpdate
from buddy_assistant.models.result import DiaperSummary
from buddy_assistant.normalize import (
    DiaperContents,
    describe_contents,
    local_now,
    normalize_diaper_contents,
    normalize_time,
    parse_amount,
)
from buddy_assistant.services.child_service import find_child, find_child_id
from buddy_assistant.services.payloads import build, dump_update
from buddy_assistant.services.queries import Timeframe, fetch_by_timeframe
from buddy_assistant.services.store import DIAPERS, ActivityStore
from buddy_assistant.services.timer_service import (
    finalize_as_diaper,
    placeholder_timer,
    require_contents,
)

logger = logging.getLogger(__name__)


async def create_diaper(
    store: ActivityStore,
    child_name: str,
    contents: Optional[str] = None,
    wet: Optional[bool] = None,
    solid: Optional[bool] = None,
    color: Optional[str] = None,
    amount: Union[str, float, None] = None,
    notes: Optional[str] = None,
    time: Optional[str] = None,
) -> Diaper:
    """
    Record one diaper change.

    One change has a single amount. A request naming two separately
    measured contents ("wet 1 and solid 2") is two calls: one wet change
    with amount 1, one solid change with amount 2.
    """
    if wet is None and solid is None:
        wet, solid = normalize_diaper_contents(contents)
    wet, solid = bool(wet), bool(solid)
    require_contents(wet, solid)

    child = await find_child(store, child_name)
    when = normalize_time(time) or local_now()
    timer = placeholder_timer(child.id, "Diaper", start=when, end=when)
    result = await finalize_as_diaper(
        store, timer, wet=wet, solid=solid, color=color, amount=amount, notes=notes, time=when,
    )
    logger.info(
        "Recorded %s diaper for %s",
        describe_contents(DiaperContents(wet, solid)),
        child.first_name,
    )
    return result.record


async def edit_diaper(
    store: ActivityStore,
    diaper_id: int,
    child_name: Optional[str] = None,
    wet: Optional[bool] = None,
    solid: Optional[bool] = None,
    color: Optional[str] = None,
    amount: Union[str, float, None] = None,
    notes: Optional[str] = None,
    time: Optional[str] = None,
) -> Diaper:
    fields: dict = {}
    child_id = await find_child_id(store, child_name)
    if child_id is not None:
        fields["child"] = child_id

    when = normalize_time(time)
    if when is not None:
        fields["time"] = when
    if wet is not None:
        fields["wet"] = wet
    if solid is not None:
        fields["solid"] = solid
    if color is not None:
        fields["color"] = color
    if amount is not None:
        fields["amount"] = parse_amount(amount)
    if notes is not None:
        fields["notes"] = notes

    update = build(DiaperUpdate, **fields)
    diaper = Diaper.model_validate(await store.update_diaper(diaper_id, dump_update(update)))
    logger.info("Updated diaper change #%s", diaper_id)
    return diaper


def summarize_diapers(entries: list[Diaper]) -> DiaperSummary:
    return DiaperSummary(
        entries=entries,
        count=len(entries),
        wet_count=sum(1 for d in entries if d.wet),
        solid_count=sum(1 for d in entries if d.solid),
        total_amount=sum(d.amount or 0 for d in entries),
    )


async def get_diapers(
    store: ActivityStore,
    child_name: str,
    timeframe: Timeframe = "today",
    limit: int = 10,
) -> Union[DiaperSummary, list[Diaper], Diaper, None]:
    child = await find_child(store, child_name)
    data = await fetch_by_timeframe(store, DIAPERS, child.id, timeframe, limit)
    if timeframe == "last":
        return Diaper.model_validate(data) if data else None
    entries = [Diaper.model_validate(d) for d in data]
    if timeframe == "recent":
        return entries
    return summarize_diapers(entries)
