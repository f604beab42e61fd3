"""Timer lifecycle: start, edit, finalize into an activity record, cancel.

Finalizing always creates the record first and deletes the timer second,
and only for persisted timers. If the record cannot be created the timer is
left untouched so the user can retry.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Union

from buddy_assistant.errors import (
    AssistantError,
    ConfirmationRequired,
    NotFoundError,
    ValidationFailure,
)
from buddy_assistant.models.diaper import Diaper, DiaperCreate
from buddy_assistant.models.feeding import Feeding, FeedingCreate
from buddy_assistant.models.result import ActivityRecord, FinalizeResult, TimerCancelled
from buddy_assistant.models.sleep import Sleep, SleepCreate
from buddy_assistant.models.timer import AnyTimer, PlaceholderTimer, Timer, TimerCreate, TimerUpdate
from buddy_assistant.models.tummy_time import TummyTime, TummyTimeCreate
from buddy_assistant.normalize import (
    calculate_duration,
    local_now,
    normalize_diaper_contents,
    normalize_feeding_method,
    normalize_feeding_type,
    normalize_time,
    parse_amount,
)
from buddy_assistant.services.child_service import find_child, find_child_id
from buddy_assistant.services.payloads import build, dump_create, dump_update
from buddy_assistant.services.store import ActivityStore

logger = logging.getLogger(__name__)

TimeInput = Union[str, datetime, None]
# A persisted timer may be passed by id
TimerRef = Union[Timer, PlaceholderTimer, int]


def _coerce_time(value: TimeInput) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.astimezone()
    return normalize_time(value)


def require_contents(wet: bool, solid: bool) -> None:
    """A diaper change must be wet, solid or both. Checked before any store call."""
    if not (wet or solid):
        raise ValidationFailure.single(
            "non_field_errors", "At least one of wet or solid must be selected"
        )


def require_order(start: datetime, end: datetime) -> None:
    if start >= end:
        raise ValidationFailure.single("end", "End time must be after start time")


def _sort_recent_first(timers: list[Timer]) -> list[Timer]:
    return sorted(timers, key=lambda t: t.start, reverse=True)


# ── Running timers ──────────────────────────────────────────────────────────


async def list_timers(store: ActivityStore, child_name: Optional[str] = None) -> list[Timer]:
    """Active timers, most recent first, optionally for one child."""
    timers = [Timer.model_validate(t) for t in await store.list_active_timers()]
    if child_name:
        child = await find_child(store, child_name)
        timers = [t for t in timers if t.child == child.id]
    return _sort_recent_first(timers)


async def start_timer(
    store: ActivityStore,
    child_name: str,
    name: Optional[str],
    start: TimeInput = None,
) -> Timer:
    """Start a timer for a child. ``start`` defaults to now."""
    child = await find_child(store, child_name)
    payload = build(
        TimerCreate,
        child=child.id,
        name=(name or "").strip() or "Timer",
        start=_coerce_time(start) or local_now(),
    )
    timer = Timer.model_validate(
        await store.create_timer(payload.child, payload.name, payload.start)
    )
    logger.info("Started %s timer #%s for %s", timer.label, timer.id, child.first_name)
    return timer


async def rename_timer(store: ActivityStore, timer_id: int, name: str) -> Timer:
    update = build(TimerUpdate, name=(name or "").strip())
    return Timer.model_validate(await store.update_timer(timer_id, dump_update(update)))


async def reschedule_timer(store: ActivityStore, timer_id: int, start: TimeInput) -> Timer:
    new_start = _coerce_time(start)
    if new_start is None:
        raise ValidationFailure.single("start", f"Unrecognized time: {start!r}")
    update = build(TimerUpdate, start=new_start)
    return Timer.model_validate(await store.update_timer(timer_id, dump_update(update)))


async def edit_timer(
    store: ActivityStore,
    timer_id: int,
    child_name: Optional[str] = None,
    name: Optional[str] = None,
    start: TimeInput = None,
    end: TimeInput = None,
) -> Timer:
    """
    Edit any of a timer's fields. Setting an end time also marks it inactive.
    Unrecognized times are ignored, as if they had not been given.
    """
    fields: dict = {}
    child_id = await find_child_id(store, child_name)
    if child_id is not None:
        fields["child"] = child_id
    if name is not None:
        fields["name"] = name.strip()
    new_start = _coerce_time(start)
    if new_start is not None:
        fields["start"] = new_start
    new_end = _coerce_time(end)
    if new_end is not None:
        fields["end"] = new_end
        fields["active"] = False

    update = build(TimerUpdate, **fields)
    timer = Timer.model_validate(await store.update_timer(timer_id, dump_update(update)))
    logger.info("Updated timer #%s", timer_id)
    return timer


def placeholder_timer(
    child_id: int,
    name: str,
    start: datetime,
    end: Optional[datetime] = None,
) -> PlaceholderTimer:
    """A timer that exists only for the duration of one finalize call."""
    return PlaceholderTimer(child=child_id, name=name, start=start, end=end)


# ── Finalization ────────────────────────────────────────────────────────────


async def _current(store: ActivityStore, timer: TimerRef) -> AnyTimer:
    """Re-read a persisted timer so a consumed one cannot be finalized twice."""
    if isinstance(timer, PlaceholderTimer):
        return timer
    timer_id = timer.id if isinstance(timer, Timer) else timer
    try:
        return Timer.model_validate(await store.get_timer(timer_id))
    except NotFoundError as exc:
        raise NotFoundError(f"Timer #{timer_id} no longer exists") from exc


def _extent(
    timer: AnyTimer,
    start: TimeInput,
    end: TimeInput,
) -> tuple[datetime, datetime]:
    """
    Start and end of the record. A timer whose start is not before its end is
    nudged to one second before the end; explicit bad overrides are rejected.
    """
    start, end = _coerce_time(start), _coerce_time(end)
    final_end = end or timer.end or local_now()
    final_start = start or timer.start
    if final_start >= final_end:
        if start is not None or end is not None:
            require_order(final_start, final_end)
        final_start = final_end - timedelta(seconds=1)
    return final_start, final_end


async def _retire(store: ActivityStore, timer: AnyTimer, record: ActivityRecord) -> FinalizeResult:
    if not isinstance(timer, Timer):
        return FinalizeResult(record=record)
    try:
        await store.delete_timer(timer.id)
    except AssistantError as exc:
        warning = (
            f"Record #{record.id} was created but timer #{timer.id} "
            f"could not be deleted: {exc.message}"
        )
        logger.warning(warning)
        return FinalizeResult(record=record, timer_deleted=False, warning=warning)
    return FinalizeResult(record=record, timer_deleted=True)


async def finalize_as_feeding(
    store: ActivityStore,
    timer: TimerRef,
    feeding_type: Optional[str] = None,
    method: Optional[str] = None,
    amount: Union[str, float, None] = None,
    notes: Optional[str] = None,
    start: TimeInput = None,
    end: TimeInput = None,
) -> FinalizeResult:
    timer = await _current(store, timer)
    record_start, record_end = _extent(timer, start, end)
    payload = build(
        FeedingCreate,
        child=timer.child,
        start=record_start,
        end=record_end,
        duration=calculate_duration(record_start, record_end),
        type=normalize_feeding_type(feeding_type),
        method=normalize_feeding_method(method),
        amount=parse_amount(amount),
        notes=notes or "",
    )
    feeding = Feeding.model_validate(await store.create_feeding(dump_create(payload)))
    logger.info("Recorded %s feeding #%s (%s)", feeding.type, feeding.id, feeding.duration)
    return await _retire(store, timer, feeding)


async def finalize_as_sleep(
    store: ActivityStore,
    timer: TimerRef,
    nap: Optional[bool] = None,
    notes: Optional[str] = None,
    start: TimeInput = None,
    end: TimeInput = None,
) -> FinalizeResult:
    timer = await _current(store, timer)
    record_start, record_end = _extent(timer, start, end)
    payload = build(
        SleepCreate,
        child=timer.child,
        start=record_start,
        end=record_end,
        duration=calculate_duration(record_start, record_end),
        nap=nap,
        notes=notes or "",
    )
    sleep = Sleep.model_validate(await store.create_sleep(dump_create(payload)))
    logger.info("Recorded sleep #%s (%s)", sleep.id, sleep.duration)
    return await _retire(store, timer, sleep)


async def finalize_as_tummy_time(
    store: ActivityStore,
    timer: TimerRef,
    milestone: Optional[str] = None,
    notes: Optional[str] = None,
    start: TimeInput = None,
    end: TimeInput = None,
) -> FinalizeResult:
    timer = await _current(store, timer)
    record_start, record_end = _extent(timer, start, end)
    payload = build(
        TummyTimeCreate,
        child=timer.child,
        start=record_start,
        end=record_end,
        duration=calculate_duration(record_start, record_end),
        milestone=milestone or "",
        notes=notes or "",
    )
    tummy_time = TummyTime.model_validate(await store.create_tummy_time(dump_create(payload)))
    logger.info("Recorded tummy time #%s (%s)", tummy_time.id, tummy_time.duration)
    return await _retire(store, timer, tummy_time)


async def finalize_as_diaper(
    store: ActivityStore,
    timer: TimerRef,
    wet: Optional[bool] = None,
    solid: Optional[bool] = None,
    contents: Optional[str] = None,
    color: Optional[str] = None,
    amount: Union[str, float, None] = None,
    notes: Optional[str] = None,
    time: TimeInput = None,
) -> FinalizeResult:
    """
    Record a diaper change at the timer's end (or now). Explicit wet / solid
    flags win over a free-text ``contents`` description.
    """
    if wet is None and solid is None:
        wet, solid = normalize_diaper_contents(contents)
    wet, solid = bool(wet), bool(solid)

    require_contents(wet, solid)

    timer = await _current(store, timer)
    payload = build(
        DiaperCreate,
        child=timer.child,
        time=_coerce_time(time) or timer.end or local_now(),
        wet=wet,
        solid=solid,
        color=(color or "") if solid else "",
        amount=parse_amount(amount),
        notes=notes or "",
    )
    diaper = Diaper.model_validate(await store.create_diaper(dump_create(payload)))
    logger.info("Recorded diaper change #%s", diaper.id)
    return await _retire(store, timer, diaper)


# ── Cancellation ────────────────────────────────────────────────────────────


def cancel_confirmation(child_name: str, timer_name: Optional[str] = None) -> str:
    if timer_name:
        return f'Are you sure you want to delete the "{timer_name}" timer for {child_name}?'
    return f"Are you sure you want to delete the most recent timer for {child_name}?"


async def cancel_timer(
    store: ActivityStore,
    child_name: str,
    timer_name: Optional[str] = None,
    confirmed: bool = False,
) -> TimerCancelled:
    """
    Delete one of a child's active timers without recording anything.

    Without ``timer_name`` the most recently started timer is picked.
    Raises ConfirmationRequired until called with ``confirmed=True``.
    """
    child = await find_child(store, child_name)
    timers = [
        Timer.model_validate(t)
        for t in await store.list_active_timers()
        if t.get("child") == child.id
    ]
    if not timers:
        raise NotFoundError(f"No active timers found for {child_name}")

    if timer_name:
        wanted = timer_name.strip().lower()
        target = next((t for t in timers if (t.name or "").lower() == wanted), None)
        if target is None:
            raise NotFoundError(f"No active {timer_name} timer found for {child_name}")
    else:
        target = _sort_recent_first(timers)[0]

    if not confirmed:
        raise ConfirmationRequired(cancel_confirmation(child_name, timer_name))

    await store.delete_timer(target.id)
    message = f"Deleted {target.label} timer for {child.first_name}"
    logger.info(message)
    return TimerCancelled(
        timer_id=target.id,
        timer_name=target.label,
        child_name=child.first_name,
        message=message,
    )
