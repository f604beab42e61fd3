"""Endpoints for timers: start, edit, finalize into a record, cancel."""

from typing import Optional

from fastapi import APIRouter, Query, status

from buddy_assistant.api.dependencies import StoreDep
from buddy_assistant.api.schemas import (
    FinalizeDiaperRequest,
    FinalizeFeedingRequest,
    FinalizeSleepRequest,
    FinalizeTummyTimeRequest,
    TimerCancelRequest,
    TimerEditRequest,
    TimerRenameRequest,
    TimerRescheduleRequest,
    TimerStartRequest,
)
from buddy_assistant.models.result import FinalizeResult, TimerCancelled
from buddy_assistant.models.timer import Timer
from buddy_assistant.services import timer_service

router = APIRouter(prefix="/timers", tags=["timers"])


@router.get("", response_model=list[Timer])
async def list_timers(
    store: StoreDep,
    child_name: Optional[str] = Query(None, description="Only this child's timers"),
) -> list[Timer]:
    """Active timers, most recent first."""
    return await timer_service.list_timers(store, child_name)


@router.post("", response_model=Timer, status_code=status.HTTP_201_CREATED)
async def start_timer(payload: TimerStartRequest, store: StoreDep) -> Timer:
    """Start a timer. `start_time` accepts ISO timestamps or bare `HH:MM`."""
    return await timer_service.start_timer(
        store, payload.child_name, payload.name, payload.start_time
    )


@router.patch("/{timer_id}", response_model=Timer)
async def edit_timer(timer_id: int, payload: TimerEditRequest, store: StoreDep) -> Timer:
    """Edit a timer. Giving an end time stops it."""
    return await timer_service.edit_timer(
        store,
        timer_id,
        child_name=payload.child_name,
        name=payload.name,
        start=payload.start_time,
        end=payload.end_time,
    )


@router.post("/{timer_id}/rename", response_model=Timer)
async def rename_timer(timer_id: int, payload: TimerRenameRequest, store: StoreDep) -> Timer:
    return await timer_service.rename_timer(store, timer_id, payload.name)


@router.post("/{timer_id}/reschedule", response_model=Timer)
async def reschedule_timer(
    timer_id: int, payload: TimerRescheduleRequest, store: StoreDep
) -> Timer:
    return await timer_service.reschedule_timer(store, timer_id, payload.start_time)


@router.post("/{timer_id}/feeding", response_model=FinalizeResult, status_code=status.HTTP_201_CREATED)
async def finalize_feeding(
    timer_id: int, payload: FinalizeFeedingRequest, store: StoreDep
) -> FinalizeResult:
    """
    Turn a timer into a feeding and delete the timer.

    `start` / `end` override the timer and accept ISO timestamps or bare `HH:MM`.
    """
    return await timer_service.finalize_as_feeding(
        store,
        timer_id,
        feeding_type=payload.type,
        method=payload.method,
        amount=payload.amount,
        notes=payload.notes,
        start=payload.start,
        end=payload.end,
    )


@router.post("/{timer_id}/sleep", response_model=FinalizeResult, status_code=status.HTTP_201_CREATED)
async def finalize_sleep(
    timer_id: int, payload: FinalizeSleepRequest, store: StoreDep
) -> FinalizeResult:
    return await timer_service.finalize_as_sleep(
        store, timer_id, nap=payload.nap, notes=payload.notes, start=payload.start, end=payload.end,
    )


@router.post("/{timer_id}/tummy-time", response_model=FinalizeResult, status_code=status.HTTP_201_CREATED)
async def finalize_tummy_time(
    timer_id: int, payload: FinalizeTummyTimeRequest, store: StoreDep
) -> FinalizeResult:
    return await timer_service.finalize_as_tummy_time(
        store,
        timer_id,
        milestone=payload.milestone,
        notes=payload.notes,
        start=payload.start,
        end=payload.end,
    )


@router.post("/{timer_id}/diaper", response_model=FinalizeResult, status_code=status.HTTP_201_CREATED)
async def finalize_diaper(
    timer_id: int, payload: FinalizeDiaperRequest, store: StoreDep
) -> FinalizeResult:
    return await timer_service.finalize_as_diaper(
        store,
        timer_id,
        wet=payload.wet,
        solid=payload.solid,
        contents=payload.contents,
        color=payload.color,
        amount=payload.amount,
        notes=payload.notes,
        time=payload.time,
    )


@router.post("/cancel", response_model=TimerCancelled)
async def cancel_timer(payload: TimerCancelRequest, store: StoreDep) -> TimerCancelled:
    """
    Delete a timer without recording anything.

    Answers 409 with the confirmation prompt until `confirmed` is true.
    """
    return await timer_service.cancel_timer(
        store, payload.child_name, payload.timer_name, confirmed=payload.confirmed
    )
