"""Endpoints for sleep entries."""

from fastapi import APIRouter, Query, status

from buddy_assistant.api.dependencies import StoreDep
from buddy_assistant.api.schemas import SleepEditRequest, SleepRequest
from buddy_assistant.models.sleep import Sleep
from buddy_assistant.services import sleep_service
from buddy_assistant.services.queries import Timeframe

router = APIRouter(prefix="/sleep", tags=["sleep"])


@router.post("", response_model=Sleep, status_code=status.HTTP_201_CREATED)
async def create_sleep(payload: SleepRequest, store: StoreDep) -> Sleep:
    return await sleep_service.create_sleep(
        store,
        payload.child_name,
        nap=payload.nap,
        notes=payload.notes,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )


@router.get("/{child_name}", response_model=None)
async def get_sleep(
    child_name: str,
    store: StoreDep,
    timeframe: Timeframe = Query("today"),
    limit: int = Query(10, ge=1, le=100),
):
    """Sleep for a child; `today` adds total duration and whether the child is asleep."""
    return await sleep_service.get_sleep(store, child_name, timeframe, limit)


@router.patch("/{sleep_id}", response_model=Sleep)
async def edit_sleep(sleep_id: int, payload: SleepEditRequest, store: StoreDep) -> Sleep:
    return await sleep_service.edit_sleep(
        store,
        sleep_id,
        child_name=payload.child_name,
        nap=payload.nap,
        notes=payload.notes,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
