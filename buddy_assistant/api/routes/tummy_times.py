"""Endpoints for tummy time."""

from fastapi import APIRouter, Query, status

from buddy_assistant.api.dependencies import StoreDep
from buddy_assistant.api.schemas import TummyTimeRequest
from buddy_assistant.models.tummy_time import TummyTime
from buddy_assistant.services import tummy_time_service
from buddy_assistant.services.queries import Timeframe

router = APIRouter(prefix="/tummy-times", tags=["tummy-times"])


@router.post("", response_model=TummyTime, status_code=status.HTTP_201_CREATED)
async def create_tummy_time(payload: TummyTimeRequest, store: StoreDep) -> TummyTime:
    return await tummy_time_service.create_tummy_time(
        store,
        payload.child_name,
        milestone=payload.milestone,
        notes=payload.notes,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )


@router.get("/{child_name}", response_model=None)
async def get_tummy_time(
    child_name: str,
    store: StoreDep,
    timeframe: Timeframe = Query("today"),
    limit: int = Query(10, ge=1, le=100),
):
    return await tummy_time_service.get_tummy_time(store, child_name, timeframe, limit)
