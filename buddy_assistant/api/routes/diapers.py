"""Endpoints for diaper changes (wet / solid tracking)."""

from fastapi import APIRouter, Query, status

from buddy_assistant.api.dependencies import StoreDep
from buddy_assistant.api.schemas import DiaperEditRequest, DiaperRequest
from buddy_assistant.models.diaper import Diaper
from buddy_assistant.services import diaper_service
from buddy_assistant.services.queries import Timeframe

router = APIRouter(prefix="/diapers", tags=["diapers"])


@router.post("", response_model=Diaper, status_code=status.HTTP_201_CREATED)
async def create_diaper(payload: DiaperRequest, store: StoreDep) -> Diaper:
    """Record a diaper change. Two separately measured contents need two calls."""
    return await diaper_service.create_diaper(
        store,
        payload.child_name,
        contents=payload.contents,
        wet=payload.wet,
        solid=payload.solid,
        color=payload.color,
        amount=payload.amount,
        notes=payload.notes,
        time=payload.time,
    )


@router.get("/{child_name}", response_model=None)
async def get_diapers(
    child_name: str,
    store: StoreDep,
    timeframe: Timeframe = Query("today"),
    limit: int = Query(10, ge=1, le=100),
):
    return await diaper_service.get_diapers(store, child_name, timeframe, limit)


@router.patch("/{diaper_id}", response_model=Diaper)
async def edit_diaper(diaper_id: int, payload: DiaperEditRequest, store: StoreDep) -> Diaper:
    """Update a diaper change (all fields optional)."""
    return await diaper_service.edit_diaper(
        store,
        diaper_id,
        child_name=payload.child_name,
        wet=payload.wet,
        solid=payload.solid,
        color=payload.color,
        amount=payload.amount,
        notes=payload.notes,
        time=payload.time,
    )
