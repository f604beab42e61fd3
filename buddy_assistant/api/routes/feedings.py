"""Endpoints for feedings."""

from fastapi import APIRouter, Query, status

from buddy_assistant.api.dependencies import StoreDep
from buddy_assistant.api.schemas import FeedingEditRequest, FeedingRequest
from buddy_assistant.models.feeding import Feeding
from buddy_assistant.services import feeding_service
from buddy_assistant.services.queries import Timeframe

router = APIRouter(prefix="/feedings", tags=["feedings"])


@router.post("", response_model=Feeding, status_code=status.HTTP_201_CREATED)
async def create_feeding(payload: FeedingRequest, store: StoreDep) -> Feeding:
    """Record a feeding. Type and method are normalized from free text."""
    return await feeding_service.create_feeding(
        store,
        payload.child_name,
        feeding_type=payload.type,
        method=payload.method,
        amount=payload.amount,
        notes=payload.notes,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )


@router.get("/{child_name}", response_model=None)
async def get_feedings(
    child_name: str,
    store: StoreDep,
    timeframe: Timeframe = Query("today"),
    limit: int = Query(10, ge=1, le=100),
):
    """
    Feedings for a child.

    - `today`: today's feedings with count and total amount
    - `recent`: the `limit` most recent feedings
    - `last`: the last feeding (or null)
    """
    return await feeding_service.get_feedings(store, child_name, timeframe, limit)


@router.patch("/{feeding_id}", response_model=Feeding)
async def edit_feeding(feeding_id: int, payload: FeedingEditRequest, store: StoreDep) -> Feeding:
    """Update a feeding (all fields optional)."""
    return await feeding_service.edit_feeding(
        store,
        feeding_id,
        child_name=payload.child_name,
        feeding_type=payload.type,
        method=payload.method,
        amount=payload.amount,
        notes=payload.notes,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )


@router.delete("/{feeding_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feeding(feeding_id: int, store: StoreDep) -> None:
    """Delete a feeding record."""
    await feeding_service.delete_feeding(store, feeding_id)
