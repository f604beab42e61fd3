"""Healthcheck endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from buddy_assistant.services.store import BABYBUDDY_API_KEY, BABYBUDDY_URL

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    store_url: str
    store_authenticated: bool


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service status and which Baby Buddy instance it talks to."""
    return HealthResponse(
        status="ok",
        store_url=BABYBUDDY_URL,
        store_authenticated=bool(BABYBUDDY_API_KEY),
    )
