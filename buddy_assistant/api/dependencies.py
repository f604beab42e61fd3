"""Reusable FastAPI dependencies (activity store)."""

from typing import Annotated

from fastapi import Depends, Request

from buddy_assistant.services.store import ActivityStore


def store_dependency(request: Request) -> ActivityStore:
    """Provide a store bound to the application's shared HTTP client."""
    return ActivityStore(request.app.state.http_client)


StoreDep = Annotated[ActivityStore, Depends(store_dependency)]
