"""Endpoints for the child roster."""

from fastapi import APIRouter

from buddy_assistant.api.dependencies import StoreDep
from buddy_assistant.models.child import Child
from buddy_assistant.models.result import ChildOverview
from buddy_assistant.services import child_service, overview_service

router = APIRouter(prefix="/children", tags=["children"])


@router.get("", response_model=list[Child])
async def list_children(store: StoreDep) -> list[Child]:
    """Return the roster as Baby Buddy has it."""
    return await child_service.list_children(store)


@router.get("/{child_name}", response_model=Child)
async def resolve_child(child_name: str, store: StoreDep) -> Child:
    """Resolve a name fragment ("Emma", "emma smith", "em") to one child."""
    return await child_service.find_child(store, child_name)


@router.get("/{child_name}/overview", response_model=ChildOverview)
async def child_overview(child_name: str, store: StoreDep) -> ChildOverview:
    """Last entry of each activity and today's totals."""
    return await overview_service.get_child_overview(store, child_name)
