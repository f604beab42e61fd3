"""Child lookup: free-text name → one roster entry."""

from collections.abc import Callable, Iterable
from typing import Optional

from buddy_assistant.errors import NotFoundError
from buddy_assistant.models.child import Child
from buddy_assistant.services.store import ActivityStore

_RULES: list[Callable[[Child, str], bool]] = [
    lambda c, q: c.first_name.lower() == q,
    lambda c, q: q in c.first_name.lower(),
    lambda c, q: c.full_name.lower() == q,
    lambda c, q: q in c.full_name.lower(),
]


def resolve_child(roster: Iterable[Child], query: str) -> Child:
    """
    Return the first child in roster order that satisfies any matching rule.

    Rules, case-insensitive on the trimmed query: exact first name, first
    name contains the query, exact "first last", "first last" contains the
    query. No scoring; roster order decides ties.
    """
    q = (query or "").strip().lower()
    if q:
        for child in roster:
            if any(rule(child, q) for rule in _RULES):
                return child
    raise NotFoundError(f"Child with name {query} not found")


async def list_children(store: ActivityStore) -> list[Child]:
    """Fetch the roster. Not cached, rosters are small and change rarely."""
    return [Child.model_validate(c) for c in await store.list_children()]


async def find_child(store: ActivityStore, query: str) -> Child:
    """Fetch the roster and resolve ``query`` against it."""
    return resolve_child(await list_children(store), query)


async def find_child_id(store: ActivityStore, query: Optional[str]) -> Optional[int]:
    """Child id for an optional name, used by edit tools that may reassign a record."""
    if not query:
        return None
    child = await find_child(store, query)
    return child.id

