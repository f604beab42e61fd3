"""Unit tests for child_service (name resolution against the roster)."""

from datetime import date

import pytest

from buddy_assistant.errors import NotFoundError
from buddy_assistant.models.child import Child
from buddy_assistant.services.child_service import (
    find_child,
    find_child_id,
    list_children,
    resolve_child,
)


def _roster(*names: tuple[str, str]) -> list[Child]:
    return [
        Child(id=i, first_name=first, last_name=last, birth_date=date(2025, 1, 1))
        for i, (first, last) in enumerate(names, start=1)
    ]


def test_exact_first_name_case_insensitive():
    roster = _roster(("Noah", "Smith"), ("Emma", "Jones"))
    assert resolve_child(roster, "  EMMA ").id == 2


def test_first_name_substring():
    roster = _roster(("Noah", "Smith"), ("Emma", "Jones"))
    assert resolve_child(roster, "oa").id == 1


def test_full_name_exact_and_substring():
    roster = _roster(("Noah", "Smith"), ("Emma", "Jones"))
    assert resolve_child(roster, "emma jones").id == 2
    assert resolve_child(roster, "h smi").id == 1


def test_roster_order_decides_between_matches():
    roster = _roster(("Emma", ""), ("Em", ""))
    assert resolve_child(roster, "em").first_name == "Emma"


def test_resolution_is_deterministic():
    roster = _roster(("Emma", ""), ("Em", ""))
    assert {resolve_child(roster, "em").id for _ in range(5)} == {1}


def test_no_match_raises():
    roster = _roster(("Noah", "Smith"))
    with pytest.raises(NotFoundError, match="Child with name Zoe not found"):
        resolve_child(roster, "Zoe")


def test_empty_query_never_matches():
    roster = _roster(("Noah", "Smith"))
    with pytest.raises(NotFoundError):
        resolve_child(roster, "   ")


def test_empty_roster():
    with pytest.raises(NotFoundError):
        resolve_child([], "Noah")


def test_age_description():
    child = Child(id=1, first_name="Noah", birth_date=date(2023, 1, 15))
    assert child.age_description(date(2023, 2, 15)) == "1 month"
    assert child.age_description(date(2023, 12, 14)) == "10 months"
    assert child.age_description(date(2025, 4, 20)) == "2 years, 3 months"
    assert child.age_description(date(2026, 1, 15)) == "3 years"


async def test_list_children(store):
    children = await list_children(store)
    assert [c.first_name for c in children] == ["Noah", "Emma", "Em"]
    assert children[0].full_name == "Noah Smith"


async def test_find_child_fetches_roster(store):
    child = await find_child(store, "noah")
    assert child.id == 1
    assert store.methods_called() == ["list_children"]


async def test_find_child_id_without_query_skips_store(store):
    assert await find_child_id(store, None) is None
    assert store.calls == []
