"""Integration tests for the FastAPI app.

Strategy:
- Real app from main.py, with the store dependency overridden by the
  in-memory fake from conftest.
- No network: the Baby Buddy client is never used.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from buddy_assistant.api.dependencies import store_dependency
from buddy_assistant.errors import StoreUnavailableError
from main import app

pytestmark = pytest.mark.asyncio

T0 = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def client(store):
    """HTTP test client talking to the app through the fake store."""
    app.dependency_overrides[store_dependency] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# /health, /children
# ---------------------------------------------------------------------------

async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


async def test_list_children(client: AsyncClient):
    resp = await client.get("/children")
    assert resp.status_code == 200
    assert [c["first_name"] for c in resp.json()] == ["Noah", "Emma", "Em"]


async def test_resolve_child(client: AsyncClient):
    resp = await client.get("/children/emma jones")
    assert resp.status_code == 200
    assert resp.json()["id"] == 2


async def test_unknown_child_is_404(client: AsyncClient):
    resp = await client.get("/children/Zoe")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Child with name Zoe not found", "kind": "not_found"}


async def test_child_overview(client: AsyncClient):
    resp = await client.get("/children/Noah/overview")
    assert resp.status_code == 200
    assert resp.json()["feedings_today"]["count"] == 0


# ---------------------------------------------------------------------------
# /timers
# ---------------------------------------------------------------------------

async def test_timer_start_and_finalize(client: AsyncClient, store):
    resp = await client.post(
        "/timers", json={"child_name": "Noah", "name": "Feeding", "start_time": T0.isoformat()},
    )
    assert resp.status_code == 201
    timer_id = resp.json()["id"]

    resp = await client.post(
        f"/timers/{timer_id}/feeding",
        json={"type": "formula", "amount": "4", "end": (T0 + timedelta(minutes=20)).isoformat()},
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["record"]["duration"] == "00:20:00"
    assert data["record"]["amount"] == 4.0
    assert data["timer_deleted"] is True
    assert timer_id not in store.timers

    resp = await client.post(f"/timers/{timer_id}/feeding", json={})
    assert resp.status_code == 404


async def test_finalize_accepts_bare_clock_time(client: AsyncClient, store):
    store.add_timer(1, "Tummy Time", T0, timer_id=55)

    resp = await client.post(
        "/timers/55/tummy-time", json={"end": "00:00", "notes": "on the play mat"},
    )

    assert resp.status_code == 201
    record = resp.json()["record"]
    assert not record["duration"].startswith("-")
    assert record["notes"] == "on the play mat"


async def test_list_timers(client: AsyncClient, store):
    store.add_timer(1, "Feeding", T0)
    store.add_timer(2, "Sleep", T0)

    resp = await client.get("/timers", params={"child_name": "Emma"})
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()] == ["Sleep"]


async def test_finalize_diaper_without_contents_is_422(client: AsyncClient, store):
    store.add_timer(1, "Diaper", T0, timer_id=55)

    resp = await client.post("/timers/55/diaper", json={"wet": False, "solid": False})

    assert resp.status_code == 422
    assert "non_field_errors" in resp.json()["errors"]
    assert 55 in store.timers


async def test_cancel_timer_confirmation_flow(client: AsyncClient, store):
    store.add_timer(1, "Feeding", T0, timer_id=55)

    resp = await client.post("/timers/cancel", json={"child_name": "Noah"})
    assert resp.status_code == 409
    assert "Are you sure" in resp.json()["detail"]

    resp = await client.post("/timers/cancel", json={"child_name": "Noah", "confirmed": True})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Deleted Feeding timer for Noah"
    assert store.timers == {}


# ---------------------------------------------------------------------------
# Activity tools
# ---------------------------------------------------------------------------

async def test_create_and_query_feeding(client: AsyncClient):
    resp = await client.post(
        "/feedings", json={"child_name": "Noah", "type": "formula", "amount": 4},
    )
    assert resp.status_code == 201
    assert resp.json()["type"] == "formula"

    resp = await client.get("/feedings/Noah", params={"timeframe": "today"})
    assert resp.status_code == 200
    assert resp.json()["count"] == 1
    assert resp.json()["total_amount"] == 4.0


async def test_edit_and_delete_feeding(client: AsyncClient):
    resp = await client.post("/feedings", json={"child_name": "Noah"})
    feeding_id = resp.json()["id"]

    resp = await client.patch(f"/feedings/{feeding_id}", json={"method": "left"})
    assert resp.status_code == 200
    assert resp.json()["method"] == "left breast"

    resp = await client.patch(f"/feedings/{feeding_id}", json={})
    assert resp.status_code == 422

    resp = await client.patch(
        f"/feedings/{feeding_id}",
        json={"start_time": "2025-03-01T09:00:00Z", "end_time": "2025-03-01T08:30:00Z"},
    )
    assert resp.status_code == 422
    assert "end" in resp.json()["errors"]

    resp = await client.delete(f"/feedings/{feeding_id}")
    assert resp.status_code == 204


async def test_bad_timeframe_is_rejected(client: AsyncClient):
    resp = await client.get("/sleep/Noah", params={"timeframe": "yesterday"})
    assert resp.status_code == 422


async def test_diaper_and_tummy_time(client: AsyncClient):
    resp = await client.post("/diapers", json={"child_name": "Noah", "contents": "poop"})
    assert resp.status_code == 201
    assert resp.json()["solid"] is True

    resp = await client.post("/tummy-times", json={"child_name": "Noah"})
    assert resp.status_code == 201
    assert resp.json()["duration"] == "00:15:00"

    resp = await client.get("/diapers/Noah", params={"timeframe": "last"})
    assert resp.json()["solid"] is True


async def test_store_down_is_503(client: AsyncClient, store):
    store.fail_on["list_children"] = StoreUnavailableError("Baby Buddy is unreachable")

    resp = await client.post("/sleep", json={"child_name": "Noah"})

    assert resp.status_code == 503
    assert resp.json()["kind"] == "unavailable"
