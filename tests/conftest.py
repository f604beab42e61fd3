"""Shared fixtures across tests: an in-memory stand-in for the Baby Buddy store."""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Optional

import pytest

from buddy_assistant.errors import NotFoundError
from buddy_assistant.services.store import DIAPERS, FEEDINGS, SLEEP, TUMMY_TIMES

# Field each kind is ordered on, most recent first
_ORDER = {FEEDINGS: "start", SLEEP: "end", DIAPERS: "time", TUMMY_TIMES: "end"}

ROSTER = [
    {"id": 1, "first_name": "Noah", "last_name": "Smith", "birth_date": "2025-03-10"},
    {"id": 2, "first_name": "Emma", "last_name": "Jones", "birth_date": "2024-06-01"},
    {"id": 3, "first_name": "Em", "last_name": "Brown", "birth_date": "2025-01-20"},
]


class FakeActivityStore:
    """
    Same coroutine interface as ``ActivityStore``, backed by dicts.

    Every call is appended to ``calls`` as ``(method, args)``. Put an
    exception in ``fail_on[method]`` to make that method raise it.
    """

    def __init__(self, children: Optional[list[dict]] = None):
        self.children = copy.deepcopy(ROSTER if children is None else children)
        self.timers: dict[int, dict] = {}
        self.records: dict[str, dict[int, dict]] = {
            FEEDINGS: {}, SLEEP: {}, DIAPERS: {}, TUMMY_TIMES: {},
        }
        self.calls: list[tuple[str, tuple]] = []
        self.fail_on: dict[str, Exception] = {}
        self._next_id = 100

    # ── Helpers for tests ────────────────────────────────────────────────

    def _call(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if method in self.fail_on:
            raise self.fail_on[method]

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def add_timer(
        self,
        child: int,
        name: str,
        start: datetime,
        end: Optional[datetime] = None,
        timer_id: Optional[int] = None,
    ) -> dict:
        timer_id = timer_id or self._new_id()
        self.timers[timer_id] = {
            "id": timer_id,
            "child": child,
            "name": name,
            "start": start.isoformat(),
            "end": end.isoformat() if end else None,
            "active": True,
        }
        return self.timers[timer_id]

    def add_record(self, kind: str, **fields: Any) -> dict:
        record_id = self._new_id()
        record = {"id": record_id, **fields}
        self.records[kind][record_id] = record
        return record

    def methods_called(self) -> list[str]:
        return [method for method, _ in self.calls]

    def _create(self, kind: str, payload: dict) -> dict:
        return self.add_record(kind, **payload)

    def _update(self, kind: str, record_id: int, fields: dict) -> dict:
        if record_id not in self.records[kind]:
            raise NotFoundError(f"PATCH /api/{kind}/{record_id}/: not found")
        self.records[kind][record_id].update(fields)
        return dict(self.records[kind][record_id])

    def _entries(self, kind: str, child_id: int) -> list[dict]:
        field = _ORDER[kind]
        entries = [r for r in self.records[kind].values() if r.get("child") == child_id]
        return sorted(entries, key=lambda r: r[field], reverse=True)

    # ── Store interface ──────────────────────────────────────────────────

    async def list_children(self) -> list[dict]:
        self._call("list_children")
        return copy.deepcopy(self.children)

    async def list_active_timers(self) -> list[dict]:
        self._call("list_active_timers")
        return [dict(t) for t in self.timers.values() if t["active"]]

    async def get_timer(self, timer_id: int) -> dict:
        self._call("get_timer", timer_id)
        if timer_id not in self.timers:
            raise NotFoundError(f"GET /api/timers/{timer_id}/: not found")
        return dict(self.timers[timer_id])

    async def create_timer(self, child_id: int, name: str, start: datetime) -> dict:
        self._call("create_timer", child_id, name, start)
        return dict(self.add_timer(child_id, name, start))

    async def update_timer(self, timer_id: int, fields: dict) -> dict:
        self._call("update_timer", timer_id, fields)
        if timer_id not in self.timers:
            raise NotFoundError(f"PATCH /api/timers/{timer_id}/: not found")
        self.timers[timer_id].update(fields)
        return dict(self.timers[timer_id])

    async def delete_timer(self, timer_id: int) -> None:
        self._call("delete_timer", timer_id)
        if self.timers.pop(timer_id, None) is None:
            raise NotFoundError(f"DELETE /api/timers/{timer_id}/: not found")

    async def create_feeding(self, payload: dict) -> dict:
        self._call("create_feeding", payload)
        return self._create(FEEDINGS, payload)

    async def create_sleep(self, payload: dict) -> dict:
        self._call("create_sleep", payload)
        return self._create(SLEEP, payload)

    async def create_diaper(self, payload: dict) -> dict:
        self._call("create_diaper", payload)
        return self._create(DIAPERS, payload)

    async def create_tummy_time(self, payload: dict) -> dict:
        self._call("create_tummy_time", payload)
        return self._create(TUMMY_TIMES, payload)

    async def update_feeding(self, feeding_id: int, fields: dict) -> dict:
        self._call("update_feeding", feeding_id, fields)
        return self._update(FEEDINGS, feeding_id, fields)

    async def update_sleep(self, sleep_id: int, fields: dict) -> dict:
        self._call("update_sleep", sleep_id, fields)
        return self._update(SLEEP, sleep_id, fields)

    async def update_diaper(self, diaper_id: int, fields: dict) -> dict:
        self._call("update_diaper", diaper_id, fields)
        return self._update(DIAPERS, diaper_id, fields)

    async def delete_feeding(self, feeding_id: int) -> None:
        self._call("delete_feeding", feeding_id)
        if self.records[FEEDINGS].pop(feeding_id, None) is None:
            raise NotFoundError(f"DELETE /api/feedings/{feeding_id}/: not found")

    async def query_today(self, kind: str, child_id: int, now: Optional[datetime] = None) -> list[dict]:
        self._call("query_today", kind, child_id)
        return self._entries(kind, child_id)

    async def query_recent(self, kind: str, child_id: int, limit: int = 10) -> list[dict]:
        self._call("query_recent", kind, child_id, limit)
        return self._entries(kind, child_id)[:limit]

    async def query_last(self, kind: str, child_id: int) -> dict | None:
        self._call("query_last", kind, child_id)
        entries = self._entries(kind, child_id)
        return entries[0] if entries else None


@pytest.fixture
def store() -> FakeActivityStore:
    return FakeActivityStore()
