"""Async HTTP client for the Baby Buddy REST API (the activity store)."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Optional

import httpx

from buddy_assistant.errors import (
    NotFoundError,
    StoreError,
    StoreUnavailableError,
    StoreValidationError,
    normalize_errors,
)
from buddy_assistant.normalize.times import start_of_day

BABYBUDDY_URL = os.getenv("BABYBUDDY_URL", "http://localhost:8000")
BABYBUDDY_API_KEY = os.getenv("BABYBUDDY_API_KEY", "")
TIMEOUT = float(os.getenv("BABYBUDDY_TIMEOUT", "10"))  # seconds

FEEDINGS = "feedings"
SLEEP = "sleep"
DIAPERS = "changes"
TUMMY_TIMES = "tummy-times"

# Field each activity kind is ordered on, and the filter marking "today"
_KIND_FIELDS = {
    FEEDINGS: ("start", "start_min"),
    SLEEP: ("end", "end_min"),
    DIAPERS: ("time", "date_min"),
    TUMMY_TIMES: ("end", "end_min"),
}

logger = logging.getLogger(__name__)


def _results(data: Any) -> list[dict]:
    """Unwrap a paginated ``{"count": .., "results": [..]}`` body."""
    if isinstance(data, dict) and "results" in data:
        return data["results"]
    return data or []


def _body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class ActivityStore:
    """Thin wrapper over one ``httpx.AsyncClient`` pointed at Baby Buddy."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        payload: dict | None = None,
    ) -> Any:
        try:
            resp = await self._client.request(method, path, params=params, json=payload)
        except httpx.TransportError as exc:
            raise StoreUnavailableError(f"Baby Buddy is unreachable: {exc}") from exc

        if resp.status_code == 400:
            raise StoreValidationError(normalize_errors(_body(resp)))
        if resp.status_code == 404:
            raise NotFoundError(f"{method} {path}: not found")
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise StoreError(
                f"{method} {path} failed with HTTP {resp.status_code}: {_body(resp)}",
                status_code=resp.status_code,
            ) from exc

        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    async def _get(self, path: str, params: dict | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, payload: dict) -> dict:
        return await self._request("POST", path, payload=payload)

    async def _patch(self, path: str, payload: dict) -> dict:
        return await self._request("PATCH", path, payload=payload)

    async def _delete(self, path: str) -> None:
        await self._request("DELETE", path)

    # ── Children ──────────────────────────────────────────────────────────

    async def list_children(self) -> list[dict]:
        return _results(await self._get("/api/children/"))

    # ── Timers ────────────────────────────────────────────────────────────

    async def list_active_timers(self) -> list[dict]:
        return _results(await self._get("/api/timers/", params={"active": "true"}))

    async def get_timer(self, timer_id: int) -> dict:
        return await self._get(f"/api/timers/{timer_id}/")

    async def create_timer(self, child_id: int, name: str, start: datetime) -> dict:
        return await self._post("/api/timers/", {
            "child": child_id,
            "name": name,
            "start": start.isoformat(),
        })

    async def update_timer(self, timer_id: int, fields: dict) -> dict:
        return await self._patch(f"/api/timers/{timer_id}/", fields)

    async def delete_timer(self, timer_id: int) -> None:
        await self._delete(f"/api/timers/{timer_id}/")
        logger.info("Deleted timer %s", timer_id)

    # ── Activity records ──────────────────────────────────────────────────

    async def create_feeding(self, payload: dict) -> dict:
        return await self._post("/api/feedings/", payload)

    async def create_sleep(self, payload: dict) -> dict:
        return await self._post("/api/sleep/", payload)

    async def create_diaper(self, payload: dict) -> dict:
        return await self._post("/api/changes/", payload)

    async def create_tummy_time(self, payload: dict) -> dict:
        return await self._post("/api/tummy-times/", payload)

    async def update_feeding(self, feeding_id: int, fields: dict) -> dict:
        return await self._patch(f"/api/feedings/{feeding_id}/", fields)

    async def update_sleep(self, sleep_id: int, fields: dict) -> dict:
        return await self._patch(f"/api/sleep/{sleep_id}/", fields)

    async def update_diaper(self, diaper_id: int, fields: dict) -> dict:
        return await self._patch(f"/api/changes/{diaper_id}/", fields)

    async def delete_feeding(self, feeding_id: int) -> None:
        await self._delete(f"/api/feedings/{feeding_id}/")

    # ── Queries ───────────────────────────────────────────────────────────

    async def query_today(
        self, kind: str, child_id: int, now: Optional[datetime] = None
    ) -> list[dict]:
        """Entries of ``kind`` for a child since local midnight, most recent first."""
        order_field, since_param = _KIND_FIELDS[kind]
        params = {
            "child": child_id,
            since_param: start_of_day(now).isoformat(),
            "ordering": f"-{order_field}",
        }
        return _results(await self._get(f"/api/{kind}/", params=params))

    async def query_recent(self, kind: str, child_id: int, limit: int = 10) -> list[dict]:
        order_field, _ = _KIND_FIELDS[kind]
        params = {"child": child_id, "limit": limit, "ordering": f"-{order_field}"}
        return _results(await self._get(f"/api/{kind}/", params=params))

    async def query_last(self, kind: str, child_id: int) -> dict | None:
        entries = await self.query_recent(kind, child_id, limit=1)
        return entries[0] if entries else None


def create_client(
    base_url: str = BABYBUDDY_URL,
    api_key: str = BABYBUDDY_API_KEY,
    timeout: float = TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the authenticated HTTP client used by ``ActivityStore``."""
    headers = {"Accept": "application/json"}
    if api_key:
        headers["Authorization"] = f"Token {api_key}"
    return httpx.AsyncClient(
        base_url=base_url.rstrip("/"),
        headers=headers,
        timeout=timeout,
        transport=transport,
    )


@asynccontextmanager
async def open_store(**client_kwargs: Any) -> AsyncGenerator[ActivityStore, None]:
    """Context manager that provides a store with its own HTTP client."""
    async with create_client(**client_kwargs) as client:
        yield ActivityStore(client)
