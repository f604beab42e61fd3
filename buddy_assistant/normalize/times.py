"""Turn loosely specified times into aware datetimes.

Voice transcription gives us either a full ISO timestamp or a bare clock
time ("14:30"). Anything we cannot read returns None and the caller applies
its own default (usually "now", or "now" minus a fixed offset).
"""

from datetime import datetime
from typing import Optional


def local_now() -> datetime:
    """Current time as an aware datetime in the process-local timezone."""
    return datetime.now().astimezone()


def _as_local(value: datetime) -> datetime:
    # Naive datetimes are wall-clock times of the local zone
    return value.astimezone() if value.tzinfo is None else value


def _parse_iso(raw: str) -> Optional[datetime]:
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return _as_local(datetime.fromisoformat(raw))
    except ValueError:
        return None


def _parse_clock(raw: str, now: datetime) -> Optional[datetime]:
    parts = [p.strip() for p in raw.split(":")]
    if len(parts) not in (2, 3):
        return None
    if len(parts) == 2:
        parts.append("00")
    try:
        hours, minutes, seconds = (int(p) for p in parts)
        return now.replace(hour=hours, minute=minutes, second=seconds, microsecond=0)
    except ValueError:
        return None


def normalize_time(raw: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Normalize a raw time string.

    - None / blank → None
    - "2025-03-01T14:30:00Z" (has both "T" and "-") → parsed as-is
    - "14:30" or "14:30:15" → that clock time today, local timezone
    - anything else → None
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None

    if "T" in raw and "-" in raw:
        return _parse_iso(raw)
    if ":" in raw:
        return _parse_clock(raw, now or local_now())
    return None


def start_of_day(now: Optional[datetime] = None) -> datetime:
    """Local midnight of the current (or given) day."""
    now = now or local_now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)
