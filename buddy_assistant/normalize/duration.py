"""Duration text in the ``HH:MM:SS`` encoding Baby Buddy uses."""

from datetime import datetime


def calculate_duration(start: datetime, end: datetime) -> str:
    """
    Elapsed time between ``start`` and ``end`` as zero-padded ``HH:MM:SS``.

    Sub-second remainders are truncated. An ``end`` before ``start`` is not
    clamped: the magnitude is rendered with a leading ``-`` (``-00:00:30``).
    """
    total = int((end - start).total_seconds())
    sign = "-" if total < 0 else ""
    minutes, seconds = divmod(abs(total), 60)
    hours, minutes = divmod(minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def duration_to_minutes(duration: str | None) -> int:
    """Whole minutes of an ``HH:MM:SS`` string; seconds are ignored."""
    if not duration:
        return 0
    parts = duration.split(":")
    if len(parts) < 2:
        return 0
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        return 0
    return hours * 60 + minutes


def format_minutes(total_minutes: int) -> str:
    """``95`` → ``"1h 35m"``, ``20`` → ``"20m"``."""
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m" if hours > 0 else f"{minutes}m"
