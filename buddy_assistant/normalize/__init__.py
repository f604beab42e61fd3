from .duration import calculate_duration, duration_to_minutes, format_minutes
from .enums import (
    DiaperContents,
    describe_contents,
    normalize_diaper_contents,
    normalize_feeding_method,
    normalize_feeding_type,
    parse_amount,
)
from .times import local_now, normalize_time, start_of_day

__all__ = [
    "calculate_duration", "duration_to_minutes", "format_minutes",
    "DiaperContents", "describe_contents", "normalize_diaper_contents",
    "normalize_feeding_method", "normalize_feeding_type", "parse_amount",
    "local_now", "normalize_time", "start_of_day",
]
