"""Result shapes returned by the timer lifecycle and query tools."""

from typing import Optional, Union

from pydantic import BaseModel

from .diaper import Diaper
from .feeding import Feeding
from .sleep import Sleep
from .tummy_time import TummyTime

ActivityRecord = Union[Feeding, Sleep, Diaper, TummyTime]


class FinalizeResult(BaseModel):
    """A record created from a timer. ``warning`` is set when the timer outlived it."""
    record: ActivityRecord
    timer_deleted: bool = False
    warning: Optional[str] = None


class TimerCancelled(BaseModel):
    timer_id: int
    timer_name: str
    child_name: str
    message: str


class FeedingSummary(BaseModel):
    entries: list[Feeding]
    count: int
    total_amount: float


class SleepSummary(BaseModel):
    entries: list[Sleep]
    count: int
    total_minutes: int
    total_duration: str
    is_currently_asleep: bool


class TummyTimeSummary(BaseModel):
    entries: list[TummyTime]
    count: int
    total_minutes: int
    total_duration: str


class DiaperSummary(BaseModel):
    entries: list[Diaper]
    count: int
    wet_count: int
    solid_count: int
    total_amount: float


class ChildOverview(BaseModel):
    """Last entry of each kind plus today's totals for one child."""
    child_id: int
    name: str
    age: str
    last_feeding: Optional[Feeding] = None
    last_sleep: Optional[Sleep] = None
    last_diaper: Optional[Diaper] = None
    last_tummy_time: Optional[TummyTime] = None
    feedings_today: FeedingSummary
    sleep_today: SleepSummary
    diapers_today: DiaperSummary
    tummy_time_today: TummyTimeSummary
