from .child import Child
from .diaper import Diaper, DiaperCreate, DiaperUpdate
from .feeding import Feeding, FeedingCreate, FeedingUpdate
from .result import ActivityRecord, FinalizeResult, TimerCancelled
from .sleep import Sleep, SleepCreate, SleepUpdate
from .timer import AnyTimer, PlaceholderTimer, Timer, TimerCreate, TimerUpdate
from .tummy_time import TummyTime, TummyTimeCreate

__all__ = [
    "Child",
    "Diaper", "DiaperCreate", "DiaperUpdate",
    "Feeding", "FeedingCreate", "FeedingUpdate",
    "ActivityRecord", "FinalizeResult", "TimerCancelled",
    "Sleep", "SleepCreate", "SleepUpdate",
    "AnyTimer", "PlaceholderTimer", "Timer", "TimerCreate", "TimerUpdate",
    "TummyTime", "TummyTimeCreate",
]
