"""Timer models: persisted timers and synthetic placeholders."""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field


class Timer(BaseModel):
    """A timer row persisted by Baby Buddy."""
    id: int = Field(..., ge=1)
    child: Optional[int] = None
    name: Optional[str] = None
    start: datetime
    end: Optional[datetime] = None
    active: bool = True

    @property
    def label(self) -> str:
        return self.name or f"Timer #{self.id}"


class PlaceholderTimer(BaseModel):
    """A one-off timer with no backing record. Never deleted."""
    child: int
    name: str = "Timer"
    start: datetime
    end: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.name


AnyTimer = Union[Timer, PlaceholderTimer]


class TimerCreate(BaseModel):
    """Payload to start a timer."""
    child: int
    name: str = Field(..., min_length=1, max_length=255)
    start: datetime


class TimerUpdate(BaseModel):
    """Payload to edit a timer: all fields optional."""
    child: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    active: Optional[bool] = None
