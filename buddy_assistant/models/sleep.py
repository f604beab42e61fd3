"""Pydantic models for sleep entries (naps and night sleep)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SleepBase(BaseModel):
    child: int
    start: datetime
    end: datetime
    duration: Optional[str] = None
    nap: Optional[bool] = None
    notes: Optional[str] = None


class SleepCreate(SleepBase):
    """Payload to record a sleep."""
    pass


class SleepUpdate(BaseModel):
    """Payload to update a sleep: all fields optional."""
    child: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    duration: Optional[str] = None
    nap: Optional[bool] = None
    notes: Optional[str] = None


class Sleep(SleepBase):
    """Full record returned by the store."""
    id: int
