from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


FeedingType = Literal["breast milk", "formula", "fortified breast milk", "solid food"]
FeedingMethod = Literal[
    "bottle", "left breast", "right breast", "both breasts", "parent fed", "self fed",
]


class FeedingBase(BaseModel):
    child: int
    start: datetime
    end: datetime
    duration: Optional[str] = None
    type: FeedingType
    method: FeedingMethod
    amount: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class FeedingCreate(FeedingBase):
    """Payload to record a feeding."""
    pass


class FeedingUpdate(BaseModel):
    """Payload to update a feeding: all fields are optional."""
    child: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    duration: Optional[str] = None
    type: Optional[FeedingType] = None
    method: Optional[FeedingMethod] = None
    amount: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class Feeding(FeedingBase):
    """Full record returned by the store."""
    id: int
