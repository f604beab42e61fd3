from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TummyTimeBase(BaseModel):
    child: int
    start: datetime
    end: datetime
    duration: Optional[str] = None
    milestone: str = ""
    notes: Optional[str] = None


class TummyTimeCreate(TummyTimeBase):
    """Payload to record a tummy time session."""
    pass


class TummyTime(TummyTimeBase):
    """Full record returned by the store."""
    id: int
