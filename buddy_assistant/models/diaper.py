"""Pydantic models for diaper changes (wet / solid tracking)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class DiaperBase(BaseModel):
    child: int
    time: datetime
    wet: bool = False
    solid: bool = False
    color: str = ""
    amount: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class DiaperCreate(DiaperBase):
    """Payload to record a diaper change. At least one of wet / solid must be set."""

    @model_validator(mode="after")
    def _wet_or_solid(self) -> "DiaperCreate":
        if not (self.wet or self.solid):
            raise ValueError("At least one of wet or solid must be selected")
        return self


class DiaperUpdate(BaseModel):
    """Payload to update a diaper change: all fields optional."""
    child: Optional[int] = None
    time: Optional[datetime] = None
    wet: Optional[bool] = None
    solid: Optional[bool] = None
    color: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class Diaper(DiaperBase):
    """Full record returned by the store."""
    id: int
