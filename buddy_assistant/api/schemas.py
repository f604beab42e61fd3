"""Request bodies for the tool endpoints: raw, loosely typed user input."""

from typing import Optional, Union

from pydantic import BaseModel, Field

Amount = Union[float, str, None]


class TimerStartRequest(BaseModel):
    child_name: str
    name: Optional[str] = None
    start_time: Optional[str] = None


class TimerEditRequest(BaseModel):
    child_name: Optional[str] = None
    name: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class TimerRenameRequest(BaseModel):
    name: str


class TimerRescheduleRequest(BaseModel):
    start_time: str


class TimerCancelRequest(BaseModel):
    child_name: str
    timer_name: Optional[str] = None
    confirmed: bool = False


class FinalizeFeedingRequest(BaseModel):
    type: Optional[str] = None
    method: Optional[str] = None
    amount: Amount = None
    notes: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


class FinalizeSleepRequest(BaseModel):
    nap: Optional[bool] = None
    notes: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


class FinalizeTummyTimeRequest(BaseModel):
    milestone: Optional[str] = None
    notes: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


class FinalizeDiaperRequest(BaseModel):
    wet: Optional[bool] = None
    solid: Optional[bool] = None
    contents: Optional[str] = None
    color: Optional[str] = None
    amount: Amount = None
    notes: Optional[str] = None
    time: Optional[str] = None


class FeedingRequest(BaseModel):
    child_name: str
    type: Optional[str] = Field(None, description="Breast Milk, Formula, Fortified Breast Milk, Solid Food")
    method: Optional[str] = Field("bottle", description="Bottle, left breast, right breast, both breasts")
    amount: Amount = None
    notes: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class FeedingEditRequest(BaseModel):
    child_name: Optional[str] = None
    type: Optional[str] = None
    method: Optional[str] = None
    amount: Amount = None
    notes: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class SleepRequest(BaseModel):
    child_name: str
    nap: Optional[bool] = None
    notes: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class SleepEditRequest(BaseModel):
    child_name: Optional[str] = None
    nap: Optional[bool] = None
    notes: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class TummyTimeRequest(BaseModel):
    child_name: str
    milestone: Optional[str] = None
    notes: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class DiaperRequest(BaseModel):
    child_name: str
    contents: Optional[str] = Field(None, description="wet, solid or both")
    wet: Optional[bool] = None
    solid: Optional[bool] = None
    color: Optional[str] = None
    amount: Amount = None
    notes: Optional[str] = None
    time: Optional[str] = None


class DiaperEditRequest(BaseModel):
    child_name: Optional[str] = None
    wet: Optional[bool] = None
    solid: Optional[bool] = None
    color: Optional[str] = None
    amount: Amount = None
    notes: Optional[str] = None
    time: Optional[str] = None
