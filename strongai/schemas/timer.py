"""Rest timer schemas."""

from pydantic import BaseModel, Field

from strongai.core.constants import REST_TIMER_ADD_SECONDS


class TimerState(BaseModel):
    is_running: bool
    remaining_time: int
    total_duration: int
    time_string: str
    progress: float


class TimerStartRequest(BaseModel):
    seconds: int = Field(..., gt=0)


class TimerAddRequest(BaseModel):
    seconds: int = Field(REST_TIMER_ADD_SECONDS, gt=0)
