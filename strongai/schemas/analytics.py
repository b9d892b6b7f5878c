"""Calculator outputs."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from strongai.core.enums import MeasurementType, MeasurementUnit


class PersonalRecords(BaseModel):
    """Per-exercise records over completed sets. All zero when there is no history."""

    max_weight: float = 0.0
    estimated_one_rep_max: float = 0.0
    max_volume: float = 0.0
    best_session_volume: float = 0.0
    max_reps: int = 0


class WeeklyCount(BaseModel):
    week_start: date
    count: int


class WeeklyWorkouts(BaseModel):
    goal: int
    current_week_count: int
    weeks: list[WeeklyCount]


class MacroTargets(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int


class SessionSummary(BaseModel):
    session_id: UUID
    start_time: datetime
    duration_minutes: int
    duration: str
    total_volume: float
    completed_sets: int
    exercise_count: int


class MeasurementTrend(BaseModel):
    type: MeasurementType
    latest: float | None = None
    unit: MeasurementUnit | None = None
    change: float = 0.0
    values: list[float] = []


class WidgetValue(BaseModel):
    widget_id: UUID
    label: str
    value: str
