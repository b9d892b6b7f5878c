"""User profile (goal settings) schemas."""

from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from strongai.core.constants import DEFAULT_WORKOUTS_PER_WEEK_GOAL
from strongai.core.enums import ActivityLevel, Gender, GoalType


class UserProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(default_factory=uuid4)
    gender: Gender = Gender.MALE
    birthday: date = date(1990, 1, 1)
    goal_type: GoalType = GoalType.MAINTAIN
    # lb per week
    target_weekly_rate: float = Field(0.5, ge=0, le=5)
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    workouts_per_week_goal: int = Field(DEFAULT_WORKOUTS_PER_WEEK_GOAL, ge=1, le=14)
