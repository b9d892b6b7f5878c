"""UserProfile model - singleton per installation."""

from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Date, Enum, Float, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from strongai.core.constants import DEFAULT_WORKOUTS_PER_WEEK_GOAL
from strongai.core.enums import ActivityLevel, Gender, GoalType
from strongai.db.base import Base


class UserProfileRecord(Base):
    """Goal settings used by the macro calculator and weekly consistency widget.

    At most one row exists; saving replaces it.
    """

    __tablename__ = "user_profile"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    birthday: Mapped[date] = mapped_column(Date, nullable=False)
    goal_type: Mapped[GoalType] = mapped_column(
        Enum(GoalType, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    target_weekly_rate: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    activity_level: Mapped[ActivityLevel] = mapped_column(
        Enum(ActivityLevel, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    workouts_per_week_goal: Mapped[int] = mapped_column(
        Integer, default=DEFAULT_WORKOUTS_PER_WEEK_GOAL, nullable=False
    )
