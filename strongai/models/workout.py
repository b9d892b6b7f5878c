"""Workout session and set models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from strongai.core.enums import SetType
from strongai.db.base import Base


class WorkoutRecord(Base):
    """A finished workout session. Active sessions live in memory only."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_start_time", "start_time"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Newest first, matching the in-memory history order
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    sets: Mapped[list["WorkoutSetRecord"]] = relationship(
        "WorkoutSetRecord",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutSetRecord.set_order",
    )


class WorkoutSetRecord(Base):
    """One performed set. exercise_id is a weak reference; exercise_name is the durable copy."""

    __tablename__ = "workout_sets"
    __table_args__ = (
        Index("ix_workout_sets_workout_id", "workout_id"),
        Index("ix_workout_sets_exercise_id", "exercise_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    set_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    weight: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    type: Mapped[SetType] = mapped_column(
        Enum(SetType, values_callable=lambda e: [m.value for m in e]),
        default=SetType.NORMAL,
        nullable=False,
    )

    workout: Mapped["WorkoutRecord"] = relationship("WorkoutRecord", back_populates="sets")
