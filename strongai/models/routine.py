"""Routine templates: routine -> exercises -> planned sets."""

from __future__ import annotations

import uuid

from sqlalchemy import Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from strongai.core.constants import DEFAULT_ROUTINE_FOLDER
from strongai.db.base import Base


class RoutineRecord(Base):
    """Named, reusable workout template."""

    __tablename__ = "routines"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    folder: Mapped[str] = mapped_column(String(255), default=DEFAULT_ROUTINE_FOLDER, nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    exercises: Mapped[list["RoutineExerciseRecord"]] = relationship(
        "RoutineExerciseRecord",
        back_populates="routine",
        cascade="all, delete-orphan",
        order_by="RoutineExerciseRecord.order_in_routine",
    )


class RoutineExerciseRecord(Base):
    """Exercise slot in a routine, with its cached name."""

    __tablename__ = "routine_exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    routine_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("routines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    order_in_routine: Mapped[int] = mapped_column(Integer, default=0)

    routine: Mapped["RoutineRecord"] = relationship("RoutineRecord", back_populates="exercises")
    sets: Mapped[list["RoutineSetRecord"]] = relationship(
        "RoutineSetRecord",
        back_populates="routine_exercise",
        cascade="all, delete-orphan",
        order_by="RoutineSetRecord.order_in_exercise",
    )


class RoutineSetRecord(Base):
    """Planned set (no completion flag, no timestamp)."""

    __tablename__ = "routine_sets"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    routine_exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("routine_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order_in_exercise: Mapped[int] = mapped_column(Integer, default=0)
    weight: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)

    routine_exercise: Mapped["RoutineExerciseRecord"] = relationship(
        "RoutineExerciseRecord", back_populates="sets"
    )
