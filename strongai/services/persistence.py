"""Persistence gateway: load everything at start-up, save whole collections.

Each ``save_*`` replaces the entire stored collection for its domain inside one
transaction; there are no partial or delta updates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from strongai.models.exercise import ExerciseRecord
from strongai.models.measurement import MeasurementRecord
from strongai.models.profile import UserProfileRecord
from strongai.models.routine import RoutineExerciseRecord, RoutineRecord, RoutineSetRecord
from strongai.models.widget import WidgetRecord
from strongai.models.workout import WorkoutRecord, WorkoutSetRecord
from strongai.schemas.exercise import Exercise
from strongai.schemas.measurement import MeasurementLog
from strongai.schemas.profile import UserProfile
from strongai.schemas.routine import Routine, RoutineExercise, RoutineSet
from strongai.schemas.widget import WidgetConfiguration
from strongai.schemas.workout import WorkoutSession, WorkoutSet

logger = logging.getLogger(__name__)


@dataclass
class DataSnapshot:
    """Everything the core needs at start-up."""

    exercises: list[Exercise] = field(default_factory=list)
    sessions: list[WorkoutSession] = field(default_factory=list)
    routines: list[Routine] = field(default_factory=list)
    measurements: list[MeasurementLog] = field(default_factory=list)
    widgets: list[WidgetConfiguration] = field(default_factory=list)
    profile: UserProfile | None = None


class PersistenceGateway(Protocol):
    async def load_all(self) -> DataSnapshot: ...

    async def save_exercises(self, exercises: list[Exercise]) -> None: ...

    async def save_sessions(self, sessions: list[WorkoutSession]) -> None: ...

    async def save_routines(self, routines: list[Routine]) -> None: ...

    async def save_measurements(self, measurements: list[MeasurementLog]) -> None: ...

    async def save_widgets(self, widgets: list[WidgetConfiguration]) -> None: ...

    async def save_profile(self, profile: UserProfile | None) -> None: ...


# ── ORM <-> domain mapping ───────────────────────────────────────────────

def _session_to_record(session: WorkoutSession, position: int) -> WorkoutRecord:
    return WorkoutRecord(
        id=session.id,
        start_time=session.start_time,
        end_time=session.end_time,
        note=session.note,
        position=position,
        sets=[
            WorkoutSetRecord(
                id=s.id,
                exercise_id=s.exercise_id,
                exercise_name=s.exercise_name,
                set_order=s.index,
                weight=s.weight,
                reps=s.reps,
                rpe=s.rpe,
                is_completed=s.is_completed,
                type=s.type,
            )
            for s in session.sets
        ],
    )


def _session_from_record(row: WorkoutRecord) -> WorkoutSession:
    return WorkoutSession(
        id=row.id,
        start_time=row.start_time,
        end_time=row.end_time,
        note=row.note,
        sets=[
            WorkoutSet(
                id=s.id,
                exercise_id=s.exercise_id,
                exercise_name=s.exercise_name,
                index=s.set_order,
                weight=s.weight,
                reps=s.reps,
                rpe=s.rpe,
                is_completed=s.is_completed,
                type=s.type,
            )
            for s in row.sets
        ],
    )


def _routine_to_record(routine: Routine, position: int) -> RoutineRecord:
    return RoutineRecord(
        id=routine.id,
        name=routine.name,
        folder=routine.folder,
        position=position,
        exercises=[
            RoutineExerciseRecord(
                id=ex.id,
                exercise_id=ex.exercise_id,
                name=ex.name,
                order_in_routine=i,
                sets=[
                    RoutineSetRecord(
                        id=s.id, order_in_exercise=j, weight=s.weight, reps=s.reps, rpe=s.rpe
                    )
                    for j, s in enumerate(ex.sets)
                ],
            )
            for i, ex in enumerate(routine.exercises)
        ],
    )


def _routine_from_record(row: RoutineRecord) -> Routine:
    return Routine(
        id=row.id,
        name=row.name,
        folder=row.folder,
        exercises=[
            RoutineExercise(
                id=ex.id,
                exercise_id=ex.exercise_id,
                name=ex.name,
                sets=[RoutineSet.model_validate(s) for s in ex.sets],
            )
            for ex in row.exercises
        ],
    )


class SqlAlchemyGateway:
    """Gateway over the relational store (SQLite by default)."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self.session_maker = session_maker

    async def ping(self) -> None:
        async with self.session_maker() as db:
            await db.execute(text("SELECT 1"))

    async def load_all(self) -> DataSnapshot:
        async with self.session_maker() as db:
            exercises = (await db.execute(select(ExerciseRecord).order_by(ExerciseRecord.name))).scalars().all()
            workouts = (
                await db.execute(
                    select(WorkoutRecord)
                    .options(selectinload(WorkoutRecord.sets))
                    .order_by(WorkoutRecord.position)
                )
            ).scalars().all()
            routines = (
                await db.execute(
                    select(RoutineRecord)
                    .options(
                        selectinload(RoutineRecord.exercises).selectinload(RoutineExerciseRecord.sets)
                    )
                    .order_by(RoutineRecord.position)
                )
            ).scalars().all()
            measurements = (
                await db.execute(select(MeasurementRecord).order_by(MeasurementRecord.date.desc()))
            ).scalars().all()
            widgets = (
                await db.execute(select(WidgetRecord).order_by(WidgetRecord.sort_order))
            ).scalars().all()
            profile = (await db.execute(select(UserProfileRecord).limit(1))).scalar_one_or_none()

        snapshot = DataSnapshot(
            exercises=[Exercise.model_validate(e) for e in exercises],
            sessions=[_session_from_record(w) for w in workouts],
            routines=[_routine_from_record(r) for r in routines],
            measurements=[MeasurementLog.model_validate(m) for m in measurements],
            widgets=[WidgetConfiguration.model_validate(w) for w in widgets],
            profile=UserProfile.model_validate(profile) if profile is not None else None,
        )
        logger.info(
            "Loaded %d exercises, %d sessions, %d routines, %d measurements",
            len(snapshot.exercises),
            len(snapshot.sessions),
            len(snapshot.routines),
            len(snapshot.measurements),
        )
        return snapshot

    async def _replace(self, *tables, rows: list) -> None:
        """Delete every row of ``tables`` (children first) and insert ``rows``."""
        async with self.session_maker() as db:
            async with db.begin():
                for table in tables:
                    await db.execute(delete(table))
                db.add_all(rows)

    async def save_exercises(self, exercises: list[Exercise]) -> None:
        await self._replace(
            ExerciseRecord,
            rows=[ExerciseRecord(**e.model_dump()) for e in exercises],
        )

    async def save_sessions(self, sessions: list[WorkoutSession]) -> None:
        await self._replace(
            WorkoutSetRecord,
            WorkoutRecord,
            rows=[_session_to_record(s, i) for i, s in enumerate(sessions)],
        )

    async def save_routines(self, routines: list[Routine]) -> None:
        await self._replace(
            RoutineSetRecord,
            RoutineExerciseRecord,
            RoutineRecord,
            rows=[_routine_to_record(r, i) for i, r in enumerate(routines)],
        )

    async def save_measurements(self, measurements: list[MeasurementLog]) -> None:
        await self._replace(
            MeasurementRecord,
            rows=[MeasurementRecord(**m.model_dump()) for m in measurements],
        )

    async def save_widgets(self, widgets: list[WidgetConfiguration]) -> None:
        await self._replace(
            WidgetRecord,
            rows=[WidgetRecord(**w.model_dump()) for w in widgets],
        )

    async def save_profile(self, profile: UserProfile | None) -> None:
        rows = [UserProfileRecord(**profile.model_dump())] if profile is not None else []
        await self._replace(UserProfileRecord, rows=rows)
