"""Application state owner: the in-memory collections and their CRUD operations.

Mutations apply in memory first, then the full post-mutation collection is handed
to the persistence gateway. A failed save raises ``PersistenceError`` but the
in-memory change is kept so nothing the user entered is lost.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from uuid import UUID, uuid4

from strongai.core.constants import ROUTINE_COPY_SUFFIX
from strongai.core.enums import MeasurementType
from strongai.core.errors import PersistenceError
from strongai.schemas.analytics import PersonalRecords
from strongai.schemas.exercise import Exercise, ExerciseCreate, ExerciseUpdate
from strongai.schemas.measurement import MeasurementCreate, MeasurementLog
from strongai.schemas.profile import UserProfile
from strongai.schemas.routine import Routine, RoutineCreate
from strongai.schemas.widget import WidgetConfiguration, WidgetCreate
from strongai.schemas.workout import WorkoutSession, WorkoutSet
from strongai.services import analytics
from strongai.services.persistence import DataSnapshot, PersistenceGateway

logger = logging.getLogger(__name__)


class FitnessStore:
    """Owns exercises, history, routines, measurements, widgets and the profile."""

    def __init__(self, gateway: PersistenceGateway, snapshot: DataSnapshot | None = None) -> None:
        snapshot = snapshot or DataSnapshot()
        self.gateway = gateway
        self.exercises: list[Exercise] = list(snapshot.exercises)
        # Finished sessions, newest first
        self.sessions: list[WorkoutSession] = list(snapshot.sessions)
        self.routines: list[Routine] = list(snapshot.routines)
        # Newest first
        self.measurements: list[MeasurementLog] = list(snapshot.measurements)
        self.widgets: list[WidgetConfiguration] = sorted(snapshot.widgets, key=lambda w: w.sort_order)
        self.profile: UserProfile | None = snapshot.profile

    @classmethod
    async def load(cls, gateway: PersistenceGateway) -> "FitnessStore":
        return cls(gateway, await gateway.load_all())

    async def _persist(self, domain: str, save: Callable[..., Awaitable[None]], payload) -> None:
        try:
            await save(payload)
        except Exception as e:
            logger.exception("Saving %s failed; keeping in-memory state", domain)
            raise PersistenceError(domain, e) from e

    # ── Exercises ────────────────────────────────────────────────────────

    def get_exercise(self, exercise_id: UUID) -> Exercise | None:
        return next((e for e in self.exercises if e.id == exercise_id), None)

    async def add_exercise(self, payload: ExerciseCreate) -> Exercise:
        exercise = Exercise(**payload.model_dump())
        self.exercises.append(exercise)
        await self._persist("exercises", self.gateway.save_exercises, list(self.exercises))
        return exercise

    async def update_exercise(self, exercise_id: UUID, payload: ExerciseUpdate) -> Exercise | None:
        """Edit a catalog entry. Historical sets keep the name they were logged with."""
        exercise = self.get_exercise(exercise_id)
        if exercise is None:
            return None
        for k, v in payload.model_dump(exclude_unset=True).items():
            setattr(exercise, k, v)
        await self._persist("exercises", self.gateway.save_exercises, list(self.exercises))
        return exercise

    async def delete_exercise(self, exercise_id: UUID) -> bool:
        before = len(self.exercises)
        self.exercises = [e for e in self.exercises if e.id != exercise_id]
        if len(self.exercises) == before:
            return False
        await self._persist("exercises", self.gateway.save_exercises, list(self.exercises))
        return True

    # ── Workout history ──────────────────────────────────────────────────

    def get_session(self, session_id: UUID) -> WorkoutSession | None:
        return next((s for s in self.sessions if s.id == session_id), None)

    async def save_sessions(self) -> None:
        await self._persist("sessions", self.gateway.save_sessions, list(self.sessions))

    async def add_session(self, session: WorkoutSession) -> None:
        self.sessions.insert(0, session)
        await self.save_sessions()

    async def update_session(self, session: WorkoutSession) -> bool:
        """Edit path for a finished session: replace the same id and re-persist."""
        for i, existing in enumerate(self.sessions):
            if existing.id == session.id:
                self.sessions[i] = session
                await self.save_sessions()
                return True
        return False

    async def delete_session(self, session_id: UUID) -> bool:
        before = len(self.sessions)
        self.sessions = [s for s in self.sessions if s.id != session_id]
        if len(self.sessions) == before:
            return False
        await self.save_sessions()
        return True

    def exercise_history(self, exercise_id: UUID) -> list[WorkoutSet]:
        return analytics.exercise_history(self.sessions, exercise_id)

    def exercise_records(self, exercise_id: UUID) -> PersonalRecords:
        return analytics.personal_records(self.sessions, exercise_id)

    # ── Routines ─────────────────────────────────────────────────────────

    def get_routine(self, routine_id: UUID) -> Routine | None:
        return next((r for r in self.routines if r.id == routine_id), None)

    async def add_routine(self, payload: RoutineCreate) -> Routine:
        routine = Routine(**payload.model_dump())
        self.routines.append(routine)
        await self._persist("routines", self.gateway.save_routines, list(self.routines))
        return routine

    async def update_routine(self, routine: Routine) -> bool:
        for i, existing in enumerate(self.routines):
            if existing.id == routine.id:
                self.routines[i] = routine
                await self._persist("routines", self.gateway.save_routines, list(self.routines))
                return True
        return False

    async def delete_routine(self, routine_id: UUID) -> bool:
        """Drop a routine together with its exercises and planned sets."""
        before = len(self.routines)
        self.routines = [r for r in self.routines if r.id != routine_id]
        if len(self.routines) == before:
            return False
        await self._persist("routines", self.gateway.save_routines, list(self.routines))
        return True

    async def duplicate_routine(self, routine_id: UUID) -> Routine | None:
        """Deep copy with fresh ids for the routine, its exercises and sets."""
        routine = self.get_routine(routine_id)
        if routine is None:
            return None
        copy = routine.model_copy(deep=True)
        copy.id = uuid4()
        copy.name = f"{routine.name}{ROUTINE_COPY_SUFFIX}"
        for ex in copy.exercises:
            ex.id = uuid4()
            for s in ex.sets:
                s.id = uuid4()
        self.routines.append(copy)
        await self._persist("routines", self.gateway.save_routines, list(self.routines))
        return copy

    # ── Measurements ─────────────────────────────────────────────────────

    async def add_measurement(self, payload: MeasurementCreate) -> MeasurementLog:
        log = MeasurementLog(**payload.model_dump())
        self.measurements.insert(0, log)
        await self._persist("measurements", self.gateway.save_measurements, list(self.measurements))
        return log

    async def delete_measurement(self, measurement_id: UUID) -> bool:
        before = len(self.measurements)
        self.measurements = [m for m in self.measurements if m.id != measurement_id]
        if len(self.measurements) == before:
            return False
        await self._persist("measurements", self.gateway.save_measurements, list(self.measurements))
        return True

    def measurements_by_type(self, measurement_type: MeasurementType) -> list[MeasurementLog]:
        return analytics.measurements_by_type(self.measurements, measurement_type)

    # ── Widgets ──────────────────────────────────────────────────────────

    async def add_widget(self, payload: WidgetCreate) -> WidgetConfiguration:
        widget = WidgetConfiguration(**payload.model_dump(), sort_order=len(self.widgets))
        self.widgets.append(widget)
        await self._persist("widgets", self.gateway.save_widgets, list(self.widgets))
        return widget

    async def remove_widget(self, widget_id: UUID) -> bool:
        before = len(self.widgets)
        self.widgets = [w for w in self.widgets if w.id != widget_id]
        if len(self.widgets) == before:
            return False
        await self._persist("widgets", self.gateway.save_widgets, list(self.widgets))
        return True

    async def reorder_widgets(self, widget_ids: list[UUID]) -> list[WidgetConfiguration] | None:
        """Apply a new order; ``widget_ids`` must name every widget exactly once."""
        by_id = {w.id: w for w in self.widgets}
        if len(widget_ids) != len(by_id) or set(widget_ids) != set(by_id):
            return None
        self.widgets = [by_id[wid].model_copy(update={"sort_order": i}) for i, wid in enumerate(widget_ids)]
        await self._persist("widgets", self.gateway.save_widgets, list(self.widgets))
        return self.widgets

    # ── Profile ──────────────────────────────────────────────────────────

    async def ensure_profile(self) -> UserProfile:
        """Create the default profile on first goal-setting action."""
        if self.profile is None:
            self.profile = UserProfile()
            await self._persist("profile", self.gateway.save_profile, self.profile)
        return self.profile

    async def update_profile(self, profile: UserProfile) -> UserProfile:
        # Singleton: keep the existing id
        if self.profile is not None:
            profile = profile.model_copy(update={"id": self.profile.id})
        self.profile = profile
        await self._persist("profile", self.gateway.save_profile, self.profile)
        return profile
