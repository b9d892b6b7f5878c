"""Active workout session state machine.

Idle -> Active -> Finished (persisted, completed sets only) | Discarded (dropped).
There is at most one active session and this manager is its only owner. Calls
that are invalid in the current state are no-ops: they return ``None``, record a
``SessionIssue`` in ``last_issue`` and log a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from uuid import UUID

from pydantic import ValidationError

from strongai.core.enums import SetType
from strongai.core.errors import ErrorKind, PersistenceError, SessionIssue
from strongai.schemas.routine import Routine
from strongai.schemas.workout import (
    ActiveSessionView,
    FinishOutcome,
    WorkoutSession,
    WorkoutSet,
    WorkoutSetUpdate,
)
from strongai.services.analytics import format_elapsed
from strongai.services.rest_timer import RestTimer
from strongai.services.store import FitnessStore

logger = logging.getLogger(__name__)

NO_ACTIVE_SESSION = "no active session"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def working_set_number(sets: list[WorkoutSet], set_id: UUID) -> int | None:
    """Number shown next to a set: non-warmup sets up to and including it, in position order.

    ``sets`` must be one exercise's sets sorted by index.
    """
    count = 0
    for s in sets:
        if s.type != SetType.WARMUP:
            count += 1
        if s.id == set_id:
            return count
    return None


def materialize_routine(routine: Routine, start_index: int = 0) -> list[WorkoutSet]:
    """One incomplete Normal set per planned set, indexed in routine traversal order."""
    sets: list[WorkoutSet] = []
    index = start_index
    for routine_exercise in routine.exercises:
        for planned in routine_exercise.sets:
            sets.append(
                WorkoutSet(
                    exercise_id=routine_exercise.exercise_id,
                    exercise_name=routine_exercise.name,
                    index=index,
                    weight=planned.weight,
                    reps=planned.reps,
                    rpe=planned.rpe,
                )
            )
            index += 1
    return sets


class ActiveSessionManager:
    """Owns "the" active session, its per-exercise rest settings and the rest timer."""

    def __init__(
        self,
        store: FitnessStore,
        timer: RestTimer | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.store = store
        self.timer = timer
        self._now = now or _utcnow
        self._session: WorkoutSession | None = None
        # Rest seconds per exercise for the running session; missing means off
        self._rest_durations: dict[UUID, int] = {}
        self.last_issue: SessionIssue | None = None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def active_session(self) -> WorkoutSession | None:
        return self._session

    def rest_duration(self, exercise_id: UUID) -> int | None:
        return self._rest_durations.get(exercise_id)

    def working_set_number(self, set_id: UUID) -> int | None:
        if self._session is None:
            return None
        target = self._find_set(self._session, set_id)
        if target is None:
            return None
        return working_set_number(self._session.sets_for(target.exercise_id), set_id)

    def elapsed_time_string(self) -> str:
        if self._session is None:
            return format_elapsed(0)
        return format_elapsed(int((self._now() - self._session.start_time).total_seconds()))

    def view(self) -> ActiveSessionView | None:
        """Read-only snapshot for the UI."""
        if self._session is None:
            return None
        numbers: dict[UUID, int] = {}
        for exercise_id in self._session.exercise_ids():
            ordered = self._session.sets_for(exercise_id)
            for s in ordered:
                numbers[s.id] = working_set_number(ordered, s.id) or 0
        return ActiveSessionView(
            session=self._session.model_copy(deep=True),
            elapsed=self.elapsed_time_string(),
            working_set_numbers=numbers,
            rest_durations=dict(self._rest_durations),
        )

    # ── Internals ────────────────────────────────────────────────────────

    def _report(self, kind: ErrorKind, message: str) -> None:
        self.last_issue = SessionIssue(kind=kind, message=message)
        logger.warning("Session %s: %s", kind.value, message)

    def _require_active(self, action: str) -> WorkoutSession | None:
        self.last_issue = None
        if self._session is None:
            self._report(ErrorKind.INVALID_STATE, f"cannot {action}: {NO_ACTIVE_SESSION}")
        return self._session

    @staticmethod
    def _find_set(session: WorkoutSession, set_id: UUID) -> WorkoutSet | None:
        return next((s for s in session.sets if s.id == set_id), None)

    def _get_set(self, session: WorkoutSession, set_id: UUID) -> WorkoutSet | None:
        target = self._find_set(session, set_id)
        if target is None:
            self._report(ErrorKind.NOT_FOUND, f"set {set_id} is not in the active session")
        return target

    @staticmethod
    def _next_index(session: WorkoutSession) -> int:
        return max((s.index for s in session.sets), default=-1) + 1

    def _on_set_completed(self, completed: WorkoutSet) -> None:
        duration = self._rest_durations.get(completed.exercise_id)
        if duration and self.timer is not None:
            self.timer.start(duration)

    def _close(self) -> None:
        self._session = None
        self._rest_durations.clear()
        if self.timer is not None:
            self.timer.stop()

    # ── Transitions ──────────────────────────────────────────────────────

    def start_session(self, routine: Routine | None = None) -> WorkoutSession | None:
        """Idle -> Active. Ignored (state unchanged) while a session is already active."""
        self.last_issue = None
        if self._session is not None:
            self._report(ErrorKind.INVALID_STATE, "a session is already active")
            return None
        session = WorkoutSession(start_time=self._now())
        if routine is not None:
            session.sets = materialize_routine(routine)
        self._session = session
        logger.info(
            "Started session %s%s",
            session.id,
            f" from routine {routine.name!r}" if routine is not None else "",
        )
        return session

    async def finish_session(self, note: str | None = None) -> FinishOutcome | None:
        """Active -> Finished.

        The in-memory transition completes before the gateway is called; a failed
        save is reported in the outcome and never rolled back.
        """
        session = self._require_active("finish session")
        if session is None:
            return None
        session.end_time = self._now()
        if note is not None:
            session.note = note
        dropped = sum(1 for s in session.sets if not s.is_completed)
        session.sets = [s for s in session.sets if s.is_completed]
        self._close()
        logger.info(
            "Finished session %s with %d sets (%d incomplete dropped)",
            session.id,
            len(session.sets),
            dropped,
        )
        try:
            await self.store.add_session(session)
        except PersistenceError as e:
            self._report(ErrorKind.PERSISTENCE, str(e))
            return FinishOutcome(session=session, persisted=False, error=str(e))
        return FinishOutcome(session=session)

    def discard_session(self) -> bool:
        """Active -> Discarded; nothing is persisted. A second call is a no-op."""
        self.last_issue = None
        if self._session is None:
            return False
        logger.info("Discarded session %s", self._session.id)
        self._close()
        return True

    # ── Mutators (Active only) ───────────────────────────────────────────

    def add_exercise(self, exercise_id: UUID) -> WorkoutSet | None:
        """Add an exercise with exactly one empty set."""
        session = self._require_active("add exercise")
        if session is None:
            return None
        exercise = self.store.get_exercise(exercise_id)
        if exercise is None:
            self._report(ErrorKind.NOT_FOUND, f"unknown exercise {exercise_id}")
            return None
        new_set = WorkoutSet(
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            index=self._next_index(session),
        )
        session.sets.append(new_set)
        return new_set

    def remove_exercise(self, exercise_id: UUID) -> list[WorkoutSet] | None:
        """Delete every set of the exercise from the active session; returns the removed sets."""
        session = self._require_active("remove exercise")
        if session is None:
            return None
        removed = [s for s in session.sets if s.exercise_id == exercise_id]
        session.sets = [s for s in session.sets if s.exercise_id != exercise_id]
        self._rest_durations.pop(exercise_id, None)
        return removed

    def add_set(self, exercise_id: UUID) -> WorkoutSet | None:
        """Append a set, defaulting weight/reps to the exercise's previous set."""
        session = self._require_active("add set")
        if session is None:
            return None
        existing = session.sets_for(exercise_id)
        previous = existing[-1] if existing else None
        if previous is not None:
            name = previous.exercise_name
        else:
            exercise = self.store.get_exercise(exercise_id)
            if exercise is None:
                self._report(ErrorKind.NOT_FOUND, f"unknown exercise {exercise_id}")
                return None
            name = exercise.name
        new_set = WorkoutSet(
            exercise_id=exercise_id,
            exercise_name=name,
            index=self._next_index(session),
            weight=previous.weight if previous else 0.0,
            reps=previous.reps if previous else 0,
        )
        session.sets.append(new_set)
        return new_set

    def update_set(
        self, set_id: UUID, changes: WorkoutSetUpdate | dict | None = None, **fields
    ) -> WorkoutSet | None:
        """Apply edits; invalid values are rejected and the last valid values kept."""
        session = self._require_active("update set")
        if session is None:
            return None
        target = self._get_set(session, set_id)
        if target is None:
            return None
        try:
            update = (
                changes
                if isinstance(changes, WorkoutSetUpdate)
                else WorkoutSetUpdate.model_validate(fields if changes is None else changes)
            )
        except ValidationError as e:
            self._report(ErrorKind.INVALID_INPUT, f"rejected set values: {e.errors()[0]['msg']}")
            return None
        data = update.model_dump(exclude_unset=True)
        # None for a required field means "not provided"; only rpe may be cleared
        data = {k: v for k, v in data.items() if v is not None or k == "rpe"}
        becomes_completed = data.get("is_completed") is True and not target.is_completed
        for k, v in data.items():
            setattr(target, k, v)
        if becomes_completed:
            self._on_set_completed(target)
        return target

    def delete_set(self, set_id: UUID) -> WorkoutSet | None:
        session = self._require_active("delete set")
        if session is None:
            return None
        target = self._get_set(session, set_id)
        if target is None:
            return None
        session.sets = [s for s in session.sets if s.id != set_id]
        return target

    def toggle_set_completion(self, set_id: UUID) -> WorkoutSet | None:
        """Flip completion; completing a set starts the rest timer when one is configured."""
        session = self._require_active("toggle set")
        if session is None:
            return None
        target = self._get_set(session, set_id)
        if target is None:
            return None
        target.is_completed = not target.is_completed
        if target.is_completed:
            self._on_set_completed(target)
        return target

    def toggle_warmup(self, set_id: UUID) -> WorkoutSet | None:
        """Warmup -> Normal, anything else -> Warmup."""
        session = self._require_active("toggle warmup")
        if session is None:
            return None
        target = self._get_set(session, set_id)
        if target is None:
            return None
        target.type = SetType.NORMAL if target.type == SetType.WARMUP else SetType.WARMUP
        return target

    def set_rest_duration(self, exercise_id: UUID, seconds: int | None) -> bool:
        """Configure the rest timer for an exercise; ``None`` (or 0) turns it off."""
        if self._require_active("set rest duration") is None:
            return False
        if seconds:
            self._rest_durations[exercise_id] = int(seconds)
        else:
            self._rest_durations.pop(exercise_id, None)
        return True
