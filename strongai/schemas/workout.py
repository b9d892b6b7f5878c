"""Workout session and set schemas.

``WorkoutSet`` and ``WorkoutSession`` are the live in-memory records mutated by the
active session manager; ``validate_assignment`` rejects negative or non-numeric values
so the last valid value is kept.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from strongai.core.enums import SetType
from strongai.schemas.common import UtcDatetime

Rpe = float | None
RPE_FIELD = dict(ge=6.0, le=10.0, multiple_of=0.5)


class WorkoutSet(BaseModel):
    """One performed or planned effort within a session."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    exercise_id: UUID
    # Frozen at creation so history survives exercise renames and deletes
    exercise_name: str
    index: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0)
    reps: int = Field(0, ge=0)
    rpe: Rpe = Field(None, **RPE_FIELD)
    is_completed: bool = False
    type: SetType = SetType.NORMAL

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class WorkoutSetUpdate(BaseModel):
    """Mutable fields of a set; only the fields that are sent are applied."""

    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    rpe: Rpe = Field(None, **RPE_FIELD)
    is_completed: bool | None = None
    type: SetType | None = None


class WorkoutSession(BaseModel):
    """A workout instance. ``end_time`` is None while the session is active."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    start_time: UtcDatetime
    end_time: UtcDatetime | None = None
    note: str | None = None
    sets: list[WorkoutSet] = Field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    def sets_for(self, exercise_id: UUID) -> list[WorkoutSet]:
        """Sets of one exercise in position order."""
        return sorted(
            (s for s in self.sets if s.exercise_id == exercise_id),
            key=lambda s: s.index,
        )

    def exercise_ids(self) -> list[UUID]:
        """Distinct exercise ids in first-appearance order."""
        seen: list[UUID] = []
        for s in sorted(self.sets, key=lambda s: s.index):
            if s.exercise_id not in seen:
                seen.append(s.exercise_id)
        return seen


class StartSessionRequest(BaseModel):
    routine_id: UUID | None = None


class FinishSessionRequest(BaseModel):
    note: str | None = None


class ExerciseRef(BaseModel):
    exercise_id: UUID


class RestDurationRequest(BaseModel):
    # None turns the rest timer off for the exercise
    seconds: int | None = Field(None, gt=0)


class FinishOutcome(BaseModel):
    """Result of finishing a session. ``persisted`` is False when the gateway save failed."""

    session: WorkoutSession
    persisted: bool = True
    error: str | None = None


class ActiveSessionView(BaseModel):
    """Read-only snapshot of the active session for the UI."""

    session: WorkoutSession
    elapsed: str
    working_set_numbers: dict[UUID, int]
    rest_durations: dict[UUID, int]
