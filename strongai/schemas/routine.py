"""Routine template schemas."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from strongai.core.constants import DEFAULT_ROUTINE_FOLDER
from strongai.schemas.workout import RPE_FIELD, Rpe


class RoutineSet(BaseModel):
    """Planned set: no completion flag, no timestamp."""

    model_config = ConfigDict(from_attributes=True)
    id: UUID = Field(default_factory=uuid4)
    weight: float = Field(0.0, ge=0)
    reps: int = Field(0, ge=0)
    rpe: Rpe = Field(None, **RPE_FIELD)


class RoutineExercise(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID = Field(default_factory=uuid4)
    exercise_id: UUID
    name: str
    sets: list[RoutineSet] = Field(default_factory=list)


class RoutineBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    folder: str = DEFAULT_ROUTINE_FOLDER
    exercises: list[RoutineExercise] = Field(default_factory=list)


class RoutineCreate(RoutineBase):
    pass


class Routine(RoutineBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID = Field(default_factory=uuid4)
