"""Exercise schemas."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from strongai.core.enums import BodyPart, ExerciseType


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ExerciseType = ExerciseType.OTHER
    body_part: BodyPart = BodyPart.OTHER
    instructions: str = ""


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    type: ExerciseType | None = None
    body_part: BodyPart | None = None
    instructions: str | None = None


class Exercise(ExerciseBase):
    """Catalog entry, referenced by id from sets and routines."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)
    id: UUID = Field(default_factory=uuid4)
