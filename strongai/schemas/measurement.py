"""Body measurement schemas."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from strongai.core.enums import MeasurementType, MeasurementUnit
from strongai.schemas.common import UtcDatetime


class MeasurementCreate(BaseModel):
    date: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    type: MeasurementType
    value: float = Field(..., ge=0)
    unit: MeasurementUnit


class MeasurementLog(MeasurementCreate):
    """Immutable once logged; deletable."""

    model_config = ConfigDict(from_attributes=True, frozen=True)
    id: UUID = Field(default_factory=uuid4)
