"""Dashboard widget schemas."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from strongai.core.enums import ExerciseMetric, MeasurementType, WidgetType


class WidgetCreate(BaseModel):
    type: WidgetType
    measurement_type: MeasurementType | None = None
    exercise_id: UUID | None = None
    exercise_metric: ExerciseMetric | None = None

    @model_validator(mode="after")
    def _check_parameters(self):
        if self.type == WidgetType.MEASUREMENT and self.measurement_type is None:
            raise ValueError("measurement widgets need a measurement_type")
        if self.type == WidgetType.EXERCISE and (
            self.exercise_id is None or self.exercise_metric is None
        ):
            raise ValueError("exercise widgets need exercise_id and exercise_metric")
        return self


class WidgetConfiguration(WidgetCreate):
    model_config = ConfigDict(from_attributes=True)
    id: UUID = Field(default_factory=uuid4)
    sort_order: int = 0


class WidgetOrder(BaseModel):
    widget_ids: list[UUID]
