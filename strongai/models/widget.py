"""Dashboard widget configuration."""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from strongai.core.enums import ExerciseMetric, MeasurementType, WidgetType
from strongai.db.base import Base


class WidgetRecord(Base):
    """Tile descriptor. Parameters are only set for the matching widget type."""

    __tablename__ = "widgets"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    type: Mapped[WidgetType] = mapped_column(
        Enum(WidgetType, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    measurement_type: Mapped[MeasurementType | None] = mapped_column(
        Enum(MeasurementType, values_callable=lambda e: [m.value for m in e]), nullable=True
    )
    exercise_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    exercise_metric: Mapped[ExerciseMetric | None] = mapped_column(
        Enum(ExerciseMetric, values_callable=lambda e: [m.value for m in e]), nullable=True
    )
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
