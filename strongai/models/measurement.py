"""MeasurementLog model - timestamped body observation."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from strongai.core.enums import MeasurementType, MeasurementUnit
from strongai.db.base import Base


class MeasurementRecord(Base):
    __tablename__ = "measurements"
    __table_args__ = (Index("ix_measurements_type_date", "type", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    type: Mapped[MeasurementType] = mapped_column(
        Enum(MeasurementType, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    value: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[MeasurementUnit] = mapped_column(
        Enum(MeasurementUnit, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
