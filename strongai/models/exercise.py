"""Exercise catalog model."""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from strongai.core.enums import BodyPart, ExerciseType
from strongai.db.base import Base


class ExerciseRecord(Base):
    """Catalog entry. Sets and routine entries reference it by id only (no FK)."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    type: Mapped[ExerciseType] = mapped_column(
        Enum(ExerciseType, values_callable=lambda e: [m.value for m in e]),
        default=ExerciseType.OTHER,
        nullable=False,
    )
    body_part: Mapped[BodyPart] = mapped_column(
        Enum(BodyPart, values_callable=lambda e: [m.value for m in e]),
        default=BodyPart.OTHER,
        nullable=False,
    )
    instructions: Mapped[str] = mapped_column(Text, default="", nullable=False)
