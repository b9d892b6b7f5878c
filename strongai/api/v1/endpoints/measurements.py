"""Body measurement endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from strongai.api.deps import get_store
from strongai.core.enums import MeasurementType
from strongai.schemas.measurement import MeasurementCreate, MeasurementLog
from strongai.services.store import FitnessStore

router = APIRouter()


@router.get("", response_model=list[MeasurementLog])
async def list_measurements(
    store: FitnessStore = Depends(get_store),
    type: MeasurementType | None = None,
):
    """Logs newest first, optionally of a single type."""
    if type is not None:
        return store.measurements_by_type(type)
    return store.measurements


@router.post("", response_model=MeasurementLog, status_code=201)
async def log_measurement(payload: MeasurementCreate, store: FitnessStore = Depends(get_store)):
    return await store.add_measurement(payload)


@router.delete("/{measurement_id}", status_code=204)
async def delete_measurement(measurement_id: UUID, store: FitnessStore = Depends(get_store)):
    if not await store.delete_measurement(measurement_id):
        raise HTTPException(status_code=404, detail="Measurement not found")
