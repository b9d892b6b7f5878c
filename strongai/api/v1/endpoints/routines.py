"""Routine (workout template) endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from strongai.api.deps import get_store
from strongai.schemas.routine import Routine, RoutineCreate
from strongai.services.store import FitnessStore

router = APIRouter()


@router.get("", response_model=list[Routine])
async def list_routines(store: FitnessStore = Depends(get_store), folder: str | None = None):
    if folder is not None:
        return [r for r in store.routines if r.folder == folder]
    return store.routines


@router.get("/folders", response_model=list[str])
async def list_folders(store: FitnessStore = Depends(get_store)):
    """Distinct folder names in first-use order."""
    return list(dict.fromkeys(r.folder for r in store.routines))


@router.post("", response_model=Routine, status_code=201)
async def create_routine(payload: RoutineCreate, store: FitnessStore = Depends(get_store)):
    return await store.add_routine(payload)


@router.get("/{routine_id}", response_model=Routine)
async def get_routine(routine_id: UUID, store: FitnessStore = Depends(get_store)):
    routine = store.get_routine(routine_id)
    if routine is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return routine


@router.put("/{routine_id}", response_model=Routine)
async def update_routine(
    routine_id: UUID,
    payload: RoutineCreate,
    store: FitnessStore = Depends(get_store),
):
    routine = Routine(id=routine_id, **payload.model_dump())
    if not await store.update_routine(routine):
        raise HTTPException(status_code=404, detail="Routine not found")
    return routine


@router.delete("/{routine_id}", status_code=204)
async def delete_routine(routine_id: UUID, store: FitnessStore = Depends(get_store)):
    if not await store.delete_routine(routine_id):
        raise HTTPException(status_code=404, detail="Routine not found")


@router.post("/{routine_id}/duplicate", response_model=Routine, status_code=201)
async def duplicate_routine(routine_id: UUID, store: FitnessStore = Depends(get_store)):
    """Deep copy named "<name> (Copy)" with fresh ids throughout."""
    copy = await store.duplicate_routine(routine_id)
    if copy is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return copy
