"""Exercise catalog endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from strongai.api.deps import get_store
from strongai.core.enums import BodyPart
from strongai.schemas.exercise import Exercise, ExerciseCreate, ExerciseUpdate
from strongai.schemas.workout import WorkoutSet
from strongai.services.store import FitnessStore

router = APIRouter()


@router.get("", response_model=list[Exercise])
async def list_exercises(
    store: FitnessStore = Depends(get_store),
    body_part: BodyPart | None = None,
    q: str | None = None,
):
    """List the catalog, optionally filtered by body part or a name search."""
    exercises = store.exercises
    if body_part is not None:
        exercises = [e for e in exercises if e.body_part == body_part]
    if q:
        needle = q.strip().lower()
        exercises = [e for e in exercises if needle in e.name.lower()]
    return sorted(exercises, key=lambda e: e.name.lower())


@router.post("", response_model=Exercise, status_code=201)
async def create_exercise(payload: ExerciseCreate, store: FitnessStore = Depends(get_store)):
    return await store.add_exercise(payload)


@router.get("/{exercise_id}", response_model=Exercise)
async def get_exercise(exercise_id: UUID, store: FitnessStore = Depends(get_store)):
    exercise = store.get_exercise(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=Exercise)
async def update_exercise(
    exercise_id: UUID,
    payload: ExerciseUpdate,
    store: FitnessStore = Depends(get_store),
):
    exercise = await store.update_exercise(exercise_id, payload)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(exercise_id: UUID, store: FitnessStore = Depends(get_store)):
    """Remove from the catalog. Logged sets keep their frozen exercise name."""
    if not await store.delete_exercise(exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")


@router.get("/{exercise_id}/history", response_model=list[WorkoutSet])
async def exercise_history(exercise_id: UUID, store: FitnessStore = Depends(get_store)):
    """Completed sets of this exercise across finished sessions, newest session first."""
    return store.exercise_history(exercise_id)
