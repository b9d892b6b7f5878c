"""Workout endpoints: the active session and finished-session history."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException

from strongai.api.deps import get_manager, get_store, issue_exception
from strongai.schemas.analytics import SessionSummary
from strongai.schemas.workout import (
    ActiveSessionView,
    ExerciseRef,
    FinishOutcome,
    FinishSessionRequest,
    RestDurationRequest,
    StartSessionRequest,
    WorkoutSession,
    WorkoutSet,
)
from strongai.services.analytics import session_summary
from strongai.services.session_manager import ActiveSessionManager
from strongai.services.store import FitnessStore

router = APIRouter()


def _view(manager: ActiveSessionManager) -> ActiveSessionView:
    view = manager.view()
    if view is None:
        raise HTTPException(status_code=404, detail="No active session")
    return view


# ── Active session ───────────────────────────────────────────────────────

@router.get("/active", response_model=ActiveSessionView)
async def get_active_session(manager: ActiveSessionManager = Depends(get_manager)):
    return _view(manager)


@router.post("/active", response_model=ActiveSessionView, status_code=201)
async def start_session(
    payload: StartSessionRequest | None = None,
    store: FitnessStore = Depends(get_store),
    manager: ActiveSessionManager = Depends(get_manager),
):
    """Start an empty session, or one pre-filled from a routine."""
    routine = None
    if payload is not None and payload.routine_id is not None:
        routine = store.get_routine(payload.routine_id)
        if routine is None:
            raise HTTPException(status_code=404, detail="Routine not found")
    if manager.start_session(routine) is None:
        raise issue_exception(manager)
    return _view(manager)


@router.post("/active/finish", response_model=FinishOutcome)
async def finish_session(
    payload: FinishSessionRequest | None = None,
    manager: ActiveSessionManager = Depends(get_manager),
):
    """Finish and persist. ``persisted`` is False when the save failed; the session is kept in memory."""
    outcome = await manager.finish_session(payload.note if payload else None)
    if outcome is None:
        raise issue_exception(manager)
    return outcome


@router.delete("/active", status_code=204)
async def discard_session(manager: ActiveSessionManager = Depends(get_manager)):
    """Drop the active session without saving. Repeating the call is harmless."""
    manager.discard_session()


@router.post("/active/exercises", response_model=WorkoutSet, status_code=201)
async def add_exercise(
    payload: ExerciseRef,
    manager: ActiveSessionManager = Depends(get_manager),
):
    new_set = manager.add_exercise(payload.exercise_id)
    if new_set is None:
        raise issue_exception(manager)
    return new_set


@router.delete("/active/exercises/{exercise_id}", response_model=list[WorkoutSet])
async def remove_exercise(
    exercise_id: UUID,
    manager: ActiveSessionManager = Depends(get_manager),
):
    removed = manager.remove_exercise(exercise_id)
    if removed is None:
        raise issue_exception(manager)
    return removed


@router.put("/active/exercises/{exercise_id}/rest", response_model=ActiveSessionView)
async def set_rest_duration(
    exercise_id: UUID,
    payload: RestDurationRequest,
    manager: ActiveSessionManager = Depends(get_manager),
):
    if not manager.set_rest_duration(exercise_id, payload.seconds):
        raise issue_exception(manager)
    return _view(manager)


@router.post("/active/exercises/{exercise_id}/sets", response_model=WorkoutSet, status_code=201)
async def add_set(
    exercise_id: UUID,
    manager: ActiveSessionManager = Depends(get_manager),
):
    new_set = manager.add_set(exercise_id)
    if new_set is None:
        raise issue_exception(manager)
    return new_set


@router.patch("/active/sets/{set_id}", response_model=WorkoutSet)
async def update_set(
    set_id: UUID,
    changes: dict[str, Any] = Body(...),
    manager: ActiveSessionManager = Depends(get_manager),
):
    """Edit weight, reps, RPE, type or completion. Invalid values leave the set unchanged."""
    updated = manager.update_set(set_id, changes)
    if updated is None:
        raise issue_exception(manager)
    return updated


@router.delete("/active/sets/{set_id}", response_model=WorkoutSet)
async def delete_set(set_id: UUID, manager: ActiveSessionManager = Depends(get_manager)):
    deleted = manager.delete_set(set_id)
    if deleted is None:
        raise issue_exception(manager)
    return deleted


@router.post("/active/sets/{set_id}/complete", response_model=WorkoutSet)
async def toggle_set_completion(set_id: UUID, manager: ActiveSessionManager = Depends(get_manager)):
    toggled = manager.toggle_set_completion(set_id)
    if toggled is None:
        raise issue_exception(manager)
    return toggled


@router.post("/active/sets/{set_id}/warmup", response_model=WorkoutSet)
async def toggle_warmup(set_id: UUID, manager: ActiveSessionManager = Depends(get_manager)):
    toggled = manager.toggle_warmup(set_id)
    if toggled is None:
        raise issue_exception(manager)
    return toggled


# ── History ──────────────────────────────────────────────────────────────

@router.get("", response_model=list[WorkoutSession])
async def list_workouts(
    store: FitnessStore = Depends(get_store),
    skip: int = 0,
    limit: int = 50,
):
    """Finished sessions, newest first."""
    return store.sessions[skip : skip + limit]


@router.get("/{session_id}", response_model=WorkoutSession)
async def get_workout(session_id: UUID, store: FitnessStore = Depends(get_store)):
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return session


@router.get("/{session_id}/summary", response_model=SessionSummary)
async def get_workout_summary(session_id: UUID, store: FitnessStore = Depends(get_store)):
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return session_summary(session)


@router.put("/{session_id}", response_model=WorkoutSession)
async def update_workout(
    session_id: UUID,
    payload: WorkoutSession,
    store: FitnessStore = Depends(get_store),
):
    """Edit a finished session in place."""
    if payload.end_time is None:
        raise HTTPException(status_code=422, detail="A finished workout needs an end_time")
    session = payload.model_copy(update={"id": session_id})
    if not await store.update_session(session):
        raise HTTPException(status_code=404, detail="Workout not found")
    return session


@router.delete("/{session_id}", status_code=204)
async def delete_workout(session_id: UUID, store: FitnessStore = Depends(get_store)):
    if not await store.delete_session(session_id):
        raise HTTPException(status_code=404, detail="Workout not found")
