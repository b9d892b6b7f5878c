"""Calculator endpoints: records, estimated 1RM, weekly consistency, macros, trends."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from strongai.api.deps import get_settings, get_store
from strongai.core.config import Settings
from strongai.core.enums import MeasurementType
from strongai.schemas.analytics import (
    MacroTargets,
    MeasurementTrend,
    PersonalRecords,
    WeeklyWorkouts,
    WidgetValue,
)
from strongai.services import analytics
from strongai.services.dashboard import daily_macros, widget_values
from strongai.services.store import FitnessStore

router = APIRouter()


@router.get("/one-rep-max")
async def one_rep_max(weight: float = Query(..., ge=0), reps: int = Query(..., ge=0)):
    """Epley estimate for a single set."""
    return {
        "weight": weight,
        "reps": reps,
        "estimated_one_rep_max": analytics.estimated_one_rep_max(weight, reps),
    }


@router.get("/records/{exercise_id}", response_model=PersonalRecords)
async def exercise_records(exercise_id: UUID, store: FitnessStore = Depends(get_store)):
    """All zeros when the exercise has no completed sets."""
    return store.exercise_records(exercise_id)


@router.get("/weekly", response_model=WeeklyWorkouts)
async def weekly_workouts(
    store: FitnessStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    weeks: int | None = Query(None, ge=1, le=52),
):
    return analytics.weekly_workouts(
        store.sessions, store.profile, weeks=weeks or settings.weekly_window_weeks
    )


@router.get("/macros", response_model=MacroTargets)
async def macros(
    store: FitnessStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    height_inches: float | None = Query(None, gt=0),
    weight_lbs: float | None = Query(None, gt=0),
):
    """Daily targets; weight defaults to the latest logged body weight."""
    return daily_macros(store, settings, height_inches=height_inches, weight_lbs=weight_lbs)


@router.get("/measurements", response_model=MeasurementTrend)
async def measurement_trend(type: MeasurementType, store: FitnessStore = Depends(get_store)):
    return analytics.measurement_trend(store.measurements, type)


@router.get("/widgets", response_model=list[WidgetValue])
async def dashboard(
    store: FitnessStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Display values for every configured dashboard tile, in order."""
    return widget_values(store, settings)
