"""Workout analytics: personal records, volume, weekly consistency, recaps.

Pure functions over finished sessions. Only completed sets count. Empty input
gives zeros (or ``None`` where a record is a set), never an exception.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone, tzinfo
from uuid import UUID

from strongai.core.constants import (
    DEFAULT_WORKOUTS_PER_WEEK_GOAL,
    MEASUREMENT_TREND_LIMIT,
    NO_DATA_DISPLAY,
)
from strongai.core.enums import ExerciseMetric, MeasurementType
from strongai.schemas.analytics import (
    MeasurementTrend,
    PersonalRecords,
    SessionSummary,
    WeeklyCount,
    WeeklyWorkouts,
)
from strongai.schemas.measurement import MeasurementLog
from strongai.schemas.profile import UserProfile
from strongai.schemas.workout import WorkoutSession, WorkoutSet


# ── One-rep max & volume ─────────────────────────────────────────────────

def _epley(weight: float, reps: int) -> float:
    """1RM = weight * (1 + reps/30); a single rep is the weight itself."""
    if reps == 1:
        return float(weight)
    return weight * (1 + reps / 30)


def estimated_one_rep_max(weight: float, reps: int) -> float:
    """Epley estimate rounded to one decimal."""
    return round(_epley(weight, reps), 1)


def set_volume(s: WorkoutSet) -> float:
    return s.weight * s.reps


def session_volume(session: WorkoutSession, exercise_id: UUID | None = None) -> float:
    """Sum of weight * reps over the session's completed sets (optionally one exercise)."""
    return sum(
        set_volume(s)
        for s in session.sets
        if s.is_completed and (exercise_id is None or s.exercise_id == exercise_id)
    )


def exercise_history(sessions: Iterable[WorkoutSession], exercise_id: UUID) -> list[WorkoutSet]:
    """Completed sets for one exercise, in history order then position order."""
    history: list[WorkoutSet] = []
    for session in sessions:
        history.extend(
            s for s in session.sets_for(exercise_id) if s.is_completed
        )
    return history


def personal_records(sessions: Iterable[WorkoutSession], exercise_id: UUID) -> PersonalRecords:
    """Max weight, best estimated 1RM, best single-set and best-session volume, max reps."""
    sessions = list(sessions)
    sets = exercise_history(sessions, exercise_id)
    if not sets:
        return PersonalRecords()
    best_session = max(session_volume(w, exercise_id) for w in sessions)
    return PersonalRecords(
        max_weight=round(max(s.weight for s in sets), 1),
        estimated_one_rep_max=round(max(_epley(s.weight, s.reps) for s in sets), 1),
        max_volume=round(max(set_volume(s) for s in sets), 1),
        best_session_volume=round(best_session, 1),
        max_reps=max(s.reps for s in sets),
    )


def best_set(sessions: Iterable[WorkoutSession], exercise_id: UUID) -> WorkoutSet | None:
    """Completed set with the highest weight * reps (first one wins ties)."""
    best: WorkoutSet | None = None
    for s in exercise_history(sessions, exercise_id):
        if best is None or set_volume(s) > set_volume(best):
            best = s
    return best


def exercise_widget_value(
    sessions: Iterable[WorkoutSession],
    exercise_id: UUID,
    metric: ExerciseMetric,
    unit: str = "kg",
) -> str:
    """Display string for an exercise dashboard tile; ``--`` when there is no data."""
    sessions = list(sessions)
    if metric == ExerciseMetric.BEST_SET:
        top = best_set(sessions, exercise_id)
        if top is None:
            return NO_DATA_DISPLAY
        return f"{_fmt(top.weight)}{unit} x {top.reps}"
    records = personal_records(sessions, exercise_id)
    value = {
        ExerciseMetric.ESTIMATED_1RM: records.estimated_one_rep_max,
        ExerciseMetric.MAX_WEIGHT: records.max_weight,
        ExerciseMetric.VOLUME: records.max_volume,
        ExerciseMetric.MAX_REPS: records.max_reps,
    }[metric]
    if value <= 0:
        return NO_DATA_DISPLAY
    if metric == ExerciseMetric.MAX_REPS:
        return str(value)
    return f"{_fmt(value)} {unit}"


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


# ── Weekly consistency ───────────────────────────────────────────────────

def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.weekday())


def _local_date(ts: datetime, tz: tzinfo | None) -> date:
    if tz is not None and ts.tzinfo is not None:
        ts = ts.astimezone(tz)
    return ts.date()


def weekly_workout_counts(
    sessions: Iterable[WorkoutSession],
    weeks: int = 8,
    now: datetime | None = None,
) -> list[WeeklyCount]:
    """Sessions per ISO week for the trailing window (current week included).

    Weeks without sessions are zero-filled; ordered oldest to newest.
    """
    if weeks <= 0:
        return []
    now = now or datetime.now(timezone.utc)
    current = week_start(now.date())
    starts = [current - timedelta(weeks=i) for i in range(weeks - 1, -1, -1)]
    counts = Counter(week_start(_local_date(s.start_time, now.tzinfo)) for s in sessions)
    return [WeeklyCount(week_start=ws, count=counts.get(ws, 0)) for ws in starts]


def weekly_workouts(
    sessions: Iterable[WorkoutSession],
    profile: UserProfile | None = None,
    weeks: int = 8,
    now: datetime | None = None,
) -> WeeklyWorkouts:
    """Weekly counts plus the profile's goal, for the workouts-per-week tile."""
    counts = weekly_workout_counts(sessions, weeks=weeks, now=now)
    goal = profile.workouts_per_week_goal if profile else DEFAULT_WORKOUTS_PER_WEEK_GOAL
    return WeeklyWorkouts(
        goal=goal,
        current_week_count=counts[-1].count if counts else 0,
        weeks=counts,
    )


# ── Session recap ────────────────────────────────────────────────────────

def format_elapsed(seconds: int) -> str:
    """Running-session clock: ``H:MM:SS`` past an hour, else ``M:SS``."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_duration_minutes(minutes: int) -> str:
    hours, mins = divmod(max(0, minutes), 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def session_summary(session: WorkoutSession) -> SessionSummary:
    """Recap of a finished session (zero duration while still active)."""
    minutes = 0
    if session.end_time is not None:
        minutes = int((session.end_time - session.start_time).total_seconds() // 60)
    completed = [s for s in session.sets if s.is_completed]
    return SessionSummary(
        session_id=session.id,
        start_time=session.start_time,
        duration_minutes=minutes,
        duration=format_duration_minutes(minutes),
        total_volume=round(session_volume(session), 1),
        completed_sets=len(completed),
        exercise_count=len({s.exercise_id for s in session.sets}),
    )


# ── Measurements ─────────────────────────────────────────────────────────

def measurements_by_type(
    logs: Iterable[MeasurementLog], measurement_type: MeasurementType
) -> list[MeasurementLog]:
    """Logs of one type, newest first."""
    return sorted(
        (m for m in logs if m.type == measurement_type),
        key=lambda m: m.date,
        reverse=True,
    )


def measurement_trend(
    logs: Iterable[MeasurementLog],
    measurement_type: MeasurementType,
    limit: int = MEASUREMENT_TREND_LIMIT,
) -> MeasurementTrend:
    """Latest value and change across the most recent ``limit`` logs."""
    recent = measurements_by_type(logs, measurement_type)[:limit]
    if not recent:
        return MeasurementTrend(type=measurement_type)
    latest, oldest = recent[0], recent[-1]
    return MeasurementTrend(
        type=measurement_type,
        latest=latest.value,
        unit=latest.unit,
        change=round(latest.value - oldest.value, 1) if len(recent) > 1 else 0.0,
        values=[m.value for m in reversed(recent)],
    )
