from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW, make_session, make_set
from strongai.core.enums import ExerciseMetric, MeasurementType, MeasurementUnit
from strongai.schemas.measurement import MeasurementLog
from strongai.schemas.profile import UserProfile
from strongai.services import analytics


def test_estimated_one_rep_max():
    assert analytics.estimated_one_rep_max(100, 1) == 100
    assert analytics.estimated_one_rep_max(100, 10) == 133.3
    assert analytics.estimated_one_rep_max(0, 10) == 0


def test_personal_records_empty_history(bench):
    records = analytics.personal_records([], bench.id)
    assert records.max_weight == 0
    assert records.estimated_one_rep_max == 0
    assert records.max_volume == 0
    assert records.max_reps == 0


def test_personal_records(bench, squat):
    older = make_session(
        NOW - timedelta(days=7),
        [make_set(bench, 100, 5, index=0), make_set(bench, 80, 12, index=1), make_set(squat, 140, 5, index=2)],
    )
    newer = make_session(
        NOW - timedelta(days=1),
        [make_set(bench, 110, 1, index=0), make_set(bench, 200, 10, index=1, is_completed=False)],
    )
    records = analytics.personal_records([newer, older], bench.id)
    assert records.max_weight == 110
    assert records.estimated_one_rep_max == 116.7
    assert records.max_volume == 960
    assert records.best_session_volume == 1460
    assert records.max_reps == 12


def test_incomplete_sets_are_ignored(bench):
    session = make_session(NOW, [make_set(bench, 500, 5, is_completed=False)])
    assert analytics.personal_records([session], bench.id).max_weight == 0
    assert analytics.session_volume(session) == 0


def test_exercise_widget_values(bench):
    session = make_session(NOW, [make_set(bench, 100, 5, index=0), make_set(bench, 90, 8, index=1)])
    assert analytics.exercise_widget_value([session], bench.id, ExerciseMetric.MAX_WEIGHT) == "100 kg"
    assert analytics.exercise_widget_value([session], bench.id, ExerciseMetric.BEST_SET) == "90kg x 8"
    assert analytics.exercise_widget_value([session], bench.id, ExerciseMetric.MAX_REPS) == "8"
    assert analytics.exercise_widget_value([], bench.id, ExerciseMetric.ESTIMATED_1RM) == "--"
    assert analytics.exercise_widget_value([], bench.id, ExerciseMetric.BEST_SET) == "--"


def test_week_start_is_monday():
    assert analytics.week_start(datetime(2026, 10, 25).date()).isoformat() == "2026-10-19"
    assert analytics.week_start(datetime(2026, 10, 19).date()).isoformat() == "2026-10-19"


def test_weekly_counts_zero_filled_and_chronological():
    sessions = [
        make_session(NOW - timedelta(weeks=2)),
        make_session(NOW + timedelta(days=2)),
        make_session(NOW),
    ]
    counts = analytics.weekly_workout_counts(sessions, weeks=8, now=NOW + timedelta(days=3))
    assert len(counts) == 8
    assert [c.count for c in counts] == [0, 0, 0, 0, 0, 1, 0, 2]
    assert counts[0].week_start < counts[-1].week_start
    assert counts[-1].week_start == NOW.date()


def test_weekly_counts_empty_history():
    counts = analytics.weekly_workout_counts([], weeks=8, now=NOW)
    assert [c.count for c in counts] == [0] * 8


def test_weekly_workouts_uses_profile_goal():
    profile = UserProfile(workouts_per_week_goal=3)
    weekly = analytics.weekly_workouts([make_session(NOW)], profile, weeks=4, now=NOW)
    assert weekly.goal == 3
    assert weekly.current_week_count == 1
    assert analytics.weekly_workouts([], None, now=NOW).goal == 5


def test_session_summary(bench, squat):
    start = datetime(2026, 10, 18, 18, 0, tzinfo=timezone.utc)
    session = make_session(
        start,
        [make_set(bench, 100, 5, index=0), make_set(squat, 120, 5, index=1)],
        minutes=75,
    )
    summary = analytics.session_summary(session)
    assert summary.duration_minutes == 75
    assert summary.duration == "1h 15m"
    assert summary.total_volume == 1100
    assert summary.completed_sets == 2
    assert summary.exercise_count == 2


def test_format_elapsed():
    assert analytics.format_elapsed(59) == "0:59"
    assert analytics.format_elapsed(3725) == "1:02:05"


def _log(days_ago: int, value: float, mtype=MeasurementType.WEIGHT, unit=MeasurementUnit.KG):
    return MeasurementLog(date=NOW - timedelta(days=days_ago), type=mtype, value=value, unit=unit)


def test_measurements_by_type_newest_first():
    logs = [_log(10, 82.0), _log(1, 80.5), _log(3, 15, MeasurementType.BODY_FAT, MeasurementUnit.PERCENT), _log(5, 81.0)]
    weights = analytics.measurements_by_type(logs, MeasurementType.WEIGHT)
    assert [m.value for m in weights] == [80.5, 81.0, 82.0]


def test_measurement_trend():
    trend = analytics.measurement_trend([_log(10, 82.0), _log(1, 80.5)], MeasurementType.WEIGHT)
    assert trend.latest == 80.5
    assert trend.change == pytest.approx(-1.5)
    assert trend.values == [82.0, 80.5]
    empty = analytics.measurement_trend([], MeasurementType.WAIST)
    assert empty.latest is None
    assert empty.values == []
