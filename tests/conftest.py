"""Shared fakes: a manually advanced clock and in-memory persistence gateways."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from strongai.core.enums import BodyPart, ExerciseType, SetType
from strongai.schemas.exercise import Exercise
from strongai.schemas.workout import WorkoutSession, WorkoutSet
from strongai.services.persistence import DataSnapshot
from strongai.services.rest_timer import RestTimer
from strongai.services.session_manager import ActiveSessionManager
from strongai.services.store import FitnessStore

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)  # a Monday


class _Handle:
    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """Deterministic clock: scheduled callbacks only run inside ``advance``."""

    def __init__(self, start: float = 1000.0) -> None:
        self.time = start
        self.pending: list[_Handle] = []

    def now(self) -> float:
        return self.time

    def call_later(self, delay: float, callback) -> _Handle:
        handle = _Handle(self.time + delay, callback)
        self.pending.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        target = self.time + seconds
        while True:
            due = [h for h in self.pending if not h.cancelled and h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.pending.remove(handle)
            self.time = max(self.time, handle.when)
            handle.callback()
        self.time = target
        self.pending = [h for h in self.pending if not h.cancelled]

    @property
    def scheduled(self) -> int:
        return sum(1 for h in self.pending if not h.cancelled)


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls = 0

    def notify_timer_complete(self) -> None:
        self.calls += 1


class InMemoryGateway:
    """Keeps the last saved copy of each collection."""

    def __init__(self, snapshot: DataSnapshot | None = None) -> None:
        self.snapshot = snapshot or DataSnapshot()
        self.saves: list[str] = []

    async def load_all(self) -> DataSnapshot:
        return self.snapshot

    async def save_exercises(self, exercises) -> None:
        self.saves.append("exercises")
        self.snapshot.exercises = list(exercises)

    async def save_sessions(self, sessions) -> None:
        self.saves.append("sessions")
        self.snapshot.sessions = list(sessions)

    async def save_routines(self, routines) -> None:
        self.saves.append("routines")
        self.snapshot.routines = list(routines)

    async def save_measurements(self, measurements) -> None:
        self.saves.append("measurements")
        self.snapshot.measurements = list(measurements)

    async def save_widgets(self, widgets) -> None:
        self.saves.append("widgets")
        self.snapshot.widgets = list(widgets)

    async def save_profile(self, profile) -> None:
        self.saves.append("profile")
        self.snapshot.profile = profile


class FailingGateway(InMemoryGateway):
    """Every save raises, like a full disk or a locked database file."""

    async def _fail(self, *args) -> None:
        raise RuntimeError("disk full")

    save_exercises = save_sessions = save_routines = _fail
    save_measurements = save_widgets = save_profile = _fail


class FakeNow:
    """Wall-clock stand-in for the session manager."""

    def __init__(self, start: datetime = NOW) -> None:
        self.value = start

    def __call__(self) -> datetime:
        return self.value

    def advance(self, **kwargs) -> None:
        self.value += timedelta(**kwargs)


def make_exercise(name: str = "Bench Press", **kwargs) -> Exercise:
    kwargs.setdefault("type", ExerciseType.BARBELL)
    kwargs.setdefault("body_part", BodyPart.CHEST)
    return Exercise(name=name, **kwargs)


def make_set(exercise: Exercise, weight: float, reps: int, index: int = 0, **kwargs) -> WorkoutSet:
    kwargs.setdefault("is_completed", True)
    kwargs.setdefault("type", SetType.NORMAL)
    return WorkoutSet(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        index=index,
        weight=weight,
        reps=reps,
        **kwargs,
    )


def make_session(start: datetime, sets: list[WorkoutSet] | None = None, minutes: int = 60) -> WorkoutSession:
    return WorkoutSession(
        id=uuid4(),
        start_time=start,
        end_time=start + timedelta(minutes=minutes),
        sets=sets or [],
    )


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def timer(clock, notifier) -> RestTimer:
    return RestTimer(clock, notifier=notifier, tick_interval=0.1)


@pytest.fixture
def bench() -> Exercise:
    return make_exercise("Bench Press")


@pytest.fixture
def squat() -> Exercise:
    return make_exercise("Squat", body_part=BodyPart.LEGS)


@pytest.fixture
def gateway(bench, squat) -> InMemoryGateway:
    return InMemoryGateway(DataSnapshot(exercises=[bench, squat]))


@pytest.fixture
def store(gateway) -> FitnessStore:
    return FitnessStore(gateway, gateway.snapshot)


@pytest.fixture
def fake_now() -> FakeNow:
    return FakeNow()


@pytest.fixture
def manager(store, timer, fake_now) -> ActiveSessionManager:
    return ActiveSessionManager(store, timer, now=fake_now)
