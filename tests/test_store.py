from datetime import timedelta
from uuid import uuid4

import pytest

from conftest import NOW, FailingGateway, InMemoryGateway, make_session, make_set
from strongai.core.enums import ExerciseMetric, MeasurementType, MeasurementUnit, WidgetType
from strongai.core.errors import PersistenceError
from strongai.schemas.exercise import ExerciseCreate, ExerciseUpdate
from strongai.schemas.measurement import MeasurementCreate
from strongai.schemas.profile import UserProfile
from strongai.schemas.routine import RoutineCreate, RoutineExercise, RoutineSet
from strongai.schemas.widget import WidgetCreate
from strongai.services.persistence import DataSnapshot
from strongai.services.store import FitnessStore


@pytest.mark.asyncio
async def test_load_from_gateway(bench):
    gateway = InMemoryGateway(DataSnapshot(exercises=[bench]))
    store = await FitnessStore.load(gateway)
    assert store.get_exercise(bench.id) == bench
    assert store.profile is None


@pytest.mark.asyncio
async def test_exercise_crud(store, gateway):
    created = await store.add_exercise(ExerciseCreate(name="Deadlift"))
    assert store.get_exercise(created.id) is created
    updated = await store.update_exercise(created.id, ExerciseUpdate(name="Conventional Deadlift"))
    assert updated.name == "Conventional Deadlift"
    assert await store.update_exercise(uuid4(), ExerciseUpdate(name="x")) is None
    assert await store.delete_exercise(created.id)
    assert not await store.delete_exercise(created.id)
    assert all(e.id != created.id for e in gateway.snapshot.exercises)


@pytest.mark.asyncio
async def test_renaming_exercise_keeps_history_names(store, bench):
    await store.add_session(make_session(NOW, [make_set(bench, 100, 5)]))
    await store.update_exercise(bench.id, ExerciseUpdate(name="Flat Bench"))
    assert store.exercise_history(bench.id)[0].exercise_name == "Bench Press"


@pytest.mark.asyncio
async def test_deleting_exercise_keeps_history(store, bench):
    await store.add_session(make_session(NOW, [make_set(bench, 100, 5)]))
    await store.delete_exercise(bench.id)
    assert store.get_exercise(bench.id) is None
    assert store.exercise_records(bench.id).max_weight == 100


@pytest.mark.asyncio
async def test_session_history_edit_and_delete(store, gateway, bench):
    older = make_session(NOW - timedelta(days=2), [make_set(bench, 80, 5)])
    newer = make_session(NOW, [make_set(bench, 90, 5)])
    await store.add_session(older)
    await store.add_session(newer)
    assert [s.id for s in store.sessions] == [newer.id, older.id]

    edited = older.model_copy(update={"note": "Back-off day"})
    assert await store.update_session(edited)
    assert store.get_session(older.id).note == "Back-off day"

    assert await store.delete_session(newer.id)
    assert not await store.delete_session(newer.id)
    assert [s.id for s in gateway.snapshot.sessions] == [older.id]


@pytest.mark.asyncio
async def test_routine_crud_and_duplicate(store, bench):
    routine = await store.add_routine(
        RoutineCreate(
            name="Push",
            exercises=[RoutineExercise(exercise_id=bench.id, name=bench.name, sets=[RoutineSet(weight=60, reps=8)])],
        )
    )
    assert routine.folder == "My Routines"

    copy = await store.duplicate_routine(routine.id)
    assert copy.name == "Push (Copy)"
    assert copy.id != routine.id
    assert copy.exercises[0].id != routine.exercises[0].id
    assert copy.exercises[0].sets[0].id != routine.exercises[0].sets[0].id
    assert copy.exercises[0].sets[0].weight == 60

    copy.exercises[0].sets[0].reps = 12
    assert routine.exercises[0].sets[0].reps == 8

    assert await store.delete_routine(routine.id)
    assert [r.id for r in store.routines] == [copy.id]
    assert await store.duplicate_routine(uuid4()) is None


@pytest.mark.asyncio
async def test_measurements_newest_first(store, gateway):
    first = await store.add_measurement(
        MeasurementCreate(date=NOW - timedelta(days=1), type=MeasurementType.WEIGHT, value=81, unit=MeasurementUnit.KG)
    )
    second = await store.add_measurement(
        MeasurementCreate(date=NOW, type=MeasurementType.WEIGHT, value=80.5, unit=MeasurementUnit.KG)
    )
    assert store.measurements == [second, first]
    assert store.measurements_by_type(MeasurementType.WAIST) == []
    assert await store.delete_measurement(first.id)
    assert gateway.snapshot.measurements == [second]


@pytest.mark.asyncio
async def test_widgets_add_reorder_remove(store, bench):
    a = await store.add_widget(WidgetCreate(type=WidgetType.WORKOUTS))
    b = await store.add_widget(
        WidgetCreate(type=WidgetType.EXERCISE, exercise_id=bench.id, exercise_metric=ExerciseMetric.ESTIMATED_1RM)
    )
    assert [w.sort_order for w in store.widgets] == [0, 1]

    reordered = await store.reorder_widgets([b.id, a.id])
    assert [w.id for w in reordered] == [b.id, a.id]
    assert [w.sort_order for w in reordered] == [0, 1]
    assert await store.reorder_widgets([a.id]) is None

    assert await store.remove_widget(a.id)
    assert [w.id for w in store.widgets] == [b.id]


def test_measurement_widget_requires_type():
    with pytest.raises(ValueError):
        WidgetCreate(type=WidgetType.MEASUREMENT)


@pytest.mark.asyncio
async def test_profile_singleton(store, gateway):
    created = await store.ensure_profile()
    assert created.workouts_per_week_goal == 5
    assert await store.ensure_profile() is created

    updated = await store.update_profile(UserProfile(workouts_per_week_goal=3))
    assert updated.id == created.id
    assert gateway.snapshot.profile.workouts_per_week_goal == 3


@pytest.mark.asyncio
async def test_failed_save_keeps_memory_change():
    store = FitnessStore(FailingGateway())
    with pytest.raises(PersistenceError) as exc_info:
        await store.add_exercise(ExerciseCreate(name="Row"))
    assert exc_info.value.domain == "exercises"
    assert [e.name for e in store.exercises] == ["Row"]
