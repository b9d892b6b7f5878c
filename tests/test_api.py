from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from conftest import FailingGateway, InMemoryGateway, ManualClock, make_exercise
from strongai.core.config import Settings
from strongai.main import create_application
from strongai.services.persistence import DataSnapshot

API = "/api/v1"


def _client(gateway, clock=None) -> TestClient:
    settings = Settings(database_auto_create=False, _env_file=None)
    app = create_application(settings=settings, gateway=gateway, clock=clock or ManualClock())
    return TestClient(app)


@pytest.fixture
def bench():
    return make_exercise()


@pytest.fixture
def client(bench):
    with _client(InMemoryGateway(DataSnapshot(exercises=[bench]))) as c:
        yield c


def test_health(client):
    assert client.get(f"{API}/health").json() == {"status": "ok"}
    assert client.get(f"{API}/health/ready").json()["database"] == "not configured"


def test_exercise_catalog(client):
    r = client.post(f"{API}/exercises", json={"name": "Deadlift", "type": "Barbell", "body_part": "Back"})
    assert r.status_code == 201
    created = r.json()
    names = [e["name"] for e in client.get(f"{API}/exercises").json()]
    assert names == ["Bench Press", "Deadlift"]
    assert client.get(f"{API}/exercises", params={"body_part": "Back"}).json()[0]["id"] == created["id"]
    assert client.get(f"{API}/exercises/{uuid4()}").status_code == 404
    assert client.delete(f"{API}/exercises/{created['id']}").status_code == 204


def test_active_session_flow(client, bench):
    assert client.get(f"{API}/workouts/active").status_code == 404

    r = client.post(f"{API}/workouts/active", json={})
    assert r.status_code == 201
    assert client.post(f"{API}/workouts/active", json={}).status_code == 409

    first = client.post(f"{API}/workouts/active/exercises", json={"exercise_id": str(bench.id)}).json()
    r = client.patch(f"{API}/workouts/active/sets/{first['id']}", json={"weight": 100, "reps": 5})
    assert r.json()["weight"] == 100

    r = client.patch(f"{API}/workouts/active/sets/{first['id']}", json={"reps": -1})
    assert r.status_code == 422
    second = client.post(f"{API}/workouts/active/exercises/{bench.id}/sets").json()
    assert (second["weight"], second["reps"]) == (100, 5)

    client.put(f"{API}/workouts/active/exercises/{bench.id}/rest", json={"seconds": 90})
    r = client.post(f"{API}/workouts/active/sets/{first['id']}/complete")
    assert r.json()["is_completed"] is True
    timer = client.get(f"{API}/timer").json()
    assert timer["is_running"] is True
    assert timer["time_string"] == "1:30"

    view = client.get(f"{API}/workouts/active").json()
    assert view["working_set_numbers"][second["id"]] == 2

    outcome = client.post(f"{API}/workouts/active/finish", json={"note": "Good"}).json()
    assert outcome["persisted"] is True
    assert [s["id"] for s in outcome["session"]["sets"]] == [first["id"]]
    assert client.get(f"{API}/timer").json()["is_running"] is False

    history = client.get(f"{API}/workouts").json()
    assert history[0]["note"] == "Good"
    summary = client.get(f"{API}/workouts/{history[0]['id']}/summary").json()
    assert summary["total_volume"] == 500
    records = client.get(f"{API}/analytics/records/{bench.id}").json()
    assert records["estimated_one_rep_max"] == 116.7


def test_mutating_without_session_is_conflict(client, bench):
    r = client.post(f"{API}/workouts/active/exercises", json={"exercise_id": str(bench.id)})
    assert r.status_code == 409
    assert client.post(f"{API}/workouts/active/finish").status_code == 409
    assert client.delete(f"{API}/workouts/active").status_code == 204


def test_start_from_routine(client, bench):
    routine = client.post(
        f"{API}/routines",
        json={
            "name": "Push",
            "exercises": [
                {"exercise_id": str(bench.id), "name": "Bench Press", "sets": [{"weight": 60, "reps": 8}] * 3}
            ],
        },
    ).json()
    copy = client.post(f"{API}/routines/{routine['id']}/duplicate").json()
    assert copy["name"] == "Push (Copy)"

    view = client.post(f"{API}/workouts/active", json={"routine_id": routine["id"]}).json()
    assert len(view["session"]["sets"]) == 3
    assert client.post(f"{API}/workouts/active", json={"routine_id": str(uuid4())}).status_code == 404


def test_timer_endpoints(client):
    assert client.post(f"{API}/timer/start", json={"seconds": 60}).json()["remaining_time"] == 60
    assert client.post(f"{API}/timer/add").json()["remaining_time"] == 90
    paused = client.post(f"{API}/timer/pause").json()
    assert paused["is_running"] is False
    assert client.post(f"{API}/timer/stop").json()["remaining_time"] == 0
    assert client.post(f"{API}/timer/start", json={"seconds": 0}).status_code == 422


def test_widgets_and_dashboard(client, bench):
    client.post(f"{API}/widgets", json={"type": "workouts"})
    client.post(f"{API}/widgets", json={"type": "measurement", "measurement_type": "Weight"})
    client.post(
        f"{API}/widgets",
        json={"type": "exercise", "exercise_id": str(bench.id), "exercise_metric": "Max Weight"},
    )
    assert client.post(f"{API}/widgets", json={"type": "exercise"}).status_code == 422

    values = client.get(f"{API}/analytics/widgets").json()
    assert [v["value"] for v in values] == ["0/5", "--", "--"]

    client.post(f"{API}/measurements", json={"type": "Weight", "value": 80, "unit": "kg"})
    values = client.get(f"{API}/analytics/widgets").json()
    assert values[1]["value"] == "80.0 kg"


def test_profile_and_macros(client):
    profile = client.get(f"{API}/profile").json()
    assert profile["goal_type"] == "Maintain"
    profile["workouts_per_week_goal"] = 3
    assert client.put(f"{API}/profile", json=profile).json()["workouts_per_week_goal"] == 3
    assert client.get(f"{API}/analytics/weekly").json()["goal"] == 3

    macros = client.get(f"{API}/analytics/macros", params={"weight_lbs": 180, "height_inches": 70}).json()
    assert macros["protein"] == 180
    assert macros["fat"] == 72


def test_one_rep_max(client):
    assert client.get(f"{API}/analytics/one-rep-max", params={"weight": 100, "reps": 10}).json()[
        "estimated_one_rep_max"
    ] == 133.3


def test_persistence_failure_is_service_unavailable():
    with _client(FailingGateway()) as c:
        r = c.post(f"{API}/exercises", json={"name": "Row"})
        assert r.status_code == 503
        assert r.json()["domain"] == "exercises"
        assert [e["name"] for e in c.get(f"{API}/exercises").json()] == ["Row"]


def test_rest_presets(client):
    assert client.get(f"{API}/timer/presets").json() == [30, 60, 90, 120, 150, 180]


def test_unknown_ids_in_active_session_are_not_found(client):
    client.post(f"{API}/workouts/active", json={})
    assert client.patch(f"{API}/workouts/active/sets/{uuid4()}", json={"reps": 5}).status_code == 404
    assert client.post(f"{API}/workouts/active/sets/{uuid4()}/complete").status_code == 404
    r = client.post(f"{API}/workouts/active/exercises", json={"exercise_id": str(uuid4())})
    assert r.status_code == 404
