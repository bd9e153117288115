from fastapi.testclient import TestClient
from fittrack.main import app
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def login_headers(name="Lifter"):
    email = f"w_{uuid.uuid4().hex[:10]}@ex.com"
    client.post("/auth/register", json={"email": email, "name": name, "password": PWD})
    r = client.post("/auth/login", json={"email": email, "password": PWD})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}

def run(distance, duration):
    return {"type": "Cardio", "name": "Run", "distance": distance, "duration": duration}

def lift(weight, reps, sets):
    return {"type": "Lifting", "name": "Bench", "weight": weight, "reps": reps, "sets": sets}

def my_total(H):
    return client.get("/users/me", headers=H).json()["total_score"]


def test_create_workout_scores_each_exercise():
    H = login_headers()
    r = client.post("/workouts", headers=H, json={
        "workout_date": "2026-01-25",
        "exercises": [run(5, 1800), lift(100, 10, 3)],
    })
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["workout_date"] == "2026-01-25"
    assert body["title"] == "Workout"
    assert [ex["score"] for ex in body["exercises"]] == [200.0, 300.0]
    assert body["score"] == 500.0

def test_default_title_follows_single_type():
    H = login_headers()
    r = client.post("/workouts", headers=H, json={"exercises": [run(1, 600), run(2, 1200)]})
    assert r.json()["title"] == "Cardio"
    r = client.post("/workouts", headers=H, json={"exercises": [lift(10, 5, 5)], "title": "  Leg day "})
    assert r.json()["title"] == "Leg day"

def test_list_workouts_newest_first():
    H = login_headers()
    client.post("/workouts", headers=H, json={"workout_date": "2026-01-01", "exercises": [run(1, 0)]})
    client.post("/workouts", headers=H, json={"workout_date": "2026-02-01", "exercises": [run(2, 0)]})
    r = client.get("/workouts", headers=H)
    assert r.status_code == 200
    assert [w["workout_date"] for w in r.json()] == ["2026-02-01", "2026-01-01"]

def test_total_score_follows_add_edit_delete():
    H = login_headers()
    assert my_total(H) == 0

    w = client.post("/workouts", headers=H, json={"exercises": [lift(100, 10, 3), run(5, 1800)]}).json()
    assert my_total(H) == 500.0
    bench, running = w["exercises"]

    # add
    r = client.post(f"/workouts/{w['id']}/exercises", headers=H, json=lift(40, 5, 3))
    assert r.status_code == 201
    assert r.json()["score"] == 90.0
    assert my_total(H) == 590.0

    # edit: 13 reps drops into the endurance multiplier
    r = client.put(f"/workouts/{w['id']}/exercises/{bench['id']}", headers=H, json=lift(100, 13, 3))
    assert r.status_code == 200
    assert r.json()["id"] == bench["id"]
    assert r.json()["score"] == 312.0
    assert my_total(H) == 602.0

    # delete one of three
    r = client.delete(f"/workouts/{w['id']}/exercises/{running['id']}", headers=H)
    assert r.status_code == 200
    assert r.json()["workout_deleted"] is False
    assert my_total(H) == 402.0

    # exercise order survives the edit
    names = [ex["score"] for ex in client.get(f"/workouts/{w['id']}", headers=H).json()["exercises"]]
    assert names == [312.0, 90.0]

def test_replace_is_a_full_replacement():
    H = login_headers()
    w = client.post("/workouts", headers=H, json={"exercises": [lift(100, 10, 3)]}).json()
    ex_id = w["exercises"][0]["id"]
    r = client.put(f"/workouts/{w['id']}/exercises/{ex_id}", headers=H,
                   json={"type": "Lifting", "name": "Bench", "weight": 100, "reps": 10})
    assert r.status_code == 200
    assert r.json()["sets"] is None
    assert r.json()["score"] == 0.0

def test_deleting_last_exercise_deletes_workout():
    H = login_headers()
    w = client.post("/workouts", headers=H, json={"exercises": [run(3, 900)]}).json()
    ex_id = w["exercises"][0]["id"]
    r = client.delete(f"/workouts/{w['id']}/exercises/{ex_id}", headers=H)
    assert r.status_code == 200
    assert r.json()["workout_deleted"] is True
    assert client.get(f"/workouts/{w['id']}", headers=H).status_code == 404
    assert client.get("/users/me", headers=H).json()["workout_count"] == 0
    assert my_total(H) == 0

def test_delete_workout():
    H = login_headers()
    w = client.post("/workouts", headers=H, json={"exercises": [run(3, 900)]}).json()
    assert client.delete(f"/workouts/{w['id']}", headers=H).status_code == 204
    assert client.get("/workouts", headers=H).json() == []

def test_users_me_summary_and_rename():
    H = login_headers("Before")
    client.post("/workouts", headers=H, json={"exercises": [lift(100, 10, 3)]})
    r = client.patch("/users/me", headers=H, json={"name": "  After "})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "After"
    assert body["total_score"] == 300.0
    assert body["workout_count"] == 1
    assert body["average_score"] == 300.0

def test_average_score_on_summary():
    H = login_headers()
    assert client.get("/users/me", headers=H).json()["average_score"] == 0.0
    client.post("/workouts", headers=H, json={"exercises": [lift(100, 10, 3)]})
    client.post("/workouts", headers=H, json={"exercises": [run(5, 1800)]})
    body = client.get("/users/me", headers=H).json()
    assert body["workout_count"] == 2
    assert body["average_score"] == 250.0

def test_list_workouts_for_one_day():
    H = login_headers()
    client.post("/workouts", headers=H, json={"workout_date": "2026-03-01", "exercises": [run(1, 0)]})
    client.post("/workouts", headers=H, json={"workout_date": "2026-03-02", "exercises": [run(2, 0)]})
    client.post("/workouts", headers=H, json={"workout_date": "2026-03-02", "exercises": [lift(10, 5, 5)]})

    r = client.get("/workouts", headers=H, params={"on": "2026-03-02"})
    assert r.status_code == 200
    assert [w["workout_date"] for w in r.json()] == ["2026-03-02", "2026-03-02"]

    assert client.get("/workouts", headers=H, params={"on": "2026-03-03"}).json() == []
    assert len(client.get("/workouts", headers=H).json()) == 3
    assert client.get("/workouts", headers=H, params={"on": "not-a-day"}).status_code == 422
