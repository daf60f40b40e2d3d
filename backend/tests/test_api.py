"""API tests for the habit, points, notes, plan and admin routers."""

from unittest.mock import patch

from fitpoints.exceptions import PersistenceError
from fitpoints.models import Habit, PlanExercise, Student, UserHabit
from fitpoints.services.completion_service import CompletionService

API = "/api/v1"
HEADERS = {"X-User-Id": "1"}
DAY = {"day": "2024-03-04"}
CSV_HEADER = "plan_id,subject_email,day,exercise,sets,reps,rest,intensity,video_url"


def _upload(client, content, filename="plan.csv", content_type="text/csv"):
    return client.post(
        f"{API}/admin/import-plan",
        files={"csvFile": (filename, content.encode("utf-8"), content_type)},
    )


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

def test_missing_user_header_is_401(client, user):
    response = client.get(f"{API}/points/today", params=DAY)
    assert response.status_code == 401


def test_unknown_user_is_404(client, user):
    response = client.get(f"{API}/points/today", params=DAY, headers={"X-User-Id": "42"})
    assert response.status_code == 404


# ---------------------------------------------------------------------------
# Habits and points
# ---------------------------------------------------------------------------

def test_toggle_and_points_scenario(client, user, habit):
    response = client.post(f"{API}/habits/7/toggle", params=DAY, headers=HEADERS)
    assert response.status_code == 200
    assert response.json() == {"completed": True}

    points = client.get(f"{API}/points/today", params=DAY, headers=HEADERS).json()
    assert points["daily_total"] == 2
    assert points["daily_completed_count"] == 1
    assert points["weekly_total"] == 2
    assert points["week_start"] == "2024-03-04"

    response = client.post(f"{API}/habits/7/toggle", params=DAY, headers=HEADERS)
    assert response.json() == {"completed": False}

    points = client.get(f"{API}/points/today", params=DAY, headers=HEADERS).json()
    assert (points["daily_total"], points["daily_completed_count"], points["weekly_total"]) == (0, 0, 0)


def test_toggle_rejects_malformed_day(client, user, habit):
    response = client.post(f"{API}/habits/7/toggle", params={"day": "04/03/2024"}, headers=HEADERS)
    assert response.status_code == 422


def test_toggle_failure_is_a_generic_500(client, user, habit):
    with patch.object(CompletionService, "toggle", side_effect=PersistenceError("db down")):
        response = client.post(f"{API}/habits/7/toggle", params=DAY, headers=HEADERS)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to toggle habit"}


def test_create_custom_habit_defaults_to_one_point(client, db_session, user):
    response = client.post(f"{API}/habits/custom", json={"name": "Read 10 pages"}, headers=HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    habit = db_session.get(Habit, body["id"])
    assert habit.points == 1
    assert habit.is_default is False
    assert db_session.query(UserHabit).filter(UserHabit.habit_id == habit.id).count() == 1


def test_create_custom_habit_requires_name(client, user):
    response = client.post(f"{API}/habits/custom", json={"points": 3}, headers=HEADERS)
    assert response.status_code == 422


def test_list_habits_for_day_shows_completion(client, user, habit):
    client.post(f"{API}/habits/custom", json={"name": "Stretch", "points": 3}, headers=HEADERS)
    client.post(f"{API}/habits/7/toggle", params=DAY, headers=HEADERS)

    habits = client.get(f"{API}/habits/today", params=DAY, headers=HEADERS).json()

    assert [(h["name"], h["points"], h["completed"]) for h in habits] == [
        ("Walk 8000 steps", 2, True),
        ("Stretch", 3, False),
    ]


def test_initialize_default_habits_is_idempotent(client, db_session, user):
    db_session.add_all([
        Habit(name="Drink water", points=1, is_default=True),
        Habit(name="Sleep 7h", points=2, is_default=True),
        Habit(name="Someone's custom", points=5, is_default=False),
    ])
    db_session.commit()

    first = client.post(f"{API}/habits/initialize", headers=HEADERS).json()
    second = client.post(f"{API}/habits/initialize", headers=HEADERS).json()

    assert first == {"success": True, "added": 2}
    assert second == {"success": True, "added": 0}
    assert db_session.query(UserHabit).filter(UserHabit.user_id == user.id).count() == 2


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------

def test_daily_note_round_trip(client, user):
    assert client.get(f"{API}/notes/today", params=DAY, headers=HEADERS).json() == {"content": ""}

    client.post(f"{API}/notes/today", params=DAY, json={"content": "Legs sore"}, headers=HEADERS)
    client.post(f"{API}/notes/today", params=DAY, json={"content": "Legs fine now"}, headers=HEADERS)

    assert client.get(f"{API}/notes/today", params=DAY, headers=HEADERS).json() == {"content": "Legs fine now"}


# ---------------------------------------------------------------------------
# Admin: students and import
# ---------------------------------------------------------------------------

def test_create_and_list_students(client):
    client.post(f"{API}/admin/students", json={"name": "Zoe", "email": "zoe@example.com"})
    response = client.post(f"{API}/admin/students", json={"name": "Ana", "email": "ana@example.com"})
    assert response.status_code == 200

    duplicate = client.post(f"{API}/admin/students", json={"name": "Ana 2", "email": "ana@example.com"})
    assert duplicate.status_code == 400

    invalid = client.post(f"{API}/admin/students", json={"name": "X", "email": "not-an-email"})
    assert invalid.status_code == 422

    names = [s["name"] for s in client.get(f"{API}/admin/students").json()]
    assert names == ["Ana", "Zoe"]


def test_import_plan_upload(client, db_session, plans, students):
    content = "\n".join([
        CSV_HEADER,
        "10,ana@example.com,1,Squat,4,8,90s,high,",
        "20,ana@example.com,2,Burpees,5,20,30s,high,",
        "20,ghost@example.com,1,Nope,1,1,1s,low,",
    ])

    response = _upload(client, content)

    assert response.status_code == 200
    body = response.json()
    assert body["rows_processed"] == 2
    assert body["distinct_plans_touched"] == 2
    assert body["rows_skipped"] == 1
    assert db_session.query(Student).filter(Student.email == "ana@example.com").one().assigned_plan_id == 20


def test_import_plan_with_byte_order_mark(client, db_session, plans, students):
    content = "\ufeff" + CSV_HEADER + "\n10,ana@example.com,1,Squat,4,8,90s,high,"

    response = _upload(client, content)

    assert response.status_code == 200
    assert response.json()["rows_processed"] == 1


def test_import_plan_missing_column_lists_it(client, db_session, plans, students):
    content = "plan_id,subject_email,day,sets,reps,rest,intensity\n10,ana@example.com,1,4,8,90s,high"

    response = _upload(client, content)

    assert response.status_code == 400
    assert response.json()["detail"]["missing_columns"] == ["exercise"]
    assert db_session.query(PlanExercise).count() == 0


def test_import_plan_requires_a_file(client):
    response = client.post(f"{API}/admin/import-plan")
    assert response.status_code == 400
    assert response.json() == {"detail": "No CSV file provided"}


def test_import_plan_rejects_non_csv(client):
    response = _upload(client, "{}", filename="plan.json", content_type="application/json")
    assert response.status_code == 400
    assert response.json() == {"detail": "Only CSV files are allowed"}


# ---------------------------------------------------------------------------
# Assigned plan view
# ---------------------------------------------------------------------------

def test_student_plan_grouped_by_day(client, db_session, plans, students):
    _upload(client, "\n".join([
        CSV_HEADER,
        "10,ana@example.com,2,Deadlift,5,5,120s,high,",
        "10,ana@example.com,1,Squat,4,8,90s,high,",
        "10,ana@example.com,1,Lunge,3,12,60s,moderate,",
    ]))
    ana = db_session.query(Student).filter(Student.email == "ana@example.com").one()

    body = client.get(f"{API}/plans/students/{ana.id}").json()

    assert body["plan"]["name"] == "Strength A"
    assert body["student"]["email"] == "ana@example.com"
    assert [e["exercise"] for e in body["exercises_by_day"]["1"]] == ["Squat", "Lunge"]
    assert [e["exercise"] for e in body["exercises_by_day"]["2"]] == ["Deadlift"]


def test_student_without_plan_returns_null(client, students):
    response = client.get(f"{API}/plans/students/{students[0].id}")
    assert response.status_code == 200
    assert response.json() is None


def test_unknown_student_plan_is_404(client, db_session):
    response = client.get(f"{API}/plans/students/999")
    assert response.status_code == 404
