"""Smoke tests for the command-line scripts against the test database."""

import importlib.util
from pathlib import Path

from fitpoints.models import Habit, PlanExercise, Student

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "scripts"
CSV_HEADER = "plan_id,subject_email,day,exercise,sets,reps,rest,intensity,video_url"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_import_plan_script(db_session, plans, students, tmp_path, capsys):
    csv_path = tmp_path / "plan.csv"
    csv_path.write_text("\n".join([
        CSV_HEADER,
        "10,ana@example.com,1,Squat,4,8,90s,high,",
        "20,bruno@example.com,1,Row,3,12,60s,low,",
        "20,ghost@example.com,1,Nope,1,1,1s,low,",
    ]), encoding="utf-8")

    exit_code = _load_script("import_plan").import_plan(csv_path)

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "2 exercises imported" in output
    assert "1 rows skipped" in output
    assert db_session.query(PlanExercise).count() == 2
    assert db_session.query(Student).filter(Student.email == "bruno@example.com").one().assigned_plan_id == 20


def test_import_plan_script_reports_missing_columns(db_session, tmp_path, capsys):
    csv_path = tmp_path / "plan.csv"
    csv_path.write_text("plan_id,subject_email,day\n10,ana@example.com,1", encoding="utf-8")

    exit_code = _load_script("import_plan").import_plan(csv_path)

    assert exit_code == 1
    assert "exercise" in capsys.readouterr().out
    assert db_session.query(PlanExercise).count() == 0


def test_seed_default_habits_script_is_idempotent(db_session):
    seed = _load_script("seed_default_habits")

    seed.seed_default_habits()
    seed.seed_default_habits()

    habits = db_session.query(Habit).filter(Habit.is_default == True).all()
    assert len(habits) == len(seed.DEFAULT_HABITS)
