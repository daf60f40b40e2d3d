"""
Pytest configuration and fixtures

Every test gets a fresh in-memory SQLite schema: tables are created before
the test and dropped after it, so nothing leaks between tests.
"""
import os

# Must be set before fitpoints.database builds its engine
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date

import pytest
from fastapi.testclient import TestClient

from fitpoints.database import Base, SessionLocal, engine, get_db
from fitpoints import models  # noqa: F401
from fitpoints.main import app
from fitpoints.models import Habit, Student, TrainingPlan, User, UserHabit

MONDAY = date(2024, 3, 4)


@pytest.fixture(scope="function")
def db_session():
    """Create the schema, yield a session, drop everything afterwards."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """API client whose requests share the test session."""
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user(db_session):
    user = User(id=1, name="Test User", email="user@example.com")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    user = User(id=2, name="Other User", email="other@example.com")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def habit(db_session, user):
    """Habit 7 worth 2 points, active for the test user."""
    habit = Habit(id=7, name="Walk 8000 steps", points=2)
    db_session.add(habit)
    db_session.add(UserHabit(user_id=user.id, habit_id=7, is_active=True))
    db_session.commit()
    return habit


@pytest.fixture
def plans(db_session):
    """Two empty training plans, ids 10 and 20."""
    created = [
        TrainingPlan(id=10, name="Strength A", goal="strength"),
        TrainingPlan(id=20, name="Conditioning B", goal="fat loss"),
    ]
    db_session.add_all(created)
    db_session.commit()
    return created


@pytest.fixture
def students(db_session):
    created = [
        Student(name="Ana", email="ana@example.com"),
        Student(name="Bruno", email="bruno@example.com"),
    ]
    db_session.add_all(created)
    db_session.commit()
    return created


def _set_sqlite_foreign_keys(enabled):
    # PRAGMA foreign_keys is ignored inside a transaction, so go through the raw connection
    raw = engine.raw_connection()
    try:
        raw.cursor().execute(f"PRAGMA foreign_keys={'ON' if enabled else 'OFF'}")
    finally:
        raw.close()


@pytest.fixture
def foreign_keys(db_session):
    """Enforce foreign keys like PostgreSQL does for the duration of a test."""
    db_session.rollback()
    _set_sqlite_foreign_keys(True)
    try:
        yield
    finally:
        db_session.rollback()
        _set_sqlite_foreign_keys(False)
