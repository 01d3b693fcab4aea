"""Pytest configuration and shared fixtures for HabitPilot tests.

Provides an isolated SQLite database per test, repositories wired to it, a
fixed clock, and small factories for habit values, so nothing touches the
real app data directory.
"""

from __future__ import annotations

import tempfile
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

import habitpilot.models  # noqa: F401  (registers tables on the metadata)
from habitpilot.infra.database import create_session_factory
from habitpilot.infra.repositories import SettingsHabitRepository, SQLModelSettingsRepository
from habitpilot.models.habit import Habit, HabitType
from habitpilot.services.clock import FixedClock, date_key
from habitpilot.services.habits import HabitStore

# Friday morning; the 7-day window runs 2024-03-09 .. 2024-03-15
FIXED_NOW = datetime(2024, 3, 15, 9, 30)
TODAY = FIXED_NOW.date()


def day_key(offset: int = 0) -> str:
    """Date key ``offset`` days before the fixed today."""
    return date_key(TODAY - timedelta(days=offset))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Point config at a throwaway data directory for every test."""
    monkeypatch.setenv("HABITPILOT_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("HABITPILOT_DATABASE_URL", f"sqlite:///{tmp_path / 'habitpilot.db'}")
    monkeypatch.setenv("HABITPILOT_DEV_MODE", "false")
    monkeypatch.delenv("HABITPILOT_STORAGE_KEY", raising=False)
    monkeypatch.delenv("HABITPILOT_COACH_DELAY", raising=False)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def settings_repo(session_factory) -> SQLModelSettingsRepository:
    return SQLModelSettingsRepository(session_factory)


@pytest.fixture
def habit_repo(settings_repo) -> SettingsHabitRepository:
    return SettingsHabitRepository(settings_repo)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture
def id_sequence():
    """Deterministic id factory: h1, h2, h3, ..."""

    counter = {"n": 0}

    def _next() -> str:
        counter["n"] += 1
        return f"h{counter['n']}"

    return _next


@pytest.fixture
def store(habit_repo, clock, id_sequence) -> HabitStore:
    habit_store = HabitStore(habit_repo, clock=clock, id_factory=id_sequence)
    habit_store.load()
    return habit_store


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory():
    """Factory for Habit values logged ``offsets`` days before the fixed today.

    Returns:
        Callable: Function building Habit instances
    """

    counter = {"n": 0}

    def _create_habit(
        name: str = "Test Habit",
        habit_type: HabitType | str = HabitType.GOOD,
        offsets: tuple[int, ...] = (),
        habit_id: str | None = None,
    ) -> Habit:
        counter["n"] += 1
        return Habit(
            id=habit_id or f"habit-{counter['n']}",
            name=name,
            type=HabitType.parse(habit_type),
            checked_days=frozenset(day_key(o) for o in offsets),
            created_at=FIXED_NOW.isoformat(),
        )

    return _create_habit


@pytest.fixture
def today() -> date:
    return TODAY
