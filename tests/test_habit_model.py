"""Tests for the Habit value object and its stored record shape."""

from __future__ import annotations

import pytest

from habitpilot.models.habit import Habit, HabitType


def test_to_record_matches_stored_shape():
    habit = Habit(
        id="1700000000000",
        name="Read 10 min",
        type=HabitType.GOOD,
        checked_days=frozenset({"2024-03-14", "2024-03-12"}),
        created_at="2024-03-01T08:00:00",
    )

    assert habit.to_record() == {
        "id": "1700000000000",
        "name": "Read 10 min",
        "type": "good",
        "checkedDays": ["2024-03-12", "2024-03-14"],
        "createdAt": "2024-03-01T08:00:00",
    }


def test_from_record_collapses_duplicate_days():
    habit = Habit.from_record(
        {
            "id": "a",
            "name": "No late snacks",
            "type": "bad",
            "checkedDays": ["2024-03-14", "2024-03-14"],
            "createdAt": "2024-03-01T08:00:00",
        }
    )

    assert habit.type is HabitType.BAD
    assert habit.checked_days == frozenset({"2024-03-14"})
    assert not habit.is_good


def test_from_record_tolerates_missing_optional_fields():
    habit = Habit.from_record({"id": 42, "name": "Walk", "type": "good"})

    assert habit.id == "42"
    assert habit.checked_days == frozenset()
    assert habit.created_at == ""


@pytest.mark.parametrize(
    "record",
    [
        {"name": "Walk", "type": "good"},
        {"id": "a", "type": "good"},
        {"id": "a", "name": "Walk"},
        {"id": "a", "name": "Walk", "type": "neutral"},
        {"id": "a", "name": "   ", "type": "good"},
        {"id": "a", "name": "Walk", "type": "good", "checkedDays": "2024-03-14"},
        ["not", "an", "object"],
        {"id": None, "name": None, "type": "good"},
        {"id": "a", "name": None, "type": "good"},
        {"id": None, "name": "Walk", "type": "good"},
        {"id": True, "name": "Walk", "type": "good"},
        {"id": "a", "name": 42, "type": "good"},
    ],
)
def test_from_record_rejects_malformed_input(record):
    with pytest.raises(ValueError):
        Habit.from_record(record)


def test_habit_type_parse_is_case_insensitive():
    assert HabitType.parse(" Good ") is HabitType.GOOD
    assert HabitType.parse(HabitType.BAD) is HabitType.BAD
    with pytest.raises(ValueError, match="Unknown habit type"):
        HabitType.parse("meh")


def test_with_checked_days_returns_new_instance():
    habit = Habit(id="a", name="Walk", type="good")
    updated = habit.with_checked_days(["2024-03-15"])

    assert habit.checked_days == frozenset()
    assert updated.is_checked("2024-03-15")
    assert updated.id == habit.id


def test_from_record_accepts_numeric_timestamp_id():
    habit = Habit.from_record({"id": 1700000000000, "name": "Walk", "type": "good"})

    assert habit.id == "1700000000000"
