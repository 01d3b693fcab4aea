"""Habit repository backed by a single key/value slot."""

from __future__ import annotations

import json
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from ...logging_config import get_logger
from ...models.habit import Habit
from .settings import SQLModelSettingsRepository

logger = get_logger(__name__)

STORAGE_KEY = "habitTrackerData"


def dump_habits(habits: Sequence[Habit]) -> str:
    """Serialize the full collection to the stored JSON text."""
    return json.dumps([habit.to_record() for habit in habits], ensure_ascii=False)


def parse_habits(raw: str) -> list[Habit]:
    """Parse stored JSON text into habits.

    Malformed records are skipped and a repeated id keeps its first record.

    Raises:
        ValueError: when the text is not JSON or not a list
    """
    try:
        payload = json.loads(raw)
    except RecursionError:
        raise ValueError("Stored habits are nested too deeply to decode") from None
    if not isinstance(payload, list):
        raise ValueError(f"Stored habits must be a list, got {type(payload).__name__}")

    habits: list[Habit] = []
    seen: set[str] = set()
    for index, record in enumerate(payload):
        try:
            habit = Habit.from_record(record)
        except ValueError as exc:
            logger.warning(
                "Skipping malformed habit record",
                extra={"index": index, "reason": str(exc)},
            )
            continue
        if habit.id in seen:
            logger.warning("Dropping duplicate habit id", extra={"habit_id": habit.id})
            continue
        seen.add(habit.id)
        habits.append(habit)
    return habits


class SettingsHabitRepository:
    """Stores every habit as one JSON document in an ``app_setting`` row."""

    def __init__(self, settings_repo: SQLModelSettingsRepository, key: str = STORAGE_KEY):
        self.settings_repo = settings_repo
        self.key = key

    def load(self) -> list[Habit]:
        """Read the slot; missing or unreadable data yields an empty list."""
        try:
            raw = self.settings_repo.get_value(self.key)
        except SQLAlchemyError:
            logger.exception("Error loading habits from storage", extra={"key": self.key})
            return []

        if raw is None:
            return []

        try:
            habits = parse_habits(raw)
        except ValueError as exc:  # JSONDecodeError is a ValueError
            logger.warning(
                "Stored habits are corrupt, starting empty",
                extra={"key": self.key, "reason": str(exc)},
            )
            return []

        logger.info("Loaded habits", extra={"key": self.key, "count": len(habits)})
        return habits

    def save(self, habits: Sequence[Habit]) -> None:
        """Overwrite the slot with the full collection; errors are logged only."""
        try:
            self.settings_repo.set(self.key, dump_habits(habits), description="Habit tracker data")
        except (SQLAlchemyError, OSError):
            logger.exception(
                "Error saving habits to storage",
                extra={"key": self.key, "count": len(habits)},
            )
            return
        logger.debug("Saved habits", extra={"key": self.key, "count": len(habits)})


__all__ = ["STORAGE_KEY", "SettingsHabitRepository", "dump_habits", "parse_habits"]
