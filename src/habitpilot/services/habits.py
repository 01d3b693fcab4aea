"""Habit store: pure collection updates plus the stateful, persisted store."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..domain.repositories.habit import HabitRepository
from ..logging_config import get_logger
from ..models.habit import Habit, HabitType
from .clock import Clock, SystemClock, date_key

logger = get_logger(__name__)

Listener = Callable[[list[Habit]], None]


def new_habit_id() -> str:
    return uuid.uuid4().hex


def add_habit(
    habits: Sequence[Habit],
    name: str,
    habit_type: HabitType | str,
    *,
    id_factory: Callable[[], str] = new_habit_id,
    now: datetime | None = None,
) -> list[Habit]:
    """Return ``habits`` with a new habit appended.

    A blank name is a no-op and returns the input unchanged. The id factory is
    re-invoked until it yields an id not already in the collection.
    """
    clean = (name or "").strip()
    if not clean:
        return list(habits)

    taken = {habit.id for habit in habits}
    habit_id = id_factory()
    while not habit_id or habit_id in taken:
        habit_id = id_factory()

    created = Habit(
        id=habit_id,
        name=clean,
        type=HabitType.parse(habit_type),
        checked_days=frozenset(),
        created_at=(now or datetime.now()).isoformat(),
    )
    return [*habits, created]


def toggle_habit(habits: Sequence[Habit], habit_id: str, today_key: str) -> list[Habit]:
    """Flip ``today_key`` in the matching habit's checked days."""
    updated = []
    for habit in habits:
        if habit.id == habit_id:
            if today_key in habit.checked_days:
                habit = habit.with_checked_days(habit.checked_days - {today_key})
            else:
                habit = habit.with_checked_days(habit.checked_days | {today_key})
        updated.append(habit)
    return updated


class HabitStore:
    """Owns the current habit collection and keeps the repository in step.

    Mutations go through the pure functions above; a changed collection is
    saved and then announced to every subscriber.
    """

    def __init__(
        self,
        repository: HabitRepository,
        *,
        clock: Optional[Clock] = None,
        id_factory: Callable[[], str] = new_habit_id,
    ):
        self.repository = repository
        self.clock = clock or SystemClock()
        self.id_factory = id_factory
        self._habits: list[Habit] = []
        self._listeners: list[Listener] = []

    @property
    def habits(self) -> list[Habit]:
        return list(self._habits)

    @property
    def good_habits(self) -> list[Habit]:
        return [h for h in self._habits if h.type is HabitType.GOOD]

    @property
    def bad_habits(self) -> list[Habit]:
        return [h for h in self._habits if h.type is HabitType.BAD]

    def today_key(self) -> str:
        return date_key(self.clock.now().date())

    def get(self, habit_id: str) -> Optional[Habit]:
        return next((h for h in self._habits if h.id == habit_id), None)

    def load(self) -> list[Habit]:
        """Replace in-memory state with whatever the repository holds."""
        self._habits = self.repository.load()
        self._notify()
        return self.habits

    def save(self, habits: Sequence[Habit] | None = None) -> None:
        self.repository.save(list(self._habits if habits is None else habits))

    def add_habit(self, name: str, habit_type: HabitType | str = HabitType.GOOD) -> Optional[Habit]:
        """Create a habit; returns it, or None when the name was blank."""
        updated = add_habit(
            self._habits,
            name,
            habit_type,
            id_factory=self.id_factory,
            now=self.clock.now(),
        )
        if len(updated) == len(self._habits):
            logger.debug("Ignoring habit with blank name")
            return None
        created = updated[-1]
        self._commit(updated)
        logger.info(
            "Habit created",
            extra={"habit_id": created.id, "habit_type": created.type.value},
        )
        return created

    def toggle_habit(self, habit_id: str, today_key: str | None = None) -> Optional[Habit]:
        """Flip today's log for ``habit_id``; unknown ids leave state untouched."""
        if self.get(habit_id) is None:
            logger.warning("Toggle requested for unknown habit", extra={"habit_id": habit_id})
            return None
        day = today_key or self.today_key()
        updated = toggle_habit(self._habits, habit_id, day)
        self._commit(updated)
        habit = self.get(habit_id)
        logger.info(
            "Habit toggled",
            extra={"habit_id": habit_id, "day": day, "checked": habit is not None and habit.is_checked(day)},
        )
        return habit

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, habits: list[Habit]) -> None:
        self._habits = habits
        self.save(habits)
        self._notify()

    def _notify(self) -> None:
        snapshot = self.habits
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Habit listener failed")


__all__ = ["HabitStore", "add_habit", "new_habit_id", "toggle_habit"]
