"""Habit repository protocol."""

from __future__ import annotations

from typing import Protocol, Sequence

from ...models.habit import Habit


class HabitRepository(Protocol):
    """Durable home for the whole habit collection."""

    def load(self) -> list[Habit]:
        """Return the stored habits, or an empty list when none can be read."""
        ...

    def save(self, habits: Sequence[Habit]) -> None:
        """Overwrite the stored collection; failures are logged, not raised."""
        ...
