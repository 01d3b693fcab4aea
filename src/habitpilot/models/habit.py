"""Habit tracking data structures."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Mapping


class HabitType(str, Enum):
    """Whether a habit is something to do or something to avoid."""

    GOOD = "good"
    BAD = "bad"

    @classmethod
    def parse(cls, raw: "HabitType | str") -> "HabitType":
        """Coerce user or stored input into a HabitType."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown habit type: {raw!r}") from None


@dataclass(frozen=True)
class Habit:
    """A tracked behaviour and the calendar days it was logged on.

    ``checked_days`` holds ``YYYY-MM-DD`` keys. For a good habit a key means
    "done that day", for a bad habit it means "avoided that day".
    """

    id: str
    name: str
    type: HabitType
    checked_days: frozenset[str] = field(default_factory=frozenset)
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Habit id must not be empty")
        if not self.name or not self.name.strip():
            raise ValueError("Habit name must not be blank")
        object.__setattr__(self, "type", HabitType.parse(self.type))
        object.__setattr__(self, "checked_days", frozenset(self.checked_days))

    @property
    def is_good(self) -> bool:
        return self.type is HabitType.GOOD

    def is_checked(self, day_key: str) -> bool:
        """Return True when the habit was logged on ``day_key``."""
        return day_key in self.checked_days

    def with_checked_days(self, days: Iterable[str]) -> "Habit":
        return replace(self, checked_days=frozenset(days))

    def to_record(self) -> dict[str, Any]:
        """Return the JSON-ready record stored in the durable slot."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "checkedDays": sorted(self.checked_days),
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Habit":
        """Build a Habit from a stored record.

        Raises:
            ValueError: when required fields are missing or malformed
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"Habit record must be an object, got {type(record).__name__}")
        try:
            habit_id = record["id"]
            name = record["name"]
            habit_type = record["type"]
        except KeyError as exc:
            raise ValueError(f"Habit record missing field {exc.args[0]!r}") from None

        # Older records carry numeric timestamp ids.
        if isinstance(habit_id, bool) or not isinstance(habit_id, (str, int)):
            raise ValueError(f"Habit record id must be a string, got {type(habit_id).__name__}")
        if not isinstance(name, str):
            raise ValueError(f"Habit record name must be a string, got {type(name).__name__}")

        days = record.get("checkedDays") or []
        if not isinstance(days, list) or not all(isinstance(d, str) for d in days):
            raise ValueError("Habit record checkedDays must be a list of date keys")

        return cls(
            id=str(habit_id),
            name=name,
            type=HabitType.parse(habit_type),
            checked_days=frozenset(days),
            created_at=str(record.get("createdAt") or ""),
        )
