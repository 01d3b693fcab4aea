"""Derived views over the habit collection: streaks, history boxes, weekly adherence.

Every function here is pure. Callers pass the 7-day window produced by
:func:`last_7_day_keys` together with today's key so the whole page is
computed against one consistent notion of "today".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Sequence

from ..models.habit import Habit
from .clock import date_key

WINDOW_DAYS = 7


class BoxState(str, Enum):
    """Visual state of one day in a habit's history strip."""

    LOGGED = "logged"
    PENDING_TODAY = "pending_today"
    BLANK = "blank"


@dataclass(frozen=True)
class AdherenceBox:
    date: str
    state: BoxState


@dataclass(frozen=True)
class DailyAdherence:
    date: str
    percent: int


@dataclass(frozen=True)
class HabitSummary:
    """Everything a habit card needs to render."""

    habit: Habit
    streak: int
    boxes: tuple[AdherenceBox, ...]
    checked_today: bool

    @property
    def completion_text(self) -> str:
        return "Completed" if self.habit.is_good else "Avoided"

    @property
    def action_text(self) -> str:
        if self.checked_today:
            return f"Undo {self.completion_text}"
        return "Mark Complete" if self.habit.is_good else "Mark Avoided"

    @property
    def streak_label(self) -> str:
        return streak_label(self.streak)


def last_7_day_keys(reference: date) -> list[str]:
    """Return seven date keys, oldest first, ending with ``reference``."""
    return [date_key(reference - timedelta(days=offset)) for offset in range(WINDOW_DAYS - 1, -1, -1)]


def current_streak(habit: Habit, last7: Sequence[str], today_key: str) -> int:
    """Count consecutive logged days walking back from the newest day.

    An unlogged today is skipped rather than ending the streak, so the count
    holds until the day is over. Any other unlogged day ends the scan.
    """
    streak = 0
    for day in reversed(last7):
        if day in habit.checked_days:
            streak += 1
        elif day != today_key:
            break
    return streak


def adherence_boxes(habit: Habit, last7: Sequence[str], today_key: str) -> list[AdherenceBox]:
    boxes = []
    for day in last7:
        if day in habit.checked_days:
            state = BoxState.LOGGED
        elif day == today_key:
            state = BoxState.PENDING_TODAY
        else:
            state = BoxState.BLANK
        boxes.append(AdherenceBox(date=day, state=state))
    return boxes


def _percent(part: int, total: int) -> int:
    """Integer percentage rounded half-up, without float error."""
    return (200 * part + total) // (2 * total)


def weekly_adherence(habits: Sequence[Habit], last7: Sequence[str]) -> list[DailyAdherence]:
    """Share of all habits (good and bad alike) logged on each day of the window."""
    total = len(habits)
    if total == 0:
        return [DailyAdherence(date=day, percent=0) for day in last7]

    series = []
    for day in last7:
        logged = sum(1 for habit in habits if day in habit.checked_days)
        series.append(DailyAdherence(date=day, percent=_percent(logged, total)))
    return series


def pending_habits(habits: Sequence[Habit], today_key: str) -> list[Habit]:
    return [habit for habit in habits if today_key not in habit.checked_days]


def pending_count(habits: Sequence[Habit], today_key: str) -> int:
    return len(pending_habits(habits, today_key))


def streak_label(streak: int) -> str:
    return f"{streak} {'Day' if streak == 1 else 'Days'} Streak"


def build_habit_summary(habit: Habit, last7: Sequence[str], today_key: str) -> HabitSummary:
    return HabitSummary(
        habit=habit,
        streak=current_streak(habit, last7, today_key),
        boxes=tuple(adherence_boxes(habit, last7, today_key)),
        checked_today=today_key in habit.checked_days,
    )


__all__ = [
    "AdherenceBox",
    "BoxState",
    "DailyAdherence",
    "HabitSummary",
    "WINDOW_DAYS",
    "adherence_boxes",
    "build_habit_summary",
    "current_streak",
    "last_7_day_keys",
    "pending_count",
    "pending_habits",
    "streak_label",
    "weekly_adherence",
]
