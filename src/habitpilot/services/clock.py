"""Calendar and time-of-day context for the tracker."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    """Supplies the current local time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock reading the machine's local time."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one instant; used by tests and headless runs."""

    at: datetime

    def now(self) -> datetime:
        return self.at


@dataclass(frozen=True)
class TimeContext:
    """Display copy for the current part of the day."""

    name: str
    urgency: str


MORNING = TimeContext("Morning", "Start strong!")
AFTERNOON = TimeContext("Afternoon", "Time to focus!")
EVENING = TimeContext("Evening", "Almost done for the day!")


def date_key(day: date) -> str:
    """Return the canonical ``YYYY-MM-DD`` key for a calendar day."""
    return day.strftime("%Y-%m-%d")


def today_key(now: datetime | None = None) -> str:
    return date_key((now or datetime.now()).date())


def time_of_day(now: datetime | None = None) -> TimeContext:
    """Classify the hour as morning (5-11), afternoon (12-16) or evening."""
    hour = (now or datetime.now()).hour
    if 5 <= hour < 12:
        return MORNING
    if 12 <= hour < 17:
        return AFTERNOON
    return EVENING


def greeting(context: TimeContext) -> str:
    return f"Good {context.name}! {context.urgency}"


def reminder_message(pending: int, context: TimeContext) -> str:
    """Return the status line shown under the greeting."""
    if pending > 0:
        return f"You have {pending} habits left to log or avoid."
    return f"All clear! Your routine is complete for the {context.name}."


__all__ = [
    "AFTERNOON",
    "Clock",
    "EVENING",
    "FixedClock",
    "MORNING",
    "SystemClock",
    "TimeContext",
    "date_key",
    "greeting",
    "reminder_message",
    "time_of_day",
    "today_key",
]
