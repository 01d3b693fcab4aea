"""Service module exports."""

from . import adherence, clock, coach, habits

__all__ = [
    "adherence",
    "clock",
    "coach",
    "habits",
]
