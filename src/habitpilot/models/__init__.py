"""Domain records and SQLModel table exports."""

from .habit import Habit, HabitType
from .settings import AppSetting

__all__ = [
    "AppSetting",
    "Habit",
    "HabitType",
]
