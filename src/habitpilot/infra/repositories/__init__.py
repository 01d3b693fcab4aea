"""Concrete repository implementations using SQLModel."""

from .habit import SettingsHabitRepository
from .settings import SQLModelSettingsRepository

__all__ = [
    "SettingsHabitRepository",
    "SQLModelSettingsRepository",
]
