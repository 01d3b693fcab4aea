"""Dialog components for the HabitPilot desktop app."""

from .base import close_dialog, open_dialog, show_snack
from .coach_dialog import CoachPanel, show_coach_dialog
from .habit_dialog import build_habit_dialog, show_habit_dialog

__all__ = [
    "CoachPanel",
    "build_habit_dialog",
    "close_dialog",
    "open_dialog",
    "show_coach_dialog",
    "show_habit_dialog",
    "show_snack",
]
