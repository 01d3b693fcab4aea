"""Reusable UI components for the desktop app."""

from .dialogs import close_dialog, open_dialog, show_coach_dialog, show_habit_dialog, show_snack
from .widgets import build_adherence_bars, build_card, build_history_strip, empty_state

__all__ = [
    "build_adherence_bars",
    "build_card",
    "build_history_strip",
    "close_dialog",
    "empty_state",
    "open_dialog",
    "show_coach_dialog",
    "show_habit_dialog",
    "show_snack",
]
