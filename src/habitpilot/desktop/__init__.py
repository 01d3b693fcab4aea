"""Flet desktop shell for HabitPilot."""
