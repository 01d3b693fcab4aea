#!/usr/bin/env python
"""Desktop app entrypoint for HabitPilot with verbose console logging enabled."""

import logging
import os
import sys

# Force dev mode with verbose logging
os.environ["HABITPILOT_DEV_MODE"] = "true"

logging.basicConfig(
    level=logging.DEBUG,
    format="[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)

print("=" * 80)
print("HabitPilot - VERBOSE DEV MODE")
print("Habit toggles, store saves, coach requests and errors will be logged below")
print("=" * 80)
print()

import flet as ft

from habitpilot.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
