#!/usr/bin/env python
"""Desktop app entrypoint for HabitPilot."""

import flet as ft

from habitpilot.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
