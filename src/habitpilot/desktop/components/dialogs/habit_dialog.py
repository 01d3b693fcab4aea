"""Add-habit dialog.

Collects a name and a good/bad type; the Create button stays disabled until
the trimmed name is non-empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import flet as ft

from ....logging_config import get_logger
from ....models.habit import Habit, HabitType
from .base import close_dialog, open_dialog, show_snack

if TYPE_CHECKING:
    from ...context import AppContext

logger = get_logger(__name__)

NAME_MAX_LENGTH = 100


def build_habit_dialog(
    ctx: AppContext,
    page: ft.Page,
    on_created: Optional[Callable[[Habit], None]] = None,
) -> ft.AlertDialog:
    """Build (without opening) the add-habit dialog."""

    name_field = ft.TextField(
        label="Habit Name",
        hint_text="e.g., Cycle for 30 minutes",
        autofocus=True,
        max_length=NAME_MAX_LENGTH,
        width=400,
    )

    type_group = ft.RadioGroup(
        value=HabitType.GOOD.value,
        content=ft.Row(
            controls=[
                ft.Radio(value=HabitType.GOOD.value, label="Good (To Do)"),
                ft.Radio(value=HabitType.BAD.value, label="Bad (To Avoid)"),
            ],
        ),
    )

    create_button = ft.FilledButton("Create Habit", disabled=True)

    def _on_name_change(_e=None) -> None:
        create_button.disabled = not (name_field.value or "").strip()
        if getattr(create_button, "page", None):
            create_button.update()

    def _close(_e=None) -> None:
        close_dialog(page, dialog)

    def _create(_e=None) -> None:
        name = (name_field.value or "").strip()
        if not name:
            name_field.error_text = "Name is required"
            if getattr(name_field, "page", None):
                name_field.update()
            return

        created = ctx.store.add_habit(name, type_group.value or HabitType.GOOD.value)
        if created is None:
            return

        name_field.value = ""
        type_group.value = HabitType.GOOD.value
        create_button.disabled = True
        close_dialog(page, dialog)
        show_snack(page, f"Habit '{created.name}' created")
        if on_created:
            on_created(created)

    name_field.on_change = _on_name_change
    name_field.on_submit = _create
    create_button.on_click = _create

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Add New Habit"),
        content=ft.Column(
            controls=[
                name_field,
                ft.Text("Habit Type", weight=ft.FontWeight.BOLD),
                type_group,
            ],
            tight=True,
            spacing=12,
            width=420,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=_close),
            create_button,
        ],
    )
    # Exposed for tests and keyboard helpers
    dialog.data = {
        "name_field": name_field,
        "type_group": type_group,
        "create_button": create_button,
        "submit": _create,
    }
    return dialog


def show_habit_dialog(
    ctx: AppContext,
    page: ft.Page,
    on_created: Optional[Callable[[Habit], None]] = None,
) -> ft.AlertDialog:
    dialog = build_habit_dialog(ctx, page, on_created=on_created)
    open_dialog(page, dialog)
    logger.debug("Add habit dialog opened")
    return dialog
