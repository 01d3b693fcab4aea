"""Dialog open/close helpers shared by the desktop dialogs."""

from __future__ import annotations

import flet as ft


def _refresh(page: ft.Page) -> None:
    try:
        page.update()
    except AssertionError:
        # Headless/preview contexts may not attach the dialog to a live page
        pass


def open_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    """Show ``dialog`` on ``page`` using whichever API the page offers."""
    opener = getattr(page, "open", None)
    if callable(opener):
        opener(dialog)
        return
    page.dialog = dialog
    dialog.open = True
    _refresh(page)


def close_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    closer = getattr(page, "close", None)
    if callable(closer):
        closer(dialog)
        return
    dialog.open = False
    if getattr(page, "dialog", None) is dialog:
        page.dialog = None
    _refresh(page)


def show_snack(page: ft.Page, message: str, *, error: bool = False) -> None:
    """Display a snack bar message."""
    page.snack_bar = ft.SnackBar(
        content=ft.Text(message),
        bgcolor=ft.Colors.ERROR if error else None,
    )
    page.snack_bar.open = True
    _refresh(page)
