"""Coach dialog: shows a spinner, awaits the provider, then the advice."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ....logging_config import get_logger
from ....services.clock import time_of_day
from .base import close_dialog, open_dialog

if TYPE_CHECKING:
    from ...context import AppContext

logger = get_logger(__name__)

LOADING_TEXT = "Generating contextualized plans and strategies..."
FAILURE_TEXT = "The coach is unavailable right now. Please try again later."


class CoachPanel:
    """Dialog body tracking one recommendation request."""

    def __init__(self, ctx: AppContext, page: ft.Page):
        self.ctx = ctx
        self.page = page
        self.loading = False
        self.recommendations: str | None = None
        self.error: str | None = None
        self.body = ft.Column(tight=True, spacing=12, width=480, scroll=ft.ScrollMode.AUTO)

    def show_loading(self) -> None:
        self.loading = True
        self.recommendations = None
        self.error = None
        self.body.controls = [
            ft.Container(
                content=ft.Column(
                    [ft.ProgressRing(), ft.Text(LOADING_TEXT, color=ft.Colors.ON_SURFACE_VARIANT)],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=12,
                ),
                alignment=ft.alignment.center,
                height=160,
            )
        ]
        self._refresh()

    def show_recommendations(self, text: str, context_name: str) -> None:
        self.loading = False
        self.recommendations = text
        self.body.controls = [
            ft.Text(
                "The coach provided these strategies based on your current habits "
                f"and the {context_name} context:",
                size=12,
                italic=True,
                color=ft.Colors.ON_SURFACE_VARIANT,
            ),
            ft.Markdown(text.replace("\n", "\n\n")),
        ]
        self._refresh()

    def show_failure(self, message: str = FAILURE_TEXT) -> None:
        self.loading = False
        self.error = message
        self.body.controls = [ft.Text(message, color=ft.Colors.ERROR)]
        self._refresh()

    async def load(self) -> None:
        """Request recommendations once; failures are logged and displayed."""
        context = time_of_day(self.ctx.clock.now())
        self.show_loading()
        try:
            text = await self.ctx.coach.fetch_recommendations(self.ctx.store.habits, context)
        except Exception:
            logger.exception("Coach recommendations failed")
            self.show_failure()
            return
        self.show_recommendations(text, context.name)

    def _refresh(self) -> None:
        if getattr(self.body, "page", None):
            self.body.update()


def show_coach_dialog(ctx: AppContext, page: ft.Page) -> CoachPanel:
    """Open the coach dialog and start fetching in the background."""

    panel = CoachPanel(ctx, page)
    dialog = ft.AlertDialog(
        modal=False,
        title=ft.Row(
            [ft.Icon(ft.Icons.PSYCHOLOGY, color=ft.Colors.PURPLE_600), ft.Text("AI Habit Coach")],
            spacing=8,
        ),
        content=panel.body,
        actions=[ft.TextButton("Close", on_click=lambda _e: close_dialog(page, dialog))],
    )
    panel.show_loading()
    open_dialog(page, dialog)

    runner = getattr(page, "run_task", None)
    if callable(runner):
        runner(panel.load)
    else:
        logger.warning("Page cannot run async tasks; coach request skipped")
    return panel


__all__ = ["CoachPanel", "FAILURE_TEXT", "LOADING_TEXT", "show_coach_dialog"]
