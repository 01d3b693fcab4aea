"""Main Flet desktop application entry point."""

from __future__ import annotations

import flet as ft

from ..config import BaseConfig
from ..logging_config import session_log_path, setup_logging
from .context import AppContext, create_app_context
from .views.tracker import build_tracker_view


def mount(ctx: AppContext, page: ft.Page) -> ft.View:
    """Attach the tracker view to ``page`` and return it."""

    view = build_tracker_view(ctx, page)
    page.views.clear()
    page.views.append(view)
    page.update()
    return view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    config = BaseConfig()
    logger = setup_logging(config)
    ctx = create_app_context(config)
    logger.info("HabitPilot desktop application starting", extra={"habit_count": len(ctx.store.habits)})

    ctx.page = page
    page.title = "HabitPilot (DEV)" if ctx.dev_mode else "HabitPilot"
    page.theme_mode = ctx.theme_mode
    page.bgcolor = ft.Colors.GREY_50
    page.window_width = 820
    page.window_height = 900
    page.window_min_width = 480
    page.window_min_height = 600
    if ctx.dev_mode:
        logger.info("Dev mode enabled", extra={"data_dir": str(config.DATA_DIR)})

    view = mount(ctx, page)

    def on_page_close(_e):
        unsubscribe = (view.data or {}).get("unsubscribe")
        if unsubscribe:
            unsubscribe()
        logger.info("Application closing")
        slp = session_log_path()
        if slp:
            logger.info(f"Debug session log saved to: {slp}")

    page.on_close = on_page_close

    def _on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        msg = getattr(e, "data", None) or "<no-data>"
        logger.error("Flet page error", extra={"event": "error", "data": msg})

    page.on_error = _on_error


def run() -> None:
    """Launch the desktop window."""
    ft.app(target=main)


if __name__ == "__main__":
    run()
