"""Tracker view: the single page of the app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import flet as ft

from ...logging_config import get_logger
from ...models.habit import Habit
from ...services.adherence import (
    HabitSummary,
    build_habit_summary,
    last_7_day_keys,
    pending_count,
    weekly_adherence,
)
from ...services.clock import date_key, greeting, reminder_message, time_of_day
from ..components import (
    build_adherence_bars,
    build_card,
    build_history_strip,
    empty_state,
    show_coach_dialog,
    show_habit_dialog,
    show_snack,
)

if TYPE_CHECKING:
    from ..context import AppContext

logger = get_logger(__name__)

EMPTY_GOOD = "No good habits set yet. Add a new habit using the '+' button."
EMPTY_BAD = "No bad habits set yet. Add a bad habit like 'Mindless Scrolling' to start avoiding it."


def build_habit_card(summary: HabitSummary, on_toggle: Callable[[str], None]) -> ft.Card:
    """Card with history strip, streak and the toggle button for one habit."""

    habit = summary.habit
    accent = ft.Colors.GREEN_400 if habit.is_good else ft.Colors.RED_400

    if summary.checked_today:
        button_icon = ft.Icons.CLOSE if habit.is_good else ft.Icons.CHECK
        button_color = ft.Colors.RED_500 if habit.is_good else ft.Colors.GREEN_500
        text_color = ft.Colors.WHITE
    else:
        button_icon = ft.Icons.CHECK if habit.is_good else ft.Icons.CLOSE
        button_color = ft.Colors.GREY_100
        text_color = ft.Colors.GREY_800

    toggle_button = ft.ElevatedButton(
        summary.action_text,
        icon=button_icon,
        bgcolor=button_color,
        color=text_color,
        on_click=lambda _e, hid=habit.id: on_toggle(hid),
        data=habit.id,
    )

    return ft.Card(
        content=ft.Container(
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text(
                                f"{'✅' if habit.is_good else '🚫'} {habit.name}",
                                size=18,
                                weight=ft.FontWeight.BOLD,
                                expand=True,
                            ),
                            ft.Container(
                                content=ft.Text(
                                    "Good Habit" if habit.is_good else "Bad Habit",
                                    size=11,
                                    weight=ft.FontWeight.W_600,
                                ),
                                bgcolor=ft.Colors.GREEN_100 if habit.is_good else ft.Colors.RED_100,
                                padding=ft.padding.symmetric(horizontal=10, vertical=4),
                                border_radius=12,
                            ),
                        ],
                    ),
                    ft.Row(
                        [
                            ft.Text("History", weight=ft.FontWeight.W_500),
                            build_history_strip(
                                summary.boxes,
                                is_good=habit.is_good,
                                completion_text=summary.completion_text,
                            ),
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    ft.Divider(height=1),
                    ft.Row(
                        [
                            ft.Text(
                                summary.streak_label,
                                size=16,
                                weight=ft.FontWeight.BOLD,
                                color=ft.Colors.BLUE_600 if summary.streak > 0 else ft.Colors.GREY_400,
                            ),
                            toggle_button,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                ],
                spacing=10,
            ),
            padding=16,
            border=ft.border.only(top=ft.border.BorderSide(6, accent)),
        ),
        elevation=2,
        data=habit.id,
    )


def build_tracker_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the tracker view and keep it in sync with the habit store."""

    greeting_ref = ft.Ref[ft.Text]()
    reminder_ref = ft.Ref[ft.Text]()
    chart_ref = ft.Ref[ft.Container]()
    good_list_ref = ft.Ref[ft.Column]()
    bad_list_ref = ft.Ref[ft.Column]()

    def _toggle(habit_id: str) -> None:
        if ctx.store.toggle_habit(habit_id) is None:
            show_snack(page, "Habit not found", error=True)

    def _section(habits: list[Habit], last7: list[str], today: str, empty_message: str) -> list[ft.Control]:
        if not habits:
            return [empty_state(empty_message)]
        return [build_habit_card(build_habit_summary(h, last7, today), _toggle) for h in habits]

    def refresh(habits: list[Habit] | None = None) -> None:
        habits = ctx.store.habits if habits is None else habits
        now = ctx.clock.now()
        today = date_key(now.date())
        last7 = last_7_day_keys(now.date())
        moment = time_of_day(now)

        greeting_ref.current.value = greeting(moment)
        reminder_ref.current.value = reminder_message(pending_count(habits, today), moment)

        chart = chart_ref.current
        if habits:
            chart.content = build_card(
                "Weekly Adherence Snapshot",
                ft.Column(
                    [
                        build_adherence_bars(weekly_adherence(habits, last7)),
                        ft.Text(
                            "Adherence % calculated over the last 7 days.",
                            size=12,
                            color=ft.Colors.ON_SURFACE_VARIANT,
                            text_align=ft.TextAlign.CENTER,
                        ),
                    ],
                    spacing=8,
                ),
                icon=ft.Icons.TRENDING_UP,
            )
            chart.visible = True
        else:
            chart.content = None
            chart.visible = False

        good = [h for h in habits if h.is_good]
        bad = [h for h in habits if not h.is_good]
        good_list_ref.current.controls = _section(good, last7, today, EMPTY_GOOD)
        bad_list_ref.current.controls = _section(bad, last7, today, EMPTY_BAD)

        try:
            page.update()
        except AssertionError:
            pass

    header = ft.Container(
        content=ft.Row(
            [
                ft.Column(
                    [
                        ft.Text("Habit Tracker", size=28, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE),
                        ft.Text(
                            "Data is saving automatically to local storage.",
                            size=12,
                            color=ft.Colors.BLUE_100,
                        ),
                    ],
                    spacing=4,
                ),
                ft.Container(
                    content=ft.Row(
                        [
                            ft.Icon(ft.Icons.BOLT, size=14, color=ft.Colors.WHITE),
                            ft.Text("Local Storage Active", size=11, color=ft.Colors.WHITE),
                        ],
                        spacing=4,
                    ),
                    bgcolor=ft.Colors.BLUE_500,
                    padding=ft.padding.symmetric(horizontal=10, vertical=4),
                    border_radius=12,
                ),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.START,
        ),
        bgcolor=ft.Colors.BLUE_600,
        padding=24,
        border_radius=ft.border_radius.only(top_left=16, top_right=16),
    )

    reminder_panel = ft.Container(
        content=ft.Column(
            [
                ft.Text("", ref=greeting_ref, weight=ft.FontWeight.BOLD, color=ft.Colors.AMBER_900),
                ft.Text("", ref=reminder_ref, size=13, color=ft.Colors.AMBER_800),
            ],
            spacing=6,
        ),
        bgcolor=ft.Colors.AMBER_50,
        border=ft.border.all(1, ft.Colors.AMBER_300),
        border_radius=12,
        padding=16,
    )

    body = ft.Column(
        [
            header,
            reminder_panel,
            ft.Container(ref=chart_ref, visible=False),
            ft.Text("Good Habits (To Do)", size=22, weight=ft.FontWeight.BOLD),
            ft.Column(ref=good_list_ref, spacing=8),
            ft.Text("Bad Habits (To Avoid)", size=22, weight=ft.FontWeight.BOLD),
            ft.Column(ref=bad_list_ref, spacing=8),
            ft.Container(height=80),
        ],
        spacing=16,
        width=720,
    )

    actions = ft.Column(
        [
            ft.FloatingActionButton(
                icon=ft.Icons.PSYCHOLOGY,
                tooltip="AI Coach Recommendations",
                bgcolor=ft.Colors.PURPLE_500,
                on_click=lambda _e: show_coach_dialog(ctx, page),
            ),
            ft.FloatingActionButton(
                icon=ft.Icons.ADD,
                tooltip="Add New Habit",
                bgcolor=ft.Colors.RED_500,
                on_click=lambda _e: show_habit_dialog(ctx, page),
            ),
        ],
        tight=True,
        spacing=16,
    )

    refresh()
    unsubscribe = ctx.store.subscribe(refresh)
    logger.debug("Tracker view built", extra={"habit_count": len(ctx.store.habits)})

    view = ft.View(
        route="/",
        controls=[
            ft.Row([body], alignment=ft.MainAxisAlignment.CENTER),
        ],
        floating_action_button=actions,
        scroll=ft.ScrollMode.AUTO,
        padding=16,
    )
    view.data = {
        "refresh": refresh,
        "unsubscribe": unsubscribe,
        "toggle": _toggle,
        "reminder": reminder_ref.current,
        "chart": chart_ref.current,
        "good_list": good_list_ref.current,
        "bad_list": bad_list_ref.current,
    }
    return view


__all__ = ["build_habit_card", "build_tracker_view"]
