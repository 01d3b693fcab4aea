"""Reusable widget components for the desktop app."""

from __future__ import annotations

from typing import Optional, Sequence

import flet as ft

from ...services.adherence import AdherenceBox, BoxState, DailyAdherence

GOOD_COLOR = ft.Colors.GREEN_500
BAD_COLOR = ft.Colors.RED_500


def build_card(
    title: str,
    content: ft.Control,
    actions: Optional[list[ft.Control]] = None,
    icon: Optional[str] = None,
) -> ft.Card:
    """Build a standard card with title and content."""

    header_controls: list[ft.Control] = []
    if icon:
        header_controls.append(ft.Icon(icon, color=ft.Colors.BLUE_600))
    header_controls.append(ft.Text(title, size=18, weight=ft.FontWeight.BOLD))

    card_content = ft.Column(
        [
            ft.Container(
                content=ft.Row(header_controls, spacing=8),
                padding=ft.padding.only(left=16, right=16, top=16, bottom=8),
            ),
            ft.Divider(height=1),
            ft.Container(content=content, padding=16),
        ],
        spacing=0,
    )

    if actions:
        card_content.controls.append(
            ft.Container(
                content=ft.Row(actions, alignment=ft.MainAxisAlignment.END),
                padding=ft.padding.only(left=16, right=16, bottom=16),
            )
        )

    return ft.Card(content=card_content, elevation=2)


def build_history_strip(
    boxes: Sequence[AdherenceBox],
    *,
    is_good: bool,
    completion_text: str,
) -> ft.Row:
    """Seven small squares, one per day, oldest first."""

    cells: list[ft.Control] = []
    for box in boxes:
        border = None
        if box.state is BoxState.LOGGED:
            color = GOOD_COLOR if is_good else BAD_COLOR
            status = completion_text
        elif box.state is BoxState.PENDING_TODAY:
            color = ft.Colors.YELLOW_100
            border = ft.border.all(2, ft.Colors.YELLOW_400)
            status = "Pending"
        else:
            color = ft.Colors.GREY_300
            status = "Pending"
        cells.append(
            ft.Container(
                width=14,
                height=14,
                bgcolor=color,
                border=border,
                border_radius=3,
                tooltip=f"{box.date}: {status}",
                data=box.state.value,
            )
        )
    return ft.Row(cells, spacing=3)


def build_adherence_bars(series: Sequence[DailyAdherence], height: int = 80) -> ft.Row:
    """Inline bar chart of daily adherence; bars above 50% are highlighted."""

    bars: list[ft.Control] = []
    for day in series:
        bar_height = max(1, round(height * day.percent / 100)) if day.percent else 0
        bars.append(
            ft.Container(
                content=ft.Container(
                    height=bar_height,
                    bgcolor=ft.Colors.BLUE_500 if day.percent > 50 else ft.Colors.GREY_400,
                    border_radius=ft.border_radius.only(top_left=3, top_right=3),
                ),
                height=height,
                expand=True,
                alignment=ft.alignment.bottom_center,
                tooltip=f"{day.date}: {day.percent}%",
                data=day.percent,
            )
        )
    return ft.Row(bars, spacing=6, vertical_alignment=ft.CrossAxisAlignment.END)


def empty_state(message: str) -> ft.Container:
    """Simple empty-state placeholder."""

    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
    )
