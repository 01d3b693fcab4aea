"""Headless tests for the tracker view and add-habit dialog."""

from __future__ import annotations

import json
import logging

import flet as ft
import pytest
from conftest import FIXED_NOW

from habitpilot.desktop.app import main, mount
from habitpilot.desktop.components.dialogs.habit_dialog import build_habit_dialog
from habitpilot.desktop.context import create_app_context
from habitpilot.desktop.views.tracker import EMPTY_BAD, EMPTY_GOOD, build_tracker_view
from habitpilot.services.clock import FixedClock
from habitpilot.services.coach import SimulatedCoach


class DummyPage:
    """Minimal stand-in for flet.Page used in view builders."""

    def __init__(self):
        self.views: list[ft.View] = []
        self.route: str = "/"
        self.snack_bar = None
        self.dialog = None
        self.overlay: list[ft.Control] = []
        self.updates = 0

    def go(self, route: str):
        self.route = route

    def update(self):
        self.updates += 1


@pytest.fixture
def ctx():
    return create_app_context(clock=FixedClock(FIXED_NOW), coach=SimulatedCoach(0))


@pytest.fixture
def page():
    return DummyPage()


def _texts(control: ft.Control) -> list[str]:
    """Collect every Text value and button label under ``control``."""
    found: list[str] = []
    stack = [control]
    while stack:
        node = stack.pop()
        if isinstance(node, ft.Text) and node.value:
            found.append(node.value)
        elif isinstance(node, ft.ElevatedButton) and node.text:
            found.append(node.text)
        for attr in ("controls", "content"):
            child = getattr(node, attr, None)
            if isinstance(child, list):
                stack.extend(child)
            elif isinstance(child, ft.Control):
                stack.append(child)
    return found


def test_empty_tracker_renders(ctx, page):
    view = build_tracker_view(ctx, page)

    assert isinstance(view, ft.View)
    assert view.route == "/"
    assert view.data["chart"].visible is False
    assert _texts(view.data["good_list"]) == [EMPTY_GOOD]
    assert _texts(view.data["bad_list"]) == [EMPTY_BAD]
    assert view.data["reminder"].value == "All clear! Your routine is complete for the Morning."


def test_view_follows_store_changes(ctx, page):
    view = build_tracker_view(ctx, page)

    ctx.store.add_habit("Walk", "good")
    ctx.store.add_habit("Scroll", "bad")

    good_cards = view.data["good_list"].controls
    bad_cards = view.data["bad_list"].controls
    assert [card.data for card in good_cards] == [ctx.store.good_habits[0].id]
    assert [card.data for card in bad_cards] == [ctx.store.bad_habits[0].id]
    assert view.data["chart"].visible is True
    assert view.data["reminder"].value == "You have 2 habits left to log or avoid."
    assert "Mark Complete" in _texts(good_cards[0])
    assert "Mark Avoided" in _texts(bad_cards[0])


def test_toggle_from_view_updates_card(ctx, page):
    view = build_tracker_view(ctx, page)
    habit = ctx.store.add_habit("Walk")

    view.data["toggle"](habit.id)

    card_texts = _texts(view.data["good_list"].controls[0])
    assert "Undo Completed" in card_texts
    assert "1 Day Streak" in card_texts
    assert ctx.habit_repo.load()[0].is_checked("2024-03-15")


def test_unsubscribe_stops_refresh(ctx, page):
    view = build_tracker_view(ctx, page)
    view.data["unsubscribe"]()

    ctx.store.add_habit("Walk")

    assert _texts(view.data["good_list"]) == [EMPTY_GOOD]


def test_mount_replaces_page_views(ctx, page):
    view = mount(ctx, page)

    assert page.views == [view]


def test_habit_dialog_creates_habit(ctx, page):
    created = []
    dialog = build_habit_dialog(ctx, page, on_created=created.append)
    parts = dialog.data

    assert parts["create_button"].disabled is True

    parts["name_field"].value = "  Floss  "
    parts["type_group"].value = "bad"
    parts["submit"]()

    assert [h.name for h in created] == ["Floss"]
    assert ctx.store.bad_habits[0].name == "Floss"
    assert parts["name_field"].value == ""
    assert page.snack_bar is not None


def test_habit_dialog_blank_name_shows_error(ctx, page):
    dialog = build_habit_dialog(ctx, page)
    parts = dialog.data

    parts["name_field"].value = "   "
    parts["submit"]()

    assert parts["name_field"].error_text == "Name is required"
    assert ctx.store.habits == []


def test_habits_persist_across_contexts(ctx):
    ctx.store.add_habit("Walk")

    reopened = create_app_context(clock=FixedClock(FIXED_NOW))

    assert [h.name for h in reopened.store.habits] == ["Walk"]


def test_empty_sections_use_placeholder_icon(ctx, page):
    view = build_tracker_view(ctx, page)

    placeholder = view.data["good_list"].controls[0]

    assert isinstance(placeholder, ft.Container)
    assert any(isinstance(c, ft.Icon) for c in placeholder.content.controls)


@pytest.fixture
def reset_habitpilot_logger():
    yield
    logger = logging.getLogger("habitpilot")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_main_logs_corrupt_slot_to_file(monkeypatch, page, reset_habitpilot_logger):
    monkeypatch.setenv("HABITPILOT_DEV_MODE", "true")
    seeded = create_app_context()
    seeded.settings_repo.set(seeded.config.STORAGE_KEY, "{not json")

    main(page)

    logger = logging.getLogger("habitpilot")
    for handler in logger.handlers:
        handler.flush()
    log_file = seeded.config.DATA_DIR / "logs" / "habitpilot.log"
    messages = [
        json.loads(line)["message"]
        for line in log_file.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]

    assert messages.index("Logging initialized") < messages.index("Stored habits are corrupt, starting empty")
    assert "Dev mode enabled" in messages
    assert page.title == "HabitPilot (DEV)"
    assert len(page.views) == 1
