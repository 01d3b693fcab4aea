"""Command line entry points for HabitPilot."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SettingsHabitRepository, SQLModelSettingsRepository
from .models.habit import HabitType
from .services.adherence import (
    BoxState,
    build_habit_summary,
    last_7_day_keys,
    pending_count,
    weekly_adherence,
)
from .services.clock import SystemClock, date_key, greeting, reminder_message, time_of_day
from .services.habits import HabitStore

_BOX_GLYPHS = {BoxState.LOGGED: "#", BoxState.PENDING_TODAY: "?", BoxState.BLANK: "."}


def _open_store(config: BaseConfig) -> HabitStore:
    _engine, session_factory = bootstrap_database(config)
    settings_repo = SQLModelSettingsRepository(session_factory)
    store = HabitStore(SettingsHabitRepository(settings_repo, key=config.STORAGE_KEY), clock=SystemClock())
    store.load()
    return store


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Track good and bad habits from the terminal or the desktop window."""

    ctx.obj = BaseConfig()


@cli.command("desktop")
def desktop() -> None:
    """Open the desktop tracker."""

    from .desktop.app import run

    run()


@cli.command("status")
@click.pass_obj
def status(config: BaseConfig) -> None:
    """Show every habit with its streak and 7-day history."""

    store = _open_store(config)
    now = store.clock.now()
    today = date_key(now.date())
    last7 = last_7_day_keys(now.date())
    moment = time_of_day(now)
    habits = store.habits

    click.echo(greeting(moment))
    click.echo(reminder_message(pending_count(habits, today), moment))
    if not habits:
        click.echo("No habits yet. Add one with: habitpilot add NAME")
        return

    click.echo("")
    for habit in habits:
        summary = build_habit_summary(habit, last7, today)
        strip = "".join(_BOX_GLYPHS[box.state] for box in summary.boxes)
        click.echo(
            f"{habit.id[:8]}  [{strip}]  {habit.type.value:<4}  {habit.name}  ({summary.streak_label})"
        )

    series = weekly_adherence(habits, last7)
    click.echo("")
    click.echo("Adherence: " + " ".join(f"{day.date[5:]}={day.percent}%" for day in series))


@cli.command("add")
@click.argument("name")
@click.option(
    "--type",
    "habit_type",
    type=click.Choice([t.value for t in HabitType], case_sensitive=False),
    default=HabitType.GOOD.value,
    show_default=True,
)
@click.pass_obj
def add(config: BaseConfig, name: str, habit_type: str) -> None:
    """Add a habit to build (good) or avoid (bad)."""

    store = _open_store(config)
    habit = store.add_habit(name, habit_type)
    if habit is None:
        raise click.UsageError("Habit name must not be blank.")
    click.echo(f"Added {habit.type.value} habit '{habit.name}' ({habit.id})")


@cli.command("toggle")
@click.argument("habit_id")
@click.pass_obj
def toggle(config: BaseConfig, habit_id: str) -> None:
    """Mark or unmark today for a habit (an id prefix is enough)."""

    store = _open_store(config)
    matches = [h for h in store.habits if h.id.startswith(habit_id)]
    if len(matches) != 1:
        raise click.ClickException(
            f"No habit matches '{habit_id}'." if not matches else f"'{habit_id}' is ambiguous."
        )
    today = store.today_key()
    habit = store.toggle_habit(matches[0].id, today)
    state = "logged" if habit is not None and habit.is_checked(today) else "cleared"
    click.echo(f"{matches[0].name}: today {state}")


@cli.command("chart")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_obj
def chart(config: BaseConfig, output: Path | None) -> None:
    """Write the weekly adherence chart as a PNG."""

    from .desktop.charts import weekly_adherence_png

    store = _open_store(config)
    last7 = last_7_day_keys(store.clock.now().date())
    path = weekly_adherence_png(weekly_adherence(store.habits, last7), output=output)
    click.echo(f"Chart written: {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
