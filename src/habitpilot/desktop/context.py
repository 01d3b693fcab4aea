"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import flet as ft

from ..config import BaseConfig
from ..infra.database import create_db_engine, create_session_factory, init_database
from ..infra.repositories import SettingsHabitRepository, SQLModelSettingsRepository
from ..services.clock import Clock, SystemClock
from ..services.coach import RecommendationProvider, SimulatedCoach
from ..services.habits import HabitStore


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    config: BaseConfig
    session_factory: Callable

    settings_repo: SQLModelSettingsRepository
    habit_repo: SettingsHabitRepository
    store: HabitStore
    coach: RecommendationProvider
    clock: Clock

    theme_mode: ft.ThemeMode = ft.ThemeMode.LIGHT
    page: Optional[ft.Page] = None
    dev_mode: bool = False


def create_app_context(
    config: Optional[BaseConfig] = None,
    *,
    clock: Optional[Clock] = None,
    coach: Optional[RecommendationProvider] = None,
) -> AppContext:
    """Create the context and restore the persisted habits."""

    if config is None:
        config = BaseConfig()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)

    clock = clock or SystemClock()
    settings_repo = SQLModelSettingsRepository(session_factory)
    habit_repo = SettingsHabitRepository(settings_repo, key=config.STORAGE_KEY)
    store = HabitStore(habit_repo, clock=clock)
    store.load()

    return AppContext(
        config=config,
        dev_mode=config.DEV_MODE,
        session_factory=session_factory,
        settings_repo=settings_repo,
        habit_repo=habit_repo,
        store=store,
        coach=coach or SimulatedCoach(delay_seconds=config.COACH_DELAY_SECONDS),
        clock=clock,
    )
