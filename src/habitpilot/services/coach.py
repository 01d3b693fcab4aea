"""Coaching recommendations.

The tracker only needs *some* text back; :class:`SimulatedCoach` returns a
fixed plan after a short pause so the loading state can be exercised
without a real backend.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, Sequence

from ..logging_config import get_logger
from ..models.habit import Habit
from .clock import TimeContext

logger = get_logger(__name__)

SIMULATED_PLAN = (
    "1. **Good Habit: Hydration Check (Morning)**. Scheduling Tip: Place a water bottle "
    "by your bed and drink it immediately upon waking.\n"
    "2. **Bad Habit: Mindless Social Scrolling (Avoidance)**. Strategy: Use an app blocker "
    "that activates 30 minutes after lunch and replace scrolling with a 5-minute "
    "stretching routine.\n"
    "3. **Good Habit: 10-Minute Tidy (Evening)**. Scheduling Tip: Immediately before "
    "watching TV, spend 10 minutes cleaning one area (kitchen sink, desk, etc.)."
)


class CoachError(RuntimeError):
    """Raised when a recommendation provider cannot produce advice."""


class RecommendationProvider(Protocol):
    async def fetch_recommendations(
        self, habits: Sequence[Habit], time_context: TimeContext
    ) -> str:
        """Return free-text recommendations for the given habits and time of day."""
        ...


class SimulatedCoach:
    """Stand-in provider returning :data:`SIMULATED_PLAN` after ``delay_seconds``."""

    def __init__(self, delay_seconds: float = 1.5, plan: str = SIMULATED_PLAN):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
        self.delay_seconds = delay_seconds
        self.plan = plan

    async def fetch_recommendations(
        self, habits: Sequence[Habit], time_context: TimeContext
    ) -> str:
        logger.info(
            "Generating simulated recommendations",
            extra={"habit_count": len(habits), "time_of_day": time_context.name},
        )
        await asyncio.sleep(self.delay_seconds)
        return self.plan


__all__ = ["CoachError", "RecommendationProvider", "SIMULATED_PLAN", "SimulatedCoach"]
