"""Chart helpers for Flet views."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from habitpilot.services.adherence import DailyAdherence

HIGH_ADHERENCE = "#3B82F6"
LOW_ADHERENCE = "#9CA3AF"


def _save_png(fig, output: Path | None) -> Path:
    if output is None:
        with NamedTemporaryFile(delete=False, suffix=".png") as tmp:
            path = Path(tmp.name)
    else:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, bbox_inches="tight", dpi=100)
    plt.close(fig)
    return path


def _day_label(key: str) -> str:
    try:
        return date.fromisoformat(key).strftime("%a")
    except ValueError:
        return key


def weekly_adherence_png(series: Sequence[DailyAdherence], output: Path | None = None) -> Path:
    """Render the 7-day adherence bars and return the PNG path.

    Days above 50% are highlighted, matching the snapshot card colours.
    """
    fig, ax = plt.subplots(figsize=(7, 2.6))

    if not series:
        ax.text(0.5, 0.5, "No habits yet", ha="center", va="center", fontsize=12, color="#999")
        ax.axis("off")
        return _save_png(fig, output)

    labels = [_day_label(day.date) for day in series]
    values = [day.percent for day in series]
    colors = [HIGH_ADHERENCE if value > 50 else LOW_ADHERENCE for value in values]

    positions = list(range(len(series)))
    bars = ax.bar(positions, values, color=colors, width=0.7)
    for bar, value in zip(bars, values):
        ax.annotate(
            f"{value}%",
            (bar.get_x() + bar.get_width() / 2, value),
            textcoords="offset points",
            xytext=(0, 3),
            ha="center",
            fontsize=8,
            color="#374151",
        )

    ax.set_xticks(positions)
    ax.set_xticklabels(labels)
    ax.set_ylim(0, 110)
    ax.yaxis.set_major_formatter(mticker.PercentFormatter(xmax=100))
    ax.set_title("Weekly Adherence Snapshot", fontsize=12, fontweight="bold")
    ax.grid(True, axis="y", linestyle="--", alpha=0.3)
    ax.set_axisbelow(True)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)

    fig.tight_layout()
    return _save_png(fig, output)


__all__ = ["weekly_adherence_png"]
