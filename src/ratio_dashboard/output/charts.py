from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt

from ratio_dashboard.models.dashboard import DashboardView, TabPanel

matplotlib.use("Agg")

logger = logging.getLogger(__name__)


def _apply_style(ax: plt.Axes) -> None:
    ax.set_facecolor("white")
    ax.grid(True, axis="y", alpha=0.3, linestyle="--")
    ax.set_axisbelow(True)
    ax.tick_params(labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def _save_figure(fig: plt.Figure, path: Path) -> None:
    fig.savefig(
        path,
        dpi=150,
        bbox_inches="tight",
        facecolor="white",
        edgecolor="none",
    )
    plt.close(fig)


def generate_tab_chart(panel: TabPanel, output_dir: Path) -> Path | None:
    """Draw the panel's bars as a PNG; panels without bars yield None."""
    try:
        if not panel.bars:
            return None

        fig, ax = plt.subplots(figsize=(6, 4))
        fig.suptitle(panel.title, fontsize=13, fontweight="bold")

        names = [b.name for b in panel.bars]
        values = [b.value for b in panel.bars]
        colors = [b.color for b in panel.bars]
        bars = ax.bar(names, values, color=colors, width=0.6)
        ax.bar_label(bars, fmt="%.2f", fontsize=9)
        ax.axhline(0, color="black", linewidth=0.5, alpha=0.5)
        _apply_style(ax)

        path = output_dir / f"{panel.tab.value}.png"
        _save_figure(fig, path)
        return path
    except Exception:
        logger.warning("Failed to generate %s chart", panel.tab.value, exc_info=True)
        return None


def generate_all_charts(view: DashboardView, output_dir: Path) -> dict[str, Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    charts: dict[str, Path] = {}

    for panel in view.panels:
        path = generate_tab_chart(panel, output_dir)
        if path:
            charts[panel.tab.value] = path

    return charts
