"""Visualization module for pursuit engagements.

Provides plotting functions for:
- Range to target vs elapsed time
- Pursuer heading and LOS bearing vs elapsed time
- North/East positions of both vehicles
- A combined engagement dashboard

All plots use matplotlib with a consistent style and only read the frozen
trajectory log of an ``EngagementResult``.
"""

import matplotlib.pyplot as plt
import numpy as np
from beartype import beartype
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from pronav.simulation.results import EngagementResult

# =============================================================================
# Plot Style Configuration
# =============================================================================

COLORS = {
    "pursuer": "#2E86AB",  # Steel blue
    "target": "#A23B72",  # Berry
    "accent": "#F18F01",  # Orange
    "grid": "#CCCCCC",  # Grid lines
    "text": "#333333",  # Text color
}

DEFAULT_FIGSIZE = (10.0, 6.0)


def _setup_style() -> None:
    """Configure matplotlib style for consistent appearance."""
    plt.rcParams.update(
        {
            "font.family": "sans-serif",
            "font.sans-serif": ["Helvetica", "Arial", "DejaVu Sans"],
            "font.size": 11,
            "axes.titlesize": 14,
            "axes.labelsize": 12,
            "axes.edgecolor": COLORS["text"],
            "axes.labelcolor": COLORS["text"],
            "xtick.color": COLORS["text"],
            "ytick.color": COLORS["text"],
            "legend.fontsize": 10,
            "grid.alpha": 0.5,
        }
    )


def _title(result: EngagementResult) -> str:
    return f"Pure Proportional Navigation, N = {result.navigation_gain:g}"


# =============================================================================
# Axes Painters
# =============================================================================


def _draw_range(ax: Axes, result: EngagementResult) -> None:
    log = result.log
    ax.plot(log.time, log.range, color=COLORS["pursuer"], linewidth=2, label="Range")

    if np.isfinite(result.min_range):
        label = "Intercept" if result.intercepted else "Closest approach"
        ax.scatter(
            [result.min_range_time],
            [result.min_range],
            color=COLORS["accent"],
            zorder=3,
            label=f"{label}: r = {result.min_range:.3f} m, t = {result.min_range_time:.1f} s",
        )

    ax.set_xlabel("Elapsed time (s)")
    ax.set_ylabel("Range (m)")
    ax.invert_yaxis()
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")


def _draw_heading(ax: Axes, result: EngagementResult) -> None:
    log = result.log
    ax.plot(
        log.time, np.degrees(log.pursuer_heading),
        color=COLORS["pursuer"], linewidth=2, label="Pursuer heading",
    )
    ax.plot(
        log.time, np.degrees(log.los_angle),
        color=COLORS["target"], linewidth=2, linestyle="--", label="Bearing to target",
    )
    ax.set_xlabel("Elapsed time (s)")
    ax.set_ylabel("Heading angle (deg)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")


def _draw_positions(ax: Axes, result: EngagementResult) -> None:
    log = result.log
    # East on x, north on y
    ax.scatter(
        log.pursuer_position[:, 1], log.pursuer_position[:, 0],
        s=4, color=COLORS["pursuer"], label="Pursuer",
    )
    ax.scatter(
        log.target_position[:, 1], log.target_position[:, 0],
        s=4, color=COLORS["target"], label="Target",
    )
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("+E (m)")
    ax.set_ylabel("+N (m)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.12), ncol=2)


# =============================================================================
# Figures
# =============================================================================


@beartype
def plot_range_history(
    result: EngagementResult,
    figsize: tuple[float, float] = DEFAULT_FIGSIZE,
) -> Figure:
    """Plot range to target vs time, marking the minimum range.

    The range axis is inverted so that closing on the target reads upward.

    Args:
        result: Completed engagement
        figsize: Figure size

    Returns:
        matplotlib Figure
    """
    _setup_style()
    fig, ax = plt.subplots(figsize=figsize)
    _draw_range(ax, result)
    ax.set_title(_title(result))
    fig.tight_layout()
    return fig


@beartype
def plot_heading_history(
    result: EngagementResult,
    figsize: tuple[float, float] = DEFAULT_FIGSIZE,
) -> Figure:
    """Plot pursuer heading and LOS bearing vs time [deg]."""
    _setup_style()
    fig, ax = plt.subplots(figsize=figsize)
    _draw_heading(ax, result)
    ax.set_title(_title(result))
    fig.tight_layout()
    return fig


@beartype
def plot_positions(
    result: EngagementResult,
    figsize: tuple[float, float] = (8.0, 8.0),
) -> Figure:
    """Plot pursuer and target tracks in the North-East plane."""
    _setup_style()
    fig, ax = plt.subplots(figsize=figsize)
    _draw_positions(ax, result)
    ax.set_title(_title(result))
    fig.tight_layout()
    return fig


@beartype
def plot_engagement_dashboard(
    result: EngagementResult,
    figsize: tuple[float, float] = (16.0, 8.0),
) -> Figure:
    """Create a dashboard with tracks, range and heading histories.

    Layout:
    - Left: North-East tracks
    - Right top: range history
    - Right bottom: heading/bearing history

    Args:
        result: Completed engagement
        figsize: Figure size

    Returns:
        matplotlib Figure
    """
    _setup_style()

    fig = plt.figure(figsize=figsize)
    gs = fig.add_gridspec(2, 2, width_ratios=[1, 1.4])

    _draw_positions(fig.add_subplot(gs[:, 0]), result)
    _draw_range(fig.add_subplot(gs[0, 1]), result)
    _draw_heading(fig.add_subplot(gs[1, 1]), result)

    fig.suptitle(f"{_title(result)} ({result.status.value})")
    fig.tight_layout()
    return fig
