"""Smoke tests for the engagement plots."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from pronav.plotting import (  # noqa: E402
    plot_engagement_dashboard,
    plot_heading_history,
    plot_positions,
    plot_range_history,
)
from pronav.simulation import EngagementConfig, run_engagement  # noqa: E402


@pytest.fixture(scope="module")
def result():
    return run_engagement(EngagementConfig(duration=400.0))


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlots:
    """Test that each plot builds a figure with the expected layout."""

    def test_range_history(self, result):
        fig = plot_range_history(result)
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        assert ax.yaxis_inverted()
        assert "N = 4" in ax.get_title()
        assert ax.get_ylabel() == "Range (m)"

    def test_range_marks_closest_approach(self, result):
        fig = plot_range_history(result)
        labels = [text.get_text() for text in fig.axes[0].get_legend().get_texts()]
        assert any(label.startswith("Closest approach") for label in labels)

    def test_heading_history(self, result):
        fig = plot_heading_history(result)
        lines = fig.axes[0].get_lines()
        assert len(lines) == 2
        assert len(lines[0].get_xdata()) == len(result.log)

    def test_positions(self, result):
        fig = plot_positions(result)
        ax = fig.axes[0]
        assert ax.get_xlabel() == "+E (m)"
        assert ax.get_ylabel() == "+N (m)"

    def test_dashboard(self, result):
        fig = plot_engagement_dashboard(result)
        assert len(fig.axes) == 3
        assert "timed_out" in fig.get_suptitle()

    def test_save(self, result, tmp_path):
        fig = plot_engagement_dashboard(result)
        path = tmp_path / "dashboard.png"
        fig.savefig(path)
        assert path.stat().st_size > 0
