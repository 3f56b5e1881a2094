"""Run directories for engagement outputs.

Every engagement saved into a run writes its trajectory, summary, config and
dashboard under one directory, and ``metadata.json`` collects the outcome of
each engagement so a sweep can be compared without reopening the CSVs.

Example:
    >>> from pronav.output import OutputContext
    >>> with OutputContext("gain_sweep") as ctx:
    ...     for gain in (3.0, 4.0, 5.0):
    ...         config = EngagementConfig(navigation_gain=gain)
    ...         ctx.save_config(config, label=f"n{gain:g}")
    ...         ctx.save_result(run_engagement(config), label=f"n{gain:g}")
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from beartype import beartype

from pronav.plotting import plot_engagement_dashboard
from pronav.simulation.config import EngagementConfig
from pronav.simulation.results import EngagementResult
from pronav.storage import save_config

logger = logging.getLogger(__name__)

_PLOT_SUFFIXES = {".png", ".pdf", ".svg"}


def _labeled(stem: str, label: str, suffix: str) -> str:
    return f"{stem}_{label}{suffix}" if label else f"{stem}{suffix}"


@beartype
class OutputContext:
    """Context manager for the outputs of one or more engagements.

    Directory structure:
        {base_dir}/{name}_{timestamp}/
        ├── plots/          # dashboard[_label].png and any extra figures
        ├── data/           # trajectory[_label].csv, summary[_label].json, config[_label].json
        ├── run.log         # Messages passed to log()
        └── metadata.json   # Run information and per-engagement outcomes

    Attributes:
        name: Run name
        output_dir: Path to the output directory
        engagements: Summary of every saved engagement, keyed by label
    """

    def __init__(
        self,
        name: str,
        base_dir: str | Path | None = None,
        include_timestamp: bool = True,
    ) -> None:
        """Initialize output context.

        Args:
            name: Name for this run (used in directory name)
            base_dir: Base directory for outputs. Defaults to ./outputs/
            include_timestamp: Whether to include timestamp in directory name
        """
        self.name = name
        self.created = datetime.now()
        self.engagements: dict[str, dict[str, Any]] = {}

        base = Path(base_dir) if base_dir is not None else Path.cwd() / "outputs"
        if include_timestamp:
            self.output_dir = base / f"{name}_{self.created.strftime('%Y%m%d_%H%M%S')}"
        else:
            self.output_dir = base / name
        self._open = False

    def __enter__(self) -> "OutputContext":
        self.output_dir.mkdir(parents=True, exist_ok=True)
        (self.output_dir / "plots").mkdir(exist_ok=True)
        (self.output_dir / "data").mkdir(exist_ok=True)
        self._open = True
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        metadata = {
            "name": self.name,
            "created": self.created.isoformat(),
            "completed": datetime.now().isoformat(),
            "success": exc_type is None,
            "engagements": self.engagements,
        }
        with open(self.output_dir / "metadata.json", "w") as f:
            json.dump(metadata, f, indent=2)
        self._open = False

    def path(self, filename: str) -> Path:
        """Path for an output file: figures go to plots/, everything else to data/.

        Raises:
            RuntimeError: If used outside the ``with`` block
        """
        if not self._open:
            raise RuntimeError("OutputContext must be used as a context manager")
        subdir = "plots" if Path(filename).suffix.lower() in _PLOT_SUFFIXES else "data"
        return self.output_dir / subdir / filename

    def save_config(self, config: EngagementConfig, label: str = "") -> Path:
        """Write the engagement configuration as data/config[_label].json."""
        return save_config(
            config,
            self.path(_labeled("config", label, ".json")),
            name=label or self.name,
        )

    def save_result(
        self,
        result: EngagementResult,
        label: str = "",
        dashboard: bool = True,
    ) -> dict[str, Path]:
        """Write one engagement's trajectory, summary and dashboard.

        The summary is also recorded under ``label`` in metadata.json.

        Args:
            result: Finished engagement
            label: Suffix for the file names, e.g. "n4" in a gain sweep
            dashboard: Also render the engagement dashboard

        Returns:
            Written paths keyed by "trajectory", "summary" and "dashboard"
        """
        summary = result.summary()
        paths = {"trajectory": result.save_csv(self.path(_labeled("trajectory", label, ".csv")))}

        paths["summary"] = self.path(_labeled("summary", label, ".json"))
        with open(paths["summary"], "w") as f:
            json.dump(summary, f, indent=2)

        if dashboard:
            fig = plot_engagement_dashboard(result)
            paths["dashboard"] = self.path(_labeled("dashboard", label, ".png"))
            fig.savefig(paths["dashboard"], dpi=120)
            plt.close(fig)

        self.engagements[label or self.name] = summary
        logger.info(
            "Saved %s (%s, %d steps) to %s",
            label or self.name, result.status.value, result.steps, self.output_dir,
        )
        return paths

    def log(self, message: str) -> None:
        """Log a message and append it to run.log in the output directory."""
        logger.info(message)
        stamp = datetime.now().strftime("%H:%M:%S")
        with open(self.output_dir / "run.log", "a") as f:
            f.write(f"[{stamp}] {message}\n")
