"""Trajectory logging and engagement results.

The trajectory log is a fixed-capacity buffer allocated once for the
maximum possible number of steps, plus an explicit count of valid records.
Unused tail entries hold NaN ("no data"), never zero, and the public
accessors only expose the valid prefix. Once the run ends the buffer is
frozen and all arrays become read-only.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from pronav.dynamics.state import PursuerState, TargetState
from pronav.gnc.guidance.proportional_navigation import EngagementGeometry


class EngagementStatus(Enum):
    """Run loop state."""
    RUNNING = "running"
    INTERCEPTED = "intercepted"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not EngagementStatus.RUNNING


# =============================================================================
# Trajectory Log
# =============================================================================

# (name, trailing shape) of each logged channel
_CHANNELS: tuple[tuple[str, tuple[int, ...]], ...] = (
    ("time", ()),
    ("pursuer_position", (2,)),
    ("pursuer_velocity", (2,)),
    ("pursuer_heading", ()),
    ("target_position", (2,)),
    ("target_velocity", (2,)),
    ("range", ()),
    ("los_angle", ()),
)


class TrajectoryLog:
    """Pre-sized per-step record of an engagement.

    Example:
        >>> log = TrajectoryLog(capacity=3125)
        >>> log.record(0.4, pursuer, target, geometry)
        >>> len(log)
        1
        >>> log.range  # valid prefix only
    """

    @beartype
    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._length = 0
        self._frozen = False
        self._buffers: dict[str, NDArray[np.float64]] = {
            name: np.full((capacity, *shape), np.nan) for name, shape in _CHANNELS
        }

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"TrajectoryLog(length={self._length}, capacity={self._capacity}, {state})"

    @property
    def capacity(self) -> int:
        """Maximum number of records."""
        return self._capacity

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def is_full(self) -> bool:
        return self._length == self._capacity

    @beartype
    def record(
        self,
        time: float,
        pursuer: PursuerState,
        target: TargetState,
        geometry: EngagementGeometry,
    ) -> None:
        """Append one step.

        Raises:
            RuntimeError: If the log is frozen or full
        """
        if self._frozen:
            raise RuntimeError("Cannot record into a frozen trajectory log")
        if self._length >= self._capacity:
            raise RuntimeError(f"Trajectory log is full ({self._capacity} records)")

        i = self._length
        b = self._buffers
        b["time"][i] = time
        b["pursuer_position"][i] = pursuer.position
        b["pursuer_velocity"][i] = pursuer.velocity
        b["pursuer_heading"][i] = pursuer.heading
        b["target_position"][i] = target.position
        b["target_velocity"][i] = target.velocity
        b["range"][i] = geometry.range
        b["los_angle"][i] = geometry.los_angle
        self._length += 1

    def freeze(self) -> None:
        """Make the log immutable."""
        for buf in self._buffers.values():
            buf.setflags(write=False)
        self._frozen = True

    def padded(self, name: str) -> NDArray[np.float64]:
        """Full-capacity channel, NaN beyond the valid length."""
        if name not in self._buffers:
            raise KeyError(f"Unknown channel {name!r}. Available: {list(self._buffers)}")
        return self._buffers[name]

    def _valid(self, name: str) -> NDArray[np.float64]:
        return self._buffers[name][: self._length]

    @property
    def time(self) -> NDArray[np.float64]:
        """Elapsed time [s]."""
        return self._valid("time")

    @property
    def pursuer_position(self) -> NDArray[np.float64]:
        """Pursuer [north, east] position [m], shape (N, 2)."""
        return self._valid("pursuer_position")

    @property
    def pursuer_velocity(self) -> NDArray[np.float64]:
        """Pursuer [north, east] velocity [m/s], shape (N, 2)."""
        return self._valid("pursuer_velocity")

    @property
    def pursuer_heading(self) -> NDArray[np.float64]:
        """Pursuer heading [rad]."""
        return self._valid("pursuer_heading")

    @property
    def target_position(self) -> NDArray[np.float64]:
        """Target [north, east] position [m], shape (N, 2)."""
        return self._valid("target_position")

    @property
    def target_velocity(self) -> NDArray[np.float64]:
        """Target [north, east] velocity [m/s], shape (N, 2)."""
        return self._valid("target_velocity")

    @property
    def range(self) -> NDArray[np.float64]:
        """Pursuer/target range at each step [m]."""
        return self._valid("range")

    @property
    def los_angle(self) -> NDArray[np.float64]:
        """Bearing from pursuer to target [rad]."""
        return self._valid("los_angle")

    def to_dataframe(self):
        """Convert the valid records to a Polars DataFrame."""
        import polars as pl

        return pl.DataFrame({
            "time": self.time,
            "pursuer_north": self.pursuer_position[:, 0],
            "pursuer_east": self.pursuer_position[:, 1],
            "pursuer_north_velocity": self.pursuer_velocity[:, 0],
            "pursuer_east_velocity": self.pursuer_velocity[:, 1],
            "pursuer_heading": self.pursuer_heading,
            "target_north": self.target_position[:, 0],
            "target_east": self.target_position[:, 1],
            "target_north_velocity": self.target_velocity[:, 0],
            "target_east_velocity": self.target_velocity[:, 1],
            "range": self.range,
            "los_angle": self.los_angle,
        })


# =============================================================================
# Engagement Result
# =============================================================================


@dataclass(frozen=True)
class EngagementResult:
    """Outcome of a completed engagement.

    Attributes:
        status: Terminal status
        log: Frozen trajectory log (one record per completed step)
        steps: Number of iterations evaluated, including the intercepting one
        final_range: Range at the last evaluated step [m]
        min_range: Smallest range seen over the run [m]
        min_range_time: Time at which ``min_range`` occurred [s]
        navigation_gain: Gain used, for labeling
        dt: Time step [s]
    """
    status: EngagementStatus
    log: TrajectoryLog
    steps: int
    final_range: float
    min_range: float
    min_range_time: float
    navigation_gain: float
    dt: float

    @property
    def intercepted(self) -> bool:
        return self.status is EngagementStatus.INTERCEPTED

    @property
    def intercept_step(self) -> int | None:
        """Iteration index at which the intercept was detected."""
        return self.steps if self.intercepted else None

    @property
    def intercept_time(self) -> float | None:
        """Time of the intercept step [s]."""
        return self.steps * self.dt if self.intercepted else None

    @property
    def intercept_range(self) -> float | None:
        """Range that satisfied the proximity check [m]."""
        return self.final_range if self.intercepted else None

    def summary(self) -> dict[str, Any]:
        """JSON-friendly summary of the outcome."""
        return {
            "status": self.status.value,
            "steps": self.steps,
            "logged_steps": len(self.log),
            "navigation_gain": self.navigation_gain,
            "dt": self.dt,
            "final_range": self.final_range,
            "min_range": self.min_range,
            "min_range_time": self.min_range_time,
            "intercept_time": self.intercept_time,
        }

    def to_dataframe(self):
        """Trajectory log as a Polars DataFrame."""
        return self.log.to_dataframe()

    def save_csv(self, path: str | Path) -> Path:
        """Write the trajectory log to CSV."""
        path = Path(path)
        self.to_dataframe().write_csv(path)
        return path
