"""Engagement configuration.

All inputs are plain numbers and 2-vectors. Validation is limited to
finiteness (NaN/inf fail fast), plus the constraints needed to size the
trajectory log (positive time step, non-negative duration).

The defaults reproduce the reference scenario: a 1 m/s pursuer at the
origin heading north, chasing a target at (250, 250) m drifting at
(0.2, 0.5) m/s, with N = 4 and a 0.4 s step for up to 1250 s.
"""

import math
from dataclasses import asdict, dataclass, field
from typing import Any

from beartype import beartype

from pronav.dynamics.state import (
    Environment,
    PursuerState,
    TargetState,
    as_vector,
    require_finite,
)

# Relative tolerance when converting duration / dt to an iteration count,
# so that e.g. 1250 / 0.4 = 3124.9999... still yields 3125 iterations
_ITERATION_ROUNDING_TOL = 1e-9


@beartype
@dataclass(frozen=True)
class EngagementConfig:
    """Engagement configuration.

    Attributes:
        navigation_gain: Pro-nav gain N [-]
        pursuer_position: Pursuer initial [north, east] position [m]
        pursuer_speed: Pursuer initial speed [m/s]
        pursuer_heading: Pursuer initial heading [rad]
        target_position: Target initial [north, east] position [m]
        target_velocity: Target [north, east] velocity [m/s]
        target_anchored: Hold the target at its initial position
        disturbance: Environmental [north, east] drift velocity [m/s]
        duration: Maximum simulated time [s]
        dt: Time step [s]
        intercept_radius: Proximity threshold that ends the run [m]
    """
    navigation_gain: float | int = 4.0

    pursuer_position: tuple[float | int, float | int] = (0.0, 0.0)
    pursuer_speed: float | int = 1.0
    pursuer_heading: float | int = 0.0

    target_position: tuple[float | int, float | int] = (250.0, 250.0)
    target_velocity: tuple[float | int, float | int] = (0.2, 0.5)
    target_anchored: bool = False

    disturbance: tuple[float | int, float | int] = (0.0, 0.0)

    duration: float | int = 1250.0
    dt: float | int = 0.4
    intercept_radius: float | int = 0.25

    # Derived
    max_iterations: int = field(init=False)

    def __post_init__(self) -> None:
        """Validate inputs, store them as floats and derive the iteration budget."""
        for name in (
            "navigation_gain",
            "pursuer_speed",
            "pursuer_heading",
            "duration",
            "dt",
            "intercept_radius",
        ):
            object.__setattr__(self, name, require_finite(getattr(self, name), name))
        for name in (
            "pursuer_position",
            "target_position",
            "target_velocity",
            "disturbance",
        ):
            vec = as_vector(getattr(self, name), name)
            object.__setattr__(self, name, (float(vec[0]), float(vec[1])))

        if self.dt <= 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.duration < 0.0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")

        ratio = self.duration / self.dt
        iterations = math.floor(ratio * (1.0 + _ITERATION_ROUNDING_TOL))
        object.__setattr__(self, "max_iterations", int(iterations))

    # -------------------------------------------------------------------------
    # Initial states
    # -------------------------------------------------------------------------

    def initial_pursuer(self) -> PursuerState:
        """Pursuer state at t = 0."""
        return PursuerState.from_speed_heading(
            speed=self.pursuer_speed,
            heading=self.pursuer_heading,
            position=self.pursuer_position,
        )

    def initial_target(self) -> TargetState:
        """Target state at t = 0."""
        return TargetState.from_velocity(
            position=self.target_position,
            velocity=self.target_velocity,
            anchored=self.target_anchored,
        )

    def environment(self) -> Environment:
        """Environmental forcing for the run."""
        return Environment(disturbance=self.disturbance)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict (derived fields omitted)."""
        data = asdict(self)
        data.pop("max_iterations")
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EngagementConfig":
        """Create a config from a dict, e.g. one produced by ``to_dict``.

        Missing keys fall back to the defaults. JSON lists become 2-tuples.

        Raises:
            ValueError: If ``data`` contains unknown keys
        """
        known = {
            "navigation_gain", "pursuer_position", "pursuer_speed",
            "pursuer_heading", "target_position", "target_velocity",
            "target_anchored", "disturbance", "duration", "dt",
            "intercept_radius",
        }
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key == "target_anchored":
                kwargs[key] = bool(value)
            elif isinstance(value, (list, tuple)):
                if len(value) != 2:
                    raise ValueError(f"{key} must have 2 components, got {len(value)}")
                kwargs[key] = tuple(value)
            else:
                kwargs[key] = value
        return cls(**kwargs)
