"""Planar kinematic state for pursuit engagements.

Every vehicle is a point mass moving in a local North-East plane:

- Position (2): [north, east] in the inertial frame [m]
- Velocity (2): [north, east] in the inertial frame [m/s]

Speed and heading are always derived from the velocity vector, so they can
never drift out of sync with it:

- speed = |velocity|
- heading = atan2(v_east, v_north), measured clockwise from north [rad]

States are immutable. Propagation returns new instances rather than
mutating existing ones (see ``pronav.dynamics.kinematics``).
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# Anything that can be coerced to a 2-vector
VectorLike = NDArray[np.floating] | Sequence[float | int]


# =============================================================================
# Vector Helpers
# =============================================================================


@beartype
def as_vector(value: VectorLike, name: str = "vector") -> NDArray[np.float64]:
    """Coerce a 2-vector to a read-only float64 array.

    Args:
        value: Array or sequence with two finite components
        name: Name used in error messages

    Returns:
        New read-only array of shape (2,)

    Raises:
        ValueError: If the shape is wrong or a component is NaN/inf
    """
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{name} must be shape (2,), got {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"{name} must be finite, got {vec.tolist()}")
    vec.setflags(write=False)
    return vec


@beartype
def require_finite(value: float | int, name: str) -> float:
    """Return ``value`` as a float, rejecting NaN and infinities."""
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return float(value)


@beartype
def heading_of(velocity: NDArray[np.float64]) -> float:
    """Heading angle of a North-East velocity vector [rad]."""
    return float(np.arctan2(velocity[1], velocity[0]))


# =============================================================================
# Vehicle States
# =============================================================================


@beartype
@dataclass(frozen=True)
class VehicleState:
    """Kinematic state of a point-mass vehicle.

    Attributes:
        position: [north, east] position in inertial frame [m]
        velocity: [north, east] velocity in inertial frame [m/s]
    """
    position: VectorLike
    velocity: VectorLike

    def __post_init__(self) -> None:
        """Validate and freeze vectors."""
        object.__setattr__(self, "position", as_vector(self.position, "position"))
        object.__setattr__(self, "velocity", as_vector(self.velocity, "velocity"))

    @property
    def speed(self) -> float:
        """Speed magnitude [m/s]."""
        return float(np.linalg.norm(self.velocity))

    @property
    def heading(self) -> float:
        """Heading angle, clockwise from north [rad]."""
        return heading_of(self.velocity)

    @property
    def north(self) -> float:
        return float(self.position[0])

    @property
    def east(self) -> float:
        return float(self.position[1])

    def with_kinematics(
        self,
        position: VectorLike | None = None,
        velocity: VectorLike | None = None,
    ):
        """Return a copy with a new position and/or velocity."""
        changes = {}
        if position is not None:
            changes["position"] = position
        if velocity is not None:
            changes["velocity"] = velocity
        return replace(self, **changes)


@beartype
@dataclass(frozen=True)
class PursuerState(VehicleState):
    """Pursuer kinematic state.

    The pursuer is the only vehicle that receives guidance commands.
    """

    @classmethod
    def from_speed_heading(
        cls,
        speed: float | int,
        heading: float | int,
        position: VectorLike = (0.0, 0.0),
    ) -> "PursuerState":
        """Create a pursuer from scalar speed and heading.

        Zero and negative speeds are accepted; a negative speed simply points
        the velocity vector opposite to ``heading``.

        Args:
            speed: Initial speed [m/s]
            heading: Initial heading, clockwise from north [rad]
            position: Initial [north, east] position [m], origin by default
        """
        speed = require_finite(speed, "speed")
        heading = require_finite(heading, "heading")
        velocity = np.array([speed * np.cos(heading), speed * np.sin(heading)])
        return cls(position=position, velocity=velocity)


@beartype
@dataclass(frozen=True)
class TargetState(VehicleState):
    """Target kinematic state.

    Attributes:
        anchored: Freeze the target at its initial position when True
    """
    anchored: bool = False

    @classmethod
    def from_velocity(
        cls,
        position: VectorLike,
        velocity: VectorLike,
        anchored: bool = False,
    ) -> "TargetState":
        """Create a target from position and velocity vectors."""
        return cls(position=position, velocity=velocity, anchored=anchored)


# =============================================================================
# Environment
# =============================================================================


@beartype
@dataclass(frozen=True)
class Environment:
    """Constant environmental forcing.

    The disturbance is a position-only slip (e.g. ocean current) added to both
    vehicles' position update. It does not enter the velocity vectors, the
    derived headings or the guidance law.

    Attributes:
        disturbance: [north, east] drift velocity [m/s]
    """
    disturbance: VectorLike = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "disturbance", as_vector(self.disturbance, "disturbance")
        )

    @property
    def is_calm(self) -> bool:
        """True when there is no disturbance."""
        return not np.any(self.disturbance)
