"""Proportional navigation guidance for planar pursuit.

Proportional navigation commands a lateral acceleration proportional to the
rotation rate of the line of sight (LOS) from pursuer to target. On a
collision course the LOS does not rotate and the command vanishes.

Pure proportional navigation (PPN) uses the pursuer's own speed as the
proportionality factor::

    ap = N * Vp * lambda_dot

where N is the navigation gain (typically 3-5). "True" proportional
navigation would use the closing velocity instead; laws like that plug in by
subclassing ``GuidanceLaw`` and reading ``EngagementGeometry``.

The LOS rate is estimated from the change in relative position between the
previous and current step rather than from the instantaneous relative
velocity::

    v_rel      = (r - r_prev) / dt
    lambda_dot = (r_n * v_rel_e - r_e * v_rel_n) / |r|^2

This finite difference is a numerical approximation whose error grows with
the time step.

Example:
    >>> from pronav.gnc.guidance import PureProportionalNavigation, compute_geometry
    >>>
    >>> law = PureProportionalNavigation(gain=4.0)
    >>> geometry = compute_geometry(relative, previous_relative, dt=0.4)
    >>> ap = law.acceleration_command(geometry, pursuer)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from pronav.dynamics.state import PursuerState, VectorLike, as_vector, require_finite


class DegenerateGeometryError(ValueError):
    """Raised when the LOS is undefined because the range is exactly zero."""


# =============================================================================
# Engagement Geometry
# =============================================================================


@beartype
@dataclass(frozen=True)
class EngagementGeometry:
    """Relative pursuer/target geometry at one step.

    Attributes:
        relative_position: [north, east] target minus pursuer [m]
        relative_velocity: Finite-difference relative velocity estimate [m/s]
        range: Pursuer/target distance [m]
        los_angle: Bearing from pursuer to target [rad]
    """
    relative_position: NDArray[np.float64]
    relative_velocity: NDArray[np.float64]
    range: float
    los_angle: float

    @property
    def is_degenerate(self) -> bool:
        """True when pursuer and target coincide."""
        return self.range == 0.0

    @property
    def los_rate(self) -> float:
        """Line-of-sight angular rate [rad/s].

        Raises:
            DegenerateGeometryError: If the range is zero
        """
        if self.is_degenerate:
            raise DegenerateGeometryError("LOS rate is undefined at zero range")
        r = self.relative_position
        v = self.relative_velocity
        return float((r[0] * v[1] - r[1] * v[0]) / self.range**2)

    @property
    def closing_velocity(self) -> float:
        """Rate of decrease of range [m/s].

        Not used by pure pro-nav; exposed for laws that scale with it.
        """
        if self.is_degenerate:
            raise DegenerateGeometryError("Closing velocity is undefined at zero range")
        return float(-np.dot(self.relative_position, self.relative_velocity) / self.range)


@beartype
def compute_geometry(
    relative_position: VectorLike,
    previous_relative_position: VectorLike,
    dt: float | int,
) -> EngagementGeometry:
    """Compute the engagement geometry from two consecutive relative positions.

    Args:
        relative_position: Current target-minus-pursuer vector [m]
        previous_relative_position: Same vector one step earlier [m]
        dt: Time between the two samples [s]

    Returns:
        EngagementGeometry for the current step
    """
    r = as_vector(relative_position, "relative_position")
    r_prev = as_vector(previous_relative_position, "previous_relative_position")
    dt = require_finite(dt, "dt")
    if dt <= 0.0:
        raise ValueError(f"dt must be positive, got {dt}")

    v = (r - r_prev) / dt
    v.setflags(write=False)

    return EngagementGeometry(
        relative_position=r,
        relative_velocity=v,
        range=float(np.linalg.norm(r)),
        los_angle=float(np.arctan2(r[1], r[0])),
    )


# =============================================================================
# Guidance Laws
# =============================================================================


class GuidanceLaw(ABC):
    """Strategy interface for lateral-acceleration guidance laws.

    Implementations must be pure: identical inputs give identical commands.
    """

    @abstractmethod
    def acceleration_command(
        self,
        geometry: EngagementGeometry,
        pursuer: PursuerState,
    ) -> float:
        """Commanded lateral acceleration, applied normal to the pursuer's
        velocity (positive to the right of the heading) [m/s^2]."""


@beartype
@dataclass(frozen=True)
class PureProportionalNavigation(GuidanceLaw):
    """Pure proportional navigation.

    Attributes:
        gain: Navigation gain N [-], typically 3-5 (not enforced)
    """
    gain: float | int = 4.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "gain", require_finite(self.gain, "gain"))

    def acceleration_command(
        self,
        geometry: EngagementGeometry,
        pursuer: PursuerState,
    ) -> float:
        """ap = N * Vp * lambda_dot [m/s^2]."""
        return self.gain * pursuer.speed * geometry.los_rate
