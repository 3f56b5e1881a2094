"""Planar point-mass dynamics for pursuit engagements.

This module provides the immutable vehicle/environment state types and the
idealized kinematics used to propagate them.

Example:
    >>> from pronav.dynamics import PursuerState, TargetState, Environment, propagate
    >>>
    >>> pursuer = PursuerState.from_speed_heading(speed=1.0, heading=0.0)
    >>> target = TargetState.from_velocity((250.0, 250.0), (0.2, 0.5))
    >>> pursuer, target = propagate(pursuer, target, Environment(), 0.01, dt=0.4)
"""

from pronav.dynamics.kinematics import (
    acceleration_components,
    coast,
    propagate,
)
from pronav.dynamics.state import (
    Environment,
    PursuerState,
    TargetState,
    VehicleState,
    as_vector,
    heading_of,
    require_finite,
)

__all__ = [
    # State
    "VehicleState",
    "PursuerState",
    "TargetState",
    "Environment",
    # Helpers
    "as_vector",
    "heading_of",
    "require_finite",
    # Kinematics
    "acceleration_components",
    "coast",
    "propagate",
]
