"""Guidance laws for pursuit engagements.

Guidance laws turn the pursuer/target geometry into a lateral acceleration
command. New laws subclass ``GuidanceLaw``.
"""

from pronav.gnc.guidance.proportional_navigation import (
    DegenerateGeometryError,
    EngagementGeometry,
    GuidanceLaw,
    PureProportionalNavigation,
    compute_geometry,
)

__all__ = [
    "DegenerateGeometryError",
    "EngagementGeometry",
    "GuidanceLaw",
    "PureProportionalNavigation",
    "compute_geometry",
]
