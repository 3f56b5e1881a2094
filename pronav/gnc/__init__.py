"""GNC (Guidance, Navigation, Control) module for pursuit engagements.

Only guidance is modeled: commands are assumed to be executed perfectly, and
the target state is known exactly.

Example:
    >>> from pronav.gnc.guidance import PureProportionalNavigation
    >>>
    >>> guidance = PureProportionalNavigation(gain=4.0)
"""

from pronav.gnc.guidance import (
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
