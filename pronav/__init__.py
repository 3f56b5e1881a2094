"""pronav - Planar pursuit simulation with proportional navigation.

This package simulates a two-dimensional pursuit engagement between a
pursuer and a target under pure proportional navigation, with idealized
kinematics and an optional constant drift (e.g. ocean current).

Example:
    >>> from pronav import EngagementConfig, run_engagement
    >>> from pronav.plotting import plot_range_history
    >>>
    >>> result = run_engagement(EngagementConfig(navigation_gain=4.0))
    >>> print(f"{result.status.value} after {result.steps} steps")
    >>> fig = plot_range_history(result)
"""

__version__ = "0.1.0"

# Core state and kinematics
from pronav.dynamics import (
    Environment,
    PursuerState,
    TargetState,
    propagate,
)

# Guidance
from pronav.gnc.guidance import (
    DegenerateGeometryError,
    EngagementGeometry,
    GuidanceLaw,
    PureProportionalNavigation,
    compute_geometry,
)

# Output management
from pronav.output import OutputContext

# Visualization
from pronav.plotting import (
    plot_engagement_dashboard,
    plot_heading_history,
    plot_positions,
    plot_range_history,
)

# Simulation
from pronav.simulation import (
    Engagement,
    EngagementConfig,
    EngagementResult,
    EngagementStatus,
    TrajectoryLog,
    run_engagement,
)

# Persistence
from pronav.storage import load_config, save_config

__all__ = [
    "__version__",
    # State
    "Environment",
    "PursuerState",
    "TargetState",
    "propagate",
    # Guidance
    "DegenerateGeometryError",
    "EngagementGeometry",
    "GuidanceLaw",
    "PureProportionalNavigation",
    "compute_geometry",
    # Simulation
    "Engagement",
    "EngagementConfig",
    "EngagementResult",
    "EngagementStatus",
    "TrajectoryLog",
    "run_engagement",
    # Output
    "OutputContext",
    "load_config",
    "save_config",
    # Plotting
    "plot_engagement_dashboard",
    "plot_heading_history",
    "plot_positions",
    "plot_range_history",
]
