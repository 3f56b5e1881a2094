"""Simulation module for pursuit engagements.

Provides the engagement configuration, the step-driven run loop and the
trajectory log it produces.

Example:
    >>> from pronav.simulation import EngagementConfig, run_engagement
    >>>
    >>> result = run_engagement(EngagementConfig(target_anchored=True))
    >>> print(result.status, result.intercept_time)
"""

from pronav.simulation.config import EngagementConfig
from pronav.simulation.results import (
    EngagementResult,
    EngagementStatus,
    TrajectoryLog,
)
from pronav.simulation.simulator import Engagement, run_engagement

__all__ = [
    "Engagement",
    "EngagementConfig",
    "EngagementResult",
    "EngagementStatus",
    "TrajectoryLog",
    "run_engagement",
]
