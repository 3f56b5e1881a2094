"""Fixed-step pursuit engagement simulator.

The engagement owns the vehicle states and the trajectory log. Each step
runs, in order:

1. Geometry: relative position, range, LOS angle and the finite-difference
   LOS rate from the previous and current relative positions.
2. Termination: if the range is within the intercept radius (or exactly
   zero), the run ends as INTERCEPTED. That step is neither integrated nor
   logged.
3. Guidance: the guidance law produces a lateral acceleration command.
4. Integration: both vehicles advance one step.
5. Logging: the post-integration state is recorded together with the
   geometry computed in step 1.

If the iteration budget is exhausted first the run ends as TIMED_OUT.

Before the first step both vehicles coast once along their initial
velocities, so the first LOS-rate estimate is not computed from two
identical relative positions.

Example:
    >>> from pronav.simulation import Engagement, EngagementConfig
    >>>
    >>> engagement = Engagement(EngagementConfig(navigation_gain=3.0))
    >>> result = engagement.run()
    >>> result.status, result.intercept_time
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from pronav.dynamics.kinematics import coast, propagate
from pronav.dynamics.state import Environment, PursuerState, TargetState
from pronav.gnc.guidance.proportional_navigation import (
    EngagementGeometry,
    GuidanceLaw,
    PureProportionalNavigation,
    compute_geometry,
)
from pronav.simulation.config import EngagementConfig
from pronav.simulation.results import EngagementResult, EngagementStatus, TrajectoryLog

logger = logging.getLogger(__name__)


@beartype
@dataclass
class Engagement:
    """Step-driven pursuit engagement.

    Attributes:
        config: Engagement configuration
        guidance: Guidance law. Defaults to pure pro-nav with the configured gain.
        should_stop: Optional cancellation check, polled once per step
    """
    config: EngagementConfig = field(default_factory=EngagementConfig)
    guidance: GuidanceLaw | None = None
    should_stop: Callable[[], bool] | None = None

    # Internal
    pursuer: PursuerState = field(init=False)
    target: TargetState = field(init=False)
    environment: Environment = field(init=False)
    _previous_relative: NDArray[np.float64] = field(init=False, repr=False)
    _log: TrajectoryLog = field(init=False, repr=False)
    _status: EngagementStatus = field(init=False, default=EngagementStatus.RUNNING)
    _iteration: int = field(init=False, default=0)
    _final_range: float = field(init=False, default=math.nan, repr=False)
    _min_range: float = field(init=False, default=math.inf, repr=False)
    _min_range_time: float = field(init=False, default=math.nan, repr=False)

    def __post_init__(self) -> None:
        """Build initial states and run the seeding half-step."""
        if self.guidance is None:
            self.guidance = PureProportionalNavigation(gain=self.config.navigation_gain)

        self.environment = self.config.environment()
        pursuer = self.config.initial_pursuer()
        target = self.config.initial_target()

        self._previous_relative = target.position - pursuer.position
        self.pursuer, self.target = coast(pursuer, target, self.config.dt)
        self._log = TrajectoryLog(self.config.max_iterations)

        logger.debug(
            "Engagement start: range=%.3f m, guidance=%r, max_iterations=%d",
            float(np.linalg.norm(self._previous_relative)),
            self.guidance,
            self.config.max_iterations,
        )

        if self.config.max_iterations == 0:
            self._finish(EngagementStatus.TIMED_OUT)

    @property
    def status(self) -> EngagementStatus:
        return self._status

    @property
    def iteration(self) -> int:
        """Number of steps evaluated so far."""
        return self._iteration

    @property
    def time(self) -> float:
        """Time of the last evaluated step [s]."""
        return self._iteration * self.config.dt

    @property
    def log(self) -> TrajectoryLog:
        return self._log

    def geometry(self) -> EngagementGeometry:
        """Geometry for the current state, without advancing the engagement."""
        relative = self.target.position - self.pursuer.position
        return compute_geometry(relative, self._previous_relative, self.config.dt)

    def step(self) -> EngagementStatus:
        """Evaluate one iteration.

        Returns:
            Status after the step

        Raises:
            RuntimeError: If the engagement has already ended
        """
        if self._status.is_terminal:
            raise RuntimeError(f"Engagement already ended ({self._status.value})")

        if self.should_stop is not None and self.should_stop():
            self._finish(EngagementStatus.CANCELLED)
            return self._status

        k = self._iteration + 1
        t = k * self.config.dt
        geometry = self.geometry()

        self._iteration = k
        self._final_range = geometry.range
        if geometry.range < self._min_range:
            self._min_range = geometry.range
            self._min_range_time = t

        # Zero range is always an intercept, whatever the radius
        if geometry.is_degenerate or geometry.range <= self.config.intercept_radius:
            self._finish(EngagementStatus.INTERCEPTED)
            return self._status

        ap = self.guidance.acceleration_command(geometry, self.pursuer)
        self.pursuer, self.target = propagate(
            self.pursuer, self.target, self.environment, ap, self.config.dt
        )
        self._previous_relative = geometry.relative_position
        self._log.record(t, self.pursuer, self.target, geometry)

        if k >= self.config.max_iterations:
            self._finish(EngagementStatus.TIMED_OUT)
        return self._status

    def run(self) -> EngagementResult:
        """Step until a terminal status is reached."""
        while not self._status.is_terminal:
            self.step()
        return self.result()

    def result(self) -> EngagementResult:
        """Result of a finished engagement.

        Raises:
            RuntimeError: If the engagement is still running
        """
        if not self._status.is_terminal:
            raise RuntimeError("Engagement is still running")
        return EngagementResult(
            status=self._status,
            log=self._log,
            steps=self._iteration,
            final_range=self._final_range,
            min_range=self._min_range if self._iteration else math.nan,
            min_range_time=self._min_range_time,
            navigation_gain=self.config.navigation_gain,
            dt=self.config.dt,
        )

    def _finish(self, status: EngagementStatus) -> None:
        self._status = status
        self._log.freeze()
        if status is EngagementStatus.INTERCEPTED:
            logger.info(
                "Intercept at step %d (t=%.2f s), range %.4f m",
                self._iteration, self.time, self._final_range,
            )
        else:
            logger.info(
                "Engagement %s after %d steps, min range %.4f m",
                status.value, self._iteration, self._min_range,
            )


@beartype
def run_engagement(
    config: EngagementConfig | None = None,
    guidance: GuidanceLaw | None = None,
    should_stop: Callable[[], bool] | None = None,
) -> EngagementResult:
    """Run an engagement to completion.

    Args:
        config: Engagement configuration (defaults to the reference scenario)
        guidance: Guidance law (defaults to pure pro-nav with the config gain)
        should_stop: Optional cancellation check polled once per step

    Returns:
        EngagementResult with the frozen trajectory log
    """
    engagement = Engagement(
        config=config or EngagementConfig(),
        guidance=guidance,
        should_stop=should_stop,
    )
    return engagement.run()
