"""Idealized planar kinematics for pursuit engagements.

Commanded lateral accelerations are executed perfectly and instantly, with
no saturation on acceleration or speed.

One integration step, in order:

1. Resolve the commanded lateral acceleration ``ap`` normal to the pursuer's
   current heading psi::

       a_north = -ap * sin(psi)
       a_east  =  ap * cos(psi)

2. Update the pursuer velocity: ``v += a * dt`` (heading follows from v).
3. Update both positions with the velocity held *before* this step plus the
   environmental slip: ``p += v_prev * dt + d * dt``.
4. Skip the target update entirely if the target is anchored.

The scalar core is compiled with numba; the public functions wrap it with
the immutable state types.
"""

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

from pronav.dynamics.state import Environment, PursuerState, TargetState

# =============================================================================
# Numba-Optimized Kernels
# =============================================================================


@njit(cache=True)
def _lateral_acceleration(ap: float, heading: float) -> tuple[float, float]:
    """Numba-optimized resolution of a lateral command into N/E components."""
    return (-ap * np.sin(heading), ap * np.cos(heading))


@njit(cache=True)
def _step_core(
    # Pursuer
    pn: float, pe: float, pvn: float, pve: float,
    # Target
    tn: float, te: float, tvn: float, tve: float,
    anchored: bool,
    # Command and forcing
    ap: float,
    dn: float, de: float,
    dt: float,
) -> tuple[float, float, float, float, float, float]:
    """Numba-optimized semi-implicit Euler step."""
    heading = np.arctan2(pve, pvn)
    an, ae = _lateral_acceleration(ap, heading)

    # Positions advance with the pre-step velocity plus slip
    pn_new = pn + pvn * dt + dn * dt
    pe_new = pe + pve * dt + de * dt

    pvn_new = pvn + an * dt
    pve_new = pve + ae * dt

    if anchored:
        tn_new = tn
        te_new = te
    else:
        tn_new = tn + tvn * dt + dn * dt
        te_new = te + tve * dt + de * dt

    return (pn_new, pe_new, pvn_new, pve_new, tn_new, te_new)


# =============================================================================
# Public API
# =============================================================================


@beartype
def acceleration_components(ap: float | int, heading: float | int) -> NDArray[np.float64]:
    """Resolve a lateral acceleration command into the inertial frame.

    Args:
        ap: Commanded acceleration magnitude, positive to the right [m/s^2]
        heading: Pursuer heading [rad]

    Returns:
        [north, east] acceleration [m/s^2]
    """
    an, ae = _lateral_acceleration(float(ap), float(heading))
    return np.array([an, ae])


@beartype
def propagate(
    pursuer: PursuerState,
    target: TargetState,
    environment: Environment,
    acceleration: float | int,
    dt: float | int,
) -> tuple[PursuerState, TargetState]:
    """Advance both vehicles by one time step.

    Args:
        pursuer: Current pursuer state
        target: Current target state
        environment: Environmental forcing
        acceleration: Commanded lateral acceleration for the pursuer [m/s^2]
        dt: Time step [s]

    Returns:
        (pursuer, target) after the step. An anchored target is returned
        unchanged.
    """
    result = _step_core(
        pursuer.position[0], pursuer.position[1],
        pursuer.velocity[0], pursuer.velocity[1],
        target.position[0], target.position[1],
        target.velocity[0], target.velocity[1],
        target.anchored,
        float(acceleration),
        environment.disturbance[0], environment.disturbance[1],
        float(dt),
    )

    new_pursuer = pursuer.with_kinematics(
        position=np.array([result[0], result[1]]),
        velocity=np.array([result[2], result[3]]),
    )
    if target.anchored:
        return new_pursuer, target

    new_target = target.with_kinematics(position=np.array([result[4], result[5]]))
    return new_pursuer, new_target


@beartype
def coast(
    pursuer: PursuerState,
    target: TargetState,
    dt: float | int,
) -> tuple[PursuerState, TargetState]:
    """Advance both positions once along their current velocities.

    Used to seed an engagement: no command, no environmental slip. An
    anchored target stays in place.
    """
    new_pursuer = pursuer.with_kinematics(
        position=pursuer.position + pursuer.velocity * dt
    )
    if target.anchored:
        return new_pursuer, target
    new_target = target.with_kinematics(position=target.position + target.velocity * dt)
    return new_pursuer, new_target
