"""Unit tests for the idealized planar kinematics."""

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from pronav.dynamics.kinematics import acceleration_components, coast, propagate
from pronav.dynamics.state import Environment, PursuerState, TargetState


def make_pursuer(speed: float = 1.0, heading: float = 0.0) -> PursuerState:
    return PursuerState.from_speed_heading(speed=speed, heading=heading)


def make_target(anchored: bool = False) -> TargetState:
    return TargetState.from_velocity((100.0, 50.0), (0.5, -0.25), anchored=anchored)


# =============================================================================
# Acceleration Resolution Tests
# =============================================================================


class TestAccelerationComponents:
    """Test resolution of the lateral command into N/E components."""

    def test_heading_north_pushes_east(self):
        accel = acceleration_components(2.0, 0.0)
        assert_allclose(accel, [0.0, 2.0], atol=1e-15)

    def test_heading_east_pushes_south(self):
        accel = acceleration_components(2.0, np.pi / 2)
        assert_allclose(accel, [-2.0, 0.0], atol=1e-15)

    def test_normal_to_velocity(self):
        heading = 0.7
        accel = acceleration_components(1.3, heading)
        direction = np.array([np.cos(heading), np.sin(heading)])
        assert_allclose(np.dot(accel, direction), 0.0, atol=1e-15)
        assert_allclose(np.linalg.norm(accel), 1.3)


# =============================================================================
# Propagation Tests
# =============================================================================


class TestPropagate:
    """Test one integration step."""

    def test_zero_command_straight_line(self):
        pursuer, target = propagate(make_pursuer(), make_target(), Environment(), 0.0, 0.4)

        assert_array_equal(pursuer.velocity, [1.0, 0.0])
        assert_allclose(pursuer.position, [0.4, 0.0])
        assert_allclose(target.position, [100.2, 49.9])
        assert_array_equal(target.velocity, [0.5, -0.25])

    def test_position_uses_pre_step_velocity(self):
        """Semi-implicit Euler: the new velocity only shows up next step."""
        pursuer, _ = propagate(make_pursuer(), make_target(), Environment(), 1.0, 1.0)

        assert_array_equal(pursuer.position, [1.0, 0.0])
        assert_allclose(pursuer.velocity, [1.0, 1.0])
        assert_allclose(pursuer.heading, np.pi / 4)

    def test_no_speed_limit(self):
        """Commands are executed without saturation."""
        pursuer, _ = propagate(make_pursuer(), make_target(), Environment(), 1e6, 1.0)
        assert_allclose(pursuer.speed, np.hypot(1.0, 1e6))

    def test_disturbance_is_position_slip_only(self):
        env = Environment(disturbance=(0.1, -0.3))
        pursuer, target = propagate(make_pursuer(), make_target(), env, 0.0, 2.0)

        assert_allclose(pursuer.position, [2.0 + 0.2, -0.6])
        assert_allclose(target.position, [100.0 + 1.0 + 0.2, 50.0 - 0.5 - 0.6])
        # Velocities and heading untouched by the drift
        assert_array_equal(pursuer.velocity, [1.0, 0.0])
        assert pursuer.heading == 0.0
        assert_array_equal(target.velocity, [0.5, -0.25])

    def test_negative_speed_turns_about_reversed_heading(self):
        """Heading follows the velocity, so a reversed pursuer turns the other way."""
        pursuer = make_pursuer(speed=-1.0, heading=0.0)
        assert_allclose(abs(pursuer.heading), np.pi)

        turned, _ = propagate(pursuer, make_target(), Environment(), 1.0, 1.0)
        assert_allclose(turned.position, [-1.0, 0.0])
        assert_allclose(turned.velocity, [-1.0, -1.0], atol=1e-15)

    def test_integer_command_and_step(self):
        p_int, t_int = propagate(make_pursuer(), make_target(), Environment(), 1, 1)
        p_float, t_float = propagate(make_pursuer(), make_target(), Environment(), 1.0, 1.0)
        assert_array_equal(p_int.velocity, p_float.velocity)
        assert_array_equal(t_int.position, t_float.position)

    def test_anchored_target_frozen(self):
        target = make_target(anchored=True)
        env = Environment(disturbance=(1.0, 1.0))
        _, new_target = propagate(make_pursuer(), target, env, 0.5, 0.4)

        assert new_target is target
        assert_array_equal(new_target.position, [100.0, 50.0])

    def test_inputs_not_mutated(self):
        pursuer = make_pursuer()
        target = make_target()
        propagate(pursuer, target, Environment(), 0.3, 0.4)

        assert_array_equal(pursuer.position, [0.0, 0.0])
        assert_array_equal(pursuer.velocity, [1.0, 0.0])
        assert_array_equal(target.position, [100.0, 50.0])

    def test_deterministic(self):
        args = (make_pursuer(0.8, 0.3), make_target(), Environment(disturbance=(0.05, 0.0)), 0.17, 0.4)
        p1, t1 = propagate(*args)
        p2, t2 = propagate(*args)

        assert_array_equal(p1.position, p2.position)
        assert_array_equal(p1.velocity, p2.velocity)
        assert_array_equal(t1.position, t2.position)


# =============================================================================
# Seeding Step Tests
# =============================================================================


class TestCoast:
    """Test the initialization half-step."""

    def test_advances_both_positions(self):
        pursuer, target = coast(make_pursuer(), make_target(), 0.4)

        assert_allclose(pursuer.position, [0.4, 0.0])
        assert_allclose(target.position, [100.2, 49.9])
        assert_array_equal(pursuer.velocity, [1.0, 0.0])

    def test_anchored_target_stays(self):
        target = make_target(anchored=True)
        _, new_target = coast(make_pursuer(), target, 0.4)
        assert_array_equal(new_target.position, [100.0, 50.0])
