"""Unit tests for engagement geometry and pure proportional navigation."""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pronav.dynamics.state import PursuerState
from pronav.gnc.guidance import (
    DegenerateGeometryError,
    GuidanceLaw,
    PureProportionalNavigation,
    compute_geometry,
)

# =============================================================================
# Geometry Tests
# =============================================================================


class TestComputeGeometry:
    """Test relative geometry and the finite-difference LOS rate."""

    def test_range_and_los_angle(self):
        geom = compute_geometry((3.0, 4.0), (3.0, 4.0), 0.4)
        assert geom.range == 5.0
        assert_allclose(geom.los_angle, np.arctan2(4.0, 3.0))

    def test_static_geometry_has_zero_rate(self):
        geom = compute_geometry((3.0, 4.0), (3.0, 4.0), 0.4)
        assert_array_equal(geom.relative_velocity, [0.0, 0.0])
        assert geom.los_rate == 0.0

    def test_relative_velocity_is_finite_difference(self):
        geom = compute_geometry((10.0, 0.0), (9.0, -2.0), 0.5)
        assert_allclose(geom.relative_velocity, [2.0, 4.0])

    def test_los_rate_clockwise_positive(self):
        """Target due north drifting east rotates the LOS clockwise."""
        geom = compute_geometry((10.0, 0.0), (10.0, -1.0), 1.0)
        assert_allclose(geom.los_rate, 0.1)

    def test_los_rate_counter_clockwise_negative(self):
        geom = compute_geometry((10.0, 0.0), (10.0, 1.0), 1.0)
        assert_allclose(geom.los_rate, -0.1)

    def test_radial_motion_has_zero_rate(self):
        geom = compute_geometry((6.0, 8.0), (9.0, 12.0), 0.4)
        assert_allclose(geom.los_rate, 0.0, atol=1e-12)

    def test_closing_velocity(self):
        geom = compute_geometry((10.0, 0.0), (11.0, 0.0), 1.0)
        assert_allclose(geom.closing_velocity, 1.0)

    def test_zero_range_is_degenerate(self):
        geom = compute_geometry((0.0, 0.0), (1.0, 1.0), 0.4)
        assert geom.is_degenerate
        with pytest.raises(DegenerateGeometryError):
            geom.los_rate
        with pytest.raises(ValueError):
            geom.closing_velocity

    def test_integer_inputs(self):
        geom = compute_geometry((10, 0), (9, -2), 1)
        assert_allclose(geom.relative_velocity, [1.0, 2.0])
        assert geom.range == 10.0

    def test_non_positive_dt_rejected(self):
        with pytest.raises(ValueError, match="dt must be positive"):
            compute_geometry((1.0, 0.0), (1.0, 0.0), 0.0)

    def test_non_finite_input_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            compute_geometry((np.nan, 0.0), (1.0, 0.0), 0.4)


# =============================================================================
# Pure Pro-Nav Tests
# =============================================================================


class TestPureProportionalNavigation:
    """Test the PPN acceleration command."""

    @pytest.fixture
    def geometry(self):
        return compute_geometry((10.0, 0.0), (10.0, -1.0), 1.0)

    def test_is_guidance_law(self):
        assert isinstance(PureProportionalNavigation(), GuidanceLaw)

    def test_default_gain(self):
        assert PureProportionalNavigation().gain == 4.0

    def test_command(self, geometry):
        law = PureProportionalNavigation(gain=4.0)
        pursuer = PursuerState.from_speed_heading(speed=1.0, heading=0.0)
        assert_allclose(law.acceleration_command(geometry, pursuer), 4.0 * 1.0 * 0.1)

    def test_scales_with_pursuer_speed(self, geometry):
        law = PureProportionalNavigation(gain=3.0)
        slow = PursuerState.from_speed_heading(speed=1.0, heading=0.0)
        fast = PursuerState.from_speed_heading(speed=2.0, heading=1.0)

        ratio = law.acceleration_command(geometry, fast) / law.acceleration_command(geometry, slow)
        assert_allclose(ratio, 2.0)

    def test_integer_gain(self, geometry):
        law = PureProportionalNavigation(gain=4)
        pursuer = PursuerState.from_speed_heading(speed=1, heading=0)
        assert isinstance(law.gain, float)
        assert_allclose(law.acceleration_command(geometry, pursuer), 0.4)

    def test_zero_gain_zero_command(self, geometry):
        law = PureProportionalNavigation(gain=0.0)
        pursuer = PursuerState.from_speed_heading(speed=1.0, heading=0.0)
        assert law.acceleration_command(geometry, pursuer) == 0.0

    def test_collision_course_zero_command(self):
        law = PureProportionalNavigation(gain=4.0)
        pursuer = PursuerState.from_speed_heading(speed=1.0, heading=0.0)
        geom = compute_geometry((50.0, 0.0), (51.0, 0.0), 1.0)
        assert law.acceleration_command(geom, pursuer) == 0.0

    def test_pure_function(self, geometry):
        law = PureProportionalNavigation(gain=5.0)
        pursuer = PursuerState.from_speed_heading(speed=1.5, heading=0.2)
        first = law.acceleration_command(geometry, pursuer)
        second = law.acceleration_command(geometry, pursuer)
        assert first == second

    def test_non_finite_gain_rejected(self):
        with pytest.raises(ValueError, match="gain must be finite"):
            PureProportionalNavigation(gain=float("inf"))
