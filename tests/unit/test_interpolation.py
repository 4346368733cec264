"""
Unit tests for PathInterpolator

Tests the straight-line and arc samplers used to build leg sub-paths.
"""

import math

import numpy as np
import pytest

from pickup_planner import PathInterpolator


class TestPathInterpolator:
    """Test suite for PathInterpolator"""

    @pytest.mark.unit
    def test_linear_interpolation(self):
        """Linear interpolation should produce straight line"""
        trajectory = PathInterpolator.linear_interpolation([0.0, 0.0], [1.0, 2.0], 11)

        np.testing.assert_array_almost_equal(trajectory[0], [0.0, 0.0])
        np.testing.assert_array_almost_equal(trajectory[5], [0.5, 1.0])  # Midpoint
        np.testing.assert_array_almost_equal(trajectory[10], [1.0, 2.0])

    @pytest.mark.unit
    def test_linear_shape(self):
        trajectory = PathInterpolator.linear_interpolation([0, 0, 0], [1, 2, 3], 50)

        assert trajectory.shape == (50, 3), f"Expected shape (50, 3), got {trajectory.shape}"

    @pytest.mark.unit
    def test_single_point_is_start(self):
        trajectory = PathInterpolator.linear_interpolation([0.2, 0.1], [1.0, 1.0], 1)

        np.testing.assert_array_equal(trajectory, [[0.2, 0.1]])

    @pytest.mark.unit
    def test_mismatched_dimensions(self):
        """Should raise error for mismatched start/end dimensions"""
        with pytest.raises(ValueError, match="same shape"):
            PathInterpolator.linear_interpolation([0, 0, 0], [1, 1], 10)

    @pytest.mark.unit
    def test_zero_points(self):
        with pytest.raises(ValueError):
            PathInterpolator.linear_interpolation([0, 0], [1, 1], 0)

    @pytest.mark.unit
    def test_arc_stays_on_circle(self):
        arc = PathInterpolator.arc_interpolation((1.0, -1.0), 0.5, 0.0, math.pi / 2, 20)

        radii = np.hypot(arc[:, 0] - 1.0, arc[:, 1] + 1.0)
        np.testing.assert_allclose(radii, 0.5)
        np.testing.assert_array_almost_equal(arc[0], [1.5, -1.0])
        np.testing.assert_array_almost_equal(arc[-1], [1.0, -0.5])

    @pytest.mark.unit
    def test_arc_negative_sweep(self):
        arc = PathInterpolator.arc_interpolation((0.0, 0.0), 1.0, 0.0, -math.pi / 2, 3)

        np.testing.assert_array_almost_equal(arc[1], [math.sqrt(0.5), -math.sqrt(0.5)])

    @pytest.mark.unit
    @pytest.mark.parametrize("total", range(3, 60))
    def test_split_counts_sum(self, total):
        counts = PathInterpolator.split_counts(total, (0.3, 0.4))

        assert sum(counts) == total
        assert min(counts) >= 1

    @pytest.mark.unit
    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (3 * math.pi / 2, -math.pi / 2),
        (-3 * math.pi / 2, math.pi / 2),
        (4 * math.pi + 0.1, 0.1),
    ])
    def test_wrap_angle(self, angle, expected):
        assert PathInterpolator.wrap_angle(angle) == pytest.approx(expected)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
