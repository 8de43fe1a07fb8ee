"""
Tests for RealVectorBounds.
"""

import math

import pytest
from motion_geometry.src.spaces.real_vector_bounds import RealVectorBounds
from motion_geometry.src.spaces.state_space import SpaceConfigurationError


class TestRealVectorBounds:
    """Construction, mutation and validation of box bounds."""

    def test_default_bounds_are_zero(self):
        bounds = RealVectorBounds(3)
        assert bounds.low == [0.0, 0.0, 0.0]
        assert bounds.high == [0.0, 0.0, 0.0]
        assert len(bounds) == 3

    def test_set_low_high_all_and_single(self):
        bounds = RealVectorBounds(2)
        bounds.set_low(-1)
        bounds.set_high(1)
        bounds.set_high(5, index=1)
        assert bounds.low == [-1.0, -1.0]
        assert bounds.high == [1.0, 5.0]

    def test_from_pairs(self):
        bounds = RealVectorBounds.from_pairs([(0, 1), (-2, 3)])
        assert bounds.low == [0.0, -2.0]
        assert bounds.high == [1.0, 3.0]

    def test_resize_grows_and_truncates(self):
        bounds = RealVectorBounds.from_pairs([(0, 1), (-2, 3)])
        bounds.resize(3)
        assert bounds.low == [0.0, -2.0, 0.0]
        assert bounds.high == [1.0, 3.0, 0.0]
        bounds.resize(1)
        assert bounds == RealVectorBounds.from_pairs([(0, 1)])

    def test_difference_and_volume(self):
        bounds = RealVectorBounds.from_pairs([(0, 2), (-1, 2)])
        assert bounds.get_difference() == [2.0, 3.0]
        assert math.isclose(bounds.get_volume(), 6.0)
        assert RealVectorBounds(0).get_volume() == 1.0

    def test_check_rejects_inverted_interval(self):
        bounds = RealVectorBounds.from_pairs([(0, 1), (2, 1)])
        with pytest.raises(SpaceConfigurationError, match="dimension 1"):
            bounds.check()

    def test_check_rejects_length_mismatch(self):
        bounds = RealVectorBounds(2)
        bounds.high.append(1.0)
        with pytest.raises(SpaceConfigurationError):
            bounds.check()

    def test_configuration_error_is_value_error(self):
        assert issubclass(SpaceConfigurationError, ValueError)

    def test_copy_is_independent(self):
        bounds = RealVectorBounds.from_pairs([(0, 1)])
        copied = bounds.copy()
        copied.set_high(10)
        assert bounds.high == [1.0]
        assert copied != bounds
