"""
Unit tests for the cartesian vector type and the angle helpers.
"""

import math

import numpy as np
import pytest

from physics.polar_vector import PolarVector
from utils.angles import equal_with_delta, wrap
from utils.vector import CartesianVector


class TestCreation:
    """Construction, accessors and immutability."""

    def test_world_origin_is_zero(self):
        assert CartesianVector(0.0, 0.0, 0.0) == CartesianVector.world_origin()

    def test_getters(self):
        a = CartesianVector(10.0, 5.05, 6.0)
        assert a.x == 10.0
        assert a.y == 5.05
        assert a.z == 6.0

    def test_components_coerced_to_float(self):
        a = CartesianVector(1, 2, 3)
        assert isinstance(a.x, float)

    def test_immutable(self):
        a = CartesianVector(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            a.x = 5.0
        with pytest.raises(AttributeError):
            a.w = 5.0

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValueError):
            CartesianVector(bad, 0.0, 0.0)


class TestArithmetic:
    """Component-wise add and subtract."""

    def test_add(self):
        a = CartesianVector(10.0, 5.05, 6.0)
        assert a.add(a) == CartesianVector(20.0, 10.1, 12.0)
        assert a + a == CartesianVector(20.0, 10.1, 12.0)

    def test_subtract(self):
        a = CartesianVector(10.0, 5.05, 6.0)
        b = CartesianVector(5.0, 5.05, 8.0)
        assert a.subtract(b) == CartesianVector(5.0, 0.0, -2.0)
        assert a - b == CartesianVector(5.0, 0.0, -2.0)

    def test_add_polar_operand(self):
        a = CartesianVector(1.0, 0.0, 0.0)
        b = PolarVector(2.0, 0.0, 90.0)
        assert a.add(b).isclose(CartesianVector(3.0, 0.0, 0.0))

    def test_add_unrelated_type(self):
        with pytest.raises(TypeError):
            CartesianVector(1.0, 0.0, 0.0) + 1.0

    def test_scalar_and_negation(self):
        a = CartesianVector(1.0, -2.0, 3.0)
        assert 2 * a == CartesianVector(2.0, -4.0, 6.0)
        assert -a == CartesianVector(-1.0, 2.0, -3.0)

    def test_numpy_scalars(self):
        a = CartesianVector(1.0, -2.0, 3.0)
        assert a * np.int64(2) == CartesianVector(2.0, -4.0, 6.0)
        assert a * np.float32(0.5) == CartesianVector(0.5, -1.0, 1.5)

    def test_unit_of_tiny_vector(self):
        u = CartesianVector(3e-310, 4e-310, 0.0).unit()
        assert (u.x, u.y, u.z) == pytest.approx((0.6, 0.8, 0.0))

    def test_geometry(self):
        a = CartesianVector(1.0, 0.0, 0.0)
        b = CartesianVector(0.0, 1.0, 0.0)
        assert a.dot(b) == 0.0
        assert a.cross(b) == CartesianVector(0.0, 0.0, 1.0)
        assert CartesianVector(3.0, 4.0, 0.0).norm() == 5.0
        assert CartesianVector(0.0, 0.0, 0.0).unit() == CartesianVector(0.0, 0.0, 0.0)
        assert a.distance_to(b) == pytest.approx(math.sqrt(2.0))


class TestOrdering:
    """Exact equality and lexicographic (x, y, z) order."""

    def test_equality_is_exact(self):
        a = CartesianVector(1.0, 1.0, 1.0)
        assert a == CartesianVector(1.0, 1.0, 1.0)
        assert a != CartesianVector(1.0, 1.0, 1.0 + 1e-12)
        assert a.isclose(CartesianVector(1.0, 1.0, 1.0 + 1e-12))

    def test_lexicographic(self):
        a = CartesianVector(1.0, 5.0, 5.0)
        b = CartesianVector(2.0, 0.0, 0.0)
        c = CartesianVector(2.0, 1.0, 0.0)
        d = CartesianVector(2.0, 1.0, 1.0)
        assert a < b < c < d
        assert d > a
        assert sorted([d, b, c, a]) == [a, b, c, d]

    def test_hash_matches_equality(self):
        assert len({CartesianVector(1, 2, 3), CartesianVector(1.0, 2.0, 3.0)}) == 1


class TestConversion:
    """to_polar, numpy interop and formatting."""

    def test_to_polar_along_x(self):
        p = CartesianVector(10.0, 0.0, 0.0).to_polar()
        assert p.r == 10.0
        assert p.phi == pytest.approx(0.0, abs=1e-9)
        assert p.theta == pytest.approx(90.0)

    def test_zero_vector_to_polar_has_no_nan(self):
        p = CartesianVector(0.0, 0.0, 0.0).to_polar()
        assert p == PolarVector(0.0, 0.0, 0.0)
        assert not math.isnan(p.theta)

    def test_negative_y_wraps_azimuth(self):
        p = CartesianVector(0.0, -1.0, 0.0).to_polar()
        assert p.phi == pytest.approx(270.0)

    @pytest.mark.parametrize("xyz", [(1.0, 2.0, 3.0), (-4.0, 0.5, -2.0), (0.0, 3.0, 1.0), (-1.0, -1.0, 0.25)])
    def test_round_trip(self, xyz):
        v = CartesianVector(*xyz)
        assert v.to_polar().to_cartesian().isclose(v)

    @pytest.mark.parametrize("xyz", [(1e200, 2e200, 3e200), (1e-200, -2e-200, 3e-200), (-5e300, 1e300, 2e300)])
    def test_round_trip_extreme_magnitudes(self, xyz):
        v = CartesianVector(*xyz)
        back = v.to_polar().to_cartesian()
        assert list(back) == pytest.approx(list(v), rel=1e-9)

    @pytest.mark.parametrize("value", [1e200, 1e-200, 1e308])
    def test_to_polar_keeps_magnitude(self, value):
        p = CartesianVector(value, 0.0, 0.0).to_polar()
        assert p.r == pytest.approx(value, rel=1e-15)
        assert p.theta == pytest.approx(90.0)

    def test_south_pole_folds_onto_north_pole(self):
        """theta wraps modulo 180, so the -z axis shares the canonical form of +z."""
        p = CartesianVector(0.0, 0.0, -1.0).to_polar()
        assert p == PolarVector(1.0, 0.0, 0.0)
        assert p == CartesianVector(0.0, 0.0, 1.0).to_polar()
        assert p.to_cartesian() == CartesianVector(0.0, 0.0, 1.0)

    def test_numpy(self):
        v = CartesianVector(1.0, 2.0, 3.0)
        arr = v.to_numpy()
        assert np.array_equal(arr, np.array([1.0, 2.0, 3.0]))
        assert CartesianVector.from_numpy(arr) == v
        assert list(v) == v.to_list() == [1.0, 2.0, 3.0]

    def test_str(self):
        assert str(CartesianVector(1.0, 2.5, -3.0)) == "[X: 1.0 m, Y: 2.5 m, Z: -3.0 m]"


class TestAngles:
    """Euclidean wrapping helper."""

    def test_wrap(self):
        assert wrap(370.0, 360.0) == 10.0
        assert wrap(-1.5, 360.0) == 358.5
        assert wrap(360.0, 360.0) == 0.0
        assert wrap(-1e-20, 360.0) == 0.0

    def test_equal_with_delta(self):
        assert equal_with_delta(1.0, 1.0000001)
        assert not equal_with_delta(1.0, 1.1)
        assert equal_with_delta(1.0, 1.1, 0.2)
