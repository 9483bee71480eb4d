# physics/polar_vector.py
"""
Polar (spherical) vectors in canonical form.

``r`` is the radius in metres, ``phi`` the azimuth in degrees measured from
the x axis towards y, ``theta`` the polar angle in degrees measured from the
z axis. Every instance is stored in canonical form so that two descriptions
of the same point compare equal: (1, 10, 90), (1, 370, 90) and
(-1, 190, 90) all become (1, 10, 90).
"""
from __future__ import annotations

import math
from functools import total_ordering
from typing import Optional, Tuple

import config as cfg
from utils.angles import check_finite, equal_with_delta, wrap
from utils.vector import CartesianVector

FULL_TURN = 360.0
HALF_TURN = 180.0


def canonical_coords(r: float, phi: float, theta: float) -> Tuple[float, float, float]:
    """
    Fold any (r, phi, theta) into the unique representation with
    r >= 0, phi in [0, 360) and theta in [0, 180).
    The origin has no direction and the poles have no azimuth, so both get
    phi = 0 (and theta = 0 for the origin). A negative radius points the
    other way: the antipodal azimuth at the reflected polar angle.
    """
    phi = wrap(phi, FULL_TURN)
    theta = wrap(theta, HALF_TURN)

    if r == 0.0:
        r, phi, theta = 0.0, 0.0, 0.0
    elif theta == 0.0 or theta == HALF_TURN:
        phi = 0.0

    if r < 0.0:
        # reflecting theta == 0 gives 180, which the second pass wraps again
        return canonical_coords(-r, phi + HALF_TURN, HALF_TURN - theta)

    return r, phi, theta


@total_ordering
class PolarVector:
    """Immutable polar vector, canonicalized on construction.

    Equality is exact on the canonical triple; ordering is lexicographic on
    ``(phi, theta, r)`` so vectors sort by azimuth first.
    """

    __slots__ = ("_r", "_phi", "_theta")

    def __init__(self, r: float, phi: float, theta: float) -> None:
        r, phi, theta = float(r), float(phi), float(theta)
        check_finite(r, phi, theta)
        r, phi, theta = canonical_coords(r, phi, theta)
        object.__setattr__(self, "_r", r)
        object.__setattr__(self, "_phi", phi)
        object.__setattr__(self, "_theta", theta)

    @classmethod
    def from_radians(cls, r: float, phi: float, theta: float) -> "PolarVector":
        return cls(r, math.degrees(phi), math.degrees(theta))

    @classmethod
    def world_origin(cls) -> "PolarVector":
        r, phi, theta = cfg.WORLD_ORIGIN
        return cls(r, phi, theta)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def r(self) -> float:
        """Radius in m."""
        return self._r

    @property
    def phi(self) -> float:
        """Azimuth in degrees, [0, 360)."""
        return self._phi

    @property
    def theta(self) -> float:
        """Polar angle in degrees, [0, 180)."""
        return self._theta

    @property
    def phi_rad(self) -> float:
        return math.radians(self._phi)

    @property
    def theta_rad(self) -> float:
        return math.radians(self._theta)

    def angle_difference_phi(self, other: "PolarVector") -> float:
        """Raw ``other.phi - self.phi``; not the shortest way around."""
        return other.phi - self._phi

    def angle_difference_theta(self, other: "PolarVector") -> float:
        """Raw ``other.theta - self.theta``."""
        return other.theta - self._theta

    # ------------------------------------------------------------------
    # Conversion and arithmetic
    # ------------------------------------------------------------------
    def to_cartesian(self) -> CartesianVector:
        phi, theta = self.phi_rad, self.theta_rad
        return CartesianVector(
            self._r * math.cos(phi) * math.sin(theta),
            self._r * math.sin(phi) * math.sin(theta),
            self._r * math.cos(theta),
        )

    def to_polar(self) -> "PolarVector":
        return self

    def add(self, other) -> "PolarVector":
        """Sum of two vectors (polar or cartesian), computed in cartesian space."""
        return self.to_cartesian().add(other.to_cartesian()).to_polar()

    def subtract(self, other) -> "PolarVector":
        return self.to_cartesian().subtract(other.to_cartesian()).to_polar()

    def __add__(self, other):
        if not isinstance(other, (PolarVector, CartesianVector)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (PolarVector, CartesianVector)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "PolarVector":
        return PolarVector(-self._r, self._phi, self._theta)

    # ------------------------------------------------------------------
    # Comparison and hashing
    # ------------------------------------------------------------------
    def sort_key(self) -> Tuple[float, float, float]:
        return (self._phi, self._theta, self._r)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolarVector):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: "PolarVector") -> bool:
        if not isinstance(other, PolarVector):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def isclose(self, other: "PolarVector", tol: Optional[float] = None) -> bool:
        """Tolerant comparison; azimuths just either side of 0/360 count as close."""
        d_phi = wrap(other.phi - self._phi + HALF_TURN, FULL_TURN) - HALF_TURN
        return (
            equal_with_delta(self._r, other.r, tol)
            and equal_with_delta(d_phi, 0.0, tol)
            and equal_with_delta(self._theta, other.theta, tol)
        )

    def __reduce__(self):
        return (PolarVector, (self._r, self._phi, self._theta))

    def __repr__(self) -> str:
        return f"PolarVector({self._r:.4f}, {self._phi:.4f}, {self._theta:.4f})"

    def __str__(self) -> str:
        return f"[Radius: {self._r!r} m, Phi (azimut): {self._phi!r}°, Theta (polar): {self._theta!r}°]"
