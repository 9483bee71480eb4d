"""
Cartesian vector arithmetic.

This module defines an immutable ``CartesianVector`` class for
three-dimensional cartesian coordinates: ``x`` points east, ``y`` points
north and ``z`` points up. Instances support the arithmetic needed to move
between coordinate frames (addition, subtraction, scalar multiplication),
a few geometric helpers (dot and cross products, norm) and conversion to
the polar representation in :mod:`physics.polar_vector`.

Equality is exact and component-wise. Vectors are totally ordered,
lexicographically on ``(x, y, z)``; non-finite components are rejected at
construction so the ordering never meets NaN.

Examples
--------
>>> from utils.vector import CartesianVector
>>> v = CartesianVector(1, 2, 3)
>>> w = CartesianVector(4, -1, 0.5)
>>> v + w
CartesianVector(5.0000, 1.0000, 3.5000)
>>> v.dot(w)
3.5
>>> str(CartesianVector(0, 0, 0).to_polar())
'[Radius: 0.0 m, Phi (azimut): 0.0°, Theta (polar): 0.0°]'
"""

from __future__ import annotations

import math
import numbers
from functools import total_ordering
from typing import Iterator, List, Optional, Tuple

import numpy as np

import config as cfg
from utils.angles import check_finite, equal_with_delta


@total_ordering
class CartesianVector:
    """An immutable three-dimensional cartesian vector.

    Parameters
    ----------
    x, y, z : float
        The cartesian components in metres. Values are coerced to ``float``
        and must be finite.

    Notes
    -----
    * Instances use ``__slots__`` and refuse attribute assignment; every
      operation returns a new ``CartesianVector``.
    * ``==`` is exact. Use :meth:`isclose` for a tolerant comparison.
    """

    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: float, y: float, z: float) -> None:
        x, y, z = float(x), float(y), float(z)
        check_finite(x, y, z)
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)
        object.__setattr__(self, "_z", z)

    @classmethod
    def world_origin(cls) -> "CartesianVector":
        """The world origin from ``config.WORLD_ORIGIN``."""
        x, y, z = cfg.WORLD_ORIGIN
        return cls(x, y, z)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    # ------------------------------------------------------------------
    # Basic arithmetic operations
    # ------------------------------------------------------------------
    def add(self, other: "CartesianVector") -> "CartesianVector":
        """Vector addition (elementwise). Polar operands are converted first."""
        other = other.to_cartesian()
        return CartesianVector(self._x + other.x, self._y + other.y, self._z + other.z)

    def subtract(self, other: "CartesianVector") -> "CartesianVector":
        """Vector subtraction (elementwise)."""
        other = other.to_cartesian()
        return CartesianVector(self._x - other.x, self._y - other.y, self._z - other.z)

    def __add__(self, other):
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "CartesianVector":
        """Scalar multiplication from the right."""
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return CartesianVector(self._x * scalar, self._y * scalar, self._z * scalar)

    def __rmul__(self, scalar: float) -> "CartesianVector":
        """Scalar multiplication from the left."""
        return self.__mul__(scalar)

    def __neg__(self) -> "CartesianVector":
        """Additive inverse of the vector."""
        return CartesianVector(-self._x, -self._y, -self._z)

    # ------------------------------------------------------------------
    # Comparison and hashing
    # ------------------------------------------------------------------
    def sort_key(self) -> Tuple[float, float, float]:
        return (self._x, self._y, self._z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: "CartesianVector") -> bool:
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def isclose(self, other: "CartesianVector", tol: Optional[float] = None) -> bool:
        """Component-wise comparison with an absolute tolerance."""
        return (
            equal_with_delta(self._x, other.x, tol)
            and equal_with_delta(self._y, other.y, tol)
            and equal_with_delta(self._z, other.z, tol)
        )

    # ------------------------------------------------------------------
    # Geometric operations
    # ------------------------------------------------------------------
    def dot(self, other: "CartesianVector") -> float:
        """Dot product with another vector."""
        return self._x * other.x + self._y * other.y + self._z * other.z

    def cross(self, other: "CartesianVector") -> "CartesianVector":
        """Cross product with another vector."""
        return CartesianVector(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x,
        )

    def norm(self) -> float:
        """Euclidean norm (magnitude) of the vector, without overflow or underflow."""
        return math.hypot(self._x, self._y, self._z)

    def unit(self) -> "CartesianVector":
        """Unit vector in the same direction; the zero vector stays zero."""
        n = self.norm()
        if n == 0:
            return CartesianVector(0.0, 0.0, 0.0)
        return CartesianVector(self._x / n, self._y / n, self._z / n)

    def distance_to(self, other: "CartesianVector") -> float:
        return (self - other).norm()

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    def to_polar(self):
        """Return the canonical :class:`PolarVector` for this vector.

        The zero vector has no direction and maps straight to the canonical
        origin instead of evaluating ``acos(0/0)``.
        """
        from physics.polar_vector import PolarVector

        r = self.norm()
        if r == 0.0:
            return PolarVector(0.0, 0.0, 0.0)
        if self._x == 0.0 and self._y == 0.0:
            # on the polar axis
            return PolarVector(r, 0.0, 0.0 if self._z > 0.0 else 180.0)
        # rounding can push z/r a hair outside [-1, 1]
        cos_theta = max(-1.0, min(1.0, self._z / r))
        phi = math.degrees(math.atan2(self._y, self._x))
        theta = math.degrees(math.acos(cos_theta))
        return PolarVector(r, phi, theta)

    def to_cartesian(self) -> "CartesianVector":
        return self

    def to_numpy(self) -> np.ndarray:
        """Return a ``numpy.ndarray`` representation of this vector."""
        return np.array([self._x, self._y, self._z], dtype=float)

    @staticmethod
    def from_numpy(arr: np.ndarray) -> "CartesianVector":
        """Construct a ``CartesianVector`` from a 3-element array or sequence."""
        return CartesianVector(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_list(self) -> List[float]:
        """Return the components as a list ``[x, y, z]``."""
        return [self._x, self._y, self._z]

    def __iter__(self) -> Iterator[float]:
        """Yield the components of the vector in order x, y, z."""
        yield self._x
        yield self._y
        yield self._z

    def __reduce__(self):
        return (CartesianVector, (self._x, self._y, self._z))

    def __repr__(self) -> str:
        return f"CartesianVector({self._x:.4f}, {self._y:.4f}, {self._z:.4f})"

    def __str__(self) -> str:
        return f"[X: {self._x!r} m, Y: {self._y!r} m, Z: {self._z!r} m]"
