# physics/vector_point.py
from __future__ import annotations

from functools import total_ordering

from physics.coordinate_system import VECTOR_TYPES, CoordinateSystem, Vector, vector_rank


@total_ordering
class VectorPoint:
    """A vector together with the coordinate system it is expressed in.

    The pairing is notational only: nothing is transformed until
    :meth:`to_world` or :meth:`to_frame` is called. Points are equal when
    both frame and vector are equal, and sort by frame first.
    """

    __slots__ = ("_frame", "_vector")

    def __init__(self, frame: CoordinateSystem, vector: Vector) -> None:
        if not isinstance(frame, CoordinateSystem):
            raise TypeError(f"Frame must be a CoordinateSystem, got {type(frame).__name__}")
        if not isinstance(vector, VECTOR_TYPES):
            raise TypeError(f"Expected CartesianVector or PolarVector, got {type(vector).__name__}")
        object.__setattr__(self, "_frame", frame)
        object.__setattr__(self, "_vector", vector)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def get_coord_system(self) -> CoordinateSystem:
        return self._frame

    def get_vector(self) -> Vector:
        return self._vector

    frame = property(get_coord_system)
    vector = property(get_vector)

    def to_world(self) -> "VectorPoint":
        if self._frame.is_root:
            return self
        return VectorPoint(self._frame.root, self._frame.transform_into_world(self._vector))

    def to_frame(self, target: CoordinateSystem) -> "VectorPoint":
        return VectorPoint(target, self._frame.transform_into(self._vector, target))

    def to_cartesian(self) -> "VectorPoint":
        return VectorPoint(self._frame, self._vector.to_cartesian())

    def to_polar(self) -> "VectorPoint":
        return VectorPoint(self._frame, self._vector.to_polar())

    def sort_key(self) -> tuple:
        return (self._frame.sort_key(), vector_rank(self._vector), self._vector.sort_key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorPoint):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: "VectorPoint") -> bool:
        if not isinstance(other, VectorPoint):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __repr__(self) -> str:
        return f"VectorPoint({self._frame.id!r}, {self._vector!r})"

    def __str__(self) -> str:
        return f"{self._vector} in {self._frame.id!r}"
