# physics/coordinate_system.py
"""
Tree of coordinate systems that differ from each other by a translation.

The world frame is the single root. Every other frame is defined by an
origin offset expressed in its parent's coordinates, and a parent that
already exists when the frame is built, so parent chains are finite and
acyclic by construction. There is no rotation between frames.
"""
from __future__ import annotations

import logging
from functools import total_ordering
from typing import Iterator, Optional, Union

import numpy as np

import config as cfg
from physics.polar_vector import PolarVector
from utils.vector import CartesianVector

logger = logging.getLogger(__name__)

Vector = Union[CartesianVector, PolarVector]
VECTOR_TYPES = (CartesianVector, PolarVector)


def vector_rank(vec: Vector) -> int:
    return 0 if isinstance(vec, CartesianVector) else 1


@total_ordering
class CoordinateSystem:
    """Base class of all frames.

    Not built directly: use WorldCoordSystem for the root and
    GeneralCoordSystem for everything below it.

    Frames are immutable. Two frames are equal when their whole ancestry
    (ids and origins up to the world frame) is equal; sorting orders frames
    by that ancestry, so parents sort before their children.
    """

    __slots__ = ("_id", "_origin", "_parent")

    def __init__(self, frame_id: str, origin: Vector, parent: Optional["CoordinateSystem"]) -> None:
        if parent is None and not isinstance(self, WorldCoordSystem):
            raise ValueError("Only the world frame may have no parent")
        object.__setattr__(self, "_id", frame_id)
        object.__setattr__(self, "_origin", origin)
        object.__setattr__(self, "_parent", parent)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get_id(self) -> str:
        return self._id

    def get_origin(self) -> Vector:
        """Origin offset, expressed in the parent's coordinates."""
        return self._origin

    def get_parent(self) -> Optional["CoordinateSystem"]:
        return self._parent

    id = property(get_id)
    origin = property(get_origin)
    parent = property(get_parent)

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def ancestors(self) -> Iterator["CoordinateSystem"]:
        """Yield this frame, then each parent up to and including the root."""
        frame = self
        while frame is not None:
            yield frame
            frame = frame.parent

    @property
    def depth(self) -> int:
        """Number of parent links between this frame and the root."""
        return sum(1 for _ in self.ancestors()) - 1

    @property
    def root(self) -> "CoordinateSystem":
        for frame in self.ancestors():
            pass
        return frame

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------
    def transform_into_world(self, vec: Vector) -> Vector:
        """Resolve ``vec``, given in this frame, into world coordinates.

        Each frame on the way to the root adds its origin offset. The result
        has the same representation as ``vec``; a vector already in the world
        frame comes back untouched.
        """
        if not isinstance(vec, VECTOR_TYPES):
            raise TypeError(f"Expected CartesianVector or PolarVector, got {type(vec).__name__}")
        if self.is_root:
            return vec

        result = vec.to_cartesian()
        for frame in self.ancestors():
            if frame.is_root:
                break
            result = result.add(frame.origin)
        logger.debug("Resolved %s in frame %r to %s in world", vec, self._id, result)
        return result if isinstance(vec, CartesianVector) else result.to_polar()

    def world_offset(self) -> CartesianVector:
        """This frame's origin in world coordinates."""
        return self.transform_into_world(CartesianVector(0.0, 0.0, 0.0))

    def transform_from_world(self, vec: Vector) -> Vector:
        """Express a world-frame vector relative to this frame."""
        if not isinstance(vec, VECTOR_TYPES):
            raise TypeError(f"Expected CartesianVector or PolarVector, got {type(vec).__name__}")
        if self.is_root:
            return vec

        result = vec.to_cartesian().subtract(self.world_offset())
        return result if isinstance(vec, CartesianVector) else result.to_polar()

    def transform_into(self, vec: Vector, target: "CoordinateSystem") -> Vector:
        """Re-express ``vec`` from this frame in ``target``."""
        if target == self:
            return vec
        return target.transform_from_world(self.transform_into_world(vec))

    def transform_array_into_world(self, points) -> np.ndarray:
        """Translate an ``(N, 3)`` array of cartesian points into world coordinates."""
        arr = np.asarray(points, dtype=float)
        if arr.shape[-1:] != (3,):
            raise ValueError(f"Expected points with 3 columns, got shape {arr.shape}")
        return arr + self.world_offset().to_numpy()

    # ------------------------------------------------------------------
    # Comparison and hashing
    # ------------------------------------------------------------------
    def sort_key(self) -> tuple:
        path = []
        for frame in self.ancestors():
            if frame.is_root:
                path.append((frame.id, -1, ()))
            else:
                path.append((frame.id, vector_rank(frame.origin), frame.origin.sort_key()))
        return tuple(reversed(path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateSystem):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: "CoordinateSystem") -> bool:
        if not isinstance(other, CoordinateSystem):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())


class WorldCoordSystem(CoordinateSystem):
    """The root frame: fixed id, the world origin, no parent."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(cfg.WORLD_ID, CartesianVector.world_origin(), None)

    def __repr__(self) -> str:
        return "WorldCoordSystem()"


class GeneralCoordSystem(CoordinateSystem):
    """A named frame translated by ``origin`` relative to ``parent``.

    Parameters
    ----------
    frame_id : str
        Human-assigned, non-empty name.
    parent : CoordinateSystem
        An existing frame; a world frame or another general frame.
    origin : CartesianVector or PolarVector
        Offset of this frame's origin, in the parent's coordinates.
    """

    __slots__ = ()

    def __init__(self, frame_id: str, parent: CoordinateSystem, origin: Vector) -> None:
        if not isinstance(frame_id, str):
            raise TypeError(f"Frame id must be a str, got {type(frame_id).__name__}")
        if not frame_id:
            raise ValueError("Frame id must not be empty")
        if not isinstance(parent, CoordinateSystem):
            raise TypeError(f"Parent must be a CoordinateSystem, got {type(parent).__name__}")
        if not isinstance(origin, VECTOR_TYPES):
            raise TypeError(f"Origin must be a CartesianVector or PolarVector, got {type(origin).__name__}")
        super().__init__(frame_id, origin, parent)
        logger.debug("Created frame %r under %r with origin %s", frame_id, parent.id, origin)

    def __repr__(self) -> str:
        return f"GeneralCoordSystem({self._id!r}, parent={self._parent.id!r}, origin={self._origin!r})"
