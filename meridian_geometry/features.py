"""
Geometric Features Module
=========================

Pure feature representations - NO state, NO side effects.

Design:
- Immutable features (frozen dataclass pattern)
- Coordinates stored as read-only (N, 2) float64 arrays
- Structural validation at construction (shape, numeric)
- Semantic validation (closure, counts) left to validation.py
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from meridian_geometry.errors import InvalidGeometryError


def as_coordinate_array(coordinates) -> np.ndarray:
    """
    Convert a coordinate sequence into a read-only (N, 2) float64 array.

    Accepts numpy arrays, sequences of (x, y) pairs and sequences of Points.
    The result never shares memory with the input.

    Raises:
        InvalidGeometryError: If coordinates are not numeric (x, y) pairs
    """
    try:
        if isinstance(coordinates, np.ndarray):
            array = np.array(coordinates, dtype=np.float64)
        else:
            array = np.array([tuple(c) for c in coordinates], dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidGeometryError(f"coordinates must be numeric (x, y) pairs: {e}") from e

    if array.size == 0:
        array = array.reshape(0, 2)

    if array.ndim != 2 or array.shape[1] != 2:
        raise InvalidGeometryError(f"coordinates must be an Nx2 array, got shape {array.shape}")

    array.flags.writeable = False
    return array


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Equality is exact (no tolerance). For lon/lat features, x is longitude
    and y is latitude in degrees.

    Attributes:
        x: First coordinate
        y: Second coordinate
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce coordinates to float."""
        try:
            object.__setattr__(self, 'x', float(self.x))
            object.__setattr__(self, 'y', float(self.y))
        except (TypeError, ValueError) as e:
            raise InvalidGeometryError(f"Point coordinates must be numeric, got ({self.x!r}, {self.y!r})") from e

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def is_finite(self) -> bool:
        """True if neither coordinate is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True, eq=False)
class LineString:
    """
    Immutable polyline (ordered open vertex chain).

    Attributes:
        coordinates: (N, 2) read-only float64 array of vertices
    """

    coordinates: np.ndarray

    def __post_init__(self):
        """Normalize coordinates to a read-only array."""
        object.__setattr__(self, 'coordinates', as_coordinate_array(self.coordinates))

    def __len__(self) -> int:
        return len(self.coordinates)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineString):
            return NotImplemented
        return np.array_equal(self.coordinates, other.coordinates)

    def points(self) -> List[Point]:
        """Vertices as Point instances, in order."""
        return [Point(x, y) for x, y in self.coordinates]

    def is_closed(self) -> bool:
        """True if the first and last vertices are identical."""
        if len(self.coordinates) == 0:
            return False
        return bool(np.array_equal(self.coordinates[0], self.coordinates[-1]))


@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Immutable polygon as an ordered sequence of rings.

    The first ring is the exterior; any further rings are interiors (holes).
    Rings are expected to be explicitly closed (first vertex == last vertex).

    Attributes:
        rings: Tuple of (N, 2) read-only float64 arrays
    """

    rings: Tuple[np.ndarray, ...]

    def __post_init__(self):
        """Normalize rings and require at least one."""
        if isinstance(self.rings, np.ndarray) and self.rings.ndim == 2:
            raise InvalidGeometryError(
                "Polygon expects a sequence of rings; wrap a single ring in a list"
            )

        rings = tuple(as_coordinate_array(ring) for ring in self.rings)
        if not rings:
            raise InvalidGeometryError("Polygon must have at least one ring")

        object.__setattr__(self, 'rings', rings)

    @classmethod
    def from_ring(cls, ring: Sequence) -> "Polygon":
        """Build a polygon with a single exterior ring."""
        return cls(rings=[ring])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return len(self.rings) == len(other.rings) and all(
            np.array_equal(a, b) for a, b in zip(self.rings, other.rings)
        )

    @property
    def exterior(self) -> np.ndarray:
        return self.rings[0]

    @property
    def interiors(self) -> Tuple[np.ndarray, ...]:
        return self.rings[1:]

    def ring_points(self, index: int = 0) -> List[Point]:
        """Vertices of one ring as Point instances."""
        return [Point(x, y) for x, y in self.rings[index]]
