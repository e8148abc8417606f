"""
Geometry validation helpers.

Fail-fast checks for the preconditions the centroid and measurement
operations rely on. Each helper returns nothing and raises
InvalidGeometryError on the first violated condition.
"""

import numpy as np

from meridian_geometry.errors import InvalidGeometryError

MIN_RING_POINTS = 4
MIN_RING_DISTINCT_VERTICES = 3
MIN_PATH_POINTS = 2


def _require_finite(coordinates: np.ndarray, kind: str) -> None:
    if not np.all(np.isfinite(coordinates)):
        bad = int(np.flatnonzero(~np.isfinite(coordinates).all(axis=1))[0])
        raise InvalidGeometryError(
            f"{kind} has a non-finite coordinate at index {bad}: {coordinates[bad].tolist()}"
        )


def validate_ring(coordinates: np.ndarray) -> None:
    """
    Check that a ring is closed, finite and encloses at least a triangle.

    Args:
        coordinates: (N, 2) vertex array

    Raises:
        InvalidGeometryError: If the ring has fewer than 4 points, a
            non-finite coordinate, differing first/last points, or fewer
            than 3 distinct vertices
    """
    if len(coordinates) < MIN_RING_POINTS:
        raise InvalidGeometryError(
            f"Ring must have at least {MIN_RING_POINTS} points, got {len(coordinates)}"
        )

    _require_finite(coordinates, "Ring")

    if not np.array_equal(coordinates[0], coordinates[-1]):
        raise InvalidGeometryError(
            f"Ring is not closed: first point {coordinates[0].tolist()} "
            f"!= last point {coordinates[-1].tolist()}"
        )

    distinct = len(np.unique(coordinates[:-1], axis=0))
    if distinct < MIN_RING_DISTINCT_VERTICES:
        raise InvalidGeometryError(
            f"Ring must have at least {MIN_RING_DISTINCT_VERTICES} distinct vertices, got {distinct}"
        )


def validate_path(coordinates: np.ndarray) -> None:
    """
    Check that a path has at least two finite points.

    Raises:
        InvalidGeometryError: If the path is too short or not finite
    """
    if len(coordinates) < MIN_PATH_POINTS:
        raise InvalidGeometryError(
            f"Path must have at least {MIN_PATH_POINTS} points, got {len(coordinates)}"
        )

    _require_finite(coordinates, "Path")
