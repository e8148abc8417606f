"""
Centroid Module
===============

Stateless centroid computation for polygon and line features.

Design:
- Pure functions (no state, no logging, no mutation of inputs)
- Centroid is a capability (SupportsCentroid), not a base class
- Strict mode (default) rejects invalid and degenerate input with exceptions
- Legacy mode (strict=False) skips validation and lets a zero-area ring
  produce non-finite coordinates

Algorithms:
- Polygon: signed-area weighted centroid of the exterior ring. The factor 3
  applied to the area folds the 1/6 centroid and 1/2 area constants into a
  single division, so the result does not depend on winding direction.
- Line: the point at half the total great-circle length, in meters.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from meridian_geometry.features import LineString, Point, Polygon, as_coordinate_array
from meridian_geometry.measure import along, distance
from meridian_geometry.units import Unit
from meridian_geometry.validation import validate_path, validate_ring
from meridian_centroid.errors import (
    DegenerateGeometryError,
    InvalidGeometryError,
    UnsupportedFeatureError,
)

ZERO_AREA_ULPS = 8


@runtime_checkable
class SupportsCentroid(Protocol):
    """Protocol for feature types that know their own centroid."""

    def centroid(self) -> Point:
        """Return the feature's centroid."""
        ...


def ring_centroid(ring, strict: bool = True) -> Point:
    """
    Area-weighted centroid of a closed ring.

    Args:
        ring: (N, 2) array or sequence of (x, y) pairs with first == last
        strict: Validate the ring and reject zero area (default: True)

    Returns:
        Centroid Point. In legacy mode a zero-area ring yields inf/NaN.

    Raises:
        InvalidGeometryError: Ring empty, or (strict) not closed, too short,
            non-finite or with fewer than 3 distinct vertices
        DegenerateGeometryError: (strict) Ring encloses zero area
    """
    coordinates = as_coordinate_array(ring)

    if strict:
        validate_ring(coordinates)
    elif len(coordinates) == 0:
        raise InvalidGeometryError("Ring is empty")

    prev = coordinates[:-1]
    cur = coordinates[1:]

    f = cur[:, 1] * prev[:, 0] - prev[:, 1] * cur[:, 0]
    x_sum = np.sum((cur[:, 0] + prev[:, 0]) * f)
    y_sum = np.sum((cur[:, 1] + prev[:, 1]) * f)
    area = np.sum(f * 3.0)

    if strict and _is_zero_area(area, cur, prev):
        raise DegenerateGeometryError(
            f"Ring encloses zero area; centroid is undefined ({len(coordinates)} points)"
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        return Point(x_sum / area, y_sum / area)


def _is_zero_area(area, cur: np.ndarray, prev: np.ndarray) -> bool:
    """True if area is within floating-point rounding of zero for these vertices."""
    scale = np.sum(np.abs(cur[:, 1] * prev[:, 0]) + np.abs(prev[:, 1] * cur[:, 0]))
    return bool(abs(area) <= ZERO_AREA_ULPS * np.finfo(np.float64).eps * 3.0 * scale)


def polygon_centroid(polygon: Polygon, strict: bool = True) -> Point:
    """
    Centroid of a polygon's exterior ring.

    Only the first ring participates; holes and any further rings are
    ignored. Valid for simple (non-self-intersecting) polygons.

    Example:
        >>> polygon_centroid(Polygon.from_ring([(0, 0), (0, 2), (2, 2), (2, 0), (0, 0)]))
        Point(x=1.0, y=1.0)
    """
    if not isinstance(polygon, Polygon):
        raise UnsupportedFeatureError(
            f"polygon_centroid expects a Polygon, got {type(polygon).__name__}"
        )
    return ring_centroid(polygon.exterior, strict=strict)


def line_centroid(line: LineString, strict: bool = True) -> Point:
    """
    Length-bisection point of a line.

    The result is the point at half the total path length in meters, which
    differs from the coordinate average whenever segments have unequal
    lengths. A zero-length line returns its first point.

    Raises:
        InvalidGeometryError: Fewer than 2 points, or (strict) non-finite
            coordinates
    """
    if not isinstance(line, LineString):
        raise UnsupportedFeatureError(
            f"line_centroid expects a LineString, got {type(line).__name__}"
        )

    if strict:
        validate_path(line.coordinates)

    half = distance(line, Unit.METERS) / 2.0
    return along(line, half, Unit.METERS)


def centroid(feature, strict: bool = True) -> Point:
    """
    Centroid of any supported feature.

    Dispatch:
        Polygon -> polygon_centroid
        LineString -> line_centroid
        Point -> the point itself
        SupportsCentroid -> feature.centroid()

    Raises:
        UnsupportedFeatureError: If the feature kind is not supported
    """
    if isinstance(feature, Polygon):
        return polygon_centroid(feature, strict=strict)
    if isinstance(feature, LineString):
        return line_centroid(feature, strict=strict)
    if isinstance(feature, Point):
        if strict and not feature.is_finite():
            raise InvalidGeometryError(f"Point has a non-finite coordinate: {feature.to_tuple()}")
        return feature
    if isinstance(feature, SupportsCentroid):
        return feature.centroid()

    raise UnsupportedFeatureError(
        f"Cannot compute centroid of {type(feature).__name__}; "
        f"expected Polygon, LineString, Point or an object with centroid()"
    )
