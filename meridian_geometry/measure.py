"""
Measurement Module
==================

Great-circle measurements over lon/lat features.

Coordinates are interpreted as (longitude, latitude) in decimal degrees on a
sphere of mean Earth radius. Results are converted to the requested Unit.

Design:
- Pure functions (no state)
- Segment lengths vectorized with numpy
- Path walking (along) interpolates on the great circle of the segment
"""

import math
from typing import Union

import numpy as np

from meridian_geometry.features import LineString, Point, as_coordinate_array
from meridian_geometry.units import Unit, length_to_radians, radians_to_length
from meridian_geometry.validation import MIN_PATH_POINTS
from meridian_geometry.errors import InvalidGeometryError

UnitLike = Union[Unit, str]


def _path_coordinates(line) -> np.ndarray:
    """Coordinates of a LineString or raw sequence, with at least two points."""
    coordinates = line.coordinates if isinstance(line, LineString) else as_coordinate_array(line)
    if len(coordinates) < MIN_PATH_POINTS:
        raise InvalidGeometryError(
            f"Path must have at least {MIN_PATH_POINTS} points, got {len(coordinates)}"
        )
    return coordinates


def _haversine(lon1, lat1, lon2, lat2):
    """Central angle in radians between coordinates given in degrees (scalars or arrays)."""
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    dphi = np.radians(np.subtract(lat2, lat1))
    dlambda = np.radians(np.subtract(lon2, lon1))
    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlambda / 2) ** 2
    return 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def point_distance(a, b, unit: UnitLike = Unit.METERS) -> float:
    """
    Great-circle distance between two points.

    Args:
        a: (lon, lat) start, as Point or pair
        b: (lon, lat) end, as Point or pair
        unit: Output unit (default: meters)
    """
    lon1, lat1 = a
    lon2, lat2 = b
    return radians_to_length(float(_haversine(lon1, lat1, lon2, lat2)), unit)


def segment_lengths(line, unit: UnitLike = Unit.METERS) -> np.ndarray:
    """Lengths of each consecutive segment of a path, shape (N - 1,)."""
    coordinates = _path_coordinates(line)
    start, end = coordinates[:-1], coordinates[1:]
    angles = _haversine(start[:, 0], start[:, 1], end[:, 0], end[:, 1])
    return angles * Unit.parse(unit).factor


def distance(line, unit: UnitLike = Unit.METERS) -> float:
    """
    Total path length: the sum of consecutive great-circle segment lengths.

    Args:
        line: LineString or sequence of (lon, lat) pairs, at least 2 points
        unit: Output unit (default: meters)

    Raises:
        InvalidGeometryError: If the path has fewer than 2 points
    """
    return float(np.sum(segment_lengths(line, unit)))


def bearing(a, b) -> float:
    """
    Initial great-circle bearing from a to b.

    Returns:
        Degrees clockwise from north, in (-180, 180]
    """
    lon1, lat1 = a
    lon2, lat2 = b
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlambda = math.radians(lon2 - lon1)
    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlambda)
    return math.degrees(math.atan2(y, x))


def destination(origin, length: float, heading: float, unit: UnitLike = Unit.METERS) -> Point:
    """
    Point reached by travelling a distance along a heading from origin.

    Args:
        origin: (lon, lat) start, as Point or pair
        length: Distance to travel (negative travels backwards)
        heading: Bearing in degrees clockwise from north
        unit: Unit of length

    Returns:
        Destination Point as (lon, lat)
    """
    lon1, lat1 = origin
    lambda1, phi1 = math.radians(lon1), math.radians(lat1)
    delta = length_to_radians(length, unit)
    theta = math.radians(heading)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return Point(math.degrees(lambda2), math.degrees(phi2))


def along(line, budget: float, unit: UnitLike = Unit.METERS) -> Point:
    """
    Point at a cumulative distance from the start of a path.

    Walks the segments from the start. Within the segment where the
    cumulative length first reaches the budget, the result lies on that
    segment's great circle at the remaining distance from the segment start.

    Args:
        line: LineString or sequence of (lon, lat) pairs, at least 2 points
        budget: Distance from the start (0 returns the first point; beyond
            the total length returns the last point)
        unit: Unit of budget

    Raises:
        InvalidGeometryError: If the path has fewer than 2 points
        ValueError: If budget is negative
    """
    if budget < 0:
        raise ValueError(f"along distance must be >= 0, got {budget}")

    coordinates = _path_coordinates(line)
    lengths = segment_lengths(coordinates, unit)

    travelled = 0.0
    for (start, end), length in zip(_segments(coordinates), lengths):
        if travelled + length >= budget:
            remaining = budget - travelled
            if remaining == 0:
                return Point(*start)
            return destination(start, remaining, bearing(start, end), unit)
        travelled += length

    return Point(*coordinates[-1])


def _segments(coordinates: np.ndarray):
    """Consecutive (start, end) vertex pairs as Python float tuples."""
    pairs = [tuple(map(float, c)) for c in coordinates]
    return zip(pairs[:-1], pairs[1:])
