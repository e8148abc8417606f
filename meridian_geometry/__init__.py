"""
Geometry Layer
==============

Bounded Context: Feature types and great-circle measurement.

Responsibilities:
- Feature representation (immutable Point, LineString, Polygon)
- Structural and semantic validation
- Distance units
- Path length and along-path interpolation
- NO centroids, NO logging

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from meridian_geometry.errors import (
    GeometryError,
    InvalidGeometryError,
    DegenerateGeometryError,
)
from meridian_geometry.features import Point, LineString, Polygon
from meridian_geometry.units import Unit, EARTH_RADIUS_M
from meridian_geometry.measure import along, bearing, destination, distance, point_distance
from meridian_geometry.validation import validate_path, validate_ring

__all__ = [
    # Errors
    "GeometryError",
    "InvalidGeometryError",
    "DegenerateGeometryError",
    # Features
    "Point",
    "LineString",
    "Polygon",
    # Units
    "Unit",
    "EARTH_RADIUS_M",
    # Measurement
    "along",
    "bearing",
    "destination",
    "distance",
    "point_distance",
    # Validation
    "validate_path",
    "validate_ring",
]
