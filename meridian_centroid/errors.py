"""
Centroid Errors
===============

Failures surfaced by the centroid operations.

The geometry taxonomy is re-exported so callers can catch everything from
one place:

    GeometryError (ValueError)
    ├── InvalidGeometryError
    ├── DegenerateGeometryError
    └── UnsupportedFeatureError (also TypeError)
"""

from meridian_geometry.errors import (
    GeometryError,
    InvalidGeometryError,
    DegenerateGeometryError,
)


class UnsupportedFeatureError(GeometryError, TypeError):
    """Centroid requested for an object that is not a supported feature."""

    pass


__all__ = [
    "GeometryError",
    "InvalidGeometryError",
    "DegenerateGeometryError",
    "UnsupportedFeatureError",
]
