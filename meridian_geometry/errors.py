"""
Geometry Errors
===============

Exception taxonomy shared by the geometry layer and the centroid core.

Hierarchy:

    GeometryError (ValueError)
    ├── InvalidGeometryError     # malformed input, detected eagerly
    └── DegenerateGeometryError  # well-formed input with no defined result
"""


class GeometryError(ValueError):
    """Base exception for geometry operations."""

    pass


class InvalidGeometryError(GeometryError):
    """Input violates a structural precondition (closure, point count, finiteness)."""

    pass


class DegenerateGeometryError(GeometryError):
    """Input is well-formed but its result is undefined (e.g. zero enclosed area)."""

    pass
