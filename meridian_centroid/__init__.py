"""
Meridian Centroid v1.0
======================

Bounded Context: Centroids of polygon and line features.

Architecture:

    meridian_geometry/         # Collaborator layer (immutable, stateless)
    ├── features.py            # Point, LineString, Polygon
    ├── units.py               # Unit, length conversions
    ├── measure.py             # distance, along, bearing, destination
    └── validation.py          # ring / path preconditions

    meridian_centroid/
    ├── operations.py          # polygon_centroid, line_centroid, centroid
    ├── errors.py              # exception taxonomy
    ├── config.py              # CentroidConfig (YAML)
    ├── service.py             # CentroidService (config + logging)
    └── logging/               # Structured JSON logging

Usage:

    # 1. Build features (immutable)
    from meridian_geometry import Polygon, LineString

    square = Polygon.from_ring([(0, 0), (0, 2), (2, 2), (2, 0), (0, 0)])
    path = LineString([(0, 0), (0, 1), (1, 1), (1, 2)])

    # 2. Compute (pure)
    from meridian_centroid import centroid

    centroid(square)   # Point(x=1.0, y=1.0)
    centroid(path)     # ~Point(x=0.5, y=1.000038), half the path length

    # 3. Or use the service (config + structured logging)
    from meridian_centroid import CentroidService, CentroidConfig

    service = CentroidService(CentroidConfig(strict=True, log_level="DEBUG"))
    service.centroid(square)
"""

from meridian_centroid.operations import (
    SupportsCentroid,
    centroid,
    line_centroid,
    polygon_centroid,
    ring_centroid,
)
from meridian_centroid.errors import (
    GeometryError,
    InvalidGeometryError,
    DegenerateGeometryError,
    UnsupportedFeatureError,
)
from meridian_centroid.config import CentroidConfig
from meridian_centroid.service import CentroidService

__all__ = [
    # Operations
    "SupportsCentroid",
    "centroid",
    "line_centroid",
    "polygon_centroid",
    "ring_centroid",
    # Errors
    "GeometryError",
    "InvalidGeometryError",
    "DegenerateGeometryError",
    "UnsupportedFeatureError",
    # Service
    "CentroidConfig",
    "CentroidService",
]

__version__ = "1.0.0"
