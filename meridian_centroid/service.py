"""
Centroid Service
================

Config- and logger-bound façade over the pure centroid functions.

Design:
- Holds only immutable configuration and a logger (no per-call state)
- Logs each computation at DEBUG, non-finite legacy results at WARNING
  and each failure at ERROR
- Failures are re-raised unchanged after logging
"""

from pathlib import Path
from typing import Optional, Union

from meridian_geometry.features import LineString, Point, Polygon
from meridian_centroid.operations import centroid, line_centroid, polygon_centroid
from meridian_centroid.config import CentroidConfig
from meridian_centroid.errors import (
    DegenerateGeometryError,
    GeometryError,
    UnsupportedFeatureError,
)
from meridian_centroid.logging import LogEvent, StructuredLogger, create_logger


_ERROR_EVENTS = (
    (UnsupportedFeatureError, LogEvent.UNSUPPORTED_FEATURE_ERROR),
    (DegenerateGeometryError, LogEvent.DEGENERATE_GEOMETRY_ERROR),
    (GeometryError, LogEvent.INVALID_GEOMETRY_ERROR),
)

_COMPUTED_EVENTS = {
    Polygon: LogEvent.CENTROID_POLYGON_COMPUTED,
    LineString: LogEvent.CENTROID_LINE_COMPUTED,
    Point: LogEvent.CENTROID_POINT_COMPUTED,
}


class CentroidService:
    """
    Computes centroids under a fixed configuration.

    Attributes:
        config: Validation and logging settings
        logger: Structured logger for observability

    Example:
        >>> service = CentroidService(CentroidConfig(strict=True))
        >>> service.polygon(Polygon.from_ring([(0, 0), (0, 2), (2, 0), (0, 0)]))
        Point(x=0.6666666666666666, y=0.6666666666666666)

    Thread Safety:
        Safe to share between threads; calls do not mutate the service.
    """

    def __init__(
        self,
        config: Optional[CentroidConfig] = None,
        logger: Optional[StructuredLogger] = None
    ):
        self.config = config or CentroidConfig()
        self.logger = logger or create_logger(self.config.component, level=self.config.level)

    @classmethod
    def from_yaml(cls, yaml_path: Union[Path, str]) -> "CentroidService":
        """Build a service from a YAML config file."""
        config = CentroidConfig.from_yaml(yaml_path)
        service = cls(config)
        service.logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded centroid config",
            metadata={'path': str(yaml_path), 'strict': config.strict}
        )
        return service

    def polygon(self, polygon: Polygon) -> Point:
        """Centroid of a polygon's exterior ring."""
        return self._run(polygon_centroid, polygon)

    def line(self, line: LineString) -> Point:
        """Length-bisection point of a line."""
        return self._run(line_centroid, line)

    def centroid(self, feature) -> Point:
        """Centroid of any supported feature."""
        return self._run(centroid, feature)

    def _run(self, operation, feature) -> Point:
        kind = type(feature).__name__
        try:
            result = operation(feature, strict=self.config.strict)
        except GeometryError as e:
            event = next(ev for exc_type, ev in _ERROR_EVENTS if isinstance(e, exc_type))
            self.logger.error(
                event=event,
                message=f"Centroid failed for {kind}",
                metadata={'feature': kind, 'strict': self.config.strict},
                exc_info=e
            )
            raise

        metadata = {
            'feature': kind,
            'vertices': _vertex_count(feature),
            'centroid': [result.x, result.y],
        }

        if not result.is_finite():
            self.logger.warning(
                event=LogEvent.CENTROID_NON_FINITE,
                message=f"{kind} centroid is not finite",
                metadata=metadata
            )
            return result

        event = _COMPUTED_EVENTS.get(type(feature))
        if event is not None:
            self.logger.debug(
                event=event,
                message=f"Computed {kind} centroid",
                metadata=metadata
            )
        return result


def _vertex_count(feature) -> int:
    if isinstance(feature, Polygon):
        return len(feature.exterior)
    if isinstance(feature, LineString):
        return len(feature)
    return 1
