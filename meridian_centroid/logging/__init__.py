"""
Structured Logging for Meridian
===============================

Bounded Context: Observability

JSON-structured logging with typed events and contextual metadata.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from meridian_centroid.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="centroid")
    >>> logger.debug(
    ...     event=LogEvent.CENTROID_POLYGON_COMPUTED,
    ...     message="Computed polygon centroid",
    ...     metadata={'vertices': 5, 'centroid': [1.0, 1.0]}
    ... )

Output:
    {
        "timestamp": "2026-10-18T15:30:45.123456+00:00",
        "level": "DEBUG",
        "component": "centroid",
        "event": "centroid.polygon.computed",
        "message": "Computed polygon centroid",
        "metadata": {"vertices": 5, "centroid": [1.0, 1.0]}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
