"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- One JSON document per record (compatible with log aggregators)
- Thread-safe (uses standard logging module)
- Type-safe events (LogEvent enum)
- Strict JSON: NaN and infinity are never emitted as bare tokens
"""

import json
import logging
import math
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


def json_safe(value: Any) -> Any:
    """Replace non-finite floats (NaN, +/-inf) with None, recursively."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


class StructuredLogger:
    """
    JSON structured logger bound to one component.

    Records go to the standard logger "meridian.<component>" unless a
    logger_name is given. A JSON stream handler is attached the first time
    that logger is used.

    Attributes:
        component: Component name (e.g., "centroid")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger_name = logger_name or f"meridian.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = json_safe(metadata)
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        self.logger.log(level, json.dumps(entry, default=str, allow_nan=False))

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded centroid config",
            ...     metadata={'path': 'centroid.yaml'}
            ... )
        """
        self._emit(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log a failure; exc_info is summarized as {'type', 'message'}.

        Example:
            >>> try:
            ...     polygon_centroid(polygon)
            ... except DegenerateGeometryError as e:
            ...     logger.error(
            ...         event=LogEvent.DEGENERATE_GEOMETRY_ERROR,
            ...         message="Polygon has zero area",
            ...         exc_info=e,
            ...     )
        """
        self._emit(logging.ERROR, event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter: the record message is already a JSON document."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("centroid", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
