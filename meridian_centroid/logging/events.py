"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)

Event Naming Convention:
    <component>.<category>.<action>

    component: centroid, config, error
    category: polygon, line, point
    action: computed, loaded
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - centroid.*: Successful centroid computations
    - config.*: Configuration lifecycle
    - error.*: Error conditions
    """

    # ========== Centroid Events ==========
    CENTROID_POLYGON_COMPUTED = "centroid.polygon.computed"
    """Area-weighted centroid of a polygon's exterior ring computed."""

    CENTROID_LINE_COMPUTED = "centroid.line.computed"
    """Length-bisection point of a line computed."""

    CENTROID_POINT_COMPUTED = "centroid.point.computed"
    """Centroid requested for a Point (returned unchanged)."""

    CENTROID_NON_FINITE = "centroid.non_finite"
    """Legacy mode returned a NaN or infinite centroid (zero-area ring)."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration loaded and validated."""

    # ========== Error Events ==========
    INVALID_GEOMETRY_ERROR = "error.invalid_geometry"
    """Input geometry violated a precondition."""

    DEGENERATE_GEOMETRY_ERROR = "error.degenerate_geometry"
    """Input geometry has no defined centroid (zero area)."""

    UNSUPPORTED_FEATURE_ERROR = "error.unsupported_feature"
    """Centroid requested for an object that is not a feature."""

