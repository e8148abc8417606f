"""Pytest fixtures for meridian tests."""

import logging

import pytest

from meridian_geometry import LineString, Polygon
from meridian_centroid import CentroidConfig, CentroidService
from meridian_centroid.logging import StructuredLogger


# ============================================================================
# Feature Fixtures
# ============================================================================

@pytest.fixture
def square_ring():
    """2x2 square, clockwise."""
    return [(0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0), (0.0, 0.0)]


@pytest.fixture
def square(square_ring):
    return Polygon.from_ring(square_ring)


@pytest.fixture
def zigzag_line():
    """Path whose length-bisection point is not the coordinate average."""
    return LineString([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 2.0)])


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def debug_service():
    """Strict service logging every event."""
    config = CentroidConfig(strict=True, log_level="DEBUG", component="test")
    return CentroidService(config, logger=StructuredLogger("test", level=logging.DEBUG))


@pytest.fixture
def legacy_service():
    """Non-validating service."""
    return CentroidService(CentroidConfig(strict=False, component="legacy"))
