"""
Linear Distance Units
=====================

Typed distance units and conversions between arc length on the sphere
(radians) and linear lengths.

Design:
- Enum-based (prevents typos, enables autocomplete)
- One factor per unit: units per radian of arc on a sphere of mean Earth radius
- Aliases resolved in a single place (Unit.parse)
"""

import math
from enum import Enum
from typing import Dict, Union

EARTH_RADIUS_M = 6371008.8
"""Mean Earth radius in meters."""


class Unit(str, Enum):
    """Linear units accepted by the measurement functions."""

    METERS = "meters"
    KILOMETERS = "kilometers"
    CENTIMETERS = "centimeters"
    MILLIMETERS = "millimeters"
    MILES = "miles"
    NAUTICAL_MILES = "nauticalmiles"
    FEET = "feet"
    INCHES = "inches"
    YARDS = "yards"

    RADIANS = "radians"
    """Arc length on the unit sphere."""

    DEGREES = "degrees"
    """Arc length in degrees of a great circle."""

    @classmethod
    def parse(cls, value: Union["Unit", str]) -> "Unit":
        """
        Resolve a unit from an enum member, its value, or a common alias.

        Example:
            >>> Unit.parse("m")
            <Unit.METERS: 'meters'>

        Raises:
            ValueError: If the unit is unknown
        """
        if isinstance(value, Unit):
            return value
        key = str(value).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown unit: {value!r}. Must be one of {[u.value for u in cls]}"
            ) from None

    @property
    def factor(self) -> float:
        """Units per radian of arc."""
        return _FACTORS[self]


_ALIASES: Dict[str, str] = {
    "m": "meters",
    "metres": "meters",
    "km": "kilometers",
    "kilometres": "kilometers",
    "cm": "centimeters",
    "centimetres": "centimeters",
    "mm": "millimeters",
    "millimetres": "millimeters",
    "mi": "miles",
    "nmi": "nauticalmiles",
    "ft": "feet",
    "in": "inches",
    "yd": "yards",
    "rad": "radians",
    "deg": "degrees",
}

_FACTORS: Dict[Unit, float] = {
    Unit.METERS: EARTH_RADIUS_M,
    Unit.KILOMETERS: EARTH_RADIUS_M / 1000.0,
    Unit.CENTIMETERS: EARTH_RADIUS_M * 100.0,
    Unit.MILLIMETERS: EARTH_RADIUS_M * 1000.0,
    Unit.MILES: EARTH_RADIUS_M / 1609.344,
    Unit.NAUTICAL_MILES: EARTH_RADIUS_M / 1852.0,
    Unit.FEET: EARTH_RADIUS_M * 3.28084,
    Unit.INCHES: EARTH_RADIUS_M * 39.37,
    Unit.YARDS: EARTH_RADIUS_M * 1.0936,
    Unit.RADIANS: 1.0,
    Unit.DEGREES: 180.0 / math.pi,
}


def radians_to_length(radians: float, unit: Union[Unit, str] = Unit.METERS) -> float:
    """Convert an arc in radians to a length in the given unit."""
    return radians * Unit.parse(unit).factor


def length_to_radians(length: float, unit: Union[Unit, str] = Unit.METERS) -> float:
    """Convert a length in the given unit to an arc in radians."""
    return length / Unit.parse(unit).factor
