"""
Unit Conversion
===============

Bounded Context: Geodesic Measurement

Degree/radian conversion and Earth-radius-derived length factors used by
every distance-based algorithm.

Design:
- Factor table keyed by unit name, value is the Earth radius in that unit
- Unknown unit names raise UnitNotSupportedError, never a silent default
- Angle reduction keeps the sign of its input (fmod, not Python's %)
"""

import math
from types import MappingProxyType

from .errors import UnitNotSupportedError

UNIT_MILES = "miles"
UNIT_NAUTICAL_MILES = "nauticalmiles"
UNIT_KILOMETERS = "kilometers"
UNIT_RADIANS = "radians"
UNIT_DEGREES = "degrees"
UNIT_INCHES = "inches"
UNIT_YARDS = "yards"
UNIT_METERS = "meters"
UNIT_CENTIMETERS = "centimeters"
UNIT_FEET = "feet"

UNIT_METRES = "metres"
UNIT_KILOMETRES = "kilometres"
UNIT_CENTIMETRES = "centimetres"

UNIT_DEFAULT = UNIT_KILOMETERS

FACTORS = MappingProxyType({
    UNIT_MILES: 3960.0,
    UNIT_NAUTICAL_MILES: 3441.145,
    UNIT_DEGREES: 57.2957795,
    UNIT_RADIANS: 1.0,
    UNIT_INCHES: 250905600.0,
    UNIT_YARDS: 6969600.0,
    UNIT_METERS: 6373000.0,
    UNIT_METRES: 6373000.0,
    UNIT_CENTIMETERS: 6.373e8,
    UNIT_CENTIMETRES: 6.373e8,
    UNIT_KILOMETERS: 6373.0,
    UNIT_KILOMETRES: 6373.0,
    UNIT_FEET: 20908792.65,
})


def factor(unit: str) -> float:
    """
    Earth radius expressed in ``unit``.

    Raises:
        UnitNotSupportedError: If the unit is not in FACTORS
    """
    try:
        return FACTORS[unit]
    except (KeyError, TypeError):
        raise UnitNotSupportedError(unit, FACTORS.keys()) from None


def is_supported_unit(unit: str) -> bool:
    return unit in FACTORS


def degrees_to_radians(degrees: float) -> float:
    return math.fmod(degrees, 360.0) * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return math.fmod(radians, 2 * math.pi) * 180.0 / math.pi


def length_to_radians(distance: float, unit: str = UNIT_DEFAULT) -> float:
    return distance / factor(unit)


def radians_to_length(radians: float, unit: str = UNIT_DEFAULT) -> float:
    return radians * factor(unit)


def length_to_degrees(distance: float, unit: str = UNIT_DEFAULT) -> float:
    """Convert a distance to degrees of arc along a great circle."""
    return radians_to_degrees(length_to_radians(distance, unit))


def convert_length(distance: float, from_unit: str = UNIT_DEFAULT, to_unit: str = UNIT_DEFAULT) -> float:
    """
    Convert a distance between two length units.

    Example:
        >>> convert_length(1.0, UNIT_MILES, UNIT_KILOMETERS)
        1.6093434343434343
    """
    return radians_to_length(length_to_radians(distance, from_unit), to_unit)
