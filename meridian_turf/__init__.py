"""
Meridian Turf - Geodesic Algorithms
===================================

Bounded Context: Geospatial Analysis

Spherical measurement, line slicing, point-in-polygon joins, coordinate
extraction and geometry conversion over the meridian_geojson value model.

Design:
- Pure functions, no shared mutable state
- Fail fast: precondition violations raise TurfError immediately
- Distances default to kilometers; every function takes a units argument

Public API
----------
    Units: degrees_to_radians, radians_to_degrees, length_to_radians,
        radians_to_length, length_to_degrees, convert_length, UNIT_*
    Measurement: bearing, destination, distance, length, midpoint, along,
        bbox, bbox_polygon, envelope, square, area, ring_area, center
    Lines: nearest_point_on_line, line_intersects, line_slice,
        line_slice_along
    Joins: in_ring, inside, points_within_polygon
    Meta: coord_all, get_coord
    Conversion: explode, polygon_to_line, multi_polygon_to_line, combine
    Transformation: circle
    Classification: nearest_point
    Assertions: geojson_type, feature_of, collection_of

Example:
    >>> from meridian_turf import distance, UNIT_MILES
    >>> round(distance((-75.343, 39.984), (-75.534, 39.123), UNIT_MILES), 3)
    60.372
"""

from .errors import TurfError, UnitNotSupportedError
from .units import (
    FACTORS,
    UNIT_CENTIMETERS,
    UNIT_CENTIMETRES,
    UNIT_DEFAULT,
    UNIT_DEGREES,
    UNIT_FEET,
    UNIT_INCHES,
    UNIT_KILOMETERS,
    UNIT_KILOMETRES,
    UNIT_METERS,
    UNIT_METRES,
    UNIT_MILES,
    UNIT_NAUTICAL_MILES,
    UNIT_RADIANS,
    UNIT_YARDS,
    convert_length,
    degrees_to_radians,
    length_to_degrees,
    length_to_radians,
    radians_to_degrees,
    radians_to_length,
)
from .meta import coord_all, get_coord
from .measurement import (
    EARTH_RADIUS,
    along,
    area,
    bbox,
    bbox_polygon,
    bearing,
    center,
    destination,
    distance,
    envelope,
    length,
    midpoint,
    ring_area,
    square,
)
from .results import LineIntersectsResult, NearestPointResult
from .lines import line_intersects, line_slice, line_slice_along, nearest_point_on_line
from .joins import in_ring, inside, points_within_polygon
from .conversion import combine, explode, multi_polygon_to_line, polygon_to_line
from .transformation import circle
from .classification import nearest_point
from .assertions import collection_of, feature_of, geojson_type
from .config import TurfConfig

__version__ = "0.1.0"

__all__ = [
    # Errors
    'TurfError',
    'UnitNotSupportedError',
    # Units
    'FACTORS',
    'UNIT_CENTIMETERS',
    'UNIT_CENTIMETRES',
    'UNIT_DEFAULT',
    'UNIT_DEGREES',
    'UNIT_FEET',
    'UNIT_INCHES',
    'UNIT_KILOMETERS',
    'UNIT_KILOMETRES',
    'UNIT_METERS',
    'UNIT_METRES',
    'UNIT_MILES',
    'UNIT_NAUTICAL_MILES',
    'UNIT_RADIANS',
    'UNIT_YARDS',
    'convert_length',
    'degrees_to_radians',
    'length_to_degrees',
    'length_to_radians',
    'radians_to_degrees',
    'radians_to_length',
    # Measurement
    'EARTH_RADIUS',
    'along',
    'area',
    'bbox',
    'bbox_polygon',
    'bearing',
    'center',
    'destination',
    'distance',
    'envelope',
    'length',
    'midpoint',
    'ring_area',
    'square',
    # Lines
    'LineIntersectsResult',
    'NearestPointResult',
    'line_intersects',
    'line_slice',
    'line_slice_along',
    'nearest_point_on_line',
    # Joins
    'in_ring',
    'inside',
    'points_within_polygon',
    # Meta
    'coord_all',
    'get_coord',
    # Conversion / transformation
    'combine',
    'explode',
    'multi_polygon_to_line',
    'polygon_to_line',
    'circle',
    # Classification
    'nearest_point',
    # Assertions
    'collection_of',
    'feature_of',
    'geojson_type',
    # Config
    'TurfConfig',
]
