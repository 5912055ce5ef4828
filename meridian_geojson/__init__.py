"""
Meridian GeoJSON - Immutable Geometry Value Model
=================================================

Bounded Context: GeoJSON Data Model (RFC 7946)

Immutable value types for positions, the seven geometry kinds, bounding
boxes, features and feature collections, plus the dict/JSON codec and
encoded-polyline utilities.

Design:
- Frozen dataclasses validated at construction (fail fast)
- No shared mutable state, values are safe to share across threads
- Serialization trims coordinates to 7 decimal digits

Public API
----------
    Position, as_position: Coordinate leaf
    Point, MultiPoint, LineString, MultiLineString: Geometries
    Polygon, MultiPolygon, GeometryCollection: Geometries
    BoundingBox: Two-corner box
    Feature, FeatureCollection: Property-carrying wrappers
    geojson_from_dict, from_json, to_json: Codec
    GeoJsonError: Construction and decode failures

Example:
    >>> from meridian_geojson import Polygon, to_json
    >>> square = Polygon.from_lng_lats([[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]])
    >>> to_json(square)
    '{"type": "Polygon", "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]]}'
"""

from .errors import GeoJsonError
from .position import Position, as_position
from .bbox import BoundingBox
from .geometry import (
    Geometry,
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    geometry_from_dict,
)
from .feature import Feature, FeatureCollection
from .codec import GeoJson, geojson_from_dict, from_json, to_dict, to_json
from .utils import trim

__version__ = "0.1.0"

__all__ = [
    # Errors
    'GeoJsonError',
    # Coordinates
    'Position',
    'as_position',
    'BoundingBox',
    'trim',
    # Geometries
    'Geometry',
    'Point',
    'MultiPoint',
    'LineString',
    'MultiLineString',
    'Polygon',
    'MultiPolygon',
    'GeometryCollection',
    'geometry_from_dict',
    # Features
    'Feature',
    'FeatureCollection',
    # Codec
    'GeoJson',
    'geojson_from_dict',
    'from_json',
    'to_dict',
    'to_json',
]
