"""
Geodesic Measurement
====================

Bounded Context: Geodesic Measurement

Bearing, destination, haversine distance, path length, interpolation along
a path, bounding boxes and spherical polygon area.

Design:
- Pure functions over immutable values (no state, no side effects)
- Points, Positions and [lon, lat] pairs are accepted wherever a point is
- Results are new value objects (Point, Polygon, Feature) or plain floats
- numpy for the vectorized reductions (bbox extents, ring area)
"""

import math
from typing import List, Optional, Sequence, Union

import numpy as np

from meridian_geojson import (
    BoundingBox,
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
    Position,
    as_position,
)
from meridian_geojson.position import PositionLike

from .errors import TurfError
from .meta import GeoJson, iter_positions
from .units import (
    UNIT_DEFAULT,
    UNIT_MILES,
    degrees_to_radians,
    length_to_radians,
    radians_to_degrees,
    radians_to_length,
)

# WGS84 equatorial radius, used by the ring area formula
EARTH_RADIUS = 6378137.0

BBox = List[float]


def bearing(point1: PositionLike, point2: PositionLike) -> float:
    """
    Forward azimuth from ``point1`` to ``point2``.

    Returns:
        Degrees in [-180, 180], clockwise from north
    """
    p1 = as_position(point1)
    p2 = as_position(point2)
    lon1 = degrees_to_radians(p1.longitude)
    lon2 = degrees_to_radians(p2.longitude)
    lat1 = degrees_to_radians(p1.latitude)
    lat2 = degrees_to_radians(p2.latitude)

    a = math.sin(lon2 - lon1) * math.cos(lat2)
    b = (math.cos(lat1) * math.sin(lat2)
         - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1))
    return radians_to_degrees(math.atan2(a, b))


def destination(
    point: PositionLike,
    dist: float,
    bearing_degrees: float,
    units: str = UNIT_DEFAULT,
) -> Point:
    """
    Point reached by travelling ``dist`` from ``point`` along a bearing.

    Args:
        point: Origin
        dist: Distance in ``units``
        bearing_degrees: Bearing in degrees, -180 to 180
        units: Length unit of ``dist``
    """
    origin = as_position(point)
    longitude1 = degrees_to_radians(origin.longitude)
    latitude1 = degrees_to_radians(origin.latitude)
    bearing_rad = degrees_to_radians(bearing_degrees)
    radians = length_to_radians(dist, units)

    latitude2 = math.asin(
        math.sin(latitude1) * math.cos(radians)
        + math.cos(latitude1) * math.sin(radians) * math.cos(bearing_rad)
    )
    longitude2 = longitude1 + math.atan2(
        math.sin(bearing_rad) * math.sin(radians) * math.cos(latitude1),
        math.cos(radians) - math.sin(latitude1) * math.sin(latitude2),
    )
    return Point.from_lng_lat(radians_to_degrees(longitude2), radians_to_degrees(latitude2))


def distance(point1: PositionLike, point2: PositionLike, units: str = UNIT_DEFAULT) -> float:
    """
    Great-circle distance between two points (haversine formula).

    Example:
        >>> round(distance((-75.343, 39.984), (-75.534, 39.123), UNIT_MILES), 6)
        60.372184
    """
    p1 = as_position(point1)
    p2 = as_position(point2)
    d_lat = degrees_to_radians(p2.latitude - p1.latitude)
    d_lon = degrees_to_radians(p2.longitude - p1.longitude)
    lat1 = degrees_to_radians(p1.latitude)
    lat2 = degrees_to_radians(p2.latitude)

    a = (math.sin(d_lat / 2) ** 2
         + math.sin(d_lon / 2) ** 2 * math.cos(lat1) * math.cos(lat2))
    return radians_to_length(2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)), units)


def _path_length(coords: Sequence[PositionLike], units: str) -> float:
    if len(coords) == 0:
        raise TurfError("length requires at least one coordinate")
    travelled = 0.0
    previous = as_position(coords[0])
    for value in coords[1:]:
        current = as_position(value)
        travelled += distance(previous, current, units)
        previous = current
    return travelled


def length(
    value: Union[LineString, MultiLineString, Polygon, MultiPolygon, Sequence[PositionLike]],
    units: str = UNIT_DEFAULT,
) -> float:
    """
    Total length of a path or of every part of a multi-part geometry.

    Polygon lengths include the holes. A single-position sequence has
    length 0.

    Raises:
        TurfError: For an empty sequence or an unsupported geometry kind
    """
    if isinstance(value, LineString):
        return _path_length(value.coordinates, units)
    if isinstance(value, (MultiLineString, Polygon)):
        return sum(_path_length(part, units) for part in value.coordinates)
    if isinstance(value, MultiPolygon):
        return sum(
            _path_length(ring, units)
            for polygon in value.coordinates
            for ring in polygon
        )
    if isinstance(value, Geometry):
        raise TurfError(f"length is not defined for {value.type}")
    return _path_length(value, units)


def midpoint(point1: PositionLike, point2: PositionLike) -> Point:
    """
    Geodesic midpoint between two points.

    Computed by travelling half the great-circle distance along the
    initial bearing, not by averaging coordinates.
    """
    dist = distance(point1, point2, UNIT_MILES)
    heading = bearing(point1, point2)
    return destination(point1, dist / 2, heading, UNIT_MILES)


def _line_positions(line: Union[LineString, Sequence[PositionLike]]) -> List[Position]:
    if isinstance(line, LineString):
        return list(line.coordinates)
    if isinstance(line, Geometry):
        raise TurfError(f"Expected a LineString or coordinate sequence, given {line.type}")
    return [as_position(c) for c in line]


def along(
    line: Union[LineString, Sequence[PositionLike]],
    dist: float,
    units: str = UNIT_DEFAULT,
) -> Point:
    """
    Point at ``dist`` along a path.

    Distances beyond the end of the path return the last vertex.

    Raises:
        TurfError: If the path has no coordinates
    """
    coords = _line_positions(line)
    if not coords:
        raise TurfError("along requires at least one coordinate")
    if dist < 0:
        raise TurfError(f"along distance must not be negative, got {dist}")

    travelled = 0.0
    last = len(coords) - 1
    for i in range(len(coords)):
        if dist >= travelled and i == last:
            break
        elif travelled >= dist:
            overshot = dist - travelled
            if overshot == 0:
                return Point(coords[i])
            direction = bearing(coords[i], coords[i - 1]) - 180
            return destination(coords[i], overshot, direction, units)
        else:
            travelled += distance(coords[i], coords[i + 1], units)
    return Point(coords[last])


def _bbox_of_positions(positions: Sequence[Position]) -> BBox:
    if not positions:
        return [math.inf, math.inf, -math.inf, -math.inf]
    lonlat = np.array([(p.longitude, p.latitude) for p in positions], dtype=float)
    mins = np.nanmin(lonlat, axis=0)
    maxs = np.nanmax(lonlat, axis=0)
    return [float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])]


def _compute_bbox(value: GeoJson) -> BBox:
    if isinstance(value, GeometryCollection):
        corners: List[Position] = []
        for geometry in value.geometries:
            west, south, east, north = _compute_bbox(geometry)
            if math.isinf(west):
                # member has no coordinates
                continue
            corners.append(Position(west, south))
            corners.append(Position(east, south))
            corners.append(Position(east, north))
            corners.append(Position(west, north))
        return _bbox_of_positions(corners)
    return _bbox_of_positions(list(iter_positions(value, False)))


def bbox(value: GeoJson) -> BBox:
    """
    Bounding box [west, south, east, north] of any GeoJSON value.

    A bbox already attached to ``value`` takes precedence over the
    coordinates. Values without coordinates yield [inf, inf, -inf, -inf].

    Example:
        >>> bbox(Point.from_lng_lat(102.0, 0.5))
        [102.0, 0.5, 102.0, 0.5]
    """
    preset = getattr(value, 'bbox', None)
    if isinstance(preset, BoundingBox):
        return [preset.west, preset.south, preset.east, preset.north]
    return _compute_bbox(value)


def _as_bounding_box(box: Union[BoundingBox, Sequence[float]]) -> BoundingBox:
    if isinstance(box, BoundingBox):
        return box
    if len(box) != 4:
        raise TurfError(f"A bbox must have 4 elements, got {len(box)}")
    return BoundingBox.from_lng_lats(*box)


def bbox_polygon(
    box: Union[BoundingBox, Sequence[float]],
    properties: Optional[dict] = None,
    id: Optional[str] = None,
) -> Feature:
    """
    Polygon Feature covering a bounding box.

    The ring runs SW, SE, NE, NW and back to SW.
    """
    box = _as_bounding_box(box)
    west, south, east, north = box.west, box.south, box.east, box.north
    ring = (
        Position(west, south),
        Position(east, south),
        Position(east, north),
        Position(west, north),
        Position(west, south),
    )
    return Feature(Polygon((ring,)), properties or {}, id)


def envelope(value: GeoJson) -> Polygon:
    """Rectangular Polygon enclosing every coordinate of ``value``."""
    return bbox_polygon(bbox(value)).geometry


def square(box: BoundingBox) -> BoundingBox:
    """
    Smallest square box containing ``box``.

    The shorter side (by haversine distance) is widened about its midpoint
    to match the longer side, measured in degrees.
    """
    box = _as_bounding_box(box)
    west, south, east, north = box.west, box.south, box.east, box.north

    horizontal_distance = distance(Position(west, south), Position(east, south))
    vertical_distance = distance(Position(west, south), Position(west, north))
    if horizontal_distance >= vertical_distance:
        vertical_midpoint = (south + north) / 2
        half = (east - west) / 2
        return BoundingBox.from_lng_lats(west, vertical_midpoint - half, east, vertical_midpoint + half)

    horizontal_midpoint = (west + east) / 2
    half = (north - south) / 2
    return BoundingBox.from_lng_lats(horizontal_midpoint - half, south, horizontal_midpoint + half, north)


def ring_area(ring: Sequence[PositionLike]) -> float:
    """
    Signed area of a ring in square meters.

    Spherical-excess approximation from "Some Algorithms for Polygons on a
    Sphere" (Chamberlain and Duquette, JPL). Clockwise rings are positive.
    Rings of fewer than 3 positions have no area.
    """
    if len(ring) <= 2:
        return 0.0
    positions = [as_position(p) for p in ring]
    lon = np.radians([p.longitude for p in positions])
    lat = np.radians([p.latitude for p in positions])

    # triples (i, i+1, i+2) wrapping around the ring
    lower = lon
    middle = np.roll(lat, -1)
    upper = np.roll(lon, -2)
    total = float(np.sum((upper - lower) * np.sin(middle)))
    return total * EARTH_RADIUS * EARTH_RADIUS / 2


def _polygon_area(rings) -> float:
    if not rings:
        return 0.0
    total = abs(ring_area(rings[0]))
    for hole in rings[1:]:
        total -= abs(ring_area(hole))
    return total


def area(value: GeoJson) -> float:
    """
    Geodesic area in square meters.

    Polygons subtract their holes; MultiPolygons sum their polygons;
    every other geometry kind has area 0.
    """
    if isinstance(value, FeatureCollection):
        return sum(area(feature) for feature in value.features)
    if isinstance(value, Feature):
        return area(value.geometry) if value.geometry is not None else 0.0
    if isinstance(value, Polygon):
        return _polygon_area(value.coordinates)
    if isinstance(value, MultiPolygon):
        return sum(_polygon_area(polygon) for polygon in value.coordinates)
    if isinstance(value, Geometry):
        return 0.0
    raise TurfError(f"Unsupported GeoJSON value: {type(value).__name__}")


def center(
    value: Union[Feature, FeatureCollection],
    properties: Optional[dict] = None,
    id: Optional[str] = None,
) -> Feature:
    """
    Point Feature at the middle of the bounding box.

    This is the arithmetic mean of the extents, not a weighted centroid.
    """
    if isinstance(value, Feature):
        value = FeatureCollection.from_feature(value)
    elif not isinstance(value, FeatureCollection):
        raise TurfError(f"center requires a Feature or FeatureCollection, given {type(value).__name__}")

    west, south, east, north = _compute_bbox(value)
    return Feature(
        Point.from_lng_lat((west + east) / 2, (south + north) / 2),
        properties or {},
        id,
    )
