"""
Coordinate Extraction
=====================

Bounded Context: Geometry Traversal

Flattens any GeoJSON value to its leaf positions.

Design:
- One generator walks every geometry kind, recursing through collections
- exclude_wrap_coord drops the closing vertex of Polygon/MultiPolygon rings
- Features without geometry contribute nothing
"""

from typing import Iterator, List, Union

from meridian_geojson import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)

from .errors import TurfError

GeoJson = Union[Geometry, Feature, FeatureCollection]


def _ring_positions(ring, exclude_wrap_coord: bool) -> Iterator[Position]:
    stop = len(ring) - 1 if exclude_wrap_coord else len(ring)
    for i in range(stop):
        yield ring[i]


def iter_positions(value: GeoJson, exclude_wrap_coord: bool = False) -> Iterator[Position]:
    """
    Yield every Position in ``value`` in document order.

    Raises:
        TurfError: If ``value`` is not a GeoJSON value
    """
    if isinstance(value, FeatureCollection):
        for feature in value.features:
            yield from iter_positions(feature, exclude_wrap_coord)
    elif isinstance(value, Feature):
        if value.geometry is not None:
            yield from iter_positions(value.geometry, exclude_wrap_coord)
    elif isinstance(value, Point):
        yield value.coordinates
    elif isinstance(value, (MultiPoint, LineString)):
        yield from value.coordinates
    elif isinstance(value, MultiLineString):
        for line in value.coordinates:
            yield from line
    elif isinstance(value, Polygon):
        for ring in value.coordinates:
            yield from _ring_positions(ring, exclude_wrap_coord)
    elif isinstance(value, MultiPolygon):
        for polygon in value.coordinates:
            for ring in polygon:
                yield from _ring_positions(ring, exclude_wrap_coord)
    elif isinstance(value, GeometryCollection):
        for geometry in value.geometries:
            yield from iter_positions(geometry, exclude_wrap_coord)
    else:
        raise TurfError(f"Unsupported GeoJSON value: {type(value).__name__}")


def coord_all(value: GeoJson, exclude_wrap_coord: bool = False) -> List[Point]:
    """
    Every coordinate of ``value`` as a Point.

    Args:
        value: Any geometry, Feature or FeatureCollection
        exclude_wrap_coord: Drop the duplicate closing vertex of each ring

    Example:
        >>> square = Polygon.from_lng_lats([[(0, 0), (1, 1), (0, 1), (0, 0)]])
        >>> len(coord_all(square)), len(coord_all(square, True))
        (4, 3)
    """
    return [Point(p) for p in iter_positions(value, exclude_wrap_coord)]


def get_coord(feature: Feature) -> Point:
    """
    Unwrap a Feature whose geometry is a Point.

    Raises:
        TurfError: If the feature's geometry is not a Point
    """
    if isinstance(feature, Feature) and isinstance(feature.geometry, Point):
        return feature.geometry
    raise TurfError("A Feature with a Point geometry is required.")
