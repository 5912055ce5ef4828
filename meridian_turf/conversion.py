"""
Geometry Conversion
===================

Bounded Context: Geometry Conversion

Reshapes geometries without measuring them: exploding to points,
polygon rings to lines, and merging a collection into multi-geometries.

Design:
- Pure coordinate-shape conversions, holes become ordinary line parts
- New Features/FeatureCollections are returned, inputs are untouched
"""

from typing import Any, List, Mapping, Optional, Sequence, Union

from meridian_geojson import (
    Feature,
    FeatureCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)
from meridian_geojson.logging import LogEvent, create_logger

from .errors import TurfError
from .meta import coord_all

Properties = Optional[Mapping[str, Any]]

logger = create_logger("conversion")


def explode(value: Union[Feature, FeatureCollection]) -> FeatureCollection:
    """
    One Point Feature per vertex, closing ring vertices excluded.

    Example:
        >>> square = Polygon.from_lng_lats([[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]])
        >>> len(explode(Feature(square)))
        4
    """
    if not isinstance(value, (Feature, FeatureCollection)):
        raise TurfError(f"explode requires a Feature or FeatureCollection, given {type(value).__name__}")
    return FeatureCollection(tuple(Feature(point) for point in coord_all(value, True)))


def _coords_to_line(rings: Sequence[Sequence[Position]], properties: Properties) -> Feature:
    if len(rings) > 1:
        return Feature(MultiLineString(tuple(rings)), properties or {})
    return Feature(LineString(rings[0]), properties or {})


def polygon_to_line(
    value: Union[Feature, Polygon, MultiPolygon],
    properties: Properties = None,
) -> Union[Feature, FeatureCollection]:
    """
    Convert polygon rings to line geometry.

    A single-ring Polygon becomes a LineString Feature; a Polygon with holes
    becomes a MultiLineString Feature (outer ring first). A MultiPolygon
    yields a FeatureCollection with one such Feature per polygon. A Feature
    passes its own properties on unless ``properties`` is given.

    Raises:
        TurfError: If a Feature does not wrap a Polygon
    """
    if isinstance(value, Feature):
        if not isinstance(value.geometry, Polygon):
            raise TurfError("Feature's geometry must be Polygon")
        return _coords_to_line(
            value.geometry.coordinates,
            properties if properties is not None else value.properties,
        )
    if isinstance(value, Polygon):
        return _coords_to_line(value.coordinates, properties)
    if isinstance(value, MultiPolygon):
        return FeatureCollection(
            tuple(_coords_to_line(rings, properties) for rings in value.coordinates)
        )
    raise TurfError(f"polygon_to_line requires a Polygon, given {type(value).__name__}")


def multi_polygon_to_line(feature: Feature, properties: Properties = None) -> FeatureCollection:
    """
    polygon_to_line applied to every polygon of a MultiPolygon Feature.

    Raises:
        TurfError: If the Feature does not wrap a MultiPolygon
    """
    if not isinstance(feature, Feature) or not isinstance(feature.geometry, MultiPolygon):
        raise TurfError("Feature's geometry must be MultiPolygon")
    return polygon_to_line(
        feature.geometry,
        properties if properties is not None else feature.properties,
    )


def combine(collection: FeatureCollection) -> FeatureCollection:
    """
    Merge a collection into at most three multi-geometry Features.

    Points and MultiPoints become one MultiPoint, lines one
    MultiLineString, polygons one MultiPolygon, in that order. Geometry
    collections and unlocated features are ignored; if nothing is merged
    the input is returned unchanged.

    Raises:
        TurfError: If the collection is None or has no features
    """
    if collection is None:
        raise TurfError("Your FeatureCollection is null.")
    if len(collection.features) == 0:
        raise TurfError("Your FeatureCollection doesn't have any Feature objects in it.")

    points: List[Position] = []
    lines: List[Sequence[Position]] = []
    polygons: List[Sequence[Sequence[Position]]] = []
    for feature in collection.features:
        geometry = feature.geometry
        if isinstance(geometry, Point):
            points.append(geometry.coordinates)
        elif isinstance(geometry, MultiPoint):
            points.extend(geometry.coordinates)
        elif isinstance(geometry, LineString):
            lines.append(geometry.coordinates)
        elif isinstance(geometry, MultiLineString):
            lines.extend(geometry.coordinates)
        elif isinstance(geometry, Polygon):
            polygons.append(geometry.coordinates)
        elif isinstance(geometry, MultiPolygon):
            polygons.extend(geometry.coordinates)

    combined: List[Feature] = []
    if points:
        combined.append(Feature(MultiPoint(tuple(points))))
    if lines:
        combined.append(Feature(MultiLineString(tuple(lines))))
    if polygons:
        combined.append(Feature(MultiPolygon(tuple(polygons))))

    if not combined:
        logger.debug(
            event=LogEvent.ALGORITHM_FALLBACK,
            message="combine found no point, line or polygon geometry, returning input",
            metadata={'features': len(collection.features)},
        )
        return collection
    return FeatureCollection(tuple(combined))
