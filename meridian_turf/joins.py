"""
Point-in-Polygon Joins
======================

Bounded Context: Spatial Joins

Design:
- Even-odd ray casting over each ring, closing edge included
- A point is inside a polygon when it is in the outer ring and in no hole
- Points on an edge are not guaranteed either way
"""

from typing import Sequence, Union

from meridian_geojson import Feature, FeatureCollection, MultiPolygon, Polygon, as_position
from meridian_geojson.position import PositionLike

from .assertions import feature_of
from .errors import TurfError


def in_ring(pt: PositionLike, ring: Sequence[PositionLike]) -> bool:
    """Even-odd crossing test of ``pt`` against a single ring."""
    point = as_position(pt)
    x = point.longitude
    y = point.latitude
    positions = [as_position(p) for p in ring]

    is_inside = False
    j = len(positions) - 1
    for i in range(len(positions)):
        xi, yi = positions[i].longitude, positions[i].latitude
        xj, yj = positions[j].longitude, positions[j].latitude
        intersect = ((yi > y) != (yj > y)
                     and x < (xj - xi) * (y - yi) / (yj - yi) + xi)
        if intersect:
            is_inside = not is_inside
        j = i
    return is_inside


def _polygons_of(polygon: Union[Polygon, MultiPolygon]):
    if isinstance(polygon, Polygon):
        return (polygon.coordinates,)
    if isinstance(polygon, MultiPolygon):
        return polygon.coordinates
    raise TurfError(
        f"inside requires a Polygon or MultiPolygon, given {type(polygon).__name__}"
    )


def inside(point: PositionLike, polygon: Union[Polygon, MultiPolygon]) -> bool:
    """
    Whether ``point`` lies inside a Polygon or MultiPolygon.

    Holes are respected per polygon; the first matching polygon wins.

    Example:
        >>> box = Polygon.from_lng_lats([[(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]])
        >>> inside((5, 5), box)
        True
    """
    for rings in _polygons_of(polygon):
        if in_ring(point, rings[0]):
            if not any(in_ring(point, hole) for hole in rings[1:]):
                return True
    return False


def points_within_polygon(points: FeatureCollection, polygons: FeatureCollection) -> FeatureCollection:
    """
    Point features that fall inside any of the polygon features.

    Polygons are the outer loop and points the inner one; a point inside
    several polygons appears once per polygon.

    Raises:
        TurfError: If a point feature is not a Point or a polygon feature
            is not a Polygon or MultiPolygon
    """
    for feature in points.features:
        feature_of(feature, 'Point', 'points_within_polygon')

    matches = []
    for polygon_feature in polygons.features:
        geometry = polygon_feature.geometry
        if not isinstance(geometry, (Polygon, MultiPolygon)):
            given = geometry.type if geometry is not None else 'null'
            raise TurfError(
                f"Invalid input to points_within_polygon: must be a Polygon, given {given}"
            )
        for point_feature in points.features:
            if inside(point_feature.geometry, geometry):
                matches.append(Feature(point_feature.geometry))
    return FeatureCollection(tuple(matches))
