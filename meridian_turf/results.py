"""
Algorithm Result Types
======================

Bounded Context: Line Algorithms

Immutable records returned by the line algorithms.

Types:
- LineIntersectsResult: Intersection of two infinite lines
- NearestPointResult: Snapped point, its distance and segment index
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from meridian_geojson import Feature, Point


@dataclass(frozen=True)
class LineIntersectsResult:
    """
    Intersection point of two lines plus whether it lies on each segment.

    Attributes:
        horizontal_intersection: Longitude (x) of the intersection
        vertical_intersection: Latitude (y) of the intersection
        on_line1: Intersection falls strictly inside segment 1
        on_line2: Intersection falls strictly inside segment 2
    """
    horizontal_intersection: Optional[float] = None
    vertical_intersection: Optional[float] = None
    on_line1: bool = False
    on_line2: bool = False

    def to_point(self) -> Point:
        return Point.from_lng_lat(self.horizontal_intersection, self.vertical_intersection)


@dataclass(frozen=True)
class NearestPointResult:
    """
    Closest point on a line to a query point.

    Attributes:
        point: Snapped location (a vertex or a perpendicular foot)
        distance: Distance from the query point, in the requested units
        index: Index of the segment start vertex the point belongs to

    Example:
        >>> result = nearest_point_on_line((0.5, 0.1), [(0, 0), (1, 0)])
        >>> result.index
        0
    """
    point: Point
    distance: float
    index: int

    def to_feature(self) -> Feature:
        """Point Feature carrying ``dist`` and ``index`` properties."""
        return Feature(self.point, {'dist': self.distance, 'index': self.index})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'point': self.point.to_dict(),
            'distance': self.distance,
            'index': self.index,
        }
