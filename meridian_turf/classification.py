"""Nearest-point classification among a set of candidate points."""

from typing import Sequence

from meridian_geojson import Point, as_position
from meridian_geojson.position import PositionLike

from .measurement import distance


def nearest_point(target: PositionLike, points: Sequence[PositionLike]) -> Point:
    """
    Candidate closest to ``target`` by great-circle distance.

    Returns ``target`` itself when there are no candidates. On equal
    distances the earlier candidate wins.
    """
    target_point = target if isinstance(target, Point) else Point(as_position(target))
    if not points:
        return target_point

    nearest = points[0]
    min_dist = float('inf')
    for candidate in points:
        candidate_dist = distance(target_point, candidate)
        if candidate_dist < min_dist:
            nearest = candidate
            min_dist = candidate_dist
    return nearest if isinstance(nearest, Point) else Point(as_position(nearest))
