"""
Line Algorithms
===============

Bounded Context: Line Algorithms

Nearest point on a line, slicing a line between two points or two
distances, and the 2D segment intersection helper they share.

Design:
- Pure functions, new LineStrings are returned
- Lines may be given as LineString, a Feature wrapping one, or a sequence
- Tie-break on equal distances keeps the first candidate found
"""

import math
from typing import List, Optional, Sequence, Union

from meridian_geojson import Feature, Geometry, LineString, Point, Position, as_position
from meridian_geojson.logging import LogEvent, create_logger
from meridian_geojson.position import PositionLike

from .errors import TurfError
from .measurement import bearing, destination, distance
from .results import LineIntersectsResult, NearestPointResult
from .units import UNIT_DEFAULT, UNIT_KILOMETERS

LineLike = Union[LineString, Feature, Sequence[PositionLike]]

logger = create_logger("lines")


def _line_coords(line: LineLike) -> List[Position]:
    if isinstance(line, Feature):
        if line.geometry is None:
            raise TurfError("Feature must have a geometry")
        if not isinstance(line.geometry, LineString):
            raise TurfError("input must be a LineString Feature or Geometry")
        return list(line.geometry.coordinates)
    if isinstance(line, LineString):
        return list(line.coordinates)
    if isinstance(line, Geometry):
        raise TurfError("input must be a LineString Feature or Geometry")
    return [as_position(c) for c in line]


def line_intersects(
    line1_start_x: float,
    line1_start_y: float,
    line1_end_x: float,
    line1_end_y: float,
    line2_start_x: float,
    line2_start_y: float,
    line2_end_x: float,
    line2_end_y: float,
) -> Optional[LineIntersectsResult]:
    """
    Intersection of segment 1 and segment 2 in planar coordinates.

    Returns:
        The result when the intersection lies strictly inside both
        segments, None for parallel lines or an intersection outside
        either segment
    """
    denominator = ((line2_end_y - line2_start_y) * (line1_end_x - line1_start_x)
                   - (line2_end_x - line2_start_x) * (line1_end_y - line1_start_y))
    if denominator == 0:
        return None

    var_a = line1_start_y - line2_start_y
    var_b = line1_start_x - line2_start_x
    numerator1 = (line2_end_x - line2_start_x) * var_a - (line2_end_y - line2_start_y) * var_b
    numerator2 = (line1_end_x - line1_start_x) * var_a - (line1_end_y - line1_start_y) * var_b
    var_a = numerator1 / denominator
    var_b = numerator2 / denominator

    result = LineIntersectsResult(
        horizontal_intersection=line1_start_x + var_a * (line1_end_x - line1_start_x),
        vertical_intersection=line1_start_y + var_a * (line1_end_y - line1_start_y),
        on_line1=0 < var_a < 1,
        on_line2=0 < var_b < 1,
    )
    if result.on_line1 and result.on_line2:
        return result
    return None


def nearest_point_on_line(
    pt: PositionLike,
    coords: LineLike,
    units: str = UNIT_KILOMETERS,
) -> NearestPointResult:
    """
    Closest point on a line to ``pt``.

    Every segment contributes its two endpoints and, when it falls inside
    the segment, the foot of the perpendicular from ``pt``. On equal
    distances the first candidate found is kept.

    Args:
        pt: Query point
        coords: The line (at least 2 coordinates)
        units: Unit of the returned distance

    Raises:
        TurfError: If the line has fewer than 2 coordinates
    """
    positions = _line_coords(coords)
    if len(positions) < 2:
        raise TurfError(
            "nearest_point_on_line requires a List of Points made up of at least 2 coordinates."
        )
    query = as_position(pt)

    best_point = Position(math.inf, math.inf)
    best_distance = math.inf
    best_index = 0

    for i in range(len(positions) - 1):
        start = positions[i]
        stop = positions[i + 1]
        start_distance = distance(query, start, units)
        stop_distance = distance(query, stop, units)

        height_distance = max(start_distance, stop_distance)
        direction = bearing(start, stop)
        perpendicular1 = destination(query, height_distance, direction + 90, units)
        perpendicular2 = destination(query, height_distance, direction - 90, units)
        intersect = line_intersects(
            perpendicular1.longitude, perpendicular1.latitude,
            perpendicular2.longitude, perpendicular2.latitude,
            start.longitude, start.latitude,
            stop.longitude, stop.latitude,
        )

        candidates = [(start, start_distance), (stop, stop_distance)]
        if intersect is not None:
            foot = Position(intersect.horizontal_intersection, intersect.vertical_intersection)
            candidates.append((foot, distance(query, foot, units)))

        for candidate, candidate_distance in candidates:
            if candidate_distance < best_distance:
                best_point = candidate
                best_distance = candidate_distance
                best_index = i

    return NearestPointResult(Point(best_point), best_distance, best_index)


def line_slice(start_pt: PositionLike, stop_pt: PositionLike, line: LineLike) -> LineString:
    """
    Section of a line between the points nearest to ``start_pt`` and ``stop_pt``.

    Both points are snapped onto the line; the slice runs from the snap
    with the lower segment index, through the intervening vertices, to
    the other snap.

    Raises:
        TurfError: Fewer than 2 coordinates, equal start/stop points, or a
            Feature that does not wrap a LineString
    """
    coords = _line_coords(line)
    start = as_position(start_pt)
    stop = as_position(stop_pt)
    if len(coords) < 2:
        raise TurfError("line_slice requires a LineString made up of at least 2 coordinates.")
    if start == stop:
        raise TurfError("Start and stop points in line_slice cannot equal each other.")

    start_vertex = nearest_point_on_line(start, coords)
    stop_vertex = nearest_point_on_line(stop, coords)
    if start_vertex.index <= stop_vertex.index:
        first, second = start_vertex, stop_vertex
    else:
        first, second = stop_vertex, start_vertex

    points = [first.point.coordinates]
    points.extend(coords[first.index + 1:second.index + 1])
    points.append(second.point.coordinates)
    return LineString(tuple(points))


def _interpolate_back(coords: List[Position], i: int, overshot: float, units: str) -> Position:
    direction = bearing(coords[i], coords[i - 1]) - 180
    return destination(coords[i], overshot, direction, units).coordinates


def line_slice_along(
    line: LineLike,
    start_dist: float,
    stop_dist: float,
    units: str = UNIT_DEFAULT,
) -> LineString:
    """
    Section of a line between two distances measured from its start.

    A stop distance past the end of the line is clamped to the final
    vertex. A start distance greater than the stop distance is rejected
    instead of producing a reversed or degenerate slice.

    Raises:
        TurfError: Fewer than 2 coordinates, equal or reversed distances,
            or a start distance beyond the end of the line
    """
    coords = _line_coords(line)
    if len(coords) < 2:
        raise TurfError(
            "line_slice_along requires a LineString Geometry made up of at least 2 coordinates. "
            f"The LineString passed in only contains {len(coords)}."
        )
    if start_dist == stop_dist:
        raise TurfError("Start and stop distance in line_slice_along cannot equal each other.")
    if start_dist > stop_dist:
        raise TurfError(
            f"Start distance ({start_dist}) in line_slice_along must be less than stop distance ({stop_dist})."
        )

    slice_: List[Position] = []
    travelled = 0.0
    last = len(coords) - 1
    for i in range(len(coords)):
        if start_dist >= travelled and i == last:
            break
        elif travelled > start_dist and not slice_:
            slice_.append(_interpolate_back(coords, i, start_dist - travelled, units))

        if travelled >= stop_dist:
            overshot = stop_dist - travelled
            if overshot == 0:
                slice_.append(coords[i])
            else:
                slice_.append(_interpolate_back(coords, i, overshot, units))
            return LineString(tuple(slice_))

        if travelled >= start_dist:
            slice_.append(coords[i])

        if i == last:
            logger.debug(
                event=LogEvent.ALGORITHM_CLAMPED,
                message="Stop distance beyond line, slice ends at the final vertex",
                metadata={'stop_dist': stop_dist, 'length': travelled, 'units': units},
            )
            return LineString(tuple(slice_))

        travelled += distance(coords[i], coords[i + 1], units)

    raise TurfError("Start position is beyond line")
