"""
Encoded Polyline Utilities
==========================

Bounded Context: Serialization

Google encoded polyline algorithm plus Douglas-Peucker simplification.

Design:
- Latitude is encoded before longitude
- precision=5 is the Google default, OSRM uses precision=6
- Pure functions over Positions (Points and coordinate pairs are accepted)
"""

import math
from typing import Iterable, List, Sequence

from .errors import GeoJsonError
from .position import Position, PositionLike, as_position

DEFAULT_PRECISION = 5
OSRM_PRECISION = 6

# in the same metric as the point coordinates
SIMPLIFY_DEFAULT_TOLERANCE = 1.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _encode_value(value: int, out: List[str]) -> None:
    value = ~(value << 1) if value < 0 else value << 1
    while value >= 0x20:
        out.append(chr((0x20 | (value & 0x1f)) + 63))
        value >>= 5
    out.append(chr(value + 63))


def encode(path: Iterable[PositionLike], precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode a path into a polyline string.

    Args:
        path: Positions, Points or [lon, lat] pairs
        precision: Decimal digits kept (5 for Google, 6 for OSRM)

    Returns:
        The encoded polyline

    Example:
        >>> encode([(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)])
        '_p~iF~ps|U_ulLnnqC_mqNvxq`@'
    """
    factor = 10.0 ** precision
    last_lat = 0
    last_lng = 0
    out: List[str] = []
    for value in path:
        position = as_position(value)
        lat = _round_half_up(position.latitude * factor)
        lng = _round_half_up(position.longitude * factor)
        _encode_value(lat - last_lat, out)
        _encode_value(lng - last_lng, out)
        last_lat, last_lng = lat, lng
    return ''.join(out)


def _decode_value(encoded: str, index: int):
    result = 1
    shift = 0
    while True:
        if index >= len(encoded):
            raise GeoJsonError(f"Truncated polyline at offset {index}")
        temp = ord(encoded[index]) - 63 - 1
        index += 1
        result += temp << shift
        shift += 5
        if temp < 0x1f:
            break
    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode(encoded: str, precision: int = DEFAULT_PRECISION) -> List[Position]:
    """
    Decode a polyline string into a list of Positions.

    Raises:
        GeoJsonError: If the string ends in the middle of a coordinate
    """
    factor = 10.0 ** precision
    path: List[Position] = []
    index = 0
    lat = 0
    lng = 0
    while index < len(encoded):
        delta, index = _decode_value(encoded, index)
        lat += delta
        delta, index = _decode_value(encoded, index)
        lng += delta
        path.append(Position(lng / factor, lat / factor))
    return path


def _sq_dist(p1: Position, p2: Position) -> float:
    dx = p1.longitude - p2.longitude
    dy = p1.latitude - p2.latitude
    return dx * dx + dy * dy


def _sq_seg_dist(point: Position, p1: Position, p2: Position) -> float:
    """Squared distance from a point to the segment p1-p2 in coordinate space."""
    x = p1.longitude
    y = p1.latitude
    dx = p2.longitude - x
    dy = p2.latitude - y

    if dx != 0 or dy != 0:
        t = ((point.longitude - x) * dx + (point.latitude - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x = p2.longitude
            y = p2.latitude
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = point.longitude - x
    dy = point.latitude - y
    return dx * dx + dy * dy


def _simplify_radial_dist(points: Sequence[Position], sq_tolerance: float) -> List[Position]:
    prev_point = points[0]
    new_points = [prev_point]
    point = prev_point
    for point in points[1:]:
        if _sq_dist(point, prev_point) > sq_tolerance:
            new_points.append(point)
            prev_point = point
    if prev_point != point:
        new_points.append(point)
    return new_points


def _simplify_dp_step(
    points: Sequence[Position],
    first: int,
    last: int,
    sq_tolerance: float,
    simplified: List[Position],
) -> None:
    max_sq_dist = sq_tolerance
    index = 0
    for i in range(first + 1, last):
        sq_dist = _sq_seg_dist(points[i], points[first], points[last])
        if sq_dist > max_sq_dist:
            index = i
            max_sq_dist = sq_dist

    if max_sq_dist > sq_tolerance:
        if index - first > 1:
            _simplify_dp_step(points, first, index, sq_tolerance, simplified)
        simplified.append(points[index])
        if last - index > 1:
            _simplify_dp_step(points, index, last, sq_tolerance, simplified)


def _simplify_douglas_peucker(points: Sequence[Position], sq_tolerance: float) -> List[Position]:
    last = len(points) - 1
    simplified = [points[0]]
    _simplify_dp_step(points, 0, last, sq_tolerance, simplified)
    simplified.append(points[last])
    return simplified


def simplify(
    points: Sequence[PositionLike],
    tolerance: float = SIMPLIFY_DEFAULT_TOLERANCE,
    highest_quality: bool = False,
) -> List[Position]:
    """
    Reduce the number of vertices in a path.

    A cheap radial-distance pass runs first unless ``highest_quality`` is
    set; Douglas-Peucker then keeps every vertex farther than ``tolerance``
    from the simplified line.

    Args:
        points: Path to simplify
        tolerance: Distance threshold in coordinate units
        highest_quality: Skip the radial-distance pre-pass

    Returns:
        Simplified list of Positions (inputs of 2 or fewer points are returned as-is)
    """
    positions = [as_position(p) for p in points]
    if len(positions) <= 2:
        return positions

    sq_tolerance = tolerance * tolerance
    if not highest_quality:
        positions = _simplify_radial_dist(positions, sq_tolerance)
    return _simplify_douglas_peucker(positions, sq_tolerance)
