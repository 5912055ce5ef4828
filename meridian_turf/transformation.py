"""
Geometry Transformation
=======================

Bounded Context: Geometry Construction

Design:
- Circle vertices are destinations from the center at even bearings
- The ring is closed by repeating the first vertex
"""

from meridian_geojson import Polygon
from meridian_geojson.position import PositionLike

from .errors import TurfError
from .measurement import destination
from .units import UNIT_DEFAULT

DEFAULT_STEPS = 64


def circle(
    center: PositionLike,
    radius: float,
    steps: int = DEFAULT_STEPS,
    units: str = UNIT_DEFAULT,
) -> Polygon:
    """
    Polygon approximating a circle of ``radius`` around ``center``.

    Args:
        center: Circle center
        radius: Radius in ``units``
        steps: Number of distinct vertices (at least 3)
        units: Length unit of ``radius``

    Returns:
        Polygon whose single ring has ``steps + 1`` positions

    Example:
        >>> len(circle((0, 0), 10, steps=4).outer().coordinates)
        5
    """
    if steps < 3:
        raise TurfError(f"circle requires at least 3 steps, got {steps}")

    ring = [
        destination(center, radius, i * 360.0 / steps, units).coordinates
        for i in range(steps)
    ]
    ring.append(ring[0])
    return Polygon((tuple(ring),))
