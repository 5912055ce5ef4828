"""
Bounding Box Value Type
=======================

Bounded Context: Coordinate Representation

Design:
- Two corners (southwest, northeast) stored as Positions
- west/south/east/north are projections of the corners
- No ordering invariant, antimeridian-crossing boxes are representable
"""

from dataclasses import dataclass
from typing import List, Sequence

from .errors import GeoJsonError
from .position import Position
from .utils import trim


@dataclass(frozen=True)
class BoundingBox:
    """
    Immutable axis-aligned box in longitude/latitude space.

    Attributes:
        southwest: Lower-left corner
        northeast: Upper-right corner

    Example:
        >>> box = BoundingBox.from_lng_lats(-10.0, -5.0, 10.0, 5.0)
        >>> box.to_list()
        [-10.0, -5.0, 10.0, 5.0]
    """
    southwest: Position
    northeast: Position

    def __post_init__(self):
        if not isinstance(self.southwest, Position) or not isinstance(self.northeast, Position):
            raise GeoJsonError("BoundingBox corners must be Position instances")

    @classmethod
    def from_lng_lats(
        cls,
        west: float,
        south: float,
        east: float,
        north: float,
    ) -> 'BoundingBox':
        return cls(Position(west, south), Position(east, north))

    @property
    def west(self) -> float:
        return self.southwest.longitude

    @property
    def south(self) -> float:
        return self.southwest.latitude

    @property
    def east(self) -> float:
        return self.northeast.longitude

    @property
    def north(self) -> float:
        return self.northeast.latitude

    def to_list(self, trimmed: bool = False) -> List[float]:
        """
        Serialize to the RFC 7946 array form.

        Four numbers, or six when both corners carry an altitude.
        """
        sw, ne = self.southwest, self.northeast
        if sw.has_altitude and ne.has_altitude:
            values = [sw.longitude, sw.latitude, sw.altitude,
                      ne.longitude, ne.latitude, ne.altitude]
        else:
            values = [self.west, self.south, self.east, self.north]
        if trimmed:
            return [trim(v) for v in values]
        return values

    @classmethod
    def from_list(cls, values: Sequence[float]) -> 'BoundingBox':
        """
        Deserialize from a 4 or 6 element array.

        Raises:
            GeoJsonError: If the array has any other length
        """
        if len(values) == 4:
            return cls.from_lng_lats(*values)
        if len(values) == 6:
            return cls(Position(values[0], values[1], values[2]),
                       Position(values[3], values[4], values[5]))
        raise GeoJsonError(f"bbox must have 4 or 6 elements, got {len(values)}")
