"""
Position Value Type
===================

Bounded Context: Coordinate Representation

A Position is the leaf of every GeoJSON geometry: longitude, latitude and an
optional altitude.

Design:
- Immutable (frozen dataclass)
- No range clamping, out-of-range values are the caller's concern
- Absent altitude is NaN, never a missing element
- Two absent altitudes compare equal (NaN != NaN otherwise)
"""

import math
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

from .errors import GeoJsonError


@dataclass(frozen=True, eq=False)
class Position:
    """
    Immutable (longitude, latitude, altitude) triple.

    Attributes:
        longitude: Degrees east, not clamped
        latitude: Degrees north, not clamped
        altitude: Meters, NaN when absent

    Example:
        >>> Position(102.0, 0.5).to_list()
        [102.0, 0.5]
        >>> Position(102.0, 0.5, 10.0).to_list()
        [102.0, 0.5, 10.0]
    """
    longitude: float
    latitude: float
    altitude: float = math.nan

    def __post_init__(self):
        """Coerce to float and reject non-numeric input."""
        try:
            object.__setattr__(self, 'longitude', float(self.longitude))
            object.__setattr__(self, 'latitude', float(self.latitude))
            object.__setattr__(self, 'altitude', float(self.altitude))
        except (TypeError, ValueError) as e:
            raise GeoJsonError(f"Position coordinates must be numbers: {e}") from e

    @property
    def has_altitude(self) -> bool:
        return not math.isnan(self.altitude)

    def to_list(self) -> List[float]:
        """Serialize to a GeoJSON coordinate array (altitude only when present)."""
        if self.has_altitude:
            return [self.longitude, self.latitude, self.altitude]
        return [self.longitude, self.latitude]

    def to_tuple(self):
        return tuple(self.to_list())

    @classmethod
    def from_list(cls, values: Sequence[float]) -> 'Position':
        """
        Build from a 2 or 3 element coordinate array.

        Extra elements beyond the altitude are ignored.

        Raises:
            GeoJsonError: If fewer than 2 values are given
        """
        if isinstance(values, (str, bytes)) or len(values) < 2:
            raise GeoJsonError(
                f"A position requires at least longitude and latitude, got {values!r}"
            )
        if len(values) == 2:
            return cls(values[0], values[1])
        return cls(values[0], values[1], values[2])

    def _key(self):
        alt = None if math.isnan(self.altitude) else self.altitude
        return (self.longitude, self.latitude, alt)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __iter__(self):
        return iter(self.to_list())

    def __repr__(self) -> str:
        if self.has_altitude:
            return f"Position({self.longitude!r}, {self.latitude!r}, {self.altitude!r})"
        return f"Position({self.longitude!r}, {self.latitude!r})"


PositionLike = Union[Position, Sequence[float], Any]


def as_position(value: PositionLike) -> Position:
    """
    Normalize a Position, a Point or a coordinate sequence to a Position.

    Points are recognized by their ``coordinates`` attribute so this module
    does not depend on the geometry types.

    Raises:
        GeoJsonError: If the value cannot be interpreted as a position
    """
    if isinstance(value, Position):
        return value
    coordinates = getattr(value, 'coordinates', None)
    if isinstance(coordinates, Position):
        return coordinates
    if isinstance(value, (list, tuple)):
        return Position.from_list(value)
    raise GeoJsonError(f"Cannot interpret {type(value).__name__} as a position")
