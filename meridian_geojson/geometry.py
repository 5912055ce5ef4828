"""
Geometry Value Types
====================

Bounded Context: GeoJSON Data Model (RFC 7946)

The seven geometry kinds as immutable values. Multi-geometries hold the
coordinate shape of their singular counterpart, not references to it.

Design:
- Immutable (frozen dataclasses, tuples for every sequence)
- Invariants validated at construction, GeoJsonError on violation
- bbox is informational metadata, never derived automatically
- to_dict()/from_dict() for the RFC 7946 dict form

Types:
- Point, MultiPoint, LineString, MultiLineString
- Polygon, MultiPolygon, GeometryCollection
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from .bbox import BoundingBox
from .errors import GeoJsonError
from .position import Position, PositionLike, as_position
from .utils import trim
from . import polyline

Ring = Tuple[Position, ...]


def _positions(values: Sequence[PositionLike], kind: str) -> Tuple[Position, ...]:
    if values is None or isinstance(values, (str, bytes)):
        raise GeoJsonError(f"{kind} coordinates must be a sequence, got {values!r}")
    return tuple(as_position(v) for v in values)


def _check_line(coordinates: Tuple[Position, ...], kind: str) -> None:
    if len(coordinates) < 2:
        raise GeoJsonError(
            f"{kind} requires at least 2 positions, got {len(coordinates)}"
        )


def _check_linear_ring(ring: Ring) -> None:
    if len(ring) < 4:
        raise GeoJsonError("LinearRings need to be made up of 4 or more coordinates.")
    if ring[0] != ring[-1]:
        raise GeoJsonError("LinearRings require first and last coordinate to be identical.")


def _rings(values: Sequence[Sequence[PositionLike]], kind: str) -> Tuple[Ring, ...]:
    if values is None or isinstance(values, (str, bytes)):
        raise GeoJsonError(f"{kind} rings must be a sequence, got {values!r}")
    rings = tuple(_positions(ring, kind) for ring in values)
    if not rings:
        raise GeoJsonError(f"{kind} requires at least one linear ring")
    for ring in rings:
        _check_linear_ring(ring)
    return rings


def _position_list(position: Position) -> List[float]:
    return [trim(v) for v in position.to_list()]


def _bbox_from_dict(data: Dict[str, Any]) -> Optional[BoundingBox]:
    values = data.get('bbox')
    return BoundingBox.from_list(values) if values is not None else None


class Geometry:
    """
    Common base of the seven geometry kinds.

    Subclasses set ``type_name`` and implement ``_coordinates_to_list``.
    Recursive algorithms dispatch on the concrete class.
    """

    type_name: ClassVar[str] = ''
    bbox: Optional[BoundingBox]

    @property
    def type(self) -> str:
        return self.type_name

    def _coordinates_to_list(self) -> Any:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to an RFC 7946 geometry object with trimmed coordinates."""
        data: Dict[str, Any] = {
            'type': self.type,
            'coordinates': self._coordinates_to_list(),
        }
        if self.bbox is not None:
            data['bbox'] = self.bbox.to_list(trimmed=True)
        return data

    @classmethod
    def _require(cls, data: Dict[str, Any], member: str) -> Any:
        if data.get('type') != cls.type_name:
            raise GeoJsonError(
                f"Expected GeoJSON type {cls.type_name}, given {data.get('type')!r}"
            )
        try:
            return data[member]
        except KeyError as e:
            raise GeoJsonError(f"Missing required {cls.type_name} field: {e}") from e


@dataclass(frozen=True)
class Point(Geometry):
    """
    A single position.

    Example:
        >>> Point.from_lng_lat(102.0, 0.5).to_dict()
        {'type': 'Point', 'coordinates': [102.0, 0.5]}
    """
    type_name: ClassVar[str] = 'Point'

    coordinates: Position
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', as_position(self.coordinates))

    @classmethod
    def from_lng_lat(
        cls,
        longitude: float,
        latitude: float,
        altitude: float = math.nan,
        bbox: Optional[BoundingBox] = None,
    ) -> 'Point':
        return cls(Position(longitude, latitude, altitude), bbox)

    @classmethod
    def from_lng_lats(cls, values: Sequence[float], bbox: Optional[BoundingBox] = None) -> 'Point':
        return cls(Position.from_list(values), bbox)

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def altitude(self) -> float:
        return self.coordinates.altitude

    @property
    def has_altitude(self) -> bool:
        return self.coordinates.has_altitude

    def _coordinates_to_list(self) -> List[float]:
        return _position_list(self.coordinates)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point':
        return cls(Position.from_list(cls._require(data, 'coordinates')), _bbox_from_dict(data))


@dataclass(frozen=True)
class MultiPoint(Geometry):
    """Zero or more unconnected positions."""
    type_name: ClassVar[str] = 'MultiPoint'

    coordinates: Tuple[Position, ...] = ()
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', _positions(self.coordinates, self.type_name))

    @classmethod
    def from_lng_lats(cls, values: Sequence[Sequence[float]], bbox: Optional[BoundingBox] = None) -> 'MultiPoint':
        return cls(tuple(Position.from_list(v) for v in values), bbox)

    def points(self) -> List[Point]:
        return [Point(p) for p in self.coordinates]

    def _coordinates_to_list(self) -> List[List[float]]:
        return [_position_list(p) for p in self.coordinates]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MultiPoint':
        return cls.from_lng_lats(cls._require(data, 'coordinates'), _bbox_from_dict(data))


@dataclass(frozen=True)
class LineString(Geometry):
    """
    Two or more connected positions.

    Raises:
        GeoJsonError: If fewer than 2 positions are given
    """
    type_name: ClassVar[str] = 'LineString'

    coordinates: Tuple[Position, ...]
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        coordinates = _positions(self.coordinates, self.type_name)
        _check_line(coordinates, self.type_name)
        object.__setattr__(self, 'coordinates', coordinates)

    @classmethod
    def from_lng_lats(cls, values: Sequence[Sequence[float]], bbox: Optional[BoundingBox] = None) -> 'LineString':
        return cls(tuple(Position.from_list(v) for v in values), bbox)

    @classmethod
    def from_polyline(cls, encoded: str, precision: int = polyline.DEFAULT_PRECISION) -> 'LineString':
        """Build from a Google encoded polyline (precision 6 for OSRM)."""
        return cls(tuple(polyline.decode(encoded, precision)))

    def to_polyline(self, precision: int = polyline.DEFAULT_PRECISION) -> str:
        return polyline.encode(self.coordinates, precision)

    def points(self) -> List[Point]:
        return [Point(p) for p in self.coordinates]

    def _coordinates_to_list(self) -> List[List[float]]:
        return [_position_list(p) for p in self.coordinates]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineString':
        return cls.from_lng_lats(cls._require(data, 'coordinates'), _bbox_from_dict(data))


@dataclass(frozen=True)
class MultiLineString(Geometry):
    """Sequence of line coordinate sequences, each with at least 2 positions."""
    type_name: ClassVar[str] = 'MultiLineString'

    coordinates: Tuple[Tuple[Position, ...], ...] = ()
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        if self.coordinates is None:
            raise GeoJsonError("MultiLineString coordinates must be a sequence")
        lines = tuple(_positions(line, self.type_name) for line in self.coordinates)
        for line in lines:
            _check_line(line, self.type_name)
        object.__setattr__(self, 'coordinates', lines)

    @classmethod
    def from_lng_lats(
        cls,
        values: Sequence[Sequence[Sequence[float]]],
        bbox: Optional[BoundingBox] = None,
    ) -> 'MultiLineString':
        return cls(tuple(tuple(Position.from_list(v) for v in line) for line in values), bbox)

    @classmethod
    def from_line_strings(
        cls,
        line_strings: Sequence[LineString],
        bbox: Optional[BoundingBox] = None,
    ) -> 'MultiLineString':
        return cls(tuple(line.coordinates for line in line_strings), bbox)

    def line_strings(self) -> List[LineString]:
        return [LineString(line) for line in self.coordinates]

    def _coordinates_to_list(self) -> List[List[List[float]]]:
        return [[_position_list(p) for p in line] for line in self.coordinates]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MultiLineString':
        return cls.from_lng_lats(cls._require(data, 'coordinates'), _bbox_from_dict(data))


@dataclass(frozen=True)
class Polygon(Geometry):
    """
    Outer ring followed by zero or more holes.

    Invariants:
        - at least one ring
        - every ring has 4 or more positions
        - every ring is closed (first == last)

    Example:
        >>> square = Polygon.from_lng_lats([[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]])
        >>> len(square.outer().coordinates)
        5
    """
    type_name: ClassVar[str] = 'Polygon'

    coordinates: Tuple[Ring, ...]
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', _rings(self.coordinates, self.type_name))

    @classmethod
    def from_lng_lats(
        cls,
        values: Sequence[Sequence[Sequence[float]]],
        bbox: Optional[BoundingBox] = None,
    ) -> 'Polygon':
        return cls(tuple(tuple(Position.from_list(v) for v in ring) for ring in values), bbox)

    @classmethod
    def from_outer_inner(
        cls,
        outer: LineString,
        *inner: LineString,
        bbox: Optional[BoundingBox] = None,
    ) -> 'Polygon':
        """Build from an outer LineString and hole LineStrings, each a linear ring."""
        rings = [outer.coordinates]
        rings.extend(line.coordinates for line in inner)
        return cls(tuple(rings), bbox)

    def outer(self) -> LineString:
        return LineString(self.coordinates[0])

    def inner(self) -> List[LineString]:
        return [LineString(ring) for ring in self.coordinates[1:]]

    def _coordinates_to_list(self) -> List[List[List[float]]]:
        return [[_position_list(p) for p in ring] for ring in self.coordinates]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Polygon':
        return cls.from_lng_lats(cls._require(data, 'coordinates'), _bbox_from_dict(data))


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    """Sequence of polygon coordinate shapes, each validated like a Polygon."""
    type_name: ClassVar[str] = 'MultiPolygon'

    coordinates: Tuple[Tuple[Ring, ...], ...] = ()
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        if self.coordinates is None:
            raise GeoJsonError("MultiPolygon coordinates must be a sequence")
        polygons = tuple(_rings(polygon, self.type_name) for polygon in self.coordinates)
        object.__setattr__(self, 'coordinates', polygons)

    @classmethod
    def from_lng_lats(
        cls,
        values: Sequence[Sequence[Sequence[Sequence[float]]]],
        bbox: Optional[BoundingBox] = None,
    ) -> 'MultiPolygon':
        return cls(
            tuple(
                tuple(tuple(Position.from_list(v) for v in ring) for ring in polygon)
                for polygon in values
            ),
            bbox,
        )

    @classmethod
    def from_polygons(
        cls,
        polygons: Sequence[Polygon],
        bbox: Optional[BoundingBox] = None,
    ) -> 'MultiPolygon':
        return cls(tuple(polygon.coordinates for polygon in polygons), bbox)

    def polygons(self) -> List[Polygon]:
        return [Polygon(rings) for rings in self.coordinates]

    def _coordinates_to_list(self) -> List[List[List[List[float]]]]:
        return [
            [[_position_list(p) for p in ring] for ring in polygon]
            for polygon in self.coordinates
        ]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MultiPolygon':
        return cls.from_lng_lats(cls._require(data, 'coordinates'), _bbox_from_dict(data))


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """Heterogeneous, possibly nested, sequence of geometries."""
    type_name: ClassVar[str] = 'GeometryCollection'

    geometries: Tuple[Geometry, ...] = ()
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        if self.geometries is None:
            raise GeoJsonError("GeometryCollection geometries must be a sequence")
        geometries = tuple(self.geometries)
        for geometry in geometries:
            if not isinstance(geometry, Geometry):
                raise GeoJsonError(
                    f"GeometryCollection members must be geometries, got {type(geometry).__name__}"
                )
        object.__setattr__(self, 'geometries', geometries)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'type': self.type,
            'geometries': [g.to_dict() for g in self.geometries],
        }
        if self.bbox is not None:
            data['bbox'] = self.bbox.to_list(trimmed=True)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeometryCollection':
        members = cls._require(data, 'geometries')
        return cls(tuple(geometry_from_dict(m) for m in members), _bbox_from_dict(data))


GEOMETRY_TYPES = {
    cls.type_name: cls
    for cls in (
        Point, MultiPoint, LineString, MultiLineString,
        Polygon, MultiPolygon, GeometryCollection,
    )
}


def geometry_from_dict(data: Dict[str, Any]) -> Geometry:
    """
    Dispatch an RFC 7946 geometry dict on its ``type`` member.

    Raises:
        GeoJsonError: If the type is missing or not a geometry kind
    """
    if not isinstance(data, dict):
        raise GeoJsonError(f"Geometry must be an object, got {type(data).__name__}")
    type_name = data.get('type')
    try:
        cls = GEOMETRY_TYPES[type_name]
    except KeyError:
        raise GeoJsonError(f"Unknown geometry type: {type_name!r}") from None
    return cls.from_dict(data)
