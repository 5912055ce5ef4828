"""
Feature and FeatureCollection
=============================

Bounded Context: GeoJSON Data Model (RFC 7946)

Design:
- Feature owns an optional geometry, a read-only property map and an id
- Numeric ids are stored as strings
- "Updating" properties returns a new Feature
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from .bbox import BoundingBox
from .errors import GeoJsonError
from .geometry import Geometry, geometry_from_dict


def _bbox_from_dict(data: Dict[str, Any]) -> Optional[BoundingBox]:
    values = data.get('bbox')
    return BoundingBox.from_list(values) if values is not None else None


@dataclass(frozen=True)
class Feature:
    """
    Geometry plus properties.

    Attributes:
        geometry: Any geometry kind, or None for an unlocated feature
        properties: String-keyed JSON values (read-only view)
        id: Optional identifier, numbers are converted to strings
        bbox: Optional informational bounding box

    Example:
        >>> f = Feature(Point.from_lng_lat(1.0, 2.0), {'name': 'pin'}, id=7)
        >>> f.id
        '7'
        >>> f.get_string_property('name')
        'pin'
    """
    geometry: Optional[Geometry] = None
    properties: Mapping[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        """Validate invariants."""
        if self.geometry is not None and not isinstance(self.geometry, Geometry):
            raise GeoJsonError(
                f"Feature geometry must be a Geometry, got {type(self.geometry).__name__}"
            )

        properties = {} if self.properties is None else self.properties
        if not isinstance(properties, Mapping):
            raise GeoJsonError(
                f"Feature properties must be a mapping, got {type(properties).__name__}"
            )
        for key in properties:
            if not isinstance(key, str):
                raise GeoJsonError(f"Feature property keys must be strings, got {key!r}")
        object.__setattr__(self, 'properties', MappingProxyType(dict(properties)))

        if self.id is not None and not isinstance(self.id, str):
            if isinstance(self.id, bool) or not isinstance(self.id, (int, float)):
                raise GeoJsonError(f"Feature id must be a string or number, got {self.id!r}")
            object.__setattr__(self, 'id', str(self.id))

    @property
    def type(self) -> str:
        return 'Feature'

    @classmethod
    def from_geometry(
        cls,
        geometry: Optional[Geometry],
        properties: Optional[Mapping[str, Any]] = None,
        id: Optional[str] = None,
        bbox: Optional[BoundingBox] = None,
    ) -> 'Feature':
        return cls(geometry, properties or {}, id, bbox)

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def has_non_null_value_for_property(self, key: str) -> bool:
        return self.properties.get(key) is not None

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def get_string_property(self, key: str) -> Optional[str]:
        value = self.properties.get(key)
        return None if value is None else str(value)

    def get_number_property(self, key: str) -> Optional[float]:
        """
        Read a numeric property.

        Raises:
            GeoJsonError: If the property exists but is not a number
        """
        value = self.properties.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise GeoJsonError(f"Property {key!r} is not a number: {value!r}")
        return value

    def get_boolean_property(self, key: str) -> Optional[bool]:
        value = self.properties.get(key)
        if value is None:
            return None
        if not isinstance(value, bool):
            raise GeoJsonError(f"Property {key!r} is not a boolean: {value!r}")
        return value

    def with_properties(self, **extra: Any) -> 'Feature':
        """Return a copy with ``extra`` merged over the current properties."""
        merged = dict(self.properties)
        merged.update(extra)
        return replace(self, properties=merged)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'type': self.type}
        if self.id is not None:
            data['id'] = self.id
        if self.bbox is not None:
            data['bbox'] = self.bbox.to_list(trimmed=True)
        data['geometry'] = self.geometry.to_dict() if self.geometry is not None else None
        data['properties'] = dict(self.properties)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Feature':
        """
        Deserialize from an RFC 7946 Feature dict.

        ``properties`` may be absent or null; ``geometry`` must be present
        (it may be null).

        Raises:
            GeoJsonError: If required members are missing or invalid
        """
        if data.get('type') != 'Feature':
            raise GeoJsonError(f"Expected GeoJSON type Feature, given {data.get('type')!r}")
        try:
            geometry_data = data['geometry']
        except KeyError as e:
            raise GeoJsonError(f"Missing required Feature field: {e}") from e
        geometry = geometry_from_dict(geometry_data) if geometry_data is not None else None
        return cls(
            geometry=geometry,
            properties=data.get('properties') or {},
            id=data.get('id'),
            bbox=_bbox_from_dict(data),
        )


@dataclass(frozen=True)
class FeatureCollection:
    """
    Ordered sequence of Features.

    Example:
        >>> fc = FeatureCollection.from_feature(Feature(Point.from_lng_lat(0, 0)))
        >>> len(fc)
        1
    """
    features: Tuple[Feature, ...] = ()
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        if self.features is None:
            raise GeoJsonError("FeatureCollection features must be a sequence")
        features = tuple(self.features)
        for feature in features:
            if not isinstance(feature, Feature):
                raise GeoJsonError(
                    f"FeatureCollection members must be Features, got {type(feature).__name__}"
                )
        object.__setattr__(self, 'features', features)

    @property
    def type(self) -> str:
        return 'FeatureCollection'

    @classmethod
    def from_features(
        cls,
        features: Sequence[Feature],
        bbox: Optional[BoundingBox] = None,
    ) -> 'FeatureCollection':
        return cls(tuple(features), bbox)

    @classmethod
    def from_feature(cls, feature: Feature, bbox: Optional[BoundingBox] = None) -> 'FeatureCollection':
        return cls((feature,), bbox)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'type': self.type}
        if self.bbox is not None:
            data['bbox'] = self.bbox.to_list(trimmed=True)
        data['features'] = [f.to_dict() for f in self.features]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FeatureCollection':
        if data.get('type') != 'FeatureCollection':
            raise GeoJsonError(
                f"Expected GeoJSON type FeatureCollection, given {data.get('type')!r}"
            )
        try:
            members = data['features']
        except KeyError as e:
            raise GeoJsonError(f"Missing required FeatureCollection field: {e}") from e
        return cls(tuple(Feature.from_dict(m) for m in members), _bbox_from_dict(data))
