"""
Argument Assertions
===================

Bounded Context: Input Validation

Guards that check the GeoJSON kind of an argument and raise TurfError with
a message naming the calling function.
"""

from typing import Any

from meridian_geojson import Feature, FeatureCollection

from .errors import TurfError


def geojson_type(value: Any, type_name: str, name: str) -> None:
    """
    Require ``value`` to be a GeoJSON value of kind ``type_name``.

    Args:
        value: Any GeoJSON value (or None)
        type_name: Expected RFC 7946 type name
        name: Calling function, used in the message

    Raises:
        TurfError: If type_name or name is empty, or the kind differs
    """
    if not type_name or not name:
        raise TurfError("Type and name required")
    actual = getattr(value, 'type', None) if value is not None else None
    if actual != type_name:
        given = actual if actual is not None else 'null'
        raise TurfError(f"Invalid input to {name}: must be a {type_name}, given {given}")


def _check_feature(feature: Any, type_name: str, name: str) -> None:
    if not isinstance(feature, Feature) or feature.geometry is None:
        raise TurfError(f"Invalid input to {name}, Feature with geometry required")
    if feature.geometry.type != type_name:
        raise TurfError(
            f"Invalid input to {name}: must be a {type_name}, given {feature.geometry.type}"
        )


def feature_of(feature: Any, type_name: str, name: str) -> None:
    """
    Require a Feature whose geometry is of kind ``type_name``.

    Raises:
        TurfError: If name is empty, the geometry is missing, or its kind differs
    """
    if not name:
        raise TurfError(".featureOf() requires a name")
    _check_feature(feature, type_name, name)


def collection_of(collection: Any, type_name: str, name: str) -> None:
    """
    Require a FeatureCollection whose every geometry is of kind ``type_name``.

    Raises:
        TurfError: If name is empty, the collection is missing, or any
            member fails feature_of
    """
    if not name:
        raise TurfError("collectionOf() requires a name")
    if not isinstance(collection, FeatureCollection):
        raise TurfError(f"Invalid input to {name}, FeatureCollection required")
    for feature in collection.features:
        _check_feature(feature, type_name, name)
