"""
GeoJSON Codec
=============

Bounded Context: Serialization

Converts between JSON text, plain dicts and the immutable value model.

Design:
- Dispatch on the ``type`` member over all nine GeoJSON kinds
- Coordinates are trimmed to 7 decimal digits on output (see utils.trim)
- Decode failures are logged and re-raised as GeoJsonError
"""

import json
from typing import Any, Dict, Union

from .errors import GeoJsonError
from .feature import Feature, FeatureCollection
from .geometry import GEOMETRY_TYPES, Geometry, geometry_from_dict
from .logging import LogEvent, create_logger

GeoJson = Union[Geometry, Feature, FeatureCollection]

logger = create_logger("codec")


def geojson_from_dict(data: Dict[str, Any]) -> GeoJson:
    """
    Build any GeoJSON value from its dict form.

    Raises:
        GeoJsonError: If the type is unknown or a member is missing/invalid
    """
    if not isinstance(data, dict):
        raise GeoJsonError(f"GeoJSON must be an object, got {type(data).__name__}")

    type_name = data.get('type')
    try:
        if type_name == 'Feature':
            return Feature.from_dict(data)
        if type_name == 'FeatureCollection':
            return FeatureCollection.from_dict(data)
        if type_name in GEOMETRY_TYPES:
            return geometry_from_dict(data)
        raise GeoJsonError(f"Unknown GeoJSON type: {type_name!r}")
    except GeoJsonError as e:
        logger.error(
            event=LogEvent.CODEC_DECODE_FAILED,
            message="Failed to decode GeoJSON object",
            metadata={'type': type_name},
            exc_info=e,
        )
        raise
    except (TypeError, ValueError) as e:
        # malformed coordinate arrays (numbers where lists are expected, etc.)
        logger.error(
            event=LogEvent.CODEC_DECODE_FAILED,
            message="Malformed GeoJSON coordinates",
            metadata={'type': type_name},
            exc_info=e,
        )
        raise GeoJsonError(f"Malformed {type_name} object: {e}") from e


def from_json(text: Union[str, bytes]) -> GeoJson:
    """
    Parse JSON text into a GeoJSON value.

    Raises:
        GeoJsonError: If the text is not valid JSON or not valid GeoJSON
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(
            event=LogEvent.CODEC_DECODE_FAILED,
            message="Invalid JSON text",
            exc_info=e,
        )
        raise GeoJsonError(f"Invalid JSON: {e}") from e

    value = geojson_from_dict(data)
    logger.debug(
        event=LogEvent.CODEC_DECODED,
        message=f"Decoded {value.type}",
    )
    return value


def to_dict(value: GeoJson) -> Dict[str, Any]:
    if not isinstance(value, (Geometry, Feature, FeatureCollection)):
        raise GeoJsonError(f"Cannot serialize {type(value).__name__} as GeoJSON")
    return value.to_dict()


def to_json(value: GeoJson, indent: Union[int, None] = None) -> str:
    """
    Serialize a GeoJSON value to JSON text.

    Example:
        >>> to_json(Point.from_lng_lat(100.123456789, 0.0))
        '{"type": "Point", "coordinates": [100.1234568, 0.0]}'
    """
    text = json.dumps(to_dict(value), indent=indent)
    logger.debug(
        event=LogEvent.CODEC_ENCODED,
        message=f"Encoded {value.type}",
    )
    return text
