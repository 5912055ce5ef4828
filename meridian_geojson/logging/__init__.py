"""
Structured Logging for Meridian
===============================

Bounded Context: Observability

JSON-structured logging shared by the codec, the algorithm layer and the CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    CODEC_EVENTS, ALGORITHM_EVENTS, ERROR_EVENTS: Event categories
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
    set_global_level: Adjust every meridian logger at once

Example:
    >>> from meridian_geojson.logging import create_logger, LogEvent
    >>> logger = create_logger("measurement")
    >>> logger.debug(
    ...     event=LogEvent.ALGORITHM_FALLBACK,
    ...     message="combine found no typed geometries",
    ... )
"""

from .events import ALGORITHM_EVENTS, CODEC_EVENTS, ERROR_EVENTS, LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger, set_global_level

__all__ = [
    'LogEvent',
    'CODEC_EVENTS',
    'ALGORITHM_EVENTS',
    'ERROR_EVENTS',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
    'set_global_level',
]
