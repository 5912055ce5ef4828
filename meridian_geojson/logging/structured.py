"""
Meridian JSON Logger
====================

Bounded Context: Observability

One JSON object per log line, emitted under the ``meridian.<component>``
logger namespace.

Design:
- JSON output, one object per line
- Wraps Python's logging module (handlers, levels, thread safety)
- Typed events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="codec")
    >>> logger.info(
    ...     event=LogEvent.CODEC_DECODED,
    ...     message="Decoded FeatureCollection",
    ...     metadata={'features': 3}
    ... )

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "INFO",
     "component": "codec", "event": "codec.decode.completed",
     "message": "Decoded FeatureCollection", "metadata": {"features": 3}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "codec", "measurement", "cli")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.WARNING,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "codec")
            level: Logging level (default: WARNING, library code stays quiet)
            logger_name: Custom logger name (default: meridian.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"meridian.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log INFO level message."""
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance, recorded as type and message

        Example:
            >>> try:
            ...     geojson_from_dict({'type': 'Nope'})
            ... except GeoJsonError as e:
            ...     logger.error(
            ...         event=LogEvent.CODEC_DECODE_FAILED,
            ...         message="Unknown GeoJSON type",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger.

    The message built by StructuredLogger is already JSON, so it is passed
    through untouched.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.WARNING
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("cli", level=logging.INFO)
    """
    return StructuredLogger(component=component, level=level)


def set_global_level(level: int) -> None:
    """Set the level of every logger under the ``meridian`` namespace."""
    root = logging.getLogger("meridian")
    root.setLevel(level)
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith("meridian.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
