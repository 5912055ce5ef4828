"""Tests for structured JSON logging."""

import json
import logging

import pytest

from meridian_geojson import FeatureCollection, Feature, GeoJsonError, from_json
from meridian_geojson.logging import (
    ALGORITHM_EVENTS,
    CODEC_EVENTS,
    ERROR_EVENTS,
    JSONFormatter,
    LogEvent,
    StructuredLogger,
    create_logger,
    set_global_level,
)
from meridian_turf import combine


def _entries(caplog, logger_name):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == logger_name]


class TestStructuredLogger:
    """Tests for StructuredLogger output."""

    def test_logger_name(self):
        assert create_logger('naming').logger.name == 'meridian.naming'

    def test_quiet_by_default(self):
        assert create_logger('quiet').logger.level == logging.WARNING

    def test_json_entry(self, caplog):
        logger = create_logger('emit')
        caplog.set_level(logging.INFO, logger='meridian.emit')
        logger.info(
            event=LogEvent.CODEC_DECODED,
            message="Decoded FeatureCollection",
            metadata={'features': 3},
        )
        entry = _entries(caplog, 'meridian.emit')[-1]
        assert entry['level'] == 'INFO'
        assert entry['component'] == 'emit'
        assert entry['event'] == 'codec.decode.completed'
        assert entry['metadata'] == {'features': 3}
        assert 'timestamp' in entry

    def test_below_level_not_emitted(self, caplog):
        logger = StructuredLogger('filtered', level=logging.ERROR)
        caplog.set_level(logging.ERROR, logger='meridian.filtered')
        logger.warning(event=LogEvent.ALGORITHM_FALLBACK, message="ignored")
        assert _entries(caplog, 'meridian.filtered') == []

    def test_exception_recorded(self, caplog):
        logger = create_logger('failing')
        caplog.set_level(logging.ERROR, logger='meridian.failing')
        logger.error(
            event=LogEvent.CLI_COMMAND_FAILED,
            message="boom",
            exc_info=GeoJsonError("bad ring"),
        )
        entry = _entries(caplog, 'meridian.failing')[-1]
        assert entry['exception'] == {'type': 'GeoJsonError', 'message': 'bad ring'}

    def test_formatter_passes_message_through(self):
        record = logging.LogRecord('meridian.x', logging.INFO, __file__, 1, '{"a": 1}', None, None)
        assert JSONFormatter().format(record) == '{"a": 1}'

    def test_set_global_level(self):
        logger = create_logger('global')
        try:
            set_global_level(logging.DEBUG)
            assert logger.logger.level == logging.DEBUG
        finally:
            set_global_level(logging.WARNING)
        assert logger.logger.level == logging.WARNING


class TestEvents:
    """Tests for the event taxonomy."""

    def test_values_are_dotted(self):
        for event in LogEvent:
            assert event.value.count('.') >= 1

    def test_categories(self):
        assert LogEvent.CODEC_DECODE_FAILED in CODEC_EVENTS
        assert LogEvent.ALGORITHM_CLAMPED in ALGORITHM_EVENTS
        assert LogEvent.CONFIG_INVALID in ERROR_EVENTS
        assert LogEvent.CODEC_DECODED not in ERROR_EVENTS


class TestLibraryEvents:
    """Events emitted by the codec and the algorithms."""

    def test_decode_failure_logged(self, caplog):
        caplog.set_level(logging.ERROR, logger='meridian.codec')
        with pytest.raises(GeoJsonError):
            from_json('{"type": "Circle"}')
        events = [e['event'] for e in _entries(caplog, 'meridian.codec')]
        assert 'codec.decode.failed' in events

    def test_combine_fallback_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='meridian.conversion')
        combine(FeatureCollection.from_feature(Feature()))
        events = [e['event'] for e in _entries(caplog, 'meridian.conversion')]
        assert events == ['algorithm.fallback']
