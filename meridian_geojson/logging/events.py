"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names shared by the codec, the algorithm layer and the CLI.

Event Naming Convention:
    <component>.<category>.<action>

    component: codec, config, algorithm, cli
    category: decode, command, fallback
    action: completed, failed
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - codec.*: GeoJSON dict/JSON conversion
    - config.*: Configuration loading
    - algorithm.*: Notable algorithm fallbacks
    - cli.*: Command-line front end
    """

    # ========== Codec Events ==========
    CODEC_DECODED = "codec.decode.completed"
    """GeoJSON document decoded into value objects."""

    CODEC_DECODE_FAILED = "codec.decode.failed"
    """GeoJSON document could not be decoded."""

    CODEC_ENCODED = "codec.encode.completed"
    """Value object serialized to JSON text."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded and validated."""

    CONFIG_INVALID = "config.invalid"
    """Configuration file rejected."""

    # ========== Algorithm Events ==========
    ALGORITHM_FALLBACK = "algorithm.fallback"
    """Algorithm returned a degenerate or pass-through result."""

    ALGORITHM_CLAMPED = "algorithm.clamped"
    """Requested distance exceeded the path and was clamped to its end."""

    # ========== CLI Events ==========
    CLI_COMMAND_STARTED = "cli.command.started"
    """Subcommand dispatched."""

    CLI_COMMAND_COMPLETED = "cli.command.completed"
    """Subcommand finished and printed its result."""

    CLI_COMMAND_FAILED = "cli.command.failed"
    """Subcommand raised an input or precondition error."""


CODEC_EVENTS = {
    LogEvent.CODEC_DECODED,
    LogEvent.CODEC_DECODE_FAILED,
    LogEvent.CODEC_ENCODED,
}

ALGORITHM_EVENTS = {
    LogEvent.ALGORITHM_FALLBACK,
    LogEvent.ALGORITHM_CLAMPED,
}

ERROR_EVENTS = {
    LogEvent.CODEC_DECODE_FAILED,
    LogEvent.CONFIG_INVALID,
    LogEvent.CLI_COMMAND_FAILED,
}
