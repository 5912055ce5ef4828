"""
Configuration schema for the meridian command-line tools.

Defaults for units, circle resolution, output precision and logging,
loaded from YAML and validated at construction. The algorithms themselves
take explicit parameters; only the CLI reads this.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Union

import yaml

from meridian_geojson.logging import LogEvent, create_logger

from .units import FACTORS, UNIT_DEFAULT
from .transformation import DEFAULT_STEPS

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logger = create_logger("config")


@dataclass(frozen=True)
class TurfConfig:
    """
    Defaults applied by the CLI.

    Immutable after construction (frozen dataclass).
    """

    default_unit: str = UNIT_DEFAULT
    circle_steps: int = DEFAULT_STEPS
    coordinate_precision: int = 7
    polyline_precision: int = 5
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration."""
        if self.default_unit not in FACTORS:
            raise ValueError(
                f"Invalid default_unit: {self.default_unit}. "
                f"Must be one of {sorted(FACTORS)}"
            )

        if not isinstance(self.circle_steps, int) or self.circle_steps < 3:
            raise ValueError(
                f"circle_steps must be an integer >= 3, got {self.circle_steps}"
            )

        for name in ("coordinate_precision", "polyline_precision"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 15:
                raise ValueError(f"{name} must be in [0, 15], got {value}")

        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', level)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: dict) -> "TurfConfig":
        """
        Build from a plain dict; missing keys keep their defaults.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "TurfConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            default_unit: "miles"
            circle_steps: 32
            coordinate_precision: 7
            polyline_precision: 6   # OSRM
            log_level: "INFO"
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        try:
            config = cls.from_dict(data)
        except ValueError as e:
            logger.error(
                event=LogEvent.CONFIG_INVALID,
                message="Rejected configuration file",
                metadata={'path': str(yaml_path)},
                exc_info=e,
            )
            raise

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded configuration",
            metadata={'path': str(yaml_path), 'default_unit': config.default_unit},
        )
        return config
