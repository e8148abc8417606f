"""
Configuration schema for the centroid service.

Defines validation strictness and logging settings. Loaded from YAML or
built in memory; immutable after construction.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union
import yaml

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class CentroidConfig:
    """
    Centroid service configuration.

    Attributes:
        strict: Reject invalid and degenerate geometry with exceptions. When
            False, inputs are not validated and zero-area polygons produce
            non-finite centroids.
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        component: Logger component name (logger "meridian.<component>")
    """

    strict: bool = True
    log_level: str = "WARNING"
    component: str = "centroid"

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.strict, bool):
            raise ValueError(f"strict must be a boolean, got {self.strict!r}")

        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', level)

        if not self.component:
            raise ValueError("component cannot be empty")

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CentroidConfig":
        """
        Build configuration from a mapping.

        Raises:
            ValueError: If the mapping has unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown config keys: {sorted(unknown)}. "
                f"Must be among {sorted(known)}"
            )
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: Union[Path, str]) -> "CentroidConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            strict: true
            log_level: "INFO"
            component: "centroid"
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file must contain a mapping, got {type(data).__name__}: {yaml_path}"
            )

        return cls.from_dict(data)
