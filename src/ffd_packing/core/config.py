"""
Run configuration for FFD bin packing.

Replaces process-wide settings with one explicit, validated object that is
handed to the value source and the packer.

Classes:
    PackingConfig: count, bin capacity, value range, optional values/seed

Functions:
    load_config:   read a PackingConfig from a YAML file
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import numpy as np
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from ffd_packing.core.errors import ConfigurationError

# Largest value the numpy generator can draw
MAX_GENERATED_VALUE = int(np.iinfo(np.int64).max)


class PackingConfig(BaseModel):
    """
    All parameters for a single packing run.

    Attributes:
        count:        Number of values to generate (ignored when ``values`` is set).
        bin_capacity: Capacity of every bin.
        value_min:    Lower bound of generated values (inclusive).
        value_max:    Upper bound of generated values (inclusive).
        values:       Explicit values; overrides ``count`` and generation.
        seed:         Seed for reproducible generation.
    """

    count: int = Field(description="Number of values to pack")
    bin_capacity: int = Field(ge=1, description="Capacity of each bin")
    value_min: int = Field(description="Smallest generated value")
    value_max: int = Field(description="Largest generated value")
    values: Optional[list[int]] = Field(None, description="Explicit values to pack")
    seed: Optional[int] = Field(None, ge=0, description="Random seed")

    @model_validator(mode="after")
    def _check_ranges(self) -> "PackingConfig":
        # count and the value range only matter when values are generated
        if self.values is not None:
            negative = [v for v in self.values if v < 0]
            if negative:
                raise ValueError(f"values must be non-negative, got {negative}")
            return self

        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.value_min < 0 or self.value_max < 0:
            raise ValueError(
                f"value range must be non-negative, got [{self.value_min}, {self.value_max}]"
            )
        if self.value_min > self.value_max:
            raise ValueError(
                f"value_min ({self.value_min}) must not exceed value_max ({self.value_max})"
            )
        if self.value_max > MAX_GENERATED_VALUE:
            raise ValueError(
                f"value_max ({self.value_max}) must not exceed {MAX_GENERATED_VALUE}"
            )
        return self

    @property
    def effective_count(self) -> int:
        """Number of values that will actually be packed."""
        if self.values is not None:
            return len(self.values)
        return self.count

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PackingConfig":
        """Build a config, converting pydantic errors to ConfigurationError."""
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc


def load_config(path: Path | str) -> PackingConfig:
    """
    Load a PackingConfig from a YAML mapping.

    Args:
        path: YAML file with the PackingConfig keys.

    Returns:
        Validated PackingConfig.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not a
            mapping, or fails validation.
    """
    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return PackingConfig.from_dict(data)
