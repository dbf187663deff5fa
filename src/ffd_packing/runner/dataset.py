"""Value generation and ordering for packing runs."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from ffd_packing.core.config import MAX_GENERATED_VALUE, PackingConfig
from ffd_packing.core.errors import ConfigurationError


def generate_values(
    count: int,
    value_min: int,
    value_max: int,
    rng: Optional[np.random.Generator] = None,
    seed: int | None = None,
) -> list[int]:
    """
    Generate random integer values for a packing run.

    Args:
        count: Number of values to generate
        value_min: Smallest value (inclusive)
        value_max: Largest value (inclusive)
        rng: Generator to draw from; every value of a run comes from it
        seed: Seed for a fresh generator when ``rng`` is not given

    Returns:
        List of ``count`` ints drawn uniformly from [value_min, value_max]

    Raises:
        ConfigurationError: If an argument is negative, value_min > value_max
            or value_max is out of the generator range
    """
    if count < 0:
        raise ConfigurationError(f"count must be non-negative, got {count}")
    if value_min < 0 or value_max < 0:
        raise ConfigurationError(
            f"value range must be non-negative, got [{value_min}, {value_max}]"
        )
    if value_min > value_max:
        raise ConfigurationError(
            f"value_min ({value_min}) must not exceed value_max ({value_max})"
        )
    if value_max > MAX_GENERATED_VALUE:
        raise ConfigurationError(
            f"value_max ({value_max}) must not exceed {MAX_GENERATED_VALUE}"
        )

    if rng is None:
        rng = np.random.default_rng(seed)

    drawn = rng.integers(value_min, value_max, size=count, endpoint=True)
    return [int(v) for v in drawn]


def sort_descending(values: Iterable[int]) -> list[int]:
    """
    Sort values largest first.

    Args:
        values: Values to sort

    Returns:
        New list sorted in descending order
    """
    return sorted(values, reverse=True)


def resolve_values(
    config: PackingConfig,
    rng: Optional[np.random.Generator] = None,
) -> list[int]:
    """
    Return the values a run should pack.

    Explicit ``config.values`` win; otherwise ``config.count`` values are
    generated in the configured range.
    """
    if config.values is not None:
        return list(config.values)
    return generate_values(
        config.count,
        config.value_min,
        config.value_max,
        rng=rng,
        seed=config.seed,
    )
