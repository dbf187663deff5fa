"""First-Fit-Decreasing bin packing of integers into fixed-capacity bins."""

from ffd_packing.algorithms.first_fit_decreasing import (
    FirstFitDecreasingPacker,
    first_fit,
    first_fit_decreasing,
    lower_bound,
)
from ffd_packing.core.config import PackingConfig, load_config
from ffd_packing.core.errors import (
    BinLimitError,
    ConfigurationError,
    PackingError,
    ValueTooLargeError,
)
from ffd_packing.core.models import Bin, BinList
from ffd_packing.runner.dataset import generate_values, resolve_values, sort_descending

__version__ = "0.1.0"

__all__ = [
    # Models
    "Bin",
    "BinList",
    # Algorithm
    "FirstFitDecreasingPacker",
    "first_fit_decreasing",
    "first_fit",
    "lower_bound",
    # Values
    "generate_values",
    "sort_descending",
    "resolve_values",
    # Config
    "PackingConfig",
    "load_config",
    # Errors
    "PackingError",
    "ConfigurationError",
    "ValueTooLargeError",
    "BinLimitError",
]
