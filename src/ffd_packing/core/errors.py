"""Exception hierarchy for FFD bin packing."""

from __future__ import annotations


class PackingError(Exception):
    """Base class for every error raised by ffd_packing."""


class ConfigurationError(PackingError, ValueError):
    """Invalid run parameters (counts, ranges, capacity, config file)."""


class ValueTooLargeError(PackingError, ValueError):
    """A value can never be placed because it exceeds the bin capacity.

    Attributes:
        value: The offending value.
        capacity: The bin capacity it was checked against.
    """

    def __init__(self, value: int, capacity: int):
        self.value = value
        self.capacity = capacity
        super().__init__(f"Value {value} exceeds bin capacity {capacity}")


class BinLimitError(PackingError):
    """Opening another bin would exceed the bin list's safety bound."""

    def __init__(self, max_bins: int):
        self.max_bins = max_bins
        super().__init__(f"Bin list is limited to {max_bins} bins")
