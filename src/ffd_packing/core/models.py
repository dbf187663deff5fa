"""Core data models for one-dimensional bin packing."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ffd_packing.core.errors import BinLimitError, ValueTooLargeError

logger = logging.getLogger(__name__)


class Bin:
    """A fixed-capacity container that keeps track of its remaining space."""

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Bin capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._remaining = capacity
        self._values: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def remaining(self) -> int:
        """Capacity minus the sum of the values held."""
        return self._remaining

    @property
    def values(self) -> tuple[int, ...]:
        """Values in arrival order."""
        return tuple(self._values)

    @property
    def count(self) -> int:
        return len(self._values)

    @property
    def used(self) -> int:
        return self._capacity - self._remaining

    @property
    def utilization(self) -> float:
        """Fraction of the capacity in use (0.0 - 1.0)."""
        return self.used / self._capacity

    @property
    def is_full(self) -> bool:
        return self._remaining == 0

    def try_insert(self, value: int) -> bool:
        """
        Add a value if it fits in the remaining space.

        Args:
            value: Non-negative integer to place.

        Returns:
            True if the value was appended, False if it did not fit
            (the bin is left unchanged).

        Raises:
            ValueError: If value is negative.
        """
        if value < 0:
            raise ValueError(f"Values must be non-negative, got {value}")
        if value > self._remaining:
            return False
        self._values.append(value)
        self._remaining -= value
        return True

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __repr__(self) -> str:
        return (
            f"Bin(capacity={self._capacity}, "
            f"remaining={self._remaining}, "
            f"values={self._values})"
        )


class BinList:
    """
    Ordered collection of bins implementing the First-Fit placement policy.

    Bins are scanned in creation order and the first one with enough
    remaining space receives the value. A new bin is only opened when no
    existing bin accepts it. Bins are never removed, merged or rebalanced.
    """

    def __init__(self, capacity: int, max_bins: Optional[int] = None):
        """
        Args:
            capacity: Capacity given to every bin this list opens.
            max_bins: Optional upper bound on the number of bins. Packing
                n values never needs more than n bins, so callers pass the
                value count here as a safety net.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Bin capacity must be a positive integer, got {capacity!r}")
        if max_bins is not None and max_bins < 0:
            raise ValueError(f"max_bins must be non-negative, got {max_bins}")
        self._capacity = capacity
        self._max_bins = max_bins
        self._bins: list[Bin] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def max_bins(self) -> Optional[int]:
        return self._max_bins

    @property
    def bins(self) -> tuple[Bin, ...]:
        return tuple(self._bins)

    @property
    def value_count(self) -> int:
        """Total number of values placed across all bins."""
        return sum(b.count for b in self._bins)

    @property
    def total_used(self) -> int:
        return sum(b.used for b in self._bins)

    @property
    def total_remaining(self) -> int:
        return sum(b.remaining for b in self._bins)

    def pack(self, value: int) -> int:
        """
        Place one value into the first bin that has room for it.

        Args:
            value: Non-negative integer no larger than the bin capacity.

        Returns:
            Index of the bin that received the value.

        Raises:
            ValueError: If value is negative.
            ValueTooLargeError: If value exceeds the bin capacity.
            BinLimitError: If a new bin is needed but max_bins is reached.
        """
        if value < 0:
            raise ValueError(f"Values must be non-negative, got {value}")
        if value > self._capacity:
            raise ValueTooLargeError(value, self._capacity)

        for index, b in enumerate(self._bins):
            if b.try_insert(value):
                return index

        if self._max_bins is not None and len(self._bins) >= self._max_bins:
            raise BinLimitError(self._max_bins)

        new_bin = Bin(self._capacity)
        new_bin.try_insert(value)
        self._bins.append(new_bin)
        logger.debug("Opened bin %d for value %d", len(self._bins) - 1, value)
        return len(self._bins) - 1

    def pack_all(self, values: Iterable[int]) -> None:
        """
        Pack every value in the given order.

        The First-Fit-Decreasing guarantee only holds when ``values`` is
        sorted descending. Capacity is respected for any order.
        """
        for value in values:
            self.pack(value)

    def __len__(self) -> int:
        return len(self._bins)

    def __iter__(self) -> Iterator[Bin]:
        return iter(self._bins)

    def __getitem__(self, index: int) -> Bin:
        return self._bins[index]

    def __repr__(self) -> str:
        return (
            f"BinList(capacity={self._capacity}, "
            f"bins={len(self._bins)}, "
            f"values={self.value_count})"
        )
