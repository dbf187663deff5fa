"""First-Fit-Decreasing bin packing algorithm."""

from __future__ import annotations

import logging
from typing import Sequence

from ffd_packing.core.errors import ValueTooLargeError
from ffd_packing.core.models import BinList
from ffd_packing.runner.dataset import sort_descending

logger = logging.getLogger(__name__)


class FirstFitDecreasingPacker:
    """
    First-Fit-Decreasing packing algorithm.

    Sorts the values largest first, then puts each one into the first
    bin with enough room. Opens a new bin when none has room.
    Values are never moved once placed.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity

    def pack(self, values: Sequence[int]) -> BinList:
        """
        Pack values into bins using first-fit over decreasing values.

        Args:
            values: Values to pack (any order)

        Returns:
            BinList holding every value

        Raises:
            ValueTooLargeError: If any value exceeds the capacity. Checked
                before any bin is opened.
        """
        ordered = sort_descending(values)
        logger.debug("Packing %d values into bins of capacity %d", len(ordered), self.capacity)
        bins = _pack_in_order(ordered, self.capacity)
        logger.info(
            "Packed %d values into %d bins (lower bound %d)",
            len(ordered),
            len(bins),
            lower_bound(ordered, self.capacity),
        )
        return bins


def first_fit_decreasing(values: Sequence[int], capacity: int) -> BinList:
    """Pack values with First-Fit-Decreasing and return the bins."""
    return FirstFitDecreasingPacker(capacity).pack(values)


def first_fit(values: Sequence[int], capacity: int) -> BinList:
    """Pack values with First-Fit in the order given, without sorting."""
    return _pack_in_order(list(values), capacity)


def lower_bound(values: Sequence[int], capacity: int) -> int:
    """Smallest bin count any packing could reach: ceil(sum / capacity)."""
    return -(-sum(values) // capacity)


def _pack_in_order(values: list[int], capacity: int) -> BinList:
    for value in values:
        if value > capacity:
            raise ValueTooLargeError(value, capacity)
    bins = BinList(capacity, max_bins=len(values))
    bins.pack_all(values)
    return bins
