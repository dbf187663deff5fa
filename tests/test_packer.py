"""
Tests for the First-Fit-Decreasing packer.

Tests cover:
- Worked examples (mixed sizes, identical full-size values, empty input)
- Capacity invariant and conservation on random inputs
- Descending order never needs more bins than unsorted first-fit on
  constructed examples
- Oversized values rejected before any bin is opened
- Lower bound
"""

from collections import Counter

import numpy as np
import pytest

from ffd_packing.algorithms.first_fit_decreasing import (
    FirstFitDecreasingPacker,
    first_fit,
    first_fit_decreasing,
    lower_bound,
)
from ffd_packing.core.errors import ValueTooLargeError
from ffd_packing.runner.dataset import generate_values


# ---------------------------------------------------------------------------
# 1. Worked examples
# ---------------------------------------------------------------------------

class TestWorkedExamples:
    def test_mixed_values(self, worked_example):
        capacity, values = worked_example
        bins = first_fit_decreasing(values, capacity)
        assert len(bins) == 2
        assert bins[0].values == (6, 4)
        assert bins[0].remaining == 0
        assert bins[1].values == (5, 3)
        assert bins[1].remaining == 2

    def test_full_size_values(self):
        bins = first_fit_decreasing([5, 5, 5], 5)
        assert len(bins) == 3
        for b in bins:
            assert b.values == (5,)
            assert b.remaining == 0

    def test_empty_input(self):
        bins = first_fit_decreasing([], 10)
        assert len(bins) == 0
        assert bins.value_count == 0

    def test_unsorted_input_is_sorted_first(self):
        bins = first_fit_decreasing([3, 4, 5, 6], 10)
        assert [b.values for b in bins] == [(6, 4), (5, 3)]

    def test_packer_class(self):
        packer = FirstFitDecreasingPacker(capacity=10)
        bins = packer.pack([2, 8, 2, 8])
        assert [b.values for b in bins] == [(8, 2), (8, 2)]

    def test_input_not_mutated(self):
        values = [1, 9, 5]
        first_fit_decreasing(values, 10)
        assert values == [1, 9, 5]


# ---------------------------------------------------------------------------
# 2. Invariants on random inputs
# ---------------------------------------------------------------------------

class TestInvariants:
    @pytest.mark.parametrize("seed", range(5))
    def test_capacity_invariant(self, seed):
        values = generate_values(200, 1, 60, seed=seed)
        bins = first_fit_decreasing(values, 100)
        for b in bins:
            assert sum(b.values) <= b.capacity
            assert b.remaining == b.capacity - sum(b.values)
            assert b.remaining >= 0

    @pytest.mark.parametrize("seed", range(5))
    def test_conservation(self, seed):
        values = generate_values(150, 0, 40, seed=seed)
        bins = first_fit_decreasing(values, 50)
        packed = [v for b in bins for v in b.values]
        assert Counter(packed) == Counter(values)

    def test_never_more_bins_than_values(self):
        values = generate_values(100, 1, 100, rng=np.random.default_rng(3))
        bins = first_fit_decreasing(values, 100)
        assert len(bins) <= len(values)

    def test_bin_count_at_least_lower_bound(self):
        values = generate_values(300, 10, 90, seed=11)
        bins = first_fit_decreasing(values, 100)
        assert len(bins) >= lower_bound(values, 100)

    def test_unsorted_first_fit_respects_capacity(self):
        values = generate_values(100, 1, 30, seed=5)
        bins = first_fit(values, 30)
        assert all(sum(b.values) <= 30 for b in bins)


# ---------------------------------------------------------------------------
# 3. Benefit of sorting
# ---------------------------------------------------------------------------

class TestDecreasingOrder:
    @pytest.mark.parametrize(
        "values, capacity",
        [
            ([2, 2, 2, 8, 8, 8], 10),
            ([1, 1, 1, 1, 6, 6, 6, 6], 7),
            ([3, 7, 3, 7, 5, 5], 10),
        ],
    )
    def test_sorted_uses_fewer_or_equal_bins(self, values, capacity):
        assert len(first_fit_decreasing(values, capacity)) <= len(first_fit(values, capacity))

    def test_sorted_strictly_better_on_small_first(self):
        values = [2, 2, 2, 8, 8, 8]
        assert len(first_fit(values, 10)) == 4
        assert len(first_fit_decreasing(values, 10)) == 3


# ---------------------------------------------------------------------------
# 4. Errors and bounds
# ---------------------------------------------------------------------------

class TestErrors:
    def test_oversized_value_rejected(self):
        with pytest.raises(ValueTooLargeError) as exc_info:
            first_fit_decreasing([3, 12, 4], 10)
        assert exc_info.value.value == 12
        assert "exceeds bin capacity 10" in str(exc_info.value)

    def test_oversized_value_rejected_without_sort(self):
        with pytest.raises(ValueTooLargeError):
            first_fit([1, 2, 11], 10)


class TestLowerBound:
    @pytest.mark.parametrize(
        "values, capacity, expected",
        [
            ([], 10, 0),
            ([10], 10, 1),
            ([6, 5, 4, 3], 10, 2),
            ([5, 5, 5], 5, 3),
            ([1], 100, 1),
        ],
    )
    def test_lower_bound(self, values, capacity, expected):
        assert lower_bound(values, capacity) == expected
