"""Shared fixtures for the ffd_packing test suite."""

import os
import sys

import pytest

# Ensure the src directory is on the path when running without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ffd_packing.core.models import Bin, BinList  # noqa: E402


@pytest.fixture
def capacity():
    return 10


@pytest.fixture
def empty_bin(capacity):
    """Fresh empty Bin."""
    return Bin(capacity)


@pytest.fixture
def empty_bin_list(capacity):
    """Fresh empty BinList."""
    return BinList(capacity)


@pytest.fixture
def worked_example():
    """Capacity 10 with values already sorted descending."""
    return 10, [6, 5, 4, 3]
