"""Text rendering of packing inputs and results.

Every function returns a string; printing is left to the caller.
"""

from __future__ import annotations

from typing import Sequence

from ffd_packing.algorithms.first_fit_decreasing import lower_bound
from ffd_packing.core.models import Bin, BinList


def format_values(values: Sequence[int]) -> str:
    """Render the values to pack with their count, total and average.

    The average is integer-truncated and reported as 0 for an empty list.

    Example:
        >>> print(format_values([6, 5, 4, 3]))
        Numbers:
        <BLANKLINE>
            6     5     4     3
        <BLANKLINE>
        Count:    4
        Total:   18
        Average:    4
    """
    count = len(values)
    total = sum(values)
    average = total // count if count else 0

    lines = [
        "Numbers:",
        "",
        " ".join(f" {v:4d}" for v in values),
        "",
        f"Count: {count:4d}",
        f"Total: {total:4d}",
        f"Average: {average:4d}",
    ]
    return "\n".join(lines)


def format_bin(index: int, bin_: Bin) -> str:
    """Render one bin as a single line.

    Example:
        >>> from ffd_packing.core.models import Bin
        >>> b = Bin(10)
        >>> b.try_insert(6), b.try_insert(4)
        (True, True)
        >>> format_bin(0, b)
        ' {0000} Left:    0 | Count:    2 | Items:    6,    4'
    """
    items = ", ".join(f"{v:4d}" for v in bin_.values)
    return f" {{{index:04d}}} Left: {bin_.remaining:4d} | Count: {bin_.count:4d} | Items: {items}"


def format_bins(bins: BinList) -> str:
    """Render every bin, one per line, indexed from 0 in creation order."""
    return "\n".join(format_bin(i, b) for i, b in enumerate(bins))


def format_summary(bins: BinList, values: Sequence[int]) -> str:
    """Render bin count, lower bound and average utilization."""
    if len(bins):
        avg_util = sum(b.utilization for b in bins) / len(bins) * 100
    else:
        avg_util = 0.0

    lines = [
        "=" * 60,
        f"Bin capacity: {bins.capacity}",
        f"Bins used:    {len(bins)}",
        f"Lower bound:  {lower_bound(values, bins.capacity)}",
        f"Utilization:  {avg_util:.2f}%",
        "=" * 60,
    ]
    return "\n".join(lines)


def format_report(values: Sequence[int], bins: BinList) -> str:
    """Render the full report: values, bins and summary."""
    sections = [format_values(values), format_bins(bins), format_summary(bins, values)]
    return "\n\n".join(s for s in sections if s) + "\n"
