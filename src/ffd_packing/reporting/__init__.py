"""Reporting module: text rendering of values and packed bins."""

from .report import (
    format_bin,
    format_bins,
    format_report,
    format_summary,
    format_values,
)

__all__ = [
    "format_values",
    "format_bin",
    "format_bins",
    "format_summary",
    "format_report",
]
