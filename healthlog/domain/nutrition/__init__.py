"""Nutrition domain utilities."""

from .overview import build_overview
from .summary import (
    TRACKED_NUTRIENTS,
    get_deficiencies,
    get_percentage,
    percent_of_daily_values,
    summarize,
    summarize_entries,
)

__all__ = [
    "TRACKED_NUTRIENTS",
    "build_overview",
    "get_deficiencies",
    "get_percentage",
    "percent_of_daily_values",
    "summarize",
    "summarize_entries",
]
