"""Utility functions for Latin Drill."""

from .logging_utils import configure_logging
from .text_utils import (
    compare_strings,
    format_time,
    fuzzy_search_score,
    normalize_for_search,
    string_includes,
    string_starts_with,
)

__all__ = [
    "configure_logging",
    "normalize_for_search",
    "compare_strings",
    "string_includes",
    "string_starts_with",
    "fuzzy_search_score",
    "format_time",
]
