"""Shared utilities for the ui-grid helpers."""

from .repeater import by_repeater, find_repeater_row, find_repeater_rows
from .dom_helpers import count_displayed, count_elements, get_text
from .expectations import expect_equal, expect_match

__all__ = [
    "by_repeater",
    "find_repeater_row",
    "find_repeater_rows",
    "count_displayed",
    "count_elements",
    "get_text",
    "expect_equal",
    "expect_match",
]
