"""Expectation checks that raise GridExpectationError on mismatch."""

import logging
import re
from typing import Union

from ..core.exceptions import GridExpectationError

logger = logging.getLogger(__name__)

Pattern = Union[str, re.Pattern, int, float]


def expect_equal(actual, expected, description: str) -> None:
    """
    Check that a value equals what the test expects.

    Raises:
        GridExpectationError: If actual != expected
    """
    if actual != expected:
        raise GridExpectationError(description, expected, actual)
    logger.debug(f"{description}: {actual!r} as expected")


def expect_match(actual_text: str, pattern: Pattern, description: str) -> None:
    """
    Check that text matches a pattern.

    A plain string is treated as a regular expression, so "^Name" and
    "Name$" anchor as usual. Other values such as numbers are converted
    with str() first. The pattern may match anywhere in the text.

    Args:
        actual_text: Text read from the page
        pattern: Regular expression string or compiled pattern
            (numbers are matched by their string form)
        description: What was being checked, for the failure message

    Raises:
        GridExpectationError: If the pattern is not found in the text
    """
    if not isinstance(pattern, (str, re.Pattern)):
        pattern = str(pattern)
    if re.search(pattern, actual_text) is None:
        expected = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        raise GridExpectationError(f"{description} to match", expected, actual_text)
    logger.debug(f"{description}: {actual_text!r} matches {pattern!r}")
