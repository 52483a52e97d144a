"""Errors and browser setup for the ui-grid helpers."""

from .exceptions import (
    GridTestError,
    GridExpectationError,
    GridIdNotSetError,
    GridConnectionError,
)
from .driver_factory import DriverFactory

__all__ = [
    "GridTestError",
    "GridExpectationError",
    "GridIdNotSetError",
    "GridConnectionError",
    "DriverFactory",
]
