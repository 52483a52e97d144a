"""Selenium locator and assertion helpers for ui-grid end-to-end tests."""

__version__ = "0.1.0"

from .helpers import *  # noqa: F401,F403
from .helpers import __all__  # noqa: F401
