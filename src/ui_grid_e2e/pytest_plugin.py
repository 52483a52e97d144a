"""Pytest fixtures for driving ui-grid pages.

Registered through the pytest11 entry point, so installing the package
makes the fixtures available to any test suite.
"""

import logging

import anyio
import pytest
import pytest_asyncio

from .config import Settings, configure_logging
from .core.driver_factory import DriverFactory
from .helpers.locators import get_grid_id, set_grid_id

logger = logging.getLogger(__name__)


def pytest_configure(config):
    """
    Set up logging when it is asked for.

    Only runs with UI_GRID_E2E_LOG_LEVEL or UI_GRID_E2E_BROWSER_TESTS set,
    so other projects' test sessions keep their own logging setup.
    """
    current = Settings()
    if current.browser_tests or "log_level" in current.model_fields_set:
        configure_logging(current.log_level)


@pytest.fixture
def grid_settings():
    """Settings read fresh from the environment."""
    return Settings()


@pytest.fixture
def default_grid_id():
    """
    Restore the default grid id after the test.

    Yields the default in effect when the test started, so tests can
    call set_grid_id() freely.
    """
    saved = get_grid_id()
    yield saved
    set_grid_id(saved)


@pytest_asyncio.fixture
async def grid_driver(grid_settings):
    """
    A WebDriver for the configured browser, quit after the test.

    Skips the test unless UI_GRID_E2E_BROWSER_TESTS is set, or when the
    configured Selenium Grid is not ready.
    """
    if not grid_settings.browser_tests:
        pytest.skip("browser tests disabled (set UI_GRID_E2E_BROWSER_TESTS=1)")

    factory = DriverFactory.from_settings(grid_settings)
    if not await factory.check_grid_ready():
        pytest.skip(f"Selenium Grid not ready at {factory.target}")

    driver = await factory.create(
        browser=grid_settings.default_browser,
        headless=grid_settings.headless,
        window_width=grid_settings.window_width,
        window_height=grid_settings.window_height,
    )

    yield driver

    try:
        await anyio.to_thread.run_sync(driver.quit)
    except Exception as e:
        logger.warning(f"Error quitting driver: {e}")
