"""Fixtures for integration tests against a real browser."""

from pathlib import Path
from urllib.parse import quote

import anyio
import pytest
import pytest_asyncio
from selenium.webdriver.common.by import By

from ui_grid_e2e import set_grid_id

PAGE = Path(__file__).parent / "pages" / "grid.html"


@pytest_asyncio.fixture
async def grid_page(grid_driver, default_grid_id):
    """Load the static grid page and target #myGrid by default.

    The page is sent as a data: URL so it also loads on a remote grid.
    """
    url = "data:text/html;charset=utf-8," + quote(PAGE.read_text())
    await anyio.to_thread.run_sync(lambda: grid_driver.get(url))
    set_grid_id("myGrid")
    return grid_driver


async def read_log(driver) -> str:
    """Entries the page logged from click handlers."""
    return await anyio.to_thread.run_sync(
        lambda: driver.find_element(By.ID, "log").text
    )
