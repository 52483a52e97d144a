"""Grid, row, header, footer and cell locators.

Every helper takes the WebDriver first and an optional trailing grid_id.
When grid_id is omitted the default set with set_grid_id() is used.
"""

import logging
from typing import Optional
import anyio
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from ..config import settings
from ..core.exceptions import GridIdNotSetError
from ..utils.repeater import (
    BODY_CONTAINER,
    CELL_REPEATER,
    COLUMN_REPEATER,
    FOOTER,
    HEADER,
    LEFT_CONTAINER,
    ROW_REPEATER,
    find_css,
    find_repeater_row,
)

logger = logging.getLogger(__name__)

_grid_id: Optional[str] = settings.grid_id


def set_grid_id(grid_id: Optional[str]) -> None:
    """
    Set the grid targeted by helpers called without a grid_id.

    Example:
        set_grid_id("myGrid")
        await expect_row_count(driver, 3)  # checks #myGrid
    """
    global _grid_id
    _grid_id = grid_id
    logger.debug(f"Default grid id set to {grid_id!r}")


def get_grid_id() -> Optional[str]:
    """The default grid id, or None if none has been set."""
    return _grid_id


def resolve_grid_id(grid_id: Optional[str] = None) -> str:
    """
    Pick the grid id a helper should use.

    Args:
        grid_id: Explicit grid id; takes precedence when given

    Returns:
        The explicit grid id, else the stored default

    Raises:
        GridIdNotSetError: If neither is set
    """
    grid_name = grid_id if grid_id else _grid_id
    if not grid_name:
        raise GridIdNotSetError()
    return grid_name


async def get_grid(driver, grid_id: Optional[str] = None) -> WebElement:
    """
    Get the grid element.

    Args:
        driver: WebDriver
        grid_id: DOM id of the grid (default: the id from set_grid_id)

    Returns:
        The grid's root element
    """
    grid_name = resolve_grid_id(grid_id)
    logger.debug(f"Locating grid #{grid_name}")
    return await anyio.to_thread.run_sync(
        lambda: driver.find_element(By.ID, grid_name)
    )


async def get_row(driver, row: int, grid_id: Optional[str] = None) -> WebElement:
    """
    Get a rendered row of the grid.

    The grid virtualises rows, so only rendered rows can be reached and
    row 0 is the first rendered row.

    Example:
        row = await get_row(driver, 0, "myGrid")
    """
    grid = await get_grid(driver, grid_id)
    return await find_repeater_row(grid, ROW_REPEATER, row)


async def _header(driver, container: str, grid_id: Optional[str]) -> WebElement:
    grid = await get_grid(driver, grid_id)
    render_container = await find_css(grid, container)
    return await find_css(render_container, HEADER)


async def header_cell(driver, col: int, grid_id: Optional[str] = None) -> WebElement:
    """
    Get a header cell of the body render container.

    Args:
        driver: WebDriver
        col: Zero-based column within the rendered columns
        grid_id: Optional grid id override
    """
    header = await _header(driver, BODY_CONTAINER, grid_id)
    return await find_repeater_row(header, COLUMN_REPEATER, col)


async def header_left_cell(driver, col: int, grid_id: Optional[str] = None) -> WebElement:
    """Get a header cell of the left (pinned) render container."""
    header = await _header(driver, LEFT_CONTAINER, grid_id)
    return await find_repeater_row(header, COLUMN_REPEATER, col)


async def footer_cell(driver, col: int, grid_id: Optional[str] = None) -> WebElement:
    """Get a footer cell by zero-based rendered column."""
    grid = await get_grid(driver, grid_id)
    footer = await find_css(grid, FOOTER)
    return await find_repeater_row(footer, COLUMN_REPEATER, col)


async def data_cell(
    driver, row: int, col: int, grid_id: Optional[str] = None
) -> WebElement:
    """
    Get a data cell.

    Example:
        cell = await data_cell(driver, 2, 1, "myGrid")
    """
    grid_row = await get_row(driver, row, grid_id)
    return await find_repeater_row(grid_row, CELL_REPEATER, col)
