"""Column menu and grid menu helpers.

Menu items are addressed by their position in the menu's repeater.
Reordering a menu breaks every test that uses a raw item number, so
wrap item numbers in named helpers such as click_column_menu_sort_asc.
"""

import logging
from typing import Optional
import anyio

from ..utils.dom_helpers import count_displayed
from ..utils.expectations import expect_equal
from ..utils.repeater import (
    COLUMN_MENU,
    COLUMN_MENU_BUTTON,
    GRID_MENU_BUTTON,
    MENU_ITEM,
    MENU_ITEM_REPEATER,
    find_all_css,
    find_css,
    find_repeater_row,
)
from .locators import get_grid, header_cell

logger = logging.getLogger(__name__)

SORT_ASC_ITEM = 0
SORT_DESC_ITEM = 1
REMOVE_SORT_ITEM = 2


async def _open_column_menu(driver, col: int, grid_id: Optional[str]):
    cell = await header_cell(driver, col, grid_id)
    button = await find_css(cell, COLUMN_MENU_BUTTON)
    logger.debug(f"Opening column menu of column {col}")
    await anyio.to_thread.run_sync(button.click)

    grid = await get_grid(driver, grid_id)
    return await find_css(grid, COLUMN_MENU)


async def _open_grid_menu(driver, grid_id: Optional[str]):
    grid = await get_grid(driver, grid_id)
    button = await find_css(grid, GRID_MENU_BUTTON)
    logger.debug("Opening grid menu")
    await anyio.to_thread.run_sync(button.click)
    return button


async def click_column_menu(
    driver, col: int, item: int, grid_id: Optional[str] = None
) -> None:
    """
    Click an item in a column's menu.

    Args:
        driver: WebDriver
        col: Zero-based rendered column whose menu to open
        item: Zero-based position of the item in the menu
        grid_id: Optional grid id override

    Example:
        await click_column_menu(driver, 0, 0, "myGrid")
    """
    column_menu = await _open_column_menu(driver, col, grid_id)
    menu_item = await find_repeater_row(column_menu, MENU_ITEM_REPEATER, item)
    await anyio.to_thread.run_sync(menu_item.click)


async def click_column_menu_sort_asc(
    driver, col: int, grid_id: Optional[str] = None
) -> None:
    """Sort ascending from a column's menu."""
    await click_column_menu(driver, col, SORT_ASC_ITEM, grid_id)


async def click_column_menu_sort_desc(
    driver, col: int, grid_id: Optional[str] = None
) -> None:
    """Sort descending from a column's menu."""
    await click_column_menu(driver, col, SORT_DESC_ITEM, grid_id)


async def click_column_menu_remove_sort(
    driver, col: int, grid_id: Optional[str] = None
) -> None:
    """Remove a column's sort from its menu."""
    await click_column_menu(driver, col, REMOVE_SORT_ITEM, grid_id)


async def expect_visible_column_menu_items(
    driver, col: int, expected: int, grid_id: Optional[str] = None
) -> int:
    """
    Open a column's menu and check how many of its items are visible.

    Returns:
        The number of visible items
    """
    column_menu = await _open_column_menu(driver, col, grid_id)
    items = await find_all_css(column_menu, MENU_ITEM)
    displayed = await count_displayed(items)
    expect_equal(displayed, expected, f"visible column menu items in column {col}")
    return displayed


async def expect_visible_grid_menu_items(
    driver, expected: int, grid_id: Optional[str] = None
) -> int:
    """
    Open the grid menu and check how many of its items are visible.

    Example:
        await expect_visible_grid_menu_items(driver, 3, "myGrid")

    Returns:
        The number of visible items
    """
    button = await _open_grid_menu(driver, grid_id)
    items = await find_all_css(button, MENU_ITEM)
    displayed = await count_displayed(items)
    expect_equal(displayed, expected, "visible grid menu items")
    return displayed


async def click_grid_menu_item(
    driver, item: int, grid_id: Optional[str] = None
) -> None:
    """
    Click a grid menu item by its position in the menu's repeater.

    Hidden items still take up a position, so the number may differ
    from what is seen on screen.
    """
    button = await _open_grid_menu(driver, grid_id)
    menu_item = await find_repeater_row(button, MENU_ITEM_REPEATER, item)
    await anyio.to_thread.run_sync(menu_item.click)
