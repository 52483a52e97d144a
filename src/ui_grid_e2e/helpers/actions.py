"""Click, drag and typing actions on grid headers."""

import logging
from typing import Optional
import anyio
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.keys import Keys

from ..utils.repeater import (
    CANCEL_ICON,
    COLUMN_MENU_BUTTON,
    COLUMN_RESIZER,
    FILTER_INPUT,
    find_css,
)
from .locators import header_cell

logger = logging.getLogger(__name__)


async def click_header_cell(driver, col: int, grid_id: Optional[str] = None) -> None:
    """
    Click a column header, which usually sorts by that column.

    Example:
        await click_header_cell(driver, 0, "myGrid")
    """
    cell = await header_cell(driver, col, grid_id)
    logger.debug(f"Clicking header cell {col}")
    await anyio.to_thread.run_sync(cell.click)


async def shift_click_header_cell(
    driver, col: int, grid_id: Optional[str] = None
) -> None:
    """Shift-click a column header, which usually adds it to the sort."""
    cell = await header_cell(driver, col, grid_id)
    logger.debug(f"Shift-clicking header cell {col}")
    await anyio.to_thread.run_sync(
        lambda: ActionChains(driver)
        .key_down(Keys.SHIFT)
        .click(cell)
        .key_up(Keys.SHIFT)
        .perform()
    )


async def resize_header_cell(driver, col: int, grid_id: Optional[str] = None) -> None:
    """
    Drag a column's left resizer towards its column menu button.

    This widens column col - 1.

    Example:
        await resize_header_cell(driver, 1, "myGrid")
    """
    cell = await header_cell(driver, col, grid_id)
    resizer = await find_css(cell, COLUMN_RESIZER)
    menu_button = await find_css(cell, COLUMN_MENU_BUTTON)

    logger.debug(f"Resizing header cell {col}")
    await anyio.to_thread.run_sync(
        lambda: ActionChains(driver)
        .click_and_hold(resizer)
        .move_to_element(menu_button)
        .release()
        .perform()
    )


async def cancel_filter_in_column(
    driver, col: int, grid_id: Optional[str] = None
) -> None:
    """Clear a column's filter with its cancel icon."""
    cell = await header_cell(driver, col, grid_id)
    cancel = await find_css(cell, CANCEL_ICON)
    await anyio.to_thread.run_sync(cancel.click)


async def enter_filter_in_column(
    driver, col: int, value: str, grid_id: Optional[str] = None
) -> None:
    """
    Type a value into a column's filter box.

    Example:
        await enter_filter_in_column(driver, 0, "Ethel", "myGrid")
    """
    cell = await header_cell(driver, col, grid_id)
    filter_input = await find_css(cell, FILTER_INPUT)
    logger.debug(f"Entering filter {value!r} in column {col}")
    await anyio.to_thread.run_sync(lambda: filter_input.send_keys(value))
