"""Repeated-element (ng-repeat) lookups and the ui-grid selectors they use."""

import logging
import anyio
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.common.exceptions import NoSuchElementException

logger = logging.getLogger(__name__)


# Repeat expressions rendered by ui-grid templates
ROW_REPEATER = "(rowRenderIndex, row) in rowContainer.renderedRows track by $index"
COLUMN_REPEATER = "col in colContainer.renderedColumns track by col.colDef.name"
CELL_REPEATER = "(colRenderIndex, col) in colContainer.renderedColumns track by col.colDef.name"
MENU_ITEM_REPEATER = "item in menuItems"

# CSS classes
BODY_CONTAINER = ".ui-grid-render-container-body"
LEFT_CONTAINER = ".ui-grid-render-container-left"
HEADER = ".ui-grid-header"
FOOTER = ".ui-grid-footer"
COLUMN_RESIZER = ".ui-grid-column-resizer"
COLUMN_MENU_BUTTON = ".ui-grid-column-menu-button"
COLUMN_MENU = ".ui-grid-column-menu"
GRID_MENU_BUTTON = ".ui-grid-menu-button"
MENU_ITEM = ".ui-grid-menu-item"
FILTER_INPUT = ".ui-grid-filter-input"
CANCEL_ICON = ".ui-grid-icon-cancel"

# Attribute spellings AngularJS accepts for ng-repeat
REPEAT_ATTRIBUTES = (
    "ng-repeat",
    "ng_repeat",
    "data-ng-repeat",
    "x-ng-repeat",
    r"ng\:repeat",
)


def by_repeater(expression: str) -> tuple[str, str]:
    """
    Build a locator for elements rendered by an ng-repeat expression.

    Matches any element whose repeat attribute contains the expression,
    so "item in menuItems" also finds "item in menuItems | filter:x".

    Args:
        expression: The repeat expression, or a fragment of it

    Returns:
        (By, selector) tuple usable with find_element(s)
    """
    quoted = expression.replace("\\", "\\\\").replace('"', '\\"')
    selector = ", ".join(f'[{attr}*="{quoted}"]' for attr in REPEAT_ATTRIBUTES)
    return By.CSS_SELECTOR, selector


async def find_repeater_rows(parent, expression: str) -> list[WebElement]:
    """All elements below parent rendered by the repeat expression, in DOM order."""
    by, selector = by_repeater(expression)
    return await anyio.to_thread.run_sync(
        lambda: parent.find_elements(by, selector)
    )


async def find_repeater_row(parent, expression: str, index: int) -> WebElement:
    """
    Get the element at a zero-based position of a repeated collection.

    Args:
        parent: WebDriver or WebElement to search within
        expression: The repeat expression
        index: Zero-based position within the rendered collection

    Returns:
        The matching WebElement

    Raises:
        NoSuchElementException: If fewer than index + 1 elements are rendered
    """
    rows = await find_repeater_rows(parent, expression)
    if not 0 <= index < len(rows):
        raise NoSuchElementException(
            f"Index {index} out of range for repeater '{expression}' "
            f"({len(rows)} rendered)"
        )
    logger.debug(f"Repeater '{expression}' row {index} of {len(rows)}")
    return rows[index]


async def find_css(parent, selector: str) -> WebElement:
    """First element below parent matching a CSS selector."""
    return await anyio.to_thread.run_sync(
        lambda: parent.find_element(By.CSS_SELECTOR, selector)
    )


async def find_all_css(parent, selector: str) -> list[WebElement]:
    """All elements below parent matching a CSS selector."""
    return await anyio.to_thread.run_sync(
        lambda: parent.find_elements(By.CSS_SELECTOR, selector)
    )
