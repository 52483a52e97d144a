"""Count and text-match assertions against the grid."""

from typing import Optional, Sequence
from selenium.webdriver.common.by import By

from ..utils.dom_helpers import count_elements, get_text
from ..utils.expectations import Pattern, expect_equal, expect_match
from ..utils.repeater import (
    BODY_CONTAINER,
    CELL_REPEATER,
    COLUMN_REPEATER,
    FILTER_INPUT,
    FOOTER,
    HEADER,
    LEFT_CONTAINER,
    ROW_REPEATER,
    by_repeater,
    find_css,
    find_repeater_row,
)
from .locators import (
    data_cell,
    footer_cell,
    get_grid,
    get_row,
    header_cell,
)


async def expect_row_count(
    driver, expected: int, grid_id: Optional[str] = None
) -> None:
    """
    Check that the grid has the expected number of rendered rows.

    Only rendered rows are counted. With row virtualisation, grids with
    more than about ten rows will not render all of them, so this is
    meant for small data sets.

    Example:
        await expect_row_count(driver, 2, "myGrid")
    """
    grid = await get_grid(driver, grid_id)
    count = await count_elements(grid, *by_repeater(ROW_REPEATER))
    expect_equal(count, expected, "rendered row count")


async def _expect_header_columns(driver, container: str, expected: int, grid_id):
    grid = await get_grid(driver, grid_id)
    render_container = await find_css(grid, container)
    header = await find_css(render_container, HEADER)
    count = await count_elements(header, *by_repeater(COLUMN_REPEATER))
    expect_equal(count, expected, f"header column count in {container}")


async def expect_header_column_count(
    driver, expected: int, grid_id: Optional[str] = None
) -> None:
    """
    Check the number of header columns in the body render container.

    With pinned columns, also check expect_header_left_column_count.
    """
    await _expect_header_columns(driver, BODY_CONTAINER, expected, grid_id)


async def expect_header_left_column_count(
    driver, expected: int, grid_id: Optional[str] = None
) -> None:
    """Check the number of header columns in the left render container."""
    await _expect_header_columns(driver, LEFT_CONTAINER, expected, grid_id)


async def expect_footer_column_count(
    driver, expected: int, grid_id: Optional[str] = None
) -> None:
    """Check the number of footer columns."""
    grid = await get_grid(driver, grid_id)
    footer = await find_css(grid, FOOTER)
    count = await count_elements(footer, *by_repeater(COLUMN_REPEATER))
    expect_equal(count, expected, "footer column count")


async def expect_header_cell_value_match(
    driver, col: int, expected: Pattern, grid_id: Optional[str] = None
) -> None:
    """
    Check that a header cell's text matches a regex or string.

    Example:
        await expect_header_cell_value_match(driver, 2, "^Company", "myGrid")
    """
    cell = await header_cell(driver, col, grid_id)
    expect_match(await get_text(cell), expected, f"header cell {col}")


async def expect_footer_cell_value_match(
    driver, col: int, expected: Pattern, grid_id: Optional[str] = None
) -> None:
    """Check that a footer cell's text matches a regex or string."""
    cell = await footer_cell(driver, col, grid_id)
    expect_match(await get_text(cell), expected, f"footer cell {col}")


async def expect_cell_value_match(
    driver, row: int, col: int, expected: Pattern, grid_id: Optional[str] = None
) -> None:
    """
    Check that a data cell's text matches a regex or string.

    Example:
        await expect_cell_value_match(driver, 0, 2, "CellValue", "myGrid")
    """
    cell = await data_cell(driver, row, col, grid_id)
    expect_match(await get_text(cell), expected, f"cell {row},{col}")


async def expect_row_values_match(
    driver, row: int, expected_values: Sequence[Pattern], grid_id: Optional[str] = None
) -> None:
    """
    Check a row's cells against a list of regexes or strings.

    Cell i is checked against expected_values[i]; cells past the end of
    the list are not checked.

    Example:
        await expect_row_values_match(
            driver, 0, ["CellValue1", "^cellvalue2", "cellValue3$"], "myGrid"
        )
    """
    grid_row = await get_row(driver, row, grid_id)
    for i, expected in enumerate(expected_values):
        cell = await find_repeater_row(grid_row, CELL_REPEATER, i)
        expect_match(await get_text(cell), expected, f"row {row} column {i}")


async def expect_filter_box_in_column(
    driver, col: int, count: int, grid_id: Optional[str] = None
) -> None:
    """
    Check how many filter boxes a column header has.

    Args:
        driver: WebDriver
        col: Zero-based rendered column
        count: 0 for no filter, 1 for a standard filter, 2 for a
            greater-than / less-than pair
        grid_id: Optional grid id override
    """
    cell = await header_cell(driver, col, grid_id)
    found = await count_elements(cell, By.CSS_SELECTOR, FILTER_INPUT)
    expect_equal(found, count, f"filter boxes in column {col}")
