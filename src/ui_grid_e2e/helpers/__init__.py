"""Grid helpers organized by category."""

from .locators import (
    set_grid_id,
    get_grid_id,
    resolve_grid_id,
    get_grid,
    get_row,
    header_cell,
    header_left_cell,
    footer_cell,
    data_cell,
)
from .assertions import (
    expect_row_count,
    expect_header_column_count,
    expect_header_left_column_count,
    expect_footer_column_count,
    expect_header_cell_value_match,
    expect_footer_cell_value_match,
    expect_cell_value_match,
    expect_row_values_match,
    expect_filter_box_in_column,
)
from .actions import (
    click_header_cell,
    shift_click_header_cell,
    resize_header_cell,
    cancel_filter_in_column,
    enter_filter_in_column,
)
from .menus import (
    click_column_menu,
    click_column_menu_sort_asc,
    click_column_menu_sort_desc,
    click_column_menu_remove_sort,
    expect_visible_column_menu_items,
    expect_visible_grid_menu_items,
    click_grid_menu_item,
)

__all__ = [
    "set_grid_id",
    "get_grid_id",
    "resolve_grid_id",
    "get_grid",
    "get_row",
    "header_cell",
    "header_left_cell",
    "footer_cell",
    "data_cell",
    "expect_row_count",
    "expect_header_column_count",
    "expect_header_left_column_count",
    "expect_footer_column_count",
    "expect_header_cell_value_match",
    "expect_footer_cell_value_match",
    "expect_cell_value_match",
    "expect_row_values_match",
    "expect_filter_box_in_column",
    "click_header_cell",
    "shift_click_header_cell",
    "resize_header_cell",
    "cancel_filter_in_column",
    "enter_filter_in_column",
    "click_column_menu",
    "click_column_menu_sort_asc",
    "click_column_menu_sort_desc",
    "click_column_menu_remove_sort",
    "expect_visible_column_menu_items",
    "expect_visible_grid_menu_items",
    "click_grid_menu_item",
]
