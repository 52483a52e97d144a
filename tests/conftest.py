"""Pytest fixtures for testing the ui-grid helpers."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from ui_grid_e2e.helpers import locators
from ui_grid_e2e.utils import repeater
from ui_grid_e2e.utils.repeater import by_repeater


class FakeElement:
    """In-memory stand-in for a WebElement (or the WebDriver root).

    Lookups only answer the exact (by, selector) pairs registered with
    add(), which pins down the query chain each helper must use.
    """

    def __init__(self, name: str, text: str = "", displayed: bool = True):
        self.name = name
        self.text = text
        self.displayed = displayed
        self.children = {}
        self.click = MagicMock(name=f"{name}.click")
        self.send_keys = MagicMock(name=f"{name}.send_keys")

    def __repr__(self):
        return f"<FakeElement {self.name}>"

    def add(self, locator, *elements):
        self.children.setdefault(locator, []).extend(elements)
        return self

    def is_displayed(self):
        return self.displayed

    def find_elements(self, by, selector):
        return list(self.children.get((by, selector), []))

    def find_element(self, by, selector):
        found = self.find_elements(by, selector)
        if not found:
            raise NoSuchElementException(f"{self.name}: {by}={selector}")
        return found[0]


def css(selector):
    return (By.CSS_SELECTOR, selector)


def cells(prefix, texts, displayed=None):
    displayed = displayed or [True] * len(texts)
    return [
        FakeElement(f"{prefix}{i}", text=text, displayed=shown)
        for i, (text, shown) in enumerate(zip(texts, displayed))
    ]


def build_grid(grid_id, row_texts, column_names):
    """Build a fake ui-grid with rows, headers, footer and menus."""
    grid = FakeElement(grid_id)

    # Header, body render container
    header_cells = cells(f"{grid_id}.header", column_names)
    header = FakeElement(f"{grid_id}.header").add(
        by_repeater(repeater.COLUMN_REPEATER), *header_cells
    )
    body = FakeElement(f"{grid_id}.body").add(css(repeater.HEADER), header)

    # Header, left render container
    left_cells = cells(f"{grid_id}.left", ["Pinned"])
    left_header = FakeElement(f"{grid_id}.left_header").add(
        by_repeater(repeater.COLUMN_REPEATER), *left_cells
    )
    left = FakeElement(f"{grid_id}.left").add(css(repeater.HEADER), left_header)

    # Per header cell: filters, cancel icon, menu button, resizers
    filter_counts = [1, 2, 0]
    for i, cell in enumerate(header_cells):
        cell.filters = [
            FakeElement(f"{cell.name}.filter{j}")
            for j in range(filter_counts[i % len(filter_counts)])
        ]
        cell.cancel = FakeElement(f"{cell.name}.cancel")
        cell.menu_button = FakeElement(f"{cell.name}.menu_button")
        cell.resizers = [
            FakeElement(f"{cell.name}.resizer_left"),
            FakeElement(f"{cell.name}.resizer_right"),
        ]
        if cell.filters:
            cell.add(css(repeater.FILTER_INPUT), *cell.filters)
        cell.add(css(repeater.CANCEL_ICON), cell.cancel)
        cell.add(css(repeater.COLUMN_MENU_BUTTON), cell.menu_button)
        cell.add(css(repeater.COLUMN_RESIZER), *cell.resizers)

    # Footer
    footer_cells = cells(f"{grid_id}.footer", ["Total: 3", "Avg: 40"])
    footer = FakeElement(f"{grid_id}.footer").add(
        by_repeater(repeater.COLUMN_REPEATER), *footer_cells
    )

    # Rows and cells
    rows = []
    for r, texts in enumerate(row_texts):
        row = FakeElement(f"{grid_id}.row{r}")
        row.cells = cells(f"{row.name}.cell", texts)
        row.add(by_repeater(repeater.CELL_REPEATER), *row.cells)
        rows.append(row)

    # Column menu: sort asc, sort desc, remove sort (hidden), hide column
    column_menu_items = cells(
        f"{grid_id}.column_menu.item",
        ["Sort Ascending", "Sort Descending", "Remove Sort", "Hide Column"],
        displayed=[True, True, False, True],
    )
    column_menu = (
        FakeElement(f"{grid_id}.column_menu")
        .add(css(repeater.MENU_ITEM), *column_menu_items)
        .add(by_repeater(repeater.MENU_ITEM_REPEATER), *column_menu_items)
    )

    # Grid menu: two visible column toggles, one hidden export item
    grid_menu_items = cells(
        f"{grid_id}.grid_menu.item",
        ["Export", "Name", "Gender"],
        displayed=[False, True, True],
    )
    grid_menu_button = (
        FakeElement(f"{grid_id}.grid_menu_button")
        .add(css(repeater.MENU_ITEM), *grid_menu_items)
        .add(by_repeater(repeater.MENU_ITEM_REPEATER), *grid_menu_items)
    )

    grid.add(css(repeater.BODY_CONTAINER), body)
    grid.add(css(repeater.LEFT_CONTAINER), left)
    grid.add(css(repeater.FOOTER), footer)
    grid.add(by_repeater(repeater.ROW_REPEATER), *rows)
    grid.add(css(repeater.COLUMN_MENU), column_menu)
    grid.add(css(repeater.GRID_MENU_BUTTON), grid_menu_button)

    return SimpleNamespace(
        element=grid,
        rows=rows,
        header_cells=header_cells,
        left_cells=left_cells,
        footer_cells=footer_cells,
        column_menu_items=column_menu_items,
        grid_menu_button=grid_menu_button,
        grid_menu_items=grid_menu_items,
    )


@pytest.fixture(autouse=True)
def reset_grid_id():
    """Isolate the process-wide default grid id between tests."""
    saved = locators.get_grid_id()
    locators.set_grid_id(None)
    yield
    locators.set_grid_id(saved)


@pytest.fixture
def grid():
    """The main fake grid, #myGrid."""
    return build_grid(
        "myGrid",
        row_texts=[
            ["Ethel Price", "female", "Enersol"],
            ["Claudine Neal", "female", "Sealoud"],
            ["Beryl Rice", "female", "Velity"],
        ],
        column_names=["Name", "Gender", "Company"],
    )


@pytest.fixture
def other_grid():
    """A second fake grid, #otherGrid, with different contents."""
    return build_grid(
        "otherGrid",
        row_texts=[["Wilder Gonzales", "male", "Geekko"]],
        column_names=["Full Name", "Sex", "Employer"],
    )


@pytest.fixture
def driver(grid, other_grid):
    """Fake WebDriver whose page holds both grids."""
    root = FakeElement("driver")
    root.add((By.ID, "myGrid"), grid.element)
    root.add((By.ID, "otherGrid"), other_grid.element)
    return root
