"""Domain-specific exceptions for the ui-grid end-to-end helpers."""


class GridTestError(Exception):
    """Base exception for all ui-grid helper errors."""

    pass


class GridExpectationError(GridTestError, AssertionError):
    """Raised when an expectation about the grid is not met."""

    def __init__(self, description: str, expected, actual):
        self.description = description
        self.expected = expected
        self.actual = actual
        super().__init__(f"{description}: expected {expected!r}, got {actual!r}")


class GridIdNotSetError(GridTestError):
    """Raised when no grid id was passed and no default has been set."""

    def __init__(self):
        super().__init__(
            "No grid id given and no default set; call set_grid_id() "
            "or set UI_GRID_E2E_GRID_ID"
        )


class GridConnectionError(GridTestError):
    """Raised when a browser session cannot be started."""

    def __init__(self, target: str, message: str):
        self.target = target
        super().__init__(f"Failed to start browser on {target}: {message}")
