"""Factory for creating WebDriver instances for grid tests."""

import logging
from typing import Optional
import anyio
import httpx
from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.common.exceptions import WebDriverException

from .exceptions import GridConnectionError

logger = logging.getLogger(__name__)


class DriverFactory:
    """
    Creates WebDriver instances, either local or on a Selenium Grid.

    All WebDriver creation is run in a worker thread so fixtures and
    helpers can await it, since Selenium's API is synchronous.
    """

    def __init__(
        self,
        grid_url: Optional[str] = None,
        page_load_timeout: int = 30,
        script_timeout: int = 30,
        implicit_wait: int = 0,
        status_timeout: float = 10.0,
    ):
        self.grid_url = grid_url
        self.page_load_timeout = page_load_timeout
        self.script_timeout = script_timeout
        self.implicit_wait = implicit_wait
        self.status_timeout = status_timeout

    @classmethod
    def from_settings(cls, settings) -> "DriverFactory":
        """Build a factory from a Settings instance."""
        return cls(
            grid_url=settings.selenium_grid_url,
            page_load_timeout=settings.page_load_timeout_seconds,
            script_timeout=settings.script_timeout_seconds,
            implicit_wait=settings.implicit_wait_seconds,
            status_timeout=settings.grid_status_timeout_seconds,
        )

    @property
    def target(self) -> str:
        """Human-readable description of where browsers are started."""
        return self.grid_url or "local browser"

    async def check_grid_ready(self) -> bool:
        """
        Check whether the Selenium Grid reports itself ready.

        Returns:
            True if the grid /status endpoint answers with ready: true.
            Always True when no grid URL is configured.
        """
        if not self.grid_url:
            return True

        try:
            async with httpx.AsyncClient(timeout=self.status_timeout) as client:
                response = await client.get(f"{self.grid_url.rstrip('/')}/status")
        except httpx.HTTPError as e:
            logger.warning(f"Selenium Grid status check failed: {e}")
            return False

        if response.status_code != 200:
            logger.warning(
                f"Selenium Grid status returned HTTP {response.status_code}"
            )
            return False

        try:
            status = response.json()
        except ValueError:
            logger.warning(f"Selenium Grid status at {self.grid_url} is not JSON")
            return False

        value = status.get("value") if isinstance(status, dict) else None
        if not isinstance(value, dict):
            logger.warning(f"Unexpected Selenium Grid status payload: {status!r}")
            return False

        ready = value.get("ready") is True
        logger.info(f"Selenium Grid at {self.grid_url} ready: {ready}")
        return ready

    async def create(
        self,
        browser: str = "chrome",
        headless: bool = True,
        window_width: Optional[int] = None,
        window_height: Optional[int] = None,
    ) -> WebDriver:
        """
        Create a new WebDriver.

        Args:
            browser: Browser type (chrome, firefox, edge)
            headless: Run browser in headless mode
            window_width: Optional window width
            window_height: Optional window height

        Returns:
            Configured WebDriver instance

        Raises:
            GridConnectionError: If the browser cannot be started
            ValueError: If browser type is not supported
        """
        options = self._build_options(
            browser=browser,
            headless=headless,
            window_width=window_width,
            window_height=window_height,
        )

        try:
            driver = await anyio.to_thread.run_sync(
                lambda: self._start(browser.lower(), options)
            )

            await anyio.to_thread.run_sync(
                lambda: driver.set_page_load_timeout(self.page_load_timeout)
            )
            await anyio.to_thread.run_sync(
                lambda: driver.set_script_timeout(self.script_timeout)
            )
            await anyio.to_thread.run_sync(
                lambda: driver.implicitly_wait(self.implicit_wait)
            )

            if window_width and window_height:
                await anyio.to_thread.run_sync(
                    lambda: driver.set_window_size(window_width, window_height)
                )

        except WebDriverException as e:
            raise GridConnectionError(self.target, str(e)) from e

        logger.info(f"Started {browser} on {self.target}")
        return driver

    def _start(self, browser: str, options) -> WebDriver:
        """Start the browser, remotely when a grid URL is configured."""
        if self.grid_url:
            return webdriver.Remote(command_executor=self.grid_url, options=options)

        local_drivers = {
            "chrome": webdriver.Chrome,
            "firefox": webdriver.Firefox,
            "edge": webdriver.Edge,
        }
        return local_drivers[browser](options=options)

    def _build_options(
        self,
        browser: str,
        headless: bool,
        window_width: Optional[int],
        window_height: Optional[int],
    ):
        """Build browser-specific options object."""
        options_map = {
            "chrome": webdriver.ChromeOptions,
            "firefox": webdriver.FirefoxOptions,
            "edge": webdriver.EdgeOptions,
        }

        if browser.lower() not in options_map:
            raise ValueError(
                f"Unsupported browser: {browser}. "
                f"Supported browsers: {list(options_map.keys())}"
            )

        options = options_map[browser.lower()]()

        if browser.lower() in ("chrome", "edge"):
            options.add_argument("--no-sandbox")
            options.add_argument("--disable-dev-shm-usage")
            if headless:
                options.add_argument("--headless=new")
            if window_width and window_height:
                options.add_argument(f"--window-size={window_width},{window_height}")

        elif browser.lower() == "firefox":
            if headless:
                options.add_argument("-headless")

        return options
