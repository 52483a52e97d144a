"""Configuration settings for ui-grid end-to-end helpers."""

import logging
from typing import Optional
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    """Test configuration from environment variables."""

    # Grid under test
    grid_id: Optional[str] = None  # Default DOM id used when a helper gets no grid_id
    base_url: str = "http://localhost:9000"

    # Browser
    selenium_grid_url: Optional[str] = None  # None = start a local browser
    default_browser: str = "chrome"
    headless: bool = True
    window_width: int = 1280
    window_height: int = 1024
    browser_tests: bool = False  # Opt-in for tests that drive a real browser

    # Timeouts
    page_load_timeout_seconds: int = 30
    script_timeout_seconds: int = 30
    implicit_wait_seconds: int = 0
    grid_status_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "UI_GRID_E2E_"}

    @property
    def uses_remote_grid(self) -> bool:
        """Whether browsers are started on a Selenium Grid."""
        return bool(self.selenium_grid_url)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the shared format."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    logger.debug(f"Logging configured at {level_name}")


# Global settings instance
settings = Settings()
