"""Tests for environment-driven settings."""

from ui_grid_e2e.config import Settings


def test_defaults(monkeypatch):
    """Should start a local headless Chrome with no default grid."""
    for name in ("GRID_ID", "SELENIUM_GRID_URL", "DEFAULT_BROWSER", "HEADLESS"):
        monkeypatch.delenv(f"UI_GRID_E2E_{name}", raising=False)

    settings = Settings()

    assert settings.grid_id is None
    assert settings.default_browser == "chrome"
    assert settings.headless is True
    assert settings.uses_remote_grid is False


def test_env_prefix(monkeypatch):
    """Should read UI_GRID_E2E_ prefixed variables."""
    monkeypatch.setenv("UI_GRID_E2E_GRID_ID", "myGrid")
    monkeypatch.setenv("UI_GRID_E2E_SELENIUM_GRID_URL", "http://grid:4444")
    monkeypatch.setenv("UI_GRID_E2E_HEADLESS", "false")

    settings = Settings()

    assert settings.grid_id == "myGrid"
    assert settings.selenium_grid_url == "http://grid:4444"
    assert settings.headless is False
    assert settings.uses_remote_grid is True
