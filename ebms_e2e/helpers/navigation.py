"""
Navigation Helpers

Small page-level utilities shared by specs and fixtures.
"""
import logging
import re
from pathlib import Path
from typing import Optional, Pattern, Union

from playwright.sync_api import Page, expect

from ..config import EnvironmentConfig, get_environment_config

logger = logging.getLogger(__name__)

SCREENSHOT_DIR = Path("test-results") / "screenshots"

UrlPattern = Union[str, Pattern[str]]


def resolve_url(path: str, base_url: str) -> str:
    """Join a relative path onto ``base_url``; absolute URLs pass through."""
    if re.match(r"^[a-z][a-z0-9+.-]*://", path, re.IGNORECASE):
        return path
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base_url.rstrip('/')}{path}"


def navigate_to_page(page: Page, path: str, config: Optional[EnvironmentConfig] = None) -> None:
    config = config or get_environment_config()
    page.goto(
        resolve_url(path, config.base_url),
        wait_until="domcontentloaded",
        timeout=config.navigation_timeout,
    )


def validate_current_url(page: Page, expected: UrlPattern) -> bool:
    """
    Check the current URL.

    A plain string matches as a substring, a compiled pattern with
    ``search``.
    """
    current_url = page.url
    if isinstance(expected, str):
        return expected in current_url
    return expected.search(current_url) is not None


def wait_for_page_load(page: Page) -> None:
    page.wait_for_load_state("domcontentloaded")


def is_element_visible(page: Page, selector: str, timeout: int = 1000) -> bool:
    """Soft visibility check: returns False instead of raising."""
    try:
        expect(page.locator(selector)).to_be_visible(timeout=timeout)
        return True
    except AssertionError:
        return False


def scroll_to_element(page: Page, selector: str) -> None:
    page.locator(selector).scroll_into_view_if_needed()


def take_screenshot(page: Page, name: str, directory: Optional[Path] = None) -> Path:
    """Save a full-page screenshot as ``<directory>/<name>.png``."""
    directory = Path(directory) if directory else SCREENSHOT_DIR
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.png"
    page.screenshot(path=str(path), full_page=True)
    logger.info(f"Screenshot saved: {path}")
    return path


def get_page_title(page: Page) -> str:
    return page.title()


def refresh_page(page: Page) -> None:
    page.reload()
    wait_for_page_load(page)
