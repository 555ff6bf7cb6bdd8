"""
Base Page Object

Provides the navigation, waiting and visibility vocabulary shared by every
EBMS screen. Concrete page objects only add their own locators and actions.
"""
import logging
import re
from pathlib import Path
from typing import Optional, Pattern, Union

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import EnvironmentConfig, get_environment_config
from ..errors import ElementNotVisible, NavigationTimeout
from ..helpers.navigation import SCREENSHOT_DIR, resolve_url

logger = logging.getLogger(__name__)

UrlPattern = Union[str, Pattern[str]]


class BasePage:
    """Base class for all page objects."""

    # Timeout for soft checks that answer True/False (milliseconds)
    SOFT_CHECK_TIMEOUT = 1000
    URL_TIMEOUT = 10000

    def __init__(self, page: Page, config: Optional[EnvironmentConfig] = None):
        self.page = page
        self.config = config or get_environment_config()
        self.base_url = self.config.base_url

    # =========================================================================
    # Common Locators
    # =========================================================================

    @property
    def header(self) -> Locator:
        return self.page.locator('header, [role="banner"]').first

    @property
    def footer(self) -> Locator:
        return self.page.locator('footer, [role="contentinfo"]').first

    @property
    def loading_spinner(self) -> Locator:
        return self.page.locator('[data-testid="loading"], .loading, .spinner').first

    @property
    def error_message(self) -> Locator:
        return self.page.locator('[data-testid="error"], .error, .alert-danger').first

    @property
    def success_message(self) -> Locator:
        return self.page.locator('[data-testid="success"], .success, .alert-success').first

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate_to(self, path: str, wait_until: str = "domcontentloaded") -> None:
        """
        Load ``path`` and wait for the given load state.

        Args:
            path: Path relative to the base URL, or an absolute URL
            wait_until: "domcontentloaded", "load" or "networkidle"

        Raises:
            NavigationTimeout: If the load state is not reached in time
        """
        url = resolve_url(path, self.base_url)
        try:
            self.page.goto(url, wait_until=wait_until, timeout=self.config.navigation_timeout)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeout(f"Navigation to {url} timed out ({wait_until}): {e}") from e

    def wait_for_page_load(self, timeout: Optional[int] = None) -> None:
        self.page.wait_for_load_state(
            "domcontentloaded", timeout=timeout or self.config.navigation_timeout
        )

    def refresh_page(self) -> None:
        self.page.reload()
        self.wait_for_page_load()

    def current_url(self) -> str:
        return self.page.url

    def page_title(self) -> str:
        return self.page.title()

    def validate_current_url(self, expected: UrlPattern) -> bool:
        """Substring match for strings, ``search`` for compiled patterns."""
        if isinstance(expected, str):
            return expected in self.current_url()
        return expected.search(self.current_url()) is not None

    def wait_for_url(self, expected: UrlPattern, timeout: int = URL_TIMEOUT) -> None:
        expect(self.page).to_have_url(expected, timeout=timeout)

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_for_element(self, locator: Locator, timeout: Optional[int] = None) -> None:
        """
        Wait until ``locator`` is visible.

        Raises:
            ElementNotVisible: If the element is not visible within ``timeout``
        """
        timeout = timeout or self.config.action_timeout
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotVisible(f"{locator} not visible after {timeout}ms: {e}") from e

    def wait_for_loading_to_complete(self, timeout: Optional[int] = None) -> None:
        """Wait for the loading spinner to go away; a stuck spinner is only logged."""
        try:
            expect(self.loading_spinner).not_to_be_visible(
                timeout=timeout or self.config.navigation_timeout
            )
        except AssertionError:
            logger.debug("Loading indicator still visible, continuing")

    # =========================================================================
    # Element State
    # =========================================================================

    def is_element_visible(self, locator: Locator) -> bool:
        """Soft check: False instead of a timeout error."""
        try:
            locator.wait_for(state="visible", timeout=self.SOFT_CHECK_TIMEOUT)
            return True
        except PlaywrightTimeoutError:
            return False

    def is_element_enabled(self, locator: Locator) -> bool:
        try:
            expect(locator).to_be_enabled(timeout=self.SOFT_CHECK_TIMEOUT)
            return True
        except AssertionError:
            return False

    def get_element_text(self, locator: Locator) -> str:
        return locator.text_content() or ""

    def get_element_attribute(self, locator: Locator, attribute: str) -> Optional[str]:
        return locator.get_attribute(attribute)

    def scroll_to_element(self, locator: Locator) -> None:
        locator.scroll_into_view_if_needed()

    # =========================================================================
    # Banners
    # =========================================================================

    def has_error_message(self) -> bool:
        return self.is_element_visible(self.error_message)

    def has_success_message(self) -> bool:
        return self.is_element_visible(self.success_message)

    def get_error_message(self) -> str:
        """Error banner text, or an empty string when none is showing."""
        if self.has_error_message():
            return self.get_element_text(self.error_message)
        return ""

    def get_success_message(self) -> str:
        """Success banner text, or an empty string when none is showing."""
        if self.has_success_message():
            return self.get_element_text(self.success_message)
        return ""

    # =========================================================================
    # Screenshots
    # =========================================================================

    def take_screenshot(self, name: str, full_page: bool = True) -> Path:
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        path = SCREENSHOT_DIR / f"{name}.png"
        self.page.screenshot(path=str(path), full_page=full_page)
        return path

    def __repr__(self) -> str:
        return f"<{type(self).__name__} url={self.page.url!r}>"


def pattern(text: str) -> Pattern[str]:
    """Case-insensitive regex used for accessible-name matching."""
    return re.compile(text, re.IGNORECASE)
