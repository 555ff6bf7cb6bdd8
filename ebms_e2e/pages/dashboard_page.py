"""
Dashboard Page Object

Encapsulates the landing screen shown after sign-in.
"""
import re
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from ..config import EnvironmentConfig
from ..helpers.auth import LOGIN_URL, POST_LOGIN_URL
from .base_page import BasePage, pattern


class DashboardPage(BasePage):
    """Page object for the main dashboard."""

    PATH = "/dashboard"

    # Soft check used to decide whether a session is still signed in
    LOGGED_IN_TIMEOUT = 5000

    def __init__(
        self,
        page: Page,
        config: Optional[EnvironmentConfig] = None,
        user_email: Optional[str] = None,
    ):
        super().__init__(page, config)
        # Defaults to the test account; admin sessions pass their own email
        self.user_email = user_email or self.config.test_email

    # =========================================================================
    # Locators
    # =========================================================================

    @property
    def user_email_display(self) -> Locator:
        """The signed-in account's email, shown only while authenticated."""
        return self.page.get_by_text(pattern(re.escape(self.user_email)))

    @property
    def logout_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"logout|sign out"))

    @property
    def navigation_menu(self) -> Locator:
        return self.page.locator('nav, [role="navigation"]').first

    @property
    def dashboard_title(self) -> Locator:
        return self.page.get_by_role("heading", name=pattern(r"dashboard|home|welcome"))

    @property
    def profile_link(self) -> Locator:
        return self.page.get_by_role("link", name=pattern(r"profile"))

    @property
    def settings_link(self) -> Locator:
        return self.page.get_by_role("link", name=pattern(r"settings"))

    @property
    def main_content(self) -> Locator:
        return self.page.locator('main, [role="main"]').first

    @property
    def sidebar(self) -> Locator:
        return self.page.locator("aside, .sidebar").first

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self) -> "DashboardPage":
        self.navigate_to(self.PATH)
        self.wait_for_page_load()
        return self

    def wait_for_dashboard_load(self) -> None:
        self.wait_for_element(self.user_email_display)
        self.wait_for_loading_to_complete()

    def navigate_to_profile(self) -> None:
        self.wait_for_element(self.profile_link)
        self.profile_link.click()
        self.wait_for_page_load()

    def navigate_to_settings(self) -> None:
        self.wait_for_element(self.settings_link)
        self.settings_link.click()
        self.wait_for_page_load()

    def navigate_to_section(self, section: str) -> None:
        """Follow the navigation link whose name contains ``section``."""
        section_link = self.page.get_by_role("link", name=pattern(re.escape(section)))
        self.wait_for_element(section_link)
        section_link.click()
        self.wait_for_page_load()

    # =========================================================================
    # User Actions
    # =========================================================================

    def is_user_logged_in(self) -> bool:
        try:
            expect(self.user_email_display).to_be_visible(timeout=self.LOGGED_IN_TIMEOUT)
            return True
        except AssertionError:
            return False

    def get_user_email(self) -> str:
        self.wait_for_element(self.user_email_display)
        return self.get_element_text(self.user_email_display)

    def click_logout(self) -> None:
        self.wait_for_element(self.logout_button)
        self.logout_button.click()
        self.wait_for_url(LOGIN_URL)

    def logout(self) -> None:
        self.click_logout()
        self.validate_logged_out()

    def refresh_and_validate_auth(self) -> None:
        """Reload and make sure the session survived."""
        self.refresh_page()
        self.wait_for_dashboard_load()
        assert self.is_user_logged_in(), "Session lost after reload"

    def get_dashboard_title(self) -> str:
        return self.page_title()

    # =========================================================================
    # Layout
    # =========================================================================

    def is_navigation_visible(self) -> bool:
        return self.is_element_visible(self.navigation_menu)

    def is_sidebar_visible(self) -> bool:
        return self.is_element_visible(self.sidebar)

    def is_main_content_visible(self) -> bool:
        return self.is_element_visible(self.main_content)

    # =========================================================================
    # Assertions
    # =========================================================================

    def validate_user_authentication(self) -> None:
        expect(self.user_email_display).to_be_visible()

    def validate_dashboard_title(self) -> None:
        expect(self.dashboard_title).to_be_visible()

    def validate_dashboard_url(self) -> None:
        expect(self.page).to_have_url(POST_LOGIN_URL)

    def validate_dashboard_layout(self) -> None:
        expect(self.user_email_display).to_be_visible()
        expect(self.main_content).to_be_visible()

        # Navigation may live in the header or in a sidebar
        assert self.is_navigation_visible() or self.is_sidebar_visible(), "No navigation found"

    def validate_logged_out(self) -> None:
        expect(self.page).to_have_url(LOGIN_URL)
        assert not self.is_user_logged_in(), "User email still displayed after logout"

    def validate_dashboard(self) -> None:
        """URL, authentication, layout and title in one go."""
        self.validate_dashboard_url()
        self.validate_user_authentication()
        self.validate_dashboard_layout()
        self.validate_dashboard_title()
