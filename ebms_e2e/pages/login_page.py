"""
Login Page Object

Encapsulates the EBMS sign-in form.
"""
from typing import Optional

from playwright.sync_api import Locator, expect

from ..config import LoginCredentials
from ..helpers.auth import LOGIN_URL, POST_LOGIN_URL
from .base_page import BasePage, pattern


class LoginPage(BasePage):
    """Page object for the login page."""

    PATH = "/login"

    # =========================================================================
    # Locators
    # =========================================================================

    @property
    def welcome_text(self) -> Locator:
        return self.page.get_by_text(pattern(r"welcome back!"))

    @property
    def email_input(self) -> Locator:
        return self.page.get_by_test_id("email")

    @property
    def password_input(self) -> Locator:
        return self.page.get_by_role("textbox", name=pattern(r"password"))

    @property
    def login_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"login"))

    @property
    def submit_button(self) -> Locator:
        return self.page.get_by_test_id("submit")

    @property
    def forgot_password_link(self) -> Locator:
        return self.page.get_by_role("link", name=pattern(r"forgot password"))

    @property
    def remember_me_checkbox(self) -> Locator:
        return self.page.get_by_role("checkbox", name=pattern(r"remember me"))

    @property
    def login_form(self) -> Locator:
        return self.page.locator("form").first

    # =========================================================================
    # Actions
    # =========================================================================

    def goto(self) -> "LoginPage":
        self.navigate_to(self.PATH)
        self.wait_for_page_load()
        return self

    def wait_for_login_page_load(self) -> None:
        self.wait_for_element(self.welcome_text)
        self.wait_for_element(self.email_input)
        self.wait_for_element(self.password_input)
        self.wait_for_element(self.login_button)

    def fill_email(self, email: str) -> "LoginPage":
        self.wait_for_element(self.email_input)
        self.email_input.clear()
        self.email_input.fill(email)
        return self

    def fill_password(self, password: str) -> "LoginPage":
        self.wait_for_element(self.password_input)
        self.password_input.clear()
        self.password_input.fill(password)
        return self

    def click_login_button(self) -> None:
        self.wait_for_element(self.submit_button)
        self.submit_button.click()

    def login(self, credentials: Optional[LoginCredentials] = None) -> None:
        """Sign in and wait for the post-login URL. Defaults to the test account."""
        credentials = credentials or self.config.default_credentials()

        self.fill_email(credentials.email)
        self.fill_password(credentials.password)
        self.click_login_button()

        self.wait_for_url(POST_LOGIN_URL, timeout=self.config.navigation_timeout)

    def login_with_default_credentials(self) -> None:
        self.login()

    def click_forgot_password(self) -> None:
        self.wait_for_element(self.forgot_password_link)
        self.forgot_password_link.click()

    def toggle_remember_me(self, checked: bool = True) -> "LoginPage":
        """Set the remember-me checkbox to ``checked``."""
        self.wait_for_element(self.remember_me_checkbox)
        if self.remember_me_checkbox.is_checked() != checked:
            self.remember_me_checkbox.click()
        return self

    def clear_form(self) -> None:
        self.email_input.clear()
        self.password_input.clear()

    def attempt_invalid_login(self, credentials: LoginCredentials) -> None:
        """Submit credentials that are expected to be rejected."""
        self.fill_email(credentials.email)
        self.fill_password(credentials.password)
        self.click_login_button()

        # Either an error shows or the form stays put
        self.wait_for_element(self.login_form)

    # =========================================================================
    # State
    # =========================================================================

    def get_email_value(self) -> str:
        return self.email_input.input_value()

    def get_password_value(self) -> str:
        return self.password_input.input_value()

    def is_remember_me_checked(self) -> bool:
        return self.remember_me_checkbox.is_checked()

    def is_login_form_visible(self) -> bool:
        return self.is_element_visible(self.login_form)

    def is_forgot_password_link_visible(self) -> bool:
        return self.is_element_visible(self.forgot_password_link)

    def is_login_page(self) -> bool:
        return self.validate_current_url(self.PATH)

    # =========================================================================
    # Assertions
    # =========================================================================

    def validate_login_form_elements(self) -> None:
        """Assert the form inputs and buttons are visible and enabled."""
        for element in (
            self.email_input,
            self.password_input,
            self.login_button,
            self.submit_button,
        ):
            expect(element).to_be_visible()
            expect(element).to_be_enabled()

    def validate_welcome_text(self) -> None:
        expect(self.welcome_text).to_be_visible()

    def validate_still_on_login_page(self) -> None:
        expect(self.page).to_have_url(LOGIN_URL)
        expect(self.login_form).to_be_visible()
