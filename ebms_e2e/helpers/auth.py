"""
Authentication Helpers

Login, logout and session checks performed directly on a Playwright page,
without going through the page-object layer.
"""
import json
import logging
import re
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, expect

from ..config import EnvironmentConfig, LoginCredentials, get_environment_config

logger = logging.getLogger(__name__)

# URL shown once login has gone through
POST_LOGIN_URL = re.compile(r"/$|dashboard|home|main")
LOGIN_URL = re.compile(r"login")

WELCOME_TEXT = re.compile(r"welcome back!", re.IGNORECASE)
PASSWORD_LABEL = re.compile(r"password", re.IGNORECASE)
LOGOUT_LABEL = re.compile(r"logout|sign out", re.IGNORECASE)

LOGGED_IN_CHECK_TIMEOUT = 5000


def login_user(
    page: Page,
    credentials: Optional[LoginCredentials] = None,
    config: Optional[EnvironmentConfig] = None,
) -> None:
    """
    Sign in through the login form.

    Args:
        page: Playwright page
        credentials: Account to use, defaults to the configured test account
        config: Configuration, defaults to the process configuration
    """
    config = config or get_environment_config()
    credentials = credentials or config.default_credentials()

    logger.info(f"Logging in as {credentials.email}")
    page.goto(
        f"{config.base_url}/login",
        wait_until="domcontentloaded",
        timeout=config.navigation_timeout,
    )

    expect(page.get_by_text(WELCOME_TEXT)).to_be_visible(timeout=config.action_timeout)

    page.get_by_test_id("email").fill(credentials.email)
    page.get_by_role("textbox", name=PASSWORD_LABEL).fill(credentials.password)
    page.get_by_test_id("submit").click()

    expect(page).to_have_url(POST_LOGIN_URL, timeout=config.navigation_timeout)


def is_user_logged_in(
    page: Page, email: Optional[str] = None, config: Optional[EnvironmentConfig] = None
) -> bool:
    """Check whether the signed-in user's email is displayed. Never raises."""
    if email is None:
        email = (config or get_environment_config()).test_email

    indicator = page.get_by_text(re.compile(re.escape(email), re.IGNORECASE))
    try:
        expect(indicator).to_be_visible(timeout=LOGGED_IN_CHECK_TIMEOUT)
        return True
    except AssertionError:
        return False


def logout_user(page: Page) -> bool:
    """
    Log out if a logout button is showing.

    Best-effort: failures are logged and swallowed so an already
    logged-out session is not an error.

    Returns:
        True if a logout was performed
    """
    try:
        logout_button = page.get_by_role("button", name=LOGOUT_LABEL)
        if not logout_button.is_visible():
            return False

        logout_button.click()
        expect(page).to_have_url(LOGIN_URL)
        return True
    except (PlaywrightError, AssertionError) as e:
        logger.warning(f"Logout failed or user was not logged in: {e}")
        return False


def get_auth_state(page: Page) -> str:
    """Export cookies and local storage of the page's context as JSON."""
    return json.dumps(page.context.storage_state())
