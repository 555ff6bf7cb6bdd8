"""
Browser Session Lifecycle

Scoped setup/teardown around a test body. The pytest fixtures in
tests/e2e/conftest.py wrap these so the same lifecycle is usable outside
pytest:

    with authenticated_session(page) as page:
        DashboardPage(page).validate_dashboard()

Setup errors propagate and abort the caller before the body runs.
Teardown is best-effort: failures are logged, never raised, so they
cannot mask the body's own outcome.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from playwright.sync_api import Page

from .config import EnvironmentConfig, LoginCredentials, get_environment_config
from .errors import AuthenticationSetupFailed
from .helpers.auth import is_user_logged_in, login_user, logout_user
from .helpers.navigation import navigate_to_page, wait_for_page_load

logger = logging.getLogger(__name__)


@contextmanager
def authenticated_session(
    page: Page,
    credentials: Optional[LoginCredentials] = None,
    config: Optional[EnvironmentConfig] = None,
) -> Iterator[Page]:
    """
    Log in, verify the login took, yield the page, then log out.

    Raises:
        AuthenticationSetupFailed: If the signed-in indicator never shows
    """
    config = config or get_environment_config()
    credentials = credentials or config.default_credentials()

    login_user(page, credentials, config)
    if not is_user_logged_in(page, email=credentials.email):
        raise AuthenticationSetupFailed(
            f"Failed to authenticate {credentials.email} before test"
        )
    logger.debug(f"Authenticated session ready for {credentials.email}")

    try:
        yield page
    finally:
        _teardown_logout(page)


@contextmanager
def unauthenticated_session(
    page: Page, config: Optional[EnvironmentConfig] = None
) -> Iterator[Page]:
    """Make sure nobody is signed in, open the login screen, yield the page."""
    config = config or get_environment_config()

    logout_user(page)
    navigate_to_page(page, "/login", config)
    wait_for_page_load(page)

    yield page


def _teardown_logout(page: Page) -> None:
    try:
        logout_user(page)
    except Exception as e:
        logger.warning(f"Logout during teardown failed: {e}")
