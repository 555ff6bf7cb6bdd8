"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing of EBMS with Playwright.

Fixture layers:
    browser plumbing   - browser_type_launch_args, browser_context_args, context, page
    sessions           - authenticated_page, unauthenticated_page, admin_page
    page objects       - page_factory, login_page, dashboard_page,
                         authenticated_login_page, authenticated_dashboard_page,
                         admin_dashboard_page, users_list_page, create_user_page
"""
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Generator, Optional

import pytest

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

import requests
from playwright.sync_api import Browser, BrowserContext, Page, Playwright
from playwright.sync_api import Error as PlaywrightError

from ebms_e2e.config import EnvironmentConfig, get_environment_config
from ebms_e2e.pages import (
    CreateUserPage,
    DashboardPage,
    LoginPage,
    PageFactory,
    UsersListPage,
)
from ebms_e2e.session import authenticated_session, unauthenticated_session

logger = logging.getLogger(__name__)

# EBMS marks its inputs with data-test rather than data-testid
TEST_ID_ATTRIBUTE = "data-test"

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"
TARGET_WAIT_SECONDS = 30

# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def config() -> EnvironmentConfig:
    """Suite configuration, loaded once per session."""
    return get_environment_config()


@pytest.fixture(scope="session")
def target_app(config: EnvironmentConfig) -> str:
    """
    Wait for the EBMS instance under test to answer.

    The application is external, so an unreachable target skips the run
    instead of failing every test.
    """
    for _ in range(TARGET_WAIT_SECONDS * 2):
        try:
            resp = requests.get(f"{config.base_url}/login", timeout=1)
            if resp.status_code < 500:
                logger.info(f"[E2E] Target reachable at {config.base_url}")
                return config.base_url
        except requests.exceptions.RequestException:
            pass
        time.sleep(0.5)

    pytest.skip(f"EBMS not reachable at {config.base_url} within {TARGET_WAIT_SECONDS}s")


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def test_id_attribute(playwright: Playwright) -> None:
    """Make get_by_test_id() look at data-test attributes."""
    playwright.selectors.set_test_id_attribute(TEST_ID_ATTRIBUTE)


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: Dict[str, Any], config: EnvironmentConfig
) -> Dict[str, Any]:
    """Browser launch arguments, on top of the pytest-playwright CLI options."""
    args = dict(browser_type_launch_args)
    if not config.headless:
        args["headless"] = False
    if config.slow_mo:
        args["slow_mo"] = config.slow_mo
    return args


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: Dict[str, Any], config: EnvironmentConfig
) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "base_url": config.base_url,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }

    if config.record_video:
        ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(ARTIFACTS_DIR / "videos")

    return args


@pytest.fixture
def context(
    browser: Browser, browser_context_args: Dict, config: EnvironmentConfig
) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(config.test_timeout)
    context.set_default_navigation_timeout(config.navigation_timeout)

    yield context

    context.close()


@pytest.fixture
def page(context: BrowserContext, target_app) -> Generator[Page, None, None]:
    """Create a new page for each test."""
    page = context.new_page()

    yield page

    page.close()


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def authenticated_page(page: Page, config: EnvironmentConfig) -> Generator[Page, None, None]:
    """A page signed in as the test account; logged out again afterwards."""
    with authenticated_session(page, config=config) as session_page:
        yield session_page


@pytest.fixture
def unauthenticated_page(page: Page, config: EnvironmentConfig) -> Generator[Page, None, None]:
    """A signed-out page sitting on the login screen."""
    with unauthenticated_session(page, config=config) as session_page:
        yield session_page


@pytest.fixture
def admin_page(page: Page, config: EnvironmentConfig) -> Generator[Page, None, None]:
    """A page signed in as the admin account."""
    with authenticated_session(page, config.admin_credentials(), config) as session_page:
        yield session_page


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def page_factory(config: EnvironmentConfig) -> Generator[PageFactory, None, None]:
    """Page-object cache scoped to a single test."""
    factory = PageFactory(config)
    factory.clear()

    yield factory

    factory.clear()


@pytest.fixture
def login_page(unauthenticated_page: Page, page_factory: PageFactory) -> LoginPage:
    """Login page, opened and ready."""
    login_page = page_factory.login_page(unauthenticated_page)
    login_page.goto()
    return login_page


@pytest.fixture
def dashboard_page(authenticated_page: Page, page_factory: PageFactory) -> DashboardPage:
    """Dashboard page once the signed-in indicator shows."""
    dashboard_page = page_factory.dashboard_page(authenticated_page)
    dashboard_page.wait_for_dashboard_load()
    return dashboard_page


@pytest.fixture
def authenticated_login_page(authenticated_page: Page, page_factory: PageFactory) -> LoginPage:
    """Login page object over an already signed-in session."""
    return page_factory.login_page(authenticated_page)


@pytest.fixture
def authenticated_dashboard_page(
    authenticated_page: Page, page_factory: PageFactory
) -> DashboardPage:
    """Dashboard page object, fully validated."""
    dashboard_page = page_factory.dashboard_page(authenticated_page)
    dashboard_page.validate_dashboard()
    return dashboard_page


@pytest.fixture
def admin_dashboard_page(
    admin_page: Page, page_factory: PageFactory, config: EnvironmentConfig
) -> DashboardPage:
    """Dashboard page object watching for the admin account's email."""
    dashboard_page = page_factory.dashboard_page(admin_page, user_email=config.admin_email)
    dashboard_page.wait_for_dashboard_load()
    return dashboard_page


@pytest.fixture
def users_list_page(admin_page: Page, page_factory: PageFactory) -> UsersListPage:
    """Admin users list, opened and loaded."""
    users_list_page = page_factory.users_list_page(admin_page)
    users_list_page.goto()
    users_list_page.wait_for_users_page_load()
    return users_list_page


@pytest.fixture
def create_user_page(
    users_list_page: UsersListPage, admin_page: Page, page_factory: PageFactory
) -> CreateUserPage:
    """Create-user form reached through the users list Create menu."""
    users_list_page.click_create_user()
    create_user_page = page_factory.create_user_page(admin_page)
    create_user_page.wait_for_create_user_page_load()
    return create_user_page


# =============================================================================
# Failure Artifacts
# =============================================================================


def save_failure_screenshot(page: Page, test_name: str) -> Optional[Path]:
    """Screenshot ``page`` for a failed test; returns None if it could not be taken."""
    if page.is_closed():
        return None

    ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_name = test_name.replace("/", "_").replace(":", "_")
    screenshot_path = ARTIFACTS_DIR / f"failure_{safe_name}_{timestamp}.png"
    try:
        page.screenshot(path=str(screenshot_path))
    except PlaywrightError as e:
        logger.warning(f"[E2E] Could not capture failure screenshot: {e}")
        return None

    logger.info(f"[E2E] Screenshot saved: {screenshot_path}")
    return screenshot_path


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Store test results and capture a screenshot of failed tests.

    The call report is built before any fixture teardown, so the page still
    shows the state the test failed in (sessions have not logged out yet).
    """
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    if rep.when == "call" and rep.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is not None:
            save_failure_screenshot(page, item.name)


def pytest_collection_modifyitems(config, items):
    """Add markers based on fixtures in use."""
    e2e_dir = Path(__file__).parent
    for item in items:
        if e2e_dir not in item.path.parents:
            continue

        item.add_marker(pytest.mark.e2e)
        fixtures = item.fixturenames
        if any(name.startswith(("authenticated_", "admin_")) for name in fixtures):
            item.add_marker(pytest.mark.auth)
        if "admin_page" in fixtures:
            item.add_marker(pytest.mark.admin)
