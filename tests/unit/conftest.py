"""
Fixtures for browser-free unit tests.

Playwright pages and locators are replaced with mocks so the page-object,
factory and session layers can be exercised without a browser.
"""
from unittest.mock import MagicMock

import pytest

from ebms_e2e.config import ENV_VARS, EnvironmentConfig, reset_environment_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test from defaults with no cached configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_environment_config()
    yield
    reset_environment_config()


@pytest.fixture
def config():
    return EnvironmentConfig(
        base_url="http://ebms.test",
        admin_base_url="http://admin.ebms.test",
        test_email="user@example.com",
        test_password="secret123",
        admin_email="admin@example.com",
        admin_password="adminpass",
        test_timeout=30000,
        navigation_timeout=30000,
        action_timeout=10000,
        environment="test",
    )


@pytest.fixture
def mock_page():
    """Mock Playwright page sitting on the login screen."""
    page = MagicMock()
    page.url = "http://ebms.test/login"
    page.title.return_value = "Login - EBMS"
    return page
