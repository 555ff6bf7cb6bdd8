"""
EBMS E2E Test Suite

Page objects, helpers and session lifecycle for browser tests of the EBMS
administration system, built on Playwright and pytest.

Structure:
    config.py     - Environment configuration
    errors.py     - Timeout and setup failure conditions
    session.py    - Authenticated/unauthenticated session lifecycle
    helpers/      - Auth, navigation and test-data helpers
    pages/        - Page Object Models and the page factory
"""

from .config import (
    ConfigError,
    EnvironmentConfig,
    LoginCredentials,
    get_environment_config,
    reset_environment_config,
)
from .errors import AuthenticationSetupFailed, ElementNotVisible, NavigationTimeout
from .session import authenticated_session, unauthenticated_session

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "EnvironmentConfig",
    "LoginCredentials",
    "get_environment_config",
    "reset_environment_config",
    "AuthenticationSetupFailed",
    "ElementNotVisible",
    "NavigationTimeout",
    "authenticated_session",
    "unauthenticated_session",
]
