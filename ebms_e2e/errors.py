"""
Failure conditions raised by the page-object and fixture layers.

The timeout conditions subclass Playwright's own TimeoutError so callers
catching the engine's exception keep working.
"""
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class NavigationTimeout(PlaywrightTimeoutError):
    """Page did not reach the requested load state in time."""


class ElementNotVisible(PlaywrightTimeoutError):
    """Element did not become visible in time."""


class AuthenticationSetupFailed(Exception):
    """Login finished but the authenticated-user signal never appeared."""
