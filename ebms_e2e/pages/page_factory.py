"""
Page Object Factory

Memoises page objects so several call sites in one test share the same
wrapper for the same screen.

Instances are keyed by class name and the browser URL at creation time.
The key is not re-derived when the page later navigates: a cached object
stays filed under its original URL and a new one is created for the new
URL. Locators re-resolve against whatever DOM is current, so reuse after
navigation only works while the old locators still make sense. Call
``clear()`` between tests; the pytest ``page_factory`` fixture does.

The cache is a plain dict and is not safe to share between threads.
"""
import logging
from typing import Dict, Optional, Type, TypeVar

from playwright.sync_api import Page

from ..config import EnvironmentConfig, get_environment_config
from .base_page import BasePage
from .create_user_page import CreateUserPage
from .dashboard_page import DashboardPage
from .login_page import LoginPage
from .users_list_page import UsersListPage

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BasePage)


class PageFactory:
    """Creates page objects and caches them per (class, URL)."""

    def __init__(self, config: Optional[EnvironmentConfig] = None):
        self.config = config or get_environment_config()
        self._instances: Dict[str, BasePage] = {}

    @staticmethod
    def cache_key(page_class_name: str, url: str) -> str:
        return f"{page_class_name}-{url}"

    def get_or_create(self, page_class: Type[P], page: Page, **kwargs) -> P:
        """
        Return the cached ``page_class`` wrapper for ``page``'s current URL,
        constructing it on first request.

        ``kwargs`` go to the constructor and only apply on creation.
        Constructor errors propagate unchanged.
        """
        key = self.cache_key(page_class.__name__, page.url)

        if key not in self._instances:
            self._instances[key] = page_class(page, self.config, **kwargs)
            logger.debug(f"Created page object {key}")

        return self._instances[key]  # type: ignore[return-value]

    def clear(self) -> None:
        """Drop every cached instance."""
        self._instances.clear()

    def cached_instances(self) -> Dict[str, BasePage]:
        """Copy of the cache, keyed by ``"<ClassName>-<url>"``."""
        return dict(self._instances)

    def remove(self, page_class_name: str, url: str) -> bool:
        """Evict one entry. Returns True if it was cached."""
        return self._instances.pop(self.cache_key(page_class_name, url), None) is not None

    def __len__(self) -> int:
        return len(self._instances)

    # =========================================================================
    # Screen shortcuts
    # =========================================================================

    def login_page(self, page: Page) -> LoginPage:
        return self.get_or_create(LoginPage, page)

    def dashboard_page(self, page: Page, user_email: Optional[str] = None) -> DashboardPage:
        return self.get_or_create(DashboardPage, page, user_email=user_email)

    def users_list_page(self, page: Page) -> UsersListPage:
        return self.get_or_create(UsersListPage, page)

    def create_user_page(self, page: Page) -> CreateUserPage:
        return self.get_or_create(CreateUserPage, page)

    def page_for_url(self, page: Page) -> BasePage:
        """
        Pick the page object matching the current URL.

        Unknown URLs get a fresh, uncached ``BasePage``.
        """
        url = page.url

        if "/login" in url:
            return self.login_page(page)
        if "/admin/users/create" in url:
            return self.create_user_page(page)
        if "/admin/users" in url:
            return self.users_list_page(page)
        if "/dashboard" in url or url.rstrip("/") == self.config.base_url:
            return self.dashboard_page(page)

        return BasePage(page, self.config)
