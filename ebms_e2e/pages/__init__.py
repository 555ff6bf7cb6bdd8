"""
Page Object Models for the EBMS E2E Tests

This package provides page objects that encapsulate UI interactions
and provide a clean API for test code.
"""

from .base_page import BasePage
from .create_user_page import CreateUserPage
from .dashboard_page import DashboardPage
from .login_page import LoginPage
from .page_factory import PageFactory
from .users_list_page import UsersListPage

__all__ = [
    "BasePage",
    "LoginPage",
    "DashboardPage",
    "UsersListPage",
    "CreateUserPage",
    "PageFactory",
]
