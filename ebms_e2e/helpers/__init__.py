"""
Helpers used by fixtures and specs outside the page-object layer.
"""

from .auth import get_auth_state, is_user_logged_in, login_user, logout_user
from .navigation import (
    get_page_title,
    is_element_visible,
    navigate_to_page,
    refresh_page,
    scroll_to_element,
    take_screenshot,
    validate_current_url,
    wait_for_page_load,
)
from .test_data import UserTestData, generate_multiple_users, generate_user_data

__all__ = [
    "login_user",
    "logout_user",
    "is_user_logged_in",
    "get_auth_state",
    "navigate_to_page",
    "validate_current_url",
    "wait_for_page_load",
    "is_element_visible",
    "scroll_to_element",
    "take_screenshot",
    "get_page_title",
    "refresh_page",
    "UserTestData",
    "generate_user_data",
    "generate_multiple_users",
]
