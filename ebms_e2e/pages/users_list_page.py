"""
Users List Page Object

Encapsulates the admin users list at /admin/users/.
"""
import re
from typing import Dict, Optional

from playwright.sync_api import Locator, expect

from .base_page import BasePage, pattern

SHOWING_COUNT = re.compile(r"showing \d+ out of (\d+) users", re.IGNORECASE)
CREATE_USER_URL = re.compile(r"/admin/users/create/")

TABLE_COLUMNS = [
    "FIRST NAME",
    "LAST NAME",
    "EMAIL",
    "STATUS",
    "CREATED ON",
    "PERMISSION GROUP",
    "ACTION",
]


class UsersListPage(BasePage):
    """Page object for the admin users list."""

    PATH = "/admin/users/"

    # Dropdown open animation (milliseconds)
    DROPDOWN_DELAY = 500

    # =========================================================================
    # Locators
    # =========================================================================

    @property
    def users_title(self) -> Locator:
        return self.page.get_by_role("heading", name=pattern(r"^users$"))

    @property
    def users_tab(self) -> Locator:
        return self.page.get_by_role("tab", name=pattern(r"^users$")).or_(
            self.page.get_by_text(pattern(r"^users$")).first
        ).first

    @property
    def permission_groups_tab(self) -> Locator:
        return self.page.get_by_role("tab", name=pattern(r"permission groups"))

    @property
    def create_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"create"))

    @property
    def create_user_option(self) -> Locator:
        return self.page.get_by_text(pattern(r"^create user$")).or_(
            self.page.locator('button:has-text("Create User"), a:has-text("Create User")')
        ).first

    @property
    def create_permission_group_option(self) -> Locator:
        return self.page.get_by_text(pattern(r"^create permission group$"))

    @property
    def search_input(self) -> Locator:
        return self.page.get_by_placeholder(pattern(r"search by first name, last name or em")).or_(
            self.page.locator('input[type="text"]').first
        ).first

    @property
    def search_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"search"))

    @property
    def filter_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"filter"))

    @property
    def showing_text(self) -> Locator:
        return self.page.get_by_text(SHOWING_COUNT)

    @property
    def users_table(self) -> Locator:
        return self.page.locator("table").first

    @property
    def success_message(self) -> Locator:
        """The users list shows its own banner after a create or update."""
        return self.page.locator(".alert-success, [role='alert']").or_(
            self.page.get_by_text(pattern(r"new user has been added"))
        ).first

    def column_header(self, name: str) -> Locator:
        return self.page.locator(f'th:has-text("{name}")')

    def user_row(self, email: str) -> Locator:
        return self.page.locator(f'tr:has-text("{email}")')

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self) -> "UsersListPage":
        self.navigate_to(f"{self.config.admin_base_url}{self.PATH}")
        self.wait_for_page_load()
        return self

    def wait_for_users_page_load(self) -> None:
        self.wait_for_element(self.users_title)
        self.wait_for_element(self.create_button)

    def click_create_button(self) -> None:
        """Open the Create dropdown."""
        self.wait_for_element(self.create_button)
        self.create_button.click()
        self.page.wait_for_timeout(self.DROPDOWN_DELAY)

    def click_create_user(self) -> None:
        """Open the create-user form and wait until the browser is on it."""
        self.click_create_button()
        self.create_user_option.click()
        self.wait_for_url(CREATE_USER_URL)

    def click_create_permission_group(self) -> None:
        self.click_create_button()
        self.create_permission_group_option.click()

    def click_permission_groups_tab(self) -> None:
        self.permission_groups_tab.click()
        self.wait_for_page_load()

    # =========================================================================
    # Search
    # =========================================================================

    def search_user(self, search_term: str) -> None:
        """Search by first name, last name or email."""
        self.wait_for_element(self.search_input)
        self.search_input.fill(search_term)
        self.search_button.click()
        self.page.wait_for_load_state("networkidle")

    def click_filter(self) -> None:
        self.filter_button.click()

    # =========================================================================
    # Table
    # =========================================================================

    def get_user_by_email(self, email: str) -> Optional[Dict[str, str]]:
        """Read the table row for ``email``, or None if it is not shown."""
        row = self.user_row(email).first
        if not row.is_visible():
            return None

        cells = row.locator("td")

        def cell(index: int) -> str:
            return (cells.nth(index).text_content() or "").strip()

        # Column 0 is the selection checkbox, 5 is "created on"
        return {
            "first_name": cell(1),
            "last_name": cell(2),
            "email": cell(3),
            "status": cell(4),
            "permission_group": cell(6),
        }

    def click_edit_user(self, email: str) -> None:
        row = self.user_row(email)
        row.locator('[aria-label="edit"], button:has-text("edit")').first.click()

    def click_delete_user(self, email: str) -> None:
        row = self.user_row(email)
        row.locator('[aria-label="delete"], button:has-text("delete")').first.click()

    def get_row_count(self) -> int:
        """Number of user rows rendered on the current table page."""
        return self.users_table.locator("tbody tr").count()

    def get_total_user_count(self) -> int:
        """Total from "Showing X out of Y users"; 0 when the text is missing."""
        if not self.is_element_visible(self.showing_text):
            return 0
        match = SHOWING_COUNT.search(self.showing_text.text_content() or "")
        return int(match.group(1)) if match else 0

    def wait_for_success_message(self) -> str:
        """
        Wait for the success banner and return its text.

        Raises:
            ElementNotVisible: If no banner shows up
        """
        self.wait_for_element(self.success_message)
        return self.get_element_text(self.success_message)

    # =========================================================================
    # Assertions
    # =========================================================================

    def validate_page_title(self) -> None:
        expect(self.users_title).to_be_visible()
        expect(self.users_title).to_have_text(pattern(r"users"))

    def validate_users_tab_active(self) -> None:
        expect(self.users_tab).to_be_visible()

    def validate_create_button_visible(self) -> None:
        expect(self.create_button).to_be_visible()
        expect(self.create_button).to_be_enabled()

    def validate_success_message(self, expected_message: Optional[str] = None) -> None:
        expect(self.success_message).to_be_visible()
        if expected_message:
            expect(self.success_message).to_contain_text(expected_message)

    def validate_table_structure(self) -> None:
        expect(self.users_table).to_be_visible()
        for column in TABLE_COLUMNS:
            expect(self.column_header(column)).to_be_visible()

    def validate_user_exists(self, email: str) -> None:
        expect(self.user_row(email).first).to_be_visible()
