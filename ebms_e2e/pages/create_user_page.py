"""
Create User Page Object

Encapsulates the admin create-user form at /admin/users/create/.
"""
from typing import Dict

from playwright.sync_api import Locator, expect

from ..helpers.test_data import USER_STATUSES, UserTestData
from .base_page import BasePage, pattern

DEFAULT_PERMISSION_GROUP = "Admin"


class CreateUserPage(BasePage):
    """Page object for the create-user form."""

    PATH = "/admin/users/create/"

    # =========================================================================
    # Locators
    # =========================================================================

    @property
    def go_back_link(self) -> Locator:
        return self.page.get_by_role("link", name=pattern(r"go back to users"))

    @property
    def page_heading(self) -> Locator:
        return self.page.get_by_role("heading", name=pattern(r"create user"))

    @property
    def basic_info_section(self) -> Locator:
        return self.page.get_by_text("BASIC INFORMATION").first

    @property
    def account_info_section(self) -> Locator:
        return self.page.get_by_text("ACCOUNT INFORMATION").first

    def _input(self, name: str) -> Locator:
        return self.page.locator(f'input[name="{name}"]').or_(self.page.locator(f"#{name}")).first

    def _label(self, text: str) -> Locator:
        return self.page.locator(f'label:has-text("{text}")')

    @property
    def first_name_input(self) -> Locator:
        return self._input("first_name")

    @property
    def last_name_input(self) -> Locator:
        return self._input("last_name")

    @property
    def email_input(self) -> Locator:
        return self._input("email")

    @property
    def phone_number_input(self) -> Locator:
        return self._input("phone_number")

    @property
    def country_code_select(self) -> Locator:
        return self.page.locator('select[id="country_code"]')

    @property
    def permission_group_select(self) -> Locator:
        return self.page.locator('select[id="permission_group"]')

    @property
    def configure_permission_link(self) -> Locator:
        return self.page.get_by_role("link", name=pattern(r"configure permission"))

    @property
    def active_radio(self) -> Locator:
        return self.page.locator('input[type="radio"][value="active"]')

    @property
    def blocked_radio(self) -> Locator:
        return self.page.locator('input[type="radio"][value="blocked"]')

    @property
    def cancel_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"cancel"))

    @property
    def create_button(self) -> Locator:
        return self.page.get_by_role("button", name=pattern(r"^create$")).last

    @property
    def form(self) -> Locator:
        return self.page.locator('form[id="createUserForm"]')

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self) -> "CreateUserPage":
        self.navigate_to(f"{self.config.admin_base_url}{self.PATH}")
        self.wait_for_page_load()
        return self

    def wait_for_create_user_page_load(self) -> None:
        self.wait_for_element(self.page_heading)
        self.wait_for_element(self.create_button)

    def click_go_back(self) -> None:
        self.go_back_link.click()
        self.wait_for_page_load()

    # =========================================================================
    # Form Filling
    # =========================================================================

    def _fill(self, locator: Locator, value: str) -> None:
        self.wait_for_element(locator)
        locator.clear()
        locator.fill(value)

    def fill_first_name(self, first_name: str) -> None:
        self._fill(self.first_name_input, first_name)

    def fill_last_name(self, last_name: str) -> None:
        self._fill(self.last_name_input, last_name)

    def fill_email(self, email: str) -> None:
        self._fill(self.email_input, email)

    def fill_contact_number(self, contact_number: str) -> None:
        """Fill the phone number, without country code."""
        self._fill(self.phone_number_input, contact_number)

    def fill_basic_information(
        self, first_name: str, last_name: str, email: str, contact_number: str
    ) -> None:
        self.fill_first_name(first_name)
        self.fill_last_name(last_name)
        self.fill_email(email)
        self.fill_contact_number(contact_number)

    def select_permission_group(self, permission_group: str) -> None:
        self.wait_for_element(self.permission_group_select)
        self.permission_group_select.select_option(label=permission_group)

    def select_first_permission_group(self) -> None:
        """Pick the first real option, which is "Admin" on EBMS."""
        self.select_permission_group(DEFAULT_PERMISSION_GROUP)

    def set_user_status(self, status: str) -> None:
        """
        Choose the user status radio.

        Raises:
            ValueError: If ``status`` is not "Active" or "Blocked"
        """
        if status not in USER_STATUSES:
            raise ValueError(f"Unknown user status: {status!r}")

        radio = self.active_radio if status == "Active" else self.blocked_radio
        self.wait_for_element(radio)
        radio.check()

    def click_cancel(self) -> None:
        self.cancel_button.click()

    def click_create(self) -> None:
        """Submit the form and wait for the request to settle."""
        self.wait_for_element(self.create_button)
        self.create_button.click()
        self.page.wait_for_load_state("networkidle")

    def create_user(self, user: UserTestData) -> None:
        """Fill the whole form from ``user`` and submit it."""
        self.fill_basic_information(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            contact_number=user.contact_number,
        )

        if user.permission_group:
            self.select_permission_group(user.permission_group)
        else:
            self.select_first_permission_group()

        self.set_user_status(user.user_status or "Active")
        self.click_create()

    def clear_form(self) -> None:
        self.first_name_input.clear()
        self.last_name_input.clear()
        self.email_input.clear()
        self.phone_number_input.clear()

    # =========================================================================
    # Values
    # =========================================================================

    def get_first_name_value(self) -> str:
        return self.first_name_input.input_value()

    def get_last_name_value(self) -> str:
        return self.last_name_input.input_value()

    def get_email_value(self) -> str:
        return self.email_input.input_value()

    def get_contact_number_value(self) -> str:
        return self.phone_number_input.input_value()

    def get_form_values(self) -> Dict[str, str]:
        return {
            "first_name": self.get_first_name_value(),
            "last_name": self.get_last_name_value(),
            "email": self.get_email_value(),
            "contact_number": self.get_contact_number_value(),
        }

    # =========================================================================
    # Assertions
    # =========================================================================

    def validate_page_title(self) -> None:
        expect(self.page_heading).to_be_visible()
        expect(self.page_heading).to_have_text(pattern(r"create user"))

    def validate_form_sections(self) -> None:
        expect(self.basic_info_section).to_be_visible()
        expect(self.account_info_section).to_be_visible()

    def validate_basic_information_fields(self) -> None:
        for field in (
            self.first_name_input,
            self.last_name_input,
            self.email_input,
            self.phone_number_input,
            self.country_code_select,
        ):
            expect(field).to_be_visible()
            expect(field).to_be_enabled()

    def validate_account_information_fields(self) -> None:
        expect(self.permission_group_select).to_be_visible()
        expect(self.active_radio).to_be_visible()
        expect(self.blocked_radio).to_be_visible()

    def validate_required_field_indicators(self) -> None:
        """Required labels carry an asterisk."""
        for label in ("First Name", "Last Name", "Email Address", "Contact Number"):
            expect(self._label(label)).to_contain_text("*")

    def validate_active_status_default(self) -> None:
        expect(self.active_radio).to_be_checked()

    def validate_action_buttons(self) -> None:
        for button in (self.cancel_button, self.create_button):
            expect(button).to_be_visible()
            expect(button).to_be_enabled()

    def validate_create_user_form(self) -> None:
        self.validate_page_title()
        self.validate_form_sections()
        self.validate_basic_information_fields()
        self.validate_account_information_fields()
        self.validate_action_buttons()
