"""Signup page object covering the full account creation flow."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal

from playwright.sync_api import Locator, Page

from pages.base_page import BasePage
from shared.login_data import UserCredentials, generate_address

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "United States"


class SignupPage(BasePage):
    """
    Page object for signup: the name/email step on /login, the account
    information form and the account-created confirmation.
    """

    URL_PATH = "/login"

    def __init__(self, page: Page, base_url: str | None = None):
        super().__init__(page, base_url)

    def navigate(self) -> "SignupPage":
        """
        Navigate to the signup form.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        self.wait_for_element(self.signup_section)
        return self

    # -------------------------------------------------------------------------
    # Signup / Login Step
    # -------------------------------------------------------------------------

    @property
    def signup_section(self) -> Locator:
        return self.page.locator(".signup-form")

    @property
    def signup_form_title(self) -> Locator:
        return self.page.locator('h2:has-text("New User Signup!")')

    @property
    def signup_name_input(self) -> Locator:
        return self.page.locator('input[data-qa="signup-name"]')

    @property
    def signup_email_input(self) -> Locator:
        return self.page.locator('input[data-qa="signup-email"]')

    @property
    def signup_button(self) -> Locator:
        return self.page.locator('button[data-qa="signup-button"]')

    @property
    def login_form_title(self) -> Locator:
        return self.page.locator('h2:has-text("Login to your account")')

    @property
    def login_email_input(self) -> Locator:
        return self.page.locator('input[data-qa="login-email"]')

    @property
    def login_password_input(self) -> Locator:
        return self.page.locator('input[data-qa="login-password"]')

    @property
    def login_button(self) -> Locator:
        return self.page.locator('button[data-qa="login-button"]')

    @property
    def signup_error_message(self) -> Locator:
        return self.page.locator('.signup-form p:has-text("Email Address already exist!")')

    # -------------------------------------------------------------------------
    # Account Information
    # -------------------------------------------------------------------------

    @property
    def title_radio_mr(self) -> Locator:
        return self.page.locator("#id_gender1")

    @property
    def title_radio_mrs(self) -> Locator:
        return self.page.locator("#id_gender2")

    @property
    def account_password_input(self) -> Locator:
        return self.page.locator('input[data-qa="password"]')

    @property
    def day_dropdown(self) -> Locator:
        return self.page.locator('select[data-qa="days"]')

    @property
    def month_dropdown(self) -> Locator:
        return self.page.locator('select[data-qa="months"]')

    @property
    def year_dropdown(self) -> Locator:
        return self.page.locator('select[data-qa="years"]')

    @property
    def newsletter_checkbox(self) -> Locator:
        return self.page.locator("#newsletter")

    @property
    def special_offers_checkbox(self) -> Locator:
        return self.page.locator("#optin")

    # -------------------------------------------------------------------------
    # Address Information
    # -------------------------------------------------------------------------

    def _address_input(self, qa_name: str) -> Locator:
        return self.page.locator(f'[data-qa="{qa_name}"]')

    @property
    def country_dropdown(self) -> Locator:
        return self.page.locator('select[data-qa="country"]')

    @property
    def create_account_button(self) -> Locator:
        return self.page.locator('button[data-qa="create-account"]')

    @property
    def account_created_message(self) -> Locator:
        return self.page.locator('h2[data-qa="account-created"]')

    @property
    def continue_button(self) -> Locator:
        return self.page.locator('a[data-qa="continue-button"]')

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def perform_signup(self, name: str, email: str) -> None:
        self.signup_name_input.fill(name)
        self.signup_email_input.fill(email)
        self.signup_button.click()

    def perform_login(self, email: str, password: str) -> None:
        self.login_email_input.fill(email)
        self.login_password_input.fill(password)
        self.login_button.click()

    def fill_account_information(
        self,
        password: str,
        title: Literal["Mr", "Mrs"] | None = None,
        day: str | None = None,
        month: str | None = None,
        year: str | None = None,
        newsletter: bool = False,
        special_offers: bool = False,
    ) -> None:
        """
        Fill the account information section.

        Optional values left as None are not touched on the page.
        """
        self.wait_for_element(self.account_password_input)

        if title == "Mr":
            self.title_radio_mr.check()
        elif title == "Mrs":
            self.title_radio_mrs.check()

        self.account_password_input.fill(password)

        if day:
            self.day_dropdown.select_option(day)
        if month:
            self.month_dropdown.select_option(month)
        if year:
            self.year_dropdown.select_option(year)

        if newsletter:
            self.newsletter_checkbox.check()
        if special_offers:
            self.special_offers_checkbox.check()

    def fill_address_information(self, address: Mapping[str, str]) -> None:
        """
        Fill the address section.

        Args:
            address: Keys as produced by generate_address(); ``company``,
                ``address2`` and ``country`` are optional.
        """
        self._address_input("first_name").fill(address["first_name"])
        self._address_input("last_name").fill(address["last_name"])
        if address.get("company"):
            self._address_input("company").fill(address["company"])
        self._address_input("address").fill(address["address"])
        if address.get("address2"):
            self._address_input("address2").fill(address["address2"])
        if address.get("country"):
            self.country_dropdown.select_option(address["country"])
        self._address_input("state").fill(address["state"])
        self._address_input("city").fill(address["city"])
        self._address_input("zipcode").fill(address["zipcode"])
        self._address_input("mobile_number").fill(address["mobile_number"])

    def click_create_account_button(self) -> None:
        self.create_account_button.click()

    def click_continue_after_account_creation(self) -> None:
        self.continue_button.click()
        self.wait_for_page_load()

    def complete_signup_flow(
        self,
        user: UserCredentials,
        address: Mapping[str, str] | None = None,
        title: Literal["Mr", "Mrs"] = "Mr",
    ) -> None:
        """
        Run signup end to end: name/email, account information, address, create.

        Args:
            user: Name, email and password of the new account.
            address: Address details. Generated when omitted.
            title: Title radio to select.
        """
        address = dict(address or generate_address())
        address.setdefault("country", DEFAULT_COUNTRY)

        logger.info(f"Starting signup flow for {user.email}")
        self.perform_signup(user.name, user.email)
        self.fill_account_information(
            password=user.password,
            title=title,
            day="10",
            month="5",
            year="1990",
            newsletter=True,
            special_offers=True,
        )
        self.take_screenshot("account-information-filled")
        self.fill_address_information(address)
        self.take_screenshot("address-information-filled")
        self.click_create_account_button()
        logger.info(f"Create account submitted for {user.email}")

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_signup_page_is_visible(self) -> None:
        for locator in (
            self.signup_form_title,
            self.login_form_title,
            self.signup_name_input,
            self.signup_email_input,
            self.signup_button,
            self.login_email_input,
            self.login_password_input,
            self.login_button,
        ):
            self.verify_element_visible(locator)

    def verify_account_created(self) -> None:
        self.verify_element_visible(self.account_created_message)
        self.take_screenshot("account-created")

    def verify_email_already_exists_error(self) -> None:
        self.verify_element_visible(self.signup_error_message)
        self.take_screenshot("email-already-exists")

    def verify_required_fields_validation(self) -> None:
        """Check the signup inputs carry the HTML required attribute."""
        for locator in (self.signup_name_input, self.signup_email_input):
            assert locator.get_attribute("required") is not None, (
                f"Expected {locator} to have the required attribute"
            )
