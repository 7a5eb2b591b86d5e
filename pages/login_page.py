"""Login page object for authentication flows."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from pages.base_page import BasePage

logger = logging.getLogger(__name__)

LOGGED_IN_CHECK_TIMEOUT_MS = 5000


class LoginPage(BasePage):
    """
    Page object for the combined login / signup page.

    Provides methods for:
    - Logging in and out
    - Starting the signup flow (name and email)
    - Checking the logged-in state
    - Deleting the current account
    """

    URL_PATH = "/login"

    def __init__(self, page: Page, base_url: str | None = None):
        super().__init__(page, base_url)

    def navigate(self) -> "LoginPage":
        """
        Navigate to the login page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        self.take_screenshot("login-page-loaded")
        return self

    # -------------------------------------------------------------------------
    # Login Form
    # -------------------------------------------------------------------------

    @property
    def login_form(self) -> Locator:
        return self.page.locator(".login-form")

    @property
    def email_input(self) -> Locator:
        """Locator for the login email input field."""
        return self.login_form.locator('[data-qa="login-email"]')

    @property
    def password_input(self) -> Locator:
        """Locator for the login password input field."""
        return self.login_form.locator('[data-qa="login-password"]')

    @property
    def login_button(self) -> Locator:
        return self.login_form.locator('[data-qa="login-button"]')

    @property
    def login_error_message(self) -> Locator:
        return self.page.locator(".login-form p").filter(has_text="incorrect")

    # -------------------------------------------------------------------------
    # Signup Form
    # -------------------------------------------------------------------------

    @property
    def signup_form(self) -> Locator:
        return self.page.locator(".signup-form")

    @property
    def signup_name_input(self) -> Locator:
        return self.signup_form.locator('[data-qa="signup-name"]')

    @property
    def signup_email_input(self) -> Locator:
        return self.signup_form.locator('[data-qa="signup-email"]')

    @property
    def signup_button(self) -> Locator:
        return self.signup_form.locator('[data-qa="signup-button"]')

    @property
    def signup_error_message(self) -> Locator:
        return self.page.locator(".signup-form p").filter(has_text="exist")

    # -------------------------------------------------------------------------
    # Logged-in Header
    # -------------------------------------------------------------------------

    @property
    def logged_in_indicator(self) -> Locator:
        return self.page.locator(".navbar-nav li").filter(has_text="Logged in as")

    @property
    def logged_in_user_name(self) -> Locator:
        return self.page.locator(".navbar-nav li a b")

    @property
    def logout_link(self) -> Locator:
        return self.page.locator('a[href="/logout"]')

    @property
    def delete_account_link(self) -> Locator:
        return self.page.locator('a[href="/delete_account"]')

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def login(self, email: str, password: str) -> None:
        """
        Fill credentials and submit the login form.

        Args:
            email: Email to enter.
            password: Password to enter.
        """
        logger.info(f"Logging in with email: {email}")
        self.take_screenshot("before-login")

        self.wait_for_element(self.email_input)
        self.email_input.fill(email)
        self.password_input.fill(password)
        self.take_screenshot("login-form-filled")
        self.login_button.click()

        self.settle()
        self.take_screenshot("after-login-attempt")

    def signup(self, name: str, email: str) -> None:
        """Submit the name/email step that opens the account information form."""
        logger.info(f"Signing up with name: {name}, email: {email}")
        self.take_screenshot("before-signup")

        self.wait_for_element(self.signup_name_input)
        self.signup_name_input.fill(name)
        self.signup_email_input.fill(email)
        self.take_screenshot("signup-form-filled")
        self.signup_button.click()

        self.settle()
        self.take_screenshot("after-signup-attempt")

    def logout(self) -> None:
        logger.info("Logging out")
        self.wait_for_element(self.logout_link)
        self.logout_link.click()
        self.settle()
        self.take_screenshot("after-logout")

    def is_logged_in(self) -> bool:
        """Return True if the "Logged in as" header shows up within a short wait."""
        try:
            self.logged_in_indicator.wait_for(state="visible", timeout=LOGGED_IN_CHECK_TIMEOUT_MS)
        except PlaywrightTimeoutError:
            return False
        return True

    def get_logged_in_user_name(self) -> str:
        if not self.is_logged_in():
            return ""
        return (self.logged_in_user_name.text_content() or "").strip()

    def delete_account(self) -> None:
        """Delete the current account. Does nothing when no one is logged in."""
        if not self.is_logged_in():
            logger.info("Not logged in, no account to delete")
            return

        self.take_screenshot("before-delete-account")
        self.delete_account_link.click()
        self.settle()
        self.take_screenshot("after-delete-account")
        logger.info("Account deletion initiated")

    def clear_login_form(self) -> None:
        self.email_input.clear()
        self.password_input.clear()

    def clear_signup_form(self) -> None:
        self.signup_name_input.clear()
        self.signup_email_input.clear()

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_login_success(self, expected_user_name: str) -> None:
        self.verify_element_visible(self.logged_in_indicator)
        self.verify_element_text(self.logged_in_user_name, expected_user_name)
        self.take_screenshot("login-success-verified")
        logger.info(f"Login success verified for user: {expected_user_name}")

    def verify_login_failure(self) -> None:
        self.verify_element_visible(self.login_error_message)
        self.verify_element_contains_text(self.login_error_message, "incorrect")
        self.take_screenshot("login-failure-verified")
        logger.info("Login failure verified")

    def verify_signup_failure(self) -> None:
        """Verify the "email already exists" message on the signup form."""
        self.verify_element_visible(self.signup_error_message)
        self.verify_element_contains_text(self.signup_error_message, "exist")
        self.take_screenshot("signup-failure-verified")
        logger.info("Signup failure verified - email already exists")

    def verify_signup_redirect(self) -> None:
        self.page.wait_for_url("**/signup")
        self.assert_url_contains("/signup")
        self.take_screenshot("signup-redirect-verified")
