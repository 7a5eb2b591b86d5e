"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects
and UI templates, including navigation, waiting, evidence capture and
assertion helpers.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config import get_config
from shared import evidence

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        base_url: Base URL of the storefront.
        settings: Active configuration class.
    """

    def __init__(self, page: Page, base_url: str | None = None):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the storefront. Defaults to the configured BASE_URL.
        """
        self.page = page
        self.settings = get_config()
        self.base_url = (base_url or self.settings.BASE_URL).rstrip("/")

    # -------------------------------------------------------------------------
    # Common Locators
    # -------------------------------------------------------------------------

    @property
    def header(self) -> Locator:
        """Locator for the page header."""
        return self.page.locator("header")

    @property
    def footer(self) -> Locator:
        """Locator for the page footer."""
        return self.page.locator("footer")

    @property
    def loading_spinner(self) -> Locator:
        """Locator for loading indicators."""
        return self.page.locator(".loading, .spinner")

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        url = f"{self.base_url}{path}"
        self.page.goto(url)

    def refresh_page(self) -> None:
        self.page.reload()
        self.wait_for_page_load()

    def navigate_back(self) -> None:
        self.page.go_back()
        self.wait_for_page_load()

    def navigate_forward(self) -> None:
        self.page.go_forward()
        self.wait_for_page_load()

    def get_current_url(self) -> str:
        return self.page.url

    def get_page_title(self) -> str:
        return self.page.title()

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def wait_for_page_load(self, timeout: int | None = None) -> None:
        """
        Wait for the page to finish loading.

        The storefront keeps ad and analytics requests open, so network
        idle is not always reached; the plain load event is the fallback.

        Args:
            timeout: Maximum wait time in milliseconds.
        """
        timeout = timeout if timeout is not None else self.settings.NAVIGATION_TIMEOUT_MS
        self.page.wait_for_load_state("domcontentloaded", timeout=timeout)
        try:
            self.page.wait_for_load_state("networkidle", timeout=timeout // 2)
        except PlaywrightTimeoutError:
            logger.info("Network idle timeout - using load state fallback")
            self.page.wait_for_load_state("load", timeout=timeout)

    def wait_for_element(self, locator: Locator, timeout: int | None = None) -> None:
        """
        Wait for an element to be visible.

        Args:
            locator: Playwright locator for the element.
            timeout: Maximum wait time in milliseconds.
        """
        if timeout is None:
            timeout = self.settings.ELEMENT_TIMEOUT_MS
        locator.wait_for(state="visible", timeout=timeout)

    def scroll_to_element(self, locator: Locator) -> None:
        locator.scroll_into_view_if_needed()

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)))

    def verify_page_title(self, expected_title: str) -> None:
        expect(self.page).to_have_title(expected_title)

    def verify_element_visible(self, locator: Locator, timeout: int | None = None) -> None:
        """Assert that an element is visible."""
        expect(locator).to_be_visible(timeout=timeout)

    def verify_element_hidden(self, locator: Locator) -> None:
        """Assert that an element is hidden."""
        expect(locator).to_be_hidden()

    def verify_element_text(self, locator: Locator, expected_text: str) -> None:
        """Assert that an element has exactly the expected text."""
        expect(locator).to_have_text(expected_text)

    def verify_element_contains_text(self, locator: Locator, expected_text: str) -> None:
        """Assert that an element contains the expected text."""
        expect(locator).to_contain_text(expected_text)

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def settle(self, milliseconds: int | None = None) -> None:
        """Pause for asynchronous page updates that signal no completion event."""
        self.page.wait_for_timeout(milliseconds if milliseconds is not None else self.settings.SETTLE_MS)

    def take_screenshot(self, name: str) -> Path | None:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.

        Returns:
            Path to the saved screenshot, or None if capture failed.
        """
        return evidence.take_screenshot(self.page, name)
