"""Home page object for the storefront landing page."""

from __future__ import annotations

import logging
from typing import Literal

from playwright.sync_api import Locator, Page

from pages.base_page import BasePage

logger = logging.getLogger(__name__)

# Viewports checked by verify_responsiveness(), restored to desktop afterwards
MOBILE_VIEWPORT = {"width": 375, "height": 667}
TABLET_VIEWPORT = {"width": 768, "height": 1024}
DESKTOP_VIEWPORT = {"width": 1920, "height": 1080}


class HomePage(BasePage):
    """
    Page object for the home page.

    Provides methods for:
    - Verifying header, main sections and footer
    - Header navigation
    - Newsletter subscription
    - Carousel navigation
    """

    URL_PATH = "/"

    def __init__(self, page: Page, base_url: str | None = None):
        super().__init__(page, base_url)

    def navigate(self) -> "HomePage":
        """
        Navigate to the home page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        return self

    # -------------------------------------------------------------------------
    # Header
    # -------------------------------------------------------------------------

    @property
    def logo(self) -> Locator:
        return self.page.locator('img[alt="Website for automation practice"]')

    @property
    def navigation_menu(self) -> Locator:
        return self.page.locator(".navbar-nav")

    @property
    def home_link(self) -> Locator:
        return self.page.locator('a[href="/"]').first

    @property
    def products_link(self) -> Locator:
        return self.page.locator('a[href="/products"]')

    @property
    def cart_link(self) -> Locator:
        return self.navigation_menu.locator('a[href="/view_cart"]')

    @property
    def signup_login_link(self) -> Locator:
        return self.page.locator('a[href="/login"]')

    @property
    def contact_us_link(self) -> Locator:
        return self.page.locator('a[href="/contact_us"]')

    @property
    def test_cases_link(self) -> Locator:
        return self.navigation_menu.locator('a[href="/test_cases"]')

    @property
    def api_testing_link(self) -> Locator:
        return self.page.locator('a[href="/api_list"]')

    @property
    def video_tutorials_link(self) -> Locator:
        return self.page.locator('a[href="https://www.youtube.com/c/AutomationExercise"]')

    # -------------------------------------------------------------------------
    # Main Sections
    # -------------------------------------------------------------------------

    @property
    def carousel_section(self) -> Locator:
        return self.page.locator("#slider-carousel")

    @property
    def carousel_prev_button(self) -> Locator:
        return self.carousel_section.locator(".left.control-carousel, .carousel-control-prev").first

    @property
    def carousel_next_button(self) -> Locator:
        return self.carousel_section.locator(".right.control-carousel, .carousel-control-next").first

    @property
    def categories_section(self) -> Locator:
        return self.page.locator(".left-sidebar")

    @property
    def brands_section(self) -> Locator:
        return self.page.locator(".brands_products")

    @property
    def features_section(self) -> Locator:
        return self.page.locator(".features_items")

    # -------------------------------------------------------------------------
    # Footer
    # -------------------------------------------------------------------------

    @property
    def subscription_section(self) -> Locator:
        return self.page.locator(".single-widget")

    @property
    def subscription_input(self) -> Locator:
        return self.page.locator("#susbscribe_email")

    @property
    def subscription_button(self) -> Locator:
        return self.page.locator("#subscribe")

    @property
    def subscription_success_message(self) -> Locator:
        return self.page.locator("#success-subscribe .alert-success")

    @property
    def scroll_up_button(self) -> Locator:
        return self.page.locator("#scrollUp")

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_home_page_is_visible(self) -> None:
        self.assert_url_contains(self.base_url)
        self.verify_element_visible(self.logo)
        self.verify_element_visible(self.navigation_menu)
        logger.info("Home page is visible")

    def verify_navigation_menu_items(self) -> None:
        for link in (
            self.home_link,
            self.products_link,
            self.cart_link,
            self.signup_login_link,
            self.contact_us_link,
            self.test_cases_link,
            self.api_testing_link,
            self.video_tutorials_link,
        ):
            self.verify_element_visible(link)

    def verify_main_sections(self) -> None:
        self.verify_element_visible(self.carousel_section)
        self.verify_element_visible(self.categories_section)
        self.verify_element_visible(self.features_section)

    def verify_footer_section(self) -> None:
        self.verify_element_visible(self.footer)
        self.verify_element_visible(self.subscription_section)
        self.verify_element_visible(self.subscription_input)
        self.verify_element_visible(self.subscription_button)

    def verify_subscription_success(self) -> None:
        self.verify_element_visible(self.subscription_success_message)
        logger.info("Newsletter subscription confirmed")

    def verify_responsiveness(self) -> None:
        """Check the header survives mobile and tablet widths, then restore desktop."""
        for viewport in (MOBILE_VIEWPORT, TABLET_VIEWPORT):
            self.page.set_viewport_size(viewport)
            self.verify_element_visible(self.logo)
            self.verify_element_visible(self.navigation_menu)
            logger.info(f"Header visible at {viewport['width']}x{viewport['height']}")

        self.page.set_viewport_size(DESKTOP_VIEWPORT)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click_navigation_link(self, link_name: str) -> None:
        """
        Click a header navigation link by short name.

        Args:
            link_name: One of home, products, cart, signup, contact,
                testcases, api, videos (case-insensitive).

        Raises:
            ValueError: If the name is not a known link.
        """
        links = {
            "home": self.home_link,
            "products": self.products_link,
            "cart": self.cart_link,
            "signup": self.signup_login_link,
            "contact": self.contact_us_link,
            "testcases": self.test_cases_link,
            "api": self.api_testing_link,
            "videos": self.video_tutorials_link,
        }
        link = links.get(link_name.lower())
        if link is None:
            raise ValueError(f'Navigation link "{link_name}" not found')
        link.click()
        logger.info(f"Clicked navigation link: {link_name}")

    def subscribe_to_newsletter(self, email: str) -> None:
        self.scroll_to_element(self.subscription_input)
        self.subscription_input.fill(email)
        self.subscription_button.click()
        logger.info(f"Subscribed to newsletter with {email}")

    def scroll_to_top(self) -> None:
        self.scroll_up_button.click()

    def navigate_carousel(self, direction: Literal["next", "previous"]) -> None:
        if direction == "next":
            self.carousel_next_button.click()
        else:
            self.carousel_prev_button.click()

    def get_categories_list(self) -> list[str]:
        return [text.strip() for text in self.categories_section.locator(".panel-title").all_text_contents()]

    def get_brands_list(self) -> list[str]:
        return [text.strip() for text in self.brands_section.locator("li a").all_text_contents()]
