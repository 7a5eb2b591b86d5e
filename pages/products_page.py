"""Products page object."""

from __future__ import annotations

from playwright.sync_api import Locator, Page

from pages.base_page import BasePage


class ProductsPage(BasePage):
    """Page object for the product catalogue."""

    URL_PATH = "/products"

    def __init__(self, page: Page, base_url: str | None = None):
        super().__init__(page, base_url)

    def navigate(self) -> "ProductsPage":
        """
        Navigate to the products page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        return self

    @property
    def products_title(self) -> Locator:
        return self.page.locator("h2.title").filter(has_text="Products")

    @property
    def search_box(self) -> Locator:
        return self.page.locator("#search_product")

    @property
    def search_button(self) -> Locator:
        return self.page.locator("#submit_search")

    @property
    def product_cards(self) -> Locator:
        return self.page.locator(".features_items .productinfo")

    @property
    def view_product_links(self) -> Locator:
        return self.page.locator('a[href*="/product_details/"]')

    @property
    def add_to_cart_buttons(self) -> Locator:
        return self.page.locator(".productinfo .add-to-cart")

    @property
    def continue_shopping_button(self) -> Locator:
        return self.page.locator(".close-modal, .btn-success").filter(has_text="Continue Shopping")

    @property
    def view_cart_link(self) -> Locator:
        return self.page.locator('#cartModal a[href="/view_cart"]')

    def verify_products_page_loaded(self) -> None:
        self.assert_url_contains(self.URL_PATH)
        self.verify_element_visible(self.products_title)

    def search_product(self, product_name: str) -> None:
        self.search_box.fill(product_name)
        self.search_button.click()
        self.wait_for_page_load()

    def get_products_count(self) -> int:
        return self.product_cards.count()

    def click_view_product(self, index: int = 0) -> None:
        self.view_product_links.nth(index).click()
        self.wait_for_page_load()

    def add_product_to_cart(self, index: int = 0) -> None:
        """Add a product and wait for the added-to-cart dialog."""
        self.add_to_cart_buttons.nth(index).click()
        self.wait_for_element(self.continue_shopping_button)

    def continue_shopping(self) -> None:
        self.continue_shopping_button.click()

    def view_cart(self) -> None:
        self.view_cart_link.click()
        self.wait_for_page_load()
