"""
Reusable list/grid template.

Queries and manipulates homogeneous item collections such as product
grids. Items are re-read from the page on every call, so results always
reflect the live DOM at call time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from playwright.sync_api import Locator, Page

from pages.templates.base_template import BaseTemplate, TemplateConfig
from pages.templates.errors import (
    FeatureNotConfiguredError,
    FieldNotConfiguredError,
    IndexOutOfRangeError,
    ItemNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ListTemplateConfig(TemplateConfig):
    """
    Attributes:
        container_selector: Element wrapping all items.
        item_selector: Selector of one item, relative to the container.
        item_fields: Field name to selector relative to an item.
        load_more_button: Optional "load more"/next-page control.
        search_selector: Optional search input.
        sort_selector: Optional sort dropdown.
        empty_state_selector: Optional element shown when there are no items.
    """

    container_selector: str
    item_selector: str
    item_fields: dict[str, str] = field(default_factory=dict)
    load_more_button: str | None = None
    search_selector: str | None = None
    sort_selector: str | None = None
    empty_state_selector: str | None = None


class ListTemplate(BaseTemplate):
    """Enumerate, search, sort, paginate and query item collections."""

    config: ListTemplateConfig

    def __init__(self, page: Page, config: ListTemplateConfig):
        super().__init__(page, config)

    # -------------------------------------------------------------------------
    # Item Access
    # -------------------------------------------------------------------------

    def get_items(self) -> list[Locator]:
        """Wait for the container, then return a fresh snapshot of its items."""
        container = self.page.locator(self.config.container_selector)
        self.wait_for_element(container)

        items = container.locator(self.config.item_selector).all()
        logger.info(f"Found {len(items)} items in {self.template_name}")
        return items

    def get_item_count(self) -> int:
        return len(self.get_items())

    def get_item_by_index(self, index: int) -> Locator:
        """
        Get the item at ``index``.

        Raises:
            IndexOutOfRangeError: If index is negative or not below the item count.
        """
        items = self.get_items()
        if not 0 <= index < len(items):
            raise IndexOutOfRangeError(index, len(items))
        return items[index]

    def _field_selector(self, field_name: str) -> str:
        selector = self.config.item_fields.get(field_name)
        if not selector:
            raise FieldNotConfiguredError(field_name, self.template_name)
        return selector

    def find_item_by_field(self, field_name: str, value: str) -> Locator | None:
        """
        Find the first item whose field text equals ``value``.

        Both sides are whitespace-trimmed before comparison.

        Returns:
            The matching item, or None when nothing matches.

        Raises:
            FieldNotConfiguredError: If field_name is not in item_fields.
        """
        field_selector = self._field_selector(field_name)
        wanted = value.strip()

        for item in self.get_items():
            field_text = item.locator(field_selector).first.text_content() or ""
            if field_text.strip() == wanted:
                logger.info(f"Found item with {field_name}: {value}")
                return item

        logger.info(f"Item with {field_name}: {value} not found")
        return None

    def get_field_values(self, field_name: str) -> list[str]:
        """
        Collect the trimmed field text of every item, skipping empty ones.

        Raises:
            FieldNotConfiguredError: If field_name is not in item_fields.
        """
        field_selector = self._field_selector(field_name)
        values = []
        for item in self.get_items():
            text = item.locator(field_selector).first.text_content()
            if text and text.strip():
                values.append(text.strip())

        logger.info(f"Retrieved {len(values)} values for field '{field_name}'")
        return values

    # -------------------------------------------------------------------------
    # Item Actions
    # -------------------------------------------------------------------------

    def click_item_by_index(self, index: int) -> None:
        item = self.get_item_by_index(index)
        self.take_template_screenshot(f"before-click-item-{index}")
        item.click()
        self.take_template_screenshot(f"after-click-item-{index}")
        logger.info(f"Clicked item at index {index}")

    def click_item_by_field(self, field_name: str, value: str) -> None:
        """
        Click the first item whose field text equals ``value``.

        Raises:
            ItemNotFoundError: If no item matches.
        """
        item = self.find_item_by_field(field_name, value)
        if item is None:
            raise ItemNotFoundError(field_name, value)

        self.take_template_screenshot(f"before-click-item-{field_name}-{value}")
        item.click()
        self.take_template_screenshot(f"after-click-item-{field_name}-{value}")
        logger.info(f"Clicked item with {field_name}: {value}")

    def search_items(self, search_term: str) -> None:
        """
        Type a search term and submit it with Enter.

        Raises:
            FeatureNotConfiguredError: If no search_selector is configured.
        """
        if not self.config.search_selector:
            raise FeatureNotConfiguredError("search", self.template_name)

        search_input = self.page.locator(self.config.search_selector)
        self.wait_for_element(search_input)

        self.take_template_screenshot("before-search")
        search_input.clear()
        search_input.fill(search_term)
        search_input.press("Enter")

        self.settle()
        self.take_template_screenshot("after-search")
        logger.info(f"Searched for: {search_term}")

    def sort_items(self, sort_option: str) -> None:
        """
        Choose a sort option.

        Raises:
            FeatureNotConfiguredError: If no sort_selector is configured.
        """
        if not self.config.sort_selector:
            raise FeatureNotConfiguredError("sort", self.template_name)

        sort_select = self.page.locator(self.config.sort_selector)
        self.wait_for_element(sort_select)

        self.take_template_screenshot("before-sort")
        sort_select.select_option(sort_option)

        self.settle()
        self.take_template_screenshot("after-sort")
        logger.info(f"Sorted by: {sort_option}")

    def load_more_items(self) -> int:
        """
        Click the load-more control if it is visible.

        A hidden control means there are no more pages and is not an error.

        Returns:
            Item count after minus item count before (0 when nothing was loaded).

        Raises:
            FeatureNotConfiguredError: If no load_more_button is configured.
        """
        if not self.config.load_more_button:
            raise FeatureNotConfiguredError("load more", self.template_name)

        load_more_button = self.page.locator(self.config.load_more_button)
        if not load_more_button.is_visible():
            logger.info("No more items to load")
            return 0

        count_before = self.get_item_count()
        self.take_template_screenshot("before-load-more")
        load_more_button.click()

        self.settle(self.settings.LOAD_MORE_SETTLE_MS)
        count_after = self.get_item_count()

        self.take_template_screenshot("after-load-more")
        logger.info(f"Loaded more items: {count_before} -> {count_after}")
        return count_after - count_before

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def verify_empty_state(self) -> None:
        """Assert the list is empty, via the empty-state element when configured."""
        if self.config.empty_state_selector:
            self.verify_element_visible(self.page.locator(self.config.empty_state_selector))
        else:
            item_count = self.get_item_count()
            assert item_count == 0, f"Expected no items, but found {item_count}"

        self.take_template_screenshot("empty-state")
        logger.info("Empty state verified")

    def verify_items_loaded(self, min_count: int = 1) -> None:
        """Assert at least ``min_count`` items are present."""
        item_count = self.get_item_count()
        assert item_count >= min_count, (
            f"Expected at least {min_count} items, but found {item_count}"
        )

        self.take_template_screenshot("items-loaded")
        logger.info(f"Items loaded: {item_count} (minimum expected: {min_count})")


# -----------------------------------------------------------------------------
# Built-in Configurations
# -----------------------------------------------------------------------------

def products_list_template() -> ListTemplateConfig:
    """Product grid on the storefront's products page."""
    return ListTemplateConfig(
        template_name="products-list",
        selectors={
            "container": ".features_items, .products-list, .product-grid",
            "loadMoreButton": ".load-more, .pagination .next",
            "searchInput": "#search_product, .search-box input",
            "sortSelect": '.sort-dropdown, select[name="sort"]',
        },
        container_selector=".features_items, .products-list",
        item_selector=".productinfo, .product-item",
        item_fields={
            "name": "p, .product-name",
            "price": ".price, .product-price, h2",
            "image": "img",
            "addToCartButton": ".add-to-cart, .btn-cart",
            "viewProductButton": ".view-product, .btn-view",
        },
        search_selector="#search_product, .search-box input",
        sort_selector='.sort-dropdown, select[name="sort"]',
        load_more_button=".load-more, .pagination .next",
        empty_state_selector=".no-products, .empty-state",
    )
