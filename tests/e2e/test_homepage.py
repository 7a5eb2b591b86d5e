"""E2E tests for the storefront home page."""

import pytest

from shared.login_data import generate_unique_email


pytestmark = pytest.mark.e2e


def test_home_page_is_visible(home_page):
    home_page.navigate()

    home_page.verify_home_page_is_visible()
    home_page.verify_page_title("Automation Exercise")


def test_navigation_menu_items_are_visible(home_page):
    home_page.navigate()

    home_page.verify_navigation_menu_items()


def test_main_sections_and_footer(home_page):
    home_page.navigate()

    home_page.verify_main_sections()
    home_page.verify_footer_section()


def test_categories_and_brands_are_listed(home_page):
    home_page.navigate()

    categories = home_page.get_categories_list()
    brands = home_page.get_brands_list()

    assert "Women" in categories
    assert len(brands) > 0


@pytest.mark.parametrize(
    "link_name, expected_path",
    [("products", "/products"), ("signup", "/login"), ("cart", "/view_cart")],
)
def test_navigation_links(home_page, link_name, expected_path):
    home_page.navigate()

    home_page.click_navigation_link(link_name)

    home_page.assert_url_contains(expected_path)


def test_newsletter_subscription(home_page):
    home_page.navigate()

    home_page.subscribe_to_newsletter(generate_unique_email("newsletter"))

    home_page.verify_subscription_success()


def test_scroll_up_returns_to_top(home_page):
    home_page.navigate()
    home_page.scroll_to_element(home_page.subscription_input)

    home_page.scroll_to_top()

    home_page.verify_element_visible(home_page.logo)


def test_header_survives_smaller_viewports(home_page):
    home_page.navigate()

    home_page.verify_responsiveness()
