"""
Page Object Model (POM) classes for the storefront.

This package contains page objects that encapsulate page-specific
locators and interactions, plus the configuration-driven UI templates
in ``pages.templates``.
"""

from pages.base_page import BasePage
from pages.home_page import HomePage
from pages.login_page import LoginPage
from pages.products_page import ProductsPage
from pages.signup_page import SignupPage

__all__ = ["BasePage", "HomePage", "LoginPage", "ProductsPage", "SignupPage"]
