"""
E2E test package for the storefront.

These tests drive https://www.automationexercise.com (or BASE_URL) with
Playwright and only run when RUN_E2E=1 is set.
"""
