"""
Test suite for the storefront UI templates.

This package contains:
- unit/: template, page object and helper tests against a mocked page
- e2e/: Playwright tests against the live storefront
"""
