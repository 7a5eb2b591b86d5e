"""
Fixtures for unit tests.

Templates and page objects are exercised against a MagicMock page whose
``locator()`` returns one cached mock per selector, so a test can reach
the exact locator a method used through ``mock_page.locators[selector]``.
Playwright's ``expect`` is patched where BasePage imports it.
"""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pages.templates.template_factory import TemplateFactory, TemplateManager
from shared import evidence


@pytest.fixture
def mock_page() -> MagicMock:
    """
    Provide a fake Playwright page.

    Returns:
        MagicMock page with a ``locators`` dict of every locator created.
    """
    page = MagicMock(name="page")
    page.locators = {}

    def _locator(selector: str) -> MagicMock:
        if selector not in page.locators:
            page.locators[selector] = MagicMock(name=f"locator({selector})")
        return page.locators[selector]

    page.locator.side_effect = _locator
    page.url = "https://www.automationexercise.com/"
    return page


@pytest.fixture(autouse=True)
def mock_expect() -> Generator[MagicMock, None, None]:
    """Replace Playwright assertions with a mock for every unit test."""
    with patch("pages.base_page.expect") as expect_mock:
        yield expect_mock


@pytest.fixture(autouse=True)
def evidence_run_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Point evidence capture at a throwaway run directory."""
    evidence.reset_test_run_directory()
    run_dir = evidence.get_test_run_directory(tmp_path / "Evidence")
    yield run_dir
    evidence.reset_test_run_directory()


@pytest.fixture
def template_factory() -> TemplateFactory:
    """Factory with a fresh default registry, isolated per test."""
    return TemplateFactory()


@pytest.fixture
def template_manager(mock_page: MagicMock, template_factory: TemplateFactory) -> TemplateManager:
    return TemplateManager(mock_page, template_factory)


def _make_items(texts: list[str | None]) -> list[MagicMock]:
    items = []
    for index, text in enumerate(texts):
        item = MagicMock(name=f"item[{index}]")
        item.locator.return_value.first.text_content.return_value = text
        items.append(item)
    return items


@pytest.fixture
def item_factory():
    """
    Factory for fake list items whose field locator reports the given text.

    Example:
        items = item_factory(["Blue Top", None])
    """
    return _make_items

