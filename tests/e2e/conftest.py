"""Playwright fixtures for storefront E2E tests."""

from __future__ import annotations

import re
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, expect

from config import Config, get_config
from pages import HomePage, LoginPage, ProductsPage, SignupPage
from pages.templates.template_factory import TemplateManager
from shared import evidence
from shared.live_site import wait_for_site_ready


def _safe_test_name(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", name)


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    return get_config()


@pytest.fixture(scope="session")
def storefront_url(settings: type[Config]) -> str:
    """Return the storefront URL once it answers, or skip the E2E session."""
    try:
        wait_for_site_ready(settings.BASE_URL)
    except RuntimeError as exc:
        pytest.skip(str(exc))
    return settings.BASE_URL


@pytest.fixture(scope="session", autouse=True)
def expect_timeout(settings: type[Config]) -> None:
    expect.set_options(timeout=settings.EXPECT_TIMEOUT_MS)


@pytest.fixture(scope="session")
def browser_context_args(settings: type[Config]):
    return {
        "viewport": settings.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser,
    browser_context_args: dict,
    settings: type[Config],
    request: pytest.FixtureRequest,
) -> Generator[BrowserContext, None, None]:
    """
    Fresh browser context per test.

    Videos go to one directory per test. With retain-on-failure the
    recording of a passing test is deleted once the context closes.
    """
    video_dir = None
    context_args = dict(browser_context_args)
    if settings.VIDEO_MODE != "off":
        video_dir = evidence.get_videos_directory() / _safe_test_name(request.node.name)
        context_args["record_video_dir"] = str(video_dir)
        context_args["record_video_size"] = settings.VIEWPORT

    context = browser.new_context(**context_args)
    context.set_default_timeout(settings.ACTION_TIMEOUT_MS)
    context.set_default_navigation_timeout(settings.NAVIGATION_TIMEOUT_MS)
    yield context
    context.close()

    report = getattr(request.node, "rep_call", None)
    passed = report is not None and report.passed
    if video_dir is not None and passed and settings.VIDEO_MODE == "retain-on-failure":
        for video in video_dir.glob("*.webm"):
            video.unlink()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    evidence.attach_console_logging(page)
    yield page
    page.close()


@pytest.fixture
def home_page(page: Page, storefront_url: str) -> HomePage:
    return HomePage(page, storefront_url)


@pytest.fixture
def login_page(page: Page, storefront_url: str) -> LoginPage:
    return LoginPage(page, storefront_url)


@pytest.fixture
def signup_page(page: Page, storefront_url: str) -> SignupPage:
    return SignupPage(page, storefront_url)


@pytest.fixture
def products_page(page: Page, storefront_url: str) -> ProductsPage:
    return ProductsPage(page, storefront_url)


@pytest.fixture
def template_manager(page: Page, storefront_url: str) -> Generator[TemplateManager, None, None]:
    """Template manager with its own registry, bound to this test's page."""
    manager = TemplateManager(page)
    yield manager
    manager.clear_all_templates()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep the call report on the item and capture a screenshot on failure."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            evidence.take_conditional_screenshot(page, f"{_safe_test_name(item.name)}-FAILURE", failed=True)


def pytest_sessionfinish(session, exitstatus):
    """Prune the empty per-test video directories left by passing tests."""
    if evidence.get_current_run_directory() is None:
        return
    evidence.cleanup_empty_video_directories(evidence.get_videos_directory())
