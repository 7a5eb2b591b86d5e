"""
Evidence collection helpers for browser tests.

Screenshots, videos, traces and reports for one test process are kept
under a single timestamped test-run directory so that a failing run can
be inspected as a unit. Evidence capture never fails a test: Playwright
errors raised while capturing are logged and absorbed here, while errors
raised by the test actions themselves always propagate.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from playwright.sync_api import ConsoleMessage, Page, Request
from playwright.sync_api import Error as PlaywrightError

from config import get_config

logger = logging.getLogger(__name__)
browser_logger = logging.getLogger("browser")

T = TypeVar("T")

RUN_SUBDIRECTORIES = ("screenshots", "videos", "traces", "reports")

_current_run_dir: Path | None = None


# -----------------------------------------------------------------------------
# Directory Management
# -----------------------------------------------------------------------------

def get_current_timestamp() -> str:
    """Return the current time formatted for use in file names."""
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


def ensure_test_run_directories(run_dir: Path) -> None:
    """Create the test-run directory and its evidence subdirectories."""
    for directory in (run_dir, *(run_dir / name for name in RUN_SUBDIRECTORIES)):
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Created directory: {directory}")


def get_test_run_directory(root: str | Path | None = None) -> Path:
    """
    Get or create the timestamped directory for the current test run.

    The directory is created on first use and reused for the rest of the
    process. Call reset_test_run_directory() to start a new one.

    Args:
        root: Evidence root. Defaults to the configured EVIDENCE_DIR.

    Returns:
        Path of the current test-run directory.
    """
    global _current_run_dir
    if _current_run_dir is None:
        base = Path(root) if root is not None else Path(get_config().EVIDENCE_DIR)
        _current_run_dir = base / f"test-run-{get_current_timestamp()}"
        ensure_test_run_directories(_current_run_dir)
        logger.info(f"Created new test run directory: {_current_run_dir}")
    return _current_run_dir


def get_current_run_directory() -> Path | None:
    """Return the current test-run directory without creating one."""
    return _current_run_dir


def reset_test_run_directory() -> None:
    """Forget the current test-run directory so the next call creates a new one."""
    global _current_run_dir
    _current_run_dir = None


def get_screenshots_directory() -> Path:
    return get_test_run_directory() / "screenshots"


def get_videos_directory() -> Path:
    return get_test_run_directory() / "videos"


def get_traces_directory() -> Path:
    return get_test_run_directory() / "traces"


def get_reports_directory() -> Path:
    return get_test_run_directory() / "reports"


def cleanup_empty_video_directories(root: str | Path) -> int:
    """
    Remove empty per-test video directories.

    Playwright creates one output directory per test even when the video
    is discarded (retain-on-failure), leaving many empty folders behind.

    Args:
        root: Directory holding the per-test video folders.

    Returns:
        Number of directories removed.
    """
    video_root = Path(root)
    if not video_root.is_dir():
        logger.info(f"Video directory {video_root} does not exist, nothing to clean up")
        return 0

    removed = 0
    for entry in video_root.iterdir():
        if entry.is_dir() and not any(entry.iterdir()):
            entry.rmdir()
            logger.debug(f"Removed empty video directory: {entry.name}")
            removed += 1

    if removed:
        logger.info(f"Cleanup complete: removed {removed} empty video directories")
    return removed


# -----------------------------------------------------------------------------
# Screenshots
# -----------------------------------------------------------------------------

def _screenshot_path(name: str) -> Path:
    timestamp = int(time.time() * 1000)
    return get_screenshots_directory() / f"{name}-{timestamp}.png"


def take_screenshot(page: Page, name: str, full_page: bool = True) -> Path | None:
    """
    Capture a screenshot into the current test-run directory.

    A full-page capture can exceed the browser's pixel limits on long
    pages, so a failed full-page capture is retried as a viewport capture.

    Args:
        page: Playwright page instance.
        name: Base name for the screenshot file.
        full_page: Whether to capture the full scrollable page.

    Returns:
        Path to the saved screenshot, or None if capture failed.
    """
    path = _screenshot_path(name)
    try:
        page.screenshot(path=str(path), full_page=full_page)
        logger.debug(f"Screenshot saved: {path}")
        return path
    except PlaywrightError as exc:
        if not full_page:
            logger.error(f"Viewport screenshot failed for {name}: {exc}")
            return None
        logger.warning(f"Full page screenshot failed for {name}: {exc}, taking viewport screenshot instead")

    try:
        page.screenshot(path=str(path), full_page=False)
        logger.debug(f"Viewport screenshot saved: {path}")
        return path
    except PlaywrightError as exc:
        logger.error(f"Both full page and viewport screenshots failed for {name}: {exc}")
        return None


def take_viewport_screenshot(page: Page, name: str) -> Path | None:
    """Capture only the visible viewport (safe for responsive checks)."""
    return take_screenshot(page, name, full_page=False)


def take_critical_screenshot(page: Page, name: str) -> Path | None:
    """Capture a screenshot that is always taken regardless of mode."""
    logger.info(f"Taking critical screenshot: {name}")
    return take_screenshot(page, name)


def take_conditional_screenshot(
    page: Page, name: str, failed: bool, force: bool = False
) -> Path | None:
    """
    Capture a screenshot only when it is worth keeping.

    Args:
        page: Playwright page instance.
        name: Base name for the screenshot file.
        failed: Whether the test (or step) failed.
        force: Capture regardless of outcome and mode.

    Returns:
        Path to the saved screenshot, or None if skipped or failed.
    """
    if force or failed or get_config().SCREENSHOT_MODE == "all":
        return take_screenshot(page, name)
    logger.debug(f"Conditional screenshot skipped for {name}")
    return None


def run_step(
    page: Page,
    step_name: str,
    action: Callable[[], T],
    screenshot: bool = False,
    critical: bool = False,
) -> T:
    """
    Run one test step with evidence capture.

    Args:
        page: Playwright page instance.
        step_name: Name used in logs and screenshot file names.
        action: Zero-argument callable performing the step.
        screenshot: Capture a screenshot after a successful step.
        critical: Always capture a screenshot after a successful step.

    Returns:
        Whatever the action returns.
    """
    logger.info(f"Executing step: {step_name}")
    try:
        result = action()
    except Exception:
        logger.error(f"Step failed: {step_name}")
        take_screenshot(page, f"{step_name}-FAILED")
        raise

    if critical:
        take_critical_screenshot(page, step_name)
    elif screenshot or get_config().SCREENSHOT_MODE == "all":
        take_conditional_screenshot(page, step_name, failed=False, force=screenshot)

    logger.info(f"Step completed: {step_name}")
    return result


# -----------------------------------------------------------------------------
# Browser Console
# -----------------------------------------------------------------------------

def _log_console_message(message: ConsoleMessage) -> None:
    browser_logger.info(f"Browser {message.type}: {message.text}")


def _log_page_error(error: PlaywrightError) -> None:
    browser_logger.error(f"Page error: {error.message}")


def _log_request_failed(request: Request) -> None:
    browser_logger.warning(f"Failed request: {request.url} - {request.failure or 'Unknown error'}")


def attach_console_logging(page: Page) -> None:
    """Forward browser console output, page errors and failed requests to logging."""
    page.on("console", _log_console_message)
    page.on("pageerror", _log_page_error)
    page.on("requestfailed", _log_request_failed)
    logger.debug("Console logging attached to page")
