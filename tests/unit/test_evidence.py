"""
Unit tests for evidence collection helpers.
"""

import logging
from unittest.mock import MagicMock, call

import pytest
from playwright.sync_api import Error as PlaywrightError

from config import get_config
from shared import evidence


pytestmark = pytest.mark.unit


@pytest.fixture
def screenshot_mode(monkeypatch):
    """Switch the active configuration's screenshot mode for one test."""

    def _set(mode: str) -> None:
        monkeypatch.setattr(get_config(), "SCREENSHOT_MODE", mode)

    return _set


# -----------------------------------------------------------------------------
# Directories
# -----------------------------------------------------------------------------

def test_run_directory_has_evidence_subdirectories(evidence_run_dir):
    assert evidence_run_dir.name.startswith("test-run-")
    for name in ("screenshots", "videos", "traces", "reports"):
        assert (evidence_run_dir / name).is_dir()


def test_run_directory_is_reused_until_reset(tmp_path, evidence_run_dir):
    assert evidence.get_test_run_directory() == evidence_run_dir
    assert evidence.get_test_run_directory(tmp_path / "elsewhere") == evidence_run_dir

    evidence.reset_test_run_directory()
    fresh = evidence.get_test_run_directory(tmp_path / "elsewhere")

    assert fresh.parent == tmp_path / "elsewhere"


def test_current_run_directory_is_not_created_on_read(evidence_run_dir):
    assert evidence.get_current_run_directory() == evidence_run_dir

    evidence.reset_test_run_directory()

    assert evidence.get_current_run_directory() is None


def test_subdirectory_getters(evidence_run_dir):
    assert evidence.get_screenshots_directory() == evidence_run_dir / "screenshots"
    assert evidence.get_videos_directory() == evidence_run_dir / "videos"
    assert evidence.get_traces_directory() == evidence_run_dir / "traces"
    assert evidence.get_reports_directory() == evidence_run_dir / "reports"


def test_cleanup_removes_only_empty_video_directories(tmp_path):
    # Arrange
    video_root = tmp_path / "videos"
    (video_root / "test-a").mkdir(parents=True)
    (video_root / "test-b").mkdir()
    kept = video_root / "test-c"
    kept.mkdir()
    (kept / "video.webm").write_bytes(b"\x00")

    # Act
    removed = evidence.cleanup_empty_video_directories(video_root)

    # Assert
    assert removed == 2
    assert sorted(p.name for p in video_root.iterdir()) == ["test-c"]


def test_cleanup_missing_directory_is_noop(tmp_path):
    assert evidence.cleanup_empty_video_directories(tmp_path / "missing") == 0


# -----------------------------------------------------------------------------
# Screenshots
# -----------------------------------------------------------------------------

def test_take_screenshot_writes_into_run_directory(mock_page, evidence_run_dir):
    path = evidence.take_screenshot(mock_page, "home")

    assert path.parent == evidence_run_dir / "screenshots"
    assert path.name.startswith("home-") and path.suffix == ".png"
    mock_page.screenshot.assert_called_once_with(path=str(path), full_page=True)


def test_full_page_failure_falls_back_to_viewport(mock_page):
    # Arrange
    mock_page.screenshot.side_effect = [PlaywrightError("page too tall"), None]

    # Act
    path = evidence.take_screenshot(mock_page, "long-page")

    # Assert
    assert path is not None
    assert mock_page.screenshot.call_args_list == [
        call(path=str(path), full_page=True),
        call(path=str(path), full_page=False),
    ]


def test_screenshot_failure_is_logged_not_raised(mock_page, caplog):
    caplog.set_level(logging.ERROR, logger="shared.evidence")
    mock_page.screenshot.side_effect = PlaywrightError("browser closed")

    assert evidence.take_screenshot(mock_page, "closed") is None
    assert "Both full page and viewport screenshots failed for closed" in caplog.text


def test_viewport_screenshot_failure_is_not_retried(mock_page):
    mock_page.screenshot.side_effect = PlaywrightError("browser closed")

    assert evidence.take_viewport_screenshot(mock_page, "closed") is None
    mock_page.screenshot.assert_called_once()


def test_non_playwright_errors_propagate(mock_page):
    mock_page.screenshot.side_effect = OSError("disk full")

    with pytest.raises(OSError):
        evidence.take_screenshot(mock_page, "disk")


@pytest.mark.parametrize(
    "mode, failed, force, expected_calls",
    [
        ("minimal", False, False, 0),
        ("minimal", True, False, 1),
        ("minimal", False, True, 1),
        ("all", False, False, 1),
    ],
)
def test_conditional_screenshot(mock_page, screenshot_mode, mode, failed, force, expected_calls):
    screenshot_mode(mode)

    evidence.take_conditional_screenshot(mock_page, "step", failed=failed, force=force)

    assert mock_page.screenshot.call_count == expected_calls


def test_critical_screenshot_ignores_mode(mock_page, screenshot_mode):
    screenshot_mode("minimal")

    assert evidence.take_critical_screenshot(mock_page, "checkout") is not None


# -----------------------------------------------------------------------------
# Steps
# -----------------------------------------------------------------------------

def test_run_step_returns_action_result(mock_page, screenshot_mode):
    screenshot_mode("minimal")

    result = evidence.run_step(mock_page, "add to cart", lambda: 3)

    assert result == 3
    mock_page.screenshot.assert_not_called()


def test_run_step_optional_screenshot(mock_page):
    evidence.run_step(mock_page, "open cart", lambda: None, screenshot=True)

    assert "open cart-" in mock_page.screenshot.call_args.kwargs["path"]


def test_run_step_failure_captures_and_reraises(mock_page):
    # Arrange
    def explode():
        raise AssertionError("cart is empty")

    # Act / Assert
    with pytest.raises(AssertionError, match="cart is empty"):
        evidence.run_step(mock_page, "checkout", explode)

    assert "checkout-FAILED-" in mock_page.screenshot.call_args.kwargs["path"]


# -----------------------------------------------------------------------------
# Browser Console
# -----------------------------------------------------------------------------

def test_attach_console_logging_registers_handlers(mock_page):
    evidence.attach_console_logging(mock_page)

    events = [c.args[0] for c in mock_page.on.call_args_list]
    assert events == ["console", "pageerror", "requestfailed"]


def test_console_messages_go_to_browser_logger(mock_page, caplog):
    # Arrange
    caplog.set_level(logging.INFO, logger="browser")
    evidence.attach_console_logging(mock_page)
    handlers = {c.args[0]: c.args[1] for c in mock_page.on.call_args_list}
    message = MagicMock(type="warning", text="Deprecated API")
    request = MagicMock(url="https://ads.example.com/pixel", failure="net::ERR_BLOCKED_BY_CLIENT")

    # Act
    handlers["console"](message)
    handlers["requestfailed"](request)

    # Assert
    assert "Browser warning: Deprecated API" in caplog.text
    assert "Failed request: https://ads.example.com/pixel - net::ERR_BLOCKED_BY_CLIENT" in caplog.text
    assert all(record.name == "browser" for record in caplog.records)
