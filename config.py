"""
Suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local workstation, CI). Values are loaded from
environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("BASE_URL", "https://www.automationexercise.com")

    # Evidence output (screenshots, videos, traces, reports)
    EVIDENCE_DIR: str = os.environ.get("EVIDENCE_DIR", str(BASE_DIR / "Evidence"))
    SCREENSHOT_MODE: str = os.environ.get("SCREENSHOTS", "minimal")
    VIDEO_MODE: str = os.environ.get("VIDEO_MODE", "retain-on-failure")

    HEADLESS: bool = os.environ.get("HEADLESS", "1") != "0"
    VIEWPORT: dict = {"width": 1280, "height": 720}

    # Timeouts in milliseconds
    ELEMENT_TIMEOUT_MS: int = 30000
    ACTION_TIMEOUT_MS: int = 15000
    NAVIGATION_TIMEOUT_MS: int = 30000
    EXPECT_TIMEOUT_MS: int = 10000
    MODAL_TIMEOUT_MS: int = 10000

    # Settle waits after actions with no explicit completion signal
    SETTLE_MS: int = 2000
    LOAD_MORE_SETTLE_MS: int = 3000

    RETRIES: int = 0


class LocalConfig(Config):
    """Local workstation configuration."""

    HEADLESS: bool = os.environ.get("HEADLESS", "0") != "0"


class CIConfig(Config):
    """Continuous integration configuration."""

    HEADLESS: bool = True
    RETRIES: int = 2


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses E2E_ENV, falling back to "ci" when CI is set.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV") or ("ci" if os.environ.get("CI") else "default")
    return config.get(env, config["default"])
