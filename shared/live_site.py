"""Reachability helpers for the storefront the E2E suite drives."""

from __future__ import annotations

import time

import requests


def is_site_ready(url: str, timeout: int = 5) -> bool:
    """Return True when the storefront home page responds with 200."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_site_ready(url: str, timeout: int = 60, interval: int = 2) -> None:
    """Poll the storefront until it responds or the timeout expires."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Storefront at {url} not reachable after {timeout}s")
