"""Reachability helpers for the to-do application the browser suite drives."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)


def is_app_ready(url: str, timeout: int = 5) -> bool:
    """Return True when the app URL answers with a 2xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.ok


def wait_for_app_ready(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the app URL until it answers or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_ready(url):
            logger.info("To-do app reachable at %s", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"To-do app at {url} not reachable after {timeout}s")


def live_app_url(
    *,
    app_url_env: str,
    app_url_default: str,
    suite_name: str,
    timeout: int = 30,
) -> Generator[str, None, None]:
    """
    Yield a reachable app URL for a browser suite.

    Priority:
    1. Use explicit URL from `app_url_env` (and wait for it; fail if it never answers).
    2. Use `app_url_default`, skipping the suite when it cannot be reached.
    """
    provided_url = os.getenv(app_url_env)
    if provided_url:
        wait_for_app_ready(provided_url, timeout=timeout)
        yield provided_url
        return

    if not is_app_ready(app_url_default):
        logger.warning("To-do app at %s unreachable, skipping %s suite", app_url_default, suite_name)
        pytest.skip(
            f"{app_url_default} is unreachable; set {app_url_env} to run {suite_name} tests"
        )
    yield app_url_default
