"""
Smoke-test fixtures for the to-do application.

Provides the ``smoke_app_url`` session-scoped fixture that yields a
reachable app URL shared across the smoke suite.  URL resolution is
delegated to :func:`shared.live_app.live_app_url`, which waits for an
explicitly configured app or skips when the default one is unreachable.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from config import Config
from shared.live_app import live_app_url


@pytest.fixture(scope="session")
def smoke_app_url(app_config: type[Config]) -> Generator[str, None, None]:
    """Yield a reachable to-do app URL for smoke tests."""
    yield from live_app_url(
        app_url_env="TODO_APP_URL",
        app_url_default=app_config.APP_URL,
        suite_name="smoke",
        timeout=app_config.HEALTH_TIMEOUT,
    )
