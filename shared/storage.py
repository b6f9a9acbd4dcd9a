"""
Client-side storage probes for the to-do application.

The app persists its list to ``localStorage`` asynchronously, so every
probe here polls inside the page with ``page.wait_for_function`` until the
stored JSON matches, instead of sleeping a fixed duration.
"""

from __future__ import annotations

import json
from typing import Any

from playwright.sync_api import Page

from config import get_config


def _storage_key(key: str | None) -> str:
    return key or get_config().STORAGE_KEY


def _timeout(timeout: float | None) -> float:
    return get_config().STORAGE_TIMEOUT_MS if timeout is None else timeout


def read_stored_todos(page: Page, key: str | None = None) -> list[dict[str, Any]]:
    """
    Read the persisted to-do records.

    Args:
        page: Playwright page instance.
        key: localStorage key (defaults to the configured key).

    Returns:
        Parsed list of records, empty when nothing is stored yet.
    """
    raw = page.evaluate("k => localStorage.getItem(k)", _storage_key(key))
    if not raw:
        return []
    return json.loads(raw)


def wait_for_todo_count_in_storage(
    page: Page, expected: int, key: str | None = None, timeout: float | None = None
) -> None:
    """Wait until the stored list holds ``expected`` records."""
    page.wait_for_function(
        """([k, e]) => {
            const raw = localStorage.getItem(k);
            return raw !== null && JSON.parse(raw).length === e;
        }""",
        arg=[_storage_key(key), expected],
        timeout=_timeout(timeout),
    )


def wait_for_completed_count_in_storage(
    page: Page, expected: int, key: str | None = None, timeout: float | None = None
) -> None:
    """Wait until ``expected`` stored records are flagged completed."""
    page.wait_for_function(
        """([k, e]) => {
            const raw = localStorage.getItem(k);
            return raw !== null && JSON.parse(raw).filter(t => t.completed).length === e;
        }""",
        arg=[_storage_key(key), expected],
        timeout=_timeout(timeout),
    )


def wait_for_title_in_storage(
    page: Page, title: str, key: str | None = None, timeout: float | None = None
) -> None:
    """Wait until a stored record carries ``title``."""
    page.wait_for_function(
        """([k, t]) => {
            const raw = localStorage.getItem(k);
            return raw !== null && JSON.parse(raw).map(todo => todo.title).includes(t);
        }""",
        arg=[_storage_key(key), title],
        timeout=_timeout(timeout),
    )


def wait_for_storage_state(
    page: Page,
    expected: list[dict[str, Any]],
    key: str | None = None,
    timeout: float | None = None,
) -> None:
    """
    Wait until the stored records match ``expected`` in order.

    Only ``title`` and ``completed`` are compared; the app adds its own ids.

    Args:
        page: Playwright page instance.
        expected: Records as ``{"title": str, "completed": bool}`` dicts.
        key: localStorage key (defaults to the configured key).
        timeout: Maximum wait in milliseconds.
    """
    records = [
        {"title": record["title"], "completed": bool(record["completed"])}
        for record in expected
    ]
    page.wait_for_function(
        """([k, e]) => {
            const raw = localStorage.getItem(k);
            if (raw === null) return false;
            const stored = JSON.parse(raw);
            return stored.length === e.length && stored.every(
                (t, i) => t.title === e[i].title && !!t.completed === e[i].completed
            );
        }""",
        arg=[_storage_key(key), records],
        timeout=_timeout(timeout),
    )
