"""
Shared pytest fixtures for the to-do browser test suite.

This module contains fixtures that are shared across all test modules:
configuration lookup and test data for seeding the list.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Test data factories
- Environment-driven configuration
"""

import logging

import pytest

from config import Config, get_config
from shared.test_helpers import TODO_ITEMS, unique_titles

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app_config() -> type[Config]:
    """
    Resolve the configuration class for this run.

    Returns:
        Configuration class selected by TODO_E2E_ENV.
    """
    config_class = get_config()
    logger.info("Using config: %s (%s)", config_class.__name__, config_class.APP_URL)
    return config_class


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def todo_items() -> list[str]:
    """
    Provide the three default item titles.

    Returns:
        Fresh list, safe to mutate inside a test.
    """
    return list(TODO_ITEMS)


@pytest.fixture
def title_factory():
    """
    Factory fixture for distinct generated titles.

    Example:
        def test_something(title_factory):
            titles = title_factory(5)
    """

    def _make(count: int) -> list[str]:
        return unique_titles(count)

    return _make
