"""
Suite configuration module.

This module defines configuration classes for the environments the
browser suite can run against (the hosted demo, a locally served copy).
Configuration values are loaded from environment variables with sensible
defaults.
"""

import os


class Config:
    """Base configuration with default settings."""

    APP_URL: str = os.environ.get("TODO_APP_URL", "https://demo.playwright.dev/todomvc")

    # Key the app writes its JSON array of {title, completed} records under
    STORAGE_KEY: str = os.environ.get("TODO_STORAGE_KEY", "react-todos")

    # Playwright timeouts, in milliseconds
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("TODO_EXPECT_TIMEOUT_MS", "5000"))
    STORAGE_TIMEOUT_MS: int = int(os.environ.get("TODO_STORAGE_TIMEOUT_MS", "2000"))

    # Reachability probe, in seconds
    HEALTH_TIMEOUT: int = int(os.environ.get("TODO_HEALTH_TIMEOUT", "30"))

    VIEWPORT: dict = {"width": 1280, "height": 720}


class DemoConfig(Config):
    """Hosted demo configuration."""


class LocalConfig(Config):
    """Locally served TodoMVC build configuration."""

    APP_URL: str = os.environ.get("TODO_APP_URL", "http://localhost:8080/todomvc")
    HEALTH_TIMEOUT: int = int(os.environ.get("TODO_HEALTH_TIMEOUT", "10"))


# Configuration mapping for easy access
config = {
    "demo": DemoConfig,
    "local": LocalConfig,
    "default": DemoConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (demo, local).
             If None, uses TODO_E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODO_E2E_ENV", "demo")
    return config.get(env, config["default"])
