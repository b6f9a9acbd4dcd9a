"""Helpers shared by the browser, smoke and unit suites."""
