"""Shared pytest configuration: fake clock / sleeper fixtures."""

pytest_plugins = ["retrykit.testing.fixtures"]
