"""Shared test fixtures and configuration."""

import logging
import os

import pytest


# Complete test environment that overrides ALL possible config values
TEST_ENV = {
    "FIELD_SUGGEST_LOG_LEVEL": "warning",
    "FIELD_SUGGEST_LOG_JSON": "false",
    "FIELD_SUGGEST_LOGGER_LEVELS": "",
    "FIELD_SUGGEST_MAX_LISTED_CANDIDATES": "10",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset FIELD_SUGGEST_* variables to test defaults before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def restore_root_logger():
    """Put root logger handlers and level back after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def schema_fields() -> list[str]:
    """Field names of a small table schema."""
    return ["vector", "id", "name", "column", "table"]
