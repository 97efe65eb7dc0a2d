"""
Pytest configuration and fixtures for attendance tests.

Event windows used throughout:
- weekend: Friday 2025-01-17 18:00 until Sunday 2025-01-19 12:00 (8 buckets:
  Fri evening/overnight, Sat x4, Sun morning/afternoon)
- midday: Friday 2025-01-17 14:00 until Saturday 2025-01-18 12:00
"""

import logging
from datetime import datetime

import pytest
import structlog

from lanparty_attendance import config
from lanparty_attendance.logging import use_library_defaults


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Isolate config and structlog configuration between tests."""
    for name in ("LANPARTY_MAX_EVENT_DURATION_DAYS", "LANPARTY_LOG_JSON", "LANPARTY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config.reset_config()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    config.reset_config()
    structlog.reset_defaults()
    use_library_defaults()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def weekend():
    """Friday 18:00 until Sunday 12:00."""
    return datetime(2025, 1, 17, 18, 0), datetime(2025, 1, 19, 12, 0)


@pytest.fixture
def midday():
    """Friday 14:00 until Saturday 12:00."""
    return datetime(2025, 1, 17, 14, 0), datetime(2025, 1, 18, 12, 0)
