"""Pytest configuration.

Sets the testing environment before any valobs module reads its settings,
and resets cached singletons so tests stay isolated.
"""

import os

import pytest

os.environ.setdefault("VALOBS_ENVIRONMENT", "testing")

from valobs.core.config import get_settings  # noqa: E402
from valobs.core.container import get_logger  # noqa: E402


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings and logger after each test."""
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
