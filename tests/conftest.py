"""Shared fixtures."""

import pytest
import structlog

from eventually.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_global_config():
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
