"""Shared fixtures for localekit tests."""

from unittest.mock import MagicMock

import pytest

from localekit.configuration import get_settings
from localekit.i18n.languages import LOCALE_ENV_VARS


@pytest.fixture
def mock_logger():
    """Logger double that records structured log calls."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test start from a fresh settings singleton."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove locale environment variables so detection is deterministic."""
    for var in LOCALE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
