"""Unit tests for localekit.configuration module.

Tests cover:
- LocaleSettings validation and defaults
- Settings class initialization
- get_settings caching
"""

import pytest
from pydantic import ValidationError

from localekit.configuration import LocaleSettings, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "PREFIX",
        "LOG_LEVEL",
        "LOCALE_LANGUAGE",
        "LOCALE_DEFAULT_LANGUAGE",
        "LOCALE_SUPPORTED_LANGUAGES",
        "LOCALE_USE_INTERNAL",
        "LOCALE_FILE_LOCATION",
        "LOCALE_APP_ROOT",
        "LOCALE_FILE_ENCODING",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestLocaleSettings:
    """Test suite for LocaleSettings configuration."""

    def test_locale_settings_defaults(self, clean_env):
        """Test LocaleSettings uses correct default values."""
        locale = LocaleSettings()

        assert locale.LANGUAGE == ""
        assert locale.DEFAULT_LANGUAGE == "en"
        assert locale.SUPPORTED_LANGUAGES == ["en", "de"]
        assert locale.USE_INTERNAL is True
        assert locale.FILE_LOCATION == "${appRoot}/locale/messages.properties"
        assert locale.APP_ROOT == "."
        assert locale.FILE_PREFIX == "locale"
        assert locale.FILE_EXTENSION == "properties"
        assert locale.BUNDLE_PACKAGE == "localekit.locales"
        assert locale.FILE_ENCODING == "utf-8"

    def test_locale_settings_custom_values(self, clean_env):
        """Test LocaleSettings reads LOCALE_ prefixed variables."""
        clean_env.setenv("LOCALE_LANGUAGE", "de_DE")
        clean_env.setenv("LOCALE_DEFAULT_LANGUAGE", "FR")
        clean_env.setenv("LOCALE_SUPPORTED_LANGUAGES", '["fr", "de", "zh_TW"]')
        clean_env.setenv("LOCALE_USE_INTERNAL", "false")
        clean_env.setenv("LOCALE_APP_ROOT", "/opt/app")
        clean_env.setenv("LOCALE_FILE_ENCODING", "iso-8859-1")

        locale = LocaleSettings()

        assert locale.LANGUAGE == "de-de"
        assert locale.DEFAULT_LANGUAGE == "fr"
        assert locale.SUPPORTED_LANGUAGES == ["fr", "de", "zh-tw"]
        assert locale.USE_INTERNAL is False
        assert locale.APP_ROOT == "/opt/app"
        assert locale.FILE_ENCODING == "iso-8859-1"

    def test_unprefixed_variables_ignored(self, clean_env):
        """Test the system LANGUAGE variable is not read as a setting."""
        clean_env.setenv("LANGUAGE", "de")
        assert LocaleSettings().LANGUAGE == ""

    def test_empty_supported_languages_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            LocaleSettings(SUPPORTED_LANGUAGES=[])

    def test_blank_supported_codes_dropped(self, clean_env):
        locale = LocaleSettings(SUPPORTED_LANGUAGES=["en", "  ", "DE"])
        assert locale.SUPPORTED_LANGUAGES == ["en", "de"]


class TestSettings:
    """Test suite for the main Settings aggregator."""

    def test_settings_instantiates_subsettings(self, clean_env):
        settings = Settings()

        assert isinstance(settings.locale, LocaleSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_accepts_override(self, clean_env):
        locale = LocaleSettings(LANGUAGE="de")
        settings = Settings(locale=locale)
        assert settings.locale.LANGUAGE == "de"

    @pytest.mark.parametrize("prefix,expected", [("", True), ("dev-", False)])
    def test_is_production(self, clean_env, prefix, expected):
        clean_env.setenv("PREFIX", prefix)
        assert Settings().is_production is expected

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings() is get_settings()

    def test_get_settings_cache_clear(self, clean_env):
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first
