"""Configuration module - public API.

Centralized configuration for localekit using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings singleton
    Settings: Main settings class (for testing/overrides)
    LocaleSettings: Catalog settings class (for testing)
"""

from localekit.configuration.locale import LocaleSettings
from localekit.configuration.settings import Settings, get_settings

__all__ = ["Settings", "LocaleSettings", "get_settings"]
