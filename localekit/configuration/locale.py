"""Locale catalog settings."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from localekit.configuration.base import FeatureSettings


class LocaleSettings(FeatureSettings):
    """Message catalog configuration.

    Environment Variables:
        LOCALE_LANGUAGE: Requested language code (default: "" = detect from system)
        LOCALE_DEFAULT_LANGUAGE: Fallback language code (default: en)
        LOCALE_SUPPORTED_LANGUAGES: JSON list of codes with a bundled catalog
        LOCALE_USE_INTERNAL: Load the bundled catalog instead of an external file
        LOCALE_FILE_LOCATION: External catalog path, may contain ${appRoot}
        LOCALE_APP_ROOT: Base directory substituted for ${appRoot}
        LOCALE_FILE_PREFIX: Bundled catalog file prefix (default: locale)
        LOCALE_FILE_EXTENSION: Bundled catalog file extension (default: properties)
        LOCALE_BUNDLE_PACKAGE: Package holding the bundled catalogs
        LOCALE_FILE_ENCODING: Catalog file encoding (default: utf-8)

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()

        if not settings.locale.USE_INTERNAL:
            path = settings.locale.FILE_LOCATION
        ```
    """

    model_config = SettingsConfigDict(env_prefix="LOCALE_")

    LANGUAGE: str = Field(
        default="",
        description="Requested language code; empty to detect from the environment",
    )

    DEFAULT_LANGUAGE: str = Field(
        default="en",
        description="Language used when the requested one is unsupported",
    )

    SUPPORTED_LANGUAGES: List[str] = Field(
        default_factory=lambda: ["en", "de"],
        description="Language codes that ship a bundled catalog",
    )

    USE_INTERNAL: bool = Field(
        default=True,
        description="Load the bundled catalog (True) or the external file (False)",
    )

    FILE_LOCATION: str = Field(
        default="${appRoot}/locale/messages.properties",
        description="External catalog path template",
    )

    APP_ROOT: str = Field(
        default=".",
        description="Application base directory substituted for ${appRoot}",
    )

    FILE_PREFIX: str = Field(default="locale")

    FILE_EXTENSION: str = Field(default="properties")

    BUNDLE_PACKAGE: str = Field(default="localekit.locales")

    FILE_ENCODING: str = Field(
        default="utf-8",
        description="Catalog encoding; properties files fall back to ISO-8859-1",
    )

    @field_validator("LANGUAGE", "DEFAULT_LANGUAGE")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        """Lower-case codes and use '-' as the subtag separator."""
        return v.strip().lower().replace("_", "-")

    @field_validator("SUPPORTED_LANGUAGES")
    @classmethod
    def validate_supported_languages(cls, v: List[str]) -> List[str]:
        """Normalize supported codes and reject an empty list."""
        codes = [code.strip().lower().replace("_", "-") for code in v if code.strip()]
        if not codes:
            raise ValueError("SUPPORTED_LANGUAGES must not be empty")
        return codes
