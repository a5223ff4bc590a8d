"""Tests for localekit.i18n.localizer module."""

import dataclasses

import pytest

from localekit.errors import MalformedCatalogError, ResourceNotFoundError
from localekit.i18n import LanguageTag, MessageLocalizer


@pytest.fixture
def bundled_localizer():
    return MessageLocalizer.open(
        "localekit.locales", "locale-en.properties", use_bundled=True
    )


@pytest.mark.unit
class TestMessageLocalizer:
    """Tests for MessageLocalizer."""

    def test_open_bundled(self, bundled_localizer):
        assert bundled_localizer.get_message("greet") == "Hello, {name}!"
        assert bundled_localizer.catalog.source == (
            "localekit.locales/locale-en.properties"
        )
        assert bundled_localizer.catalog.language == LanguageTag.EN

    def test_open_external(self, properties_catalog):
        localizer = MessageLocalizer.open(
            properties_catalog.parent, properties_catalog.name
        )
        assert localizer.catalog_dir == str(properties_catalog.parent)
        assert localizer.use_bundled is False
        assert localizer.get_message("farewell") == "Goodbye, {name}."

    def test_open_missing_catalog_raises(self, tmp_path):
        with pytest.raises(ResourceNotFoundError):
            MessageLocalizer.open(tmp_path, "missing.properties")

    def test_open_malformed_catalog_raises(self, tmp_path):
        (tmp_path / "bad.properties").write_text("k=\\u12\n", encoding="utf-8")
        with pytest.raises(MalformedCatalogError):
            MessageLocalizer.open(tmp_path, "bad.properties")

    def test_get_message_with_placeholders(self, bundled_localizer):
        assert bundled_localizer.get_message_with_placeholders(
            "greet", {"name": "World"}
        ) == ("Hello, World!")
        assert bundled_localizer.get_message_with_placeholders("greet") == (
            "Hello, {name}!"
        )

    def test_missing_key_returns_none(self, bundled_localizer):
        assert bundled_localizer.get_message("missing") is None
        assert bundled_localizer.get_message_with_placeholders("missing", {}) is None

    def test_language_name_for_tag(self, bundled_localizer):
        assert bundled_localizer.language_name == "English"
        assert bundled_localizer.language_tag == LanguageTag.EN

    def test_user_defined_language(self, properties_catalog):
        localizer = MessageLocalizer.open(
            properties_catalog.parent, properties_catalog.name, language="Pirate"
        )
        assert localizer.language_name == "Pirate"
        assert localizer.language_tag is None
        assert localizer.catalog.language is None

    def test_is_frozen(self, bundled_localizer):
        with pytest.raises(dataclasses.FrozenInstanceError):
            bundled_localizer.language = LanguageTag.DE

    def test_replace_builds_new_localizer(self, bundled_localizer):
        german = bundled_localizer.replace(
            catalog_name="locale-de.properties", language=LanguageTag.DE
        )

        assert german is not bundled_localizer
        assert german.get_message("greet") == "Hallo, {name}!"
        assert german.language_name == "German"
        assert bundled_localizer.get_message("greet") == "Hello, {name}!"
        assert bundled_localizer.language == LanguageTag.EN

    def test_replace_switches_to_external(self, bundled_localizer, properties_catalog):
        external = bundled_localizer.replace(
            catalog_dir=str(properties_catalog.parent),
            catalog_name=properties_catalog.name,
            use_bundled=False,
        )
        assert external.get_message("plain") == "No placeholders here"

    def test_replace_rejects_catalog(self, bundled_localizer):
        with pytest.raises(TypeError):
            bundled_localizer.replace(catalog=bundled_localizer.catalog)

    def test_equality_ignores_catalog_instance(self, bundled_localizer):
        again = MessageLocalizer.open(
            "localekit.locales", "locale-en.properties", use_bundled=True
        )
        assert again == bundled_localizer
