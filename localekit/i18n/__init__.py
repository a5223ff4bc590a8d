"""i18n system - message catalogs for localized display strings.

Loads flat key-value catalogs from bundled resources or external override
files, resolves keys and substitutes ``{name}`` placeholders.

Main components:
- models: LanguageTag, BundledSource, ExternalSource, MessageCatalog
- properties: Java-style .properties parser
- placeholders: PlaceholderFormatter
- loader: CatalogLoader, PropertiesCatalogLoader, YAMLCatalogLoader
- resolver: MessageResolver and the load_catalog/resolve functions
- languages: language selection with reported fallback
- bootstrap: ExternalCatalogBootstrap
- localizer: MessageLocalizer
- factory: create_resolver
"""

from localekit.i18n.bootstrap import ExternalCatalogBootstrap
from localekit.i18n.factory import create_resolver
from localekit.i18n.languages import (
    LanguageSelection,
    detect_system_language,
    negotiate_language,
    select_language,
)
from localekit.i18n.loader import (
    CatalogLoader,
    PropertiesCatalogLoader,
    YAMLCatalogLoader,
    loader_for,
)
from localekit.i18n.localizer import MessageLocalizer
from localekit.i18n.models import (
    BundledSource,
    CatalogSource,
    ExternalSource,
    LanguageTag,
    MessageCatalog,
)
from localekit.i18n.placeholders import PlaceholderFormatter, keep_token, raise_missing
from localekit.i18n.properties import parse_properties
from localekit.i18n.resolver import (
    MessageResolver,
    load_catalog,
    resolve,
    resolve_with_placeholders,
)

__all__ = [
    "BundledSource",
    "CatalogLoader",
    "CatalogSource",
    "ExternalCatalogBootstrap",
    "ExternalSource",
    "LanguageSelection",
    "LanguageTag",
    "MessageCatalog",
    "MessageLocalizer",
    "MessageResolver",
    "PlaceholderFormatter",
    "PropertiesCatalogLoader",
    "YAMLCatalogLoader",
    "create_resolver",
    "detect_system_language",
    "keep_token",
    "load_catalog",
    "loader_for",
    "negotiate_language",
    "parse_properties",
    "raise_missing",
    "resolve",
    "resolve_with_placeholders",
    "select_language",
]
