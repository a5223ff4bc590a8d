"""Immutable message localizer bound to one catalog file."""

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from localekit.i18n.loader import CatalogLoader, loader_for
from localekit.i18n.models import (
    BundledSource,
    CatalogSource,
    ExternalSource,
    LanguageTag,
    MessageCatalog,
)
from localekit.i18n.placeholders import MESSAGE_FORMATTER

Language = Union[LanguageTag, str]


@dataclass(frozen=True)
class MessageLocalizer:
    """A loaded catalog together with the settings it was loaded from.

    Instances are never mutated: ``replace()`` builds a new localizer and
    reloads its catalog.

    Attributes:
        catalog_dir: Directory (external) or dotted package name (bundled).
        catalog_name: File name of the catalog.
        use_bundled: Load from a package resource instead of the file system.
        language: LanguageTag, or a free-form name for user-defined languages.
        catalog: The loaded MessageCatalog.
    """

    catalog_dir: str
    catalog_name: str
    use_bundled: bool
    language: Language
    catalog: MessageCatalog = field(compare=False, repr=False)

    @classmethod
    def open(
        cls,
        catalog_dir: Union[str, Path],
        catalog_name: str,
        use_bundled: bool = False,
        language: Language = LanguageTag.EN,
        loader: Optional[CatalogLoader] = None,
    ) -> "MessageLocalizer":
        """Load a catalog and wrap it in a localizer.

        Raises:
            ResourceNotFoundError: If the catalog does not exist.
            MalformedCatalogError: If the catalog cannot be parsed.
        """
        source = _source_for(str(catalog_dir), catalog_name, use_bundled, language)
        catalog = (loader or loader_for(source)).load(source)
        return cls(
            catalog_dir=str(catalog_dir),
            catalog_name=catalog_name,
            use_bundled=use_bundled,
            language=language,
            catalog=catalog,
        )

    @property
    def language_name(self) -> str:
        """Display name of the language, or the user-defined name as given."""
        if isinstance(self.language, LanguageTag):
            return self.language.display_name
        return self.language

    @property
    def language_tag(self) -> Optional[LanguageTag]:
        return self.language if isinstance(self.language, LanguageTag) else None

    def get_message(self, key: str) -> Optional[str]:
        return self.catalog.get_message(key)

    def get_message_with_placeholders(
        self, key: str, substitutions: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        message = self.catalog.get_message(key)
        if message is None:
            return None
        return MESSAGE_FORMATTER.format(message, substitutions)

    def replace(
        self, loader: Optional[CatalogLoader] = None, **changes: Any
    ) -> "MessageLocalizer":
        """Return a new localizer with ``changes`` applied and reloaded.

        Example:
            german = localizer.replace(
                catalog_name="locale-de.properties", language=LanguageTag.DE
            )
        """
        if "catalog" in changes:
            raise TypeError("catalog is derived from the other fields")
        fields = {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name != "catalog"
        }
        fields.update(changes)
        return type(self).open(loader=loader, **fields)


def _source_for(
    catalog_dir: str, catalog_name: str, use_bundled: bool, language: Language
) -> CatalogSource:
    tag = language if isinstance(language, LanguageTag) else None
    if use_bundled:
        return BundledSource(resource=catalog_name, package=catalog_dir, language=tag)
    return ExternalSource(path=Path(catalog_dir) / catalog_name, language=tag)
