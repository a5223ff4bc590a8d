"""Catalog loading interface and implementations.

Defines the contract for loading message catalogs and provides the
properties and YAML based loaders.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from importlib import resources
from pathlib import PurePath
from typing import Any, Dict, Optional

import yaml

from localekit.errors import MalformedCatalogError, ResourceNotFoundError
from localekit.i18n.models import (
    BundledSource,
    CatalogSource,
    ExternalSource,
    MessageCatalog,
)
from localekit.i18n.properties import parse_properties
from localekit.logging import get_module_logger

logger = get_module_logger()

YAML_EXTENSIONS = {".yml", ".yaml"}
LEGACY_PROPERTIES_ENCODING = "iso-8859-1"


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Subclasses only define how raw text is parsed; reading bundled and
    external sources is shared.

    Attributes:
        encoding: Text encoding of catalog files.
        fallback_encoding: Encoding tried when ``encoding`` fails, if any.
    """

    def __init__(
        self, encoding: str = "utf-8", fallback_encoding: Optional[str] = None
    ):
        self.encoding = encoding
        self.fallback_encoding = fallback_encoding

    @abstractmethod
    def parse(self, text: str, source: str) -> Dict[str, str]:
        """Parse catalog text into a flat key -> message dict.

        Raises:
            MalformedCatalogError: If the text cannot be parsed.
        """
        pass

    def load(self, source: CatalogSource) -> MessageCatalog:
        """Load a catalog from a bundled resource or an external file.

        Args:
            source: BundledSource or ExternalSource to read.

        Returns:
            MessageCatalog with the parsed messages.

        Raises:
            ResourceNotFoundError: If the source is missing or unreadable.
            MalformedCatalogError: If the content cannot be decoded or parsed.
        """
        description = source.describe()
        text = self._decode(self._read_bytes(source), description)
        messages = self.parse(text, description)
        logger.info(
            "catalog_read",
            source=description,
            message_count=len(messages),
        )
        return MessageCatalog(
            source=description,
            messages=messages,
            language=source.language,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def _decode(self, data: bytes, description: str) -> str:
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            if self.fallback_encoding is None:
                raise MalformedCatalogError(
                    f"Catalog {description} is not valid {self.encoding}: {e}",
                    source=description,
                ) from e
            logger.warning(
                "catalog_encoding_fallback",
                source=description,
                encoding=self.encoding,
                fallback=self.fallback_encoding,
            )
        try:
            return data.decode(self.fallback_encoding)
        except UnicodeDecodeError as e:
            raise MalformedCatalogError(
                f"Catalog {description} is neither {self.encoding} nor "
                f"{self.fallback_encoding}: {e}",
                source=description,
            ) from e

    def _read_bytes(self, source: CatalogSource) -> bytes:
        description = source.describe()
        if isinstance(source, ExternalSource):
            if not source.path.is_file():
                raise ResourceNotFoundError(
                    f"Catalog file not found: {description}", source=description
                )
            try:
                return source.path.read_bytes()
            except OSError as e:
                raise ResourceNotFoundError(
                    f"Catalog file not readable: {description}", source=description
                ) from e

        if isinstance(source, BundledSource):
            try:
                resource = resources.files(source.package).joinpath(source.resource)
                if not resource.is_file():
                    raise ResourceNotFoundError(
                        f"Bundled catalog not found: {description}",
                        source=description,
                    )
                return resource.read_bytes()
            # TypeError: not a package; ValueError: empty package name
            except (ModuleNotFoundError, TypeError, ValueError, OSError) as e:
                raise ResourceNotFoundError(
                    f"Bundled catalog not available: {description}",
                    source=description,
                ) from e

        raise TypeError(f"Unsupported catalog source: {source!r}")


class PropertiesCatalogLoader(CatalogLoader):
    """Loader for Java-style ``.properties`` catalogs.

    Files that are not valid in ``encoding`` are re-read as ISO-8859-1,
    the historical encoding of properties files, so legacy Latin-1
    catalogs keep loading.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        fallback_encoding: Optional[str] = LEGACY_PROPERTIES_ENCODING,
    ):
        super().__init__(encoding=encoding, fallback_encoding=fallback_encoding)

    def parse(self, text: str, source: str) -> Dict[str, str]:
        return parse_properties(text, source)


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalogs.

    Expected format is a mapping; nested mappings are flattened to dotted
    keys:

        greeting: Hello, {name}!
        errors:
          not_found: "{item} not found"

    yields ``greeting`` and ``errors.not_found``.
    """

    def parse(self, text: str, source: str) -> Dict[str, str]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", source=source, error=str(e))
            raise MalformedCatalogError(
                f"Failed to parse {source}: {e}", source=source
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise MalformedCatalogError(
                f"Catalog {source} must be a mapping, got {type(data).__name__}",
                source=source,
            )

        messages: Dict[str, str] = {}
        self._flatten(data, "", messages, source)
        return messages

    def _flatten(
        self,
        data: Dict[Any, Any],
        prefix: str,
        out: Dict[str, str],
        source: str,
    ) -> None:
        for raw_key, value in data.items():
            key = f"{prefix}{raw_key}"
            if isinstance(value, dict):
                self._flatten(value, f"{key}.", out, source)
            elif value is None:
                logger.warning("null_catalog_value", source=source, key=key)
            elif isinstance(value, (list, tuple, set)):
                raise MalformedCatalogError(
                    f"Catalog {source} has a non-scalar value for key {key}",
                    source=source,
                )
            else:
                out[key] = str(value)


def loader_for(source: CatalogSource, encoding: str = "utf-8") -> CatalogLoader:
    """Pick a loader based on the source's file extension."""
    if isinstance(source, ExternalSource):
        suffix = source.path.suffix
    else:
        suffix = PurePath(source.resource).suffix
    if suffix.lower() in YAML_EXTENSIONS:
        return YAMLCatalogLoader(encoding=encoding)
    return PropertiesCatalogLoader(encoding=encoding)
