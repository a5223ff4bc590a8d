"""Message resolver: catalog loading, key lookup and placeholder substitution.

Load failures come back as OperationResult values and missing keys as
``None`` so callers can supply their own fallback text.
"""

from typing import Any, Mapping, Optional, Tuple

from structlog.stdlib import BoundLogger

from localekit.errors import (
    CatalogNotLoadedError,
    KeyNotFoundError,
    MalformedCatalogError,
    ResourceNotFoundError,
    root_cause,
)
from localekit.i18n.loader import CatalogLoader, loader_for
from localekit.i18n.models import CatalogSource, MessageCatalog
from localekit.i18n.placeholders import MESSAGE_FORMATTER, PlaceholderFormatter
from localekit.logging import get_module_logger
from localekit.operations import OperationResult

logger = get_module_logger()


def load_catalog(
    source: CatalogSource,
    loader: Optional[CatalogLoader] = None,
    log: Optional[BoundLogger] = None,
) -> OperationResult:
    """Load a catalog and report the outcome as a typed result.

    Args:
        source: BundledSource or ExternalSource to load.
        loader: Loader to use; picked by file extension when omitted.
        log: Logger receiving failure events.

    Returns:
        SUCCESS with the MessageCatalog as ``data``, NOT_FOUND with
        error_code RESOURCE_NOT_FOUND, or PERMANENT_ERROR with error_code
        MALFORMED_CATALOG.
    """
    log = log or logger
    loader = loader or loader_for(source)
    description = source.describe()
    try:
        catalog = loader.load(source)
    except ResourceNotFoundError as e:
        log.error(
            "catalog_not_found",
            source=description,
            error=str(e),
            cause=type(root_cause(e)).__name__,
        )
        return OperationResult.not_found(str(e))
    except MalformedCatalogError as e:
        log.error(
            "catalog_malformed",
            source=description,
            error=str(e),
            line=e.line,
        )
        return OperationResult.permanent_error(str(e), error_code="MALFORMED_CATALOG")

    return OperationResult.success(
        data=catalog, message=f"Loaded {len(catalog)} messages from {description}"
    )


def resolve(catalog: MessageCatalog, key: str) -> Optional[str]:
    """Look up ``key`` in ``catalog``.

    Returns:
        The message, or None when the key is absent.
    """
    return catalog.get_message(key)


def resolve_with_placeholders(
    catalog: MessageCatalog,
    key: str,
    substitutions: Optional[Mapping[str, Any]] = None,
    formatter: Optional[PlaceholderFormatter] = None,
) -> Optional[str]:
    """Look up ``key`` and substitute ``{name}`` placeholders.

    Placeholders without a substitution are left verbatim.

    Returns:
        The formatted message, or None when the key is absent.
    """
    message = catalog.get_message(key)
    if message is None:
        return None
    return (formatter or MESSAGE_FORMATTER).format(message, substitutions)


class MessageResolver:
    """Holds the current catalog and resolves messages from it.

    The catalog is published by a single attribute assignment, so readers
    always see either the previous or the new catalog, never a partial one.
    A failed load or reload leaves the current catalog in place.

    Attributes:
        loader: Loader to use; picked per source when None.
        formatter: Placeholder formatter for message templates.
        log: Logger for load and lookup events.
    """

    def __init__(
        self,
        loader: Optional[CatalogLoader] = None,
        formatter: Optional[PlaceholderFormatter] = None,
        log: Optional[BoundLogger] = None,
    ):
        self.loader = loader
        self.formatter = formatter or MESSAGE_FORMATTER
        self.log = log or logger
        # (catalog, source), replaced as one reference
        self._state: Tuple[Optional[MessageCatalog], Optional[CatalogSource]] = (
            None,
            None,
        )

    @property
    def catalog(self) -> Optional[MessageCatalog]:
        return self._state[0]

    @property
    def source(self) -> Optional[CatalogSource]:
        return self._state[1]

    @property
    def is_loaded(self) -> bool:
        return self._state[0] is not None

    def snapshot(self) -> Tuple[Optional[MessageCatalog], Optional[CatalogSource]]:
        """Return the current catalog together with the source it came from."""
        return self._state

    def load(self, source: CatalogSource) -> OperationResult:
        """Load ``source`` and make it the current catalog on success."""
        result = load_catalog(source, loader=self.loader, log=self.log)
        if result.is_success:
            self._state = (result.data, source)
            self.log.info(
                "catalog_loaded",
                source=source.describe(),
                message_count=len(result.data),
            )
        return result

    def reload(self) -> OperationResult:
        """Reload the last successfully loaded source wholesale."""
        source = self._state[1]
        if source is None:
            return OperationResult.permanent_error(
                "No catalog source has been loaded", error_code="NO_SOURCE"
            )
        self.log.info("catalog_reload_requested", source=source.describe())
        return self.load(source)

    def resolve(self, key: str) -> Optional[str]:
        """Resolve ``key``; None (and a warning) when it is absent."""
        catalog = self._require_catalog()
        message = resolve(catalog, key)
        if message is None:
            self._log_missing(catalog, key)
        return message

    def resolve_with_placeholders(
        self, key: str, substitutions: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        """Resolve ``key`` and fill its placeholders from ``substitutions``."""
        catalog = self._require_catalog()
        message = resolve(catalog, key)
        if message is None:
            self._log_missing(catalog, key)
            return None

        unresolved = self.formatter.unresolved(message, substitutions)
        if unresolved:
            self.log.debug(
                "unresolved_placeholders",
                key=key,
                placeholders=unresolved,
            )
        return self.formatter.format(message, substitutions)

    def require(
        self, key: str, substitutions: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Like resolve_with_placeholders, but a missing key is an error.

        Raises:
            KeyNotFoundError: If ``key`` is absent from the catalog.
        """
        catalog = self._require_catalog()
        message = self.resolve_with_placeholders(key, substitutions)
        if message is None:
            raise KeyNotFoundError(
                f'Invalid translation key "{key}" in catalog "{catalog.source}"',
                key=key,
            )
        return message

    def has_message(self, key: str) -> bool:
        catalog = self._state[0]
        return catalog is not None and catalog.has_message(key)

    def _require_catalog(self) -> MessageCatalog:
        catalog = self._state[0]
        if catalog is None:
            raise CatalogNotLoadedError("No catalog loaded; call load() first")
        return catalog

    def _log_missing(self, catalog: MessageCatalog, key: str) -> None:
        self.log.warning(
            "translation_key_not_found",
            key=key,
            source=catalog.source,
        )
