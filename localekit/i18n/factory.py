"""Factory functions for creating i18n components.

Builds a ready-to-use MessageResolver from LocaleSettings: picks the
language, bootstraps the external catalog when one is configured and loads
the catalog.
"""

from typing import Optional

from structlog.stdlib import BoundLogger

from localekit.configuration import LocaleSettings, get_settings
from localekit.errors import CatalogError, MalformedCatalogError, ResourceNotFoundError
from localekit.filesystem import FileSystem, LocalFileSystem
from localekit.i18n.bootstrap import ExternalCatalogBootstrap
from localekit.i18n.languages import detect_system_language, select_language
from localekit.i18n.loader import loader_for
from localekit.i18n.models import (
    BundledSource,
    CatalogSource,
    ExternalSource,
    LanguageTag,
)
from localekit.i18n.resolver import MessageResolver
from localekit.logging import get_module_logger

logger = get_module_logger()

_ERRORS_BY_CODE = {
    "RESOURCE_NOT_FOUND": ResourceNotFoundError,
    "MALFORMED_CATALOG": MalformedCatalogError,
}


def create_resolver(
    settings: Optional[LocaleSettings] = None,
    filesystem: Optional[FileSystem] = None,
    log: Optional[BoundLogger] = None,
) -> MessageResolver:
    """Create a MessageResolver with its catalog loaded.

    Args:
        settings: Locale settings (default: ``get_settings().locale``).
        filesystem: File-system capability for the external bootstrap.
        log: Logger shared by the resolver and language selection.

    Returns:
        MessageResolver: Resolver with the selected catalog loaded.

    Raises:
        UnsupportedLanguageError: If a configured default or supported code
            is not a known language.
        ResourceNotFoundError: If the selected catalog does not exist.
        MalformedCatalogError: If the selected catalog cannot be parsed.

    Usage:
        resolver = create_resolver()
        text = resolver.resolve_with_placeholders("greeting", {"name": "World"})
    """
    settings = settings or get_settings().locale
    log = log or logger

    default = LanguageTag.from_code(settings.DEFAULT_LANGUAGE)
    supported = [LanguageTag.from_code(code) for code in settings.SUPPORTED_LANGUAGES]
    requested = settings.LANGUAGE or detect_system_language()
    selection = select_language(requested, supported, default, log=log)

    bundled = BundledSource.for_language(
        selection.language,
        prefix=settings.FILE_PREFIX,
        extension=settings.FILE_EXTENSION,
        package=settings.BUNDLE_PACKAGE,
    )

    source: CatalogSource = bundled
    if not settings.USE_INTERNAL:
        external = ExternalSource.from_template(
            settings.FILE_LOCATION,
            app_root=settings.APP_ROOT,
            language=selection.language,
        )
        bootstrap = ExternalCatalogBootstrap(filesystem or LocalFileSystem(), log=log)
        prepared = bootstrap.ensure(external, seed=bundled)
        if prepared.is_success:
            source = external
        else:
            log.warning(
                "external_catalog_unavailable",
                path=str(external.path),
                fallback=bundled.describe(),
                error_code=prepared.error_code,
            )

    # bundled catalogs are always UTF-8
    encoding = settings.FILE_ENCODING if source is not bundled else "utf-8"
    resolver = MessageResolver(loader=loader_for(source, encoding=encoding), log=log)
    result = resolver.load(source)
    if not result.is_success:
        error_class = _ERRORS_BY_CODE.get(result.error_code, CatalogError)
        raise error_class(result.message, source=source.describe())

    log.info(
        "resolver_created",
        source=source.describe(),
        language=selection.language.value,
        fell_back=selection.fell_back,
    )
    return resolver
