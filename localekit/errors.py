"""Custom exceptions for the localekit package.

Provides the error taxonomy for catalog loading, language selection and
message lookup, plus a helper to unwrap chained exceptions.
"""

from typing import Optional


class LocalizerError(Exception):
    """Base exception for all localekit errors.

    Example:
        try:
            resolver.require("greeting")
        except LocalizerError as e:
            logger.error("localizer_error", error=str(e))
    """

    pass


class CatalogError(LocalizerError):
    """Base exception for catalog loading failures.

    Attributes:
        source: Description of the catalog source that failed to load.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class ResourceNotFoundError(CatalogError):
    """Raised when a catalog source is missing or unreadable.

    Example:
        >>> loader.load(ExternalSource(Path("/missing/messages.properties")))
        Traceback (most recent call last):
        ...
        ResourceNotFoundError: Catalog file not found: /missing/messages.properties
    """

    pass


class MalformedCatalogError(CatalogError):
    """Raised when catalog text cannot be parsed as key=value entries.

    Attributes:
        line: 1-based line number of the offending entry, if known.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
    ):
        super().__init__(message, source=source)
        self.line = line


class UnsupportedLanguageError(LocalizerError, ValueError):
    """Raised when a language code is not in the known set.

    Attributes:
        code: The rejected language code.
    """

    def __init__(self, code: str):
        super().__init__(f"Unsupported language: {code}")
        self.code = code


class KeyNotFoundError(LocalizerError, KeyError):
    """Raised by strict lookups when a key or placeholder variable is absent."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class CatalogNotLoadedError(LocalizerError):
    """Raised when a resolver is used before any catalog was loaded."""

    pass


class NotDeletedError(LocalizerError):
    """Raised when a file or directory could not be deleted."""

    pass


def root_cause(exc: BaseException) -> BaseException:
    """Return the innermost exception of a chain.

    Follows ``__cause__`` first, then ``__context__`` unless the context was
    suppressed with ``raise ... from None``.

    Args:
        exc: Exception to unwrap.

    Returns:
        The deepest exception in the chain (``exc`` itself if unchained).
    """
    seen = {id(exc)}
    current = exc
    while True:
        nxt = current.__cause__
        if nxt is None and not current.__suppress_context__:
            nxt = current.__context__
        if nxt is None or id(nxt) in seen:
            return current
        seen.add(id(nxt))
        current = nxt
