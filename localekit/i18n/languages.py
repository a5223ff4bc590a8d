"""Language selection for catalog loading.

Picks the catalog language from a requested code, falling back to a default
language when the request is unknown or unsupported. The fallback is both
logged and returned to the caller.
"""

import os
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from structlog.stdlib import BoundLogger

from localekit.errors import UnsupportedLanguageError
from localekit.i18n.models import LanguageTag
from localekit.logging import get_module_logger

logger = get_module_logger()

# Checked in gettext order
LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = {"c", "posix"}


@dataclass(frozen=True)
class LanguageSelection:
    """Outcome of a language selection.

    Attributes:
        requested: The code the caller asked for (may be None or empty).
        language: The language whose catalog should be loaded.
        fell_back: True when ``language`` is the default instead of the request.
        reason: Why the fallback happened, if it did.
    """

    requested: Optional[str]
    language: LanguageTag
    fell_back: bool = False
    reason: Optional[str] = None


def select_language(
    requested: Optional[str],
    supported: Sequence[LanguageTag],
    default: LanguageTag,
    log: Optional[BoundLogger] = None,
) -> LanguageSelection:
    """Choose the catalog language for a request.

    Resolution order:
    1. Requested code, if it is a known tag in ``supported``
    2. ``default``

    Args:
        requested: Language code such as "de" or "en_US".
        supported: Languages that have a catalog.
        default: Fallback language.
        log: Logger receiving the ``unsupported_language`` warning.

    Returns:
        LanguageSelection describing the choice.
    """
    log = log or logger

    if not requested:
        log.info("no_language_requested", fallback=default.value)
        return LanguageSelection(
            requested=requested,
            language=default,
            fell_back=True,
            reason="no language requested",
        )

    try:
        tag = LanguageTag.from_code(requested)
    except UnsupportedLanguageError:
        reason = "unknown language code"
    else:
        if tag in supported:
            return LanguageSelection(requested=requested, language=tag)
        reason = "language not supported"

    log.warning(
        "unsupported_language",
        requested=requested,
        reason=reason,
        fallback=default.value,
        supported=[lang.value for lang in supported],
    )
    return LanguageSelection(
        requested=requested,
        language=default,
        fell_back=True,
        reason=reason,
    )


def negotiate_language(
    candidates: Iterable[str],
    supported: Sequence[LanguageTag],
) -> Optional[LanguageTag]:
    """Return the first supported language among preference-ordered codes.

    Unknown codes are skipped.
    """
    for code in candidates:
        try:
            tag = LanguageTag.from_code(code)
        except UnsupportedLanguageError:
            continue
        if tag in supported:
            return tag
    return None


def detect_system_language() -> Optional[str]:
    """Detect the user's language from locale environment variables.

    ``LANGUAGE`` may hold a colon-separated list; only its first entry is
    used. Encodings and modifiers ("de_DE.UTF-8@euro") are stripped, and
    the neutral "C"/"POSIX" locales are ignored.

    Returns:
        A language code such as "de_DE", or None.
    """
    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var, "").split(":")[0]
        code = value.split(".")[0].split("@")[0].strip()
        if code and code.lower() not in _NEUTRAL_LOCALES:
            return code
    return None
