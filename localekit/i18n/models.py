"""Catalog models for the i18n system.

Defines language tags, catalog sources and the immutable message catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from localekit.errors import UnsupportedLanguageError
from localekit.filesystem.files import normalize_path
from localekit.i18n.placeholders import PATH_FORMATTER

DEFAULT_BUNDLE_PACKAGE = "localekit.locales"
DEFAULT_FILE_PREFIX = "locale"
DEFAULT_FILE_EXTENSION = "properties"
APP_ROOT_TOKEN = "appRoot"


class LanguageTag(str, Enum):
    """Supported ISO 639-1 language codes.

    Values are lower-case codes; the display name of every tag lives in
    ``_DISPLAY_NAMES``.
    """

    AF = "af"
    AR = "ar"
    AZ = "az"
    BE = "be"
    BG = "bg"
    BN = "bn"
    CA = "ca"
    CS = "cs"
    CY = "cy"
    DA = "da"
    DE = "de"
    EL = "el"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    EU = "eu"
    FA = "fa"
    FI = "fi"
    FR = "fr"
    GA = "ga"
    GL = "gl"
    HE = "he"
    HI = "hi"
    HR = "hr"
    HT = "ht"
    HU = "hu"
    HY = "hy"
    ID = "id"
    IS = "is"
    IT = "it"
    JA = "ja"
    JV = "jv"
    KA = "ka"
    KN = "kn"
    KO = "ko"
    LA = "la"
    LT = "lt"
    LV = "lv"
    MK = "mk"
    MN = "mn"
    MS = "ms"
    MT = "mt"
    MY = "my"
    NL = "nl"
    NO = "no"
    PL = "pl"
    PT = "pt"
    RO = "ro"
    RU = "ru"
    SE = "se"
    SK = "sk"
    SM = "sm"
    SL = "sl"
    SQ = "sq"
    SR = "sr"
    SV = "sv"
    SW = "sw"
    TA = "ta"
    TE = "te"
    TH = "th"
    TL = "tl"
    TR = "tr"
    UK = "uk"
    UR = "ur"
    VI = "vi"
    YI = "yi"
    ZH_CN = "zh-cn"
    ZH_TW = "zh-tw"

    @classmethod
    def from_code(cls, code: str) -> "LanguageTag":
        """Convert a language code to a LanguageTag.

        Matching is case-insensitive and accepts ``_`` or ``-`` separators.
        The full code is tried first ("zh_CN"), then its primary subtag
        ("en-US" -> EN).

        Args:
            code: Language code (e.g., "en", "DE", "en_US", "zh-TW").

        Returns:
            Matching LanguageTag.

        Raises:
            UnsupportedLanguageError: If the code is not known.
        """
        normalized = (code or "").strip().lower().replace("_", "-")
        for candidate in (normalized, normalized.split("-")[0]):
            try:
                return cls(candidate)
            except ValueError:
                continue
        raise UnsupportedLanguageError(code)

    @classmethod
    def from_name(cls, name: str) -> "LanguageTag":
        """Look up a tag by its display name (case-insensitive).

        Raises:
            UnsupportedLanguageError: If no tag has that display name.
        """
        wanted = (name or "").strip().lower()
        for tag, display in _DISPLAY_NAMES.items():
            if display.lower() == wanted:
                return tag
        raise UnsupportedLanguageError(name)

    @classmethod
    def is_valid_code(cls, code: str) -> bool:
        """Check whether a code maps to a known tag."""
        try:
            cls.from_code(code)
        except UnsupportedLanguageError:
            return False
        return True

    @property
    def display_name(self) -> str:
        """Human-readable language name (e.g., "German" for DE)."""
        return _DISPLAY_NAMES[self]

    def catalog_filename(
        self,
        prefix: str = DEFAULT_FILE_PREFIX,
        extension: str = DEFAULT_FILE_EXTENSION,
    ) -> str:
        """Build the conventional catalog file name for this language.

        Returns:
            File name in the form ``<prefix>-<code>.<extension>``.
        """
        return f"{prefix}-{self.value}.{extension}"


_DISPLAY_NAMES = {
    LanguageTag.AF: "Afrikaans",
    LanguageTag.AR: "Arabic",
    LanguageTag.AZ: "Azerbaijani",
    LanguageTag.BE: "Belarusian",
    LanguageTag.BG: "Bulgarian",
    LanguageTag.BN: "Bengali",
    LanguageTag.CA: "Catalan",
    LanguageTag.CS: "Czech",
    LanguageTag.CY: "Welsh",
    LanguageTag.DA: "Danish",
    LanguageTag.DE: "German",
    LanguageTag.EL: "Greek",
    LanguageTag.EN: "English",
    LanguageTag.EO: "Esperanto",
    LanguageTag.ES: "Spanish",
    LanguageTag.ET: "Estonian",
    LanguageTag.EU: "Basque",
    LanguageTag.FA: "Persian",
    LanguageTag.FI: "Finnish",
    LanguageTag.FR: "French",
    LanguageTag.GA: "Irish",
    LanguageTag.GL: "Galician",
    LanguageTag.HE: "Hebrew",
    LanguageTag.HI: "Hindi",
    LanguageTag.HR: "Croatian",
    LanguageTag.HT: "Haitian Creole",
    LanguageTag.HU: "Hungarian",
    LanguageTag.HY: "Armenian",
    LanguageTag.ID: "Indonesian",
    LanguageTag.IS: "Icelandic",
    LanguageTag.IT: "Italian",
    LanguageTag.JA: "Japanese",
    LanguageTag.JV: "Javanese",
    LanguageTag.KA: "Georgian",
    LanguageTag.KN: "Kannada",
    LanguageTag.KO: "Korean",
    LanguageTag.LA: "Latin",
    LanguageTag.LT: "Lithuanian",
    LanguageTag.LV: "Latvian",
    LanguageTag.MK: "Macedonian",
    LanguageTag.MN: "Mongolian",
    LanguageTag.MS: "Malay",
    LanguageTag.MT: "Maltese",
    LanguageTag.MY: "Burmese",
    LanguageTag.NL: "Dutch",
    LanguageTag.NO: "Norwegian",
    LanguageTag.PL: "Polish",
    LanguageTag.PT: "Portuguese",
    LanguageTag.RO: "Romanian",
    LanguageTag.RU: "Russian",
    LanguageTag.SE: "Northern Sami",
    LanguageTag.SK: "Slovak",
    LanguageTag.SM: "Samoan",
    LanguageTag.SL: "Slovenian",
    LanguageTag.SQ: "Albanian",
    LanguageTag.SR: "Serbian",
    LanguageTag.SV: "Swedish",
    LanguageTag.SW: "Swahili",
    LanguageTag.TA: "Tamil",
    LanguageTag.TE: "Telugu",
    LanguageTag.TH: "Thai",
    LanguageTag.TL: "Filipino",
    LanguageTag.TR: "Turkish",
    LanguageTag.UK: "Ukrainian",
    LanguageTag.UR: "Urdu",
    LanguageTag.VI: "Vietnamese",
    LanguageTag.YI: "Yiddish",
    LanguageTag.ZH_CN: "Chinese Simplified",
    LanguageTag.ZH_TW: "Chinese Traditional",
}


@dataclass(frozen=True)
class BundledSource:
    """A catalog shipped inside a Python package.

    Attributes:
        resource: File name of the catalog inside the package.
        package: Dotted name of the package holding the catalog.
        language: Language of the catalog, if known.
    """

    resource: str
    package: str = DEFAULT_BUNDLE_PACKAGE
    language: Optional[LanguageTag] = None

    @classmethod
    def for_language(
        cls,
        language: LanguageTag,
        prefix: str = DEFAULT_FILE_PREFIX,
        extension: str = DEFAULT_FILE_EXTENSION,
        package: str = DEFAULT_BUNDLE_PACKAGE,
    ) -> "BundledSource":
        """Build the bundled source for a language by naming convention."""
        return cls(
            resource=language.catalog_filename(prefix, extension),
            package=package,
            language=language,
        )

    def describe(self) -> str:
        return f"{self.package}/{self.resource}"


@dataclass(frozen=True)
class ExternalSource:
    """A catalog file outside the application bundle.

    Attributes:
        path: Filesystem path of the catalog file.
        language: Language of the catalog, if known.
    """

    path: Path
    language: Optional[LanguageTag] = None

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def from_template(
        cls,
        template: str,
        app_root: Union[str, Path],
        language: Optional[LanguageTag] = None,
    ) -> "ExternalSource":
        """Resolve the ``${appRoot}`` token of a path template.

        Args:
            template: Path that may contain ``${appRoot}``.
            app_root: Directory substituted for the token.
            language: Optional language of the catalog.

        Returns:
            ExternalSource with a normalized path.
        """
        resolved = PATH_FORMATTER.format(template, {APP_ROOT_TOKEN: str(app_root)})
        return cls(path=normalize_path(resolved), language=language)

    def describe(self) -> str:
        return str(self.path)


CatalogSource = Union[BundledSource, ExternalSource]


@dataclass(frozen=True)
class MessageCatalog:
    """Immutable mapping of message keys to message strings.

    A catalog is built once by a loader and never mutated; reloading
    produces a new catalog.

    Attributes:
        source: Description of where the catalog was loaded from.
        messages: Read-only mapping {key: message}.
        language: Language of the catalog, if known.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    source: str
    messages: Mapping[str, str] = field(default_factory=dict)
    language: Optional[LanguageTag] = None
    loaded_at: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a message by key.

        Returns:
            Message string, or None if the key is absent.
        """
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def keys(self) -> Iterator[str]:
        return iter(self.messages)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)
