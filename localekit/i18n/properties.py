"""Parser for Java-style ``.properties`` catalog text.

Follows the ``java.util.Properties`` line grammar so catalogs written for
Java applications load unchanged:

- ``#`` and ``!`` start comment lines
- a line ending in an odd number of backslashes continues on the next line
- the key ends at the first unescaped ``=``, ``:`` or whitespace
- ``\\t \\n \\r \\f \\uXXXX`` escapes; any other escaped character is literal
"""

import re
import string
from typing import Dict, Iterator, Tuple

from localekit.errors import MalformedCatalogError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_CHARS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(text: str, source: str = "<string>") -> Dict[str, str]:
    """Parse properties text into a key -> value dict.

    Later duplicates of a key override earlier ones.

    Args:
        text: Decoded catalog text.
        source: Description of the text's origin, used in error messages.

    Returns:
        Dict of unescaped keys to unescaped values.

    Raises:
        MalformedCatalogError: On an invalid ``\\uXXXX`` escape or an
            unpaired surrogate.
    """
    entries: Dict[str, str] = {}
    for lineno, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, lineno, source)
        entries[key] = _unescape(raw_value, lineno, source)
    return entries


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (starting line number, logical line) pairs.

    Comments and blank lines are dropped; continuation lines are joined
    with their leading whitespace removed.
    """
    natural = _LINE_BREAK.split(text)
    index = 0
    while index < len(natural):
        line = natural[index].lstrip(_WHITESPACE)
        lineno = index + 1
        index += 1
        if not line or line[0] in _COMMENT_CHARS:
            continue
        while _ends_with_continuation(line) and index < len(natural):
            line = line[:-1] + natural[index].lstrip(_WHITESPACE)
            index += 1
        if _ends_with_continuation(line):
            # continuation at end of input
            line = line[:-1]
        yield lineno, line


def _split_entry(line: str) -> Tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(text: str, lineno: int, source: str) -> str:
    if "\\" not in text:
        return text

    chars = []
    index = 0
    length = len(text)
    has_unicode_escape = False
    while index < length:
        char = text[index]
        if char != "\\":
            chars.append(char)
            index += 1
            continue

        index += 1
        if index >= length:
            break
        char = text[index]
        if char == "u":
            digits = text[index + 1 : index + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise MalformedCatalogError(
                    f"Malformed \\uXXXX escape in {source} at line {lineno}",
                    source=source,
                    line=lineno,
                )
            chars.append(chr(int(digits, 16)))
            has_unicode_escape = True
            index += 5
            continue
        chars.append(_ESCAPES.get(char, char))
        index += 1

    result = "".join(chars)
    if has_unicode_escape:
        # combine UTF-16 surrogate pairs written as two escapes
        try:
            result = result.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
        except UnicodeDecodeError as e:
            raise MalformedCatalogError(
                f"Unpaired surrogate escape in {source} at line {lineno}",
                source=source,
                line=lineno,
            ) from e
    return result
