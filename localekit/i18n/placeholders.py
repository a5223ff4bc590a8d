"""Placeholder substitution for catalog messages and path templates.

A placeholder token is ``<prefix>name<suffix>`` where ``name`` is made of
word characters. Message templates use ``{name}``; external catalog paths
use ``${appRoot}``.
"""

import re
from typing import Any, Callable, List, Mapping, Optional

from localekit.errors import KeyNotFoundError

MissingHandler = Callable[[str, str], str]


def keep_token(full_match: str, variable_name: str) -> str:
    """Leave an unresolved token in the output verbatim."""
    return full_match


def raise_missing(full_match: str, variable_name: str) -> str:
    """Fail on an unresolved token.

    Raises:
        KeyNotFoundError: Always.
    """
    raise KeyNotFoundError(
        f"Key: {variable_name} for variable {full_match} not found.",
        key=variable_name,
    )


class PlaceholderFormatter:
    """Replaces placeholder tokens with caller-supplied values.

    Values that are not referenced by the template are ignored. Tokens with
    no value (absent key or ``None`` value) are handed to ``on_missing``,
    which by default keeps them verbatim. Only a bare name between prefix and
    suffix is a token: text such as ``{name extra}`` or ``{name,number}`` is
    not a placeholder and is left verbatim without reaching ``on_missing``.

    Example:
        >>> PlaceholderFormatter().format("Hello, {name}!", {"name": "World"})
        'Hello, World!'
        >>> PlaceholderFormatter().format("Hello, {name}!", {})
        'Hello, {name}!'
        >>> PlaceholderFormatter().format("{name extra}", {"name": "x"})
        '{name extra}'
    """

    def __init__(
        self,
        prefix: str = "{",
        suffix: str = "}",
        on_missing: Optional[MissingHandler] = None,
    ):
        self.prefix = prefix
        self.suffix = suffix
        self.on_missing = on_missing or keep_token
        self.pattern = re.compile(re.escape(prefix) + r"(\w+)" + re.escape(suffix))

    def format(self, template: str, values: Optional[Mapping[str, Any]] = None) -> str:
        """Substitute every placeholder token in ``template``.

        Args:
            template: Text containing placeholder tokens.
            values: Mapping of variable name -> replacement value.

        Returns:
            The template with known tokens replaced.
        """
        values = values or {}

        def _replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            value = values.get(name)
            if value is None:
                return self.on_missing(match.group(0), name)
            return str(value)

        return self.pattern.sub(_replace, template)

    def placeholders(self, template: str) -> List[str]:
        """List token names in the order they first appear."""
        names: List[str] = []
        for name in self.pattern.findall(template):
            if name not in names:
                names.append(name)
        return names

    def unresolved(
        self, template: str, values: Optional[Mapping[str, Any]] = None
    ) -> List[str]:
        """List token names that ``values`` cannot fill."""
        values = values or {}
        return [
            name for name in self.placeholders(template) if values.get(name) is None
        ]


MESSAGE_FORMATTER = PlaceholderFormatter()
PATH_FORMATTER = PlaceholderFormatter(prefix="${", suffix="}")
