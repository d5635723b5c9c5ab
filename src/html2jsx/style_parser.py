#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/style_parser.py
"""Inline style declaration parser.

Parses the value of an HTML ``style`` attribute into an ordered mapping of
CSS property to value and serializes it as the body of a JSX style object.

Examples
--------
    >>> StyleParser("color: red; -ms-flex: 1; margin:10px").to_jsx_string()
    "color: 'red', msFlex: 1, margin: '10px'"

"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from html2jsx.utils.text import hyphen_to_camel_case, is_numeric

_MS_PREFIX = "-ms-"


class StyleParser:
    """Parsed CSS declaration list.

    Declarations are separated by ``;`` and split at the first ``:``.
    Property names are case-insensitive and stored lower-cased. Segments with
    an empty property are dropped, and a repeated property overwrites the
    earlier value while keeping its original position.

    Parameters
    ----------
    raw_style : str
        Raw ``style`` attribute value

    """

    def __init__(self, raw_style: str):
        self._styles: dict[str, str] = {}
        self._parse(raw_style)

    @property
    def styles(self) -> Mapping[str, str]:
        """Read-only view of the parsed declarations, in source order."""
        return MappingProxyType(self._styles)

    def _parse(self, raw_style: str) -> None:
        for declaration in raw_style.split(";"):
            declaration = declaration.strip()
            first_colon = declaration.find(":")
            if first_colon < 0:
                continue
            key = declaration[:first_colon].strip().lower()
            if not key:
                continue
            self._styles[key] = declaration[first_colon + 1 :].strip()

    def to_jsx_string(self) -> str:
        """Serialize the declarations as ``key: value`` pairs joined by ``", "``."""
        return ", ".join(f"{self.to_jsx_key(key)}: {self.to_jsx_value(value)}" for key, value in self._styles.items())

    @staticmethod
    def to_jsx_key(key: str) -> str:
        """Convert a CSS property name to a JSX style key.

        ``-ms-`` is the one vendor prefix JSX spells without a capital, so its
        leading hyphen is dropped before camel-casing.
        """
        if key.startswith(_MS_PREFIX):
            key = key[1:]
        return hyphen_to_camel_case(key)

    @staticmethod
    def to_jsx_value(value: str) -> str:
        """Convert a CSS value to a JSX style value.

        Numeric values are emitted bare. Anything else becomes a single-quoted
        string with embedded single quotes replaced by double quotes.
        """
        if is_numeric(value):
            return value
        return "'" + value.replace("'", '"') + "'"

    def __repr__(self) -> str:
        return f"StyleParser({self._styles!r})"


__all__ = ["StyleParser"]
