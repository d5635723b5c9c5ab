#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/utils/text.py
"""Lexical helpers shared by the converter and the style parser.

Every function here is pure and stateless.

Functions
---------
repeat_string : Repeat a string a number of times
ends_with : Suffix test
trim_end : Remove one trailing occurrence of a suffix
hyphen_to_camel_case : Convert ``hyphen-case`` to ``camelCase``
is_empty : Whitespace-only test
is_numeric : Integer test with JavaScript ``parseInt(value, 10) == value`` semantics
escape_special_chars : Escape text the way an HTML serializer escapes text content
js_string_literal : Double-quoted JavaScript string literal

Examples
--------
    >>> hyphen_to_camel_case("background-color")
    'backgroundColor'
    >>> is_numeric("007"), is_numeric("10px")
    (True, False)
    >>> trim_end("<div>\\n    ", "  ")
    '<div>\\n  '

"""

from __future__ import annotations

import json
import re
from typing import Any

from bs4.dammit import EntitySubstitution

from html2jsx.exceptions import ValidationError

_HYPHEN_CHAR_RE = re.compile(r"-(.)")
_NON_WHITESPACE_RE = re.compile(r"\S")

# Leading integer prefix as parseInt(value, 10) reads it
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)

# Whole-string numeric literals as Number(value) reads them
_DECIMAL_LITERAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_LITERAL_RE = re.compile(r"0(?:[xX](?P<hex>[0-9a-fA-F]+)|[oO](?P<oct>[0-7]+)|[bB](?P<bin>[01]+))")


def repeat_string(value: str, times: int) -> str:
    """Repeat ``value`` ``times`` times.

    Parameters
    ----------
    value : str
        String to repeat
    times : int
        Number of repetitions, must not be negative

    Returns
    -------
    str
        The repeated string

    Raises
    ------
    ValidationError
        If ``times`` is negative

    """
    if times < 0:
        raise ValidationError(
            f"Cannot repeat a string a negative number of times: {times}",
            parameter_name="times",
            parameter_value=times,
        )
    return value * times


def ends_with(haystack: str, needle: str) -> bool:
    """Determine if ``haystack`` ends with ``needle``."""
    return bool(needle) and haystack.endswith(needle)


def trim_end(haystack: str, needle: str) -> str:
    """Trim one trailing ``needle`` off ``haystack``; no-op when it is absent."""
    if ends_with(haystack, needle):
        return haystack[: -len(needle)]
    return haystack


def hyphen_to_camel_case(value: str) -> str:
    """Convert a hyphenated string to camelCase."""
    return _HYPHEN_CHAR_RE.sub(lambda match: match.group(1).upper(), value)


def is_empty(value: str) -> bool:
    """Determine if the string consists entirely of whitespace."""
    return _NON_WHITESPACE_RE.search(value) is None


def _number_value(value: str) -> float | None:
    """Numeric value of a whole string literal, or None if it is not one."""
    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL_LITERAL_RE.fullmatch(text):
        return float(text)
    radix_match = _RADIX_LITERAL_RE.fullmatch(text)
    if radix_match:
        if radix_match.group("hex"):
            return float(int(radix_match.group("hex"), 16))
        if radix_match.group("oct"):
            return float(int(radix_match.group("oct"), 8))
        return float(int(radix_match.group("bin"), 2))
    return None


def is_numeric(value: Any) -> bool:
    """Determine if ``value`` is an integer the way the JSX runtime would see it.

    Numbers are numeric. A string is numeric when its leading integer
    prefix equals the numeric value of the whole string, so ``"10"``,
    ``" 5 "``, ``"007"`` and ``"1.0"`` are numeric while ``"10px"``,
    ``"1.5"`` and ``""`` are not.

    Parameters
    ----------
    value : Any
        Value to test

    Returns
    -------
    bool
        True if the value is numeric

    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if not isinstance(value, str):
        return False

    prefix = _INT_PREFIX_RE.match(value)
    if prefix is None:
        return False
    number = _number_value(value)
    if number is None:
        return False
    try:
        return float(int(prefix.group(1))) == number
    except OverflowError:
        return False


def escape_special_chars(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and non-breaking spaces in text content.

    This is the substitution an HTML serializer applies to text nodes, so
    quotes are left alone.
    """
    return EntitySubstitution.substitute_xml(value).replace("\u00a0", "&nbsp;")


def js_string_literal(value: str) -> str:
    """Render ``value`` as a double-quoted JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


__all__ = [
    "repeat_string",
    "ends_with",
    "trim_end",
    "hyphen_to_camel_case",
    "is_empty",
    "is_numeric",
    "escape_special_chars",
    "js_string_literal",
]
