#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/utils/__init__.py
"""Utility modules for the html2jsx package."""

from html2jsx.utils.text import (
    ends_with,
    escape_special_chars,
    hyphen_to_camel_case,
    is_empty,
    is_numeric,
    js_string_literal,
    repeat_string,
    trim_end,
)

__all__ = [
    "ends_with",
    "escape_special_chars",
    "hyphen_to_camel_case",
    "is_empty",
    "is_numeric",
    "js_string_literal",
    "repeat_string",
    "trim_end",
]
