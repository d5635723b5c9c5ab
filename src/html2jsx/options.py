#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the HTML-to-JSX converter.

Options are a frozen dataclass so a configured converter cannot be changed
under its feet; use :meth:`JsxOptions.create_updated` to derive a modified
copy.

Examples
--------
Tab indentation:

    >>> options = JsxOptions(indent="\\t")

Browser-grade parsing (requires html5lib):

    >>> options = JsxOptions(parser="html5lib")

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2jsx.constants import DEFAULT_INDENT, DEFAULT_PARSER, SUPPORTED_PARSERS, ParserBackend
from html2jsx.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        ValidationError
            If a keyword does not name an option

        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValidationError(
                f"Unknown option(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)


@dataclass(frozen=True)
class JsxOptions(CloneFrozenMixin):
    """Configuration options for HTML-to-JSX conversion.

    Parameters
    ----------
    indent : str, default "  "
        Unit of indentation emitted for each nesting level. Must be
        non-empty and consist of whitespace only.
    parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup parser backend used to build the DOM tree.
        ``lxml`` and ``html5lib`` must be installed separately.

    """

    indent: str = field(
        default=DEFAULT_INDENT,
        metadata={"help": "Indentation unit for each nesting level", "importance": "core"},
    )
    parser: ParserBackend = field(
        default=DEFAULT_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (matches browser behavior, slower), 'lxml' (fast, requires C library)"
            ),
            "choices": list(SUPPORTED_PARSERS),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValidationError
            If the indent unit is empty or not whitespace, or the parser is unknown.

        """
        if not isinstance(self.indent, str) or not self.indent or self.indent.strip():
            raise ValidationError(
                f"indent must be a non-empty whitespace string, got {self.indent!r}",
                parameter_name="indent",
                parameter_value=self.indent,
            )
        if self.parser not in SUPPORTED_PARSERS:
            raise ValidationError(
                f"parser must be one of {', '.join(SUPPORTED_PARSERS)}, got {self.parser!r}",
                parameter_name="parser",
                parameter_value=self.parser,
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> JsxOptions:
        """Build options from a configuration mapping, ignoring unrelated keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})


__all__ = ["CloneFrozenMixin", "JsxOptions"]
