"""html2jsx - convert HTML fragments to JSX.

html2jsx takes a fragment of HTML and produces the equivalent JSX source,
ready to paste into a React component.

Key Features
------------
- Attribute renaming (``class`` to ``className``, ``for`` to ``htmlFor``,
  SVG attributes such as ``stroke-width`` to ``strokeWidth``)
- Inline ``style`` attributes converted to style objects
- Correct casing for SVG element names (``clipPath``, ``linearGradient``)
- Whitespace inside ``<pre>`` preserved against JSX whitespace coalescing
- ``<textarea>`` and ``<style>`` contents moved into attributes
- Curly braces and comments escaped for JSX
- Consistent, configurable indentation

Requirements
------------
- Python 3.10+
- beautifulsoup4 (``lxml`` and ``html5lib`` parser backends are optional)

Examples
--------
One-shot conversion:

    >>> from html2jsx import html_to_jsx
    >>> print(html_to_jsx('<div class="card"><img src="a.png" alt=""></div>'), end="")
    <div className="card"><img src="a.png" alt="" /></div>

Reusing a configured converter:

    >>> from html2jsx import HtmlToJsx, JsxOptions
    >>> converter = HtmlToJsx(JsxOptions(indent="    "))
    >>> jsx = converter.convert("<p>One</p><p>Two</p>")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from html2jsx.converter import HtmlToJsx, html_to_jsx
from html2jsx.exceptions import (
    ConfigError,
    DependencyError,
    Html2JsxError,
    ParsingError,
    ValidationError,
)
from html2jsx.options import JsxOptions
from html2jsx.style_parser import StyleParser

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "html_to_jsx",
    "HtmlToJsx",
    "JsxOptions",
    "StyleParser",
    "Html2JsxError",
    "ValidationError",
    "ParsingError",
    "DependencyError",
    "ConfigError",
]
