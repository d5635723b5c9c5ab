#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/mappings.py
"""Attribute and tag-name translation tables.

Three read-only tables drive name translation:

- ``ATTRIBUTE_MAPPING``: lower-cased HTML attribute name to JSX attribute
  name. Seeded with ``for`` and ``class``, then filled from the HTML and SVG
  property descriptors. The first registration of a key wins.
- ``ELEMENT_ATTRIBUTE_MAPPING``: per-tag overrides that take precedence over
  the global table (``<input checked>`` is ``defaultChecked`` only on
  ``input``).
- ``ELEMENT_TAG_NAME_MAPPING``: lower-cased tag name to its canonical case.
  HTML parsers lower-case SVG element names, which JSX treats as
  case-sensitive.

All tables are built once at import time and exposed through
:class:`types.MappingProxyType`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from html2jsx.property_config import HTML_DOM_PROPERTY_CONFIG, SVG_DOM_PROPERTY_CONFIG, DOMPropertyConfig

logger = logging.getLogger(__name__)

_MANUAL_ATTRIBUTE_MAPPING: dict[str, str] = {
    "for": "htmlFor",
    "class": "className",
}


def build_attribute_mapping(
    configs: Iterable[DOMPropertyConfig],
    seed: Mapping[str, str] | None = None,
) -> Mapping[str, str]:
    """Build the attribute table from property descriptors.

    Parameters
    ----------
    configs : iterable of DOMPropertyConfig
        Descriptors to register, in priority order
    seed : mapping, optional
        Entries registered before any descriptor

    Returns
    -------
    Mapping[str, str]
        Read-only mapping of lower-cased attribute name to JSX name

    """
    mapping: dict[str, str] = dict(seed or {})
    for config in configs:
        for prop in config.properties:
            # First registration wins
            mapping.setdefault(config.attribute_name(prop), prop)
        logger.debug("Registered %s property config (%d attributes mapped)", config.name, len(mapping))
    return MappingProxyType(mapping)


ATTRIBUTE_MAPPING: Mapping[str, str] = build_attribute_mapping(
    (HTML_DOM_PROPERTY_CONFIG, SVG_DOM_PROPERTY_CONFIG),
    seed=_MANUAL_ATTRIBUTE_MAPPING,
)

ELEMENT_ATTRIBUTE_MAPPING: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "input": MappingProxyType(
            {
                "checked": "defaultChecked",
                "value": "defaultValue",
                "autofocus": "autoFocus",
            }
        ),
    }
)

# https://developer.mozilla.org/en-US/docs/Web/SVG/Element#SVG_elements
ELEMENT_TAG_NAME_MAPPING: Mapping[str, str] = MappingProxyType(
    {
        "a": "a",
        "altglyph": "altGlyph",
        "altglyphdef": "altGlyphDef",
        "altglyphitem": "altGlyphItem",
        "animate": "animate",
        "animatecolor": "animateColor",
        "animatemotion": "animateMotion",
        "animatetransform": "animateTransform",
        "audio": "audio",
        "canvas": "canvas",
        "circle": "circle",
        "clippath": "clipPath",
        "color-profile": "colorProfile",
        "cursor": "cursor",
        "defs": "defs",
        "desc": "desc",
        "discard": "discard",
        "ellipse": "ellipse",
        "feblend": "feBlend",
        "fecolormatrix": "feColorMatrix",
        "fecomponenttransfer": "feComponentTransfer",
        "fecomposite": "feComposite",
        "feconvolvematrix": "feConvolveMatrix",
        "fediffuselighting": "feDiffuseLighting",
        "fedisplacementmap": "feDisplacementMap",
        "fedistantlight": "feDistantLight",
        "fedropshadow": "feDropShadow",
        "feflood": "feFlood",
        "fefunca": "feFuncA",
        "fefuncb": "feFuncB",
        "fefuncg": "feFuncG",
        "fefuncr": "feFuncR",
        "fegaussianblur": "feGaussianBlur",
        "feimage": "feImage",
        "femerge": "feMerge",
        "femergenode": "feMergeNode",
        "femorphology": "feMorphology",
        "feoffset": "feOffset",
        "fepointlight": "fePointLight",
        "fespecularlighting": "feSpecularLighting",
        "fespotlight": "feSpotLight",
        "fetile": "feTile",
        "feturbulence": "feTurbulence",
        "filter": "filter",
        "font": "font",
        "font-face": "fontFace",
        "font-face-format": "fontFaceFormat",
        "font-face-name": "fontFaceName",
        "font-face-src": "fontFaceSrc",
        "font-face-uri": "fontFaceUri",
        "foreignobject": "foreignObject",
        "g": "g",
        "glyph": "glyph",
        "glyphref": "glyphRef",
        "hatch": "hatch",
        "hatchpath": "hatchpath",
        "hkern": "hkern",
        "iframe": "iframe",
        "image": "image",
        "line": "line",
        "lineargradient": "linearGradient",
        "marker": "marker",
        "mask": "mask",
        "mesh": "mesh",
        "meshgradient": "meshgradient",
        "meshpatch": "meshpatch",
        "meshrow": "meshrow",
        "metadata": "metadata",
        "missing-glyph": "missingGlyph",
        "mpath": "mpath",
        "path": "path",
        "pattern": "pattern",
        "polygon": "polygon",
        "polyline": "polyline",
        "radialgradient": "radialGradient",
        "rect": "rect",
        "script": "script",
        "set": "set",
        "solidcolor": "solidcolor",
        "stop": "stop",
        "style": "style",
        "svg": "svg",
        "switch": "switch",
        "symbol": "symbol",
        "text": "text",
        "textpath": "textPath",
        "title": "title",
        "tref": "tref",
        "tspan": "tspan",
        "unknown": "unknown",
        "use": "use",
        "video": "video",
        "view": "view",
        "vkern": "vkern",
    }
)


def jsx_tag_name(tag_name: str) -> str:
    """Convert a tag name to the spelling JSX expects."""
    name = tag_name.lower()
    return ELEMENT_TAG_NAME_MAPPING.get(name, name)


def jsx_attribute_name(tag_name: str, attribute_name: str) -> str:
    """Resolve the JSX name of an attribute on a given element.

    Per-element overrides are consulted first, then the global table. Names
    found in neither are returned unchanged.

    Parameters
    ----------
    tag_name : str
        JSX tag name of the element carrying the attribute
    attribute_name : str
        Attribute name as it appears in the markup

    Returns
    -------
    str
        The JSX attribute name

    """
    key = attribute_name.lower()
    overrides = ELEMENT_ATTRIBUTE_MAPPING.get(tag_name)
    if overrides and key in overrides:
        return overrides[key]
    return ATTRIBUTE_MAPPING.get(key, attribute_name)


__all__ = [
    "ATTRIBUTE_MAPPING",
    "ELEMENT_ATTRIBUTE_MAPPING",
    "ELEMENT_TAG_NAME_MAPPING",
    "build_attribute_mapping",
    "jsx_attribute_name",
    "jsx_tag_name",
]
