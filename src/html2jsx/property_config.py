#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/property_config.py
"""DOM property descriptors for HTML and SVG.

Each descriptor lists the JSX property names React knows about
(``properties``) and, for those whose markup attribute is spelled
differently, the attribute name (``dom_attribute_names``). The attribute
mapping table in :mod:`html2jsx.mappings` is built from these two
descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DOMPropertyConfig:
    """A named set of JSX properties and their markup attribute spellings."""

    name: str
    properties: tuple[str, ...]
    dom_attribute_names: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def attribute_name(self, prop: str) -> str:
        """Markup attribute spelling for ``prop``, lower-cased."""
        return self.dom_attribute_names.get(prop, prop).lower()


HTML_DOM_PROPERTY_CONFIG = DOMPropertyConfig(
    name="html",
    properties=(
        # Standard properties
        "accept",
        "acceptCharset",
        "accessKey",
        "action",
        "allowFullScreen",
        "allowTransparency",
        "alt",
        "as",
        "async",
        "autoComplete",
        "autoPlay",
        "capture",
        "cellPadding",
        "cellSpacing",
        "charSet",
        "challenge",
        "checked",
        "cite",
        "classID",
        "className",
        "cols",
        "colSpan",
        "content",
        "contentEditable",
        "contextMenu",
        "controls",
        "controlsList",
        "coords",
        "crossOrigin",
        "data",
        "dateTime",
        "default",
        "defer",
        "dir",
        "disabled",
        "download",
        "draggable",
        "encType",
        "form",
        "formAction",
        "formEncType",
        "formMethod",
        "formNoValidate",
        "formTarget",
        "frameBorder",
        "headers",
        "height",
        "hidden",
        "high",
        "href",
        "hrefLang",
        "htmlFor",
        "httpEquiv",
        "icon",
        "id",
        "inputMode",
        "integrity",
        "is",
        "keyParams",
        "keyType",
        "kind",
        "label",
        "lang",
        "list",
        "loop",
        "low",
        "manifest",
        "marginHeight",
        "marginWidth",
        "max",
        "maxLength",
        "media",
        "mediaGroup",
        "method",
        "min",
        "minLength",
        "multiple",
        "muted",
        "name",
        "nonce",
        "noValidate",
        "open",
        "optimum",
        "pattern",
        "placeholder",
        "playsInline",
        "poster",
        "preload",
        "profile",
        "radioGroup",
        "readOnly",
        "referrerPolicy",
        "rel",
        "required",
        "reversed",
        "role",
        "rows",
        "rowSpan",
        "sandbox",
        "scope",
        "scoped",
        "scrolling",
        "seamless",
        "selected",
        "shape",
        "size",
        "sizes",
        "span",
        "spellCheck",
        "src",
        "srcDoc",
        "srcLang",
        "srcSet",
        "start",
        "step",
        "style",
        "summary",
        "tabIndex",
        "target",
        "title",
        "type",
        "useMap",
        "value",
        "width",
        "wmode",
        "wrap",
        # RDFa properties
        "about",
        "datatype",
        "inlist",
        "prefix",
        "property",
        "resource",
        "typeof",
        "vocab",
        # Non-standard properties
        "autoCapitalize",
        "autoCorrect",
        "autoSave",
        "color",
        "itemProp",
        "itemScope",
        "itemType",
        "itemID",
        "itemRef",
        "results",
        "security",
        "unselectable",
    ),
    dom_attribute_names=MappingProxyType(
        {
            "acceptCharset": "accept-charset",
            "className": "class",
            "htmlFor": "for",
            "httpEquiv": "http-equiv",
        }
    ),
)


# SVG attributes keyed by JSX property; an empty string means the attribute
# is spelled like the property.
_SVG_ATTRIBUTES: dict[str, str] = {
    "accentHeight": "accent-height",
    "accumulate": "",
    "additive": "",
    "alignmentBaseline": "alignment-baseline",
    "allowReorder": "allowReorder",
    "alphabetic": "",
    "amplitude": "",
    "arabicForm": "arabic-form",
    "ascent": "",
    "attributeName": "attributeName",
    "attributeType": "attributeType",
    "autoReverse": "autoReverse",
    "azimuth": "",
    "baseFrequency": "baseFrequency",
    "baseProfile": "baseProfile",
    "baselineShift": "baseline-shift",
    "bbox": "",
    "begin": "",
    "bias": "",
    "by": "",
    "calcMode": "calcMode",
    "capHeight": "cap-height",
    "clip": "",
    "clipPath": "clip-path",
    "clipRule": "clip-rule",
    "clipPathUnits": "clipPathUnits",
    "colorInterpolation": "color-interpolation",
    "colorInterpolationFilters": "color-interpolation-filters",
    "colorProfile": "color-profile",
    "colorRendering": "color-rendering",
    "contentScriptType": "contentScriptType",
    "contentStyleType": "contentStyleType",
    "cursor": "",
    "cx": "",
    "cy": "",
    "d": "",
    "decelerate": "",
    "descent": "",
    "diffuseConstant": "diffuseConstant",
    "direction": "",
    "display": "",
    "divisor": "",
    "dominantBaseline": "dominant-baseline",
    "dur": "",
    "dx": "",
    "dy": "",
    "edgeMode": "edgeMode",
    "elevation": "",
    "enableBackground": "enable-background",
    "end": "",
    "exponent": "",
    "externalResourcesRequired": "externalResourcesRequired",
    "fill": "",
    "fillOpacity": "fill-opacity",
    "fillRule": "fill-rule",
    "filter": "",
    "filterRes": "filterRes",
    "filterUnits": "filterUnits",
    "floodColor": "flood-color",
    "floodOpacity": "flood-opacity",
    "focusable": "",
    "fontFamily": "font-family",
    "fontSize": "font-size",
    "fontSizeAdjust": "font-size-adjust",
    "fontStretch": "font-stretch",
    "fontStyle": "font-style",
    "fontVariant": "font-variant",
    "fontWeight": "font-weight",
    "format": "",
    "from": "",
    "fx": "",
    "fy": "",
    "g1": "",
    "g2": "",
    "glyphName": "glyph-name",
    "glyphOrientationHorizontal": "glyph-orientation-horizontal",
    "glyphOrientationVertical": "glyph-orientation-vertical",
    "glyphRef": "glyphRef",
    "gradientTransform": "gradientTransform",
    "gradientUnits": "gradientUnits",
    "hanging": "",
    "horizAdvX": "horiz-adv-x",
    "horizOriginX": "horiz-origin-x",
    "ideographic": "",
    "imageRendering": "image-rendering",
    "in": "",
    "in2": "",
    "intercept": "",
    "k": "",
    "k1": "",
    "k2": "",
    "k3": "",
    "k4": "",
    "kernelMatrix": "kernelMatrix",
    "kernelUnitLength": "kernelUnitLength",
    "kerning": "",
    "keyPoints": "keyPoints",
    "keySplines": "keySplines",
    "keyTimes": "keyTimes",
    "lengthAdjust": "lengthAdjust",
    "letterSpacing": "letter-spacing",
    "lightingColor": "lighting-color",
    "limitingConeAngle": "limitingConeAngle",
    "local": "",
    "markerEnd": "marker-end",
    "markerMid": "marker-mid",
    "markerStart": "marker-start",
    "markerHeight": "markerHeight",
    "markerUnits": "markerUnits",
    "markerWidth": "markerWidth",
    "mask": "",
    "maskContentUnits": "maskContentUnits",
    "maskUnits": "maskUnits",
    "mathematical": "",
    "mode": "",
    "numOctaves": "numOctaves",
    "offset": "",
    "opacity": "",
    "operator": "",
    "order": "",
    "orient": "",
    "orientation": "",
    "origin": "",
    "overflow": "",
    "overlinePosition": "overline-position",
    "overlineThickness": "overline-thickness",
    "paintOrder": "paint-order",
    "panose1": "panose-1",
    "pathLength": "pathLength",
    "patternContentUnits": "patternContentUnits",
    "patternTransform": "patternTransform",
    "patternUnits": "patternUnits",
    "pointerEvents": "pointer-events",
    "points": "",
    "pointsAtX": "pointsAtX",
    "pointsAtY": "pointsAtY",
    "pointsAtZ": "pointsAtZ",
    "preserveAlpha": "preserveAlpha",
    "preserveAspectRatio": "preserveAspectRatio",
    "primitiveUnits": "primitiveUnits",
    "r": "",
    "radius": "",
    "refX": "refX",
    "refY": "refY",
    "renderingIntent": "rendering-intent",
    "repeatCount": "repeatCount",
    "repeatDur": "repeatDur",
    "requiredExtensions": "requiredExtensions",
    "requiredFeatures": "requiredFeatures",
    "restart": "",
    "result": "",
    "rotate": "",
    "rx": "",
    "ry": "",
    "scale": "",
    "seed": "",
    "shapeRendering": "shape-rendering",
    "slope": "",
    "spacing": "",
    "specularConstant": "specularConstant",
    "specularExponent": "specularExponent",
    "speed": "",
    "spreadMethod": "spreadMethod",
    "startOffset": "startOffset",
    "stdDeviation": "stdDeviation",
    "stemh": "",
    "stemv": "",
    "stitchTiles": "stitchTiles",
    "stopColor": "stop-color",
    "stopOpacity": "stop-opacity",
    "strikethroughPosition": "strikethrough-position",
    "strikethroughThickness": "strikethrough-thickness",
    "string": "",
    "stroke": "",
    "strokeDasharray": "stroke-dasharray",
    "strokeDashoffset": "stroke-dashoffset",
    "strokeLinecap": "stroke-linecap",
    "strokeLinejoin": "stroke-linejoin",
    "strokeMiterlimit": "stroke-miterlimit",
    "strokeOpacity": "stroke-opacity",
    "strokeWidth": "stroke-width",
    "surfaceScale": "surfaceScale",
    "systemLanguage": "systemLanguage",
    "tableValues": "tableValues",
    "targetX": "targetX",
    "targetY": "targetY",
    "textAnchor": "text-anchor",
    "textDecoration": "text-decoration",
    "textRendering": "text-rendering",
    "textLength": "textLength",
    "to": "",
    "transform": "",
    "u1": "",
    "u2": "",
    "underlinePosition": "underline-position",
    "underlineThickness": "underline-thickness",
    "unicode": "",
    "unicodeBidi": "unicode-bidi",
    "unicodeRange": "unicode-range",
    "unitsPerEm": "units-per-em",
    "vAlphabetic": "v-alphabetic",
    "vHanging": "v-hanging",
    "vIdeographic": "v-ideographic",
    "vMathematical": "v-mathematical",
    "values": "",
    "vectorEffect": "vector-effect",
    "version": "",
    "vertAdvY": "vert-adv-y",
    "vertOriginX": "vert-origin-x",
    "vertOriginY": "vert-origin-y",
    "viewBox": "viewBox",
    "viewTarget": "viewTarget",
    "visibility": "",
    "widths": "",
    "wordSpacing": "word-spacing",
    "writingMode": "writing-mode",
    "x": "",
    "xHeight": "x-height",
    "x1": "",
    "x2": "",
    "xChannelSelector": "xChannelSelector",
    "xlinkActuate": "xlink:actuate",
    "xlinkArcrole": "xlink:arcrole",
    "xlinkHref": "xlink:href",
    "xlinkRole": "xlink:role",
    "xlinkShow": "xlink:show",
    "xlinkTitle": "xlink:title",
    "xlinkType": "xlink:type",
    "xmlBase": "xml:base",
    "xmlns": "",
    "xmlnsXlink": "xmlns:xlink",
    "xmlLang": "xml:lang",
    "xmlSpace": "xml:space",
    "y": "",
    "y1": "",
    "y2": "",
    "yChannelSelector": "yChannelSelector",
    "z": "",
    "zoomAndPan": "zoomAndPan",
}

SVG_DOM_PROPERTY_CONFIG = DOMPropertyConfig(
    name="svg",
    properties=tuple(_SVG_ATTRIBUTES),
    dom_attribute_names=MappingProxyType({prop: attr for prop, attr in _SVG_ATTRIBUTES.items() if attr}),
)

__all__ = ["DOMPropertyConfig", "HTML_DOM_PROPERTY_CONFIG", "SVG_DOM_PROPERTY_CONFIG"]
