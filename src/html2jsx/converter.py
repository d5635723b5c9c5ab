#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/converter.py
"""HTML to JSX conversion engine.

This module converts an HTML fragment into JSX source text. The fragment is
parsed into a small DOM tree (see :mod:`html2jsx.dom`), which is walked
depth-first with a begin/end visitor that appends to an output buffer.

Conversion rules
----------------
- Attributes are renamed through :mod:`html2jsx.mappings`; ``style``
  attributes become style objects (``style={{color: 'red'}}``)
- Integer attribute values are emitted as expressions (``tabIndex={1}``)
- ``<textarea>`` content moves to ``defaultValue`` and ``<style>`` content to
  ``dangerouslySetInnerHTML``; both elements are then self-closing
- Whitespace inside ``<pre>`` is wrapped in string expressions so JSX
  whitespace coalescing keeps it
- Literal curly braces are wrapped in string expressions
- Comments become ``{/* ... */}`` expressions
- ``<script>`` blocks are removed before parsing
- Several top-level elements are wrapped in a single ``<div>``

Examples
--------
    >>> converter = HtmlToJsx()
    >>> print(converter.convert('<div class="a" for="b"></div>'), end="")
    <div className="a" htmlFor="b" />

"""

from __future__ import annotations

import logging
import re

from html2jsx.constants import (
    ALT_ATTRIBUTE,
    ATTRIBUTE_CONTENT_TAGS,
    BRACE_PATTERN,
    CLASS_BODY_INDENT_LEVELS,
    NEWLINE_INDENT_PATTERN,
    PRE_PRESERVED_PATTERN,
    PRE_TAG,
    SCRIPT_BLOCK_PATTERN,
    STYLE_ATTRIBUTE,
    STYLE_TAG,
    TEXTAREA_TAG,
)
from html2jsx.dom import CommentNode, DomNode, ElementNode, NodeKind, TextNode, parse_fragment
from html2jsx.mappings import jsx_attribute_name, jsx_tag_name
from html2jsx.options import JsxOptions
from html2jsx.style_parser import StyleParser
from html2jsx.utils.text import (
    escape_special_chars,
    is_empty,
    is_numeric,
    js_string_literal,
    repeat_string,
    trim_end,
)

logger = logging.getLogger(__name__)


class HtmlToJsx:
    """HTML to JSX converter.

    A converter instance holds per-call state (output buffer, nesting level
    and whether a ``<pre>`` is open). The state is reset at the start of
    every :meth:`convert` call, so an instance can be reused for any number
    of sequential conversions. An instance must not be shared between
    threads.

    Parameters
    ----------
    options : JsxOptions or None, default = None
        Conversion options

    """

    def __init__(self, options: JsxOptions | None = None):
        self.options = options or JsxOptions()
        self._class_indentation = re.compile(
            re.escape("\n" + repeat_string(self.options.indent, CLASS_BODY_INDENT_LEVELS))
        )
        self.reset()

    @property
    def indent(self) -> str:
        return self.options.indent

    def reset(self) -> None:
        """Reset the internal state of the converter."""
        self._output = ""
        self._level = 0
        self._in_pre_tag = False

    def convert(self, html: str) -> str:
        """Convert an HTML fragment to JSX.

        Parameters
        ----------
        html : str
            HTML fragment to convert

        Returns
        -------
        str
            JSX source, trimmed and terminated by a single newline

        """
        self.reset()

        container = parse_fragment("\n" + self._clean_input(html) + "\n", parser=self.options.parser)

        if self._only_one_top_level(container):
            # The single element can be returned directly, no need to visit the container
            self._traverse(container)
        else:
            # Several top-level nodes need a wrapping element
            self._output += repeat_string(self.indent, CLASS_BODY_INDENT_LEVELS)
            self._level += 1
            self._visit(container)

        self._output = self._output.strip() + "\n"
        self._output = self._remove_class_indentation(self._output)
        return self._output

    def _clean_input(self, html: str) -> str:
        html = html.strip()
        # Script contents may not be valid JSX, so they never reach the tree
        return SCRIPT_BLOCK_PATTERN.sub("", html)

    def _only_one_top_level(self, container: ElementNode) -> bool:
        """Determine if the container holds exactly one meaningful top-level element."""
        children = container.children
        if len(children) == 1 and children[0].kind is NodeKind.ELEMENT:
            return True

        found_element = False
        for child in children:
            if child.kind is NodeKind.ELEMENT:
                if found_element:
                    return False
                found_element = True
            elif isinstance(child, TextNode) and not is_empty(child.text):
                return False
        return True

    def _get_indented_newline(self) -> str:
        """Newline followed by the indentation for the current nesting level."""
        return "\n" + repeat_string(self.indent, self._level + 2)

    def _visit(self, node: DomNode) -> None:
        self._begin_visit(node)
        self._traverse(node)
        self._end_visit(node)

    def _traverse(self, node: DomNode) -> None:
        self._level += 1
        for child in node.children:
            self._visit(child)
        self._level -= 1

    def _begin_visit(self, node: DomNode) -> None:
        if isinstance(node, ElementNode):
            self._begin_visit_element(node)
        elif isinstance(node, TextNode):
            self._visit_text(node)
        elif isinstance(node, CommentNode):
            self._visit_comment(node)
        else:
            logger.warning("Unrecognised node type: %s", getattr(node, "node_type", type(node).__name__))

    def _end_visit(self, node: DomNode) -> None:
        # Text, comments and unknown nodes have no closing syntax
        if isinstance(node, ElementNode):
            self._end_visit_element(node)

    def _begin_visit_element(self, node: ElementNode) -> None:
        tag_name = jsx_tag_name(node.tag_name)
        attributes = [self._get_element_attribute(tag_name, name, value) for name, value in node.attributes]

        if tag_name == TEXTAREA_TAG:
            attributes.append("defaultValue={" + js_string_literal(node.text_content) + "}")
        elif tag_name == STYLE_TAG:
            # Curly braces in CSS would be read as expressions
            attributes.append("dangerouslySetInnerHTML={{__html: " + js_string_literal(node.text_content) + " }}")
        elif tag_name == PRE_TAG:
            self._in_pre_tag = True

        self._output += "<" + tag_name
        if attributes:
            self._output += " " + " ".join(attributes)
        if not self._is_self_closing(node):
            self._output += ">"

    def _end_visit_element(self, node: ElementNode) -> None:
        tag_name = jsx_tag_name(node.tag_name)
        # De-indent the closing tag by one level
        self._output = trim_end(self._output, self.indent)
        if self._is_self_closing(node):
            self._output += " />"
        else:
            self._output += "</" + tag_name + ">"

        if tag_name == PRE_TAG:
            self._in_pre_tag = False

    def _is_self_closing(self, node: ElementNode) -> bool:
        """Determine if the element renders as a self-closing tag.

        Children of ``<textarea>`` and ``<style>`` are moved into attributes,
        so those elements are always self-closing.
        """
        return not node.has_children or jsx_tag_name(node.tag_name) in ATTRIBUTE_CONTENT_TAGS

    def _visit_text(self, node: TextNode) -> None:
        parent_tag = node.parent_tag_name
        if parent_tag is not None and jsx_tag_name(parent_tag) in ATTRIBUTE_CONTENT_TAGS:
            # Already emitted as defaultValue / dangerouslySetInnerHTML
            return

        text = escape_special_chars(node.text)

        if self._in_pre_tag:
            text = text.replace("\r", "")
            text = PRE_PRESERVED_PATTERN.sub(lambda match: "{" + js_string_literal(match.group(0)) + "}", text)
        else:
            text = BRACE_PATTERN.sub(lambda match: "{'" + match.group(0) + "'}", text)
            if "\n" in text:
                indented_newline = self._get_indented_newline()
                text = NEWLINE_INDENT_PATTERN.sub(lambda _match: indented_newline, text)

        self._output += text

    def _visit_comment(self, node: CommentNode) -> None:
        self._output += "{/*" + node.text.replace("*/", "* /") + "*/}"

    def _get_element_attribute(self, tag_name: str, name: str, value: str) -> str:
        """Render one attribute in JSX syntax.

        Parameters
        ----------
        tag_name : str
            JSX tag name of the element
        name : str
            Attribute name from the markup
        value : str
            Attribute value from the markup

        Returns
        -------
        str
            ``name={1}``, ``name="text"``, ``style={{...}}`` or a bare name

        """
        if name.lower() == STYLE_ATTRIBUTE:
            return self._get_style_attribute(value)

        result = jsx_attribute_name(tag_name, name)
        if is_numeric(value):
            result += "={" + value + "}"
        elif value:
            result += '="' + value.replace('"', "&quot;") + '"'
        elif name.lower() == ALT_ATTRIBUTE:
            # An empty alt is meaningful, unlike a missing one
            result += '=""'
        return result

    def _get_style_attribute(self, styles: str) -> str:
        return "style={{" + StyleParser(styles).to_jsx_string() + "}}"

    def _remove_class_indentation(self, output: str) -> str:
        """Remove the class-body indentation every line was emitted at."""
        return self._class_indentation.sub("\n", output)


def html_to_jsx(html: str, options: JsxOptions | None = None, **kwargs) -> str:
    """Convert an HTML fragment to JSX.

    Parameters
    ----------
    html : str
        HTML fragment
    options : JsxOptions or None, default = None
        Conversion options
    **kwargs
        Individual option overrides applied on top of ``options``

    Returns
    -------
    str
        JSX source

    Examples
    --------
        >>> html_to_jsx("<label for='name'>Name</label>")
        '<label htmlFor="name">Name</label>\\n'
        >>> html_to_jsx("<p>\\n  x\\n</p>", indent="    ")
        '<p>\\n    x\\n</p>\\n'

    """
    options = options or JsxOptions()
    if kwargs:
        options = options.create_updated(**kwargs)
    return HtmlToJsx(options).convert(html)


__all__ = ["HtmlToJsx", "html_to_jsx"]
