#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2jsx/dom.py
"""DOM provider for the converter.

This module turns an HTML fragment into a small read-only tree the
converter walks. The tree is an explicit tagged union over the node kinds
the converter understands:

- :class:`ElementNode` - tag name, ordered attributes, children
- :class:`TextNode` - raw text content
- :class:`CommentNode` - comment text
- :class:`UnknownNode` - anything else the parser produced (doctype, CDATA,
  processing instructions, declarations)

Every node keeps a back-reference to its parent element. Parsing is
delegated to BeautifulSoup; only the capabilities the converter needs are
carried over.

Examples
--------
    >>> container = parse_fragment('<p class="lead">Hi</p>')
    >>> container.children[0].tag_name, container.children[0].attributes
    ('p', (('class', 'lead'),))

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, Union

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)
from bs4.exceptions import FeatureNotFound, ParserRejectedMarkup

from html2jsx.constants import (
    CONTAINER_TAG,
    DEFAULT_PARSER,
    LEADING_NEWLINE_TAGS,
    PARSER_PACKAGES,
    RAW_TEXT_TAGS,
    SUPPORTED_PARSERS,
)
from html2jsx.exceptions import DependencyError, ParsingError, ValidationError

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Kinds of nodes in a parsed fragment."""

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"


@dataclass(eq=False)
class ElementNode:
    """An element with its ordered attributes and child nodes."""

    tag_name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple["DomNode", ...] = ()
    parent: "ElementNode | None" = field(default=None, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def text_content(self) -> str:
        """Concatenated text of every descendant text node."""
        return "".join(node.text for node in self.iter_text_nodes())

    def iter_text_nodes(self) -> Iterator["TextNode"]:
        for child in self.children:
            if isinstance(child, TextNode):
                yield child
            elif isinstance(child, ElementNode):
                yield from child.iter_text_nodes()

    def get_attribute(self, name: str) -> str | None:
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return None


@dataclass(eq=False)
class TextNode:
    """A run of character data."""

    text: str
    parent: ElementNode | None = field(default=None, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.TEXT
    children: ClassVar[tuple] = ()

    @property
    def parent_tag_name(self) -> str | None:
        return self.parent.tag_name if self.parent is not None else None


@dataclass(eq=False)
class CommentNode:
    """An HTML comment; ``text`` excludes the ``<!--``/``-->`` delimiters."""

    text: str
    parent: ElementNode | None = field(default=None, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.COMMENT
    children: ClassVar[tuple] = ()


@dataclass(eq=False)
class UnknownNode:
    """A node of a kind the converter does not render."""

    node_type: str
    text: str = ""
    parent: ElementNode | None = field(default=None, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.OTHER
    children: ClassVar[tuple] = ()


DomNode = Union[ElementNode, TextNode, CommentNode, UnknownNode]

_DOCUMENT_ROOT_NAME = BeautifulSoup.ROOT_TAG_NAME

# Preformatted strings other than comments have no JSX rendering
_UNKNOWN_STRING_TYPES: tuple[tuple[type, str], ...] = (
    (Doctype, "doctype"),
    (CData, "cdata"),
    (ProcessingInstruction, "processing-instruction"),
    (Declaration, "declaration"),
)


def _make_soup(markup: str, parser: str) -> BeautifulSoup:
    # The document root is on every tag stack, so no whitespace-only string is collapsed
    builder_kwargs: dict = {
        "multi_valued_attributes": None,
        "preserve_whitespace_tags": {_DOCUMENT_ROOT_NAME},
    }
    if parser == "html.parser":
        # Browsers keep the first of duplicated attributes
        builder_kwargs["on_duplicate_attribute"] = "ignore"

    try:
        return BeautifulSoup(markup, parser, **builder_kwargs)
    except FeatureNotFound as e:
        raise DependencyError(
            f"HTML parser '{parser}'",
            missing_packages=[PARSER_PACKAGES.get(parser, parser)],
            original_error=e,
        ) from e
    except ParserRejectedMarkup as e:
        raise ParsingError(
            f"HTML parser '{parser}' rejected the markup: {e}",
            parsing_stage="parse",
            original_error=e,
        ) from e


def _convert_string(string: NavigableString, parent: ElementNode) -> DomNode:
    if isinstance(string, Comment):
        return CommentNode(text=str(string), parent=parent)
    for string_type, node_type in _UNKNOWN_STRING_TYPES:
        if isinstance(string, string_type):
            return UnknownNode(node_type=node_type, text=str(string), parent=parent)
    return TextNode(text=str(string), parent=parent)


def _raw_text(source: Tag) -> str:
    """Source text of an element's contents, markup included."""
    return "".join(str(child) if isinstance(child, NavigableString) else child.decode() for child in source.contents)


def _convert_children(source: Tag, parent: ElementNode, drop_leading_newline: bool) -> tuple[DomNode, ...]:
    if parent.tag_name in RAW_TEXT_TAGS and any(isinstance(child, Tag) for child in source.contents):
        # Browsers never build elements inside these; keep the markup as text
        children: list[DomNode] = [TextNode(text=_raw_text(source), parent=parent)]
    else:
        children = [_convert_node(child, parent, drop_leading_newline) for child in source.contents]

    # html.parser keeps the newline that browsers drop after these start tags
    if drop_leading_newline and parent.tag_name in LEADING_NEWLINE_TAGS and children:
        first = children[0]
        if isinstance(first, TextNode) and first.text.startswith("\n"):
            first.text = first.text[1:]
            if not first.text:
                children.pop(0)
    return tuple(children)


def _convert_node(source: PageElement, parent: ElementNode, drop_leading_newline: bool) -> DomNode:
    if isinstance(source, Tag):
        element = ElementNode(
            tag_name=source.name,
            attributes=tuple((name, "" if value is None else str(value)) for name, value in source.attrs.items()),
            parent=parent,
        )
        element.children = _convert_children(source, element, drop_leading_newline)
        return element
    if isinstance(source, NavigableString):
        return _convert_string(source, parent)
    return UnknownNode(node_type=type(source).__name__, parent=parent)


def parse_fragment(markup: str, parser: str = DEFAULT_PARSER) -> ElementNode:
    """Parse an HTML fragment into a synthetic container element.

    Parameters
    ----------
    markup : str
        HTML fragment
    parser : str, default "html.parser"
        BeautifulSoup tree builder. ``lxml`` and ``html5lib`` build a whole
        document; their ``<body>`` contents become the fragment.

    Whitespace-only text between tags is kept verbatim, as a browser keeps
    it, rather than being shrunk to a single space or newline.

    Returns
    -------
    ElementNode
        A ``div`` element whose children are the fragment's top-level nodes

    Raises
    ------
    ValidationError
        If ``parser`` is not a supported backend
    DependencyError
        If the parser backend is not installed
    ParsingError
        If the parser backend rejects the markup

    """
    if parser not in SUPPORTED_PARSERS:
        raise ValidationError(
            f"Unsupported HTML parser '{parser}'. Choose one of: {', '.join(SUPPORTED_PARSERS)}",
            parameter_name="parser",
            parameter_value=parser,
        )

    soup = _make_soup(markup, parser)
    is_fragment_parser = parser == "html.parser"
    root: Tag = soup
    if not is_fragment_parser and soup.body is not None:
        root = soup.body

    container = ElementNode(tag_name=CONTAINER_TAG)
    container.children = _convert_children(root, container, drop_leading_newline=is_fragment_parser)
    logger.debug("Parsed fragment with %s into %d top-level nodes", parser, len(container.children))
    return container


__all__ = [
    "NodeKind",
    "ElementNode",
    "TextNode",
    "CommentNode",
    "UnknownNode",
    "DomNode",
    "parse_fragment",
]
