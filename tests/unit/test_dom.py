"""Unit tests for the BeautifulSoup-backed DOM provider."""

import pytest
from bs4.exceptions import FeatureNotFound, ParserRejectedMarkup

import html2jsx.dom as dom_module
from html2jsx.dom import (
    CommentNode,
    ElementNode,
    NodeKind,
    TextNode,
    UnknownNode,
    parse_fragment,
)
from html2jsx.exceptions import DependencyError, ParsingError, ValidationError


@pytest.mark.unit
class TestParseFragment:
    def test_container_holds_top_level_nodes(self):
        container = parse_fragment("\n<p>a</p><span>b</span>\n")
        assert container.tag_name == "div"
        assert container.parent is None
        kinds = [child.kind for child in container.children]
        assert kinds == [NodeKind.TEXT, NodeKind.ELEMENT, NodeKind.ELEMENT, NodeKind.TEXT]

    def test_attributes_keep_order_and_string_values(self):
        container = parse_fragment('<p class="a b" id="x" hidden></p>')
        paragraph = container.children[0]
        assert isinstance(paragraph, ElementNode)
        assert paragraph.attributes == (("class", "a b"), ("id", "x"), ("hidden", ""))

    def test_duplicate_attribute_keeps_first(self):
        paragraph = parse_fragment('<p id="first" id="second"></p>').children[0]
        assert paragraph.get_attribute("id") == "first"

    def test_tag_and_attribute_names_lower_cased(self):
        svg = parse_fragment('<SVG viewBox="0 0 1 1"><clipPath></clipPath></SVG>').children[0]
        assert svg.tag_name == "svg"
        assert svg.attributes == (("viewbox", "0 0 1 1"),)
        assert svg.children[0].tag_name == "clippath"

    def test_parent_back_references(self):
        container = parse_fragment("<ul><li>item</li></ul>")
        ul = container.children[0]
        li = ul.children[0]
        text = li.children[0]
        assert ul.parent is container
        assert li.parent is ul
        assert isinstance(text, TextNode)
        assert text.parent_tag_name == "li"

    def test_entities_decoded(self):
        text = parse_fragment("<p>a &lt; b &amp;&nbsp;c</p>").children[0].children[0]
        assert text.text == "a < b &\u00a0c"

    def test_comment_node(self):
        comment = parse_fragment("<!-- note -->").children[0]
        assert isinstance(comment, CommentNode)
        assert comment.text == " note "
        assert comment.kind is NodeKind.COMMENT

    def test_doctype_is_unknown_node(self):
        doctype = parse_fragment("<!DOCTYPE html>").children[0]
        assert isinstance(doctype, UnknownNode)
        assert doctype.node_type == "doctype"
        assert doctype.kind is NodeKind.OTHER

    def test_text_content_concatenates_descendants(self):
        div = parse_fragment("<div>a<b>b<!-- skip --></b>c</div>").children[0]
        assert div.text_content == "abc"
        assert div.has_children

    def test_childless_element(self):
        br = parse_fragment("<br>").children[0]
        assert not br.has_children
        assert br.text_content == ""

    def test_style_content_is_raw_text(self):
        style = parse_fragment("<style>a > b { color: red }</style>").children[0]
        assert style.text_content == "a > b { color: red }"


@pytest.mark.unit
class TestBrowserParsingRules:
    def test_leading_newline_dropped_in_pre(self):
        pre = parse_fragment("<pre>\nline</pre>").children[0]
        assert pre.text_content == "line"

    def test_only_one_leading_newline_dropped(self):
        pre = parse_fragment("<pre>\n\nline</pre>").children[0]
        assert pre.text_content == "\nline"

    def test_leading_newline_dropped_in_textarea(self):
        textarea = parse_fragment("<textarea>\nseed</textarea>").children[0]
        assert textarea.text_content == "seed"

    def test_lone_newline_removed_entirely(self):
        pre = parse_fragment("<pre>\n</pre>").children[0]
        assert not pre.has_children

    def test_textarea_markup_kept_as_text(self):
        textarea = parse_fragment("<textarea><b>x</b></textarea>").children[0]
        assert len(textarea.children) == 1
        assert isinstance(textarea.children[0], TextNode)
        assert textarea.text_content == "<b>x</b>"

    def test_whitespace_runs_kept(self):
        paragraph = parse_fragment("<p><span>a</span>   <span>b</span>\t\n  <i>c</i></p>").children[0]
        assert [child.text for child in paragraph.children if isinstance(child, TextNode)] == ["   ", "\t\n  "]

    def test_get_attribute(self):
        link = parse_fragment('<a href="/x" title="">l</a>').children[0]
        assert link.get_attribute("href") == "/x"
        assert link.get_attribute("title") == ""
        assert link.get_attribute("rel") is None


@pytest.mark.unit
class TestParserErrors:
    def test_unsupported_parser(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_fragment("<p></p>", parser="regex")
        assert exc_info.value.parameter_name == "parser"

    def test_missing_backend(self, monkeypatch):
        def fake_soup(*args, **kwargs):
            raise FeatureNotFound("Couldn't find a tree builder with the features you requested: lxml.")

        monkeypatch.setattr(dom_module, "BeautifulSoup", fake_soup)
        with pytest.raises(DependencyError) as exc_info:
            parse_fragment("<p></p>", parser="lxml")
        assert exc_info.value.missing_packages == ["lxml"]
        assert "pip install lxml" in exc_info.value.message

    def test_rejected_markup(self, monkeypatch):
        def fake_soup(*args, **kwargs):
            raise ParserRejectedMarkup("bad markup")

        monkeypatch.setattr(dom_module, "BeautifulSoup", fake_soup)
        with pytest.raises(ParsingError) as exc_info:
            parse_fragment("<p></p>")
        assert exc_info.value.parsing_stage == "parse"
        assert isinstance(exc_info.value.original_error, ParserRejectedMarkup)
