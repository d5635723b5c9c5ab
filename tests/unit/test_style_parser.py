"""Unit tests for the inline style declaration parser."""

import pytest

from html2jsx.style_parser import StyleParser


@pytest.mark.unit
class TestStyleParsing:
    def test_parses_in_order(self):
        parser = StyleParser("color: red; -ms-flex: 1; margin:10px")
        assert list(parser.styles.items()) == [("color", "red"), ("-ms-flex", "1"), ("margin", "10px")]

    def test_property_names_are_lower_cased_and_trimmed(self):
        parser = StyleParser("  COLOR : Red ;Font-Size:12px")
        assert dict(parser.styles) == {"color": "Red", "font-size": "12px"}

    def test_value_split_at_first_colon(self):
        parser = StyleParser("background: url(http://example.com/a.png)")
        assert parser.styles["background"] == "url(http://example.com/a.png)"

    def test_empty_and_colonless_segments_dropped(self):
        parser = StyleParser("color: red;; ;garbage; :orphan;")
        assert dict(parser.styles) == {"color": "red"}

    def test_last_duplicate_wins_in_first_position(self):
        parser = StyleParser("color: red; margin: 0; color: blue")
        assert list(parser.styles.items()) == [("color", "blue"), ("margin", "0")]

    def test_styles_view_is_read_only(self):
        parser = StyleParser("color: red")
        with pytest.raises(TypeError):
            parser.styles["color"] = "blue"  # type: ignore[index]

    def test_empty_string(self):
        assert StyleParser("").to_jsx_string() == ""


@pytest.mark.unit
class TestStyleSerialization:
    def test_to_jsx_string(self):
        parser = StyleParser("color: red; -ms-flex: 1; margin:10px")
        assert parser.to_jsx_string() == "color: 'red', msFlex: 1, margin: '10px'"

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("background-color", "backgroundColor"),
            ("-ms-transition", "msTransition"),
            ("-webkit-transition", "WebkitTransition"),
            ("-moz-box-sizing", "MozBoxSizing"),
            ("z-index", "zIndex"),
        ],
    )
    def test_keys(self, key, expected):
        assert StyleParser.to_jsx_key(key) == expected

    def test_numeric_values_unquoted(self):
        assert StyleParser("z-index: 10; opacity: 0.5").to_jsx_string() == "zIndex: 10, opacity: '0.5'"

    def test_leading_zeros_kept_verbatim(self):
        assert StyleParser("order: 007").to_jsx_string() == "order: 007"

    def test_single_quotes_become_double_quotes(self):
        parser = StyleParser("font-family: 'Helvetica Neue', sans-serif")
        assert parser.to_jsx_string() == "fontFamily: '\"Helvetica Neue\", sans-serif'"
