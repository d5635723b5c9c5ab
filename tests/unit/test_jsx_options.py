"""Unit tests for JsxOptions."""

from dataclasses import FrozenInstanceError

import pytest

from html2jsx.exceptions import ValidationError
from html2jsx.options import JsxOptions


@pytest.mark.unit
class TestJsxOptions:
    def test_defaults(self):
        options = JsxOptions()
        assert options.indent == "  "
        assert options.parser == "html.parser"

    @pytest.mark.parametrize("indent", ["\t", "    ", " \t"])
    def test_whitespace_indents_accepted(self, indent):
        assert JsxOptions(indent=indent).indent == indent

    @pytest.mark.parametrize("indent", ["", "ab", " x ", 2, None])
    def test_invalid_indent(self, indent):
        with pytest.raises(ValidationError) as exc_info:
            JsxOptions(indent=indent)
        assert exc_info.value.parameter_name == "indent"

    def test_invalid_parser(self):
        with pytest.raises(ValidationError) as exc_info:
            JsxOptions(parser="regex")  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "parser"
        assert exc_info.value.parameter_value == "regex"

    def test_frozen(self):
        options = JsxOptions()
        with pytest.raises(FrozenInstanceError):
            options.indent = "\t"  # type: ignore[misc]

    def test_field_help_metadata(self):
        from dataclasses import fields

        assert all("help" in f.metadata for f in fields(JsxOptions))


@pytest.mark.unit
class TestCreateUpdated:
    def test_returns_modified_copy(self):
        original = JsxOptions()
        updated = original.create_updated(indent="\t")
        assert updated.indent == "\t"
        assert updated.parser == original.parser
        assert original.indent == "  "

    def test_revalidates(self):
        with pytest.raises(ValidationError):
            JsxOptions().create_updated(indent="")

    def test_unknown_field(self):
        with pytest.raises(ValidationError) as exc_info:
            JsxOptions().create_updated(width=80)
        assert exc_info.value.parameter_name == "width"


@pytest.mark.unit
class TestFromMapping:
    def test_known_keys(self):
        options = JsxOptions.from_mapping({"indent": "\t", "parser": "html.parser"})
        assert options == JsxOptions(indent="\t")

    def test_unrelated_keys_ignored(self):
        options = JsxOptions.from_mapping({"indent": "    ", "line_width": 80})
        assert options.indent == "    "

    def test_empty_mapping(self):
        assert JsxOptions.from_mapping({}) == JsxOptions()

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            JsxOptions.from_mapping({"parser": "bogus"})
