"""Unit tests for the attribute and tag-name translation tables."""

import pytest

from html2jsx.mappings import (
    ATTRIBUTE_MAPPING,
    ELEMENT_ATTRIBUTE_MAPPING,
    ELEMENT_TAG_NAME_MAPPING,
    build_attribute_mapping,
    jsx_attribute_name,
    jsx_tag_name,
)
from html2jsx.property_config import DOMPropertyConfig


@pytest.mark.unit
class TestAttributeMapping:
    @pytest.mark.parametrize(
        "attribute,expected",
        [
            ("class", "className"),
            ("for", "htmlFor"),
            ("tabindex", "tabIndex"),
            ("readonly", "readOnly"),
            ("colspan", "colSpan"),
            ("accept-charset", "acceptCharset"),
            ("http-equiv", "httpEquiv"),
            ("stroke-width", "strokeWidth"),
            ("viewbox", "viewBox"),
            ("xlink:href", "xlinkHref"),
            ("id", "id"),
        ],
    )
    def test_known_attributes(self, attribute, expected):
        assert ATTRIBUTE_MAPPING[attribute] == expected

    def test_keys_are_lower_case(self):
        assert all(key == key.lower() for key in ATTRIBUTE_MAPPING)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ATTRIBUTE_MAPPING["class"] = "klass"  # type: ignore[index]
        with pytest.raises(TypeError):
            ELEMENT_TAG_NAME_MAPPING["svg"] = "SVG"  # type: ignore[index]
        with pytest.raises(TypeError):
            ELEMENT_ATTRIBUTE_MAPPING["input"]["checked"] = "checked"  # type: ignore[index]

    def test_first_registration_wins(self):
        first = DOMPropertyConfig(name="first", properties=("tabIndex",))
        second = DOMPropertyConfig(name="second", properties=("TABINDEX",))
        mapping = build_attribute_mapping([first, second], seed={"for": "htmlFor"})
        assert mapping["tabindex"] == "tabIndex"
        assert mapping["for"] == "htmlFor"

    def test_seed_beats_descriptors(self):
        config = DOMPropertyConfig(name="html", properties=("klass",), dom_attribute_names={"klass": "class"})
        mapping = build_attribute_mapping([config], seed={"class": "className"})
        assert mapping["class"] == "className"


@pytest.mark.unit
class TestJsxAttributeName:
    def test_element_override_takes_precedence(self):
        assert jsx_attribute_name("input", "checked") == "defaultChecked"
        assert jsx_attribute_name("input", "value") == "defaultValue"
        assert jsx_attribute_name("input", "autofocus") == "autoFocus"

    def test_override_only_applies_to_its_element(self):
        assert jsx_attribute_name("option", "value") == "value"
        assert jsx_attribute_name("option", "checked") == "checked"

    def test_unknown_attribute_unchanged(self):
        assert jsx_attribute_name("div", "data-test-id") == "data-test-id"
        assert jsx_attribute_name("div", "aria-label") == "aria-label"


@pytest.mark.unit
class TestJsxTagName:
    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("clippath", "clipPath"),
            ("lineargradient", "linearGradient"),
            ("LINEARGRADIENT", "linearGradient"),
            ("feGaussianBlur", "feGaussianBlur"),
            ("foreignobject", "foreignObject"),
            ("DIV", "div"),
            ("custom-element", "custom-element"),
        ],
    )
    def test_tag_names(self, tag, expected):
        assert jsx_tag_name(tag) == expected
