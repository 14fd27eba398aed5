"""Tests for svgicons.icon and svgicons.attributes."""

import pytest

from svgicons.attributes import AttributeOverride, ClassString, coerce_class, join_classes
from svgicons.icon import Icon


class TestIcon:
    """Test Icon value object."""

    def test_creation(self):
        icon = Icon("arrow", "<svg>A</svg>", {"class": "icon"})
        assert icon.name == "arrow"
        assert icon.contents == "<svg>A</svg>"
        assert icon.attributes["class"] == "icon"

    def test_immutable(self):
        icon = Icon("arrow", "<svg/>", {"class": "icon"})
        with pytest.raises(AttributeError):
            icon.name = "other"
        with pytest.raises(TypeError):
            icon.attributes["class"] = "x"

    def test_detached_from_source_dict(self):
        attributes = {"class": "icon"}
        icon = Icon("arrow", "<svg/>", attributes)
        attributes["class"] = "changed"
        assert icon.attributes["class"] == "icon"

    def test_to_html(self):
        icon = Icon("arrow", '<svg viewBox="0 0 24 24"><path/></svg>', {"class": "icon", "id": "a"})
        assert icon.to_html() == '<svg class="icon" id="a" viewBox="0 0 24 24"><path/></svg>'
        assert str(icon) == icon.to_html()

    def test_to_html_escapes_values(self):
        icon = Icon("arrow", "<svg></svg>", {"title": 'a "b" <c>'})
        assert icon.to_html() == '<svg title="a &quot;b&quot; &lt;c&gt;"></svg>'

    def test_boolean_attributes(self):
        icon = Icon("arrow", "<svg></svg>", {"hidden": True, "focusable": False, "role": None})
        assert icon.to_html() == "<svg hidden></svg>"

    def test_no_attributes(self):
        assert Icon("arrow", "<svg></svg>").to_html() == "<svg></svg>"


class TestCoerceClass:
    """Tests for coerce_class."""

    def test_string(self):
        assert coerce_class("a b") == ClassString("a b")

    def test_none(self):
        assert coerce_class(None) == ClassString("")

    def test_mapping(self):
        assert coerce_class({"id": "x"}) == AttributeOverride({"id": "x"})

    def test_tagged_passthrough(self):
        value = AttributeOverride({"class": "y"})
        assert coerce_class(value) is value

    def test_invalid(self):
        with pytest.raises(TypeError):
            coerce_class(["a"])


class TestJoinClasses:
    """Tests for join_classes."""

    def test_all_parts(self):
        assert join_classes("icon", "ui-icon", "extra") == "icon ui-icon extra"

    def test_empty_parts_skipped(self):
        assert join_classes("", "", "extra") == "extra"
        assert join_classes("icon", "", "") == "icon"
        assert join_classes("", "", "") == ""

    def test_inner_whitespace_kept(self):
        assert join_classes(" a  b ", "c") == "a  b c"

    def test_duplicates_kept(self):
        assert join_classes("icon", "icon") == "icon icon"
