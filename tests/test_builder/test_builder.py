"""Tests for the fluent style builder."""
from __future__ import annotations

import pytest

from chaincss.builder import PROPERTY_SETTERS, StyleBuilder
from chaincss.model.style import StyleBlock
from chaincss.model.values import UNDEFINED


# ---------------------------------------------------------------------------
# Setters
# ---------------------------------------------------------------------------


class TestSetters:
    def test_setters_chain_and_keep_insertion_order(self):
        block = StyleBuilder().color("red").fontSize("12px").block(".a")
        assert list(block.properties) == ["color", "fontSize"]

    def test_aliases_store_full_property_name(self):
        block = StyleBuilder().bg("red").bgColor("blue").block(".a")
        assert block.properties == {"background": "red", "backgroundColor": "blue"}

    def test_snake_case_spelling(self):
        block = StyleBuilder().font_size("10px").z_index(3).block(".a")
        assert block.properties == {"fontSize": "10px", "zIndex": "3"}

    def test_later_assignment_wins_but_keeps_position(self):
        block = StyleBuilder().color("red").margin("0").color("blue").block(".a")
        assert list(block.properties.items()) == [("color", "blue"), ("margin", "0")]

    def test_values_are_stringified(self):
        block = StyleBuilder().opacity(0.5).zIndex(10.0).flexGrow(True).block(".a")
        assert block.properties == {"opacity": "0.5", "zIndex": "10", "flexGrow": "true"}

    def test_missing_value_is_undefined(self):
        block = StyleBuilder().color().block(".a")
        assert block.properties == {"color": "undefined"}

    def test_unknown_setter(self):
        with pytest.raises(AttributeError):
            StyleBuilder().notAProperty("x")

    def test_setter_table_has_common_properties(self):
        for name in ("bg", "zIndex", "gridTemplateColumns", "backdropFilter", "accentColor"):
            assert name in PROPERTY_SETTERS


# ---------------------------------------------------------------------------
# Special setters
# ---------------------------------------------------------------------------


class TestSpecialSetters:
    def test_border_side_style(self):
        block = StyleBuilder().border_side_style("left", "dashed").block(".a")
        assert block.properties == {"borderLeftStyle": "dashed"}

    def test_border_side_style_ignores_unknown_side(self):
        block = StyleBuilder().border_side_style("middle", "dashed").block(".a")
        assert block.properties == {}

    def test_text_decoration_single_argument(self):
        block = StyleBuilder().text_decoration("underline").block(".a")
        assert block.properties == {"textDecoration": "underline"}

    def test_text_decoration_with_style_sets_style_property(self):
        block = StyleBuilder().text_decoration("wavy", "red").block(".a")
        assert block.properties == {"textDecorationStyle": "wavy"}

    def test_mixin_copies_raw_bags(self):
        builder = StyleBuilder()
        base = builder.color("red").padding("1px").block()
        block = builder.mixin(base).padding("2px").block(".a")
        assert block.properties == {"color": "red", "padding": "2px"}

    def test_mixin_rejects_non_blocks(self):
        with pytest.raises(TypeError):
            StyleBuilder().mixin({"color": "red"})


# ---------------------------------------------------------------------------
# block()
# ---------------------------------------------------------------------------


class TestBlock:
    def test_block_resets_bag(self):
        builder = StyleBuilder()
        first = builder.color("red").block(".a")
        second = builder.margin("0").block(".b")
        assert first.properties == {"color": "red"}
        assert second.properties == {"margin": "0"}
        assert builder.bag == {}

    def test_block_without_selectors_is_raw(self):
        block = StyleBuilder().color("red").block()
        assert block.is_raw
        assert block.selectors == ()

    def test_multiple_selectors(self):
        block = StyleBuilder().color("red").block(".a", ".b")
        assert block.selectors == (".a", ".b")
        assert block.selector_text == ".a,.b"

    def test_bag_is_a_copy(self):
        builder = StyleBuilder().color("red")
        builder.bag["color"] = "blue"
        assert builder.bag == {"color": "red"}


# ---------------------------------------------------------------------------
# navBar()
# ---------------------------------------------------------------------------


class TestNavBar:
    def test_requires_selector(self):
        with pytest.raises(ValueError, match="navBar\\(\\) requires selector argument."):
            StyleBuilder().nav_bar()

    def test_returns_four_blocks(self):
        nav = StyleBuilder().nav_bar(".nav", "ul", "li", "a")
        assert list(nav) == ["navUl", "navLi", "navA", "navAhover"]
        assert nav["navUl"].selectors == (".nav ul",)
        assert nav["navLi"].selectors == (".nav ul li",)
        assert nav["navA"].selectors == (".nav ul li a",)
        assert nav["navAhover"].selectors == (".nav ul li a:hover",)

    def test_missing_parts_default(self):
        nav = StyleBuilder().nav_bar(".nav", "ol")
        assert nav["navA"].selectors == (".nav ol li a",)

    def test_block_properties(self):
        nav = StyleBuilder().nav_bar(".nav")
        assert nav["navUl"].properties == {
            "display": "flex",
            "listStyle": "none",
            "margin": "0",
            "padding": "0",
        }
        assert nav["navAhover"].properties == {
            "textDecoration": "underline",
            "backgroundColor": "#555",
        }

    def test_leaves_bag_empty(self):
        builder = StyleBuilder()
        builder.nav_bar(".nav")
        assert builder.bag == {}


# ---------------------------------------------------------------------------
# Script exposure
# ---------------------------------------------------------------------------


class TestScriptMembers:
    def test_css_output_defaults_to_undefined(self):
        assert StyleBuilder().script_member("cssOutput") is UNDEFINED

    def test_operations_and_setters_resolve(self):
        builder = StyleBuilder()
        assert builder.script_member("navBar") == builder.nav_bar
        setter = builder.script_member("bgColor")
        assert setter("red") is builder
        assert builder.bag == {"backgroundColor": "red"}

    def test_snake_case_not_exposed(self):
        with pytest.raises(AttributeError):
            StyleBuilder().script_member("font_size")

    def test_private_members_hidden(self):
        with pytest.raises(AttributeError):
            StyleBuilder().script_member("_bag")

    def test_only_css_output_assignable(self):
        builder = StyleBuilder()
        builder.set_script_member("cssOutput", "a {}")
        assert builder.css_output == "a {}"
        with pytest.raises(AttributeError):
            builder.set_script_member("color", "red")

    def test_block_returns_style_block(self):
        block = StyleBuilder().script_member("block")(".x")
        assert isinstance(block, StyleBlock)
