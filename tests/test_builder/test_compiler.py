"""Tests for style block serialization."""
from __future__ import annotations

import pytest

from chaincss.builder import StyleBuilder, compiler
from chaincss.errors import StyleCompileError
from chaincss.model.style import StyleBlock


# ---------------------------------------------------------------------------
# to_kebab
# ---------------------------------------------------------------------------


class TestToKebab:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("color", "color"),
            ("backgroundColor", "background-color"),
            ("zIndex", "z-index"),
            ("gridTemplateColumns", "grid-template-columns"),
            ("borderLeftStyle", "border-left-style"),
        ],
    )
    def test_conversion(self, name, expected):
        assert compiler.to_kebab(name) == expected


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------


class TestRun:
    def test_single_block(self):
        block = StyleBuilder().bg("red").block(".a")
        assert compiler.run(block) == ".a {\n\tbackground: red;\n}"

    def test_property_order_preserved(self):
        block = StyleBuilder().color("red").fontSize("12px").block(".a")
        css = compiler.run(block)
        assert css.index("color: red") < css.index("font-size: 12px")

    def test_kebab_case_names(self):
        block = StyleBuilder().bgColor("blue").zIndex(2).block(".a")
        assert compiler.run(block) == ".a {\n\tbackground-color: blue;\n\tz-index: 2;\n}"

    def test_blocks_separated_by_blank_line(self):
        builder = StyleBuilder()
        a = builder.color("red").block(".a")
        b = builder.color("blue").block(".b")
        assert compiler.run(a, b) == ".a {\n\tcolor: red;\n}\n\n.b {\n\tcolor: blue;\n}"

    def test_selector_list(self):
        block = StyleBuilder().color("red").block("h1", "h2")
        assert compiler.run(block).startswith("h1,h2 {\n")

    def test_no_blocks(self):
        assert compiler.run() == ""

    def test_raw_bag_rejected(self):
        with pytest.raises(StyleCompileError):
            compiler.run(StyleBlock(properties={"color": "red"}))

    def test_non_block_rejected(self):
        with pytest.raises(StyleCompileError):
            compiler.run("a { color: red; }")


# ---------------------------------------------------------------------------
# compile()
# ---------------------------------------------------------------------------


class TestCompile:
    def test_mapping_in_key_order(self):
        builder = StyleBuilder()
        css = compiler.compile(
            {
                "b": builder.color("blue").block(".b"),
                "a": builder.bgColor("red").block(".a"),
            }
        )
        assert css == ".b {\n  color: blue;\n}\n.a {\n  background-color: red;\n}\n"

    def test_raw_bag_has_empty_selector(self):
        css = compiler.compile({"x": StyleBlock(properties={"color": "red"})})
        assert css == " {\n  color: red;\n}\n"

    def test_nav_bar_blocks(self):
        css = compiler.compile(StyleBuilder().nav_bar(".nav"))
        assert ".nav ul li a:hover {\n  text-decoration: underline;\n" in css

    def test_empty_mapping(self):
        assert compiler.compile({}) == ""

    def test_non_mapping_rejected(self):
        with pytest.raises(StyleCompileError):
            compiler.compile([StyleBlock(selectors=(".a",))])

    def test_non_block_entry_rejected(self):
        with pytest.raises(StyleCompileError, match="'a'"):
            compiler.compile({"a": "color: red"})
