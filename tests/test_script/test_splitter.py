"""Tests for splitting documents into literal and script segments."""
from __future__ import annotations

from chaincss.model.segment import SegmentKind
from chaincss.script import split


class TestSplit:
    def test_no_markers(self):
        segments = split("a { color: red; }")
        assert len(segments) == 1
        assert segments[0].kind is SegmentKind.LITERAL
        assert segments[0].text == "a { color: red; }"

    def test_alternating_segments(self):
        segments = split("x<@ one @>y<@ two @>z")
        assert [s.kind for s in segments] == [
            SegmentKind.LITERAL,
            SegmentKind.SCRIPT,
            SegmentKind.LITERAL,
            SegmentKind.SCRIPT,
            SegmentKind.LITERAL,
        ]
        assert [s.text for s in segments] == ["x", " one ", "y", " two ", "z"]
        assert [s.index for s in segments] == [0, 1, 2, 3, 4]

    def test_edges_produce_empty_literals(self):
        segments = split("<@a@>")
        assert [s.text for s in segments] == ["", "a", ""]

    def test_script_spans_lines(self):
        segments = split("<@\nconst a = 1\n@>")
        assert segments[1].text == "\nconst a = 1\n"
        assert segments[1].is_script

    def test_first_close_marker_ends_block(self):
        segments = split("<@ a <@ b @> c @>")
        assert segments[1].text == " a <@ b "
        assert segments[2].text == " c @>"

    def test_unclosed_marker_is_literal(self):
        segments = split("a <@ b")
        assert len(segments) == 1
        assert segments[0].text == "a <@ b"

    def test_literal_preserved_byte_for_byte(self):
        doc = "  .a {\r\n\tcolor: red;\r\n}  "
        assert "".join(s.text for s in split(doc)) == doc
