"""Tests for the table-driven lightweight prefixer."""
from __future__ import annotations

from chaincss.prefixer import LightweightStrategy


def _strategy(dataset, *targets, browsers=("last 2 versions",)):
    if targets:
        return LightweightStrategy(browsers, dataset, resolver=lambda _q, _d: list(targets))
    return LightweightStrategy(browsers, dataset)


# ---------------------------------------------------------------------------
# Prefix selection
# ---------------------------------------------------------------------------


class TestVendorPrefixes:
    def test_prefixes_in_target_order(self, dataset):
        assert _strategy(dataset).vendor_prefixes("user-select") == ["ms", "webkit"]

    def test_only_targets_needing_prefix(self, dataset):
        assert _strategy(dataset).vendor_prefixes("transform") == ["ms"]

    def test_uncommon_property_ignored(self, dataset):
        assert _strategy(dataset).vendor_prefixes("color") == []

    def test_missing_feature_data(self, dataset):
        assert _strategy(dataset).vendor_prefixes("grid") == []

    def test_nearest_older_version_is_used(self, dataset):
        strategy = _strategy(dataset, ("chrome", "36"))
        assert strategy.vendor_prefixes("transform") == []

    def test_nearest_older_version_needing_prefix(self, dataset):
        strategy = _strategy(dataset, ("chrome", "30"))
        assert strategy.vendor_prefixes("transform") == ["webkit"]

    def test_older_than_all_known_uses_lowest(self, dataset):
        strategy = _strategy(dataset, ("chrome", "10"))
        assert strategy.vendor_prefixes("transform") == ["webkit"]

    def test_targets_resolved_once(self, dataset):
        calls = []

        def resolver(queries, ds):
            calls.append(queries)
            return [("ie", "9")]

        strategy = LightweightStrategy(["ie 9"], dataset, resolver=resolver)
        strategy.vendor_prefixes("transform")
        strategy.vendor_prefixes("user-select")
        assert calls == [("ie 9",)]


# ---------------------------------------------------------------------------
# Special values
# ---------------------------------------------------------------------------


class TestSpecialValues:
    def test_display_flex(self, dataset):
        assert _strategy(dataset).prefixed_declarations("display", "flex") == [
            ("display", "-webkit-flex"),
            ("display", "-ms-flexbox"),
        ]

    def test_background_clip_text(self, dataset):
        assert _strategy(dataset).prefixed_declarations("background-clip", "text") == [
            ("-webkit-background-clip", "text"),
        ]

    def test_plain_display_untouched(self, dataset):
        assert _strategy(dataset).prefixed_declarations("display", "block") == []


# ---------------------------------------------------------------------------
# process()
# ---------------------------------------------------------------------------


class TestProcess:
    def test_display_flex_expansion(self, dataset):
        result = _strategy(dataset).process(".a {\n  display: flex;\n}")
        assert result.css == (
            ".a {\n  display: -webkit-flex;\n  display: -ms-flexbox;\n  display: flex;\n}"
        )
        assert result.map is None

    def test_prefixed_declarations_precede_original(self, dataset):
        result = _strategy(dataset).process(".a {\n\tuser-select: none;\n}")
        assert result.css == (
            ".a {\n\t-ms-user-select: none;\n\t-webkit-user-select: none;\n\tuser-select: none;\n}"
        )

    def test_single_line_rule(self, dataset):
        result = _strategy(dataset).process(".a { transform: none !important; }")
        assert result.css == ".a { -ms-transform: none !important; transform: none !important; }"

    def test_nested_in_media(self, dataset):
        css = "@media (min-width: 1px) {\n  .a {\n    display: flex;\n  }\n}"
        result = _strategy(dataset).process(css)
        assert "    display: -webkit-flex;\n    display: -ms-flexbox;\n    display: flex;" in (
            result.css
        )

    def test_keyframe_declarations_prefixed(self, dataset):
        css = (
            "@keyframes spin {\n"
            "  from { transform: rotate(0deg); }\n"
            "  to {\n    transform: rotate(360deg);\n  }\n"
            "}"
        )
        result = _strategy(dataset, ("ie", "9")).process(css)
        assert result.css == (
            "@keyframes spin {\n"
            "  from { -ms-transform: rotate(0deg); transform: rotate(0deg); }\n"
            "  to {\n    -ms-transform: rotate(360deg);\n    transform: rotate(360deg);\n  }\n"
            "}"
        )

    def test_vendor_keyframes_walked(self, dataset):
        css = "@-webkit-keyframes pulse { 50% { transform: none; } }"
        result = _strategy(dataset, ("ie", "9")).process(css)
        assert "50% { -ms-transform: none; transform: none; }" in result.css

    def test_rules_and_keyframes_together(self, dataset):
        css = ".b { transform: none; }\n@keyframes spin { from { transform: none; } }"
        result = _strategy(dataset, ("ie", "9")).process(css)
        assert result.css == (
            ".b { -ms-transform: none; transform: none; }\n"
            "@keyframes spin { from { -ms-transform: none; transform: none; } }"
        )

    def test_unprefixed_css_unchanged(self, dataset):
        css = ".a {\n  color: red;\n}\n\n.b { margin: 0; }"
        assert _strategy(dataset).process(css).css == css

    def test_without_dataset_passes_through(self):
        strategy = LightweightStrategy(["last 2 versions"], None)
        css = ".a { display: flex; }"
        assert strategy.process(css).css == css
        assert strategy.targets == []

    def test_output_is_deterministic(self, dataset):
        css = ".a { display: flex; user-select: none; }\n.b { transform: none; }"
        assert _strategy(dataset).process(css).css == _strategy(dataset).process(css).css
