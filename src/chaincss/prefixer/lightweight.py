"""Table-driven vendor prefixing using a caniuse dataset and tinycss2."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from typing import Any

import tinycss2

from chaincss.model.result import ProcessResult
from chaincss.prefixer.dataset import CapabilityDataset
from chaincss.prefixer.targets import Target, parse_version, resolve_targets

logger = logging.getLogger(__name__)

COMMON_PROPERTIES = frozenset([
    "transform", "transform-origin", "transform-style",
    "transition", "transition-property", "transition-duration", "transition-timing-function",
    "animation", "animation-name", "animation-duration", "animation-timing-function",
    "animation-delay", "animation-iteration-count", "animation-direction",
    "animation-fill-mode", "animation-play-state",
    "backdrop-filter", "filter",
    "user-select", "appearance",
    "text-fill-color", "text-stroke", "text-stroke-color", "text-stroke-width",
    "background-clip",
    "mask-image", "mask-clip", "mask-composite", "mask-origin",
    "mask-position", "mask-repeat", "mask-size",
    "box-shadow", "border-radius", "box-sizing",
    "display", "flex", "flex-grow", "flex-shrink", "flex-basis",
    "justify-content", "align-items", "align-self", "align-content",
    "grid", "grid-template", "grid-column", "grid-row",
])

# CSS property -> caniuse feature id.
FEATURES = {
    "transform": "transforms2d",
    "transform-origin": "transforms2d",
    "transform-style": "transforms3d",
    "perspective": "transforms3d",
    "backface-visibility": "transforms3d",
    "transition": "css-transitions",
    "animation": "css-animation",
    "backdrop-filter": "backdrop-filter",
    "filter": "css-filters",
    "user-select": "user-select-none",
    "appearance": "css-appearance",
    "mask-image": "css-masks",
    "box-shadow": "css-boxshadow",
    "border-radius": "border-radius",
    "text-fill-color": "text-stroke",
    "text-stroke": "text-stroke",
    "background-clip": "background-img-opts",
    "flex": "flexbox",
    "flex-grow": "flexbox",
    "flex-shrink": "flexbox",
    "flex-basis": "flexbox",
    "justify-content": "flexbox",
    "align-items": "flexbox",
    "grid": "css-grid",
    "grid-template": "css-grid",
    "grid-column": "css-grid",
    "grid-row": "css-grid",
}

# Values whose prefixed form is a syntax substitution the support table
# cannot express.
SPECIAL_VALUES: dict[str, dict[str, list[tuple[str, str]]]] = {
    "display": {
        "flex": [("display", "-webkit-flex"), ("display", "-ms-flexbox")],
        "inline-flex": [("display", "-webkit-inline-flex"), ("display", "-ms-inline-flexbox")],
        "grid": [("display", "-ms-grid")],
        "inline-grid": [("display", "-ms-inline-grid")],
    },
    "background-clip": {
        "text": [("-webkit-background-clip", "text")],
    },
    "position": {
        "sticky": [("position", "-webkit-sticky")],
    },
}

BROWSER_PREFIXES = {
    "chrome": "webkit",
    "safari": "webkit",
    "firefox": "moz",
    "ie": "ms",
    "edge": "webkit",
    "ios_saf": "webkit",
    "and_chr": "webkit",
    "android": "webkit",
    "opera": "webkit",
    "op_mob": "webkit",
    "samsung": "webkit",
    "and_ff": "moz",
}

# At-rules whose block holds rules rather than declarations. Keyframe
# selectors (`from`, `to`, percentages) parse as qualified rules.
_RULE_LIST_AT_RULES = frozenset([
    "media", "supports", "document", "layer", "container", "scope",
    "starting-style", "keyframes",
])

_VENDOR_PREFIX_RE = re.compile(r"^-[a-z]+-")


def _closest_support(table: dict[str, str], version: str) -> str | None:
    """Support flags for the nearest known version <= *version*.

    Falls back to the lowest known version when every known version is newer.
    """
    if version in table:
        return table[version]
    wanted = parse_version(version)
    known = sorted(
        (number, key) for key in table if (number := parse_version(key)) is not None
    )
    if wanted is None or not known:
        return None
    older = [key for number, key in known if number <= wanted]
    return table[older[-1] if older else known[0][1]]


def _declarations(nodes: Iterable[Any]) -> Iterator[Any]:
    """Yield every declaration in a stylesheet or rule list, depth first."""
    for node in nodes:
        if node.type == "qualified-rule":
            yield from _declaration_list(node.content)
        elif node.type == "at-rule" and node.content is not None:
            if _VENDOR_PREFIX_RE.sub("", node.lower_at_keyword) in _RULE_LIST_AT_RULES:
                yield from _declarations(
                    tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
                )
            else:
                yield from _declaration_list(node.content)


def _declaration_list(content: list[Any]) -> Iterator[Any]:
    for item in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
        if item.type == "declaration":
            yield item


def _normalize(css: str) -> str:
    # Same preprocessing as the tinycss2 tokenizer, so positions line up.
    return (
        css.replace("\0", "\uFFFD")
        .replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\f", "\n")
    )


class LightweightStrategy:
    """Insert prefixed declarations before the ones that need them.

    Without a capability dataset the strategy passes CSS through untouched.
    Targets are resolved once, on first use.
    """

    name = "lightweight"

    def __init__(
        self,
        browsers: Iterable[str],
        dataset: CapabilityDataset | None,
        *,
        resolver: Callable[[Iterable[str], CapabilityDataset], list[Target]] = resolve_targets,
    ) -> None:
        self.browsers = tuple(browsers)
        self.dataset = dataset
        self._resolver = resolver
        self._targets: list[Target] | None = None

    @property
    def targets(self) -> list[Target]:
        if self._targets is None:
            if self.dataset is None:
                self._targets = []
            else:
                self._targets = self._resolver(self.browsers, self.dataset)
                logger.debug("Resolved %d browser targets", len(self._targets))
        return self._targets

    def vendor_prefixes(self, prop: str) -> list[str]:
        """Vendor prefixes *prop* needs for the current targets, first seen first."""
        if self.dataset is None or prop not in COMMON_PROPERTIES:
            return []
        feature = FEATURES.get(prop)
        stats = self.dataset.support(feature) if feature else None
        if not stats:
            return []
        prefixes: dict[str, None] = {}
        for browser, version in self.targets:
            table = stats.get(browser)
            if not table:
                continue
            flags = _closest_support(table, version)
            if flags and "x" in flags.split():
                prefix = BROWSER_PREFIXES.get(browser)
                if prefix:
                    prefixes.setdefault(prefix)
        return list(prefixes)

    def prefixed_declarations(self, prop: str, value: str) -> list[tuple[str, str]]:
        """Declarations to insert before ``prop: value``, in order."""
        result = [(f"-{prefix}-{prop}", value) for prefix in self.vendor_prefixes(prop)]
        for extra in SPECIAL_VALUES.get(prop, {}).get(value.lower(), []):
            if extra not in result:
                result.append(extra)
        return result

    def process(
        self, css: str, *, source: str = "input.css", target: str = "output.css"
    ) -> ProcessResult:
        if self.dataset is None:
            logger.debug("No caniuse data available; lightweight prefixing skipped")
            return ProcessResult(css=css, map=None)

        text = _normalize(css)
        line_starts = [0]
        line_starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")

        insertions: list[tuple[int, str]] = []
        rules = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
        for decl in _declarations(rules):
            value = tinycss2.serialize(decl.value).strip()
            extra = self.prefixed_declarations(decl.lower_name, value)
            if not extra:
                continue
            line_start = line_starts[decl.source_line - 1]
            offset = line_start + decl.source_column - 1
            lead = text[line_start:offset]
            separator = "\n" + lead if not lead.strip() else " "
            important = " !important" if decl.important else ""
            insertions.append(
                (offset, "".join(f"{p}: {v}{important};{separator}" for p, v in extra))
            )

        for offset, chunk in sorted(insertions, reverse=True):
            text = text[:offset] + chunk + text[offset:]
        logger.debug("Lightweight prefixing inserted %d declaration group(s)", len(insertions))
        return ProcessResult(css=text, map=None)
