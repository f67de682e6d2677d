"""Resolve browserslist-style queries into concrete (browser, version) pairs.

Supported queries::

    defaults
    > 0.5%          >= 1%        < 5%        <= 5%
    last 2 versions
    last 2 chrome versions
    safari >= 12    ie 11        ios 15.2-15.4
    firefox esr
    dead
    not <query>

Queries are applied in order: positive queries add to the selection,
``not`` queries remove from what has been selected so far.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from chaincss.errors import TargetQueryError
from chaincss.prefixer.dataset import CapabilityDataset

Target = tuple[str, str]

DEFAULT_QUERIES = ("> 0.5%", "last 2 versions", "Firefox ESR", "not dead")

FIREFOX_ESR = ("115", "128")

_ALIASES = {
    "fx": "firefox",
    "ff": "firefox",
    "ios": "ios_saf",
    "explorer": "ie",
    "blackberry": "bb",
    "explorermobile": "ie_mob",
    "operamini": "op_mini",
    "operamobile": "op_mob",
    "chromeandroid": "and_chr",
    "firefoxandroid": "and_ff",
    "ucandroid": "and_uc",
    "qqandroid": "and_qq",
}

_USAGE_RE = re.compile(r"^(>=|<=|>|<)\s*(\d+(?:\.\d+)?)%$")
_LAST_RE = re.compile(r"^last\s+(\d+)\s+versions?$", re.IGNORECASE)
_LAST_BROWSER_RE = re.compile(r"^last\s+(\d+)\s+(\w+)\s+versions?$", re.IGNORECASE)
_COMPARE_RE = re.compile(r"^(\w+)\s*(>=|<=|>|<)\s*(\d+(?:\.\d+)*)$")
_RANGE_RE = re.compile(r"^(\w+)\s+(\d+(?:\.\d+)*)\s*-\s*(\d+(?:\.\d+)*)$")
_EXACT_RE = re.compile(r"^(\w+)\s+([\w.\-]+)$")
_ESR_RE = re.compile(r"^(firefox|ff|fx)\s+esr$", re.IGNORECASE)
_NOT_RE = re.compile(r"^not\s+(.+)$", re.IGNORECASE)


def parse_version(version: str) -> float | None:
    """Numeric value of a caniuse version string (``"15.2-15.3"`` -> 15.2)."""
    head = version.split("-")[0]
    match = re.match(r"^\d+(?:\.\d+)?", head)
    if match is None:
        return None
    return float(match.group(0))


def _is_dead(browser: str, version: str) -> bool:
    if browser in ("ie", "ie_mob", "bb", "baidu"):
        return True
    number = parse_version(version)
    if browser == "op_mob" and number is not None and number <= 12.1:
        return True
    if browser == "samsung" and number is not None and number <= 4:
        return True
    return False


def _compare(left: float, op: str, right: float) -> bool:
    if op == ">":
        return left > right
    if op == ">=":
        return left >= right
    if op == "<":
        return left < right
    return left <= right


class _Resolver:
    def __init__(self, dataset: CapabilityDataset) -> None:
        self.dataset = dataset

    def browser(self, name: str) -> str:
        key = name.lower()
        if key in self.dataset.browsers:
            return key
        alias = _ALIASES.get(key)
        if alias is not None and alias in self.dataset.browsers:
            return alias
        raise TargetQueryError(f"Unknown browser {name!r}")

    def _select(
        self, browsers: Iterable[str], predicate: Callable[[str, str], bool]
    ) -> set[Target]:
        return {
            (browser, version)
            for browser in browsers
            for version in self.dataset.released_versions(browser)
            if predicate(browser, version)
        }

    def query(self, text: str) -> set[Target]:
        text = text.strip()
        lowered = text.lower()
        if lowered == "defaults":
            result: set[Target] = set()
            for sub in DEFAULT_QUERIES:
                match = _NOT_RE.match(sub)
                if match:
                    result -= self.query(match.group(1))
                else:
                    result |= self.query(sub)
            return result
        if lowered == "dead":
            return self._select(self.dataset.browsers, _is_dead)
        if _ESR_RE.match(text):
            firefox = self.browser("firefox")
            known = set(self.dataset.released_versions(firefox))
            return {(firefox, v) for v in FIREFOX_ESR if v in known}

        match = _USAGE_RE.match(text)
        if match:
            op, limit = match.group(1), float(match.group(2))
            return {
                (browser, version)
                for browser in self.dataset.browsers
                for version, usage, released in self.dataset.versions(browser)
                if released and _compare(usage, op, limit)
            }

        match = _LAST_RE.match(text)
        if match:
            count = int(match.group(1))
            return {
                (browser, version)
                for browser in self.dataset.browsers
                for version in self.dataset.released_versions(browser)[-count:]
            }

        match = _LAST_BROWSER_RE.match(text)
        if match:
            count, browser = int(match.group(1)), self.browser(match.group(2))
            return {(browser, v) for v in self.dataset.released_versions(browser)[-count:]}

        match = _COMPARE_RE.match(text)
        if match:
            browser, op, limit = self.browser(match.group(1)), match.group(2), float(match.group(3))
            return self._select(
                [browser],
                lambda _, v: (n := parse_version(v)) is not None and _compare(n, op, limit),
            )

        match = _RANGE_RE.match(text)
        if match:
            browser = self.browser(match.group(1))
            low, high = float(match.group(2)), float(match.group(3))
            return self._select(
                [browser],
                lambda _, v: (n := parse_version(v)) is not None and low <= n <= high,
            )

        match = _EXACT_RE.match(text)
        if match:
            browser, wanted = self.browser(match.group(1)), match.group(2).lower()
            found = {
                (browser, v)
                for v in self.dataset.released_versions(browser)
                if v.lower() == wanted or wanted in v.lower().split("-")
            }
            if not found:
                raise TargetQueryError(f"Unknown version {match.group(2)} of {browser}")
            return found

        raise TargetQueryError(f"Unknown browser query {text!r}")


def _sort_key(target: Target) -> tuple[str, float, str]:
    number = parse_version(target[1])
    return (target[0], number if number is not None else -1.0, target[1])


def resolve_targets(queries: Iterable[str], dataset: CapabilityDataset) -> list[Target]:
    """Resolve *queries* against *dataset*, sorted by browser then version."""
    resolver = _Resolver(dataset)
    selected: set[Target] = set()
    for raw in queries:
        for text in re.split(r",|\s+or\s+", raw):
            text = text.strip()
            if not text:
                continue
            match = _NOT_RE.match(text)
            if match:
                selected -= resolver.query(match.group(1))
            else:
                selected |= resolver.query(text)
    return sorted(selected, key=_sort_key)
