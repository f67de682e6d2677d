"""Shared fixtures: a small caniuse dataset and document helpers."""

from __future__ import annotations

import pytest

from chaincss.prefixer.dataset import CapabilityDataset


def _versions(*entries: tuple[str, float, int | None]) -> list[dict]:
    return [
        {"version": v, "global_usage": usage, "release_date": released}
        for v, usage, released in entries
    ]


CANIUSE_DATA = {
    "agents": {
        "chrome": {
            "prefix": "webkit",
            "version_list": _versions(
                ("20", 0.1, 1340000000),
                ("35", 0.2, 1400000000),
                ("120", 5.0, 1700000000),
                ("121", 10.0, 1705000000),
                ("122", 0.0, None),
            ),
        },
        "firefox": {
            "prefix": "moz",
            "version_list": _versions(
                ("3.6", 0.01, 1264000000),
                ("115", 0.6, 1688000000),
                ("121", 2.0, 1703000000),
                ("122", 1.0, 1705000000),
            ),
        },
        "ie": {
            "prefix": "ms",
            "version_list": _versions(
                ("9", 0.1, 1300000000),
                ("11", 0.6, 1380000000),
            ),
        },
        "safari": {
            "prefix": "webkit",
            "version_list": _versions(
                ("6", 0.05, 1340000000),
                ("15.2-15.3", 0.3, 1640000000),
                ("17.2", 1.5, 1702000000),
            ),
        },
    },
    "data": {
        "transforms2d": {
            "stats": {
                "chrome": {"20": "y x", "35": "y", "120": "y", "121": "y", "122": "y"},
                "firefox": {"3.6": "y x", "115": "y", "121": "y", "122": "y"},
                "ie": {"9": "y x", "11": "y"},
                "safari": {"6": "y x", "15.2-15.3": "y", "17.2": "y"},
            }
        },
        "user-select-none": {
            "stats": {
                "chrome": {"20": "y x", "35": "y x", "120": "y", "121": "y", "122": "y"},
                "firefox": {"3.6": "y x", "115": "y", "121": "y", "122": "y"},
                "ie": {"9": "n", "11": "y x"},
                "safari": {"6": "y x", "15.2-15.3": "y x", "17.2": "a x #1"},
            }
        },
    },
}


@pytest.fixture()
def dataset() -> CapabilityDataset:
    return CapabilityDataset(CANIUSE_DATA)
