"""Browser capability dataset backed by a caniuse JSON data file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ENV_VAR = "CHAINCSS_CANIUSE_DATA"

DEFAULT_LOCATIONS = (
    "node_modules/caniuse-db/fulldata-json/data-2.0.json",
    "node_modules/caniuse-db/data.json",
)


class CapabilityDataset:
    """Per-feature browser support tables and browser agent metadata.

    ``data`` follows the caniuse-db layout::

        {"agents": {"chrome": {"prefix": "webkit",
                               "version_list": [{"version": "4",
                                                 "global_usage": 0.01,
                                                 "release_date": 1264377600}]}},
         "data": {"transforms2d": {"stats": {"chrome": {"4": "y x"}}}}}
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._agents: dict[str, Any] = data.get("agents", {})
        self._features: dict[str, Any] = data.get("data", {})

    @classmethod
    def load(cls, path: str | Path) -> CapabilityDataset:
        with open(path, encoding="utf-8") as fh:
            return cls(json.load(fh))

    @classmethod
    def discover(cls, path: str | Path | None = None) -> CapabilityDataset | None:
        """Load the dataset from *path*, ``$CHAINCSS_CANIUSE_DATA`` or the
        usual ``node_modules`` locations. Returns ``None`` if none exists."""
        candidates: list[Path] = []
        if path:
            candidates.append(Path(path))
        elif os.environ.get(ENV_VAR):
            candidates.append(Path(os.environ[ENV_VAR]))
        else:
            candidates.extend(Path.cwd() / loc for loc in DEFAULT_LOCATIONS)
        for candidate in candidates:
            if candidate.is_file():
                logger.debug("Loading caniuse data from %s", candidate)
                return cls.load(candidate)
        logger.debug("No caniuse data found (looked in %s)", ", ".join(map(str, candidates)))
        return None

    # --- features -------------------------------------------------------------

    def support(self, feature_id: str) -> dict[str, dict[str, str]] | None:
        """Browser id -> version -> support flags for *feature_id*."""
        feature = self._features.get(feature_id)
        if feature is None:
            return None
        return feature.get("stats", {})

    # --- agents ---------------------------------------------------------------

    @property
    def browsers(self) -> list[str]:
        return sorted(self._agents)

    def prefix(self, browser: str) -> str | None:
        return self._agents.get(browser, {}).get("prefix")

    def versions(self, browser: str) -> list[tuple[str, float, bool]]:
        """``(version, global usage, released)`` in release order."""
        agent = self._agents.get(browser)
        if agent is None:
            return []
        if "version_list" in agent:
            return [
                (
                    str(entry["version"]),
                    float(entry.get("global_usage") or 0.0),
                    entry.get("release_date", 0) is not None,
                )
                for entry in agent["version_list"]
            ]
        usage = agent.get("usage_global", {})
        return [
            (str(v), float(usage.get(v) or 0.0), True)
            for v in agent.get("versions", [])
            if v is not None
        ]

    def released_versions(self, browser: str) -> list[str]:
        return [v for v, _, released in self.versions(browser) if released]
