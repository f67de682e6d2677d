"""Prefixing strategy protocol and the pure mode resolver."""

from __future__ import annotations

from typing import Protocol

from chaincss.config import PrefixerMode
from chaincss.model.result import ProcessResult


class PrefixStrategy(Protocol):
    """Adds vendor-prefixed declarations to a stylesheet."""

    name: str

    def process(self, css: str, *, source: str, target: str) -> ProcessResult: ...


def resolve_mode(
    requested: PrefixerMode, full_available: bool
) -> tuple[PrefixerMode, str | None]:
    """Pick the strategy to use for *requested*.

    Returns the resolved mode (never ``AUTO``) and a warning message when a
    request had to be downgraded.

    Resolution order:
    1. ``lightweight`` is always honoured.
    2. ``full`` without the full engine falls back to ``lightweight``.
    3. ``full`` with the full engine is honoured.
    4. ``auto`` picks ``full`` when available, else ``lightweight``.
    """
    if requested is PrefixerMode.LIGHTWEIGHT:
        return PrefixerMode.LIGHTWEIGHT, None
    if requested is PrefixerMode.FULL:
        if not full_available:
            return PrefixerMode.LIGHTWEIGHT, (
                "Full prefixer mode requested but postcss/autoprefixer is not "
                "installed; falling back to lightweight mode. "
                "Install with: npm install -g postcss-cli autoprefixer"
            )
        return PrefixerMode.FULL, None
    if full_available:
        return PrefixerMode.FULL, None
    return PrefixerMode.LIGHTWEIGHT, None
