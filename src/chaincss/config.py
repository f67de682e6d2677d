from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrefixerMode(Enum):
    """Requested vendor-prefixing strategy."""

    AUTO = "auto"
    LIGHTWEIGHT = "lightweight"
    FULL = "full"


DEFAULT_BROWSERS: tuple[str, ...] = ("> 0.5%", "last 2 versions", "not dead")


@dataclass(frozen=True)
class PrefixConfig:
    enabled: bool = True
    browsers: tuple[str, ...] = DEFAULT_BROWSERS
    mode: PrefixerMode = PrefixerMode.AUTO
    source_map: bool = True
    source_map_inline: bool = False
    caniuse_path: str | None = None  # falls back to $CHAINCSS_CANIUSE_DATA
    postcss_command: str = "postcss"


@dataclass(frozen=True)
class CompilerConfig:
    prefix: PrefixConfig = field(default_factory=PrefixConfig)
    extensions: tuple[str, ...] = (".jcss",)
    watch_interval: float = 0.5
