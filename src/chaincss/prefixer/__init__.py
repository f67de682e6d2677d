"""Vendor prefixing: mode resolution, strategies and browser data."""

from chaincss.prefixer.dataset import CapabilityDataset
from chaincss.prefixer.engine import Prefixer
from chaincss.prefixer.full import PostcssStrategy
from chaincss.prefixer.lightweight import LightweightStrategy
from chaincss.prefixer.strategy import PrefixStrategy, resolve_mode
from chaincss.prefixer.targets import resolve_targets

__all__ = [
    "CapabilityDataset",
    "LightweightStrategy",
    "PostcssStrategy",
    "PrefixStrategy",
    "Prefixer",
    "resolve_mode",
    "resolve_targets",
]
