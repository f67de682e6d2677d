"""Prefixer engine: picks a strategy and never lets prefixing fail a run."""

from __future__ import annotations

import logging

from chaincss.config import PrefixConfig, PrefixerMode
from chaincss.model.result import ProcessResult
from chaincss.prefixer.dataset import CapabilityDataset
from chaincss.prefixer.full import PostcssStrategy
from chaincss.prefixer.lightweight import LightweightStrategy
from chaincss.prefixer.strategy import PrefixStrategy, resolve_mode

logger = logging.getLogger(__name__)

_UNSET = object()


class Prefixer:
    """Adds vendor prefixes with the strategy resolved from a :class:`PrefixConfig`.

    ``full_available`` and ``dataset`` default to probing the environment
    (``postcss`` on ``PATH``, caniuse data on disk); tests pass them in.
    """

    def __init__(
        self,
        config: PrefixConfig | None = None,
        *,
        full_available: bool | None = None,
        dataset: CapabilityDataset | None | object = _UNSET,
    ) -> None:
        self._full_override = full_available
        self._dataset_override = dataset
        self.reconfigure(config or PrefixConfig())

    def reconfigure(self, config: PrefixConfig) -> None:
        """Apply a new configuration; browser targets are resolved afresh."""
        self.config = config
        if self._full_override is None:
            self.full_available = PostcssStrategy.available(config.postcss_command)
        else:
            self.full_available = self._full_override
        self.mode, warning = resolve_mode(config.mode, self.full_available)
        if warning:
            logger.warning(warning)
        self.strategy = self._build_strategy()
        logger.debug("Prefixer mode: %s (requested %s)", self.mode.value, config.mode.value)

    def _build_strategy(self) -> PrefixStrategy:
        if self.mode is PrefixerMode.FULL:
            return PostcssStrategy(
                self.config.browsers,
                source_map=self.config.source_map,
                inline=self.config.source_map_inline,
                command=self.config.postcss_command,
            )
        if self._dataset_override is _UNSET:
            dataset = CapabilityDataset.discover(self.config.caniuse_path)
        else:
            dataset = self._dataset_override  # type: ignore[assignment]
        return LightweightStrategy(self.config.browsers, dataset)

    def process(
        self, css: str, *, source: str = "input.css", target: str = "output.css"
    ) -> ProcessResult:
        """Prefix *css*. Strategy failures return the input unchanged, without a map."""
        if not self.config.enabled:
            return ProcessResult(css=css, map=None)
        try:
            result = self.strategy.process(css, source=source, target=target)
        except Exception as exc:
            logger.error("Prefixer error: %s", exc)
            return ProcessResult(css=css, map=None)
        if not self.config.source_map:
            return ProcessResult(css=result.css, map=None)
        return result
