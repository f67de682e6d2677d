from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """CSS text and optional source map produced by a pipeline stage.

    ``css`` is ``None`` only when a stage failed fatally (minification).
    """

    css: str | None
    map: str | None = None
