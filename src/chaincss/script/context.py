"""Per-run builder context: the only names a script block can see."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from chaincss.builder import compiler
from chaincss.builder.builder import StyleBuilder
from chaincss.errors import DocumentImportError
from chaincss.model.style import StyleBlock

logger = logging.getLogger(__name__)


class BuilderContext:
    """Owns the builder for one pipeline run and publishes it to scripts.

    Scripts see ``chain`` (the builder), ``run``, ``compile`` and ``get``.
    A new context must be created for every run so no property bag state is
    shared between files or runs.
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        *,
        extensions: tuple[str, ...] = (".jcss",),
    ) -> None:
        self.builder = StyleBuilder()
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.extensions = extensions
        self._importing: list[Path] = []

    def globals(self) -> dict[str, Any]:
        return {
            "chain": self.builder,
            "run": self.run,
            "compile": self.compile,
            "get": self.get,
        }

    # --- script-visible helpers ------------------------------------------------

    def run(self, *blocks: StyleBlock) -> str:
        css = compiler.run(*blocks)
        self.builder.css_output = css
        return css

    def compile(self, blocks: Mapping[str, StyleBlock]) -> str:
        css = compiler.compile(blocks)
        self.builder.css_output = css
        return css

    def get(self, filename: Any) -> dict[str, Any]:
        """Load another document and return the names its scripts declare."""
        from chaincss.script.executor import execute_bindings
        from chaincss.script.splitter import split

        name = str(filename)
        if Path(name).suffix.lower() not in self.extensions:
            raise DocumentImportError(
                f"Import error: {name} must have {' or '.join(self.extensions)} extension"
            )
        base = self.base_dir if self.base_dir is not None else Path.cwd()
        resolved = (base / name).resolve()
        if not resolved.is_file():
            raise DocumentImportError(f"File not found: {name} (resolved to: {resolved})")
        if resolved in self._importing:
            chain = " -> ".join(str(p) for p in [*self._importing, resolved])
            raise DocumentImportError(f"Circular import: {chain}")

        logger.debug("Importing %s", resolved)
        saved_output = self.builder.css_output
        saved_base = self.base_dir
        self._importing.append(resolved)
        self.base_dir = resolved.parent
        try:
            namespace: dict[str, Any] = {}
            for segment in split(resolved.read_text(encoding="utf-8")):
                if segment.is_script:
                    namespace.update(execute_bindings(segment.text, self))
            return namespace
        finally:
            self._importing.pop()
            self.base_dir = saved_base
            self.builder.css_output = saved_output
