"""Pipeline orchestrator: split, execute, validate, prefix, minify, write."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from chaincss.config import CompilerConfig
from chaincss.errors import InputError, MinificationError, OutputError
from chaincss.minify import MinifyOutput, assemble, minify, write_result
from chaincss.model.result import ProcessResult
from chaincss.prefixer.engine import Prefixer
from chaincss.script.context import BuilderContext
from chaincss.script.executor import compile_document
from chaincss.validation import validate_or_raise

logger = logging.getLogger(__name__)


class Pipeline:
    """Compiles .jcss documents to CSS files.

    Each run gets a fresh :class:`BuilderContext`; stages run strictly one
    after another, and nothing is written unless every fatal stage passes.
    """

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        prefixer: Prefixer | None = None,
        minifier: Callable[[str], MinifyOutput] = minify,
    ) -> None:
        self.config = config or CompilerConfig()
        self.prefixer = prefixer or Prefixer(self.config.prefix)
        self.minifier = minifier

    def read_document(self, input_file: str | Path) -> str:
        path = Path(input_file)
        ext = path.suffix.lower()
        if ext not in self.config.extensions:
            allowed = ", ".join(self.config.extensions)
            raise InputError(f"Invalid file extension: {ext}. Only {allowed} files are allowed.")
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise InputError(f"Input file not found: {path}", cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Cannot read {path}: {exc}", cause=exc) from exc

    def compile_document(self, source: str, *, base_dir: str | Path | None = None) -> str:
        """Expand the script blocks of *source* (no prefixing or minifying)."""
        context = BuilderContext(base_dir, extensions=self.config.extensions)
        return compile_document(source, context)

    def run(self, input_file: str | Path, output_file: str | Path) -> ProcessResult:
        """Compile *input_file* into *output_file* and return what was written."""
        input_path = Path(input_file)
        output_path = Path(output_file)
        logger.debug("Compiling %s -> %s", input_path, output_path)

        source = self.read_document(input_path)
        css = self.compile_document(source, base_dir=input_path.resolve().parent)
        for diagnostic in validate_or_raise(css):
            logger.info("%s: %s", input_path, diagnostic)

        prefixed = self.prefixer.process(css, source=str(input_path), target=str(output_path))
        inline = self.config.prefix.source_map_inline
        errors: list[str] = []

        def minifier(text: str) -> MinifyOutput:
            output = self.minifier(text)
            errors.extend(output.errors)
            return output

        result = assemble(prefixed, output_path, inline=inline, minifier=minifier)
        if result.css is None:
            raise MinificationError(errors)

        try:
            write_result(result, output_path, inline=inline)
        except OSError as exc:
            raise OutputError(f"Cannot write {output_path}: {exc}", cause=exc) from exc
        logger.info("Wrote %s (%d bytes)", output_path, len(result.css))
        return result


def process_file(
    input_file: str | Path,
    output_file: str | Path,
    config: CompilerConfig | None = None,
) -> ProcessResult:
    """Compile one file with a fresh :class:`Pipeline`."""
    return Pipeline(config).run(input_file, output_file)
