"""Minify CSS with rcssmin and attach source-map annotations.

rcssmin only strips whitespace, comments and redundant semicolons, so every
rule survives minification. Structural problems tinycss2 finds while
tokenizing (stray closing brackets, a selector with no block) are reported
as minifier errors and stop the run.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import rcssmin
import tinycss2

from chaincss.model.result import ProcessResult

logger = logging.getLogger(__name__)

_INLINE_MAP_RE = re.compile(r"/\*# sourceMappingURL=data:[^*]*\*/")


@dataclass(frozen=True)
class MinifyOutput:
    styles: str
    errors: list[str] = field(default_factory=list)


def _parse_errors(nodes: Iterable[Any]) -> Iterator[Any]:
    for node in nodes:
        if node.type == "error":
            yield node
            continue
        for attr in ("prelude", "content", "arguments"):
            children = getattr(node, attr, None)
            if isinstance(children, list):
                yield from _parse_errors(children)


def check_structure(css: str) -> list[str]:
    """Describe every tokenizer or rule-level error in *css*."""
    rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    return [
        f"line {error.source_line}, column {error.source_column}: {error.message}"
        for error in _parse_errors(rules)
    ]


def minify(css: str) -> MinifyOutput:
    """Minify *css*; structural errors are returned, not raised."""
    errors = check_structure(css)
    if errors:
        return MinifyOutput(styles="", errors=errors)
    return MinifyOutput(styles=rcssmin.cssmin(css).strip())


def map_path_for(output_path: str | Path) -> Path:
    path = Path(output_path)
    return path.with_name(path.name + ".map")


def assemble(
    prefixed: ProcessResult,
    output_path: str | Path,
    *,
    inline: bool = False,
    minifier: Callable[[str], MinifyOutput] = minify,
) -> ProcessResult:
    """Minify prefixed CSS and annotate it with its source map.

    Returns ``ProcessResult(None, None)`` when the minifier reports errors.
    """
    css = prefixed.css or ""
    inline_map = _INLINE_MAP_RE.search(css) if inline else None

    output = minifier(css)
    if output.errors:
        for error in output.errors:
            logger.error("CSS minification error: %s", error)
        return ProcessResult(css=None, map=None)

    styles = output.styles
    if inline_map is not None:
        styles += "\n" + inline_map.group(0)
    elif prefixed.map and not inline:
        styles += f"\n/*# sourceMappingURL={map_path_for(output_path).name} */"
    return ProcessResult(css=styles, map=prefixed.map)


def write_result(result: ProcessResult, output_path: str | Path, *, inline: bool = False) -> None:
    """Write the CSS and, for external maps, the sibling ``.map`` file."""
    if result.css is None:
        raise ValueError("cannot write a failed result")
    path = Path(output_path)
    path.write_text(result.css, encoding="utf-8")
    if result.map and not inline:
        map_path_for(path).write_text(result.map, encoding="utf-8")
