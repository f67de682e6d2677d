"""Serialize style blocks into CSS text."""

from __future__ import annotations

import re
from collections.abc import Mapping

from chaincss.errors import StyleCompileError
from chaincss.model.style import StyleBlock

__all__ = ["compile", "run", "to_kebab"]

_CASE_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


def to_kebab(name: str) -> str:
    """Convert a camelCase property identifier to its CSS name.

    ``backgroundColor`` -> ``background-color``, ``zIndex`` -> ``z-index``.
    """
    return _CASE_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def run(*blocks: StyleBlock) -> str:
    """Serialize *blocks* as tab-indented rules separated by a blank line."""
    parts: list[str] = []
    for block in blocks:
        if not isinstance(block, StyleBlock):
            raise StyleCompileError(f"run() expects style blocks, got {type(block).__name__}")
        if block.is_raw:
            raise StyleCompileError("run() cannot serialize a style block without selectors")
        parts.append(f"{block.selector_text} {{\n")
        for prop, value in block.properties.items():
            parts.append(f"\t{to_kebab(prop)}: {value};\n")
        parts.append("}\n\n")
    return "".join(parts).strip()


def compile(blocks: Mapping[str, StyleBlock]) -> str:  # noqa: A001
    """Serialize a name -> block mapping in key order.

    Blocks without selectors render with an empty selector.
    """
    if not isinstance(blocks, Mapping):
        raise StyleCompileError(
            f"compile() expects a mapping of style blocks, got {type(blocks).__name__}"
        )
    css = ""
    for name, block in blocks.items():
        if not isinstance(block, StyleBlock):
            raise StyleCompileError(
                f"compile() entry {name!r} is not a style block ({type(block).__name__})"
            )
        body = "".join(
            f"  {to_kebab(prop)}: {value};\n" for prop, value in block.properties.items()
        )
        css += f"{block.selector_text} {{\n{body}}}\n"
    return css
