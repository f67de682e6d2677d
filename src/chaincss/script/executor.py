"""Run script segments against a builder context and assemble documents."""

from __future__ import annotations

import logging
from typing import Any

from chaincss.errors import ScriptExecutionError
from chaincss.model.values import UNDEFINED, is_object, stringify
from chaincss.parser import ParseError, parse_script
from chaincss.script.context import BuilderContext
from chaincss.script.interpreter import Interpreter
from chaincss.script.splitter import split

logger = logging.getLogger(__name__)


def _interpret(script_text: str, context: BuilderContext) -> Interpreter:
    program = parse_script(script_text.strip())
    interpreter = Interpreter(context.globals())
    interpreter.run(program)
    return interpreter


def execute_bindings(script_text: str, context: BuilderContext) -> dict[str, Any]:
    """Run *script_text* and return the names it declared."""
    return _interpret(script_text, context).bindings


def execute(
    script_text: str, context: BuilderContext, *, segment_index: int | None = None
) -> str | None:
    """Run one script segment and return the CSS text it emitted.

    The emitted text is whatever ``run()``/``compile()`` (or an assignment to
    ``chain.cssOutput``) left on the builder. Object results are dropped.
    """
    context.builder.css_output = None
    where = f"script block #{segment_index}" if segment_index is not None else "script block"
    try:
        _interpret(script_text, context)
    except ParseError as exc:
        at = f" at {exc.position}" if exc.position else ""
        raise ScriptExecutionError(
            f"Syntax error in {where}{at}: {exc}",
            segment_index=segment_index,
            line=exc.line,
            cause=exc,
        ) from exc
    except Exception as exc:
        raise ScriptExecutionError(
            f"Error in {where}: {exc}",
            segment_index=segment_index,
            line=getattr(exc, "line", None),
            cause=exc,
        ) from exc

    output = context.builder.css_output
    if output is UNDEFINED or output is None:
        return None
    if is_object(output):
        logger.warning(
            "Discarding %s result of %s; only text is emitted",
            type(output).__name__,
            where,
        )
        return None
    return stringify(output)


def compile_document(source: str, context: BuilderContext | None = None) -> str:
    """Expand every script segment of *source* and return the trimmed CSS."""
    if context is None:
        context = BuilderContext()
    pieces: list[str] = []
    # Script blocks are numbered from 1 in messages.
    for segment in split(source):
        if not segment.is_script:
            pieces.append(segment.text)
            continue
        fragment = execute(segment.text, context, segment_index=(segment.index + 1) // 2)
        logger.debug(
            "Script block #%d emitted %d characters",
            (segment.index + 1) // 2,
            len(fragment or ""),
        )
        if fragment is not None:
            pieces.append(fragment)
    return "".join(pieces).strip()
