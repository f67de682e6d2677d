"""Lark Transformer that converts a script parse tree into syntax nodes."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from chaincss.model.values import UNDEFINED
from chaincss.parser import nodes
from chaincss.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


def _unescape(raw: str) -> str:
    def replace(match: re.Match[str]) -> str:
        seq = match.group(1)
        if seq.startswith("u") and len(seq) == 5:
            return chr(int(seq[1:], 16))
        if seq == "\n":  # line continuation
            return ""
        return _ESCAPES.get(seq, seq)

    return _ESCAPE_RE.sub(replace, raw)


def _closing_brace(text: str, start: int) -> int | None:
    """Index of the ``}`` that closes a ``${`` whose body begins at *start*.

    Nested braces and quoted strings inside the expression are skipped.
    """
    depth = 1
    quote: str | None = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote is not None:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def _template_pieces(body: str) -> list[tuple[str, str | None]]:
    """Split a template body into ``(raw literal, expression source)`` pairs.

    The final pair has no expression. ``\\${`` stays literal.
    """
    pieces: list[tuple[str, str | None]] = []
    literal_start = 0
    i = 0
    while i < len(body):
        if body[i] == "\\":
            i += 2
            continue
        if body.startswith("${", i):
            end = _closing_brace(body, i + 2)
            if end is None:
                raise ParseError(f"Unterminated template expression {body[i:]!r}")
            pieces.append((body[literal_start:i], body[i + 2 : end]))
            literal_start = i = end + 1
            continue
        i += 1
    pieces.append((body[literal_start:], None))
    return pieces


def _line(node: object) -> int | None:
    return getattr(node, "line", None)


class ScriptTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into :mod:`chaincss.parser.nodes` objects."""

    # ---- literals ----

    def string(self, items: list[Token]) -> nodes.Literal:
        return nodes.Literal(_unescape(str(items[0])[1:-1]))

    def number(self, items: list[Token]) -> nodes.Literal:
        raw = str(items[0])
        if raw.isdigit():
            return nodes.Literal(int(raw))
        return nodes.Literal(float(raw))

    def template(self, items: list[Token]) -> nodes.Template:
        token = items[0]
        parts: list[str | nodes.Expr] = []
        try:
            pieces = _template_pieces(str(token)[1:-1])
        except ParseError as exc:
            raise ParseError(str(exc), line=token.line, column=token.column) from exc
        for raw, source in pieces:
            if raw:
                parts.append(_unescape(raw))
            if source is None:
                continue
            try:
                parts.append(parse_expression(source))
            except ParseError as exc:
                raise ParseError(
                    f"Invalid template expression ${{{source}}}: {exc}",
                    line=token.line,
                    column=token.column,
                ) from exc
        return nodes.Template(tuple(parts))

    def true(self, items: list[Token]) -> nodes.Literal:
        return nodes.Literal(True)

    def false(self, items: list[Token]) -> nodes.Literal:
        return nodes.Literal(False)

    def null(self, items: list[Token]) -> nodes.Literal:
        return nodes.Literal(None)

    def undefined(self, items: list[Token]) -> nodes.Literal:
        return nodes.Literal(UNDEFINED)

    def name(self, items: list[Token]) -> nodes.Name:
        return nodes.Name(str(items[0]), line=items[0].line)

    # ---- compound values ----

    def pair(self, items: list[object]) -> tuple[str, nodes.Expr]:
        return (str(items[0]), items[1])  # type: ignore[return-value]

    def quoted_pair(self, items: list[object]) -> tuple[str, nodes.Expr]:
        return (_unescape(str(items[0])[1:-1]), items[1])  # type: ignore[return-value]

    def shorthand_pair(self, items: list[Token]) -> tuple[str, nodes.Expr]:
        return (str(items[0]), nodes.Name(str(items[0]), line=items[0].line))

    def object(self, items: list[object]) -> nodes.ObjectLiteral:
        return nodes.ObjectLiteral(tuple(i for i in items if i is not None))  # type: ignore[misc]

    def array(self, items: list[object]) -> nodes.ArrayLiteral:
        return nodes.ArrayLiteral(tuple(i for i in items if i is not None))  # type: ignore[misc]

    def arguments(self, items: list[nodes.Expr]) -> tuple[nodes.Expr, ...]:
        return tuple(items)

    # ---- operators ----

    def member(self, items: list[object]) -> nodes.Member:
        attr = items[1]
        return nodes.Member(items[0], str(attr), line=_line(attr))  # type: ignore[arg-type]

    def index(self, items: list[object]) -> nodes.Index:
        return nodes.Index(items[0], items[1], line=_line(items[0]))  # type: ignore[arg-type]

    def call(self, items: list[object]) -> nodes.Call:
        func = items[0]
        args = items[1] if len(items) > 1 and items[1] is not None else ()
        return nodes.Call(func, args, line=_line(func))  # type: ignore[arg-type]

    def add(self, items: list[nodes.Expr]) -> nodes.Add:
        return nodes.Add(items[0], items[1])

    def neg(self, items: list[nodes.Expr]) -> nodes.Neg:
        return nodes.Neg(items[0])

    # ---- statements ----

    def declaration(self, items: list[object]) -> nodes.Declaration:
        return nodes.Declaration(str(items[0]), items[1])  # type: ignore[arg-type]

    def assignment(self, items: list[object]) -> nodes.Assignment:
        target = items[0]
        if not isinstance(target, (nodes.Name, nodes.Member)):
            raise ParseError("Invalid assignment target", line=_line(target))
        return nodes.Assignment(target, items[1], line=_line(target))  # type: ignore[arg-type]

    def expr_statement(self, items: list[nodes.Expr]) -> nodes.ExprStatement:
        return nodes.ExprStatement(items[0])

    def program(self, items: list[nodes.Statement]) -> nodes.Program:
        return nodes.Program(tuple(items))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start=["program", "expr"],
    )


def _parse(source: str, start: str) -> object:
    try:
        tree = _parser().parse(source, start=start)
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column) from e
    try:
        return ScriptTransformer().transform(tree)
    except ParseError:
        raise
    except Exception as e:
        # Transformer callbacks wrap their errors in VisitError.
        orig = getattr(e, "orig_exc", None)
        if isinstance(orig, ParseError):
            raise orig from e
        raise ParseError(str(e)) from e


def parse_script(source: str) -> nodes.Program:
    """Parse a script block into a :class:`~chaincss.parser.nodes.Program`."""
    return _parse(source, "program")  # type: ignore[return-value]


def parse_expression(source: str) -> nodes.Expr:
    """Parse a single expression (used for template interpolations)."""
    return _parse(source, "expr")  # type: ignore[return-value]
