"""Interpreter for the builder-expression language.

Scripts only see the globals handed to the interpreter. Member access is
limited to dictionary keys, list/string ``length`` and indexing, style block
fields, and the members host objects publish via ``script_member``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from chaincss.model.style import StyleBlock
from chaincss.model.values import UNDEFINED, stringify
from chaincss.parser import nodes


class ScriptRuntimeError(Exception):
    """Raised when a parsed script fails while being evaluated."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


@runtime_checkable
class ScriptObject(Protocol):
    """A host object that publishes a narrow set of members to scripts."""

    def script_member(self, name: str) -> Any: ...

    def set_script_member(self, name: str, value: Any) -> None: ...


class Interpreter:
    """Evaluates a :class:`~chaincss.parser.nodes.Program` in its own scope.

    ``globals`` are read-only; ``bindings`` collects the names the script
    declares.
    """

    def __init__(self, globals: dict[str, Any]) -> None:
        self._globals = dict(globals)
        self.bindings: dict[str, Any] = {}

    def run(self, program: nodes.Program) -> None:
        for statement in program.statements:
            self._exec(statement)

    # --- statements -----------------------------------------------------------

    def _exec(self, statement: nodes.Statement) -> None:
        if isinstance(statement, nodes.Declaration):
            if statement.name in self._globals:
                raise ScriptRuntimeError(f"cannot redeclare builtin {statement.name!r}")
            self.bindings[statement.name] = self.evaluate(statement.value)
        elif isinstance(statement, nodes.Assignment):
            self._assign(statement)
        else:
            self.evaluate(statement.expr)

    def _assign(self, statement: nodes.Assignment) -> None:
        target = statement.target
        value = self.evaluate(statement.value)
        if isinstance(target, nodes.Name):
            if target.id not in self.bindings:
                raise ScriptRuntimeError(
                    f"assignment to undeclared name {target.id!r}", statement.line
                )
            self.bindings[target.id] = value
            return
        if not isinstance(target, nodes.Member):
            raise ScriptRuntimeError(
                f"cannot assign to {type(target).__name__}", statement.line
            )
        obj = self.evaluate(target.obj)
        if isinstance(obj, dict):
            obj[target.attr] = value
        elif isinstance(obj, ScriptObject):
            try:
                obj.set_script_member(target.attr, value)
            except AttributeError as exc:
                raise ScriptRuntimeError(str(exc), statement.line) from exc
        else:
            raise ScriptRuntimeError(
                f"cannot set {target.attr!r} on {_type_name(obj)}", statement.line
            )

    # --- expressions ----------------------------------------------------------

    def evaluate(self, expr: nodes.Expr) -> Any:
        if isinstance(expr, nodes.Literal):
            return expr.value
        if isinstance(expr, nodes.Name):
            return self._lookup(expr)
        if isinstance(expr, nodes.Member):
            return self._member(self.evaluate(expr.obj), expr.attr, expr.line)
        if isinstance(expr, nodes.Index):
            return self._index(self.evaluate(expr.obj), self.evaluate(expr.key), expr.line)
        if isinstance(expr, nodes.Call):
            return self._call(expr)
        if isinstance(expr, nodes.Template):
            return "".join(
                part if isinstance(part, str) else stringify(self.evaluate(part))
                for part in expr.parts
            )
        if isinstance(expr, nodes.ObjectLiteral):
            return {key: self.evaluate(value) for key, value in expr.pairs}
        if isinstance(expr, nodes.ArrayLiteral):
            return [self.evaluate(item) for item in expr.items]
        if isinstance(expr, nodes.Add):
            return _add(self.evaluate(expr.left), self.evaluate(expr.right))
        if isinstance(expr, nodes.Neg):
            operand = self.evaluate(expr.operand)
            if isinstance(operand, bool) or not isinstance(operand, (int, float)):
                raise ScriptRuntimeError(f"cannot negate {_type_name(operand)}")
            return -operand
        raise ScriptRuntimeError(f"unsupported expression {type(expr).__name__}")

    def _lookup(self, name: nodes.Name) -> Any:
        if name.id in self.bindings:
            return self.bindings[name.id]
        if name.id in self._globals:
            return self._globals[name.id]
        raise ScriptRuntimeError(f"{name.id} is not defined", name.line)

    def _member(self, obj: Any, attr: str, line: int | None) -> Any:
        if isinstance(obj, dict):
            return obj.get(attr, UNDEFINED)
        if isinstance(obj, StyleBlock):
            if attr == "selectors":
                return list(obj.selectors)
            return obj.properties.get(attr, UNDEFINED)
        if isinstance(obj, (list, str)):
            if attr == "length":
                return len(obj)
            return UNDEFINED
        if isinstance(obj, ScriptObject):
            try:
                return obj.script_member(attr)
            except AttributeError as exc:
                raise ScriptRuntimeError(str(exc), line) from exc
        if obj is None or obj is UNDEFINED:
            raise ScriptRuntimeError(f"cannot read {attr!r} of {stringify(obj)}", line)
        return UNDEFINED

    def _index(self, obj: Any, key: Any, line: int | None) -> Any:
        if isinstance(obj, (list, str)) and isinstance(key, (int, float)) and not isinstance(key, bool):
            position = int(key)
            if position == key and 0 <= position < len(obj):
                return obj[position]
            return UNDEFINED
        return self._member(obj, stringify(key), line)

    def _call(self, expr: nodes.Call) -> Any:
        func = self.evaluate(expr.func)
        if not callable(func) or isinstance(func, (type, ScriptObject)):
            raise ScriptRuntimeError(f"{_describe(expr.func)} is not a function", expr.line)
        args = [self.evaluate(arg) for arg in expr.args]
        return func(*args)


def _add(left: Any, right: Any) -> Any:
    numeric = (int, float)
    if (
        isinstance(left, numeric)
        and isinstance(right, numeric)
        and not isinstance(left, bool)
        and not isinstance(right, bool)
    ):
        return left + right
    return stringify(left) + stringify(right)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    return type(value).__name__


def _describe(expr: nodes.Expr) -> str:
    if isinstance(expr, nodes.Name):
        return expr.id
    if isinstance(expr, nodes.Member):
        return f"{_describe(expr.obj)}.{expr.attr}"
    return "expression"
