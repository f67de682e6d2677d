"""Syntax tree for the builder-expression language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class Template:
    parts: tuple[Union[str, "Expr"], ...]


@dataclass(frozen=True)
class Name:
    id: str
    line: int | None = None


@dataclass(frozen=True)
class Member:
    obj: "Expr"
    attr: str
    line: int | None = None


@dataclass(frozen=True)
class Index:
    obj: "Expr"
    key: "Expr"
    line: int | None = None


@dataclass(frozen=True)
class Call:
    func: "Expr"
    args: tuple["Expr", ...]
    line: int | None = None


@dataclass(frozen=True)
class ObjectLiteral:
    pairs: tuple[tuple[str, "Expr"], ...]


@dataclass(frozen=True)
class ArrayLiteral:
    items: tuple["Expr", ...]


@dataclass(frozen=True)
class Add:
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class Neg:
    operand: "Expr"


Expr = Union[Literal, Template, Name, Member, Index, Call, ObjectLiteral, ArrayLiteral, Add, Neg]


@dataclass(frozen=True)
class Declaration:
    name: str
    value: Expr


@dataclass(frozen=True)
class Assignment:
    target: Expr  # Name or Member
    value: Expr
    line: int | None = None


@dataclass(frozen=True)
class ExprStatement:
    expr: Expr


Statement = Union[Declaration, Assignment, ExprStatement]


@dataclass(frozen=True)
class Program:
    statements: tuple[Statement, ...]
