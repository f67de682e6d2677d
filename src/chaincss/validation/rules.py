"""Syntactic sanity checks applied to assembled CSS before prefixing."""

from __future__ import annotations

from chaincss.model.diagnostic import Diagnostic, Severity


def check_brace_balance(css: str) -> list[Diagnostic]:
    """Opening and closing braces must occur equally often. ERROR."""
    opening = css.count("{")
    closing = css.count("}")
    if opening == closing:
        return []
    return [
        Diagnostic(
            rule="check_brace_balance",
            severity=Severity.ERROR,
            message=f"Unbalanced braces: {opening} '{{' vs {closing} '}}'.",
            fix="Close every rule body opened in literal CSS or emitted by a script block.",
        )
    ]


def check_not_empty(css: str) -> list[Diagnostic]:
    """An empty stylesheet is legal but usually a mistake. INFO."""
    if css.strip():
        return []
    return [
        Diagnostic(
            rule="check_not_empty",
            severity=Severity.INFO,
            message="Compiled stylesheet is empty.",
        )
    ]


ALL_RULES = [
    check_brace_balance,
    check_not_empty,
]
