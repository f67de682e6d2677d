"""CSS validator: runs the sanity rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from chaincss.errors import SyntaxValidationError
from chaincss.model.diagnostic import Diagnostic
from chaincss.validation.rules import ALL_RULES

RuleFunc = Callable[[str], list[Diagnostic]]


def diagnose(css: str, extra_rules: list[RuleFunc] | None = None) -> list[Diagnostic]:
    """Run all rules against *css* and return every diagnostic."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(css))
    return diagnostics


def validate(css: str) -> bool:
    """Return ``False`` when *css* has any ERROR diagnostic."""
    return not any(d.is_error for d in diagnose(css))


def validate_or_raise(
    css: str, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`SyntaxValidationError` on any ERROR.

    Returns the non-error diagnostics when no errors are found.
    """
    diagnostics = diagnose(css, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise SyntaxValidationError(errors)
    return diagnostics
