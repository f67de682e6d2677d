"""Tests for the CSS sanity rules and the validator."""
from __future__ import annotations

import pytest

from chaincss.model.diagnostic import Diagnostic, Severity
from chaincss.validation import (
    SyntaxValidationError,
    diagnose,
    validate,
    validate_or_raise,
)
from chaincss.validation.rules import check_brace_balance, check_not_empty


# ---------------------------------------------------------------------------
# check_brace_balance
# ---------------------------------------------------------------------------


class TestCheckBraceBalance:
    def test_balanced(self):
        assert check_brace_balance(".a { color: red; } .b {}") == []

    def test_unbalanced(self):
        diags = check_brace_balance(".a { .b { color: red; }")
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert "2 '{' vs 1 '}'" in diags[0].message

    def test_counts_braces_anywhere(self):
        assert check_brace_balance("}{") == []


# ---------------------------------------------------------------------------
# check_not_empty
# ---------------------------------------------------------------------------


class TestCheckNotEmpty:
    def test_empty_is_info(self):
        diags = check_not_empty("  \n")
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO

    def test_content(self):
        assert check_not_empty("a{}") == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_validate(self):
        assert validate(".a { color: red; }")
        assert not validate(".a { color: red;")

    def test_empty_css_is_valid(self):
        assert validate("")

    def test_validate_or_raise_returns_non_errors(self):
        diags = validate_or_raise("")
        assert [d.rule for d in diags] == ["check_not_empty"]

    def test_validate_or_raise(self):
        with pytest.raises(SyntaxValidationError) as info:
            validate_or_raise(".a { .b { }")
        assert "CSS validation failed with 1 error(s)" in str(info.value)
        assert info.value.diagnostics[0].rule == "check_brace_balance"

    def test_extra_rules(self):
        def no_important(css: str) -> list[Diagnostic]:
            if "!important" not in css:
                return []
            return [Diagnostic(rule="no_important", severity=Severity.WARNING, message="!important")]

        diags = diagnose(".a { color: red !important; }", extra_rules=[no_important])
        assert [d.rule for d in diags] == ["no_important"]
        assert str(diags[0]) == "WARNING [no_important]: !important"
